"""
Contract generation and signing.

Contract demands are a linear function of player value, bounded by the
league's min/max contract. Signing a contract is the only way the salary
ledger grows.
"""

import logging
import random
from dataclasses import replace
from typing import TYPE_CHECKING

from swish.core.league.settings import CONTRACT_ROUNDING
from swish.core.models.player import Contract, SalaryEntry
from swish.core.ratings.base import bound, round_half_up

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings
    from swish.core.models.player import Player

logger = logging.getLogger(__name__)

# Age at season start up to which a randomized contract is treated as a rookie deal
ROOKIE_MAX_AGE = 21


def contract_years(ovr: int, pot: int) -> int:
    """
    Contract length a player asks for.

    High-potential players want short deals so they can cash in later.
    Low-potential players can only get short deals.
    """
    years = 5 - round_half_up((pot - ovr) / 4.0)
    if years < 2:
        years = 2

    if pot < 40:
        years = 1
    elif pot < 50:
        years = 2
    elif pot < 60:
        years = 3
    return years


def gen_contract(
    player: "Player",
    settings: "LeagueSettings",
    rng: random.Random,
    randomize_exp: bool = False,
    randomize_amount: bool = True,
    no_limit: bool = False,
) -> Contract:
    """
    Generate a contract demand for a player.

    Args:
        player: Player with at least one ratings row and a computed value
        settings: League settings
        rng: Random source
        randomize_exp: Assume some years of the deal have already elapsed
            (used when populating a new league)
        randomize_amount: Apply a gaussian multiplier to the amount
        no_limit: Skip the min/max contract clamp (floor at 0 only)

    Returns:
        Contract with amount in thousands and expiration season
    """
    ratings = player.latest_ratings

    amount = (
        ((player.values.value - 1) / 100 - 0.45) * 3.3 * settings.contract_range
        + settings.min_contract
    )
    if randomize_amount:
        amount *= bound(rng.gauss(1, 0.1), 0, 2)

    years = contract_years(ratings.ovr, ratings.pot)

    if randomize_exp:
        years = rng.randint(1, years)

        # Make rookie contracts more reasonable
        if settings.season - player.born.year <= ROOKIE_MAX_AGE:
            amount /= 3

    exp = settings.season + years - 1

    if not no_limit:
        if amount < settings.min_contract * 1.1:
            amount = settings.min_contract
        elif amount > settings.max_contract:
            amount = settings.max_contract
    elif amount < 0:
        amount = 0

    amount = CONTRACT_ROUNDING * round_half_up(amount / CONTRACT_ROUNDING)

    logger.debug("Generated contract for %s: %s through %s", player.full_name, amount, exp)
    return Contract(amount=int(amount), exp=exp)


def contract_start_season(settings: "LeagueSettings") -> int:
    """First season paid by a contract signed now."""
    if settings.past_trade_deadline:
        return settings.season + 1
    return settings.season


def set_contract(
    player: "Player",
    contract: Contract,
    signed: bool,
    settings: "LeagueSettings",
) -> "Player":
    """
    Store a contract on a copy of the player.

    Args:
        player: The player
        contract: Contract terms
        signed: True for an official signing (writes the salary ledger),
            False for terms that are only part of a negotiation
        settings: League settings

    Returns:
        Updated player
    """
    updated = player.copy()
    updated.contract = contract

    if signed:
        for season in range(contract_start_season(settings), contract.exp + 1):
            updated.salaries.append(SalaryEntry(season=season, amount=contract.amount))

    return updated


def extend_contract(contract: Contract, years: int = 1) -> Contract:
    """Push a contract's expiration back."""
    return replace(contract, exp=contract.exp + years)


def contract_seasons_remaining(
    exp: int,
    num_games_remaining: int,
    settings: "LeagueSettings",
) -> float:
    """
    Seasons left on a contract, counting the unplayed part of this season.

    Args:
        exp: Contract expiration season
        num_games_remaining: Games left in the current season
        settings: League settings

    Returns:
        Seasons remaining (fractional mid-season)
    """
    frac = num_games_remaining / settings.num_games
    if frac > 1:
        # Only happens if num_games changed mid-season
        frac = 1
    return exp - settings.season + frac
