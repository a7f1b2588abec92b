"""
Player Value Model.

Estimates a player's general worth to a typical team, on the same scale
as the overall and potential ratings (roughly 0-100). It combines:
- Recent performance (PER from the last one or two seasons)
- Current ratings, to fill in for missing playing time
- Potential, weighted by age (young players are mostly upside)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from swish.core.models.player import PlayerValues
from swish.core.ratings.base import fuzz_rating

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings
    from swish.core.models.player import Player
    from swish.core.models.stats import PlayerStatsRow


# Minutes needed before stats fully replace ratings
FULL_SEASON_MINUTES = 2000

# PER -> ratings scale
PER_SCALE = 3.75

# Share of current ratings always mixed into the stats estimate
RATINGS_SHARE = 0.1

# Weight on potential (vs current) by age
POTENTIAL_WEIGHT_BY_AGE: dict[int, float] = {
    19: 0.8,  # and younger
    20: 0.7,
    21: 0.5,
    22: 0.3,
    23: 0.15,
    24: 0.1,
    25: 0.05,
}

# Decline applied to current value for older players
AGE_DECAY: dict[int, float] = {
    29: 0.975,
    30: 0.95,
    31: 0.9,
    32: 0.85,
    33: 0.8,
}
OLD_AGE_DECAY = 0.7  # 34 and up

PRIME_END_AGE = 29  # Below this, outperforming potential is taken at face value


@dataclass(frozen=True)
class ValueOptions:
    """
    Switches for value().

    no_pot: ignore potential (roster ordering, in-game decisions)
    fuzz: use fuzzed ratings (what a scout would see)
    with_contract: accepted for contract-aware valuation; currently
        computes the same as the default path
    """

    no_pot: bool = False
    fuzz: bool = False
    with_contract: bool = False


def age_for_value(player: "Player", settings: "LeagueSettings") -> int:
    """Age used for valuation. Draft prospects are valued at draft age."""
    if player.draft.year > settings.season:
        return player.draft.year - player.born.year
    return settings.season - player.born.year


def current_from_stats(ovr: float, stats: Sequence["PlayerStatsRow"]) -> float:
    """
    Estimate current ability from recent stats, backfilled by ratings.

    Args:
        ovr: Overall rating (possibly fuzzed)
        stats: Regular season rows, oldest first

    Returns:
        Current value estimate
    """
    if not stats:
        return ovr

    if len(stats) == 1 or stats[0].minutes >= FULL_SEASON_MINUTES:
        # One season of stats
        ps1 = stats[-1]
        current = PER_SCALE * ps1.per
        if ps1.minutes < FULL_SEASON_MINUTES:
            frac = ps1.minutes / FULL_SEASON_MINUTES
            current = current * frac + ovr * (1 - frac)
    else:
        # Two most recent seasons
        ps1 = stats[-1]
        ps2 = stats[-2]
        minutes = ps1.minutes + ps2.minutes
        current = ovr
        if minutes > 0:
            current = PER_SCALE * (ps1.per * ps1.minutes + ps2.per * ps2.minutes) / minutes
        if minutes < FULL_SEASON_MINUTES:
            frac = minutes / FULL_SEASON_MINUTES
            current = current * frac + ovr * (1 - frac)

    return RATINGS_SHARE * ovr + (1 - RATINGS_SHARE) * current


def blend_potential(current: float, potential: float, age: int) -> float:
    """Combine current value and potential according to age."""
    # If performance is already beating potential, just use that
    if current >= potential and age < PRIME_END_AGE:
        return current

    if age <= 19:
        weight = POTENTIAL_WEIGHT_BY_AGE[19]
        return weight * potential + (1 - weight) * current
    if age in POTENTIAL_WEIGHT_BY_AGE:
        weight = POTENTIAL_WEIGHT_BY_AGE[age]
        return weight * potential + (1 - weight) * current
    if age < PRIME_END_AGE:
        return current
    return AGE_DECAY.get(age, OLD_AGE_DECAY) * current


def value(
    player: "Player",
    stats: Sequence["PlayerStatsRow"],
    settings: "LeagueSettings",
    options: Optional[ValueOptions] = None,
) -> float:
    """
    Calculate a player's value.

    Args:
        player: Player with at least one ratings row
        stats: Regular season stats rows, oldest first (only the last two are used)
        settings: League settings
        options: Value switches (defaults to potential-aware, unfuzzed)

    Returns:
        Value, usually between 40 and 100
    """
    options = options or ValueOptions()
    latest = player.latest_ratings

    if options.fuzz:
        ovr = fuzz_rating(latest.ovr, latest.fuzz, settings)
        pot = fuzz_rating(latest.pot, latest.fuzz, settings)
    else:
        ovr = latest.ovr
        pot = latest.pot

    current = current_from_stats(ovr, stats)

    if options.no_pot:
        return current

    return blend_potential(current, pot, age_for_value(player, settings))


def regular_season_history(stats: Sequence["PlayerStatsRow"]) -> list["PlayerStatsRow"]:
    """Regular season rows sorted oldest first."""
    return sorted((ps for ps in stats if not ps.playoffs), key=lambda ps: ps.season)


def compute_values(
    player: "Player",
    stats: Sequence["PlayerStatsRow"],
    settings: "LeagueSettings",
) -> PlayerValues:
    """Compute all cached value variants for a player."""
    history = regular_season_history(stats)
    return PlayerValues(
        value=value(player, history, settings),
        no_pot=value(player, history, settings, ValueOptions(no_pot=True)),
        fuzz=value(player, history, settings, ValueOptions(fuzz=True)),
        no_pot_fuzz=value(player, history, settings, ValueOptions(no_pot=True, fuzz=True)),
        with_contract=value(player, history, settings, ValueOptions(with_contract=True)),
    )


def update_values(
    player: "Player",
    stats: Sequence["PlayerStatsRow"],
    settings: "LeagueSettings",
) -> "Player":
    """Return a copy of the player with refreshed value estimates."""
    updated = player.copy()
    updated.values = compute_values(player, stats, settings)
    return updated

