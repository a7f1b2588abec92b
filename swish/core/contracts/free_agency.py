"""
Free Agent Moods.

Each team gets a base mood (how unattractive it is to free agents this
season), and each free agent gets a per-team mood on top of that. Lower
is better: a mood near 0 means the player is eager to sign.
"""

import logging
import random
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

from swish.core.contracts.contract import extend_contract, gen_contract, set_contract
from swish.core.enums import Phase, TeamSlot
from swish.core.ratings.base import bound

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings
    from swish.core.models.player import Player
    from swish.core.models.team import TeamSeason

logger = logging.getLogger(__name__)

# Mood for a team that just won the title
CHAMPION_MOOD = -0.25
CHAMPION_PROBABILITY = 0.99

# Below this ovr+pot, a player can't afford to be choosy
CHOOSY_THRESHOLD = 80

# Per-player noise added to base moods
RESIGN_NOISE = (-1.0, 0.5)
OPEN_MARKET_NOISE = (-1.0, 1.5)


def gen_base_moods(
    team_seasons: Sequence["TeamSeason"],
    settings: "LeagueSettings",
    rng: random.Random,
) -> list[float]:
    """
    Calculate the base free agent mood toward each team.

    Args:
        team_seasons: This season's team rows, ordered by tid
        settings: League settings
        rng: Random source

    Returns:
        One base mood per team, in [0, 1.2] (or CHAMPION_MOOD)
    """
    moods = []
    for ts in team_seasons:
        # Champions basically never get refused
        if ts.playoff_rounds_won == settings.num_playoff_rounds and rng.random() < CHAMPION_PROBABILITY:
            moods.append(CHAMPION_MOOD)
            continue

        mood = 0.5 * (1 - ts.hype)
        mood += 0.1 * (ts.facilities_rank - 1) / (settings.num_teams - 1)
        mood += 0.2 * (1 - ts.pop / 10)
        mood += rng.uniform(-0.2, 0.4)
        moods.append(bound(mood, 0, 1.2))

    return moods


def player_moods(
    player: "Player",
    base_moods: Sequence[float],
    phase: Phase,
    rng: random.Random,
) -> list[float]:
    """
    Calculate a free agent's mood toward each team.

    Re-signing phase noise is biased toward staying put.
    """
    ratings = player.latest_ratings
    if ratings.ovr + ratings.pot < CHOOSY_THRESHOLD:
        return [0.0 for _ in base_moods]

    lo, hi = RESIGN_NOISE if phase == Phase.RESIGN_PLAYERS else OPEN_MARKET_NOISE
    return [bound(mood + rng.uniform(lo, hi), 0, 1000) for mood in base_moods]


def add_to_free_agents(
    player: "Player",
    base_moods: Sequence[float],
    settings: "LeagueSettings",
    rng: random.Random,
    phase: Optional[Phase] = None,
) -> "Player":
    """
    Admit a player to free agency.

    This should be the only way players become free agents, since it also
    sets their contract demand and moods.

    Args:
        player: The player (value should be up to date)
        base_moods: Output of gen_base_moods
        settings: League settings
        rng: Random source
        phase: Phase to treat the move under (defaults to the current phase)

    Returns:
        Updated player
    """
    phase = settings.phase if phase is None else phase

    updated = set_contract(player, gen_contract(player, settings, rng), False, settings)
    updated.free_agent_mood = player_moods(updated, base_moods, phase, rng)

    # After the deadline, a deal for just the rest of this season makes no sense
    if phase > Phase.AFTER_TRADE_DEADLINE:
        updated.contract = extend_contract(updated.contract)

    updated.tid = int(TeamSlot.FREE_AGENT)
    updated.pt_modifier = 1.0

    logger.debug(
        "%s entered free agency asking %s through %s",
        updated.full_name,
        updated.contract.amount,
        updated.contract.exp,
    )
    return updated


class MoodTier(Enum):
    """How a free agent feels about a team."""

    EAGER = "Eager to reach an agreement."
    WILLING = "Willing to sign for the right price."
    ANNOYED = "Annoyed at you."
    INSULTED = "Insulted by your presence."


def describe_mood(mood: float) -> MoodTier:
    """Bucket a mood value for display."""
    if mood < 0.25:
        return MoodTier.EAGER
    if mood < 0.5:
        return MoodTier.WILLING
    if mood < 0.75:
        return MoodTier.ANNOYED
    return MoodTier.INSULTED
