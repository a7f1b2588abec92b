"""
Scouting fuzz.

Fuzz is per-player noise added to displayed ratings. Teams that spend more
on scouting see less of it. It is smoothed from season to season rather
than redrawn.
"""

import random
from typing import TYPE_CHECKING

from swish.core.ratings.base import bound

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings


def gen_fuzz(scouting_rank: int, settings: "LeagueSettings", rng: random.Random) -> float:
    """
    Generate fuzz for a ratings row.

    Args:
        scouting_rank: 1 (best scouting spending) to num_teams (worst)
        settings: League settings
        rng: Random source

    Returns:
        Fuzz value, within +/-2 (best scouting) to +/-10 (worst)
    """
    frac = (scouting_rank - 1) / (settings.num_teams - 1)
    cutoff = 2 + 8 * frac  # Max error is from 2 to 10
    sigma = 1 + 2 * frac  # Standard deviation is from 1 to 3
    return bound(rng.gauss(0, sigma), -cutoff, cutoff)


def next_fuzz(
    previous: float,
    scouting_rank: int,
    settings: "LeagueSettings",
    rng: random.Random,
) -> float:
    """Average the previous season's fuzz with a fresh draw."""
    return (previous + gen_fuzz(scouting_rank, settings, rng)) / 2
