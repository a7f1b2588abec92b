"""
Injuries.

Injury type is drawn from a fixed frequency table. Duration scales with
the type's typical length and with how much the team spends on health:
rank 1 (most spending) heals fastest.
"""

import logging
import random
from typing import TYPE_CHECKING

from swish.core.models.player import Injury
from swish.core.ratings.base import round_half_up
from swish.core.weighted import WeightedTable

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings

logger = logging.getLogger(__name__)


# (type, relative frequency, typical games missed)
INJURY_DATA: tuple[tuple[str, int, int], ...] = (
    ("Sprained Ankle", 2160, 4),
    ("Bruised Knee", 1030, 3),
    ("Back Spasms", 930, 3),
    ("Sore Knee", 640, 4),
    ("Hamstring Strain", 540, 6),
    ("Bruised Hip", 480, 3),
    ("Sprained Knee", 450, 6),
    ("Groin Strain", 430, 6),
    ("Sore Foot", 420, 3),
    ("Concussion", 380, 5),
    ("Calf Strain", 360, 6),
    ("Sprained Wrist", 340, 4),
    ("Patellar Tendinitis", 320, 5),
    ("Jammed Finger", 300, 2),
    ("Plantar Fasciitis", 260, 9),
    ("Bone Bruise", 240, 8),
    ("Broken Nose", 200, 4),
    ("Sprained Thumb", 190, 5),
    ("Strained Quadriceps", 180, 6),
    ("Sore Shoulder", 160, 4),
    ("Dislocated Finger", 140, 7),
    ("Achilles Tendinitis", 120, 6),
    ("Sports Hernia", 90, 20),
    ("Broken Hand", 90, 25),
    ("Stress Fracture", 80, 30),
    ("Torn Meniscus", 75, 25),
    ("Broken Foot", 62, 45),
    ("Torn ACL", 30, 90),
    ("Torn Achilles Tendon", 16, 110),
    ("Microfracture Surgery", 9, 120),
)

INJURY_TABLE: WeightedTable[tuple[str, int]] = WeightedTable.from_weights(
    ((name, games), frequency) for name, frequency, games in INJURY_DATA
)


def injury_duration_factor(health_rank: int, settings: "LeagueSettings") -> float:
    """Multiplier on typical games missed, 0.65 (best health spending) to 1.35 (worst)."""
    return 0.7 * (health_rank - 1) / (settings.num_teams - 1) + 0.65


def draw_injury(
    health_rank: int,
    settings: "LeagueSettings",
    rng: random.Random,
    table: WeightedTable[tuple[str, int]] = INJURY_TABLE,
) -> Injury:
    """
    Pick an injury type and duration.

    Args:
        health_rank: 1 (best health spending) to num_teams (worst)
        settings: League settings
        rng: Random source
        table: Weighted table of (type, typical games) rows

    Returns:
        Injury with games_remaining set

    Raises:
        EmptyDistributionError: If the table is empty
    """
    injury_type, base_games = table.draw(rng)
    games = round_half_up(
        injury_duration_factor(health_rank, settings) * rng.uniform(0.25, 1.75) * base_games
    )
    logger.debug("Drew injury %s (%d games)", injury_type, games)
    return Injury(type=injury_type, games_remaining=games)
