"""Data models for players, statistics and teams."""

from swish.core.models.player import (
    HEALTHY,
    NEVER_RETIRED,
    Award,
    Born,
    Contract,
    Draft,
    Injury,
    Player,
    PlayerValues,
    SalaryEntry,
)
from swish.core.models.stats import PlayerStatsRow
from swish.core.models.team import TeamSeason

__all__ = [
    "Award",
    "Born",
    "Contract",
    "Draft",
    "HEALTHY",
    "Injury",
    "NEVER_RETIRED",
    "Player",
    "PlayerStatsRow",
    "PlayerValues",
    "SalaryEntry",
    "TeamSeason",
]
