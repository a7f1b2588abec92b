"""League enumerations."""

from swish.core.enums.phases import Phase, TeamSlot
from swish.core.enums.positions import Position, Skill, SKILL_LABELS

__all__ = [
    "Phase",
    "Position",
    "SKILL_LABELS",
    "Skill",
    "TeamSlot",
]
