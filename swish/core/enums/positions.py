"""Position and skill definitions for basketball players."""

from enum import Enum


class Position(Enum):
    """Court positions, including hybrid labels."""

    PG = "PG"  # Point Guard
    SG = "SG"  # Shooting Guard
    SF = "SF"  # Small Forward
    PF = "PF"  # Power Forward
    C = "C"  # Center

    # Hybrids
    G = "G"  # Combo guard
    GF = "GF"  # Guard/forward
    F = "F"  # Forward
    FC = "FC"  # Forward/center


class Skill(Enum):
    """Discrete skill tags shown next to a player's name."""

    THREE_POINT = "3"
    ATHLETE = "A"
    BALL_HANDLER = "B"
    INTERIOR_DEFENDER = "Di"
    PERIMETER_DEFENDER = "Dp"
    POST_SCORER = "Po"
    PASSER = "Ps"
    REBOUNDER = "R"

    @property
    def label(self) -> str:
        """Human-readable skill name."""
        return SKILL_LABELS[self]


SKILL_LABELS: dict[Skill, str] = {
    Skill.THREE_POINT: "Three Point Shooter",
    Skill.ATHLETE: "Athlete",
    Skill.BALL_HANDLER: "Ball Handler",
    Skill.INTERIOR_DEFENDER: "Interior Defender",
    Skill.PERIMETER_DEFENDER: "Perimeter Defender",
    Skill.POST_SCORER: "Post Scorer",
    Skill.PASSER: "Passer",
    Skill.REBOUNDER: "Rebounder",
}
