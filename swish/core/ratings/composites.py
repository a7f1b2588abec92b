"""
Composite rating definitions used for skill tags.

These mirror the composites the game engine uses, so a player tagged as a
rebounder is one the engine also treats as a good rebounder.
"""

from dataclasses import dataclass

from swish.core.enums import Skill


@dataclass(frozen=True)
class Composite:
    """Weighted combination of primitive ratings."""

    ratings: tuple[str, ...]
    weights: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.ratings) != len(self.weights):
            raise ValueError("Composite ratings and weights must be the same length")

    @property
    def total_weight(self) -> float:
        return sum(self.weights)


COMPOSITE_WEIGHTS: dict[str, Composite] = {
    "shooting_three_pointer": Composite(("tp", "oiq"), (1, 0.1)),
    "athleticism": Composite(("stre", "spd", "jmp", "hgt"), (1, 1, 1, 0.5)),
    "dribbling": Composite(("drb", "spd"), (1, 1)),
    "defense_interior": Composite(("hgt", "stre", "spd", "jmp", "diq"), (2.5, 1, 0.5, 0.5, 2)),
    "defense_perimeter": Composite(("hgt", "stre", "spd", "jmp", "diq"), (0.5, 0.5, 2, 0.5, 1)),
    "shooting_low_post": Composite(("hgt", "stre", "spd", "ins", "oiq"), (1, 0.6, 0.2, 1, 0.4)),
    "passing": Composite(("drb", "pss", "oiq"), (0.4, 1, 0.5)),
    "rebounding": Composite(("hgt", "stre", "jmp", "reb", "oiq", "diq"), (2, 0.1, 0.1, 2, 0.5, 0.5)),
}

# Skill tag -> composite that qualifies for it, in display order
SKILL_COMPOSITES: dict[Skill, str] = {
    Skill.THREE_POINT: "shooting_three_pointer",
    Skill.ATHLETE: "athleticism",
    Skill.BALL_HANDLER: "dribbling",
    Skill.INTERIOR_DEFENDER: "defense_interior",
    Skill.PERIMETER_DEFENDER: "defense_perimeter",
    Skill.POST_SCORER: "shooting_low_post",
    Skill.PASSER: "passing",
    Skill.REBOUNDER: "rebounding",
}

SKILL_THRESHOLD = 0.68
