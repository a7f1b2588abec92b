"""Rating definitions and bounded arithmetic."""

import math
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Optional

from swish.core.enums import Skill

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings


# Primitive ratings, in display order
RATING_KEYS: tuple[str, ...] = (
    "hgt",
    "stre",
    "spd",
    "jmp",
    "endu",
    "ins",
    "dnk",
    "ft",
    "fg",
    "tp",
    "oiq",
    "diq",
    "drb",
    "pss",
    "reb",
)

# Displayed height range for the hgt rating, in inches
MIN_HEIGHT_INCHES = 66  # 5'6"
MAX_HEIGHT_INCHES = 93  # 7'9"


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with .5 always going up."""
    return math.floor(x + 0.5)


def bound(x: float, lo: float, hi: float) -> float:
    """Clamp x into [lo, hi]."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def limit_rating(rating: float) -> int:
    """
    Limit a rating to between 0 and 100.

    Values inside the range are floored to an integer.
    """
    if rating > 100:
        return 100
    if rating < 0:
        return 0
    return math.floor(rating)


def fuzz_rating(rating: float, fuzz: float, settings: "LeagueSettings") -> int:
    """Apply scouting fuzz to a rating (no-op in multi-team or god mode)."""
    if settings.fuzz_disabled:
        fuzz = 0
    return round_half_up(bound(rating + fuzz, 0, 100))


def height_to_rating(height_inches: float) -> int:
    """Convert height in inches to the 0-100 hgt rating."""
    scaled = 100 * (height_inches - MIN_HEIGHT_INCHES) / (MAX_HEIGHT_INCHES - MIN_HEIGHT_INCHES)
    return round_half_up(bound(scaled, 0, 100))


@dataclass
class RatingsRow:
    """
    One season of ratings for a player.

    Primitive ratings are in [0, 100]. ovr, pot, skills and pos are
    derived (see swish.core.ratings.derivation).
    """

    hgt: int = 50
    stre: int = 50
    spd: int = 50
    jmp: int = 50
    endu: int = 50
    ins: int = 50
    dnk: int = 50
    ft: int = 50
    fg: int = 50
    tp: int = 50
    oiq: int = 50
    diq: int = 50
    drb: int = 50
    pss: int = 50
    reb: int = 50

    # Derived
    ovr: int = 0
    pot: int = 0
    fuzz: float = 0.0
    season: int = 0
    skills: list[Skill] = field(default_factory=list)
    pos: Optional[str] = None

    def get(self, key: str) -> int:
        """Get a primitive rating by key."""
        if key not in RATING_KEYS:
            raise KeyError(f"Unknown rating: {key}")
        return getattr(self, key)

    def primitives(self) -> dict[str, int]:
        """The fifteen primitive ratings as a dict."""
        return {key: getattr(self, key) for key in RATING_KEYS}

    def copy_for(self, season: int, **changes) -> "RatingsRow":
        """Copy this row for another season."""
        return replace(self, season=season, skills=list(self.skills), **changes)

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["skills"] = [s.value for s in self.skills]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "RatingsRow":
        kwargs = {key: data[key] for key in RATING_KEYS if key in data}
        return cls(
            **kwargs,
            ovr=data.get("ovr", 0),
            pot=data.get("pot", 0),
            fuzz=data.get("fuzz", 0.0),
            season=data.get("season", 0),
            skills=[Skill(s) for s in data.get("skills", [])],
            pos=data.get("pos"),
        )
