"""
Derived ratings: overall, skill tags and best-fit position.

Everything here is a pure function of a ratings row (plus league settings
where fuzz is involved).
"""

from typing import TYPE_CHECKING

from swish.core.enums import Position, Skill
from swish.core.ratings.base import RatingsRow, fuzz_rating, round_half_up
from swish.core.ratings.composites import (
    COMPOSITE_WEIGHTS,
    SKILL_COMPOSITES,
    SKILL_THRESHOLD,
    Composite,
)

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings


# Overall rating weights, loosely based on linear regression
OVR_WEIGHTS: dict[str, int] = {
    "hgt": 4,
    "stre": 1,
    "spd": 4,
    "jmp": 2,
    "endu": 3,
    "ins": 3,
    "dnk": 4,
    "ft": 1,
    "fg": 1,
    "tp": 2,
    "oiq": 1,
    "diq": 1,
    "drb": 1,
    "pss": 3,
    "reb": 1,
}
OVR_DIVISOR = 32


def ovr(ratings: RatingsRow) -> int:
    """Calculate the overall rating as a weighted average of all ratings."""
    total = sum(weight * ratings.get(key) for key, weight in OVR_WEIGHTS.items())
    return round_half_up(total / OVR_DIVISOR)


# =============================================================================
# Skills
# =============================================================================

def composite_fraction(
    ratings: RatingsRow,
    composite: Composite,
    settings: "LeagueSettings",
) -> float:
    """
    Weighted fraction (0-1) of the maximum possible composite score.

    Height is never fuzzed, and is rescaled by (hgt - 25) * 2 because its
    native scale runs differently from the other ratings.
    """
    numerator = 0.0
    denominator = 0.0
    for key, weight in zip(composite.ratings, composite.weights):
        if key == "hgt":
            rating = (ratings.hgt - 25) * 2
        else:
            rating = fuzz_rating(ratings.get(key), ratings.fuzz, settings)
        numerator += rating * weight
        denominator += 100 * weight
    return numerator / denominator


def has_skill(ratings: RatingsRow, composite: Composite, settings: "LeagueSettings") -> bool:
    """Check whether a composite clears the skill threshold."""
    return composite_fraction(ratings, composite, settings) > SKILL_THRESHOLD


def skills(ratings: RatingsRow, settings: "LeagueSettings") -> list[Skill]:
    """Assign discrete skill tags based on ratings."""
    return [
        skill
        for skill, composite_name in SKILL_COMPOSITES.items()
        if has_skill(ratings, COMPOSITE_WEIGHTS[composite_name], settings)
    ]


# =============================================================================
# Position
# =============================================================================

def pos(ratings: RatingsRow) -> Position:
    """
    Assign a position (PG, SG, SF, PF, C, G, GF, F, FC) based on ratings.

    Height picks a default slot; the five eligibility tests then override
    it, either with a single position or a hybrid label.
    """
    r = ratings

    # Without other skills, slot primarily by height
    if r.hgt >= 59:  # 6'10"
        position = Position.C
    elif r.hgt >= 52:  # 6'8"
        position = Position.PF
    elif r.hgt >= 44:  # 6'6"
        position = Position.SF
    elif r.spd < 60 and r.drb < 60 and r.pss < 60 and r.hgt >= 35:
        position = Position.SG
    else:
        position = Position.PG

    # PG is a fast ball handler, or a super ball handler. No height requirement.
    pg = (r.spd >= 60 and r.pss + r.drb >= 90) or (r.spd >= 40 and r.pss + r.drb >= 130)

    # SG is a secondary ball handler who can slash or shoot threes
    sg = r.spd >= 50 and r.drb >= 50 and r.hgt >= 37 and (r.dnk >= 58 or r.tp >= 63)

    # SF is a taller SG with lower handling requirements
    sf = r.spd >= 40 and r.drb > 30 and r.hgt >= 44 and (r.dnk >= 58 or r.tp >= 63)

    # PF needs size and strength; too tall means C only, unless they can shoot
    pf = (
        r.hgt >= 44
        and r.stre >= 55
        and r.hgt + r.stre >= 110
        and (r.hgt <= 63 or r.tp >= 60)
    )

    # C is extra tall, or strong and nearly as tall
    c = r.hgt >= 63 or (r.hgt >= 54 and r.stre >= 75)

    flags = {
        Position.PG: pg,
        Position.SG: sg,
        Position.SF: sf,
        Position.PF: pf,
        Position.C: c,
    }
    eligible = [p for p, ok in flags.items() if ok]
    if len(eligible) == 1:
        position = eligible[0]

    # Multiple positions. Order matters.
    if (pg or sg) and c:
        position = Position.F
    elif (pg or sg) and (sf or pf):
        position = Position.GF
    elif c and (pf or sf):
        position = Position.FC
    elif pf and sf:
        position = Position.F
    elif pg and sg:
        position = Position.G

    return position


def derive(ratings: RatingsRow, settings: "LeagueSettings") -> RatingsRow:
    """
    Fill in ovr, skills and pos, and keep pot >= ovr.

    Mutates and returns the row.
    """
    ratings.ovr = ovr(ratings)
    ratings.skills = skills(ratings, settings)
    ratings.pos = pos(ratings).value
    if ratings.pot < ratings.ovr:
        ratings.pot = ratings.ovr
    return ratings
