"""Player ratings: primitives, derived descriptors and scouting fuzz."""

from swish.core.ratings.base import (
    RATING_KEYS,
    RatingsRow,
    bound,
    fuzz_rating,
    height_to_rating,
    limit_rating,
    round_half_up,
)
from swish.core.ratings.composites import COMPOSITE_WEIGHTS, Composite
from swish.core.ratings.derivation import (
    OVR_WEIGHTS,
    composite_fraction,
    derive,
    has_skill,
    ovr,
    pos,
    skills,
)
from swish.core.ratings.fuzz import gen_fuzz, next_fuzz

__all__ = [
    "COMPOSITE_WEIGHTS",
    "Composite",
    "OVR_WEIGHTS",
    "RATING_KEYS",
    "RatingsRow",
    "bound",
    "composite_fraction",
    "derive",
    "fuzz_rating",
    "gen_fuzz",
    "has_skill",
    "height_to_rating",
    "limit_rating",
    "next_fuzz",
    "ovr",
    "pos",
    "round_half_up",
    "skills",
]
