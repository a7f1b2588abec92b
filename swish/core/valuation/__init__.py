"""Player valuation."""

from swish.core.valuation.value import (
    AGE_DECAY,
    POTENTIAL_WEIGHT_BY_AGE,
    ValueOptions,
    age_for_value,
    blend_potential,
    compute_values,
    current_from_stats,
    regular_season_history,
    update_values,
    value,
)

__all__ = [
    "AGE_DECAY",
    "POTENTIAL_WEIGHT_BY_AGE",
    "ValueOptions",
    "age_for_value",
    "blend_potential",
    "compute_values",
    "current_from_stats",
    "regular_season_history",
    "update_values",
    "value",
]
