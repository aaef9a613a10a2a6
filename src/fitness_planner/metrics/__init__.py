"""Nutrition metrics calculations."""

from .energy import (
    ACTIVITY_LEVELS,
    WEIGHT_CHANGE_RATES,
    KCAL_PER_KG_BODY_MASS,
    CARB_UNDERFLOW_WARNING,
    MacroSplit,
    round_half_up,
    calculate_bmr,
    calculate_tdee,
    calculate_target_calories,
    calculate_macros,
    compute_macro_targets,
)
from .units import (
    lbs_to_kg,
    kg_to_lbs,
    inches_to_cm,
    cm_to_inches,
    feet_inches_to_cm,
)

__all__ = [
    # Reference tables
    "ACTIVITY_LEVELS",
    "WEIGHT_CHANGE_RATES",
    "KCAL_PER_KG_BODY_MASS",
    "CARB_UNDERFLOW_WARNING",
    # Energy and macros
    "MacroSplit",
    "round_half_up",
    "calculate_bmr",
    "calculate_tdee",
    "calculate_target_calories",
    "calculate_macros",
    "compute_macro_targets",
    # Unit conversions
    "lbs_to_kg",
    "kg_to_lbs",
    "inches_to_cm",
    "cm_to_inches",
    "feet_inches_to_cm",
]
