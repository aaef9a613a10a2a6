"""Energy expenditure and macronutrient target calculations.

BMR uses the Mifflin-St Jeor equation, TDEE scales it by an activity
multiplier, and the calorie target is shifted by the energy content of the
requested weekly weight change. Macros are split as protein by body weight,
fat by share of calories, and carbs from the remainder.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Union

from ..exceptions import InvalidBiometricsError
from ..models.nutrition import (
    ActivityLevel,
    BiometricProfile,
    MacroPreference,
    MacroTargets,
    Sex,
    WeightGoal,
)

logger = logging.getLogger(__name__)

KCAL_PER_KG_BODY_MASS = 7700
DAYS_PER_WEEK = 7

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

CARB_UNDERFLOW_WARNING = "carb_calories_negative"


ACTIVITY_LEVELS: Dict[ActivityLevel, Dict[str, Union[float, str]]] = {
    ActivityLevel.SEDENTARY: {
        "multiplier": 1.2,
        "label": "Sedentary",
        "description": "Little or no exercise, desk job",
    },
    ActivityLevel.LIGHTLY_ACTIVE: {
        "multiplier": 1.375,
        "label": "Lightly Active",
        "description": "Light exercise or sports 1-3 days per week",
    },
    ActivityLevel.MODERATELY_ACTIVE: {
        "multiplier": 1.55,
        "label": "Moderately Active",
        "description": "Moderate exercise or sports 3-5 days per week",
    },
    ActivityLevel.VERY_ACTIVE: {
        "multiplier": 1.725,
        "label": "Very Active",
        "description": "Hard exercise or sports 6-7 days per week",
    },
    ActivityLevel.EXTREMELY_ACTIVE: {
        "multiplier": 1.9,
        "label": "Extremely Active",
        "description": "Very hard exercise, physical job, or training twice per day",
    },
}

DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# Selectable weekly change rates (kg per week) per goal
WEIGHT_CHANGE_RATES: Dict[WeightGoal, List[Dict[str, Union[float, str]]]] = {
    WeightGoal.LOSE: [
        {"value": 0.25, "label": "0.25 kg (0.5 lbs) - Slow & Sustainable"},
        {"value": 0.5, "label": "0.5 kg (1 lb) - Moderate"},
        {"value": 0.75, "label": "0.75 kg (1.5 lbs) - Aggressive"},
        {"value": 1.0, "label": "1 kg (2 lbs) - Very Aggressive"},
    ],
    WeightGoal.MAINTAIN: [
        {"value": 0, "label": "Maintain current weight"},
    ],
    WeightGoal.GAIN: [
        {"value": 0.25, "label": "0.25 kg (0.5 lbs) - Lean Gains"},
        {"value": 0.5, "label": "0.5 kg (1 lb) - Moderate"},
        {"value": 0.75, "label": "0.75 kg (1.5 lbs) - Aggressive"},
        {"value": 1.0, "label": "1 kg (2 lbs) - Very Aggressive"},
    ],
}

# Grams of protein per kg of body weight; more when cutting to keep muscle
PROTEIN_PER_KG: Dict[WeightGoal, float] = {
    WeightGoal.LOSE: 2.2,
    WeightGoal.GAIN: 1.8,
}
DEFAULT_PROTEIN_PER_KG = 2.0

# Share of target calories from fat
FAT_FRACTION: Dict[MacroPreference, float] = {
    MacroPreference.LOW_CARB: 0.35,
    MacroPreference.LOW_FAT: 0.20,
}
DEFAULT_FAT_FRACTION = 0.25


@dataclass(frozen=True)
class MacroSplit:
    """Rounded gram targets for the three macronutrients."""

    protein_g: int
    carbs_g: int
    fat_g: int
    carb_underflow: bool = False  # Protein + fat exceeded the calorie target


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def _require_positive(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidBiometricsError(f"{name} must be a number", field=name, value=value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidBiometricsError(
            f"{name} must be a positive finite number", field=name, value=value
        )


def calculate_bmr(weight_kg: float, height_cm: float, age: int, sex: Sex) -> float:
    """
    Calculate Basal Metabolic Rate with the Mifflin-St Jeor equation.

    Men:   10 * weight + 6.25 * height - 5 * age + 5
    Women: 10 * weight + 6.25 * height - 5 * age - 161

    Args:
        weight_kg: Body weight in kilograms
        height_cm: Height in centimeters
        age: Age in years
        sex: Biological sex

    Returns:
        BMR in kcal/day (unrounded)

    Raises:
        InvalidBiometricsError: If weight, height or age is not a positive finite number
    """
    _require_positive("weight_kg", weight_kg)
    _require_positive("height_cm", height_cm)
    _require_positive("age", age)

    base = (10 * weight_kg) + (6.25 * height_cm) - (5 * age)
    return base + 5 if sex == Sex.MALE else base - 161


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """
    Calculate Total Daily Energy Expenditure.

    Unknown activity levels fall back to the sedentary multiplier.
    """
    level = ACTIVITY_LEVELS.get(activity_level)
    multiplier = level["multiplier"] if level else DEFAULT_ACTIVITY_MULTIPLIER
    return bmr * multiplier


def calculate_target_calories(
    tdee: float,
    weight_goal: WeightGoal,
    weight_change_rate: float,
) -> float:
    """
    Shift TDEE by the daily energy needed for the weekly weight change.

    1 kg of body mass is taken as 7700 kcal.

    Args:
        tdee: Total daily energy expenditure
        weight_goal: lose, maintain or gain
        weight_change_rate: kg per week (ignored for maintain)

    Returns:
        Target calories per day (unrounded)
    """
    if weight_goal == WeightGoal.MAINTAIN:
        return tdee

    if isinstance(weight_change_rate, bool) or not math.isfinite(weight_change_rate) or weight_change_rate < 0:
        raise InvalidBiometricsError(
            "weight_change_rate must be a non-negative finite number",
            field="weight_change_rate",
            value=weight_change_rate,
        )

    weekly_adjustment = weight_change_rate * KCAL_PER_KG_BODY_MASS
    daily_adjustment = weekly_adjustment / DAYS_PER_WEEK

    if weight_goal == WeightGoal.LOSE:
        return tdee - daily_adjustment
    if weight_goal == WeightGoal.GAIN:
        return tdee + daily_adjustment
    return tdee


def calculate_macros(
    target_calories: float,
    weight_kg: float,
    weight_goal: WeightGoal,
    macro_preference: MacroPreference,
    clamp_carbs: bool = True,
) -> MacroSplit:
    """
    Split target calories into protein, carb and fat grams.

    Protein: 1.8-2.2 g per kg of body weight depending on goal
    Fat: 20-35% of target calories depending on preference
    Carbs: whatever calories remain

    When protein and fat together exceed the target, carbs would go negative.
    With clamp_carbs the carb target is floored at zero; either way the
    returned split has carb_underflow set.

    Args:
        target_calories: Daily calorie target
        weight_kg: Body weight in kilograms
        weight_goal: lose, maintain or gain
        macro_preference: balanced, low_carb or low_fat
        clamp_carbs: Floor carbs at zero grams

    Returns:
        MacroSplit with rounded gram values
    """
    protein_per_kg = PROTEIN_PER_KG.get(weight_goal, DEFAULT_PROTEIN_PER_KG)
    protein_g = weight_kg * protein_per_kg
    protein_kcal = protein_g * KCAL_PER_G_PROTEIN

    fat_fraction = FAT_FRACTION.get(macro_preference, DEFAULT_FAT_FRACTION)
    fat_kcal = target_calories * fat_fraction
    fat_g = fat_kcal / KCAL_PER_G_FAT

    carb_kcal = target_calories - protein_kcal - fat_kcal
    underflow = carb_kcal < 0
    if underflow and clamp_carbs:
        carb_kcal = 0.0
    carbs_g = carb_kcal / KCAL_PER_G_CARBS

    return MacroSplit(
        protein_g=round_half_up(protein_g),
        carbs_g=round_half_up(carbs_g),
        fat_g=round_half_up(fat_g),
        carb_underflow=underflow,
    )


def compute_macro_targets(
    profile: BiometricProfile,
    clamp_carbs: bool = True,
) -> MacroTargets:
    """
    Compute daily energy and macro targets for a profile.

    Pure and deterministic; range validation is the caller's job.

    Args:
        profile: Biometric inputs
        clamp_carbs: Floor negative carb targets at zero

    Returns:
        MacroTargets with every value rounded to an integer
    """
    bmr = calculate_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
    tdee = calculate_tdee(bmr, profile.activity_level)
    target_calories = calculate_target_calories(
        tdee, profile.weight_goal, profile.weight_change_rate
    )
    split = calculate_macros(
        target_calories,
        profile.weight_kg,
        profile.weight_goal,
        profile.macro_preference,
        clamp_carbs=clamp_carbs,
    )

    warnings = ()
    if split.carb_underflow:
        logger.warning(
            f"Protein and fat exceed {target_calories:.0f} kcal target; "
            f"carbs set to {split.carbs_g} g (clamped={clamp_carbs})"
        )
        warnings = (CARB_UNDERFLOW_WARNING,)

    return MacroTargets(
        bmr=round_half_up(bmr),
        tdee=round_half_up(tdee),
        target_calories=round_half_up(target_calories),
        protein_g=split.protein_g,
        carbs_g=split.carbs_g,
        fat_g=split.fat_g,
        warnings=warnings,
    )
