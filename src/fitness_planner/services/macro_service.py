"""
Macro target service.

Handles:
- Range validation of biometric inputs
- Unit normalisation of API requests
- Running the calculator with configured carb policy
- Activity level and weight change rate reference data
"""

from typing import Any, Dict, List, Optional

from .base import BaseService
from ..exceptions import InvalidBiometricsError
from ..metrics.energy import ACTIVITY_LEVELS, WEIGHT_CHANGE_RATES, compute_macro_targets
from ..metrics.units import feet_inches_to_cm, lbs_to_kg
from ..models.nutrition import (
    BiometricProfile,
    MacroCalculation,
    MacroRequestSchema,
    WeightGoal,
    WeightUnit,
)


class MacroService(BaseService):
    """Service for energy and macronutrient target calculations."""

    def validate_profile(self, profile: BiometricProfile) -> None:
        """
        Check a profile against the configured input bounds.

        Raises:
            InvalidBiometricsError: On the first out-of-range field
        """
        s = self.settings
        bounds = (
            ("age", profile.age, s.min_age, s.max_age),
            ("height_cm", profile.height_cm, s.min_height_cm, s.max_height_cm),
            ("weight_kg", profile.weight_kg, s.min_weight_kg, s.max_weight_kg),
        )
        for field_name, value, low, high in bounds:
            if not low <= value <= high:
                raise InvalidBiometricsError(
                    f"{field_name} must be between {low:g} and {high:g}",
                    field=field_name,
                    value=value,
                    details={"min": low, "max": high},
                )

        if profile.weight_change_rate < 0:
            raise InvalidBiometricsError(
                "weight_change_rate cannot be negative",
                field="weight_change_rate",
                value=profile.weight_change_rate,
            )

    def build_profile(self, request: MacroRequestSchema) -> BiometricProfile:
        """Convert an API request with mixed units into a metric profile."""
        if request.height_cm is not None:
            height_cm = request.height_cm
        else:
            height_cm = feet_inches_to_cm(request.height_feet or 0, request.height_inches or 0.0)

        if request.weight_unit == WeightUnit.LBS:
            weight_kg = lbs_to_kg(request.weight)
        else:
            weight_kg = request.weight

        return BiometricProfile(
            age=request.age,
            sex=request.sex,
            height_cm=height_cm,
            weight_kg=weight_kg,
            activity_level=request.activity_level,
            weight_goal=request.weight_goal,
            weight_change_rate=request.weight_change_rate,
            macro_preference=request.macro_preference,
        )

    def calculate(
        self,
        profile: BiometricProfile,
        clamp_carbs: Optional[bool] = None,
    ) -> MacroCalculation:
        """
        Validate a profile and compute its targets.

        Args:
            profile: Biometric inputs
            clamp_carbs: Override Settings.clamp_negative_carbs

        Returns:
            MacroCalculation with a UTC calculated_at timestamp
        """
        self.validate_profile(profile)
        if clamp_carbs is None:
            clamp_carbs = self.settings.clamp_negative_carbs

        targets = compute_macro_targets(profile, clamp_carbs=clamp_carbs)
        self.logger.info(
            f"Calculated targets: {targets.target_calories} kcal "
            f"(P {targets.protein_g} g / C {targets.carbs_g} g / F {targets.fat_g} g)"
        )
        return MacroCalculation(profile=profile, targets=targets)

    def activity_levels(self) -> List[Dict[str, Any]]:
        """Activity tiers with their multipliers and descriptions."""
        return [
            {"value": level.value, **info}
            for level, info in ACTIVITY_LEVELS.items()
        ]

    def weight_change_rates(self, goal: WeightGoal) -> List[Dict[str, Any]]:
        """Selectable weekly change rates for a goal."""
        return [dict(rate) for rate in WEIGHT_CHANGE_RATES[WeightGoal(goal)]]
