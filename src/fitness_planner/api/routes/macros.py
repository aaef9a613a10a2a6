"""Macro target API routes."""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import get_macro_service
from ...models.nutrition import (
    ActivityLevelSchema,
    MacroRequestSchema,
    MacroResponseSchema,
    MacroTargetsSchema,
    WeightChangeRateSchema,
    WeightGoal,
)
from ...services.macro_service import MacroService


router = APIRouter()


@router.post("/calculate", response_model=MacroResponseSchema)
async def calculate_macros(
    request: MacroRequestSchema,
    service: MacroService = Depends(get_macro_service),
):
    """
    Calculate daily calorie and macro targets.

    Height may be given in centimeters or as feet plus inches, weight in
    kilograms or pounds. Values are normalised to metric before calculating.
    """
    profile = service.build_profile(request)
    calculation = service.calculate(profile)
    return MacroResponseSchema(
        height_cm=profile.height_cm,
        weight_kg=profile.weight_kg,
        targets=MacroTargetsSchema(**calculation.targets.to_dict()),
        calculated_at=calculation.calculated_at,
    )


@router.get("/activity-levels", response_model=List[ActivityLevelSchema])
async def list_activity_levels(
    service: MacroService = Depends(get_macro_service),
):
    """List activity tiers with their TDEE multipliers."""
    return service.activity_levels()


@router.get("/weight-change-rates/{goal}", response_model=List[WeightChangeRateSchema])
async def list_weight_change_rates(
    goal: WeightGoal,
    service: MacroService = Depends(get_macro_service),
):
    """List selectable weekly weight change rates for a goal."""
    return service.weight_change_rates(goal)
