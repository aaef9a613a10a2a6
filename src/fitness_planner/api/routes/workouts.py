"""Workout plan API routes."""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_plan_service
from ...models.workouts import (
    ExerciseSchema,
    FocusMode,
    WorkoutPlansResponseSchema,
    WorkoutPreferencesSchema,
)
from ...services.plan_service import WorkoutPlanService


router = APIRouter()


@router.post("/plans", response_model=WorkoutPlansResponseSchema)
async def generate_plans(
    request: WorkoutPreferencesSchema,
    mode: Optional[FocusMode] = Query(default=None, description="Override the focus mode"),
    seed: Optional[int] = Query(default=None, description="Seed for reproducible selection"),
    service: WorkoutPlanService = Depends(get_plan_service),
):
    """
    Generate three candidate weekly plans.

    Returns Full Body Strength, plus Upper/Lower Split with 4+ days and
    Push/Pull/Legs with 3+ days; missing slots hold Full Body variations.
    """
    effective_mode = mode or service.focus_mode
    plans = service.generate(request.to_preferences(), mode=effective_mode, seed=seed)
    return {
        "plans": [plan.to_dict() for plan in plans],
        "focus_mode": effective_mode,
    }


@router.get("/exercises", response_model=Dict[str, List[ExerciseSchema]])
async def list_exercises(
    service: WorkoutPlanService = Depends(get_plan_service),
):
    """The full exercise catalog grouped by muscle group."""
    return {
        group.value: [entry.to_dict() for entry in entries]
        for group, entries in service.exercise_catalog().items()
    }


@router.get("/exercises/{group}", response_model=List[ExerciseSchema])
async def list_group_exercises(
    group: str,
    service: WorkoutPlanService = Depends(get_plan_service),
):
    """Exercises for one muscle group."""
    return [entry.to_dict() for entry in service.exercises_for(group)]
