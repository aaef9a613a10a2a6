"""
Workout plan service.

Runs the plan generator with the configured focus mode and seed, and
exposes the exercise catalog.
"""

import random
from typing import Dict, List, Optional

from .base import BaseService
from ..exceptions import PlanGenerationError, PlanValidationError
from ..models.workouts import (
    ExerciseCatalogEntry,
    FocusMode,
    MuscleGroup,
    WorkoutPlan,
    WorkoutPreferences,
)
from ..workouts.catalog import EXERCISE_CATALOG, get_exercises
from ..workouts.generator import PLANS_PER_REQUEST, generate_workout_plans


class WorkoutPlanService(BaseService):
    """Service for workout plan generation and catalog lookups."""

    @property
    def focus_mode(self) -> FocusMode:
        return FocusMode(self.settings.focus_mode)

    def validate_duration(self, minutes: int) -> None:
        """
        Check a session length against the configured bounds.

        Raises:
            PlanValidationError: If minutes falls outside the bounds
        """
        low, high = self.settings.min_duration, self.settings.max_duration
        if not low <= minutes <= high:
            raise PlanValidationError(
                f"workout_duration must be between {low} and {high} minutes",
                field="workout_duration",
                details={"min": low, "max": high, "value": minutes},
            )

    def generate(
        self,
        preferences: WorkoutPreferences,
        mode: Optional[FocusMode] = None,
        seed: Optional[int] = None,
    ) -> List[WorkoutPlan]:
        """
        Generate three candidate plans.

        Args:
            preferences: Goal, schedule and experience inputs
            mode: Override the configured focus mode
            seed: Override the configured random seed

        Returns:
            Exactly three WorkoutPlan objects

        Raises:
            PlanValidationError: If preferences are unusable
            PlanGenerationError: If the generator does not yield three plans
        """
        mode = FocusMode(mode) if mode is not None else self.focus_mode
        if seed is None:
            seed = self.settings.random_seed
        self.validate_duration(preferences.workout_duration)

        plans = generate_workout_plans(preferences, rng=random.Random(seed), mode=mode)
        if len(plans) != PLANS_PER_REQUEST:
            raise PlanGenerationError(
                f"Expected {PLANS_PER_REQUEST} plans, got {len(plans)}",
                details={"plan_names": [p.name for p in plans]},
            )

        self.logger.info(
            f"Generated {len(plans)} plans over {len(preferences.workout_days)} day(s) "
            f"in {mode.value} mode"
        )
        return plans

    def exercise_catalog(self) -> Dict[MuscleGroup, List[ExerciseCatalogEntry]]:
        """The full catalog, keyed by muscle group."""
        return {group: list(entries) for group, entries in EXERCISE_CATALOG.items()}

    def exercises_for(self, group: str) -> List[ExerciseCatalogEntry]:
        """
        Catalog entries for one muscle group.

        Raises:
            MuscleGroupNotFoundError: If the group is unknown
        """
        return list(get_exercises(group))
