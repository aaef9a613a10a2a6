"""Fitness Planner: nutrition targets and weekly strength plans."""

__version__ = "0.1.0"

from .metrics.energy import compute_macro_targets
from .workouts.generator import generate_workout_plans
from .models import (
    BiometricProfile,
    MacroTargets,
    WorkoutPreferences,
    WorkoutPlan,
)

__all__ = [
    "__version__",
    "compute_macro_targets",
    "generate_workout_plans",
    "BiometricProfile",
    "MacroTargets",
    "WorkoutPreferences",
    "WorkoutPlan",
]
