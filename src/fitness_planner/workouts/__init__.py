"""Exercise catalog and workout plan generation."""

from .catalog import EXERCISE_CATALOG, get_exercises, filter_by_experience
from .generator import (
    SETS_REPS_TABLE,
    DEFAULT_SETS_REPS,
    get_sets_reps,
    exercises_per_group,
    select_exercises,
    create_workout_day,
    resolve_focus_groups,
    generate_plan_a,
    generate_plan_b,
    generate_plan_c,
    generate_workout_plans,
)

__all__ = [
    # Catalog
    "EXERCISE_CATALOG",
    "get_exercises",
    "filter_by_experience",
    # Generator
    "SETS_REPS_TABLE",
    "DEFAULT_SETS_REPS",
    "get_sets_reps",
    "exercises_per_group",
    "select_exercises",
    "create_workout_day",
    "resolve_focus_groups",
    "generate_plan_a",
    "generate_plan_b",
    "generate_plan_c",
    "generate_workout_plans",
]
