"""Data models for the Fitness Planner."""

from .nutrition import (
    # Enums
    Sex,
    ActivityLevel,
    WeightGoal,
    MacroPreference,
    WeightUnit,
    # Core dataclasses
    BiometricProfile,
    MacroTargets,
    MacroCalculation,
    # Pydantic schemas for API
    MacroRequestSchema,
    MacroTargetsSchema,
    MacroResponseSchema,
    ActivityLevelSchema,
    WeightChangeRateSchema,
)

from .workouts import (
    # Enums
    FitnessGoal,
    ExperienceLevel,
    Equipment,
    MuscleGroup,
    BodyFocus,
    Weekday,
    PlanArchetype,
    FocusMode,
    # Core dataclasses
    ExerciseCatalogEntry,
    SetsReps,
    PrescribedExercise,
    WorkoutDay,
    WorkoutPlan,
    WorkoutPreferences,
    # Pydantic schemas for API
    WorkoutPreferencesSchema,
    PrescribedExerciseSchema,
    WorkoutDaySchema,
    WorkoutPlanSchema,
    WorkoutPlansResponseSchema,
    ExerciseSchema,
)

__all__ = [
    # Nutrition enums
    "Sex",
    "ActivityLevel",
    "WeightGoal",
    "MacroPreference",
    "WeightUnit",
    # Nutrition dataclasses
    "BiometricProfile",
    "MacroTargets",
    "MacroCalculation",
    # Nutrition schemas
    "MacroRequestSchema",
    "MacroTargetsSchema",
    "MacroResponseSchema",
    "ActivityLevelSchema",
    "WeightChangeRateSchema",
    # Workout enums
    "FitnessGoal",
    "ExperienceLevel",
    "Equipment",
    "MuscleGroup",
    "BodyFocus",
    "Weekday",
    "PlanArchetype",
    "FocusMode",
    # Workout dataclasses
    "ExerciseCatalogEntry",
    "SetsReps",
    "PrescribedExercise",
    "WorkoutDay",
    "WorkoutPlan",
    "WorkoutPreferences",
    # Workout schemas
    "WorkoutPreferencesSchema",
    "PrescribedExerciseSchema",
    "WorkoutDaySchema",
    "WorkoutPlanSchema",
    "WorkoutPlansResponseSchema",
    "ExerciseSchema",
]
