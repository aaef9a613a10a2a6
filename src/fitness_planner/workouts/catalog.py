"""Static exercise catalog, grouped by muscle group.

Built once at import and exposed read-only.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from ..exceptions import MuscleGroupNotFoundError
from ..models.workouts import (
    Equipment,
    ExerciseCatalogEntry,
    ExperienceLevel,
    MuscleGroup,
)


def _entry(name: str, equipment: Equipment, difficulty: ExperienceLevel) -> ExerciseCatalogEntry:
    return ExerciseCatalogEntry(name=name, equipment=equipment, difficulty=difficulty)


_B = ExperienceLevel.BEGINNER
_I = ExperienceLevel.INTERMEDIATE
_A = ExperienceLevel.ADVANCED

EXERCISE_CATALOG: Mapping[MuscleGroup, Tuple[ExerciseCatalogEntry, ...]] = MappingProxyType({
    MuscleGroup.CHEST: (
        _entry("Barbell Bench Press", Equipment.BARBELL, _I),
        _entry("Dumbbell Bench Press", Equipment.DUMBBELL, _B),
        _entry("Incline Dumbbell Press", Equipment.DUMBBELL, _B),
        _entry("Push-ups", Equipment.BODYWEIGHT, _B),
        _entry("Cable Flyes", Equipment.CABLE, _I),
        _entry("Dips", Equipment.BODYWEIGHT, _I),
    ),
    MuscleGroup.BACK: (
        _entry("Pull-ups", Equipment.BODYWEIGHT, _I),
        _entry("Barbell Rows", Equipment.BARBELL, _I),
        _entry("Lat Pulldown", Equipment.CABLE, _B),
        _entry("Dumbbell Rows", Equipment.DUMBBELL, _B),
        _entry("Seated Cable Rows", Equipment.CABLE, _B),
        _entry("Deadlifts", Equipment.BARBELL, _A),
    ),
    MuscleGroup.SHOULDERS: (
        _entry("Overhead Press", Equipment.BARBELL, _I),
        _entry("Dumbbell Shoulder Press", Equipment.DUMBBELL, _B),
        _entry("Lateral Raises", Equipment.DUMBBELL, _B),
        _entry("Front Raises", Equipment.DUMBBELL, _B),
        _entry("Face Pulls", Equipment.CABLE, _B),
        _entry("Arnold Press", Equipment.DUMBBELL, _I),
    ),
    MuscleGroup.ARMS: (
        _entry("Barbell Curls", Equipment.BARBELL, _B),
        _entry("Hammer Curls", Equipment.DUMBBELL, _B),
        _entry("Tricep Dips", Equipment.BODYWEIGHT, _I),
        _entry("Skull Crushers", Equipment.BARBELL, _I),
        _entry("Cable Tricep Pushdown", Equipment.CABLE, _B),
        _entry("Concentration Curls", Equipment.DUMBBELL, _B),
    ),
    MuscleGroup.LEGS: (
        _entry("Squats", Equipment.BARBELL, _I),
        _entry("Leg Press", Equipment.MACHINE, _B),
        _entry("Romanian Deadlifts", Equipment.BARBELL, _I),
        _entry("Leg Curls", Equipment.MACHINE, _B),
        _entry("Leg Extensions", Equipment.MACHINE, _B),
        _entry("Lunges", Equipment.DUMBBELL, _B),
    ),
    MuscleGroup.GLUTES: (
        _entry("Hip Thrusts", Equipment.BARBELL, _I),
        _entry("Glute Bridges", Equipment.BODYWEIGHT, _B),
        _entry("Bulgarian Split Squats", Equipment.DUMBBELL, _I),
        _entry("Cable Kickbacks", Equipment.CABLE, _B),
        _entry("Step-ups", Equipment.DUMBBELL, _B),
    ),
    MuscleGroup.CORE: (
        _entry("Planks", Equipment.BODYWEIGHT, _B),
        _entry("Hanging Leg Raises", Equipment.BODYWEIGHT, _A),
        _entry("Russian Twists", Equipment.BODYWEIGHT, _B),
        _entry("Cable Crunches", Equipment.CABLE, _B),
        _entry("Ab Wheel Rollouts", Equipment.EQUIPMENT, _I),
        _entry("Bicycle Crunches", Equipment.BODYWEIGHT, _B),
    ),
})


def get_exercises(muscle_group: MuscleGroup) -> Tuple[ExerciseCatalogEntry, ...]:
    """
    Return the catalog entries for a muscle group.

    Raises:
        MuscleGroupNotFoundError: If the group is not in the catalog
    """
    try:
        return EXERCISE_CATALOG[MuscleGroup(muscle_group)]
    except (KeyError, ValueError):
        raise MuscleGroupNotFoundError(getattr(muscle_group, "value", str(muscle_group))) from None


def filter_by_experience(
    exercises: Tuple[ExerciseCatalogEntry, ...],
    experience_level: ExperienceLevel,
) -> list:
    """Drop exercises above the athlete's level; beginners skip advanced moves."""
    if experience_level == ExperienceLevel.BEGINNER:
        return [ex for ex in exercises if ex.difficulty != ExperienceLevel.ADVANCED]
    return list(exercises)
