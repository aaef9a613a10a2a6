"""Workout data models for strength training plans."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field


class FitnessGoal(str, Enum):
    """What the athlete wants from training."""
    GAIN_MUSCLE = "gain_muscle"
    LOSE_FAT = "lose_fat"
    BODY_RECOMPOSITION = "body_recomposition"


class ExperienceLevel(str, Enum):
    """Training experience, also used as exercise difficulty tier."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Equipment(str, Enum):
    """Equipment categories in the exercise catalog."""
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    BODYWEIGHT = "bodyweight"
    CABLE = "cable"
    MACHINE = "machine"
    EQUIPMENT = "equipment"  # Miscellaneous gear (ab wheel etc.)


class MuscleGroup(str, Enum):
    """Muscle groups the exercise catalog is organised by."""
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    GLUTES = "glutes"
    CORE = "core"


class BodyFocus(str, Enum):
    """Body areas a user can ask to emphasise."""
    FULL_BODY = "full_body"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    GLUTES = "glutes"
    LEGS = "legs"

    @property
    def muscle_groups(self) -> Tuple[MuscleGroup, ...]:
        """Muscle groups covered by this focus area."""
        if self is BodyFocus.FULL_BODY:
            return tuple(MuscleGroup)
        if self is BodyFocus.UPPER_BODY:
            return (MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS, MuscleGroup.ARMS)
        if self is BodyFocus.LOWER_BODY:
            return (MuscleGroup.LEGS, MuscleGroup.GLUTES, MuscleGroup.CORE)
        return (MuscleGroup(self.value),)


class Weekday(str, Enum):
    """Days a user can train on."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class PlanArchetype(str, Enum):
    """The fixed plan templates."""
    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PUSH_PULL_LEGS = "push_pull_legs"


class FocusMode(str, Enum):
    """How user focus areas influence the archetypes."""
    PARITY = "parity"      # Focus areas are accepted but ignored
    FOCUSED = "focused"    # Day muscle groups are narrowed to the focus areas


@dataclass(frozen=True)
class ExerciseCatalogEntry:
    """A single exercise in the static catalog."""
    name: str
    equipment: Equipment
    difficulty: ExperienceLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "equipment": self.equipment.value,
            "difficulty": self.difficulty.value,
        }


@dataclass(frozen=True)
class SetsReps:
    """Set and rep prescription."""
    sets: int
    reps: str


@dataclass(frozen=True)
class PrescribedExercise:
    """An exercise placed in a workout day with its prescription."""
    name: str
    sets: int
    reps: str
    muscle_group: MuscleGroup

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "muscle_group": self.muscle_group.value,
        }


@dataclass(frozen=True)
class WorkoutDay:
    """One training session within a weekly plan."""
    day: str
    focus: str
    exercises: Tuple[PrescribedExercise, ...] = ()

    @property
    def muscle_groups(self) -> List[MuscleGroup]:
        """Muscle groups trained, in first-seen order."""
        seen: List[MuscleGroup] = []
        for exercise in self.exercises:
            if exercise.muscle_group not in seen:
                seen.append(exercise.muscle_group)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "focus": self.focus,
            "exercises": [e.to_dict() for e in self.exercises],
        }


@dataclass(frozen=True)
class WorkoutPlan:
    """
    A candidate weekly plan.

    Plans are produced three at a time and are never mutated; the caller
    either keeps one or discards them.
    """
    name: str
    difficulty: ExperienceLevel
    weekly_schedule: Tuple[WorkoutDay, ...]
    avg_duration: int
    description: str
    highlights: Tuple[str, ...]
    archetype: PlanArchetype

    @property
    def total_exercises(self) -> int:
        return sum(len(day.exercises) for day in self.weekly_schedule)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "difficulty": self.difficulty.value,
            "weekly_schedule": [d.to_dict() for d in self.weekly_schedule],
            "avg_duration": self.avg_duration,
            "total_exercises": self.total_exercises,
            "description": self.description,
            "highlights": list(self.highlights),
            "archetype": self.archetype.value,
        }


@dataclass
class WorkoutPreferences:
    """Inputs for plan generation."""
    fitness_goal: FitnessGoal
    workout_days: List[str]
    workout_duration: int  # minutes
    body_focus: List[BodyFocus] = field(default_factory=list)
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER

    def __post_init__(self):
        """Coerce raw strings into enums."""
        if isinstance(self.fitness_goal, str):
            self.fitness_goal = FitnessGoal(self.fitness_goal)
        if isinstance(self.experience_level, str):
            self.experience_level = ExperienceLevel(self.experience_level)
        self.workout_days = [
            d.value if isinstance(d, Weekday) else d for d in self.workout_days
        ]
        self.body_focus = [BodyFocus(f) for f in self.body_focus]


# ============================================================================
# Pydantic schemas for API
# ============================================================================

class WorkoutPreferencesSchema(BaseModel):
    """Plan generation request."""
    fitness_goal: FitnessGoal
    workout_days: List[Weekday] = Field(..., min_length=1)
    workout_duration: int = Field(..., gt=0)
    body_focus: List[BodyFocus] = Field(default_factory=list)
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER

    def to_preferences(self) -> WorkoutPreferences:
        return WorkoutPreferences(
            fitness_goal=self.fitness_goal,
            workout_days=[d.value for d in self.workout_days],
            workout_duration=self.workout_duration,
            body_focus=list(self.body_focus),
            experience_level=self.experience_level,
        )


class PrescribedExerciseSchema(BaseModel):
    name: str
    sets: int
    reps: str
    muscle_group: MuscleGroup


class WorkoutDaySchema(BaseModel):
    day: str
    focus: str
    exercises: List[PrescribedExerciseSchema]


class WorkoutPlanSchema(BaseModel):
    """A generated plan."""
    name: str
    difficulty: ExperienceLevel
    weekly_schedule: List[WorkoutDaySchema]
    avg_duration: int
    total_exercises: int
    description: str
    highlights: List[str]
    archetype: PlanArchetype


class WorkoutPlansResponseSchema(BaseModel):
    """Three candidate plans."""
    plans: List[WorkoutPlanSchema]
    focus_mode: FocusMode


class ExerciseSchema(BaseModel):
    name: str
    equipment: Equipment
    difficulty: ExperienceLevel
