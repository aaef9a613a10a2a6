"""
Weekly strength plan generation.

Three fixed archetypes are built from the athlete's available days:
- Full Body Strength: first 3 days, every day full body
- Upper/Lower Split: first 4 days, alternating upper and lower
- Push/Pull/Legs: up to 6 days, rotating push, pull and legs

Exercises are drawn at random from the catalog, so two calls with the same
preferences can pick different movements. Pass a seeded random.Random (or a
seed) for reproducible output.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..exceptions import PlanValidationError
from ..models.workouts import (
    ExerciseCatalogEntry,
    ExperienceLevel,
    FitnessGoal,
    FocusMode,
    MuscleGroup,
    PlanArchetype,
    PrescribedExercise,
    SetsReps,
    WorkoutDay,
    WorkoutPlan,
    WorkoutPreferences,
)
from .catalog import EXERCISE_CATALOG, filter_by_experience

logger = logging.getLogger(__name__)

PLANS_PER_REQUEST = 3
EXERCISES_PER_DAY = 6
EXERCISES_SINGLE_GROUP = 5


SETS_REPS_TABLE: Dict[FitnessGoal, Dict[ExperienceLevel, SetsReps]] = {
    FitnessGoal.GAIN_MUSCLE: {
        ExperienceLevel.BEGINNER: SetsReps(3, "8-12"),
        ExperienceLevel.INTERMEDIATE: SetsReps(4, "8-12"),
        ExperienceLevel.ADVANCED: SetsReps(4, "6-10"),
    },
    FitnessGoal.LOSE_FAT: {
        ExperienceLevel.BEGINNER: SetsReps(3, "12-15"),
        ExperienceLevel.INTERMEDIATE: SetsReps(3, "12-15"),
        ExperienceLevel.ADVANCED: SetsReps(4, "12-15"),
    },
    FitnessGoal.BODY_RECOMPOSITION: {
        ExperienceLevel.BEGINNER: SetsReps(3, "10-12"),
        ExperienceLevel.INTERMEDIATE: SetsReps(4, "10-12"),
        ExperienceLevel.ADVANCED: SetsReps(4, "8-12"),
    },
}

DEFAULT_SETS_REPS = SetsReps(3, "10-12")


@dataclass(frozen=True)
class DayTemplate:
    """Focus label and muscle groups for one archetype day."""

    focus: str
    groups: Tuple[MuscleGroup, ...]


FULL_BODY_DAY = DayTemplate(
    "Full Body",
    (MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.LEGS, MuscleGroup.SHOULDERS),
)
UPPER_BODY_DAY = DayTemplate(
    "Upper Body",
    (MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS, MuscleGroup.ARMS),
)
LOWER_BODY_DAY = DayTemplate(
    "Lower Body",
    (MuscleGroup.LEGS, MuscleGroup.GLUTES, MuscleGroup.CORE),
)
PUSH_DAY = DayTemplate(
    "Push (Chest, Shoulders, Triceps)",
    (MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.ARMS),
)
PULL_DAY = DayTemplate(
    "Pull (Back, Biceps)",
    (MuscleGroup.BACK, MuscleGroup.ARMS),
)
LEGS_CORE_DAY = DayTemplate(
    "Legs & Core",
    (MuscleGroup.LEGS, MuscleGroup.GLUTES, MuscleGroup.CORE),
)

UPPER_LOWER_ROTATION = (UPPER_BODY_DAY, LOWER_BODY_DAY, UPPER_BODY_DAY, LOWER_BODY_DAY)
PUSH_PULL_LEGS_ROTATION = (PUSH_DAY, PULL_DAY, LEGS_CORE_DAY)


def get_sets_reps(goal: FitnessGoal, experience_level: ExperienceLevel) -> SetsReps:
    """
    Look up the set/rep prescription for a goal and experience level.

    Unknown combinations get 3 x 10-12.
    """
    return SETS_REPS_TABLE.get(goal, {}).get(experience_level, DEFAULT_SETS_REPS)


def exercises_per_group(group_count: int) -> int:
    """Exercises to pick per muscle group for a day training group_count groups."""
    if group_count == 1:
        return EXERCISES_SINGLE_GROUP
    return EXERCISES_PER_DAY // group_count


def select_exercises(
    muscle_group: MuscleGroup,
    count: int,
    experience_level: ExperienceLevel,
    rng: Optional[random.Random] = None,
) -> List[ExerciseCatalogEntry]:
    """
    Pick up to count exercises for a muscle group without repeats.

    The level-filtered pool is shuffled and the first count entries are
    taken; a smaller pool is returned whole.
    """
    rng = rng or random.Random()
    pool = filter_by_experience(EXERCISE_CATALOG.get(muscle_group, ()), experience_level)
    rng.shuffle(pool)
    return pool[:count]


def format_day_label(day: str) -> str:
    """Capitalize the first letter of a weekday ("monday" -> "Monday")."""
    return day[:1].upper() + day[1:]


def create_workout_day(
    day: str,
    focus: str,
    muscle_groups: Sequence[MuscleGroup],
    goal: FitnessGoal,
    experience_level: ExperienceLevel,
    rng: Optional[random.Random] = None,
) -> WorkoutDay:
    """
    Build one session from a list of muscle groups.

    Every exercise in the day gets the same set/rep prescription.
    """
    rng = rng or random.Random()
    per_group = exercises_per_group(len(muscle_groups))
    sets_reps = get_sets_reps(goal, experience_level)

    exercises: List[PrescribedExercise] = []
    for group in muscle_groups:
        for entry in select_exercises(group, per_group, experience_level, rng):
            exercises.append(
                PrescribedExercise(
                    name=entry.name,
                    sets=sets_reps.sets,
                    reps=sets_reps.reps,
                    muscle_group=group,
                )
            )

    return WorkoutDay(day=format_day_label(day), focus=focus, exercises=tuple(exercises))


def resolve_focus_groups(
    preferences: WorkoutPreferences,
    mode: FocusMode = FocusMode.PARITY,
) -> Optional[FrozenSet[MuscleGroup]]:
    """
    Muscle groups covered by the user's focus areas, or None to ignore them.

    Parity mode always ignores focus areas. Focused mode with no focus areas
    also returns None.
    """
    if FocusMode(mode) == FocusMode.PARITY or not preferences.body_focus:
        return None
    groups = set()
    for focus in preferences.body_focus:
        groups.update(focus.muscle_groups)
    return frozenset(groups)


def _day_groups(
    template: DayTemplate,
    focus_groups: Optional[FrozenSet[MuscleGroup]],
) -> Tuple[MuscleGroup, ...]:
    if focus_groups is None:
        return template.groups
    narrowed = tuple(g for g in template.groups if g in focus_groups)
    # A day with no overlap keeps its archetype groups
    return narrowed or template.groups


def _build_day(
    day: str,
    template: DayTemplate,
    preferences: WorkoutPreferences,
    rng: random.Random,
    focus_groups: Optional[FrozenSet[MuscleGroup]],
) -> WorkoutDay:
    return create_workout_day(
        day,
        template.focus,
        _day_groups(template, focus_groups),
        preferences.fitness_goal,
        preferences.experience_level,
        rng,
    )


def generate_plan_a(
    preferences: WorkoutPreferences,
    rng: Optional[random.Random] = None,
    mode: FocusMode = FocusMode.PARITY,
) -> WorkoutPlan:
    """
    Full Body Strength on the first three available days.

    With fewer than three days the plan simply has fewer sessions.
    """
    rng = rng or random.Random()
    focus_groups = resolve_focus_groups(preferences, mode)
    schedule = tuple(
        _build_day(day, FULL_BODY_DAY, preferences, rng, focus_groups)
        for day in preferences.workout_days[:3]
    )

    return WorkoutPlan(
        name="Full Body Strength",
        difficulty=preferences.experience_level,
        weekly_schedule=schedule,
        avg_duration=preferences.workout_duration,
        description="A balanced full-body routine hitting all major muscle groups 3 times per week.",
        highlights=(
            "Perfect for beginners and time-efficient",
            "Balanced muscle development",
            "High frequency for each muscle group",
            "Flexible scheduling",
        ),
        archetype=PlanArchetype.FULL_BODY,
    )


def generate_plan_b(
    preferences: WorkoutPreferences,
    rng: Optional[random.Random] = None,
    mode: FocusMode = FocusMode.PARITY,
) -> WorkoutPlan:
    """Upper/Lower Split on the first four days: Upper, Lower, Upper, Lower."""
    rng = rng or random.Random()
    focus_groups = resolve_focus_groups(preferences, mode)
    schedule = tuple(
        _build_day(day, template, preferences, rng, focus_groups)
        for day, template in zip(preferences.workout_days[:4], UPPER_LOWER_ROTATION)
    )

    return WorkoutPlan(
        name="Upper/Lower Split",
        difficulty=preferences.experience_level,
        weekly_schedule=schedule,
        avg_duration=preferences.workout_duration,
        description="Alternate between upper and lower body workouts for optimal recovery and growth.",
        highlights=(
            "Great for intermediate lifters",
            "Adequate recovery between sessions",
            "Focus on compound movements",
            "Balanced upper/lower development",
        ),
        archetype=PlanArchetype.UPPER_LOWER,
    )


def generate_plan_c(
    preferences: WorkoutPreferences,
    rng: Optional[random.Random] = None,
    mode: FocusMode = FocusMode.PARITY,
) -> WorkoutPlan:
    """
    Push/Pull/Legs on up to six days.

    Day i trains push, pull or legs & core according to i mod 3. The plan is
    labelled one level above a beginner and advanced otherwise.
    """
    rng = rng or random.Random()
    focus_groups = resolve_focus_groups(preferences, mode)
    schedule = tuple(
        _build_day(
            day,
            PUSH_PULL_LEGS_ROTATION[index % len(PUSH_PULL_LEGS_ROTATION)],
            preferences,
            rng,
            focus_groups,
        )
        for index, day in enumerate(preferences.workout_days[:6])
    )

    if preferences.experience_level == ExperienceLevel.BEGINNER:
        difficulty = ExperienceLevel.INTERMEDIATE
    else:
        difficulty = ExperienceLevel.ADVANCED

    return WorkoutPlan(
        name="Push/Pull/Legs",
        difficulty=difficulty,
        weekly_schedule=schedule,
        avg_duration=preferences.workout_duration,
        description="Popular split focusing on movement patterns for maximum muscle growth.",
        highlights=(
            "Ideal for advanced lifters",
            "High training volume",
            "Excellent muscle isolation",
            "Flexible frequency (3x or 6x/week)",
        ),
        archetype=PlanArchetype.PUSH_PULL_LEGS,
    )


def generate_workout_plans(
    preferences: WorkoutPreferences,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    mode: FocusMode = FocusMode.PARITY,
) -> List[WorkoutPlan]:
    """
    Generate exactly three candidate plans.

    Full Body is always built. Upper/Lower needs at least 4 days and
    Push/Pull/Legs at least 3. Missing slots are filled with copies of the
    first plan named "<name> - Variation N".

    Args:
        preferences: Goal, schedule and experience inputs
        rng: Random source for exercise selection
        seed: Seed for a fresh random source when rng is not given
        mode: Whether body focus areas narrow the archetypes

    Returns:
        List of three WorkoutPlan objects

    Raises:
        PlanValidationError: If no workout days are given
    """
    if not preferences.workout_days:
        raise PlanValidationError(
            "At least one workout day is required",
            field="workout_days",
        )

    if rng is None:
        rng = random.Random(seed)
    mode = FocusMode(mode)
    day_count = len(preferences.workout_days)

    plans = [generate_plan_a(preferences, rng, mode)]
    if day_count >= 4:
        plans.append(generate_plan_b(preferences, rng, mode))
    if day_count >= 3:
        plans.append(generate_plan_c(preferences, rng, mode))

    while len(plans) < PLANS_PER_REQUEST:
        logger.debug(f"Padding plan list with variation {len(plans)} for {day_count} day(s)")
        plans.append(replace(plans[0], name=f"{plans[0].name} - Variation {len(plans)}"))

    logger.info(
        f"Generated plans {[p.name for p in plans]} for {day_count} day(s), "
        f"goal={preferences.fitness_goal.value}, level={preferences.experience_level.value}, "
        f"mode={mode.value}"
    )
    return plans
