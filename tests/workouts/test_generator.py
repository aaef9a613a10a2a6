"""Tests for workout plan generation."""

import random
from dataclasses import FrozenInstanceError

import pytest

from fitness_planner.exceptions import PlanValidationError
from fitness_planner.models.workouts import (
    BodyFocus,
    ExperienceLevel,
    FitnessGoal,
    FocusMode,
    MuscleGroup,
    PlanArchetype,
    SetsReps,
    Weekday,
)
from fitness_planner.workouts.catalog import EXERCISE_CATALOG
from fitness_planner.workouts.generator import (
    DEFAULT_SETS_REPS,
    create_workout_day,
    exercises_per_group,
    format_day_label,
    generate_plan_a,
    generate_plan_b,
    generate_plan_c,
    generate_workout_plans,
    get_sets_reps,
    resolve_focus_groups,
    select_exercises,
)


ALL_DAYS = [day.value for day in Weekday]


def _catalog_names(group):
    return {entry.name for entry in EXERCISE_CATALOG[group]}


class TestSetsReps:
    """Tests for the set/rep prescription table."""

    @pytest.mark.parametrize("goal,level,expected", [
        (FitnessGoal.GAIN_MUSCLE, ExperienceLevel.BEGINNER, SetsReps(3, "8-12")),
        (FitnessGoal.GAIN_MUSCLE, ExperienceLevel.INTERMEDIATE, SetsReps(4, "8-12")),
        (FitnessGoal.GAIN_MUSCLE, ExperienceLevel.ADVANCED, SetsReps(4, "6-10")),
        (FitnessGoal.LOSE_FAT, ExperienceLevel.BEGINNER, SetsReps(3, "12-15")),
        (FitnessGoal.LOSE_FAT, ExperienceLevel.INTERMEDIATE, SetsReps(3, "12-15")),
        (FitnessGoal.LOSE_FAT, ExperienceLevel.ADVANCED, SetsReps(4, "12-15")),
        (FitnessGoal.BODY_RECOMPOSITION, ExperienceLevel.BEGINNER, SetsReps(3, "10-12")),
        (FitnessGoal.BODY_RECOMPOSITION, ExperienceLevel.INTERMEDIATE, SetsReps(4, "10-12")),
        (FitnessGoal.BODY_RECOMPOSITION, ExperienceLevel.ADVANCED, SetsReps(4, "8-12")),
    ])
    def test_table(self, goal, level, expected):
        assert get_sets_reps(goal, level) == expected

    def test_unknown_combination_uses_default(self):
        assert get_sets_reps("powerlifting", "elite") == DEFAULT_SETS_REPS
        assert DEFAULT_SETS_REPS == SetsReps(3, "10-12")


class TestExerciseSelection:
    """Tests for per-group exercise selection."""

    @pytest.mark.parametrize("groups,expected", [(1, 5), (2, 3), (3, 2), (4, 1)])
    def test_exercises_per_group(self, groups, expected):
        assert exercises_per_group(groups) == expected

    def test_no_duplicates(self, rng):
        picked = select_exercises(MuscleGroup.CHEST, 5, ExperienceLevel.ADVANCED, rng)
        names = [e.name for e in picked]
        assert len(names) == 5
        assert len(set(names)) == 5
        assert set(names) <= _catalog_names(MuscleGroup.CHEST)

    def test_small_pool_returned_whole(self, rng):
        """Beginners see 5 core exercises, so asking for 10 yields 5."""
        picked = select_exercises(MuscleGroup.CORE, 10, ExperienceLevel.BEGINNER, rng)
        assert len(picked) == 5
        assert "Hanging Leg Raises" not in [e.name for e in picked]

    def test_beginner_never_gets_advanced(self):
        rng = random.Random(7)
        for _ in range(50):
            picked = select_exercises(MuscleGroup.BACK, 5, ExperienceLevel.BEGINNER, rng)
            assert all(e.difficulty != ExperienceLevel.ADVANCED for e in picked)

    def test_seeded_selection_is_reproducible(self):
        first = select_exercises(MuscleGroup.LEGS, 3, ExperienceLevel.INTERMEDIATE, random.Random(42))
        second = select_exercises(MuscleGroup.LEGS, 3, ExperienceLevel.INTERMEDIATE, random.Random(42))
        assert first == second

    def test_catalog_not_reordered(self, rng):
        before = EXERCISE_CATALOG[MuscleGroup.ARMS]
        select_exercises(MuscleGroup.ARMS, 6, ExperienceLevel.ADVANCED, rng)
        assert EXERCISE_CATALOG[MuscleGroup.ARMS] == before


class TestWorkoutDay:
    """Tests for building a single session."""

    def test_day_label_capitalized(self):
        assert format_day_label("monday") == "Monday"
        assert format_day_label("") == ""

    def test_uniform_prescription(self, rng):
        day = create_workout_day(
            "tuesday",
            "Pull",
            [MuscleGroup.BACK, MuscleGroup.ARMS],
            FitnessGoal.LOSE_FAT,
            ExperienceLevel.ADVANCED,
            rng,
        )
        assert day.day == "Tuesday"
        assert day.focus == "Pull"
        assert len(day.exercises) == 6
        assert {(e.sets, e.reps) for e in day.exercises} == {(4, "12-15")}
        assert day.muscle_groups == [MuscleGroup.BACK, MuscleGroup.ARMS]

    def test_single_group_day_gets_five(self, rng):
        day = create_workout_day(
            "friday", "Legs", [MuscleGroup.LEGS],
            FitnessGoal.GAIN_MUSCLE, ExperienceLevel.INTERMEDIATE, rng,
        )
        assert len(day.exercises) == 5


class TestPlanA:
    """Tests for the Full Body Strength plan."""

    def test_three_full_body_days(self, make_preferences, rng):
        plan = generate_plan_a(make_preferences(days=ALL_DAYS[:5]), rng)
        assert plan.name == "Full Body Strength"
        assert plan.archetype == PlanArchetype.FULL_BODY
        assert [d.day for d in plan.weekly_schedule] == ["Monday", "Tuesday", "Wednesday"]
        for day in plan.weekly_schedule:
            assert day.focus == "Full Body"
            assert len(day.exercises) == 4
            assert day.muscle_groups == [
                MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.LEGS, MuscleGroup.SHOULDERS,
            ]
        assert plan.total_exercises == 12

    def test_fewer_days_fewer_sessions(self, make_preferences, rng):
        plan = generate_plan_a(make_preferences(days=["thursday"]), rng)
        assert [d.day for d in plan.weekly_schedule] == ["Thursday"]

    def test_difficulty_and_duration_follow_preferences(self, make_preferences, rng):
        plan = generate_plan_a(
            make_preferences(level=ExperienceLevel.ADVANCED, duration=45), rng
        )
        assert plan.difficulty == ExperienceLevel.ADVANCED
        assert plan.avg_duration == 45
        assert len(plan.highlights) == 4

    def test_days_follow_user_order(self, make_preferences, rng):
        plan = generate_plan_a(make_preferences(days=["saturday", "monday", "wednesday"]), rng)
        assert [d.day for d in plan.weekly_schedule] == ["Saturday", "Monday", "Wednesday"]


class TestPlanB:
    """Tests for the Upper/Lower Split plan."""

    def test_alternates_upper_lower(self, make_preferences, rng):
        plan = generate_plan_b(make_preferences(days=ALL_DAYS[:6]), rng)
        assert plan.archetype == PlanArchetype.UPPER_LOWER
        assert [d.focus for d in plan.weekly_schedule] == [
            "Upper Body", "Lower Body", "Upper Body", "Lower Body",
        ]
        upper, lower = plan.weekly_schedule[0], plan.weekly_schedule[1]
        assert len(upper.exercises) == 4
        assert len(lower.exercises) == 6
        assert lower.muscle_groups == [MuscleGroup.LEGS, MuscleGroup.GLUTES, MuscleGroup.CORE]


class TestPlanC:
    """Tests for the Push/Pull/Legs plan."""

    def test_rotation_and_volume(self, make_preferences, rng):
        plan = generate_plan_c(make_preferences(days=ALL_DAYS), rng)
        assert plan.archetype == PlanArchetype.PUSH_PULL_LEGS
        assert len(plan.weekly_schedule) == 6
        assert [d.focus for d in plan.weekly_schedule] == [
            "Push (Chest, Shoulders, Triceps)",
            "Pull (Back, Biceps)",
            "Legs & Core",
        ] * 2
        for day in plan.weekly_schedule:
            assert len(day.exercises) == 6
        assert plan.weekly_schedule[1].muscle_groups == [MuscleGroup.BACK, MuscleGroup.ARMS]

    @pytest.mark.parametrize("level,difficulty", [
        (ExperienceLevel.BEGINNER, ExperienceLevel.INTERMEDIATE),
        (ExperienceLevel.INTERMEDIATE, ExperienceLevel.ADVANCED),
        (ExperienceLevel.ADVANCED, ExperienceLevel.ADVANCED),
    ])
    def test_difficulty_label(self, make_preferences, rng, level, difficulty):
        plan = generate_plan_c(make_preferences(level=level), rng)
        assert plan.difficulty == difficulty

    def test_beginner_exercises_stay_beginner_safe(self, make_preferences):
        plan = generate_plan_c(
            make_preferences(days=ALL_DAYS, level=ExperienceLevel.BEGINNER), random.Random(3)
        )
        names = {e.name for d in plan.weekly_schedule for e in d.exercises}
        assert "Deadlifts" not in names
        assert "Hanging Leg Raises" not in names


class TestGenerateWorkoutPlans:
    """Tests for the three-plan orchestration."""

    @pytest.mark.parametrize("day_count", range(1, 8))
    def test_always_three_plans(self, make_preferences, day_count):
        plans = generate_workout_plans(make_preferences(days=ALL_DAYS[:day_count]), seed=1)
        assert len(plans) == 3

    def test_four_or_more_days(self, make_preferences):
        plans = generate_workout_plans(make_preferences(days=ALL_DAYS[:4]), seed=1)
        assert [p.name for p in plans] == ["Full Body Strength", "Upper/Lower Split", "Push/Pull/Legs"]

    def test_three_days_pads_once(self, make_preferences):
        plans = generate_workout_plans(make_preferences(days=ALL_DAYS[:3]), seed=1)
        assert [p.name for p in plans] == [
            "Full Body Strength",
            "Push/Pull/Legs",
            "Full Body Strength - Variation 2",
        ]
        assert plans[2].weekly_schedule == plans[0].weekly_schedule
        assert plans[2].archetype == PlanArchetype.FULL_BODY

    @pytest.mark.parametrize("day_count", [1, 2])
    def test_one_or_two_days_pads_twice(self, make_preferences, day_count):
        plans = generate_workout_plans(make_preferences(days=ALL_DAYS[:day_count]), seed=1)
        assert [p.name for p in plans] == [
            "Full Body Strength",
            "Full Body Strength - Variation 1",
            "Full Body Strength - Variation 2",
        ]
        assert len(plans[0].weekly_schedule) == day_count

    def test_empty_days_rejected(self, make_preferences):
        with pytest.raises(PlanValidationError) as exc_info:
            generate_workout_plans(make_preferences(days=[]))
        assert exc_info.value.details["field"] == "workout_days"

    def test_seed_is_reproducible(self, make_preferences):
        prefs = make_preferences(days=ALL_DAYS[:5])
        assert generate_workout_plans(prefs, seed=99) == generate_workout_plans(prefs, seed=99)

    def test_rng_takes_precedence_over_seed(self, make_preferences):
        prefs = make_preferences(days=ALL_DAYS[:5])
        a = generate_workout_plans(prefs, rng=random.Random(5), seed=1)
        b = generate_workout_plans(prefs, rng=random.Random(5), seed=2)
        assert a == b

    def test_parity_mode_ignores_focus(self, make_preferences):
        plain = make_preferences(days=ALL_DAYS[:4])
        focused = make_preferences(days=ALL_DAYS[:4], focus=[BodyFocus.ARMS])
        assert generate_workout_plans(plain, seed=8) == generate_workout_plans(focused, seed=8)

    def test_plans_are_immutable(self, make_preferences):
        plans = generate_workout_plans(make_preferences(), seed=1)
        with pytest.raises(FrozenInstanceError):
            plans[0].name = "Mine"

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_beginner_plans_exclude_advanced(self, make_preferences, seed):
        """Every day of all three plans stays within the beginner pool."""
        difficulty = {
            (group, entry.name): entry.difficulty
            for group, entries in EXERCISE_CATALOG.items()
            for entry in entries
        }
        prefs = make_preferences(days=ALL_DAYS, level=ExperienceLevel.BEGINNER)
        plans = generate_workout_plans(prefs, seed=seed)
        assert len(plans) == 3
        for plan in plans:
            for day in plan.weekly_schedule:
                for exercise in day.exercises:
                    tier = difficulty[(exercise.muscle_group, exercise.name)]
                    assert tier != ExperienceLevel.ADVANCED, (plan.name, day.day, exercise.name)

    def test_to_dict_shape(self, make_preferences):
        plan = generate_workout_plans(make_preferences(), seed=1)[0]
        data = plan.to_dict()
        assert data["difficulty"] == "intermediate"
        assert data["archetype"] == "full_body"
        assert data["total_exercises"] == 12
        assert data["weekly_schedule"][0]["exercises"][0]["muscle_group"] == "chest"


class TestFocusedMode:
    """Tests for focus areas narrowing the archetypes."""

    def test_resolve_parity_returns_none(self, make_preferences):
        prefs = make_preferences(focus=[BodyFocus.CHEST])
        assert resolve_focus_groups(prefs, FocusMode.PARITY) is None

    def test_resolve_without_focus_returns_none(self, make_preferences):
        assert resolve_focus_groups(make_preferences(), FocusMode.FOCUSED) is None

    def test_resolve_unions_focus_areas(self, make_preferences):
        prefs = make_preferences(focus=[BodyFocus.UPPER_BODY, BodyFocus.CORE])
        assert resolve_focus_groups(prefs, FocusMode.FOCUSED) == frozenset({
            MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS,
            MuscleGroup.ARMS, MuscleGroup.CORE,
        })

    def test_lower_body_focus_narrows_full_body_days(self, make_preferences):
        prefs = make_preferences(days=ALL_DAYS[:4], focus=[BodyFocus.LOWER_BODY])
        plans = generate_workout_plans(prefs, seed=4, mode=FocusMode.FOCUSED)
        for day in plans[0].weekly_schedule:
            assert day.muscle_groups == [MuscleGroup.LEGS]
            assert len(day.exercises) == 5

    def test_day_without_overlap_keeps_archetype(self, make_preferences):
        prefs = make_preferences(days=ALL_DAYS[:4], focus=[BodyFocus.LOWER_BODY])
        plans = generate_workout_plans(prefs, seed=4, mode=FocusMode.FOCUSED)
        upper = plans[1].weekly_schedule[0]
        assert upper.muscle_groups == [
            MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS, MuscleGroup.ARMS,
        ]

    def test_full_body_focus_changes_nothing_structurally(self, make_preferences):
        prefs = make_preferences(days=ALL_DAYS[:4], focus=[BodyFocus.FULL_BODY])
        focused = generate_workout_plans(prefs, seed=4, mode=FocusMode.FOCUSED)
        parity = generate_workout_plans(prefs, seed=4, mode=FocusMode.PARITY)
        assert focused == parity
