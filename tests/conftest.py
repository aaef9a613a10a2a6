"""Pytest configuration and fixtures."""

import random

import pytest

from fitness_planner.config import Settings
from fitness_planner.models.nutrition import (
    ActivityLevel,
    BiometricProfile,
    MacroPreference,
    Sex,
    WeightGoal,
)
from fitness_planner.models.workouts import (
    ExperienceLevel,
    FitnessGoal,
    WorkoutPreferences,
)


ALL_DAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


@pytest.fixture
def settings():
    """Default settings, isolated from any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def male_profile():
    """25 year old male, 180 cm, 80 kg, sedentary, maintaining."""
    return BiometricProfile(
        age=25,
        sex=Sex.MALE,
        height_cm=180.0,
        weight_kg=80.0,
        activity_level=ActivityLevel.SEDENTARY,
        weight_goal=WeightGoal.MAINTAIN,
        weight_change_rate=0.0,
        macro_preference=MacroPreference.BALANCED,
    )


@pytest.fixture
def female_profile():
    """Same measurements as male_profile, moderately active."""
    return BiometricProfile(
        age=25,
        sex=Sex.FEMALE,
        height_cm=180.0,
        weight_kg=80.0,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        weight_goal=WeightGoal.MAINTAIN,
        weight_change_rate=0.0,
        macro_preference=MacroPreference.BALANCED,
    )


@pytest.fixture
def make_preferences():
    """Factory for WorkoutPreferences with sensible defaults."""
    def _make(
        days=None,
        goal=FitnessGoal.GAIN_MUSCLE,
        level=ExperienceLevel.INTERMEDIATE,
        duration=60,
        focus=None,
    ):
        return WorkoutPreferences(
            fitness_goal=goal,
            workout_days=list(days) if days is not None else ALL_DAYS[:3],
            workout_duration=duration,
            body_focus=list(focus or []),
            experience_level=level,
        )
    return _make


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)
