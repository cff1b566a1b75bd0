from __future__ import annotations

import random
from datetime import date
from decimal import Decimal

import pytest

from fitplan.domains.profile import ProfileSnapshot
from fitplan.domains.workout.schemas import GenerationConfigSpec
from fitplan.models import AiConfiguration, Exercise, UserProfile

DEFAULT_SPLIT = {"day1": "chest_triceps", "day2": "rest", "day3": "legs"}


def config_payload(**overrides):
    payload = {
        "muscle_group_split": dict(DEFAULT_SPLIT),
        "exercise_count_range": {"min": 3, "max": 4},
        "rest_period_range": {"min": 60, "max": 90},
        "set_ranges": {"compound": {"min": 3, "max": 4}, "isolation": {"min": 2, "max": 3}},
        "rep_ranges": {"compound": {"min": 6, "max": 10}, "isolation": {"min": 10, "max": 12}},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def make_profile():
    def _make(**overrides) -> ProfileSnapshot:
        fields = {
            "user_id": 1,
            "fitness_goal": "maintenance",
            "experience_level": "beginner",
            "workout_type": "home",
            "gender": "female",
            "height": 165.0,
            "weight": 60.0,
            "date_of_birth": date(1994, 6, 15),
            "activity_level": "moderately_active",
            "dietary_restrictions": None,
        }
        fields.update(overrides)
        return ProfileSnapshot(**fields)

    return _make


@pytest.fixture
def make_spec():
    def _make(**overrides) -> GenerationConfigSpec:
        return GenerationConfigSpec(config_id=1, **config_payload(**overrides))

    return _make


@pytest.fixture
def make_exercise():
    """Unsaved Exercise rows with explicit ids, for the pure selection helpers."""
    counter = {"id": 0}

    def _make(name, target, difficulty="beginner", workout_type="home") -> Exercise:
        counter["id"] += 1
        return Exercise(
            id=counter["id"],
            name=name,
            target_muscle_group=target,
            difficulty=difficulty,
            workout_type=workout_type,
        )

    return _make


# ------------------------------
# Database fixtures
# ------------------------------

@pytest.fixture
def user(db):
    return UserProfile.objects.create(
        full_name="Dana Reyes",
        email="dana@example.com",
        date_of_birth=date(1994, 6, 15),
        gender="Female",
        height=Decimal("165.00"),
        weight=Decimal("60.00"),
        fitness_goal="weight_loss",
        experience_level="intermediate",
        preferred_workout_type="home",
        activity_level="moderately_active",
    )


@pytest.fixture
def configuration(db):
    return AiConfiguration.objects.create(
        fitness_goal="weight_loss",
        experience_level="intermediate",
        workout_type="home",
        **config_payload(),
    )


@pytest.fixture
def exercise_pool(db):
    rows = [
        ("Push-up", "chest", "beginner"),
        ("Incline Push-up", "chest", "intermediate"),
        ("Dumbbell Floor Press", "chest, triceps", "intermediate"),
        ("Bench Dip", "triceps", "intermediate"),
        ("Diamond Push-up", "triceps", "advanced"),
        ("Bodyweight Squat", "legs", "beginner"),
        ("Walking Lunge", "legs", "intermediate"),
        ("Glute Bridge", "legs, glutes", "intermediate"),
        ("Calf Raise", "legs", "beginner"),
        ("Plank", "core", "beginner"),
    ]
    return [
        Exercise.objects.create(name=n, target_muscle_group=t, difficulty=d, workout_type="home")
        for n, t, d in rows
    ]
