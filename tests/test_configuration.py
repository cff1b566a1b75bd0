import pytest

from fitplan.domains.errors import NoConfigurationAvailable
from fitplan.domains.workout.services.configuration import find_configuration, resolve_configuration
from fitplan.models import AiConfiguration

from .conftest import config_payload


def _row(pk, goal, level, venue, **overrides):
    return AiConfiguration(
        id=pk, fitness_goal=goal, experience_level=level, workout_type=venue, **config_payload(**overrides)
    )


@pytest.fixture
def table():
    return [
        _row(1, "maintenance", "advanced", "gym"),
        _row(2, "weight_loss", "beginner", "gym"),
        _row(3, "weight_loss", "beginner", "home"),
        _row(4, "muscle_gain", "intermediate", "gym"),
    ]


@pytest.mark.parametrize(
    "goal, level, venue, expected_id, rule",
    [
        ("weight_loss", "beginner", "home", 3, "exact"),
        ("muscle_gain", "intermediate", "home", 4, "goal_experience"),
        ("muscle_gain", "advanced", "home", 4, "goal"),
        ("strength", "beginner", "home", 2, "experience"),
        ("strength", "expert", "home", 1, "any"),
    ],
)
def test_cascade_picks_most_specific_rule(table, goal, level, venue, expected_id, rule):
    row, rule_name = find_configuration(goal, level, venue, table)
    assert row.pk == expected_id
    assert rule_name == rule


def test_any_rule_uses_table_order(table):
    row, _ = find_configuration("yoga", "expert", "park", list(reversed(table)))
    assert row.pk == 4


def test_resolve_returns_validated_spec(table):
    spec = resolve_configuration("weight_loss", "beginner", "home", table)
    assert spec.config_id == 3
    assert spec.exercise_count_range.min == 3
    assert spec.split_days() == [(1, "chest_triceps"), (2, "rest"), (3, "legs")]


def test_empty_table_is_no_configuration():
    with pytest.raises(NoConfigurationAvailable):
        resolve_configuration("weight_loss", "beginner", "home", [])


def test_malformed_row_is_no_configuration():
    broken = _row(9, "weight_loss", "beginner", "home", exercise_count_range={"min": 5, "max": 2})
    with pytest.raises(NoConfigurationAvailable):
        resolve_configuration("weight_loss", "beginner", "home", [broken])


@pytest.mark.parametrize(
    "split",
    [
        {"day0": "legs", "day1": "rest"},
        {"day1": "legs", "day8": "chest"},
        {"day1": "legs", "Day 1": "chest"},
        {f"session{i}": "legs" for i in range(1, 9)},
    ],
)
def test_split_days_outside_week_are_no_configuration(split):
    broken = _row(9, "weight_loss", "beginner", "home", muscle_group_split=split)
    with pytest.raises(NoConfigurationAvailable):
        resolve_configuration("weight_loss", "beginner", "home", [broken])


def test_split_without_trailing_digit_uses_position(make_spec):
    spec = make_spec(muscle_group_split={"monday": "Chest", "day 4": "REST", "wednesday": "legs"})
    assert spec.split_days() == [(1, "chest"), (4, "rest"), (3, "legs")]


@pytest.mark.django_db
def test_resolve_reads_table_when_not_given(configuration):
    spec = resolve_configuration("anything", "beginner", "gym")
    assert spec.config_id == configuration.pk


@pytest.mark.django_db
def test_resolve_on_empty_database():
    with pytest.raises(NoConfigurationAvailable):
        resolve_configuration("weight_loss", "beginner", "home")
