import random

import pytest

from fitplan.domains.workout.contract import (
    ENDURANCE_ANY,
    MUSCLE_GAIN_ISOLATION,
    SPECIALIZED_PRESCRIPTIONS,
    STRENGTH_COMPOUND,
    WEIGHT_LOSS_ANY,
)
from fitplan.domains.workout.services.prescription import assign_prescriptions, prescription_ranges


@pytest.mark.parametrize(
    "name, goal, tag, expected",
    [
        ("Back Squat", "strength", "legs", STRENGTH_COMPOUND),
        ("Back Squat", "strength_endurance", "legs", STRENGTH_COMPOUND),
        ("Lateral Raise", "muscle_gain", "shoulders", MUSCLE_GAIN_ISOLATION),
        ("Back Squat", "weight_loss", "legs", WEIGHT_LOSS_ANY),
        ("Plank", "endurance", "core", ENDURANCE_ANY),
        # goal ranges win over the split label
        ("Burpee", "weight_loss", "tabata", WEIGHT_LOSS_ANY),
        ("Burpee", "maintenance", "tabata", SPECIALIZED_PRESCRIPTIONS["tabata"]),
        ("Walk", "maintenance", "active_recovery", SPECIALIZED_PRESCRIPTIONS["active_recovery"]),
    ],
)
def test_range_precedence(make_spec, name, goal, tag, expected):
    assert prescription_ranges(name, goal, tag, make_spec()) == expected


def test_config_ranges_are_the_last_fallback(make_spec):
    spec = make_spec()
    assert prescription_ranges("Push Press", "maintenance", "shoulders", spec) == ((3, 4), (6, 10), (60, 90))
    assert prescription_ranges("Lateral Raise", "maintenance", "shoulders", spec) == ((2, 3), (10, 12), (60, 90))


def test_values_within_bounds_and_orders_contiguous(make_spec, make_exercise):
    exercises = [make_exercise(n, "legs") for n in ("Back Squat", "Deadlift", "Leg Curl", "Calf Raise")]
    out = assign_prescriptions(exercises, "strength", "legs", make_spec(), random.Random(5))

    assert [p.order for p in out] == [1, 2, 3, 4]
    assert [p.exercise_id for p in out] == [ex.id for ex in exercises]
    squat = out[0]
    assert 4 <= squat.sets <= 5
    assert 3 <= squat.reps <= 6
    assert 180 <= squat.rest_period <= 240
    curl = out[2]
    assert 3 <= curl.sets <= 4
    assert 6 <= curl.reps <= 10
    assert 120 <= curl.rest_period <= 180


def test_fixed_tabata_prescription(make_spec, make_exercise):
    out = assign_prescriptions([make_exercise("Burpee", "full body")], "maintenance", "tabata", make_spec(), random.Random(1))
    assert out[0].sets == 8
    assert out[0].rest_period == 10
