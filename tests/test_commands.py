import json
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from fitplan.models import AiConfiguration, Exercise, NutritionPlan, WorkoutPlan

from .conftest import config_payload

pytestmark = pytest.mark.django_db


def _write_json(tmp_path, rows):
    path = tmp_path / "configs.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


def _config_row(**overrides):
    row = {"fitness_goal": "Muscle_Gain", "experience_level": "beginner", "workout_type": "gym", **config_payload()}
    row.update(overrides)
    return row


# ------------------------------
# seed_ai_configurations
# ------------------------------

def test_seed_bundled_configurations():
    out = StringIO()
    call_command("seed_ai_configurations", stdout=out)
    assert AiConfiguration.objects.count() == 5
    assert "created 5" in out.getvalue()


def test_seed_is_an_upsert(tmp_path):
    path = _write_json(tmp_path, [_config_row()])
    call_command("seed_ai_configurations", path=str(path), stdout=StringIO())

    changed = _config_row(exercise_count_range={"min": 5, "max": 6})
    call_command("seed_ai_configurations", path=str(_write_json(tmp_path, [changed])), stdout=StringIO())

    row = AiConfiguration.objects.get()
    assert row.fitness_goal == "muscle_gain"
    assert row.exercise_count_range == {"min": 5, "max": 6}


def test_seed_dry_run_writes_nothing(tmp_path):
    out = StringIO()
    call_command("seed_ai_configurations", path=str(_write_json(tmp_path, [_config_row()])), dry_run=True, stdout=out)
    assert "DRY RUN OK" in out.getvalue()
    assert not AiConfiguration.objects.exists()


@pytest.mark.parametrize(
    "bad",
    [
        {"experience_level": "expert"},
        {"workout_type": "park"},
        {"rest_period_range": {"min": 90, "max": 30}},
        {"muscle_group_split": {}},
        {"muscle_group_split": {"day0": "legs", "day1": "rest"}},
    ],
)
def test_seed_rejects_invalid_rows(tmp_path, bad):
    path = _write_json(tmp_path, [_config_row(workout_type="home"), _config_row(**bad)])
    with pytest.raises(CommandError):
        call_command("seed_ai_configurations", path=str(path), stdout=StringIO())
    assert not AiConfiguration.objects.exists()


def test_seed_missing_file(tmp_path):
    with pytest.raises(CommandError):
        call_command("seed_ai_configurations", path=str(tmp_path / "nope.json"), stdout=StringIO())


# ------------------------------
# import_exercises
# ------------------------------

CSV = """name,description,target_muscle_group,equipment,difficulty,workout_type
Push-up,Classic push-up,Chest,,Beginner,home
Dumbbell Bench Press,,"Chest, Upper Arms",,intermediate,gym
Goblet Squat,,"Thighs, Glute",kettlebell,intermediate,gym
Mystery Move,,Chest,,expert,gym
"""


def test_import_exercises(tmp_path):
    path = tmp_path / "exercises.csv"
    path.write_text(CSV, encoding="utf-8")
    out = StringIO()
    call_command("import_exercises", csv=str(path), stdout=out)

    assert "created=3" in out.getvalue()
    assert "skipped=1" in out.getvalue()
    push_up = Exercise.objects.get(name="Push-up")
    assert push_up.difficulty == "beginner"
    assert push_up.equipment == "bodyweight"
    press = Exercise.objects.get(name="Dumbbell Bench Press")
    assert press.target_muscle_group == "chest, arms"
    assert press.equipment == "dumbbell"
    squat = Exercise.objects.get(name="Goblet Squat")
    assert squat.target_muscle_group == "legs, glutes"
    assert squat.equipment == "kettlebell"

    call_command("import_exercises", csv=str(path), stdout=out)
    assert Exercise.objects.count() == 3


def test_import_requires_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("name,difficulty\nPush-up,beginner\n", encoding="utf-8")
    with pytest.raises(CommandError):
        call_command("import_exercises", csv=str(path), stdout=StringIO())


# ------------------------------
# generate_plans
# ------------------------------

def test_generate_plans(user, configuration, exercise_pool):
    out = StringIO()
    call_command("generate_plans", user_id=user.pk, seed=3, stdout=out)
    assert WorkoutPlan.objects.filter(user=user).count() == 1
    assert NutritionPlan.objects.filter(user=user).count() == 1
    assert f"workout plan for user {user.pk}: generated" in out.getvalue()


def test_generate_plans_reports_failure(user):
    out = StringIO()
    with pytest.raises(CommandError):
        call_command("generate_plans", user_id=user.pk, kind="workout", stdout=out)
    assert "FAILED" in out.getvalue()
