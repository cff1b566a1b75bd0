import pytest
from django.urls import reverse
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db


@pytest.fixture
def api_client():
    return APIClient()


def test_generate_workout_plan(api_client, user, configuration, exercise_pool):
    res = api_client.post(reverse("workout-plan-generate"), {"user_id": user.pk, "seed": 4}, format="json")

    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["plan"]["name"] == "Fat Burning Plan"
    sessions = body["plan"]["sessions"]
    assert len(sessions) == 3
    first = sessions[0]["exercises"][0]
    assert first["order"] == 1
    assert first["exercise_name"]


def test_generate_workout_plan_without_configuration(api_client, user):
    res = api_client.post(reverse("workout-plan-generate"), {"user_id": user.pk}, format="json")
    assert res.status_code == 422
    assert res.json()["issues"][0]["type"] == "no_configuration"


def test_generate_nutrition_plan(api_client, user):
    res = api_client.post(reverse("nutrition-plan-generate"), {"user_id": user.pk, "seed": 2}, format="json")

    assert res.status_code == 201
    plan = res.json()["plan"]
    assert plan["meals_per_day"] == 4
    assert len(plan["meals"]) == 28


def test_unknown_user_is_unprocessable(api_client):
    res = api_client.post(reverse("nutrition-plan-generate"), {"user_id": 777}, format="json")
    assert res.status_code == 422
    assert res.json()["issues"][0] == {"type": "profile_not_found", "detail": "User with ID 777 not found"}


@pytest.mark.parametrize("payload", [{}, {"user_id": 0}, {"user_id": "abc"}])
def test_invalid_body(api_client, payload):
    res = api_client.post(reverse("workout-plan-generate"), payload, format="json")
    assert res.status_code == 400
