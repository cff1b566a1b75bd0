import random
from collections import defaultdict

import pytest

from fitplan.domains.nutrition.contract import MEAL_DISTRIBUTIONS, MEAL_TEMPLATES, meal_distribution
from fitplan.domains.nutrition.schemas import NutritionTargets
from fitplan.domains.nutrition.services.meals import (
    apply_restrictions,
    build_meal_plan,
    describe_meal,
    pick_template,
)


def _targets(meals_per_day):
    return NutritionTargets(
        bmr=1445.25, tdee=2240, daily_calories=1792,
        protein_grams=120, carbs_grams=220, fat_grams=48, meals_per_day=meals_per_day,
    )


@pytest.mark.parametrize("meals_per_day", [3, 4, 5, 6])
def test_seven_days_of_slots_summing_to_100(meals_per_day):
    meals = build_meal_plan(_targets(meals_per_day), "weight_loss", None, random.Random(0))
    assert len(meals) == 7 * meals_per_day

    by_day = defaultdict(list)
    for m in meals:
        by_day[m.day_number].append(m)
    assert sorted(by_day) == list(range(1, 8))
    for entries in by_day.values():
        assert sum(m.percentage for m in entries) == 100
        assert [m.meal_time for m in entries] == [slot for slot, _ in MEAL_DISTRIBUTIONS[meals_per_day]]


@pytest.mark.parametrize("meals_per_day", sorted(MEAL_DISTRIBUTIONS))
def test_distribution_tables_sum_to_100(meals_per_day):
    assert sum(p for _, p in MEAL_DISTRIBUTIONS[meals_per_day]) == 100


def test_unknown_meal_count_uses_three_meal_table():
    assert meal_distribution(7) == MEAL_DISTRIBUTIONS[3]


def test_macros_scaled_per_slot():
    meals = build_meal_plan(_targets(4), "maintenance", None, random.Random(0), days=1)
    breakfast, lunch, snack, dinner = meals
    assert (breakfast.calories, breakfast.protein, breakfast.carbs, breakfast.fat) == (448, 30, 55, 12)
    assert (snack.calories, snack.protein, snack.carbs, snack.fat) == (269, 18, 33, 7)
    assert lunch.calories == dinner.calories == 538


def test_days_can_be_shortened():
    meals = build_meal_plan(_targets(3), "maintenance", None, random.Random(0), days=2)
    assert {m.day_number for m in meals} == {1, 2}


def test_unknown_slot_falls_back_to_snacks():
    name, _, _ = pick_template("brunch", random.Random(0))
    assert name in {t[0] for t in MEAL_TEMPLATES["snack"]}


def test_same_seed_same_menu():
    first = build_meal_plan(_targets(5), "muscle_gain", None, random.Random(9))
    second = build_meal_plan(_targets(5), "muscle_gain", None, random.Random(9))
    assert [m.name for m in first] == [m.name for m in second]


def test_vegetarian_swaps_first_meat_only():
    name, recipe = apply_restrictions(
        "Lean Protein Bowl", "Grilled chicken breast, chicken stock and rice.", "Vegetarian"
    )
    assert name == "Vegetarian Lean Protein Bowl"
    assert recipe == "Grilled tofu or tempeh breast, chicken stock and rice."


def test_multiple_restrictions_stack_in_rule_order():
    name, recipe = apply_restrictions("Whole Grain Wrap", "whole grain wrap with cheese", "gluten, lactose")
    assert name == "Dairy-Free Gluten-Free Whole Grain Wrap"
    assert recipe == "gluten-free wrap with dairy-free cheese"


def test_vegan_replaces_dairy_terms():
    _, recipe = apply_restrictions("Smoothie", "Blend yogurt, milk and banana.", "VEGAN")
    assert recipe == "Blend coconut yogurt, almond milk and banana."


@pytest.mark.parametrize("restrictions", [None, "", "None", "none"])
def test_no_restrictions_leave_meal_untouched(restrictions):
    assert apply_restrictions("Power Salad", "Mix spinach, grilled chicken.", restrictions) == (
        "Power Salad", "Mix spinach, grilled chicken.",
    )


def test_description_with_goal_note_and_macros():
    text = describe_meal("Quick protein boost", "weight_loss", 269, 18, 33, 7)
    assert text == (
        "Quick protein boost - Calorie-controlled for weight management. "
        "Contains approximately 269 calories, 18g protein, 33g carbs, and 7g fat."
    )


def test_description_without_goal_note():
    text = describe_meal("Quick protein boost", "maintenance", 100, 10, 12, 3)
    assert text.startswith("Quick protein boost Contains approximately 100 calories")
