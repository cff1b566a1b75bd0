from __future__ import annotations

import random
import re
from typing import List, Optional, Tuple

from fitplan.domains.goals import classify_goal
from fitplan.domains.nutrition.contract import (
    FALLBACK_SLOT,
    GOAL_MEAL_NOTES,
    MEAL_TEMPLATES,
    NO_RESTRICTIONS,
    RESTRICTION_RULES,
    MealTemplate,
    meal_distribution,
)
from fitplan.domains.nutrition.schemas import MealDraft, NutritionTargets
from fitplan.domains.nutrition.services.calculator import round_half_up
from fitplan.shared.config import DAYS_PER_CYCLE


def pick_template(meal_time: str, rng: random.Random) -> MealTemplate:
    templates = MEAL_TEMPLATES.get(meal_time) or MEAL_TEMPLATES[FALLBACK_SLOT]
    return templates[rng.randrange(len(templates))]


def apply_restrictions(name: str, recipe: str, restrictions: Optional[str]) -> Tuple[str, str]:
    """Prefix a label and swap ingredients for every restriction mentioned."""
    text = (restrictions or "").lower()
    if not text or text == NO_RESTRICTIONS.lower():
        return name, recipe

    for rule in RESTRICTION_RULES:
        if not any(t in text for t in rule.triggers):
            continue
        name = f"{rule.label} {name}"
        for pattern, replacement in rule.substitutions:
            recipe = re.sub(pattern, replacement, recipe, count=1)
    return name, recipe


def describe_meal(description: str, goal: str, calories: int, protein: int, carbs: int, fat: int) -> str:
    note = GOAL_MEAL_NOTES.get(classify_goal(goal))
    if note:
        description = f"{description} - {note}"
    return (
        f"{description} Contains approximately {calories} calories, "
        f"{protein}g protein, {carbs}g carbs, and {fat}g fat."
    )


def build_meal_plan(
    targets: NutritionTargets,
    goal: str,
    restrictions: Optional[str],
    rng: random.Random,
    days: int = DAYS_PER_CYCLE,
) -> List[MealDraft]:
    """days x slots entries; each macro is scaled and rounded on its own."""
    meals: List[MealDraft] = []
    for day in range(1, days + 1):
        for meal_time, percentage in meal_distribution(targets.meals_per_day):
            share = percentage / 100
            calories = round_half_up(targets.daily_calories * share)
            protein = round_half_up(targets.protein_grams * share)
            carbs = round_half_up(targets.carbs_grams * share)
            fat = round_half_up(targets.fat_grams * share)

            name, description, recipe = pick_template(meal_time, rng)
            name, recipe = apply_restrictions(name, recipe, restrictions)

            meals.append(
                MealDraft(
                    day_number=day,
                    meal_time=meal_time,
                    percentage=percentage,
                    name=name,
                    description=describe_meal(description, goal, calories, protein, carbs, fat),
                    calories=calories,
                    protein=protein,
                    carbs=carbs,
                    fat=fat,
                    recipe=recipe,
                )
            )
    return meals
