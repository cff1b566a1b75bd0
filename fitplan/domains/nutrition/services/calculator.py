from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional

from fitplan.domains.goals import classify_goal
from fitplan.domains.nutrition.contract import (
    ACTIVITY_MULTIPLIERS,
    ADVANCED_MIN_MEALS,
    BEGINNER_MAX_MEALS,
    BMR_MALE_OFFSET,
    BMR_OTHER_OFFSET,
    GOAL_POLICIES,
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    MIN_CARBS_GRAMS,
    SEDENTARY_MULTIPLIER,
)
from fitplan.domains.nutrition.schemas import NutritionTargets
from fitplan.domains.profile import ProfileSnapshot

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round half up; built-in round() rounds half to even."""
    return math.floor(value + 0.5)


def basal_metabolic_rate(weight: float, height: float, age: int, gender: str) -> float:
    """Mifflin-St Jeor."""
    offset = BMR_MALE_OFFSET if (gender or "").strip().lower() == "male" else BMR_OTHER_OFFSET
    return 10 * weight + 6.25 * height - 5 * age + offset


def activity_multiplier(activity_level: str) -> float:
    level = (activity_level or "").lower()
    for fragment, multiplier in ACTIVITY_MULTIPLIERS:
        if fragment in level:
            return multiplier
    return SEDENTARY_MULTIPLIER


def clamp_meals(meals_per_day: int, experience_level: str) -> int:
    if experience_level == "beginner":
        return min(meals_per_day, BEGINNER_MAX_MEALS)
    if experience_level == "advanced":
        return max(meals_per_day, ADVANCED_MIN_MEALS)
    return meals_per_day


def calculate_targets(profile: ProfileSnapshot, today: Optional[date] = None) -> NutritionTargets:
    weight = profile.weight
    bmr = basal_metabolic_rate(weight, profile.height, profile.age(today), profile.gender)
    tdee = round_half_up(bmr * activity_multiplier(profile.activity_level))

    policy = GOAL_POLICIES[classify_goal(profile.fitness_goal)]
    daily_calories = round_half_up(tdee * policy.calorie_factor)

    protein = round_half_up(weight * policy.protein_g_per_kg)
    fat = round_half_up(weight * policy.fat_g_per_kg)
    remaining = daily_calories - protein * KCAL_PER_G_PROTEIN - fat * KCAL_PER_G_FAT
    carbs = max(MIN_CARBS_GRAMS, round_half_up(remaining / KCAL_PER_G_CARBS))

    targets = NutritionTargets(
        bmr=bmr,
        tdee=tdee,
        daily_calories=daily_calories,
        protein_grams=protein,
        carbs_grams=carbs,
        fat_grams=fat,
        meals_per_day=clamp_meals(policy.meals_per_day, profile.experience_level),
    )
    logger.info(
        "[NUTRITION] user %s: bmr=%.2f tdee=%d calories=%d P/C/F=%d/%d/%d meals=%d",
        profile.user_id, bmr, tdee, daily_calories, protein, carbs, fat, targets.meals_per_day,
    )
    return targets
