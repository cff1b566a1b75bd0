from __future__ import annotations

import logging
from typing import Sequence

from django.db import DatabaseError, transaction

from fitplan.domains.errors import PersistenceFailure
from fitplan.domains.history import record_generation
from fitplan.domains.nutrition.contract import NO_RESTRICTIONS
from fitplan.domains.nutrition.schemas import MealDraft, NutritionTargets
from fitplan.domains.profile import ProfileSnapshot
from fitplan.models import MealPlan, NutritionPlan

logger = logging.getLogger(__name__)


def save_nutrition_plan(
    profile: ProfileSnapshot,
    targets: NutritionTargets,
    meals: Sequence[MealDraft],
    record_history: bool = True,
) -> NutritionPlan:
    try:
        with transaction.atomic():
            row = NutritionPlan.objects.create(
                user_id=profile.user_id,
                goal=profile.fitness_goal,
                daily_calories=targets.daily_calories,
                protein_grams=targets.protein_grams,
                carbs_grams=targets.carbs_grams,
                fat_grams=targets.fat_grams,
                meals_per_day=targets.meals_per_day,
                is_ai_generated=True,
                restrictions=profile.dietary_restrictions or NO_RESTRICTIONS,
            )
            MealPlan.objects.bulk_create(
                [
                    MealPlan(
                        nutrition_plan=row,
                        day_number=m.day_number,
                        meal_time=m.meal_time,
                        name=m.name,
                        description=m.description,
                        calories=m.calories,
                        protein=m.protein,
                        carbs=m.carbs,
                        fat=m.fat,
                        recipe=m.recipe,
                    )
                    for m in meals
                ]
            )
            if record_history:
                record_generation(profile, nutrition_plan=row)
    except DatabaseError as e:
        logger.error("[PERSIST] nutrition plan for user %s rolled back: %s", profile.user_id, e)
        raise PersistenceFailure(f"Could not save nutrition plan: {e}") from e

    logger.info("[PERSIST] nutrition plan %s saved with %d meals", row.pk, len(meals))
    return row
