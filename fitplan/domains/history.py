from __future__ import annotations

import logging
from typing import Optional

from fitplan.domains.profile import ProfileSnapshot
from fitplan.models import AiPlanHistory, NutritionPlan, WorkoutPlan

logger = logging.getLogger(__name__)

WORKOUT_PLAN = "workout_plan"
NUTRITION_PLAN = "nutrition_plan"


def record_generation(
    profile: ProfileSnapshot,
    workout_plan: Optional[WorkoutPlan] = None,
    nutrition_plan: Optional[NutritionPlan] = None,
) -> AiPlanHistory:
    """Append one history row for the plan a run produced."""
    if (workout_plan is None) == (nutrition_plan is None):
        raise ValueError("record_generation needs exactly one of workout_plan / nutrition_plan")

    kind = WORKOUT_PLAN if workout_plan is not None else NUTRITION_PLAN
    row = AiPlanHistory.objects.create(
        user_id=profile.user_id,
        workout_plan=workout_plan,
        nutrition_plan=nutrition_plan,
        user_inputs={"type": kind, **profile.history_inputs()},
    )
    logger.info("[HISTORY] recorded %s for user %s (history_id=%s)", kind, profile.user_id, row.pk)
    return row
