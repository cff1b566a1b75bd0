from __future__ import annotations

from typing import List, Optional
from dataclasses import dataclass, field

from fitplan.core.state import BaseGraphState, BaseResult, generate_request_id
from fitplan.domains.nutrition.schemas import MealDraft, NutritionTargets
from fitplan.domains.profile import ProfileSnapshot


class NutritionGraphState(BaseGraphState, total=False):
    """Nutrition-specific state"""
    profile: Optional[ProfileSnapshot]
    targets: Optional[NutritionTargets]
    meals: List[MealDraft]
    plan_id: Optional[int]


@dataclass
class NutritionPlanResult(BaseResult):
    """Nutrition generation result"""
    user_id: Optional[int] = None
    plan_id: Optional[int] = None
    targets: Optional[NutritionTargets] = None
    meals: List[MealDraft] = field(default_factory=list)


def init_nutrition_state(user_id: int, seed: Optional[int] = None) -> NutritionGraphState:
    return NutritionGraphState(
        request_id=generate_request_id(),
        user_id=user_id,
        seed=seed,
        failed=False,
        profile=None,
        targets=None,
        meals=[],
        plan_id=None,
        issues=[],
        warnings=[],
        audit={"events": []},
    )


def to_nutrition_result(state: NutritionGraphState) -> NutritionPlanResult:
    return NutritionPlanResult(
        request_id=state["request_id"],
        success=not state.get("failed", False) and state.get("plan_id") is not None,
        user_id=state.get("user_id"),
        plan_id=state.get("plan_id"),
        targets=state.get("targets"),
        meals=state.get("meals", []),
        issues=state.get("issues", []),
        warnings=state.get("warnings", []),
        audit=state.get("audit", {"events": []}),
    )
