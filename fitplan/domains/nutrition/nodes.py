from __future__ import annotations

import logging
from typing import Any, Dict

from fitplan.core.audit import append_event
from fitplan.core.state import issue
from fitplan.domains.errors import PlanGenerationError
from fitplan.domains.nutrition.state import NutritionGraphState
from fitplan.domains.nutrition.services.calculator import calculate_targets
from fitplan.domains.nutrition.services.meals import build_meal_plan
from fitplan.domains.nutrition.services.persistence import save_nutrition_plan
from fitplan.domains.profile import load_profile
from fitplan.shared.config import EngineConfig
from fitplan.shared.randomness import make_rng

logger = logging.getLogger(__name__)


def _fail(state: NutritionGraphState, event: str, err: PlanGenerationError) -> Dict[str, Any]:
    logger.error("[NUTRITION] user %s: %s", state.get("user_id"), err)
    issues = list(state.get("issues", []))
    issues.append(issue(err.kind, str(err)))
    audit = append_event(state["audit"], event, {"error": err.kind})
    return {"failed": True, "issues": issues, "audit": audit}


def node_profile(state: NutritionGraphState) -> Dict[str, Any]:
    try:
        profile = load_profile(state["user_id"])
    except PlanGenerationError as e:
        return _fail(state, "profile_failed", e)
    audit = append_event(state["audit"], "profile_done", profile.history_inputs())
    return {"profile": profile, "audit": audit}


def node_targets(state: NutritionGraphState) -> Dict[str, Any]:
    targets = calculate_targets(state["profile"])
    audit = append_event(state["audit"], "targets_done", targets.model_dump())
    return {"targets": targets, "audit": audit}


def node_meals(state: NutritionGraphState) -> Dict[str, Any]:
    profile = state["profile"]
    cfg = EngineConfig.from_env()
    meals = build_meal_plan(
        state["targets"],
        goal=profile.fitness_goal,
        restrictions=profile.dietary_restrictions,
        rng=make_rng(state.get("seed")),
        days=cfg.meal_plan_days,
    )
    audit = append_event(state["audit"], "meals_done", {"meals": len(meals)})
    return {"meals": meals, "audit": audit}


def node_persist(state: NutritionGraphState) -> Dict[str, Any]:
    cfg = EngineConfig.from_env()
    try:
        row = save_nutrition_plan(
            state["profile"], state["targets"], state["meals"], record_history=cfg.record_history
        )
    except PlanGenerationError as e:
        return _fail(state, "persist_failed", e)
    audit = append_event(state["audit"], "pipeline_end", {"plan_id": row.pk})
    return {"plan_id": row.pk, "audit": audit}


def route_on_failure(state: NutritionGraphState) -> str:
    return "fail" if state.get("failed") else "continue"
