from __future__ import annotations

import logging
from typing import Any, Dict

from fitplan.core.audit import append_event
from fitplan.core.state import issue
from fitplan.domains.errors import EmptyExercisePool, PlanGenerationError
from fitplan.domains.profile import load_profile
from fitplan.domains.workout.state import WorkoutGraphState
from fitplan.domains.workout.services.configuration import resolve_configuration
from fitplan.domains.workout.services.persistence import save_workout_plan
from fitplan.domains.workout.services.plan_builder import build_plan
from fitplan.domains.workout.services.prescription import assign_prescriptions
from fitplan.domains.workout.services.scheduling import schedule_sessions
from fitplan.domains.workout.services.selection import load_exercise_pool, select_exercises
from fitplan.shared.config import EngineConfig
from fitplan.shared.randomness import make_rng

logger = logging.getLogger(__name__)


def _fail(state: WorkoutGraphState, event: str, err: PlanGenerationError) -> Dict[str, Any]:
    logger.error("[WORKOUT] user %s: %s", state.get("user_id"), err)
    issues = list(state.get("issues", []))
    issues.append(issue(err.kind, str(err)))
    audit = append_event(state["audit"], event, {"error": err.kind})
    return {"failed": True, "issues": issues, "audit": audit}


def node_profile(state: WorkoutGraphState) -> Dict[str, Any]:
    try:
        profile = load_profile(state["user_id"])
    except PlanGenerationError as e:
        return _fail(state, "profile_failed", e)
    audit = append_event(state["audit"], "profile_done", profile.history_inputs())
    return {"profile": profile, "audit": audit}


def node_configuration(state: WorkoutGraphState) -> Dict[str, Any]:
    profile = state["profile"]
    try:
        config = resolve_configuration(profile.fitness_goal, profile.experience_level, profile.workout_type)
    except PlanGenerationError as e:
        return _fail(state, "configuration_failed", e)
    audit = append_event(state["audit"], "configuration_done", {"config_id": config.config_id})
    return {"config": config, "audit": audit}


def node_plan(state: WorkoutGraphState) -> Dict[str, Any]:
    plan = build_plan(state["profile"])
    audit = append_event(state["audit"], "plan_done", {"name": plan.name, "duration_weeks": plan.duration_weeks})
    return {"plan": plan, "audit": audit}


def node_sessions(state: WorkoutGraphState) -> Dict[str, Any]:
    profile = state["profile"]
    config = state["config"]
    rng = make_rng(state.get("seed"))
    try:
        pool = load_exercise_pool(profile.workout_type)
    except PlanGenerationError as e:
        return _fail(state, "sessions_failed", e)
    warnings = list(state.get("warnings", []))

    sessions = []
    for session in schedule_sessions(config, profile, rng):
        if session.is_rest:
            sessions.append(session)
            continue
        try:
            selected = select_exercises(session.target_muscle_groups, config, profile, pool, rng)
        except EmptyExercisePool as e:
            logger.warning("[WORKOUT] day %s: %s", session.day_number, e)
            warnings.append(str(e))
            sessions.append(session)
            continue
        exercises = assign_prescriptions(
            selected, profile.fitness_goal, session.target_muscle_groups, config, rng
        )
        sessions.append(session.model_copy(update={"exercises": exercises}))

    audit = append_event(state["audit"], "sessions_done", {
        "sessions": len(sessions),
        "exercises": sum(len(s.exercises) for s in sessions),
        "pool_size": len(pool),
    })
    return {"sessions": sessions, "warnings": warnings, "audit": audit}


def node_persist(state: WorkoutGraphState) -> Dict[str, Any]:
    cfg = EngineConfig.from_env()
    try:
        row = save_workout_plan(
            state["profile"], state["plan"], state["sessions"], record_history=cfg.record_history
        )
    except PlanGenerationError as e:
        return _fail(state, "persist_failed", e)
    audit = append_event(state["audit"], "pipeline_end", {"plan_id": row.pk})
    return {"plan_id": row.pk, "audit": audit}


def route_on_failure(state: WorkoutGraphState) -> str:
    return "fail" if state.get("failed") else "continue"
