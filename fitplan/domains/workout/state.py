from __future__ import annotations

from typing import List, Optional
from dataclasses import dataclass, field

from fitplan.core.state import BaseGraphState, BaseResult, generate_request_id
from fitplan.domains.profile import ProfileSnapshot
from fitplan.domains.workout.schemas import GenerationConfigSpec, SessionDraft, WorkoutPlanDraft


class WorkoutGraphState(BaseGraphState, total=False):
    """Workout-specific state"""
    profile: Optional[ProfileSnapshot]
    config: Optional[GenerationConfigSpec]
    plan: Optional[WorkoutPlanDraft]
    sessions: List[SessionDraft]
    plan_id: Optional[int]


@dataclass
class WorkoutPlanResult(BaseResult):
    """Workout generation result"""
    user_id: Optional[int] = None
    plan_id: Optional[int] = None
    config_id: Optional[int] = None
    sessions: List[SessionDraft] = field(default_factory=list)


def init_workout_state(user_id: int, seed: Optional[int] = None) -> WorkoutGraphState:
    return WorkoutGraphState(
        request_id=generate_request_id(),
        user_id=user_id,
        seed=seed,
        failed=False,
        profile=None,
        config=None,
        plan=None,
        sessions=[],
        plan_id=None,
        issues=[],
        warnings=[],
        audit={"events": []},
    )


def to_workout_result(state: WorkoutGraphState) -> WorkoutPlanResult:
    config = state.get("config")
    return WorkoutPlanResult(
        request_id=state["request_id"],
        success=not state.get("failed", False) and state.get("plan_id") is not None,
        user_id=state.get("user_id"),
        plan_id=state.get("plan_id"),
        config_id=config.config_id if config is not None else None,
        sessions=state.get("sessions", []),
        issues=state.get("issues", []),
        warnings=state.get("warnings", []),
        audit=state.get("audit", {"events": []}),
    )
