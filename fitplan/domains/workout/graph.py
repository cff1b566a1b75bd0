from __future__ import annotations

from typing import Optional

from langgraph.graph import START, END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from fitplan.core.audit import append_event, log_observer
from fitplan.core.execution import GraphExecutor, Observer
from fitplan.domains.workout.state import (
    WorkoutGraphState,
    WorkoutPlanResult,
    init_workout_state,
    to_workout_result,
)
from fitplan.domains.workout import nodes as workout_nodes
from fitplan.shared.config import EngineConfig


def build_workout_graph() -> CompiledStateGraph:
    """profile -> configuration -> plan -> sessions -> persist, ending early on failure."""
    builder = StateGraph(WorkoutGraphState)

    builder.add_node("profile", workout_nodes.node_profile)
    builder.add_node("configuration", workout_nodes.node_configuration)
    builder.add_node("plan", workout_nodes.node_plan)
    builder.add_node("sessions", workout_nodes.node_sessions)
    builder.add_node("persist", workout_nodes.node_persist)

    builder.add_edge(START, "profile")
    builder.add_conditional_edges(
        "profile",
        workout_nodes.route_on_failure,
        {"continue": "configuration", "fail": END},
    )
    builder.add_conditional_edges(
        "configuration",
        workout_nodes.route_on_failure,
        {"continue": "plan", "fail": END},
    )
    builder.add_edge("plan", "sessions")
    builder.add_conditional_edges(
        "sessions",
        workout_nodes.route_on_failure,
        {"continue": "persist", "fail": END},
    )
    builder.add_edge("persist", END)

    return builder.compile()


_WORKOUT_GRAPH: Optional[CompiledStateGraph] = None


def get_workout_graph() -> CompiledStateGraph:
    """Lazy-load singleton graph instance."""
    global _WORKOUT_GRAPH
    if _WORKOUT_GRAPH is None:
        _WORKOUT_GRAPH = build_workout_graph()
    return _WORKOUT_GRAPH


def run_workout_generation(
    user_id: int,
    seed: Optional[int] = None,
    observer: Optional[Observer] = log_observer,
) -> WorkoutPlanResult:
    """Main entry point for workout plan generation."""
    if seed is None:
        seed = EngineConfig.from_env().default_seed

    init_state = init_workout_state(user_id, seed=seed)
    init_state["audit"] = append_event(init_state["audit"], "pipeline_start", {"user_id": user_id, "seed": seed})

    return GraphExecutor.execute(get_workout_graph(), init_state, to_workout_result, observer=observer)
