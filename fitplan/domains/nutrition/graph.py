from __future__ import annotations

from typing import Optional

from langgraph.graph import START, END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from fitplan.core.audit import append_event, log_observer
from fitplan.core.execution import GraphExecutor, Observer
from fitplan.domains.nutrition.state import (
    NutritionGraphState,
    NutritionPlanResult,
    init_nutrition_state,
    to_nutrition_result,
)
from fitplan.domains.nutrition import nodes as nutrition_nodes
from fitplan.shared.config import EngineConfig


def build_nutrition_graph() -> CompiledStateGraph:
    builder = StateGraph(NutritionGraphState)

    builder.add_node("profile", nutrition_nodes.node_profile)
    builder.add_node("targets", nutrition_nodes.node_targets)
    builder.add_node("meals", nutrition_nodes.node_meals)
    builder.add_node("persist", nutrition_nodes.node_persist)

    builder.add_edge(START, "profile")
    builder.add_conditional_edges(
        "profile",
        nutrition_nodes.route_on_failure,
        {"continue": "targets", "fail": END},
    )
    builder.add_edge("targets", "meals")
    builder.add_edge("meals", "persist")
    builder.add_edge("persist", END)

    return builder.compile()


_NUTRITION_GRAPH: Optional[CompiledStateGraph] = None


def get_nutrition_graph() -> CompiledStateGraph:
    global _NUTRITION_GRAPH
    if _NUTRITION_GRAPH is None:
        _NUTRITION_GRAPH = build_nutrition_graph()
    return _NUTRITION_GRAPH


def run_nutrition_generation(
    user_id: int,
    seed: Optional[int] = None,
    observer: Optional[Observer] = log_observer,
) -> NutritionPlanResult:
    """Main entry point for nutrition plan generation."""
    if seed is None:
        seed = EngineConfig.from_env().default_seed

    init_state = init_nutrition_state(user_id, seed=seed)
    init_state["audit"] = append_event(init_state["audit"], "pipeline_start", {"user_id": user_id, "seed": seed})

    return GraphExecutor.execute(get_nutrition_graph(), init_state, to_nutrition_result, observer=observer)
