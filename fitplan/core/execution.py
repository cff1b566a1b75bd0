from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TypeVar

from langgraph.graph.state import CompiledStateGraph

T = TypeVar('T')

Observer = Callable[[str, Dict[str, Any]], None]


class GraphExecutor:
    """Generic graph executor for every domain"""

    @staticmethod
    def execute(
        graph: CompiledStateGraph,
        init_state: Dict[str, Any],
        to_result: Callable[[Dict[str, Any]], T],
        observer: Optional[Observer] = None,
    ) -> T:
        """Run the graph, feed per-node updates to observer, convert final state to result"""
        final_state: Dict[str, Any] = dict(init_state)
        for mode, chunk in graph.stream(init_state, stream_mode=["updates", "values"]):
            if mode == "values":
                final_state = chunk
                continue
            if observer is None:
                continue
            for node, update in chunk.items():
                observer(node, update or {})
        return to_result(final_state)
