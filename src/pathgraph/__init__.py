"""pathgraph — topology engine for interactive graph editors.

Boolean API (what a rendering/UI layer calls):
    graph = pathgraph.PathGraph()
    graph.new_edge("A", "B", 5)        -> True / False
    graph.find_path("A", "B")          -> ["A", "B"]
    graph.get_graph_json()             -> canonical JSON document

Typed API (raises ``PathGraphError`` subclasses):
    from pathgraph.core import EdgeDirectionEngine, GraphModel
    engine = EdgeDirectionEngine(GraphModel(seed=7))
    engine.new_edge("A", "B", 5)
"""

from __future__ import annotations

from .core import EdgeDirectionEngine, GraphConfig, GraphModel, PathFinder, PathGraph
from .exceptions import (
    DuplicateLabelError,
    EdgeCardinalityError,
    InvalidCostError,
    InvalidDirectionError,
    NotFoundError,
    ParseError,
    PathGraphError,
    SelfLoopError,
)
from .models import ConnectionDTO, Direction, EdgeDTO, GraphDTO, NodeDTO, PairState, PathResult

__all__ = [
    "ConnectionDTO",
    "Direction",
    "DuplicateLabelError",
    "EdgeCardinalityError",
    "EdgeDTO",
    "EdgeDirectionEngine",
    "GraphConfig",
    "GraphDTO",
    "GraphModel",
    "InvalidCostError",
    "InvalidDirectionError",
    "NodeDTO",
    "NotFoundError",
    "PairState",
    "ParseError",
    "PathFinder",
    "PathGraph",
    "PathGraphError",
    "PathResult",
    "SelfLoopError",
]
