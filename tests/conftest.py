from __future__ import annotations

import pytest

from pathgraph import GraphConfig, PathGraph
from pathgraph.core import EdgeDirectionEngine, GraphModel


@pytest.fixture
def graph() -> PathGraph:
    return PathGraph(GraphConfig(seed=7))


@pytest.fixture
def engine() -> EdgeDirectionEngine:
    return EdgeDirectionEngine(GraphModel(seed=7))


@pytest.fixture
def triangle(graph: PathGraph) -> PathGraph:
    """A->B (1), B->C (2), A->C (10)."""
    graph.new_edge("A", "B", 1)
    graph.new_edge("B", "C", 2)
    graph.new_edge("A", "C", 10)
    return graph
