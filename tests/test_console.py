from __future__ import annotations

from pathgraph import PathGraph
from pathgraph.models import NodeDTO, PathResult
from pathgraph.renderers import render_graph, render_path


def _double_graph(graph: PathGraph) -> PathGraph:
    graph.new_edge("A", "B", 5)
    graph.new_edge("B", "A", 3)
    graph.new_edge("A", "C", 2, is_arrowed=False)
    graph.new_node("D")
    return graph


def test_render_graph_standard_lists_connections(graph: PathGraph) -> None:
    output = render_graph(_double_graph(graph).get_graph())

    assert "Graph (4 nodes, 3 edges)" in output
    assert "A (2 out)" in output
    assert "→ B (cost 5)" in output
    assert "C (1 out)" in output
    assert "D (0 out)" in output


def test_render_graph_minimal(graph: PathGraph) -> None:
    output = render_graph(_double_graph(graph).get_graph(), verbosity="minimal")

    assert "A: B, C" in output
    assert "D: -" in output
    assert "cost" not in output


def test_render_graph_full_marks_double_edges(graph: PathGraph) -> None:
    output = render_graph(_double_graph(graph).get_graph(), verbosity="full")

    assert "edges" in output
    assert "A → B (5) [double]" in output
    assert "B → A (3) [double]" in output
    assert "A — C (2)" in output
    assert "A — C (2) [double]" not in output


def test_render_empty_graph(graph: PathGraph) -> None:
    output = render_graph(graph.get_graph(), verbosity="full")

    assert "Graph (0 nodes, 0 edges)" in output
    assert "edges" not in output.replace("0 edges", "")


def test_render_path() -> None:
    result = PathResult(nodes=[NodeDTO(label=label) for label in "ABC"], cost=3)

    output = render_path(result, "A", "C")

    assert "Path A → C (cost 3, 2 hops)" in output
    assert "A → B → C" in output


def test_render_missing_path() -> None:
    assert render_path(None, "A", "Z") == "No path from A to Z"
