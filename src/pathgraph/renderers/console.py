"""Rich-based graph console rendering."""

from __future__ import annotations

from collections import Counter
from io import StringIO
from typing import Literal

from rich.console import Console
from rich.tree import Tree

from ..models import EdgeDTO, GraphDTO, PathResult

Verbosity = Literal["minimal", "standard", "full"]


def render_graph(graph: GraphDTO, *, verbosity: Verbosity = "standard") -> str:
    tree = Tree(_graph_label(graph))
    for node in graph.nodes:
        connections = graph.connections[node]
        if verbosity == "minimal":
            targets = ", ".join(c.neighbor_label for c in connections) or "-"
            tree.add(f"{node.label}: {targets}")
            continue
        branch = tree.add(f"{node.label} ({len(connections)} out)")
        for connection in connections:
            branch.add(f"→ {connection.neighbor_label} (cost {connection.cost})")

    if verbosity == "full" and graph.edges:
        doubles = _double_pairs(graph)
        edges_branch = tree.add("edges")
        for edge in graph.edges:
            line = _edge_line(edge)
            if frozenset((edge.from_, edge.to)) in doubles:
                line += " [double]"
            edges_branch.add(line)

    return _export(tree)


def render_path(result: PathResult | None, start: str, end: str) -> str:
    if result is None:
        return f"No path from {start} to {end}"
    tree = Tree(f"Path {start} → {end} (cost {result.cost}, {result.hops} hops)")
    tree.add(" → ".join(result.labels))
    return _export(tree)


def _graph_label(graph: GraphDTO) -> str:
    return f"Graph ({len(graph.nodes)} nodes, {len(graph.edges)} edges)"


def _edge_line(edge: EdgeDTO) -> str:
    symbol = "→" if edge.is_arrowed else "—"
    return f"{edge.from_} {symbol} {edge.to} ({edge.cost})"


def _double_pairs(graph: GraphDTO) -> set[frozenset[str]]:
    counts = Counter(frozenset((edge.from_, edge.to)) for edge in graph.edges)
    return {pair for pair, count in counts.items() if count == 2}


def _export(tree: Tree) -> str:
    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(tree)
    return console.export_text()
