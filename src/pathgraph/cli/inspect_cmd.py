"""Inspect subcommand implementation."""

from __future__ import annotations

import json
import sys
from collections import Counter
from pathlib import Path
from typing import Literal

from ..exceptions import ParseError
from ..models import GraphDTO
from ..renderers import render_graph
from ..serializers import load_graph_json

VerbosityArg = Literal["minimal", "standard", "full"]


def read_graph(graph_file: Path) -> GraphDTO | None:
    """Load a graph file, printing the reason to stderr when it cannot be read."""
    try:
        return load_graph_json(graph_file)
    except FileNotFoundError:
        print(f"Error: file not found: {graph_file}", file=sys.stderr)
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
    return None


def run_inspect(
    graph_file: Path,
    verbosity: VerbosityArg,
    *,
    as_json: bool,
    output_path: Path | None,
) -> int:
    if output_path is not None and not as_json:
        raise ValueError("--output is only supported when --json is provided")

    graph = read_graph(graph_file)
    if graph is None:
        return 1
    summary = _build_summary(graph)

    if as_json:
        payload = json.dumps(summary, ensure_ascii=True, sort_keys=True)
        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload + "\n", encoding="utf-8")
        else:
            print(payload)
        return 0

    print(f"Nodes: {summary['node_count']}")
    print(f"Edges: {summary['edge_count']}")
    print(f"Arrowed edges: {summary['arrowed_edge_count']}")
    print(f"Bidirectional edges: {summary['bidirectional_edge_count']}")
    print(f"Double edges: {summary['double_edge_count']}")
    print()
    print(render_graph(graph, verbosity=verbosity))
    return 0


def _build_summary(graph: GraphDTO) -> dict[str, object]:
    arrowed = sum(1 for edge in graph.edges if edge.is_arrowed)
    pairs = Counter(frozenset((edge.from_, edge.to)) for edge in graph.edges)
    out_degree = {node.label: len(graph.connections[node]) for node in graph.nodes}

    return {
        "nodes": graph.labels,
        "node_count": len(graph.nodes),
        "edge_count": len(graph.edges),
        "arrowed_edge_count": arrowed,
        "bidirectional_edge_count": len(graph.edges) - arrowed,
        "double_edge_count": sum(1 for count in pairs.values() if count == 2),
        "out_degree": dict(sorted(out_degree.items())),
    }
