"""JSON serialization helpers for graphs."""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..exceptions import ParseError
from ..models import EdgeDTO, GraphDTO, NodeDTO

if TYPE_CHECKING:
    from ..core.engine import EdgeDirectionEngine
    from ..core.graph_model import GraphModel

GRAPH_KEYS = ("nodes", "edges")


def graph_to_dto(model: GraphModel) -> GraphDTO:
    """Snapshot the model: one NodeDTO per vertex, one EdgeDTO per edge."""
    return GraphDTO(
        nodes=[NodeDTO(label=label) for label in model.labels],
        edges=[EdgeDTO.from_edge(edge) for edge in model.edges],
    )


def graph_to_json(graph: GraphDTO, *, indent: int | None = 2) -> str:
    return graph.model_dump_json(indent=indent, by_alias=True)


def graph_from_json(payload: str) -> GraphDTO:
    """Parse a JSON document into a GraphDTO.

    Raises ``ParseError`` on invalid JSON, when the ``nodes`` or ``edges``
    key is missing, or when a label or cost is malformed. Emits a warning for
    top-level keys that are ignored.
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ParseError(f"Failed to parse graph JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError("Failed to parse graph JSON: expected an object at the top level")
    missing = [key for key in GRAPH_KEYS if key not in data]
    if missing:
        raise ParseError(f"Failed to parse graph JSON: missing key(s) {', '.join(missing)}")
    extra = sorted(key for key in data if key not in GRAPH_KEYS)
    if extra:
        warnings.warn(
            f"Graph JSON carries unknown key(s) {', '.join(extra)}; they are ignored.",
            stacklevel=2,
        )
    try:
        return GraphDTO.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Failed to parse graph JSON: {exc}") from exc


def nodes_to_json(graph: GraphDTO, *, indent: int | None = 2) -> str:
    return json.dumps({"nodes": graph.labels}, indent=indent)


def edges_to_json(graph: GraphDTO, *, indent: int | None = 2) -> str:
    edges = [edge.model_dump(by_alias=True) for edge in graph.edges]
    return json.dumps({"edges": edges}, indent=indent)


def connections_to_json(graph: GraphDTO, *, indent: int | None = 2) -> str:
    """Read-only view of who can reach whom, at which cost."""
    connections = [
        {
            "node": node.label,
            "edges": [{"to": c.neighbor_label, "cost": c.cost} for c in graph.connections[node]],
        }
        for node in graph.nodes
    ]
    return json.dumps({"connections": connections}, indent=indent)


def save_graph_json(graph: GraphDTO, path: str | Path, *, indent: int | None = 2) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(graph_to_json(graph, indent=indent), encoding="utf-8")
    return output_path


def load_graph_json(path: str | Path) -> GraphDTO:
    """Load a graph from a JSON file.

    Raises ``ParseError`` on invalid content (including bytes that are not
    UTF-8), or ``FileNotFoundError`` / ``OSError`` if the file is inaccessible.
    """
    try:
        payload = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Failed to parse graph JSON: {exc}") from exc
    return graph_from_json(payload)


def load_graph(engine: EdgeDirectionEngine, graph: GraphDTO) -> None:
    """Replace the engine's graph with the snapshot's nodes and edges.

    Edges go through ``new_edge`` so double edges re-form from their two
    arrowed members. Any rejected edge rolls the whole load back.
    """
    with engine.transaction():
        engine.clear()
        for node in graph.nodes:
            engine.new_node(node.label)
        for edge in graph.edges:
            engine.new_edge(edge.from_, edge.to, edge.cost, edge.direction)
