"""Serialization helpers."""

from .json import (
    connections_to_json,
    edges_to_json,
    graph_from_json,
    graph_to_dto,
    graph_to_json,
    load_graph,
    load_graph_json,
    nodes_to_json,
    save_graph_json,
)

__all__ = [
    "connections_to_json",
    "edges_to_json",
    "graph_from_json",
    "graph_to_dto",
    "graph_to_json",
    "load_graph",
    "load_graph_json",
    "nodes_to_json",
    "save_graph_json",
]
