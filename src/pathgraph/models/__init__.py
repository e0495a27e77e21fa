"""Data models for the graph topology engine."""

from .edge import Direction, Edge, PairState
from .graph_dto import ConnectionDTO, EdgeDTO, GraphDTO, NodeDTO
from .path import PathResult
from .vertex import LABELS, MAX_VERTICES, Vertex, is_valid_label

__all__ = [
    "LABELS",
    "MAX_VERTICES",
    "ConnectionDTO",
    "Direction",
    "Edge",
    "EdgeDTO",
    "GraphDTO",
    "NodeDTO",
    "PairState",
    "PathResult",
    "Vertex",
    "is_valid_label",
]
