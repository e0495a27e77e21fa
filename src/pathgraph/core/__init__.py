"""Core graph runtime."""

from .config import GraphConfig
from .engine import EdgeDirectionEngine
from .graph_model import GraphModel, GraphSnapshot
from .path_finder import PathFinder, find_path
from .pathgraph import PathGraph

__all__ = [
    "EdgeDirectionEngine",
    "GraphConfig",
    "GraphModel",
    "GraphSnapshot",
    "PathFinder",
    "PathGraph",
    "find_path",
]
