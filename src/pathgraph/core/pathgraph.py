"""PathGraph — the boolean operation surface consumed by rendering/UI callers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Concatenate, ParamSpec

from ..exceptions import NotFoundError, PathGraphError
from ..models import ConnectionDTO, Direction, EdgeDTO, GraphDTO, NodeDTO, PathResult
from ..serializers import (
    connections_to_json,
    edges_to_json,
    graph_to_dto,
    graph_to_json,
    load_graph,
    load_graph_json,
    nodes_to_json,
    save_graph_json,
)
from .config import GraphConfig
from .engine import EdgeDirectionEngine
from .graph_model import GraphModel
from .path_finder import find_path

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def _resolve_direction(direction: Direction | bool | None, is_arrowed: bool) -> Direction:
    """Map the arrowed flag, or a bool passed in place of a direction, onto a Direction."""
    if direction is None:
        direction = is_arrowed
    if isinstance(direction, bool):
        return Direction.DIRECTION_FIRST if direction else Direction.BIDIRECTIONAL
    return direction


def _reports_failure(
    func: Callable[Concatenate[PathGraph, P], object],
) -> Callable[Concatenate[PathGraph, P], bool]:
    """Turn an engine call into ``True``/``False``, keeping the error in ``last_error``."""

    @wraps(func)
    def wrapper(self: PathGraph, *args: P.args, **kwargs: P.kwargs) -> bool:
        try:
            func(self, *args, **kwargs)
        except (PathGraphError, OSError) as exc:
            self.last_error = exc
            logger.debug(
                "%s%r rejected: %s: %s", func.__name__, args, type(exc).__name__, exc
            )
            return False
        self.last_error = None
        return True

    return wrapper


class PathGraph:
    """Owns a graph model and exposes it through the boolean contract.

    Error-handling contract
    -----------------------
    - Every mutating method returns ``True`` on success and ``False`` on any
      rejected operation. The model is left untouched on failure.
    - The rejected operation's exception is kept in ``last_error`` (reset to
      ``None`` by the next successful mutation) and logged at DEBUG level.
    - Queries return ``None`` or an empty list for unknown vertices or edges.
    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        self.config = config or GraphConfig()
        self.model = GraphModel(seed=self.config.seed, edge_id_length=self.config.edge_id_length)
        self.engine = EdgeDirectionEngine(self.model)
        self.last_error: Exception | None = None

    # -- vertices ---------------------------------------------------------

    @_reports_failure
    def new_node(self, label: str | None = None, x: float = 0.0, y: float = 0.0) -> None:
        self.engine.new_node(label, x, y)

    @_reports_failure
    def delete_node(self, label: str) -> None:
        self.engine.delete_node(label)

    @_reports_failure
    def rename_node(self, label: str, new_label: str) -> None:
        self.engine.rename_node(label, new_label)

    # -- edges ------------------------------------------------------------

    @_reports_failure
    def new_edge(
        self,
        v1: str,
        v2: str,
        cost: int,
        direction: Direction | bool | None = None,
        *,
        is_arrowed: bool = True,
    ) -> None:
        """``direction`` may also be a bool, read as the arrowed flag."""
        self.engine.new_edge(v1, v2, cost, _resolve_direction(direction, is_arrowed))

    @_reports_failure
    def new_random_edge(
        self,
        start: str | None = None,
        cost: int | None = None,
        direction: Direction | bool | None = None,
        *,
        is_arrowed: bool = True,
    ) -> None:
        """Edge from ``start`` (or any vertex) to a connectable vertex, random cost by default."""
        self.engine.new_random_edge(start, cost, _resolve_direction(direction, is_arrowed))

    @_reports_failure
    def delete_edge(self, v1: str, v2: str) -> None:
        self.engine.delete_edge(v1, v2)

    @_reports_failure
    def delete_edges(self, label: str) -> None:
        self.engine.delete_edges(label)

    @_reports_failure
    def rotate_edge(self, v1: str, v2: str, direction: Direction | None = None) -> None:
        self._rotate(v1, v2, direction)

    @_reports_failure
    def split_edge(self, v1: str, v2: str) -> None:
        self.engine.split_edge(v1, v2)

    @_reports_failure
    def set_cost(self, v1: str, v2: str, cost: int) -> None:
        self.engine.set_cost(v1, v2, cost)

    @_reports_failure
    def set_arrow(self, v1: str, v2: str, is_arrowed: bool) -> None:
        self.engine.set_arrow(v1, v2, is_arrowed)

    # -- edges given as EdgeDTO ------------------------------------------

    @_reports_failure
    def new_edge_dto(self, edge: EdgeDTO) -> None:
        self.engine.new_edge(edge.from_, edge.to, edge.cost, edge.direction)

    @_reports_failure
    def delete_edge_dto(self, edge: EdgeDTO) -> None:
        self.engine.delete_edge(edge.from_, edge.to)

    @_reports_failure
    def rotate_edge_dto(self, edge: EdgeDTO, direction: Direction | None = None) -> None:
        self._rotate(edge.from_, edge.to, direction)

    @_reports_failure
    def split_edge_dto(self, edge: EdgeDTO) -> None:
        self.engine.split_edge(edge.from_, edge.to)

    @_reports_failure
    def set_cost_dto(self, edge: EdgeDTO, cost: int) -> None:
        self.engine.set_cost(edge.from_, edge.to, cost)

    @_reports_failure
    def set_arrow_dto(self, edge: EdgeDTO, is_arrowed: bool) -> None:
        self.engine.set_arrow(edge.from_, edge.to, is_arrowed)

    # -- whole graph ------------------------------------------------------

    @_reports_failure
    def set_graph(self, graph: GraphDTO) -> None:
        load_graph(self.engine, graph)

    @_reports_failure
    def clear_graph(self) -> None:
        self.engine.clear()

    @_reports_failure
    def upload_json(self, path: str | Path) -> None:
        load_graph(self.engine, load_graph_json(path))

    @_reports_failure
    def download_json(self, path: str | Path) -> None:
        save_graph_json(self.get_graph(), path, indent=self.config.json_indent)

    # -- queries ----------------------------------------------------------

    @property
    def num_nodes(self) -> int:
        return len(self.model.vertices)

    @property
    def num_edges(self) -> int:
        return len(self.model.edges)

    def is_exist_node(self, label: str) -> bool:
        return self.model.has_vertex(label)

    def is_exist_edge(self, v1: str, v2: str) -> bool:
        """Whether an edge can be walked ``v1 -> v2``."""
        return self.engine.has_edge(v1, v2)

    def is_connected_edge(self, v1: str, v2: str) -> bool:
        """Whether any edge joins ``v1`` and ``v2``, whatever its direction."""
        return self.engine.is_connected(v1, v2)

    def is_double_edge(self, v1: str, v2: str) -> bool:
        return self.engine.is_double_edge(v1, v2)

    def get_direction(self, v1: str, v2: str) -> Direction | None:
        try:
            return self.engine.get_direction(v1, v2)
        except NotFoundError:
            return None

    def get_cost(self, v1: str, v2: str) -> int | None:
        edge = self.engine.find_edge(v1, v2)
        return edge.cost if edge is not None else None

    def get_new_node_label(self) -> str | None:
        return self.engine.new_node_label()

    def get_exist_random_node_label(self) -> str | None:
        return self.engine.random_node_label()

    def get_connectable_node(self, label: str) -> str | None:
        try:
            return self.engine.connectable_node(label)
        except NotFoundError:
            return None

    def get_num_connected_edges(self, label: str) -> int:
        try:
            return self.engine.num_connected_edges(label)
        except NotFoundError:
            return 0

    def get_edge(self, v1: str, v2: str) -> EdgeDTO | None:
        try:
            return self.engine.get_edge(v1, v2)
        except NotFoundError:
            return None

    def get_connected_nodes(self, label: str) -> list[str]:
        try:
            return self.engine.connected_nodes(label)
        except NotFoundError:
            return []

    def get_connectable_nodes(self, label: str) -> list[str]:
        try:
            return self.engine.connectable_nodes(label)
        except NotFoundError:
            return []

    def get_connected_edges(self, label: str) -> list[EdgeDTO]:
        try:
            return self.engine.connected_edges(label)
        except NotFoundError:
            return []

    def shortest_path(self, start: str, end: str) -> PathResult | None:
        return find_path(self.get_graph(), start, end)

    def find_path(self, start: str, end: str) -> list[str]:
        """Labels along the cheapest path, or an empty list when there is none."""
        result = self.shortest_path(start, end)
        return result.labels if result is not None else []

    def get_graph(self) -> GraphDTO:
        return graph_to_dto(self.model)

    def get_nodes(self) -> list[NodeDTO]:
        return self.get_graph().nodes

    def get_edges(self) -> list[EdgeDTO]:
        return self.get_graph().edges

    def get_connections(self) -> dict[NodeDTO, list[ConnectionDTO]]:
        return self.get_graph().connections

    def get_graph_json(self) -> str:
        return graph_to_json(self.get_graph(), indent=self.config.json_indent)

    def get_nodes_json(self) -> str:
        return nodes_to_json(self.get_graph(), indent=self.config.json_indent)

    def get_edges_json(self) -> str:
        return edges_to_json(self.get_graph(), indent=self.config.json_indent)

    def get_connections_json(self) -> str:
        return connections_to_json(self.get_graph(), indent=self.config.json_indent)

    def _rotate(self, v1: str, v2: str, direction: Direction | None) -> None:
        if direction is None:
            self.engine.rotate_edge(v1, v2)
        else:
            self.engine.rotate_edge_to(v1, v2, direction)
