"""EdgeDirectionEngine — the per-pair edge state machine.

Every vertex pair is in one of three states:

- ``NONE``: no edge.
- ``SINGLE``: one edge with any direction.
- ``DOUBLE``: two single-direction edges pointing opposite ways.

Operations move a pair between those states and raise a ``PathGraphError``
subclass when a transition is not allowed. Each operation runs inside
``transaction()``, so a failure halfway through a multi-step change (for
example delete-then-reinsert while collapsing a double edge) rolls the model
back to where it started.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from ..exceptions import (
    DuplicateLabelError,
    EdgeCardinalityError,
    InvalidCostError,
    InvalidDirectionError,
    NotFoundError,
    SelfLoopError,
)
from ..models import LABELS, Direction, Edge, EdgeDTO, PairState, Vertex, is_valid_label
from .graph_model import GraphModel

logger = logging.getLogger(__name__)

RANDOM_COST_RANGE = (1, 1000)


def _check_cost(cost: int) -> None:
    if isinstance(cost, bool) or not isinstance(cost, int) or cost <= 0:
        raise InvalidCostError(f"Edge cost must be a positive integer, got {cost!r}")


def _check_direction(direction: object) -> Direction:
    try:
        return Direction(direction)
    except (TypeError, ValueError):
        raise InvalidDirectionError(f"Not an edge direction: {direction!r}") from None


class EdgeDirectionEngine:
    def __init__(self, model: GraphModel | None = None) -> None:
        self.model = model or GraphModel()
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator[GraphModel]:
        """Run a block atomically; nested blocks join the outermost one."""
        if self._depth:
            yield self.model
            return
        snapshot = self.model.snapshot()
        self._depth += 1
        try:
            yield self.model
        except Exception:
            self.model.restore(snapshot)
            raise
        finally:
            self._depth -= 1

    # -- queries ----------------------------------------------------------

    def pair_state(self, v1: str, v2: str) -> PairState:
        count = self.model.count_edges_between(v1, v2)
        if count == 0:
            return PairState.NONE
        if count == 1:
            return PairState.SINGLE
        return PairState.DOUBLE

    def is_double_edge(self, v1: str, v2: str) -> bool:
        return self.pair_state(v1, v2) is PairState.DOUBLE

    def is_connected(self, v1: str, v2: str) -> bool:
        return self.model.count_edges_between(v1, v2) > 0

    def find_edge(self, v1: str, v2: str) -> Edge | None:
        """Order-sensitive lookup of the edge that carries ``v1 -> v2``.

        A double edge yields the member pointing ``v1 -> v2``; a single
        bidirectional edge matches either order; a single arrowed edge
        matches only in its own direction.
        """
        for edge in self.model.edges_between(v1, v2):
            if edge.traverses(v1, v2):
                return edge
        return None

    def edge_for(self, v1: str, v2: str) -> Edge:
        edge = self.find_edge(v1, v2)
        if edge is None:
            raise NotFoundError(f"No edge {v1} -> {v2}")
        return edge

    def has_edge(self, v1: str, v2: str) -> bool:
        return self.find_edge(v1, v2) is not None

    def get_direction(self, v1: str, v2: str) -> Direction:
        """Direction of the pair's edge relative to ``(v1, v2)``."""
        edges = self._pair_edges(v1, v2)
        if len(edges) == 1:
            return edges[0].direction_from(v1)
        return self.edge_for(v1, v2).direction_from(v1)

    def get_cost(self, v1: str, v2: str) -> int:
        return self.edge_for(v1, v2).cost

    def connected_nodes(self, label: str) -> list[str]:
        self.model.vertex(label)
        return [
            other
            for other in self.model.labels
            if other != label and self.is_connected(label, other)
        ]

    def connectable_nodes(self, label: str) -> list[str]:
        self.model.vertex(label)
        return [
            other
            for other in self.model.labels
            if other != label and not self.is_connected(label, other)
        ]

    def connected_edges(self, label: str) -> list[EdgeDTO]:
        self.model.vertex(label)
        return [EdgeDTO.from_edge(edge) for edge in self.model.incident_edges(label)]

    def new_node_label(self) -> str | None:
        used = set(self.model.labels)
        return next((label for label in LABELS if label not in used), None)

    def random_node_label(self) -> str | None:
        """An existing label picked with the model's seeded generator."""
        labels = self.model.labels
        return self.model.rng.choice(labels) if labels else None

    def random_cost(self) -> int:
        return self.model.rng.randint(*RANDOM_COST_RANGE)

    def connectable_node(self, label: str) -> str | None:
        """First vertex, in insertion order, with no edge to ``label``."""
        return next(iter(self.connectable_nodes(label)), None)

    def num_connected_edges(self, label: str) -> int:
        self.model.vertex(label)
        return len(self.model.incident_edges(label))

    def get_edge(self, v1: str, v2: str) -> EdgeDTO:
        return EdgeDTO.from_edge(self.edge_for(v1, v2))

    # -- vertices ---------------------------------------------------------

    def new_node(self, label: str | None = None, x: float = 0.0, y: float = 0.0) -> Vertex:
        """Insert a vertex; without a label the lowest free one is used."""
        if label is None:
            label = self.new_node_label()
            if label is None:
                raise DuplicateLabelError("All vertex labels A-Z are in use")
        return self.model.insert_vertex(label, x, y)

    def delete_node(self, label: str) -> list[Edge]:
        return self.model.remove_vertex(label)

    def rename_node(self, old: str, new: str) -> Vertex:
        """Relabel a vertex, re-issuing each incident edge against the new label."""
        if not is_valid_label(new):
            raise DuplicateLabelError(f"Invalid vertex label: {new!r} (expected A-Z)")
        if self.model.has_vertex(new):
            raise DuplicateLabelError(f"Vertex label already in use: {new!r}")
        vertex = self.model.vertex(old)
        with self.transaction() as model:
            captured = [
                (edge.other(old), edge.cost, edge.direction_from(old))
                for edge in model.incident_edges(old)
            ]
            model.remove_vertex(old)
            renamed = model.insert_vertex(new, vertex.x, vertex.y)
            for other, cost, direction in captured:
                self.new_edge(new, other, cost, direction)
        logger.debug("Renamed vertex %s to %s (%d edges re-issued)", old, new, len(captured))
        return renamed

    def clear(self) -> None:
        self.model.clear()

    # -- edges ------------------------------------------------------------

    def new_edge(
        self,
        v1: str,
        v2: str,
        cost: int,
        direction: Direction = Direction.DIRECTION_FIRST,
    ) -> Edge:
        """Add an edge whose ``direction`` is relative to ``(v1, v2)``.

        A second edge is only accepted next to an existing one when the pair
        can become a double edge: a bidirectional edge is first turned to
        point the other way, an arrowed edge must already point the other way.
        """
        _check_cost(cost)
        direction = _check_direction(direction)
        if v1 == v2:
            raise SelfLoopError(f"Edge endpoints must differ: {v1!r}")
        for label in (v1, v2):
            if not is_valid_label(label):
                raise DuplicateLabelError(f"Invalid vertex label: {label!r} (expected A-Z)")
        with self.transaction() as model:
            for label in (v1, v2):
                if not model.has_vertex(label):
                    model.insert_vertex(label)
            existing = model.edges_between(v1, v2)
            if not existing:
                return model.insert_edge(v1, v2, cost, direction)
            if len(existing) > 1:
                raise EdgeCardinalityError(f"Pair {v1}-{v2} already holds a double edge")
            current = existing[0].direction_from(v1)
            if current is Direction.BIDIRECTIONAL:
                if direction is Direction.BIDIRECTIONAL:
                    direction = Direction.DIRECTION_FIRST
                self._reissue(existing[0], self._stored(existing[0], v1, direction.reversed()))
            elif direction is not current.reversed():
                raise EdgeCardinalityError(
                    f"Pair {v1}-{v2} already holds an edge; a second one must point the other way"
                )
            return model.insert_edge(v1, v2, cost, direction)

    def new_random_edge(
        self,
        start: str | None = None,
        cost: int | None = None,
        direction: Direction = Direction.DIRECTION_FIRST,
    ) -> Edge:
        """Connect ``start`` to its first connectable vertex.

        Without ``start`` every vertex is tried in insertion order. Without
        ``cost`` one is drawn from ``RANDOM_COST_RANGE``.
        """
        starts = [start] if start is not None else self.model.labels
        for label in starts:
            end = self.connectable_node(label)
            if end is not None:
                return self.new_edge(
                    label, end, self.random_cost() if cost is None else cost, direction
                )
        raise NotFoundError("No vertex pair can take a new edge")

    def delete_edge(self, v1: str, v2: str) -> Edge | None:
        """Delete the edge carrying ``v1 -> v2``.

        Deleting one member of a double edge removes both members and inserts
        a fresh edge with the survivor's cost and direction, which is returned.
        """
        with self.transaction() as model:
            target = self.edge_for(v1, v2)
            edges = model.edges_between(v1, v2)
            if len(edges) == 1:
                model.remove_edge(target)
                return None
            survivor = next(edge for edge in edges if edge is not target)
            for edge in edges:
                model.remove_edge(edge)
            collapsed = model.insert_edge(
                survivor.first, survivor.second, survivor.cost, survivor.direction
            )
            logger.debug("Collapsed double edge %s-%s into %s", v1, v2, collapsed.id)
            return collapsed

    def delete_edges(self, label: str) -> list[Edge]:
        """Remove every edge incident to ``label`` and keep the vertex."""
        with self.transaction() as model:
            model.vertex(label)
            edges = model.incident_edges(label)
            if not edges:
                raise NotFoundError(f"Vertex {label!r} has no edges")
            for edge in edges:
                model.remove_edge(edge)
            return edges

    def rotate_edge(self, v1: str, v2: str) -> list[Edge]:
        """Apply one unit rotation to the pair's edge(s); returns the re-issued edges.

        A single edge cycles FIRST -> SECOND -> BIDIRECTIONAL -> FIRST. The two
        members of a double edge both flip, so each keeps its cost but points
        the other way.
        """
        with self.transaction():
            edges = self._pair_edges(v1, v2)
            if len(edges) == 1:
                return [self._reissue(edges[0], edges[0].direction.rotated())]
            return [self._reissue(edge, edge.direction.reversed()) for edge in edges]

    def rotate_edge_to(self, v1: str, v2: str, target: Direction) -> int:
        """Rotate until the edge carries ``target`` relative to ``(v1, v2)``.

        Returns the number of unit rotations applied (0, 1 or 2).
        """
        target = _check_direction(target)
        with self.transaction():
            edges = self._pair_edges(v1, v2)
            if len(edges) == 2:
                if target is Direction.BIDIRECTIONAL:
                    raise EdgeCardinalityError(
                        f"Pair {v1}-{v2} holds a double edge and cannot become bidirectional"
                    )
                # The member carrying v1 -> v2 is DIRECTION_FIRST relative to (v1, v2).
                steps = 0 if target is Direction.DIRECTION_FIRST else 1
            else:
                edge, stored = edges[0], edges[0].direction
                for steps in range(3):
                    if self._relative(edge, v1, stored) is target:
                        break
                    stored = stored.rotated()
                else:
                    raise InvalidDirectionError(f"Cannot rotate {v1}-{v2} to {target!r}")
            for _ in range(steps):
                self.rotate_edge(v1, v2)
            return steps

    def set_arrow(self, v1: str, v2: str, is_arrowed: bool) -> int:
        if self.is_double_edge(v1, v2):
            raise EdgeCardinalityError(f"Pair {v1}-{v2} holds a double edge; it is always arrowed")
        if not is_arrowed:
            return self.rotate_edge_to(v1, v2, Direction.BIDIRECTIONAL)
        if self.get_direction(v1, v2) is Direction.BIDIRECTIONAL:
            return self.rotate_edge_to(v1, v2, Direction.DIRECTION_FIRST)
        return 0

    def split_edge(self, v1: str, v2: str) -> list[Edge]:
        """Replace a single edge with two opposite single-direction edges of equal cost."""
        with self.transaction() as model:
            edges = self._pair_edges(v1, v2)
            if len(edges) > 1:
                raise EdgeCardinalityError(f"Pair {v1}-{v2} is already a double edge")
            edge = edges[0]
            model.remove_edge(edge)
            return [
                model.insert_edge(edge.first, edge.second, edge.cost, Direction.DIRECTION_FIRST),
                model.insert_edge(edge.first, edge.second, edge.cost, Direction.DIRECTION_SECOND),
            ]

    def set_cost(self, v1: str, v2: str, cost: int) -> Edge:
        _check_cost(cost)
        edge = self.edge_for(v1, v2)
        edge.cost = cost
        return edge

    # -- helpers ----------------------------------------------------------

    def _pair_edges(self, v1: str, v2: str) -> list[Edge]:
        self.model.vertex(v1)
        self.model.vertex(v2)
        edges = self.model.edges_between(v1, v2)
        if not edges:
            raise NotFoundError(f"No edge between {v1} and {v2}")
        return edges

    def _reissue(self, edge: Edge, direction: Direction) -> Edge:
        """Replace ``edge`` with a fresh edge; ``direction`` is relative to ``(first, second)``."""
        self.model.remove_edge(edge)
        fresh = self.model.insert_edge(edge.first, edge.second, edge.cost, direction)
        logger.debug(
            "Re-issued edge %s as %s (%s-%s, %s)",
            edge.id,
            fresh.id,
            fresh.first,
            fresh.second,
            fresh.direction,
        )
        return fresh

    @staticmethod
    def _relative(edge: Edge, label: str, stored: Direction) -> Direction:
        return stored if label == edge.first else stored.reversed()

    @staticmethod
    def _stored(edge: Edge, label: str, relative: Direction) -> Direction:
        return relative if label == edge.first else relative.reversed()
