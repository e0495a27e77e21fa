"""GraphModel — arena store of vertices and edges with label and pair indexes.

The model validates labels, endpoints and costs but never the per-pair edge
limit; ``EdgeDirectionEngine`` enforces that.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from string import ascii_uppercase, digits

from ..exceptions import (
    DuplicateLabelError,
    InvalidCostError,
    InvalidDirectionError,
    NotFoundError,
    SelfLoopError,
)
from ..models import Direction, Edge, Vertex, is_valid_label

_ID_ALPHABET = ascii_uppercase + digits


def canonical_pair(v1: str, v2: str) -> tuple[str, str]:
    return (v1, v2) if v1 < v2 else (v2, v1)


@dataclass
class GraphSnapshot:
    """Point-in-time copy of the arena, used to roll back failed operations."""

    vertices: dict[int, Vertex] = field(default_factory=dict)
    edges: dict[int, Edge] = field(default_factory=dict)
    next_vertex_slot: int = 0
    next_edge_slot: int = 0


class GraphModel:
    def __init__(self, *, seed: int | None = None, edge_id_length: int = 4) -> None:
        self._rng = random.Random(seed)
        self._edge_id_length = edge_id_length
        self._vertices: dict[int, Vertex] = {}
        self._edges: dict[int, Edge] = {}
        self._label_index: dict[str, int] = {}
        self._pair_index: dict[tuple[str, str], list[int]] = {}
        self._next_vertex_slot = 0
        self._next_edge_slot = 0

    @property
    def rng(self) -> random.Random:
        """Seeded generator shared by edge ids and random picks."""
        return self._rng

    # -- vertices ---------------------------------------------------------

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    @property
    def labels(self) -> list[str]:
        return [vertex.label for vertex in self._vertices.values()]

    def has_vertex(self, label: str) -> bool:
        return label in self._label_index

    def vertex(self, label: str) -> Vertex:
        slot = self._label_index.get(label)
        if slot is None:
            raise NotFoundError(f"Unknown vertex: {label!r}")
        return self._vertices[slot]

    def insert_vertex(self, label: str, x: float = 0.0, y: float = 0.0) -> Vertex:
        if not is_valid_label(label):
            raise DuplicateLabelError(f"Invalid vertex label: {label!r} (expected A-Z)")
        if label in self._label_index:
            raise DuplicateLabelError(f"Vertex label already in use: {label!r}")
        vertex = Vertex(label=label, slot=self._next_vertex_slot, x=float(x), y=float(y))
        self._next_vertex_slot += 1
        self._vertices[vertex.slot] = vertex
        self._label_index[label] = vertex.slot
        return vertex

    def remove_vertex(self, label: str) -> list[Edge]:
        """Remove a vertex and every edge incident to it. Returns the removed edges."""
        vertex = self.vertex(label)
        removed = self.incident_edges(label)
        for edge in removed:
            self.remove_edge(edge)
        del self._vertices[vertex.slot]
        del self._label_index[label]
        return removed

    # -- edges ------------------------------------------------------------

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges.values())

    def insert_edge(
        self,
        outbound: str,
        inbound: str,
        cost: int,
        direction: Direction = Direction.DIRECTION_FIRST,
    ) -> Edge:
        """Store a new edge; ``direction`` is relative to ``(outbound, inbound)``."""
        if outbound == inbound:
            raise SelfLoopError(f"Edge endpoints must differ: {outbound!r}")
        self.vertex(outbound)
        self.vertex(inbound)
        if isinstance(cost, bool) or not isinstance(cost, int) or cost <= 0:
            raise InvalidCostError(f"Edge cost must be a positive integer, got {cost!r}")
        if not isinstance(direction, Direction):
            raise InvalidDirectionError(f"Not an edge direction: {direction!r}")
        first, second = canonical_pair(outbound, inbound)
        if first != outbound:
            direction = direction.reversed()
        edge = Edge(
            id=self._new_edge_id(),
            slot=self._next_edge_slot,
            first=first,
            second=second,
            cost=cost,
            direction=direction,
        )
        self._next_edge_slot += 1
        self._edges[edge.slot] = edge
        self._pair_index.setdefault(edge.pair, []).append(edge.slot)
        return edge

    def remove_edge(self, edge: Edge) -> None:
        if self._edges.get(edge.slot) is not edge:
            raise NotFoundError(f"Edge {edge.id} is not part of this graph")
        del self._edges[edge.slot]
        slots = self._pair_index[edge.pair]
        slots.remove(edge.slot)
        if not slots:
            del self._pair_index[edge.pair]

    def edge_by_id(self, edge_id: str) -> Edge:
        for edge in self._edges.values():
            if edge.id == edge_id:
                return edge
        raise NotFoundError(f"Unknown edge id: {edge_id!r}")

    def edges_between(self, v1: str, v2: str) -> list[Edge]:
        slots = self._pair_index.get(canonical_pair(v1, v2), [])
        return [self._edges[slot] for slot in slots]

    def count_edges_between(self, v1: str, v2: str) -> int:
        return len(self._pair_index.get(canonical_pair(v1, v2), []))

    def incident_edges(self, label: str) -> list[Edge]:
        return [edge for edge in self._edges.values() if edge.touches(label)]

    def clear(self) -> None:
        self._vertices.clear()
        self._edges.clear()
        self._label_index.clear()
        self._pair_index.clear()

    # -- snapshots --------------------------------------------------------

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(
            vertices={slot: v.model_copy() for slot, v in self._vertices.items()},
            edges={slot: e.model_copy() for slot, e in self._edges.items()},
            next_vertex_slot=self._next_vertex_slot,
            next_edge_slot=self._next_edge_slot,
        )

    def restore(self, snapshot: GraphSnapshot) -> None:
        self.clear()
        for slot, vertex in snapshot.vertices.items():
            copy = vertex.model_copy()
            self._vertices[slot] = copy
            self._label_index[copy.label] = slot
        for slot, edge in snapshot.edges.items():
            copy = edge.model_copy()
            self._edges[slot] = copy
            self._pair_index.setdefault(copy.pair, []).append(slot)
        self._next_vertex_slot = snapshot.next_vertex_slot
        self._next_edge_slot = snapshot.next_edge_slot

    def _new_edge_id(self) -> str:
        used = {edge.id for edge in self._edges.values()}
        while True:
            edge_id = "".join(self._rng.choices(_ID_ALPHABET, k=self._edge_id_length))
            if edge_id not in used:
                return edge_id
