"""Snapshot DTOs exchanged with rendering/UI callers and the JSON codec."""

from __future__ import annotations

from collections import Counter

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_serializer,
    field_validator,
    model_validator,
)

from .edge import Direction, Edge
from .vertex import is_valid_label


def _check_label(value: str) -> str:
    if not is_valid_label(value):
        raise ValueError(f"Invalid node label: {value!r} (expected a single letter A-Z)")
    return value


class NodeDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str

    @field_validator("label")
    @classmethod
    def validate_label(cls, value: str) -> str:
        return _check_label(value)


class ConnectionDTO(BaseModel):
    """Reachable neighbor of a node and the cost of getting there."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    neighbor_label: str = Field(alias="neighborLabel")
    cost: int


class EdgeDTO(BaseModel):
    """Flattened edge: ``from -> to`` when arrowed, undirected otherwise."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    cost: int = Field(gt=0)
    is_arrowed: bool = Field(alias="isArrowed")

    @field_validator("from_", "to")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        return _check_label(value)

    @field_validator("cost", mode="before")
    @classmethod
    def parse_cost(cls, value: object) -> object:
        # Documents carry the cost as a string.
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise ValueError(f"Edge cost is not an integer: {value!r}") from None
        return value

    @field_serializer("cost")
    def serialize_cost(self, cost: int) -> str:
        return str(cost)

    @classmethod
    def from_edge(cls, edge: Edge) -> EdgeDTO:
        return cls(
            from_=edge.outbound,
            to=edge.inbound,
            cost=edge.cost,
            is_arrowed=edge.is_arrowed,
        )

    @classmethod
    def from_direction(cls, v1: str, v2: str, cost: int, direction: Direction) -> EdgeDTO:
        """Build the DTO for an edge whose ``direction`` is relative to ``(v1, v2)``."""
        if direction is Direction.DIRECTION_SECOND:
            v1, v2 = v2, v1
        return cls(from_=v1, to=v2, cost=cost, is_arrowed=direction.is_arrowed)

    @property
    def direction(self) -> Direction:
        """Direction relative to ``(from, to)``."""
        return Direction.DIRECTION_FIRST if self.is_arrowed else Direction.BIDIRECTIONAL

    @property
    def key(self) -> tuple[str, str, int, bool]:
        return (self.from_, self.to, self.cost, self.is_arrowed)


class GraphDTO(BaseModel):
    """Immutable graph snapshot.

    ``connections`` is derived once at construction from the edge list: an
    arrowed edge contributes ``from -> to`` only, an unarrowed edge contributes
    both ways.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    nodes: list[NodeDTO]
    edges: list[EdgeDTO]

    _connections: dict[NodeDTO, list[ConnectionDTO]] = PrivateAttr(default_factory=dict)

    @field_validator("nodes", mode="before")
    @classmethod
    def parse_nodes(cls, value: object) -> object:
        if isinstance(value, list):
            return [{"label": item} if isinstance(item, str) else item for item in value]
        return value

    @field_serializer("nodes")
    def serialize_nodes(self, nodes: list[NodeDTO]) -> list[str]:
        return [node.label for node in nodes]

    @model_validator(mode="after")
    def validate_references(self) -> GraphDTO:
        duplicates = [label for label, count in Counter(self.labels).items() if count > 1]
        if duplicates:
            raise ValueError(f"Duplicate node labels: {', '.join(sorted(duplicates))}")
        known = set(self.labels)
        for edge in self.edges:
            if edge.from_ not in known:
                raise ValueError(f"Edge endpoint not found in nodes: {edge.from_}")
            if edge.to not in known:
                raise ValueError(f"Edge endpoint not found in nodes: {edge.to}")
        return self

    def model_post_init(self, __context: object) -> None:
        connections: dict[NodeDTO, list[ConnectionDTO]] = {node: [] for node in self.nodes}
        by_label = {node.label: node for node in self.nodes}
        for edge in self.edges:
            source, target = by_label.get(edge.from_), by_label.get(edge.to)
            if source is None or target is None:
                continue
            connections[source].append(ConnectionDTO(neighbor_label=edge.to, cost=edge.cost))
            if not edge.is_arrowed:
                connections[target].append(
                    ConnectionDTO(neighbor_label=edge.from_, cost=edge.cost)
                )
        self._connections = connections

    @property
    def labels(self) -> list[str]:
        return [node.label for node in self.nodes]

    @property
    def connections(self) -> dict[NodeDTO, list[ConnectionDTO]]:
        return self._connections

    def find_node(self, label: str) -> NodeDTO | None:
        return next((node for node in self.nodes if node.label == label), None)

    def connections_of(self, label: str) -> list[ConnectionDTO]:
        node = self.find_node(label)
        if node is None:
            return []
        return self._connections[node]

    def edge_multiset(self) -> Counter[tuple[str, str, int, bool]]:
        return Counter(edge.key for edge in self.edges)
