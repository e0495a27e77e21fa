"""Edge model, direction and pair-state enumerations."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Direction(StrEnum):
    """Traversal direction relative to an ordered vertex pair ``(u, v)``.

    ``DIRECTION_FIRST`` allows ``u -> v`` only, ``DIRECTION_SECOND`` allows
    ``v -> u`` only and ``BIDIRECTIONAL`` allows both.
    """

    BIDIRECTIONAL = "bidirectional"
    DIRECTION_FIRST = "direction_first"
    DIRECTION_SECOND = "direction_second"

    @property
    def is_arrowed(self) -> bool:
        return self is not Direction.BIDIRECTIONAL

    def reversed(self) -> Direction:
        """Same traversal seen from the other end of the pair."""
        if self is Direction.DIRECTION_FIRST:
            return Direction.DIRECTION_SECOND
        if self is Direction.DIRECTION_SECOND:
            return Direction.DIRECTION_FIRST
        return self

    def rotated(self) -> Direction:
        """Next state of the unit rotation FIRST -> SECOND -> BIDIRECTIONAL -> FIRST."""
        if self is Direction.DIRECTION_FIRST:
            return Direction.DIRECTION_SECOND
        if self is Direction.DIRECTION_SECOND:
            return Direction.BIDIRECTIONAL
        return Direction.DIRECTION_FIRST


class PairState(StrEnum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class Edge(BaseModel):
    """Cost-bearing connection stored in canonical ``(first, second)`` order.

    ``first`` always sorts before ``second``; ``direction`` is relative to that
    order, so the same physical edge has exactly one stored form regardless of
    which endpoint the caller named first.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    id: str
    slot: int
    first: str
    second: str
    cost: int = Field(gt=0)
    direction: Direction = Direction.DIRECTION_FIRST

    @model_validator(mode="after")
    def validate_canonical_order(self) -> Edge:
        if self.first >= self.second:
            raise ValueError(f"Edge endpoints not in canonical order: {self.first}, {self.second}")
        return self

    @property
    def is_arrowed(self) -> bool:
        return self.direction.is_arrowed

    @property
    def pair(self) -> tuple[str, str]:
        return (self.first, self.second)

    @property
    def outbound(self) -> str:
        if self.direction is Direction.DIRECTION_SECOND:
            return self.second
        return self.first

    @property
    def inbound(self) -> str:
        if self.direction is Direction.DIRECTION_SECOND:
            return self.first
        return self.second

    def touches(self, label: str) -> bool:
        return label in (self.first, self.second)

    def other(self, label: str) -> str:
        if label == self.first:
            return self.second
        if label == self.second:
            return self.first
        raise ValueError(f"Vertex {label!r} is not an endpoint of edge {self.id}")

    def direction_from(self, label: str) -> Direction:
        """Direction relative to the ordered pair that starts at ``label``."""
        if label == self.first:
            return self.direction
        if label == self.second:
            return self.direction.reversed()
        raise ValueError(f"Vertex {label!r} is not an endpoint of edge {self.id}")

    def traverses(self, source: str, target: str) -> bool:
        """Whether the edge may be walked from ``source`` to ``target``."""
        if not (self.touches(source) and self.other(source) == target):
            return False
        return self.direction_from(source) is not Direction.DIRECTION_SECOND
