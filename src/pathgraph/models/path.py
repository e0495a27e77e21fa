"""Shortest-path query result."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field

from .graph_dto import NodeDTO


class PathResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodes: list[NodeDTO]
    cost: int

    @computed_field(return_type=list[str])
    @property
    def labels(self) -> list[str]:
        return [node.label for node in self.nodes]

    @property
    def hops(self) -> int:
        return max(len(self.nodes) - 1, 0)
