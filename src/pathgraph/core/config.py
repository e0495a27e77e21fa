"""Configuration for a graph instance."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """Validated settings for a PathGraph and the GraphModel it owns."""

    seed: int | None = None
    json_indent: int | None = Field(default=2, ge=0)
    edge_id_length: int = Field(default=4, ge=2, le=16)
