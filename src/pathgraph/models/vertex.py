"""Vertex model and label helpers."""

from __future__ import annotations

from string import ascii_uppercase

from pydantic import BaseModel, ConfigDict

LABELS = ascii_uppercase
MAX_VERTICES = len(LABELS)


def is_valid_label(label: object) -> bool:
    return isinstance(label, str) and len(label) == 1 and label in LABELS


class Vertex(BaseModel):
    """Labeled vertex. ``x``/``y`` are placement hints for UI callers only."""

    model_config = ConfigDict(strict=True, extra="ignore")

    label: str
    slot: int
    x: float = 0.0
    y: float = 0.0
