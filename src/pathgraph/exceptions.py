"""Public exception types for pathgraph."""

from __future__ import annotations


class PathGraphError(Exception):
    """Base class for all pathgraph exceptions."""


class DuplicateLabelError(PathGraphError):
    """Raised when a vertex label is already in use or outside ``A``..``Z``."""


class InvalidCostError(PathGraphError):
    """Raised when an edge cost is not a positive integer."""


class SelfLoopError(PathGraphError):
    """Raised when both endpoints of an edge are the same vertex."""


class EdgeCardinalityError(PathGraphError):
    """Raised when an operation would break the two-edges-per-pair rule."""


class NotFoundError(PathGraphError):
    """Raised when a referenced vertex or edge does not exist."""


class ParseError(PathGraphError):
    """Raised when a graph document cannot be loaded or parsed."""


class InvalidDirectionError(PathGraphError):
    """Raised when a value does not name an edge direction."""
