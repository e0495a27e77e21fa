"""Console renderers."""

from .console import Verbosity, render_graph, render_path

__all__ = ["Verbosity", "render_graph", "render_path"]
