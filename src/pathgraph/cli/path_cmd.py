"""Path subcommand implementation."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from ..core import find_path
from ..renderers import render_path
from .inspect_cmd import read_graph


def run_path(graph_file: Path, start: str, end: str, *, as_json: bool) -> int:
    graph = read_graph(graph_file)
    if graph is None:
        return 1

    result = find_path(graph, start, end)
    if result is None:
        print(f"Error: no path from {start} to {end}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps({"path": result.labels, "cost": result.cost}, ensure_ascii=True))
        return 0
    print(render_path(result, start, end))
    return 0
