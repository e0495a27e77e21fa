"""Basic usage example using the boolean API."""

from __future__ import annotations

from pathlib import Path

from pathgraph import GraphConfig, PathGraph
from pathgraph.renderers import render_graph, render_path


def main() -> None:
    output_dir = Path("artifacts")
    output_dir.mkdir(exist_ok=True)

    graph = PathGraph(GraphConfig(seed=42))
    graph.new_edge("A", "B", 1)
    graph.new_edge("B", "C", 2)
    graph.new_edge("A", "C", 10)
    graph.new_edge("C", "A", 4)
    graph.new_edge("C", "D", 3, is_arrowed=False)

    if not graph.new_edge("A", "B", 7):
        print(f"Rejected: {graph.last_error}")

    print(render_graph(graph.get_graph(), verbosity="full"))
    print(render_path(graph.shortest_path("A", "D"), "A", "D"))

    graph_path = output_dir / "graph.json"
    graph.download_json(graph_path)
    print(f"Graph file saved to: {graph_path}")


if __name__ == "__main__":
    main()
