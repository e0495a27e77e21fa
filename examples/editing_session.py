"""Editing session using the typed engine API, which raises on rejected changes."""

from __future__ import annotations

from pathgraph import Direction, EdgeDirectionEngine, GraphModel, PathGraphError
from pathgraph.renderers import render_graph
from pathgraph.serializers import graph_to_dto, graph_to_json


def main() -> None:
    engine = EdgeDirectionEngine(GraphModel(seed=1))
    engine.new_edge("A", "B", 5, Direction.BIDIRECTIONAL)
    engine.split_edge("A", "B")
    engine.set_cost("B", "A", 8)
    engine.rotate_edge("A", "B")
    engine.new_edge("B", "C", 2)
    engine.rename_node("C", "Z")

    try:
        engine.new_edge("A", "B", 1)
    except PathGraphError as exc:
        print(f"{type(exc).__name__}: {exc}")

    engine.delete_edge("A", "B")
    snapshot = graph_to_dto(engine.model)
    print(render_graph(snapshot, verbosity="full"))
    print(graph_to_json(snapshot))


if __name__ == "__main__":
    main()
