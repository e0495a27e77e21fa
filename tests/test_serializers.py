from __future__ import annotations

import json
from pathlib import Path

import pytest

from pathgraph.core import EdgeDirectionEngine, GraphModel
from pathgraph.exceptions import EdgeCardinalityError, ParseError
from pathgraph.models import Direction
from pathgraph.serializers import (
    connections_to_json,
    edges_to_json,
    graph_from_json,
    graph_to_dto,
    graph_to_json,
    load_graph,
    load_graph_json,
    nodes_to_json,
    save_graph_json,
)


def _build_engine() -> EdgeDirectionEngine:
    engine = EdgeDirectionEngine(GraphModel(seed=11))
    engine.new_edge("A", "B", 5)
    engine.new_edge("B", "A", 3)
    engine.new_edge("C", "A", 2, Direction.BIDIRECTIONAL)
    engine.new_node("D")
    return engine


def test_graph_to_json_writes_schema() -> None:
    payload = json.loads(graph_to_json(graph_to_dto(_build_engine().model)))

    assert payload["nodes"] == ["A", "B", "C", "D"]
    assert {"from": "A", "to": "B", "cost": "5", "isArrowed": True} in payload["edges"]
    assert {"from": "B", "to": "A", "cost": "3", "isArrowed": True} in payload["edges"]
    assert {"from": "A", "to": "C", "cost": "2", "isArrowed": False} in payload["edges"]


def test_json_roundtrip_preserves_labels_and_edges() -> None:
    dto = graph_to_dto(_build_engine().model)
    loaded = graph_from_json(graph_to_json(dto))

    assert loaded.labels == dto.labels
    assert loaded.edge_multiset() == dto.edge_multiset()


def test_loading_into_fresh_engine_reforms_double_edges() -> None:
    dto = graph_to_dto(_build_engine().model)
    fresh = EdgeDirectionEngine(GraphModel(seed=2))

    load_graph(fresh, graph_from_json(graph_to_json(dto)))

    assert fresh.is_double_edge("A", "B")
    assert graph_to_dto(fresh.model).edge_multiset() == dto.edge_multiset()


def test_graph_from_json_accepts_integer_costs() -> None:
    graph = graph_from_json(
        '{"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "cost": 4, "isArrowed": true}]}'
    )

    assert graph.edges[0].cost == 4
    assert graph.connections_of("A")[0].neighbor_label == "B"


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ("{not json", "Failed to parse graph JSON"),
        ("[]", "expected an object"),
        ('{"nodes": []}', "missing key"),
        ('{"nodes": ["A", "a"], "edges": []}', "single letter"),
        ('{"nodes": ["A", "A"], "edges": []}', "Duplicate node labels"),
        (
            '{"nodes": ["A"], "edges": [{"from": "A", "to": "B", "cost": "1", "isArrowed": true}]}',
            "Edge endpoint not found",
        ),
        (
            '{"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "cost": "x", '
            '"isArrowed": true}]}',
            "not an integer",
        ),
        (
            '{"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "cost": "0", '
            '"isArrowed": true}]}',
            "greater than 0",
        ),
    ],
)
def test_graph_from_json_rejects_invalid_documents(payload: str, message: str) -> None:
    with pytest.raises(ParseError, match=message):
        graph_from_json(payload)


def test_graph_from_json_warns_on_unknown_keys() -> None:
    with pytest.warns(UserWarning, match="unknown key"):
        graph = graph_from_json('{"nodes": ["A"], "edges": [], "layout": {}}')

    assert graph.labels == ["A"]


def test_derived_views() -> None:
    dto = graph_to_dto(_build_engine().model)

    assert json.loads(nodes_to_json(dto)) == {"nodes": ["A", "B", "C", "D"]}
    assert len(json.loads(edges_to_json(dto))["edges"]) == 3

    connections = json.loads(connections_to_json(dto, indent=None))["connections"]
    by_node = {entry["node"]: entry["edges"] for entry in connections}
    assert by_node["A"] == [{"to": "B", "cost": 5}, {"to": "C", "cost": 2}]
    assert by_node["B"] == [{"to": "A", "cost": 3}]
    assert by_node["C"] == [{"to": "A", "cost": 2}]
    assert by_node["D"] == []


def test_save_and_load_graph_json_file(tmp_path: Path) -> None:
    dto = graph_to_dto(_build_engine().model)
    output = save_graph_json(dto, tmp_path / "nested" / "graph.json")

    loaded = load_graph_json(output)

    assert output.exists()
    assert loaded.edge_multiset() == dto.edge_multiset()


def test_load_graph_json_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_graph_json(tmp_path / "missing.json")


def test_load_graph_json_rejects_non_utf8_bytes(tmp_path: Path) -> None:
    garbled = tmp_path / "garbled.json"
    garbled.write_bytes(b"\xff\xfe{")

    with pytest.raises(ParseError, match="Failed to parse graph JSON"):
        load_graph_json(garbled)


def test_load_graph_rolls_back_on_rejected_edge() -> None:
    engine = _build_engine()
    before = graph_to_dto(engine.model).edge_multiset()
    conflicting = graph_from_json(
        '{"nodes": ["A", "B"], "edges": ['
        '{"from": "A", "to": "B", "cost": "1", "isArrowed": true},'
        '{"from": "A", "to": "B", "cost": "2", "isArrowed": true}]}'
    )

    with pytest.raises(EdgeCardinalityError, match="must point the other way"):
        load_graph(engine, conflicting)

    assert engine.model.labels == ["A", "B", "C", "D"]
    assert graph_to_dto(engine.model).edge_multiset() == before
