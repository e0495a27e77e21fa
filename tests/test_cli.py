from __future__ import annotations

import json
from pathlib import Path

import pytest

from pathgraph import PathGraph
from pathgraph.cli import main


def _create_graph_file(tmp_path: Path) -> Path:
    graph = PathGraph()
    graph.new_edge("A", "B", 1)
    graph.new_edge("B", "C", 2)
    graph.new_edge("A", "C", 10)
    graph.new_edge("C", "A", 4)
    graph.new_edge("C", "D", 1, is_arrowed=False)
    graph.new_node("E")
    path = tmp_path / "graph.json"
    assert graph.download_json(path)
    return path


def test_cli_inspect_prints_summary_and_tree(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    graph_file = _create_graph_file(tmp_path)
    exit_code = main(["inspect", str(graph_file), "--verbosity", "minimal"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Nodes: 5" in captured.out
    assert "Edges: 5" in captured.out
    assert "Arrowed edges: 4" in captured.out
    assert "Bidirectional edges: 1" in captured.out
    assert "Double edges: 1" in captured.out
    assert "Graph (5 nodes, 5 edges)" in captured.out
    assert "E: -" in captured.out


def test_cli_inspect_json_summary_output(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    graph_file = _create_graph_file(tmp_path)
    exit_code = main(["inspect", str(graph_file), "--json"])

    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert exit_code == 0
    assert payload["nodes"] == ["A", "B", "C", "D", "E"]
    assert payload["node_count"] == 5
    assert payload["edge_count"] == 5
    assert payload["double_edge_count"] == 1
    assert payload["out_degree"] == {"A": 2, "B": 1, "C": 2, "D": 1, "E": 0}


def test_cli_inspect_json_summary_output_to_file(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    graph_file = _create_graph_file(tmp_path)
    output_path = tmp_path / "summary.json"
    exit_code = main(["inspect", str(graph_file), "--json", "--output", str(output_path)])

    captured = capsys.readouterr()
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert exit_code == 0
    assert captured.out == ""
    assert payload["node_count"] == 5
    assert payload["edge_count"] == 5


def test_cli_output_without_json_raises_error(tmp_path: Path) -> None:
    graph_file = _create_graph_file(tmp_path)
    with pytest.raises(ValueError, match="--output is only supported when --json is provided"):
        main(["inspect", str(graph_file), "--output", str(tmp_path / "summary.json")])


def test_cli_inspect_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["inspect", str(tmp_path / "missing.json")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "file not found" in captured.err


def test_cli_inspect_invalid_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text('{"nodes": ["A"]}', encoding="utf-8")
    exit_code = main(["inspect", str(broken)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "missing key(s) edges" in captured.err


def test_cli_path_non_utf8_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    garbled = tmp_path / "garbled.json"
    garbled.write_bytes(b"\xff\xfe{")
    exit_code = main(["path", str(garbled), "A", "B"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err.startswith("Error: Failed to parse graph JSON")


def test_cli_path_prints_route(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    graph_file = _create_graph_file(tmp_path)
    exit_code = main(["path", str(graph_file), "A", "D"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Path A → D (cost 4, 3 hops)" in captured.out
    assert "A → B → C → D" in captured.out


def test_cli_path_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    graph_file = _create_graph_file(tmp_path)
    exit_code = main(["path", str(graph_file), "D", "B", "--json"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out) == {"path": ["D", "C", "A", "B"], "cost": 6}


def test_cli_path_without_route(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    graph_file = _create_graph_file(tmp_path)
    exit_code = main(["path", str(graph_file), "A", "E"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "no path" in captured.err
