"""Command line interface for pathgraph."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import cast

from .inspect_cmd import VerbosityArg, run_inspect
from .path_cmd import run_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathgraph")
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="Inspect a graph JSON file")
    inspect_parser.add_argument("graph_file", type=Path, help="Path to graph JSON file")
    inspect_parser.add_argument(
        "--verbosity",
        choices=["minimal", "standard", "full"],
        default="standard",
        help="Console render verbosity",
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable summary JSON instead of text output",
    )
    inspect_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output file path for --json summary",
    )

    path_parser = subparsers.add_parser("path", help="Find the cheapest path between two nodes")
    path_parser.add_argument("graph_file", type=Path, help="Path to graph JSON file")
    path_parser.add_argument("start", help="Start node label")
    path_parser.add_argument("end", help="End node label")
    path_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the path and its cost as JSON",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "inspect":
        return run_inspect(
            args.graph_file,
            cast(VerbosityArg, args.verbosity),
            as_json=args.json,
            output_path=args.output,
        )
    if args.command == "path":
        return run_path(args.graph_file, args.start, args.end, as_json=args.json)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
