"""Shortest path over a graph snapshot (Dijkstra)."""

from __future__ import annotations

import heapq
import math

from ..models import GraphDTO, NodeDTO, PathResult


def find_path(graph: GraphDTO, start: str, end: str) -> PathResult | None:
    """Cheapest path from ``start`` to ``end`` following edge directions.

    Returns ``None`` when either label is unknown, when ``start == end`` or
    when ``end`` is unreachable. Among frontier entries with equal distance
    the lower label is settled first, which makes results reproducible.
    """
    start_node = graph.find_node(start)
    end_node = graph.find_node(end)
    if start_node is None or end_node is None or start == end:
        return None

    distances: dict[str, float] = {label: math.inf for label in graph.labels}
    predecessors: dict[str, str] = {}
    distances[start] = 0
    queue: list[tuple[float, str]] = [(0, start)]
    settled: set[str] = set()

    while queue:
        distance, label = heapq.heappop(queue)
        if label in settled:
            continue
        settled.add(label)
        for connection in graph.connections_of(label):
            neighbor = connection.neighbor_label
            if neighbor not in distances:
                continue
            candidate = distance + connection.cost
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = label
                heapq.heappush(queue, (candidate, neighbor))

    if end not in predecessors:
        return None
    path = [end]
    while path[-1] != start:
        path.append(predecessors[path[-1]])
    path.reverse()
    return PathResult(nodes=[NodeDTO(label=label) for label in path], cost=int(distances[end]))


class PathFinder:
    """Path queries against a fixed snapshot."""

    def __init__(self, graph: GraphDTO) -> None:
        self.graph = graph

    def find_path(self, start: str, end: str) -> PathResult | None:
        return find_path(self.graph, start, end)
