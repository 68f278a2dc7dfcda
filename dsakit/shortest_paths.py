"""Single-source shortest paths over a :class:`~dsakit.graph.Graph`."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from dataclasses import dataclass

from .graph import Edge, Graph


class NegativeCycleError(ValueError):
    """Raised when a negative weight cycle is reachable from the source."""

    def __init__(self) -> None:
        super().__init__("graph contains a negative weight cycle")


@dataclass(frozen=True)
class ShortestPaths:
    """Distances from ``source`` and the predecessor of each vertex on its shortest path.

    Unreachable vertices have distance ``math.inf`` and predecessor ``None``.
    """

    source: int
    distances: tuple[float, ...]
    previous: tuple[int | None, ...]

    def path_to(self, vertex: int) -> list[int]:
        """Vertices on the shortest path from the source to ``vertex``, both included."""
        if not 0 <= vertex < len(self.distances):
            raise IndexError(f"vertex {vertex} is out of range ({len(self.distances)})")
        if math.isinf(self.distances[vertex]):
            raise ValueError(f"vertex {vertex} is not reachable from {self.source}")
        path = [vertex]
        while path[-1] != self.source:
            predecessor = self.previous[path[-1]]
            if predecessor is None:
                raise ValueError(f"vertex {vertex} is not reachable from {self.source}")
            path.append(predecessor)
        path.reverse()
        return path


def _check_source(graph: Graph, source: int) -> None:
    if not 0 <= source < len(graph):
        raise IndexError(f"vertex {source} is out of range ({len(graph)})")


def dijkstra(graph: Graph, source: int) -> ShortestPaths:
    """Shortest paths by Dijkstra's algorithm; all edge weights must be non-negative."""
    _check_source(graph, source)
    for edge in graph.edges():
        if edge.weight < 0:
            raise ValueError(
                f"edge {edge.src} -> {edge.dest} has negative weight {edge.weight}"
            )

    distances: list[float] = [math.inf] * len(graph)
    previous: list[int | None] = [None] * len(graph)
    distances[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if distance > distances[vertex]:
            continue
        for neighbour in graph.neighbours(vertex):
            candidate = distance + graph.weight(vertex, neighbour)
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                previous[neighbour] = vertex
                heapq.heappush(heap, (candidate, neighbour))
    return ShortestPaths(source, tuple(distances), tuple(previous))


def _relax(
    edges: Iterable[Edge], distances: list[float], previous: list[int | None]
) -> bool:
    relaxed = False
    for edge in edges:
        start = distances[edge.src]
        if math.isinf(start):
            continue
        candidate = start + edge.weight
        if candidate < distances[edge.dest]:
            distances[edge.dest] = candidate
            previous[edge.dest] = edge.src
            relaxed = True
    return relaxed


def bellman_ford(graph: Graph, source: int) -> ShortestPaths:
    """Shortest paths by Bellman-Ford; negative weights are allowed, negative cycles are not."""
    _check_source(graph, source)
    edges = list(graph.edges())
    distances: list[float] = [math.inf] * len(graph)
    previous: list[int | None] = [None] * len(graph)
    distances[source] = 0

    for _ in range(len(graph) - 1):
        if not _relax(edges, distances, previous):
            break

    if any(
        not math.isinf(distances[edge.src])
        and distances[edge.src] + edge.weight < distances[edge.dest]
        for edge in edges
    ):
        raise NegativeCycleError()
    return ShortestPaths(source, tuple(distances), tuple(previous))