"""Directed weighted graph on integer vertices, with traversals and connectivity checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    src: int
    dest: int
    weight: int


class DuplicateEdgeError(ValueError):
    """Raised when an edge is added between two vertices that are already joined."""

    def __init__(self, src: int, dest: int) -> None:
        super().__init__(f"edge exists between {src} and {dest}")
        self.src = src
        self.dest = dest


class Graph:
    """Adjacency-list graph whose vertices are the integers 0 .. len(graph) - 1."""

    def __init__(self, vertex_count: int = 0) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count cannot be negative")
        self._adjacency: list[dict[int, Edge]] = [{} for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={sum(map(len, self._adjacency))})"

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range ({len(self._adjacency)})")

    def add_vertex(self, vertex: int) -> None:
        """Make sure ``vertex`` exists, adding every missing vertex below it too."""
        if vertex < 0:
            raise ValueError("vertex numbers cannot be negative")
        missing = vertex + 1 - len(self._adjacency)
        self._adjacency.extend({} for _ in range(missing))

    def add_edge(self, src: int, dest: int, weight: int) -> Edge:
        """Add a directed edge, growing the graph to hold both ends."""
        self.add_vertex(src)
        self.add_vertex(dest)
        if dest in self._adjacency[src]:
            raise DuplicateEdgeError(src, dest)
        edge = Edge(src, dest, weight)
        self._adjacency[src][dest] = edge
        return edge

    def add_undirected_edge(self, src: int, dest: int, weight: int) -> None:
        """Add edges in both directions with the same weight."""
        self.add_vertex(src)
        self.add_vertex(dest)
        if dest in self._adjacency[src]:
            raise DuplicateEdgeError(src, dest)
        if src in self._adjacency[dest]:
            raise DuplicateEdgeError(dest, src)
        self._adjacency[src][dest] = Edge(src, dest, weight)
        self._adjacency[dest][src] = Edge(dest, src, weight)

    def has_edge(self, src: int, dest: int) -> bool:
        """Whether a directed edge from ``src`` to ``dest`` exists."""
        if not (0 <= src < len(self) and 0 <= dest < len(self)):
            return False
        return dest in self._adjacency[src]

    def weight(self, src: int, dest: int) -> int:
        """Weight of the edge from ``src`` to ``dest``; KeyError if there is none."""
        if not self.has_edge(src, dest):
            raise KeyError((src, dest))
        return self._adjacency[src][dest].weight

    def neighbours(self, vertex: int) -> list[int]:
        """Destinations of the edges leaving ``vertex``, in ascending order."""
        self._check_vertex(vertex)
        return sorted(self._adjacency[vertex])

    def edges(self) -> Iterator[Edge]:
        """All edges, ordered by source vertex and then by destination."""
        for targets in self._adjacency:
            for dest in sorted(targets):
                yield targets[dest]

    def transpose(self) -> Graph:
        """A new graph with every edge reversed."""
        reversed_graph = Graph(len(self))
        for edge in self.edges():
            reversed_graph.add_edge(edge.dest, edge.src, edge.weight)
        return reversed_graph

    def dfs(self, source: int) -> list[int]:
        """Vertices reachable from ``source`` in depth-first visiting order."""
        self._check_vertex(source)
        visited = {source}
        order = [source]
        stack = [iter(self.neighbours(source))]
        while stack:
            for vertex in stack[-1]:
                if vertex not in visited:
                    visited.add(vertex)
                    order.append(vertex)
                    stack.append(iter(self.neighbours(vertex)))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, source: int) -> list[int]:
        """Vertices reachable from ``source`` in breadth-first visiting order."""
        self._check_vertex(source)
        visited: set[int] = set()
        order: list[int] = []
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            queue.extend(n for n in self.neighbours(vertex) if n not in visited)
        return order

    def is_strongly_connected(self) -> bool:
        """Kosaraju's check: every vertex reaches vertex 0 and is reached from it."""
        if not self._adjacency:
            return True
        if len(self.dfs(0)) != len(self):
            return False
        return len(self.transpose().dfs(0)) == len(self)