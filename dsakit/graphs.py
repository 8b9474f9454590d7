"""Directed graphs and the classic traversals and shortest-path algorithms on them."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable, NamedTuple, Sequence


class Edge(NamedTuple):
    """A directed edge from ``src`` to ``dest`` with an optional ``weight``."""

    src: int
    dest: int
    weight: float = 0


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_vertex(vertex: int, vertices: int) -> None:
    if not 0 <= vertex < vertices:
        raise IndexError(f"vertex {vertex} out of range for graph of {vertices} vertices")


def _check_square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


class Graph:
    """A directed graph over vertices ``0 .. vertices - 1`` stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, src: int, dest: int) -> None:
        """Add a directed edge from ``src`` to ``dest``."""
        _check_vertex(src, len(self))
        _check_vertex(dest, len(self))
        self._adjacency[src].append(dest)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the vertices reachable by one edge from ``vertex``, in insertion order."""
        _check_vertex(vertex, len(self))
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, len(self))
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbor in self._adjacency[vertex]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    pending.append(neighbor)
        return order

    def format_adjacency(self) -> str:
        """Return one line per vertex listing its adjacency list."""
        return "\n".join(
            f"Adjacency list of vertex: {vertex}" + "".join(f"-> {n}" for n in neighbors)
            for vertex, neighbors in enumerate(self._adjacency)
        )

    def __repr__(self) -> str:
        return f"Graph({self._adjacency!r})"


def build_linked_adjacency(edges: Iterable[Sequence[int]], vertices: int) -> list[list[int]]:
    """Build adjacency lists where each new edge is linked in at the front.

    Each vertex's list therefore holds its destinations newest first.
    """
    if vertices < 0:
        raise ValueError("number of vertices must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertices)]
    for edge in edges:
        src, dest = edge[0], edge[1]
        _check_vertex(src, vertices)
        _check_vertex(dest, vertices)
        adjacency[src].insert(0, dest)
    return adjacency


def dfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the depth-first visiting order from ``start`` over an adjacency matrix.

    An entry of 1 marks an edge; neighbours are explored in ascending order.
    """
    size = _check_square(matrix)
    _check_vertex(start, size)
    visited: set[int] = set()
    order: list[int] = []
    pending = [start]
    while pending:
        vertex = pending.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        for neighbor in reversed(range(size)):
            if matrix[vertex][neighbor] == 1 and neighbor not in visited:
                pending.append(neighbor)
    return order


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return shortest distances from ``source`` over a weighted adjacency matrix.

    A zero entry means no edge. Unreachable vertices get ``math.inf``.
    """
    size = _check_square(matrix)
    _check_vertex(source, size)
    dist: list[float] = [math.inf] * size
    dist[source] = 0
    done: set[int] = set()
    pending: list[tuple[float, int]] = [(0, source)]
    while pending:
        distance, vertex = heapq.heappop(pending)
        if vertex in done:
            continue
        done.add(vertex)
        for neighbor, weight in enumerate(matrix[vertex]):
            if not weight or neighbor in done:
                continue
            candidate = distance + weight
            if candidate < dist[neighbor]:
                dist[neighbor] = candidate
                heapq.heappush(pending, (candidate, neighbor))
    return dist


def bellman_ford(vertices: int, edges: Iterable[Sequence[float]], source: int) -> list[float]:
    """Return shortest distances from ``source``, allowing negative edge weights.

    Edges are (src, dest, weight) triples or ``Edge`` values. Unreachable
    vertices get ``math.inf``. Raises ``NegativeCycleError`` if a negative
    cycle is reachable from the source.
    """
    if vertices < 0:
        raise ValueError("number of vertices must not be negative")
    _check_vertex(source, vertices)
    edge_list = [Edge(int(e[0]), int(e[1]), e[2]) for e in edges]
    for edge in edge_list:
        _check_vertex(edge.src, vertices)
        _check_vertex(edge.dest, vertices)

    dist: list[float] = [math.inf] * vertices
    dist[source] = 0
    for _ in range(vertices - 1):
        for src, dest, weight in edge_list:
            if dist[src] != math.inf and dist[src] + weight < dist[dest]:
                dist[dest] = dist[src] + weight

    for src, dest, weight in edge_list:
        if dist[src] != math.inf and dist[src] + weight < dist[dest]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return dist