"""Maximum flow in a directed network: Dinic, Edmonds-Karp and Ford-Fulkerson."""

from __future__ import annotations

import math
from collections import deque


class FlowNetwork:
    """Directed network with integer capacities on vertices ``0 .. vertex_count - 1``.

    Each max-flow method works on its own copy of the residual capacities,
    so the network can be queried repeatedly and by different algorithms.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._size = vertex_count
        self._capacity: list[list[int]] = [[0] * vertex_count for _ in range(vertex_count)]
        self._adjacent: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return self._size

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._size:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, target: int, capacity: int) -> None:
        """Set the capacity of the edge ``source -> target``.

        Adding the same edge again replaces its capacity.
        """
        self._check_vertex(source)
        self._check_vertex(target)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity[source][target] = capacity
        self._adjacent[source].append(target)
        self._adjacent[target].append(source)

    def _residual(self) -> list[list[int]]:
        return [list(row) for row in self._capacity]

    def _check_terminals(self, source: int, sink: int) -> None:
        self._check_vertex(source)
        self._check_vertex(sink)

    # Dinic

    def dinic(self, source: int, sink: int) -> int:
        """Return the maximum flow from ``source`` to ``sink`` using Dinic's algorithm."""
        self._check_terminals(source, sink)
        residual = self._residual()
        total = 0
        while (levels := self._levels(residual, source, sink)) is not None:
            while flow := self._push(residual, levels, source, sink, math.inf):
                total += flow
        return total

    def _levels(self, residual: list[list[int]], source: int, sink: int) -> list[int] | None:
        levels = [-1] * self._size
        levels[source] = 0
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for neighbor in self._adjacent[vertex]:
                if levels[neighbor] < 0 and residual[vertex][neighbor] > 0:
                    levels[neighbor] = levels[vertex] + 1
                    if neighbor == sink:
                        return levels
                    queue.append(neighbor)
        return None

    def _push(
        self,
        residual: list[list[int]],
        levels: list[int],
        vertex: int,
        sink: int,
        limit: float,
    ) -> int:
        if vertex == sink:
            return int(limit)
        for neighbor in self._adjacent[vertex]:
            available = residual[vertex][neighbor]
            if levels[neighbor] == levels[vertex] + 1 and available > 0:
                pushed = self._push(residual, levels, neighbor, sink, min(limit, available))
                if pushed > 0:
                    residual[vertex][neighbor] -= pushed
                    residual[neighbor][vertex] += pushed
                    return pushed
        return 0

    # Augmenting paths found by breadth-first search

    def edmonds_karp(self, source: int, sink: int) -> int:
        """Return the maximum flow using shortest augmenting paths (Edmonds-Karp)."""
        self._check_terminals(source, sink)
        return self._augment_by_bfs(source, sink)

    def ford_fulkerson(self, source: int, sink: int) -> int:
        """Return the maximum flow using the Ford-Fulkerson method.

        Augmenting paths are found by breadth-first search.
        """
        self._check_terminals(source, sink)
        return self._augment_by_bfs(source, sink)

    def _augment_by_bfs(self, source: int, sink: int) -> int:
        residual = self._residual()
        total = 0
        while (parents := self._find_path(residual, source, sink)) is not None:
            path = list(self._path_edges(parents, source, sink))
            amount = min(residual[u][v] for u, v in path)
            for u, v in path:
                residual[u][v] -= amount
                residual[v][u] += amount
            total += amount
        return total

    def _find_path(
        self, residual: list[list[int]], source: int, sink: int
    ) -> dict[int, int] | None:
        parents: dict[int, int] = {}
        visited = {source}
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for neighbor in self._adjacent[vertex]:
                if neighbor not in visited and residual[vertex][neighbor] > 0:
                    parents[neighbor] = vertex
                    visited.add(neighbor)
                    if neighbor == sink:
                        return parents
                    queue.append(neighbor)
        return None

    @staticmethod
    def _path_edges(parents: dict[int, int], source: int, sink: int):
        vertex = sink
        while vertex != source:
            parent = parents[vertex]
            yield parent, vertex
            vertex = parent