"""Graphs stored as adjacency matrices, with BFS and DFS."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator

from algokit.graph_list import EdgeKind


@dataclass(frozen=True)
class MatrixEdge:
    """An edge reported by a traversal of an adjacency matrix."""

    source: int
    target: int
    kind: EdgeKind


class AdjacencyMatrix:
    """Square matrix where a non-zero entry marks an edge from row to column."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._rows: list[list[int]] = [[0] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> AdjacencyMatrix:
        """Build a matrix from rows; ``ValueError`` if they are not square."""
        copied = [list(row) for row in rows]
        if any(len(row) != len(copied) for row in copied):
            raise ValueError("matrix must be square")
        matrix = cls(0)
        matrix._rows = copied
        return matrix

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        """The matrix entries, row by row."""
        return tuple(tuple(row) for row in self._rows)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._rows):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, first: int, second: int) -> None:
        """Add an unweighted undirected edge between two vertices."""
        self._check_vertex(first)
        self._check_vertex(second)
        self._rows[first][second] = 1
        self._rows[second][first] = 1

    def format(self) -> str:
        """Render the matrix as space-separated rows."""
        return "\n".join(" ".join(str(value) for value in row) for row in self._rows)

    def breadth_first_edges(self, start: int) -> Iterator[MatrixEdge]:
        """Yield the tree edges of a breadth-first search from ``start``."""
        self._check_vertex(start)
        return self._breadth_first(start)

    def _breadth_first(self, start: int) -> Iterator[MatrixEdge]:
        visited = {start}
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            for neighbor, value in enumerate(self._rows[vertex]):
                if value != 0 and neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
                    yield MatrixEdge(vertex, neighbor, EdgeKind.TREE)

    def depth_first_edges(self, start: int) -> Iterator[MatrixEdge]:
        """Yield tree and back edges of a depth-first search from ``start``.

        An edge to an explored vertex other than the parent is a back edge.
        """
        self._check_vertex(start)
        return self._depth_first(start, None, set())

    def _depth_first(
        self, vertex: int, parent: int | None, explored: set[int]
    ) -> Iterator[MatrixEdge]:
        explored.add(vertex)
        for neighbor, value in enumerate(self._rows[vertex]):
            if value == 0:
                continue
            if neighbor not in explored:
                yield MatrixEdge(vertex, neighbor, EdgeKind.TREE)
                yield from self._depth_first(neighbor, vertex, explored)
            elif neighbor != parent:
                yield MatrixEdge(vertex, neighbor, EdgeKind.BACK)