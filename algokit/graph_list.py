"""Undirected weighted graphs stored as adjacency lists, with BFS and DFS."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterator

_ROOT = object()


class EdgeKind(Enum):
    """How a traversal classified an edge."""

    TREE = "tree"
    BACK = "back"
    CROSS = "cross"


@dataclass(frozen=True)
class TraversalEdge:
    """An edge reported by a traversal of an adjacency list."""

    source: Hashable
    target: Hashable
    kind: EdgeKind


class AdjacencyList:
    """Undirected graph mapping each vertex to its (neighbor, weight) pairs."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, int]]] = {}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adjacency)

    def add_edge(self, first: Hashable, second: Hashable, weight: int) -> None:
        """Add an undirected edge of the given weight between two vertices."""
        self._adjacency.setdefault(first, []).append((second, weight))
        self._adjacency.setdefault(second, []).append((first, weight))

    def neighbors(self, vertex: Hashable) -> list[tuple[Hashable, int]]:
        """Return the (neighbor, weight) pairs of ``vertex``; ``KeyError`` if unknown."""
        return list(self._adjacency[vertex])

    def format(self) -> str:
        """Render one line per vertex: ``A -> (B, 1) (C, 1)``."""
        lines = []
        for vertex, edges in self._adjacency.items():
            parts = " ".join(f"({neighbor}, {weight})" for neighbor, weight in edges)
            lines.append(f"{vertex} -> {parts}".rstrip())
        return "\n".join(lines)

    def breadth_first_edges(self, start: Hashable) -> Iterator[TraversalEdge]:
        """Yield edges in breadth-first order from ``start``.

        Edges to newly found vertices are tree edges; edges to vertices
        already found but still waiting in the queue are cross edges.
        An unknown start yields nothing.
        """
        if start not in self._adjacency:
            return
        visited = {start}
        queue = deque([start])
        while queue:
            vertex = queue[0]
            for neighbor, _ in self._adjacency[vertex]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
                    yield TraversalEdge(vertex, neighbor, EdgeKind.TREE)
                elif neighbor in queue:
                    yield TraversalEdge(vertex, neighbor, EdgeKind.CROSS)
            queue.popleft()

    def depth_first_edges(self, start: Hashable) -> Iterator[TraversalEdge]:
        """Yield tree and back edges in depth-first order from ``start``.

        Back edges leaving the start vertex itself are not reported.
        An unknown start yields nothing.
        """
        if start not in self._adjacency:
            return
        yield from self._depth_first(start, _ROOT, set())

    def _depth_first(
        self, vertex: Hashable, parent: object, visited: set[Hashable]
    ) -> Iterator[TraversalEdge]:
        visited.add(vertex)
        for neighbor, _ in self._adjacency[vertex]:
            if neighbor not in visited:
                yield TraversalEdge(vertex, neighbor, EdgeKind.TREE)
                yield from self._depth_first(neighbor, vertex, visited)
            elif parent is not _ROOT and neighbor != parent:
                yield TraversalEdge(vertex, neighbor, EdgeKind.BACK)