"""An undirected graph stored as an adjacency matrix."""

from __future__ import annotations

from collections.abc import Iterable


class MatrixGraph:
    """An undirected graph on vertices ``0 .. vertex_count - 1``.

    Each added edge sets both ``adj[u][v]`` and ``adj[v][u]`` to 1.
    """

    def __init__(
        self, vertex_count: int, edges: Iterable[tuple[int, int]] = ()
    ) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._vertex_count = vertex_count
        self._edge_count = 0
        self._adj = [[0] * vertex_count for _ in range(vertex_count)]
        for u, v in edges:
            self.add_edge(u, v)

    @property
    def vertex_count(self) -> int:
        """The number of vertices."""
        return self._vertex_count

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertex_count:
            raise IndexError(f"no vertex {vertex}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` with an edge."""
        self._check_vertex(u)
        self._check_vertex(v)
        self._adj[u][v] = 1
        self._adj[v][u] = 1
        self._edge_count += 1

    def has_edge(self, u: int, v: int) -> bool:
        """Return True when ``u`` and ``v`` are connected."""
        self._check_vertex(u)
        self._check_vertex(v)
        return self._adj[u][v] == 1

    def neighbors(self, vertex: int) -> list[int]:
        """Return the vertices adjacent to ``vertex`` in ascending order."""
        self._check_vertex(vertex)
        return [other for other, flag in enumerate(self._adj[vertex]) if flag]

    def edge_count(self) -> int:
        """Return the number of edges added to the graph."""
        return self._edge_count

    def rows(self) -> list[tuple[int, ...]]:
        """Return a copy of the adjacency matrix, one tuple per vertex."""
        return [tuple(row) for row in self._adj]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertex_count={self._vertex_count}, "
            f"edges={self._edge_count})"
        )