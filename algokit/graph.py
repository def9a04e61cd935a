"""Directed graph stored as adjacency lists over numbered vertices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

__all__ = ["DirectedGraph"]

DEFAULT_VERTEX_COUNT = 6


class DirectedGraph:
    """Directed graph on vertices 0..vertex_count-1.

    Each new edge is placed at the head of its source's adjacency list, so
    neighbours are listed most recently added first.
    """

    def __init__(
        self,
        edges: Iterable[tuple[int, int]] = (),
        vertex_count: int = DEFAULT_VERTEX_COUNT,
    ) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count cannot be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertex_count)]
        for src, dest in edges:
            self._check(src)
            self._check(dest)
            self._adjacency[src].appendleft(dest)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(
                f"vertex {vertex} is outside 0..{self.vertex_count - 1}"
            )

    def neighbours(self, vertex: int) -> list[int]:
        """Return the destinations reachable by one edge from vertex."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every edge as (source, destination) in adjacency order."""
        for src, targets in enumerate(self._adjacency):
            for dest in targets:
                yield src, dest

    def format(self) -> str:
        """Render one line per vertex listing its outgoing edges."""
        return "".join(
            "".join(f"({src} —> {dest})\t" for dest in targets) + "\n"
            for src, targets in enumerate(self._adjacency)
        )