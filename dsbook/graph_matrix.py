"""Graphs held as an adjacency matrix of edge costs."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable

from dsbook.graph_paths import Route


class MatrixGraph:
    """A graph over the vertices ``0 .. count - 1``; a cost of 0 means no edge."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._count = count
        self._adj = [[0] * count for _ in range(count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._count:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_directed_edge(self, source: int, destination: int, cost: int = 1) -> None:
        """Set the cost of the edge from ``source`` to ``destination``."""
        self._check(source)
        self._check(destination)
        self._adj[source][destination] = cost

    def add_undirected_edge(self, source: int, destination: int, cost: int = 1) -> None:
        """Set the cost of the edges in both directions between two vertices."""
        self.add_directed_edge(source, destination, cost)
        self.add_directed_edge(destination, source, cost)

    def __str__(self) -> str:
        return "\n".join(
            f"Node index [ {i} ] is connected with : "
            + " ".join(str(j) for j, cost in enumerate(row) if cost != 0)
            for i, row in enumerate(self._adj)
        )

    def _grow(self, source: int, weight: Callable[[int, int], int]) -> list[Route]:
        """Settle vertices closest first; ties go to the entry queued earliest."""
        self._check(source)
        count = self._count
        dist: list[int | None] = [None] * count
        previous: list[int | None] = [None] * count
        settled = [False] * count
        order = itertools.count()
        dist[source] = 0
        queue = [(0, next(order), source)]
        while queue:
            _, _, vertex = heapq.heappop(queue)
            if settled[vertex]:
                continue
            settled[vertex] = True
            here = dist[vertex]
            assert here is not None
            for dest, cost in enumerate(self._adj[vertex]):
                if cost == 0 or settled[dest]:
                    continue
                alt = weight(here, cost)
                known = dist[dest]
                if known is None or alt < known:
                    dist[dest] = alt
                    previous[dest] = vertex
                    heapq.heappush(queue, (alt, next(order), dest))
        return [Route(i, previous[i], dist[i]) for i in range(count)]

    def dijkstra(self, source: int) -> list[Route]:
        """Return the cheapest route to every vertex from ``source``."""
        return self._grow(source, lambda here, cost: here + cost)

    def prims(self) -> list[Route]:
        """Return a minimum spanning tree grown from vertex 0.

        Each route's distance is the cost of the tree edge to its predecessor.
        """
        return self._grow(0, lambda _here, cost: cost)

    def _hamiltonian(self, closed: bool) -> list[int] | None:
        count = self._count
        adj = self._adj
        path: list[int] = []
        added = [False] * count

        def extend() -> bool:
            if len(path) == count:
                return not closed or adj[path[-1]][path[0]] != 0
            for vertex in range(count):
                if not path or (adj[path[-1]][vertex] != 0 and not added[vertex]):
                    path.append(vertex)
                    added[vertex] = True
                    if extend():
                        return True
                    path.pop()
                    added[vertex] = False
            return False

        if not extend():
            return None
        return path + [path[0]] if closed else list(path)

    def hamiltonian_path(self) -> list[int] | None:
        """Return a path visiting every vertex once, or ``None``."""
        return self._hamiltonian(closed=False)

    def hamiltonian_cycle(self) -> list[int] | None:
        """Return a cycle through every vertex, ending where it starts, or ``None``."""
        if self._count == 0:
            return None
        return self._hamiltonian(closed=True)