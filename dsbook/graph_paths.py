"""Shortest-path and spanning-tree searches over :class:`~dsbook.graph.Graph`."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from dsbook.graph import Edge, Graph


@dataclass(frozen=True)
class Route:
    """How a vertex was reached: its predecessor and the distance found.

    ``previous`` is ``None`` for the source and for unreachable vertices;
    ``distance`` is ``None`` when the vertex cannot be reached.
    """

    vertex: int
    previous: int | None
    distance: int | None

    @property
    def reachable(self) -> bool:
        return self.distance is not None


def _check(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < len(graph):
        raise IndexError(f"vertex {vertex} is out of range")


def _greedy(
    graph: Graph, source: int, weight: Callable[[int, Edge], int]
) -> list[Route]:
    """Grow outwards from ``source``, always settling the closest vertex next."""
    _check(graph, source)
    count = len(graph)
    dist: list[int | None] = [None] * count
    previous: list[int | None] = [None] * count
    settled = [False] * count
    dist[source] = 0
    queue = [(0, source)]
    while queue:
        _, vertex = heapq.heappop(queue)
        if settled[vertex]:
            continue
        settled[vertex] = True
        here = dist[vertex]
        assert here is not None
        for edge in graph.adjacency(vertex):
            dest = edge.destination
            if settled[dest]:
                continue
            alt = weight(here, edge)
            known = dist[dest]
            if known is None or alt < known:
                dist[dest] = alt
                previous[dest] = vertex
                heapq.heappush(queue, (alt, dest))
    return [Route(i, previous[i], dist[i]) for i in range(count)]


def dijkstra(graph: Graph, source: int) -> list[Route]:
    """Return the cheapest route to every vertex from ``source``."""
    return _greedy(graph, source, lambda here, edge: here + edge.cost)


def prims(graph: Graph, source: int = 1) -> list[Route]:
    """Return a minimum spanning tree grown from ``source``.

    Each route's distance is the cost of the tree edge joining it to its
    predecessor.
    """
    return _greedy(graph, source, lambda _here, edge: edge.cost)


def shortest_path(graph: Graph, source: int) -> list[Route]:
    """Return the routes with the fewest edges from ``source``, ignoring costs."""
    _check(graph, source)
    count = len(graph)
    dist: list[int | None] = [None] * count
    previous: list[int | None] = [None] * count
    dist[source] = 0
    queue = deque([source])
    while queue:
        curr = queue.popleft()
        depth = dist[curr]
        assert depth is not None
        for edge in graph.adjacency(curr):
            if dist[edge.destination] is None:
                dist[edge.destination] = depth + 1
                previous[edge.destination] = curr
                queue.append(edge.destination)
    return [Route(i, previous[i], dist[i]) for i in range(count)]


def bellman_ford(graph: Graph, source: int) -> list[Route]:
    """Return the cheapest routes from ``source``; edge costs may be negative."""
    _check(graph, source)
    count = len(graph)
    dist: list[int | None] = [None] * count
    previous: list[int | None] = [None] * count
    dist[source] = 0
    for _ in range(count - 1):
        for vertex in range(count):
            here = dist[vertex]
            if here is None:
                continue
            for edge in graph.adjacency(vertex):
                candidate = here + edge.cost
                known = dist[edge.destination]
                if known is None or candidate < known:
                    dist[edge.destination] = candidate
                    previous[edge.destination] = vertex
    return [Route(i, previous[i], dist[i]) for i in range(count)]


def best_first_search(graph: Graph, source: int, dest: int) -> int:
    """Return the cost of the cheapest path from ``source`` to ``dest``, or -1."""
    _check(graph, source)
    _check(graph, dest)
    count = len(graph)
    dist: list[int | None] = [None] * count
    settled = [False] * count
    dist[source] = 0
    queue = [(0, source)]
    while queue:
        cost, vertex = heapq.heappop(queue)
        if vertex == dest:
            return cost
        if settled[vertex]:
            continue
        settled[vertex] = True
        for edge in graph.adjacency(vertex):
            nxt = edge.destination
            if settled[nxt]:
                continue
            alt = cost + edge.cost
            known = dist[nxt]
            if known is None or alt < known:
                dist[nxt] = alt
                heapq.heappush(queue, (alt, nxt))
    return -1