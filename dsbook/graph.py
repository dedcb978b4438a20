"""Directed and undirected graphs held as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class Edge:
    """An outgoing edge: where it leads and what it costs."""

    destination: int
    cost: int = 1


class Eulerian(IntEnum):
    """How far a graph is from holding an Euler circuit."""

    NOT_EULERIAN = 0
    SEMI_EULERIAN = 1
    EULERIAN = 2


class Graph:
    """A graph over the vertices ``0 .. count - 1``."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._count = count
        self._adj: list[list[Edge]] = [[] for _ in range(count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._count:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_directed_edge(self, source: int, destination: int, cost: int = 1) -> None:
        """Add an edge from ``source`` to ``destination``."""
        self._check(source)
        self._check(destination)
        self._adj[source].append(Edge(destination, cost))

    def add_undirected_edge(self, source: int, destination: int, cost: int = 1) -> None:
        """Add edges in both directions between two vertices."""
        self.add_directed_edge(source, destination, cost)
        self.add_directed_edge(destination, source, cost)

    def adjacency(self, vertex: int) -> tuple[Edge, ...]:
        """Return the edges leaving ``vertex`` in insertion order."""
        self._check(vertex)
        return tuple(self._adj[vertex])

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return "\n".join(
            f"Vertex {i} is connected to : " + " ".join(str(e.destination) for e in edges)
            for i, edges in enumerate(self._adj)
        )

    # Traversal helpers

    def _dfs_util(self, index: int, visited: list[bool]) -> None:
        visited[index] = True
        for edge in self._adj[index]:
            if not visited[edge.destination]:
                self._dfs_util(edge.destination, visited)

    def _dfs_post(self, index: int, visited: list[bool], order: list[int]) -> None:
        visited[index] = True
        for edge in self._adj[index]:
            if not visited[edge.destination]:
                self._dfs_post(edge.destination, visited, order)
        order.append(index)

    def _reachable(self, source: int) -> list[bool]:
        self._check(source)
        visited = [False] * self._count
        self._dfs_util(source, visited)
        return visited

    def dfs(self, source: int, target: int) -> bool:
        """Tell whether ``target`` is reachable from ``source`` (recursive search)."""
        self._check(target)
        return self._reachable(source)[target]

    def dfs_stack(self, source: int, target: int) -> bool:
        """Tell whether ``target`` is reachable from ``source`` using a stack."""
        self._check(source)
        self._check(target)
        visited = [False] * self._count
        visited[source] = True
        stack = [source]
        while stack:
            curr = stack.pop()
            for edge in self._adj[curr]:
                if not visited[edge.destination]:
                    visited[edge.destination] = True
                    stack.append(edge.destination)
        return visited[target]

    def bfs(self, source: int, target: int) -> bool:
        """Tell whether ``target`` is reachable from ``source`` using a queue."""
        self._check(source)
        self._check(target)
        visited = [False] * self._count
        visited[source] = True
        queue = deque([source])
        while queue:
            curr = queue.popleft()
            for edge in self._adj[curr]:
                if not visited[edge.destination]:
                    visited[edge.destination] = True
                    queue.append(edge.destination)
        return visited[target]

    def topological_sort(self) -> list[int]:
        """Return the vertices in topological order."""
        visited = [False] * self._count
        order: list[int] = []
        for i in range(self._count):
            if not visited[i]:
                self._dfs_post(i, visited, order)
        return order[::-1]

    def path_exist(self, source: int, dest: int) -> bool:
        """Tell whether a path leads from ``source`` to ``dest``."""
        return self.dfs(source, dest)

    def count_all_path(self, source: int, dest: int) -> int:
        """Count the simple paths from ``source`` to ``dest``."""
        return len(self.all_paths(source, dest))

    def all_paths(self, source: int, dest: int) -> list[list[int]]:
        """Return every simple path from ``source`` to ``dest``."""
        self._check(source)
        self._check(dest)
        visited = [False] * self._count
        path: list[int] = []
        found: list[list[int]] = []

        def walk(vertex: int) -> None:
            path.append(vertex)
            if vertex == dest:
                found.append(list(path))
                path.pop()
                return
            visited[vertex] = True
            for edge in self._adj[vertex]:
                if not visited[edge.destination]:
                    walk(edge.destination)
            visited[vertex] = False
            path.pop()

        walk(source)
        return found

    def root_vertex(self) -> int:
        """Return the last vertex that starts a new search; -1 for an empty graph."""
        visited = [False] * self._count
        root = -1
        for i in range(self._count):
            if not visited[i]:
                self._dfs_util(i, visited)
                root = i
        return root

    def transitive_closure(self) -> list[list[int]]:
        """Return the reachability matrix, with 1 where a path exists."""
        closure = [[0] * self._count for _ in range(self._count)]

        def fill(source: int, vertex: int) -> None:
            closure[source][vertex] = 1
            for edge in self._adj[vertex]:
                if closure[source][edge.destination] == 0:
                    fill(source, edge.destination)

        for i in range(self._count):
            fill(i, i)
        return closure

    def bfs_level_node(self, source: int) -> list[tuple[int, int]]:
        """Return ``(vertex, level)`` pairs in breadth-first order from ``source``."""
        self._check(source)
        visited = [False] * self._count
        level = [0] * self._count
        visited[source] = True
        queue = deque([source])
        result: list[tuple[int, int]] = []
        while queue:
            curr = queue.popleft()
            depth = level[curr]
            result.append((curr, depth))
            for edge in self._adj[curr]:
                if not visited[edge.destination]:
                    visited[edge.destination] = True
                    level[edge.destination] = depth + 1
                    queue.append(edge.destination)
        return result

    def bfs_distance(self, source: int, dest: int) -> int:
        """Return the number of edges on a shortest path to ``dest``, or -1."""
        self._check(source)
        self._check(dest)
        visited = [False] * self._count
        level = [0] * self._count
        visited[source] = True
        queue = deque([source])
        while queue:
            curr = queue.popleft()
            depth = level[curr]
            for edge in self._adj[curr]:
                if edge.destination == dest:
                    return depth + 1
                if not visited[edge.destination]:
                    visited[edge.destination] = True
                    level[edge.destination] = depth + 1
                    queue.append(edge.destination)
        return -1

    # Cycles

    def is_cycle_present_undirected(self) -> bool:
        """Tell whether an undirected graph holds a cycle."""
        visited = [False] * self._count

        def search(index: int, parent: int) -> bool:
            visited[index] = True
            for edge in self._adj[index]:
                dest = edge.destination
                if not visited[dest]:
                    if search(dest, index):
                        return True
                elif dest != parent:
                    return True
            return False

        return any(not visited[i] and search(i, -1) for i in range(self._count))

    def is_cycle_present(self) -> bool:
        """Tell whether a directed graph holds a cycle (marking the current path)."""
        visited = [False] * self._count
        marked = [False] * self._count

        def search(index: int) -> bool:
            visited[index] = True
            marked[index] = True
            for edge in self._adj[index]:
                dest = edge.destination
                if marked[dest]:
                    return True
                if not visited[dest] and search(dest):
                    return True
            marked[index] = False
            return False

        return any(not visited[i] and search(i) for i in range(self._count))

    def is_cycle_present_color(self) -> bool:
        """Tell whether a directed graph holds a cycle (white, grey, black colouring)."""
        white, grey, black = 0, 1, 2
        color = [white] * self._count

        def search(index: int) -> bool:
            color[index] = grey
            for edge in self._adj[index]:
                dest = edge.destination
                if color[dest] == grey:
                    return True
                if color[dest] == white and search(dest):
                    return True
            color[index] = black
            return False

        return any(color[i] == white and search(i) for i in range(self._count))

    # Connectivity

    def transpose(self) -> Graph:
        """Return a new graph with every edge reversed."""
        reversed_graph = Graph(self._count)
        for i, edges in enumerate(self._adj):
            for edge in edges:
                reversed_graph.add_directed_edge(edge.destination, i, edge.cost)
        return reversed_graph

    def is_connected_undirected(self) -> bool:
        """Tell whether every vertex is reachable from vertex 0."""
        if self._count == 0:
            return True
        return all(self._reachable(0))

    def is_strongly_connected(self) -> bool:
        """Tell whether every vertex reaches every other (Kosaraju's check)."""
        if self._count == 0:
            return True
        if not all(self._reachable(0)):
            return False
        return all(self.transpose()._reachable(0))

    def strongly_connected_components(self) -> list[list[int]]:
        """Return the strongly connected components, each in discovery order."""
        visited = [False] * self._count
        order: list[int] = []
        for i in range(self._count):
            if not visited[i]:
                self._dfs_post(i, visited, order)
        reversed_graph = self.transpose()
        visited = [False] * self._count
        components: list[list[int]] = []
        for index in reversed(order):
            if not visited[index]:
                component: list[int] = []
                reversed_graph._dfs_post(index, visited, component)
                components.append(component[::-1])
        return components

    def is_connected(self) -> bool:
        """Tell whether all vertices with outgoing edges are reachable from the first one."""
        visited = [False] * self._count
        start = next((i for i, edges in enumerate(self._adj) if edges), None)
        if start is not None:
            self._dfs_util(start, visited)
        return all(visited[i] for i, edges in enumerate(self._adj) if edges)

    def _degrees(self) -> tuple[list[int], list[int]]:
        in_degree = [0] * self._count
        out_degree = [0] * self._count
        for i, edges in enumerate(self._adj):
            for edge in edges:
                out_degree[i] += 1
                in_degree[edge.destination] += 1
        return in_degree, out_degree

    def is_eulerian(self) -> Eulerian:
        """Classify the graph by the number of vertices of odd total degree."""
        if not self.is_connected():
            return Eulerian.NOT_EULERIAN
        in_degree, out_degree = self._degrees()
        odd = sum(1 for a, b in zip(in_degree, out_degree) if (a + b) % 2 != 0)
        if odd == 0:
            return Eulerian.EULERIAN
        if odd == 2:
            return Eulerian.SEMI_EULERIAN
        return Eulerian.NOT_EULERIAN

    def is_strongly_connected_nonzero(self) -> bool:
        """Tell whether all vertices with outgoing edges are strongly connected."""
        start = next((i for i, edges in enumerate(self._adj) if edges), None)
        if start is None:
            return True
        visited = self._reachable(start)
        if any(not visited[i] and edges for i, edges in enumerate(self._adj)):
            return False
        visited = self.transpose()._reachable(start)
        return not any(not visited[i] and edges for i, edges in enumerate(self._adj))

    def is_eulerian_cycle(self) -> bool:
        """Tell whether a directed graph holds an Euler circuit."""
        if not self.is_strongly_connected_nonzero():
            return False
        in_degree, out_degree = self._degrees()
        return in_degree == out_degree


def _root_of(parents: Sequence[int]) -> int:
    return next((i for i, parent in enumerate(parents) if parent == -1), 0)


def tree_height_bfs(parents: Sequence[int]) -> int:
    """Return the height of a tree given as a parent array (-1 marks the root)."""
    if not parents:
        raise ValueError("parents must not be empty")
    graph = Graph(len(parents))
    source = 0
    for child, parent in enumerate(parents):
        if parent != -1:
            graph.add_directed_edge(parent, child)
        else:
            source = child
    return max(level for _, level in graph.bfs_level_node(source))


def tree_height(parents: Sequence[int]) -> int:
    """Return the height of a tree given as a parent array, -1 when empty."""

    def height(index: int) -> int:
        if parents[index] == -1:
            return 0
        return height(parents[index]) + 1

    return max((height(i) for i in range(len(parents))), default=-1)