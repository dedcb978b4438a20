import pytest

from dsbook.graph_matrix import MatrixGraph

ADJ1 = [
    [0, 1, 0, 1, 0],
    [1, 0, 1, 1, 0],
    [0, 1, 0, 0, 1],
    [1, 1, 0, 0, 1],
    [0, 1, 1, 1, 0],
]
ADJ2 = [
    [0, 1, 0, 1, 0],
    [1, 0, 1, 1, 0],
    [0, 1, 0, 0, 1],
    [1, 1, 0, 0, 0],
    [0, 1, 1, 0, 0],
]


def from_matrix(matrix):
    graph = MatrixGraph(len(matrix))
    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            if cell == 1:
                graph.add_directed_edge(i, j, 1)
    return graph


def weighted():
    gph = MatrixGraph(9)
    for s, d, c in [
        (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2),
        (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1),
        (6, 8, 6), (7, 8, 7),
    ]:
        gph.add_undirected_edge(s, d, c)
    return gph


def test_str_lists_neighbours():
    graph = MatrixGraph(4)
    graph.add_undirected_edge(0, 1, 1)
    graph.add_undirected_edge(0, 2, 1)
    graph.add_undirected_edge(1, 2, 1)
    graph.add_undirected_edge(2, 3, 1)
    assert str(graph).splitlines() == [
        "Node index [ 0 ] is connected with : 1 2",
        "Node index [ 1 ] is connected with : 0 2",
        "Node index [ 2 ] is connected with : 0 1 3",
        "Node index [ 3 ] is connected with : 2",
    ]


def test_dijkstra():
    routes = weighted().dijkstra(1)
    assert [(r.previous, r.distance) for r in routes] == [
        (1, 4), (None, 0), (1, 8), (2, 15), (5, 22),
        (2, 12), (7, 12), (1, 11), (2, 10),
    ]


def test_prims():
    routes = weighted().prims()
    assert [(r.previous, r.distance) for r in routes] == [
        (None, 0), (0, 4), (5, 4), (2, 7), (3, 9),
        (6, 2), (7, 1), (0, 8), (2, 2),
    ]


def test_unreachable_vertex():
    graph = MatrixGraph(3)
    graph.add_directed_edge(0, 1, 5)
    routes = graph.dijkstra(0)
    assert routes[2].distance is None
    assert routes[2].reachable is False
    assert routes[1].distance == 5


def test_hamiltonian_path():
    assert from_matrix(ADJ1).hamiltonian_path() == [0, 1, 2, 4, 3]
    assert from_matrix(ADJ2).hamiltonian_path() == [0, 3, 1, 2, 4]


def test_hamiltonian_path_is_valid():
    path = from_matrix(ADJ2).hamiltonian_path()
    assert sorted(path) == list(range(5))
    assert all(ADJ2[a][b] == 1 for a, b in zip(path, path[1:]))


def test_hamiltonian_cycle():
    assert from_matrix(ADJ1).hamiltonian_cycle() == [0, 1, 2, 4, 3, 0]
    assert from_matrix(ADJ2).hamiltonian_cycle() is None


def test_no_hamiltonian_path_in_disconnected_graph():
    assert MatrixGraph(3).hamiltonian_path() is None


def test_out_of_range_vertex():
    with pytest.raises(IndexError):
        MatrixGraph(2).add_directed_edge(0, 2)
    with pytest.raises(IndexError):
        MatrixGraph(2).dijkstra(5)


def test_negative_count():
    with pytest.raises(ValueError):
        MatrixGraph(-1)