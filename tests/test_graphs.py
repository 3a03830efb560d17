import pytest

from algolab.graphs import Edge, ShortestPath, dijkstra, kruskal, prim

EXAMPLE = [
    [0, 8, 5, 0, 0],
    [8, 0, 9, 11, 0],
    [5, 9, 0, 15, 10],
    [0, 11, 15, 0, 7],
    [0, 0, 10, 7, 0],
]

OTHER = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

DISCONNECTED = [
    [0, 1, 0],
    [1, 0, 0],
    [0, 0, 0],
]


def _spans(edges, size):
    reached = {0}
    changed = True
    while changed:
        changed = False
        for e in edges:
            if (e.u in reached) != (e.v in reached):
                reached |= {e.u, e.v}
                changed = True
    return reached == set(range(size))


def test_kruskal_worked_example():
    edges = kruskal(EXAMPLE)
    assert edges == [Edge(0, 2, 5), Edge(3, 4, 7), Edge(0, 1, 8), Edge(2, 4, 10)]
    assert sum(e.weight for e in edges) == 30


def test_prim_worked_example():
    edges = prim(EXAMPLE)
    assert edges == [Edge(0, 2, 5), Edge(0, 1, 8), Edge(2, 4, 10), Edge(4, 3, 7)]
    assert sum(e.weight for e in edges) == 30


@pytest.mark.parametrize("matrix", [EXAMPLE, OTHER])
def test_spanning_trees_agree(matrix):
    k = kruskal(matrix)
    p = prim(matrix)
    assert len(k) == len(matrix) - 1
    assert len(p) == len(matrix) - 1
    assert sum(e.weight for e in k) == sum(e.weight for e in p)
    assert _spans(k, len(matrix))
    assert _spans(p, len(matrix))
    for e in k + p:
        assert matrix[e.u][e.v] == e.weight


@pytest.mark.parametrize("algorithm", [kruskal, prim])
def test_disconnected_graph_raises(algorithm):
    with pytest.raises(ValueError):
        algorithm(DISCONNECTED)


@pytest.mark.parametrize("algorithm", [kruskal, prim, lambda m: dijkstra(m, 0)])
def test_non_square_raises(algorithm):
    with pytest.raises(ValueError):
        algorithm([[0, 1], [1]])


@pytest.mark.parametrize("algorithm", [kruskal, prim])
def test_single_vertex_has_empty_tree(algorithm):
    assert algorithm([[0]]) == []


@pytest.mark.parametrize("matrix", [EXAMPLE, OTHER])
@pytest.mark.parametrize("start", [0, 2, 4])
def test_dijkstra_paths_are_consistent(matrix, start):
    results = dijkstra(matrix, start)
    assert [r.target for r in results] == [t for t in range(len(matrix)) if t != start]
    for r in results:
        assert r.path[0] == start
        assert r.path[-1] == r.target
        walked = sum(matrix[a][b] for a, b in zip(r.path, r.path[1:]))
        assert walked == r.distance
        if matrix[start][r.target]:
            assert r.distance <= matrix[start][r.target]


@pytest.mark.parametrize("matrix", [EXAMPLE, OTHER])
def test_dijkstra_distances_satisfy_every_edge(matrix):
    dist = {r.target: r.distance for r in dijkstra(matrix, 0)}
    dist[0] = 0
    for i, row in enumerate(matrix):
        for j, w in enumerate(row):
            if w:
                assert dist[j] <= dist[i] + w


def test_dijkstra_direct_edge_distance():
    results = {r.target: r for r in dijkstra(EXAMPLE, 0)}
    assert results[2] == ShortestPath(2, 5, (0, 2))


def test_dijkstra_unreachable_vertex():
    results = dijkstra(DISCONNECTED, 0)
    assert results[0] == ShortestPath(1, 1, (0, 1))
    assert results[1] == ShortestPath(2, None, ())


def test_dijkstra_rejects_bad_start():
    with pytest.raises(ValueError):
        dijkstra(EXAMPLE, 5)


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra([[0, -1], [-1, 0]], 0)