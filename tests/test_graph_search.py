import pytest

from algolib.graph import DirectedGraph, UndirectedGraph
from algolib.graph_search import (
    bfs,
    directed_dfs,
    get_dist,
    shortest_path,
    undirected_dfs,
)


def _chain(graph):
    for i in range(10):
        graph.add_vertex(i)
    for i in range(9):
        graph.add_edge(i, i + 1, 1)
    return graph


def test_bfs():
    h = _chain(DirectedGraph())
    seen = []
    bfs(h, 3, seen.append)
    assert seen == [3, 4, 5, 6, 7, 8, 9]


def test_bfs_visits_each_vertex_once():
    h = DirectedGraph()
    for v in range(4):
        h.add_vertex(v)
    h.add_edge(0, 1, 1)
    h.add_edge(0, 2, 1)
    h.add_edge(1, 3, 1)
    h.add_edge(2, 3, 1)
    seen = []
    bfs(h, 0, seen.append)
    assert sorted(seen) == [0, 1, 2, 3]
    assert seen[0] == 0
    assert seen[-1] == 3


def test_bfs_shortest_path():
    h = _chain(DirectedGraph())
    distance = shortest_path(h, 0)
    assert distance == {i: i for i in range(10)}
    for i in range(10):
        assert get_dist(h, 0, i) == i


def test_shortest_path_takes_shortcut():
    h = _chain(DirectedGraph())
    h.add_edge(0, 5, 1)
    assert get_dist(h, 0, 5) == 1
    assert get_dist(h, 0, 9) == 5


def test_get_dist_unreachable_raises():
    h = _chain(DirectedGraph())
    with pytest.raises(KeyError):
        get_dist(h, 5, 2)


def test_undirected_dfs():
    h = _chain(UndirectedGraph())
    seen = []
    undirected_dfs(h, 3, seen.append)
    assert sum(seen) == 45
    assert sorted(seen) == list(range(10))
    assert seen[0] == 3


def test_directed_dfs():
    h = _chain(DirectedGraph())
    seen = []
    directed_dfs(h, 3, seen.append)
    assert sum(seen) == 42
    assert seen == [3, 4, 5, 6, 7, 8, 9]