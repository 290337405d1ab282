"""Breadth-first and depth-first traversals of graphs."""

from __future__ import annotations

from collections import deque
from typing import Callable, Hashable, Iterable, Iterator

from algolib.graph import DirectedGraph, Graph, UndirectedGraph


def _breadth_first(graph: Graph, start: Hashable) -> Iterator[tuple[Hashable, int]]:
    depth = {start: 0}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        yield vertex, depth[vertex]
        for neighbour in graph.get_neighbours(vertex):
            if neighbour not in depth:
                depth[neighbour] = depth[vertex] + 1
                queue.append(neighbour)


def bfs(graph: Graph, start: Hashable, visit: Callable[[Hashable], None]) -> None:
    """Call ``visit`` once on every vertex reachable from ``start``, nearest first."""
    for vertex, _ in _breadth_first(graph, start):
        visit(vertex)


def shortest_path(graph: Graph, start: Hashable) -> dict[Hashable, int]:
    """Return the number of edges on a shortest path to each reachable vertex."""
    return dict(_breadth_first(graph, start))


def get_dist(graph: Graph, source: Hashable, target: Hashable) -> int:
    """Return the number of edges between two vertices; KeyError if unreachable."""
    return shortest_path(graph, source)[target]


def _depth_first(
    start: Hashable,
    neighbours: Callable[[Hashable], Iterable[Hashable]],
    visit: Callable[[Hashable], None],
) -> None:
    stack = [start]
    visited: set[Hashable] = set()
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        visit(vertex)
        stack.extend(neighbours(vertex))


def undirected_dfs(
    graph: UndirectedGraph, start: Hashable, visit: Callable[[Hashable], None]
) -> None:
    """Call ``visit`` once on every vertex connected to ``start``, depth first."""
    _depth_first(start, graph.get_neighbours, visit)


def directed_dfs(
    graph: DirectedGraph, start: Hashable, visit: Callable[[Hashable], None]
) -> None:
    """Call ``visit`` once on every vertex reachable from ``start``, depth first."""
    _depth_first(start, graph.get_successors, visit)