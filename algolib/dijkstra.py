"""Dijkstra's single-source shortest paths on a weighted graph."""

from __future__ import annotations

import math
from typing import Hashable

from algolib.graph import Graph, GraphError
from algolib.priority_queue import Item, new_min


def shortest_path(graph: Graph, source: Hashable) -> dict[Hashable, Hashable]:
    """Return, for each vertex reachable from ``source``, its predecessor on a shortest path."""
    if not graph.is_vertex(source):
        raise GraphError(f"unknown vertex: {source!r}")
    dist = {vertex: 0 if vertex == source else math.inf for vertex in graph.vertices_iter()}
    prev: dict[Hashable, Hashable] = {}
    queue = new_min()
    for vertex, distance in dist.items():
        queue.insert(Item(vertex, distance))

    visited: set[Hashable] = set()
    while len(queue):
        current = queue.extract().value
        visited.add(current)
        for neighbour in graph.get_neighbours(current):
            if neighbour in visited:
                continue
            alternative = dist[current] + graph.get_edge(current, neighbour)
            if alternative < dist[neighbour]:
                dist[neighbour] = alternative
                prev[neighbour] = current
                queue.change_priority(neighbour, alternative)
    return prev