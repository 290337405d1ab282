"""Directed and undirected graphs with weighted edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator


class GraphError(Exception):
    """Raised when a graph operation cannot be carried out."""


@dataclass(frozen=True)
class Edge:
    """An edge from ``source`` to ``target``."""

    source: Hashable
    target: Hashable


class Graph:
    """A graph stored as adjacency maps from vertex to neighbour to weight."""

    def __init__(self, directed: bool) -> None:
        self.directed = directed
        self._edges: dict[Hashable, dict[Hashable, int]] = {}
        self._edges_count = 0

    def edges_iter(self) -> Iterator[Edge]:
        """Yield every edge; an undirected edge is yielded once, smaller vertex first."""
        for source, connected in list(self._edges.items()):
            for target in list(connected):
                if self.directed or source < target:
                    yield Edge(source, target)

    def vertices_iter(self) -> Iterator[Hashable]:
        yield from list(self._edges)

    def check_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._edges

    def touch_vertex(self, vertex: Hashable) -> None:
        """Add ``vertex`` unless it is already present."""
        self._edges.setdefault(vertex, {})

    def add_vertex(self, vertex: Hashable) -> None:
        if vertex in self._edges:
            raise GraphError(f"vertex already exists: {vertex!r}")
        self._edges[vertex] = {}

    def remove_vertex(self, vertex: Hashable) -> None:
        """Remove ``vertex`` together with every edge touching it."""
        if vertex not in self._edges:
            raise GraphError(f"unknown vertex: {vertex!r}")
        removed = len(self._edges.pop(vertex))
        for connected in self._edges.values():
            if vertex in connected:
                del connected[vertex]
                if self.directed:
                    removed += 1
        self._edges_count -= removed

    def is_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._edges

    def vertices_count(self) -> int:
        return len(self._edges)

    def add_edge(self, source: Hashable, target: Hashable, weight: int) -> None:
        """Join two existing vertices; an edge either way between them is an error."""
        if source == target:
            raise GraphError("cannot add self loop")
        if source not in self._edges or target not in self._edges:
            raise GraphError("vertices don't exist")
        if target in self._edges[source] or source in self._edges[target]:
            raise GraphError("edge already defined")
        self._edges[source][target] = weight
        if not self.directed:
            self._edges[target][source] = weight
        self._edges_count += 1

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        if not self.is_edge(source, target):
            raise GraphError("edge doesn't exist")
        del self._edges[source][target]
        if not self.directed:
            del self._edges[target][source]
        self._edges_count -= 1

    def is_edge(self, source: Hashable, target: Hashable) -> bool:
        return target in self._edges.get(source, {})

    def order(self) -> int:
        return len(self._edges)

    def edges_count(self) -> int:
        return self._edges_count

    def get_edge(self, source: Hashable, target: Hashable) -> int:
        """Return the weight of the edge from ``source`` to ``target``."""
        try:
            return self._edges[source][target]
        except KeyError:
            raise GraphError(f"no edge from {source!r} to {target!r}") from None

    def get_neighbours(self, vertex: Hashable) -> Iterator[Hashable]:
        yield from list(self._edges.get(vertex, ()))

    def get_predecessors(self, vertex: Hashable) -> Iterator[Hashable]:
        """Yield every vertex with an edge leading to ``vertex``."""
        yield from [other for other, connected in self._edges.items() if vertex in connected]

    def get_successors(self, vertex: Hashable) -> Iterator[Hashable]:
        """Yield every vertex that an edge from ``vertex`` leads to."""
        yield from list(self._edges.get(vertex, ()))


class DirectedGraph(Graph):
    """A graph whose edges have a direction."""

    def __init__(self) -> None:
        super().__init__(directed=True)

    def reverse(self) -> "DirectedGraph":
        """Return a new graph with every edge turned round, each of weight 1."""
        reversed_graph = DirectedGraph()
        for vertex in self.vertices_iter():
            reversed_graph.add_vertex(vertex)
        for edge in self.edges_iter():
            reversed_graph.add_edge(edge.target, edge.source, 1)
        return reversed_graph


class UndirectedGraph(Graph):
    """A graph whose edges join vertices both ways."""

    def __init__(self) -> None:
        super().__init__(directed=False)