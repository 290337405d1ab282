"""Topological ordering of a directed acyclic graph."""

from __future__ import annotations

from typing import Hashable

from algolib.graph import DirectedGraph


class NotADagError(ValueError):
    """Raised when a graph to be ordered has a cycle."""


def topological_sort(graph: DirectedGraph) -> list[Hashable]:
    """Return the vertices so that every edge leads from an earlier to a later one."""
    order: list[Hashable] = []
    done: set[Hashable] = set()
    active: set[Hashable] = set()

    def visit(vertex: Hashable) -> None:
        active.add(vertex)
        for successor in graph.get_successors(vertex):
            if successor in active:
                raise NotADagError("not a directed acyclic graph")
            if successor not in done:
                visit(successor)
        active.discard(vertex)
        done.add(vertex)
        order.append(vertex)

    for vertex in graph.vertices_iter():
        if vertex not in done:
            visit(vertex)
    order.reverse()
    return order