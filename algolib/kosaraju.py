"""Kosaraju's algorithm for strongly connected components."""

from __future__ import annotations

from typing import Hashable, Iterator

from algolib.graph import DirectedGraph


def _finish_order(graph: DirectedGraph) -> list[Hashable]:
    order: list[Hashable] = []
    visited: set[Hashable] = set()
    for root in graph.vertices_iter():
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[Hashable, Iterator[Hashable]]] = [(root, graph.get_successors(root))]
        while stack:
            vertex, successors = stack[-1]
            for successor in successors:
                if successor not in visited:
                    visited.add(successor)
                    stack.append((successor, graph.get_successors(successor)))
                    break
            else:
                stack.pop()
                order.append(vertex)
    return order


def scc(graph: DirectedGraph) -> list[list[Hashable]]:
    """Return the strongly connected components that hold more than one vertex."""
    reversed_graph = graph.reverse()
    assigned: set[Hashable] = set()
    components: list[list[Hashable]] = []
    for root in reversed(_finish_order(graph)):
        if root in assigned:
            continue
        assigned.add(root)
        component = []
        stack = [root]
        while stack:
            vertex = stack.pop()
            component.append(vertex)
            for successor in reversed_graph.get_successors(vertex):
                if successor not in assigned:
                    assigned.add(successor)
                    stack.append(successor)
        if len(component) > 1:
            components.append(component)
    return components