"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node with links to its parent and children."""

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)

    def compare(self, other: "Node") -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than the other."""
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0


def _walk(node: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def iter_on_tree(node: Optional[Node], func: Callable[[Node], None]) -> None:
    """Call ``func`` on every node under ``node`` in order."""
    for current in _walk(node):
        func(current)


class Tree:
    """A binary search tree; equal values go to the right."""

    def __init__(self, head: Optional[Node] = None) -> None:
        self.head = head
        self.size = 0 if head is None else 1

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        for node in _walk(self.head):
            yield node.value

    def insert(self, value: int) -> None:
        node = Node(value)
        if self.head is None:
            self.head = node
            self.size += 1
            return
        current = self.head
        while True:
            if node.compare(current) == -1:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        node.parent = current
        self.size += 1

    def _locate(self, value: int) -> Optional[Node]:
        current = self.head
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return current
        return None

    def search(self, value: int) -> Node:
        """Return the node holding ``value``."""
        node = self._locate(value)
        if node is None:
            raise KeyError(f"node not found: {value}")
        return node

    def delete(self, value: int) -> bool:
        """Remove one node holding ``value``; return whether one was found."""
        node = self._locate(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        self._splice(node)
        self.size -= 1
        return True

    def _splice(self, node: Node) -> None:
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.head = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None