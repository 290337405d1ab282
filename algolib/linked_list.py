"""A doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A list cell holding a value and links to its neighbours."""

    value: Any
    prev: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A doubly linked list with head and tail pointers."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def is_empty(self) -> bool:
        return self._length == 0

    def prepend(self, value: Any) -> None:
        node = Node(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self._length += 1

    def append(self, value: Any) -> None:
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            node.prev = self.tail
            self.tail.next = node
            self.tail = node
        self._length += 1

    def add(self, value: Any, index: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if index < 0 or index > self._length:
            raise IndexError("index out of range")
        if index == 0:
            self.prepend(value)
            return
        if index == self._length:
            self.append(value)
            return
        successor = self.get(index)
        predecessor = successor.prev
        node = Node(value, prev=predecessor, next=successor)
        predecessor.next = node
        successor.prev = node
        self._length += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self._length == 0:
            raise ValueError("empty list")
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                return
        raise ValueError("value not found")

    def _unlink(self, node: Node) -> None:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._length -= 1

    def get(self, index: int) -> Node:
        """Return the node at position ``index``."""
        if index < 0 or index >= self._length:
            raise IndexError("index out of range")
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def find(self, value: Any) -> int:
        """Return the 1-based position of the first node holding ``value``."""
        if self._length == 0:
            raise ValueError("empty list")
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        raise ValueError("item not found")

    def clear(self) -> None:
        self.head = None
        self.tail = None
        self._length = 0

    def concat(self, other: "LinkedList") -> None:
        """Link the nodes of ``other`` onto the end of this list."""
        if other.head is None:
            return
        if self.tail is None:
            self.head = other.head
        else:
            self.tail.next = other.head
            other.head.prev = self.tail
        self.tail = other.tail
        self._length += len(other)