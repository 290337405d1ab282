"""A first-in first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Queue:
    """A FIFO queue: items are pushed at the back and shifted from the front."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        self._items.append(item)

    def shift(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("shift from empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]