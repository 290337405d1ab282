"""A thread-safe last-in first-out stack."""

from __future__ import annotations

import threading
from typing import Any, Iterator


class Stack:
    """A LIFO stack guarded by a lock."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        with self._lock:
            snapshot = list(reversed(self._items))
        return iter(snapshot)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def push(self, item: Any) -> None:
        with self._lock:
            self._items.append(item)

    def pop(self) -> Any:
        with self._lock:
            if not self._items:
                raise IndexError("pop from empty stack")
            return self._items.pop()

    def peek(self) -> Any:
        with self._lock:
            if not self._items:
                raise IndexError("peek at empty stack")
            return self._items[-1]