"""A binary heap that can order its items either way."""

from __future__ import annotations

import threading
from typing import Any


class Heap:
    """A binary heap of comparable items; a min-heap when ``minimum`` is true."""

    def __init__(self, minimum: bool = False) -> None:
        self._data: list[Any] = []
        self._minimum = minimum
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def is_empty(self) -> bool:
        return not self._data

    def less(self, a: Any, b: Any) -> bool:
        """Whether ``a`` belongs nearer the top than ``b``."""
        return a < b if self._minimum else b < a

    def insert(self, item: Any) -> None:
        with self._lock:
            self._data.append(item)
            self._sift_up()

    def extract(self) -> Any:
        """Remove and return the top item."""
        with self._lock:
            if not self._data:
                raise IndexError("extract from empty heap")
            top = self._data[0]
            last = self._data.pop()
            if self._data:
                self._data[0] = last
                self._sift_down()
            return top

    def _sift_up(self) -> None:
        data = self._data
        i = len(data) - 1
        while i > 0:
            parent = (i - 1) >> 1
            if not self.less(data[i], data[parent]):
                break
            data[i], data[parent] = data[parent], data[i]
            i = parent

    def _sift_down(self) -> None:
        data = self._data
        size = len(data)
        i = 0
        while (child := 2 * i + 1) < size:
            if child + 1 < size and self.less(data[child + 1], data[child]):
                child += 1
            if not self.less(data[child], data[i]):
                break
            data[i], data[child] = data[child], data[i]
            i = child


def new_min() -> Heap:
    return Heap(minimum=True)


def new_max() -> Heap:
    return Heap(minimum=False)