"""A priority queue built on the binary heap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from algolib.heap import Heap


@dataclass
class Item:
    """A value with an integer priority."""

    value: Any
    priority: int

    def __lt__(self, other: "Item") -> bool:
        return self.priority < other.priority


class PriorityQueue:
    """A queue that hands out the item of lowest or highest priority first."""

    def __init__(self, minimum: bool = False) -> None:
        self._heap = Heap(minimum=minimum)

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, item: Item) -> None:
        self._heap.insert(item)

    def extract(self) -> Item:
        return self._heap.extract()

    def change_priority(self, value: Any, priority: int) -> None:
        """Give the item holding ``value`` a new priority."""
        storage: list[Item] = []
        try:
            while True:
                if len(self._heap) == 0:
                    raise KeyError(f"item not found: {value!r}")
                popped = self._heap.extract()
                if popped.value == value:
                    break
                storage.append(popped)
            popped.priority = priority
            self._heap.insert(popped)
        finally:
            for item in storage:
                self._heap.insert(item)


def new_min() -> PriorityQueue:
    return PriorityQueue(minimum=True)


def new_max() -> PriorityQueue:
    return PriorityQueue(minimum=False)