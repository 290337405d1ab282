"""A hash table with separate chaining and Horner's string hash."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class _Entry:
    key: str
    value: Any


def hash_code(text: str) -> int:
    """Horner's hash (factor 31) over the bytes of ``text``, in 32-bit arithmetic."""
    value = 0
    for byte in text.encode():
        value = (value * 31 + byte) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


class HashTable:
    """A string-keyed hash table whose buckets are chains of entries."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._buckets: dict[int, list[_Entry]] = {}
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        """Yield every (key, value) pair."""
        for bucket in self._buckets.values():
            for entry in bucket:
                yield entry.key, entry.value

    def _position(self, key: str) -> int:
        return hash_code(key) % self.capacity

    def _find(self, key: str) -> _Entry | None:
        for entry in self._buckets.get(self._position(key), ()):
            if entry.key == key:
                return entry
        return None

    def get(self, key: str) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, overwriting any earlier value."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._buckets.setdefault(self._position(key), []).append(_Entry(key, value))
        self._size += 1

    def delete(self, key: str) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        bucket = self._buckets.get(self._position(key))
        if not bucket:
            return
        for index, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[index]
                self._size -= 1
                return