"""An open-addressing hash table with linear probing, and a first-repeat finder."""

from __future__ import annotations

from typing import Any, Hashable, Iterable

TABLE_SIZE = 128

_DELETED = object()


class HashTable:
    """A fixed-size table mapping integer keys to values, probing linearly on collision."""

    def __init__(self, size: int = TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._size = size
        self._slots: list[Any] = [None] * size

    def _probe(self, key: int) -> Iterable[int]:
        start = key % self._size
        for offset in range(self._size):
            yield (start + offset) % self._size

    def _find(self, key: int) -> int | None:
        for slot in self._probe(key):
            entry = self._slots[slot]
            if entry is None:
                return None
            if entry is not _DELETED and entry[0] == key:
                return slot
        return None

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        free_slot: int | None = None
        for slot in self._probe(key):
            entry = self._slots[slot]
            if entry is None:
                if free_slot is None:
                    free_slot = slot
                break
            if entry is _DELETED:
                if free_slot is None:
                    free_slot = slot
                continue
            if entry[0] == key:
                self._slots[slot] = (key, value)
                return
        if free_slot is None:
            raise OverflowError("hash table is full")
        self._slots[free_slot] = (key, value)

    def get(self, key: int) -> Any:
        """Return the value stored under ``key``."""
        slot = self._find(key)
        if slot is None:
            raise KeyError(key)
        return self._slots[slot][1]

    def remove(self, key: int) -> None:
        """Delete ``key`` and its value."""
        slot = self._find(key)
        if slot is None:
            raise KeyError(key)
        self._slots[slot] = _DELETED

    def items(self) -> list[tuple[int, Any]]:
        """Return the stored (key, value) pairs in slot order."""
        return [entry for entry in self._slots if entry is not None and entry is not _DELETED]

    def __str__(self) -> str:
        return "\n".join(f"{key}----->{value}" for key, value in self.items())

    def __repr__(self) -> str:
        return f"HashTable({self.items()!r})"


def first_recurring(values: Iterable[Hashable]) -> Hashable | None:
    """Return the first value that appears a second time, or None."""
    seen: set[Hashable] = set()
    for value in values:
        if value in seen:
            return value
        seen.add(value)
    return None