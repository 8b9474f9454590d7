"""A growable array that doubles its capacity when it fills up."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

INITIAL_CAPACITY = 2


class DynamicArray:
    """An array with an explicit capacity that doubles whenever it is full."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        self._capacity = INITIAL_CAPACITY
        for item in items:
            self.push(item)

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for array of length {len(self._items)}")

    def push(self, data: Any) -> None:
        """Append ``data`` at the end, growing the capacity if needed."""
        self._grow_if_full()
        self._items.append(data)

    def replace(self, index: int, data: Any) -> None:
        """Overwrite the element at ``index``; an index one past the end appends."""
        if index == len(self._items):
            self.push(data)
            return
        self._check_index(index)
        self._items[index] = data

    def insert(self, index: int, data: Any) -> None:
        """Insert ``data`` at ``index``, shifting later elements to the right."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} out of range")
        self._grow_if_full()
        self._items.insert(index, data)

    def pop(self, index: int | None = None) -> Any:
        """Remove and return the last element, or the one at ``index``."""
        if not self._items:
            raise IndexError("pop from empty array")
        if index is None:
            return self._items.pop()
        self._check_index(index)
        return self._items.pop(index)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return "  ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"