"""Linear and binary search over sequences."""

from __future__ import annotations

from typing import Any, Sequence


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first element equal to ``key``, or None."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return None


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None