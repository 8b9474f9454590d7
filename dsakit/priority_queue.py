"""A priority queue kept ordered by ascending priority number."""

from __future__ import annotations

import bisect
from typing import Any, Iterator

from dsakit.queues import QueueEmptyError


def _priority(entry: tuple[Any, Any]) -> Any:
    return entry[0]


class PriorityQueue:
    """Entries ordered by ascending priority; equal priorities keep arrival order.

    ``dequeue`` removes the entry at the far end, the one with the largest
    priority number.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[Any, Any]] = []

    def enqueue(self, data: Any, priority: Any) -> None:
        """Insert ``data`` after every entry whose priority is not greater."""
        bisect.insort_right(self._entries, (priority, data), key=_priority)

    def dequeue(self) -> Any:
        """Remove and return the data of the entry with the largest priority number."""
        if not self._entries:
            raise QueueEmptyError("queue empty, please insert elements")
        return self._entries.pop()[1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over (priority, data) pairs in queue order."""
        return iter(list(self._entries))

    def __str__(self) -> str:
        return "\t".join(f"{priority} {data}" for priority, data in self._entries)

    def __repr__(self) -> str:
        return f"PriorityQueue({self._entries!r})"