"""Classic comparison sorts: bubble, heap, insertion, merge, quick and selection."""

from __future__ import annotations

from typing import Any, Iterable, MutableSequence


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, always making every bubbling pass."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def better_bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, stopping early once a pass makes no swap."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def heapify(values: MutableSequence[Any], size: int, root: int) -> None:
    """Sift ``values[root]`` down so the first ``size`` items under it form a max-heap.

    The subtrees below ``root`` must already be max-heaps. Works in place.
    """
    if not 0 <= size <= len(values):
        raise ValueError(f"heap size {size} out of range for {len(values)} values")
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy built by repeatedly extracting the max of a heap."""
    items = list(values)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        heapify(items, n, root)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a stably sorted copy by splitting in halves and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    index = low
    for i in range(low, high):
        if items[i] < pivot:
            items[i], items[index] = items[index], items[i]
            index += 1
    items[high], items[index] = items[index], items[high]
    return index


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with the last item of a range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, moving the smallest remaining item forward each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        min_index = min(range(i, n), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items