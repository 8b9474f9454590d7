"""Small array and string routines: filtering, merging, reversing and pair finding."""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence


def remove_elements(values: Iterable[int], num: int) -> list[int]:
    """Return the values with every occurrence of ``num`` removed, order kept."""
    return [value for value in values if value != num]


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``first`` comes first.
    """
    if not first:
        return list(second)
    if not second:
        return list(first)
    merged: list[int] = []
    left = iter(first)
    right = iter(second)
    a = next(left)
    b = next(right)
    while True:
        if a <= b:
            merged.append(a)
            try:
                a = next(left)
            except StopIteration:
                merged.append(b)
                merged.extend(right)
                return merged
        else:
            merged.append(b)
            try:
                b = next(right)
            except StopIteration:
                merged.append(a)
                merged.extend(left)
                return merged


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Return the non-zero values in order, followed by all the zeroes."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def reverse_string_swapping(text: str) -> str:
    """Reverse ``text`` by swapping characters from both ends inwards."""
    chars = list(text)
    low, high = 0, len(chars) - 1
    while low < high:
        chars[low], chars[high] = chars[high], chars[low]
        low += 1
        high -= 1
    return "".join(chars)


def reverse_string_recursive(text: str) -> str:
    """Reverse ``text`` recursively, swapping the outer pair at each level."""
    if len(text) <= 1:
        return text
    return text[-1] + reverse_string_recursive(text[1:-1]) + text[0]


def has_common_item(first: Sequence[Hashable], second: Sequence[Hashable]) -> bool:
    """Compare every pair of items; two empty sequences count as matching."""
    if not first and not second:
        return True
    return any(a == b for a in first for b in second)


def has_common_item_fast(first: Iterable[Hashable], second: Iterable[Hashable]) -> bool:
    """Check for a shared item using a set lookup."""
    seen = set(first)
    return any(item in seen for item in second)


def find_pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first pair of distinct positions whose values add to ``target``."""
    for position, a in enumerate(values):
        for b in values[position + 1:]:
            if a + b == target:
                return a, b
    return None


def find_pair_with_sum_sorted(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find a pair adding to ``target`` in an ascending sequence with two pointers."""
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total > target:
            high -= 1
        elif total < target:
            low += 1
        else:
            return values[low], values[high]
    return None


def find_pair_with_sum_unsorted(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Find a pair adding to ``target`` in any order, remembering values seen so far.

    The pair is returned as (later value, earlier complement).
    """
    seen: set[int] = set()
    for value in values:
        complement = target - value
        if complement in seen:
            return value, complement
        seen.add(value)
    return None