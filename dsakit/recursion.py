"""Recursive factorial and Fibonacci, with an iterative Fibonacci for comparison."""

from __future__ import annotations

from functools import lru_cache


def factorial(num: int) -> int:
    """Return ``num!`` computed recursively."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if num <= 1:
        return 1
    return num * factorial(num - 1)


@lru_cache(maxsize=None)
def _memo_fibonacci(num: int) -> int:
    if num < 2:
        return num
    return _memo_fibonacci(num - 1) + _memo_fibonacci(num - 2)


def fibonacci(num: int) -> int:
    """Return the ``num``-th Fibonacci number (0, 1, 1, 2, ...), memoised."""
    if num < 0:
        raise ValueError("Fibonacci index must not be negative")
    return _memo_fibonacci(num)


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers using the recursive function."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [fibonacci(index) for index in range(count)]


def fibonacci_iterative(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers built up iteratively."""
    if count < 0:
        raise ValueError("count must not be negative")
    series: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        series.append(a)
        a, b = b, a + b
    return series