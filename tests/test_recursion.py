import pytest

from dsakit.recursion import (
    factorial,
    fibonacci,
    fibonacci_iterative,
    fibonacci_series,
)


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


def test_factorial_documented_example():
    assert factorial(5) == 120


@pytest.mark.parametrize("num", range(2, 25))
def test_factorial_recurrence(num):
    assert factorial(num) == num * factorial(num - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_documented_prefix():
    assert fibonacci_series(7) == [0, 1, 1, 2, 3, 5, 8]


@pytest.mark.parametrize("num", range(2, 60))
def test_fibonacci_recurrence(num):
    assert fibonacci(num) == fibonacci(num - 1) + fibonacci(num - 2)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("count", [0, 1, 2, 10, 50])
def test_iterative_matches_recursive(count):
    assert fibonacci_iterative(count) == fibonacci_series(count)
    assert len(fibonacci_iterative(count)) == count


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-3)
    with pytest.raises(ValueError):
        fibonacci_series(-1)
    with pytest.raises(ValueError):
        fibonacci_iterative(-1)