"""Two stacks: one bounded and backed by an array, one backed by linked nodes."""

from __future__ import annotations

from typing import Any, Iterator

DEFAULT_CAPACITY = 128


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class ArrayStack:
    """A stack of bounded capacity stored in a list."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, data: Any) -> None:
        """Push ``data`` on top of the stack."""
        if len(self._items) >= self._capacity:
            raise StackFullError("stack overflows")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        return "  ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"ArrayStack({list(self)!r})"


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: _Node | None) -> None:
        self.data = data
        self.next = next


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, data: Any) -> None:
        """Push ``data`` on top of the stack."""
        self._top = _Node(data, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise StackEmptyError("stack under-flow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "  ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"