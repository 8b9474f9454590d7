"""A doubly linked list that can be walked and reversed in both directions."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any, prev: _Node | None = None, next: _Node | None = None) -> None:
        self.data = data
        self.prev = prev
        self.next = next


class DoublyLinkedList:
    """A list of nodes linked forwards and backwards, with head and tail references."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def _node_at(self, index: int) -> _Node:
        # Walk from whichever end is closer.
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""
        node = _Node(data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, data: Any) -> None:
        """Add ``data`` at the front."""
        node = _Node(data, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert(self, data: Any, pos: int) -> None:
        """Insert ``data`` at one-based ``pos``.

        Position 1 prepends and a position equal to the length appends;
        positions below 1 or above the length are rejected.
        """
        if pos > self._size:
            raise IndexError(f"position {pos} too large to insert")
        if pos < 1:
            raise IndexError(f"position {pos} must be at least 1")
        if pos == 1:
            self.prepend(data)
        elif pos == self._size:
            self.append(data)
        else:
            target = self._node_at(pos - 1)
            assert target.prev is not None
            node = _Node(data, prev=target.prev, next=target)
            target.prev.next = node
            target.prev = node
            self._size += 1

    def remove(self, pos: int) -> Any:
        """Remove and return the element at one-based ``pos``."""
        if not 1 <= pos <= self._size:
            raise IndexError(f"cannot delete at position {pos}")
        node = self._node_at(pos - 1)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.data

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{item}---->" for item in self) + "NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"