"""A singly linked list with O(1) append and prepend."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("data", "link")

    def __init__(self, data: Any, link: _Node | None = None) -> None:
        self.data = data
        self.link = link


class LinkedList:
    """A singly linked list that keeps references to both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.link
        assert node is not None
        return node

    def append(self, element: Any) -> None:
        """Add ``element`` at the end of the list."""
        node = _Node(element)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.link = node
            self._tail = node
        self._size += 1

    def prepend(self, element: Any) -> None:
        """Add ``element`` at the front of the list."""
        node = _Node(element, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert(self, element: Any, pos: int) -> None:
        """Insert ``element`` so that it sits at zero-based ``pos``.

        Position 0 prepends; any position at or past the end appends.
        """
        if pos < 0:
            raise IndexError(f"invalid position {pos}")
        if pos == 0:
            self.prepend(element)
        elif pos >= self._size:
            self.append(element)
        else:
            prev = self._node_at(pos - 1)
            prev.link = _Node(element, prev.link)
            self._size += 1

    def remove(self, pos: int) -> Any:
        """Remove and return the element at one-based ``pos``."""
        if not 1 <= pos <= self._size:
            raise IndexError(f"cannot remove node at position {pos}")
        if pos == 1:
            assert self._head is not None
            removed = self._head
            self._head = removed.link
            if self._head is None:
                self._tail = None
        else:
            prev = self._node_at(pos - 2)
            removed = prev.link
            assert removed is not None
            prev.link = removed.link
            if removed is self._tail:
                self._tail = prev
        self._size -= 1
        return removed.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return "".join(f"{item}-->" for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"