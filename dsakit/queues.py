"""FIFO queues: one built from linked nodes, one built from two stacks."""

from __future__ import annotations

from typing import Any, Iterator

from dsakit.stacks import LinkedStack


class QueueEmptyError(IndexError):
    """Raised when removing from or peeking an empty queue."""


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: _Node | None) -> None:
        self.data = data
        self.next = next


class LinkedQueue:
    """A queue whose nodes run from the newest element to the oldest.

    New elements are linked in at the front of the chain; the oldest
    element sits at the far end and is the one removed first.
    """

    def __init__(self) -> None:
        self._newest: _Node | None = None
        self._size = 0

    def enqueue(self, data: Any) -> None:
        """Add ``data`` as the newest element."""
        self._newest = _Node(data, self._newest)
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the oldest element."""
        if self._newest is None:
            raise QueueEmptyError("queue already empty")
        if self._newest.next is None:
            node = self._newest
            self._newest = None
        else:
            before = self._newest
            while before.next is not None and before.next.next is not None:
                before = before.next
            node = before.next
            assert node is not None
            before.next = None
        self._size -= 1
        return node.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the newest element to the oldest."""
        node = self._newest
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "  ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


class TwoStackQueue:
    """A queue that keeps an inbox stack and an outbox stack.

    Elements are pushed onto the inbox; when the outbox runs dry the
    inbox is poured into it, reversing the order so the oldest is on top.
    """

    def __init__(self) -> None:
        self._inbox = LinkedStack()
        self._outbox = LinkedStack()

    def _refill(self) -> None:
        if not len(self._outbox):
            while len(self._inbox):
                self._outbox.push(self._inbox.pop())
        if not len(self._outbox):
            raise QueueEmptyError("queue is empty")

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        self._inbox.push(data)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the front element without removing it."""
        self._refill()
        return self._outbox.peek()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __repr__(self) -> str:
        return f"TwoStackQueue(size={len(self)})"