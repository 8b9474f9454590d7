"""An unbalanced binary search tree with insertion, lookup and deletion."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("data", "left", "right")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Values smaller than a node go to its left; equal or larger go to its right."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for item in items:
            self.insert(item)

    def insert(self, data: Any) -> None:
        """Add ``data`` to the tree."""
        node = _Node(data)
        parent: _Node | None = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if data < current.data else current.right
        if parent is None:
            self._root = node
        elif data < parent.data:
            parent.left = node
        else:
            parent.right = node

    def _replace_child(self, parent: _Node | None, child: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is child:
            parent.left = new
        else:
            parent.right = new

    def delete(self, data: Any) -> None:
        """Remove one node holding ``data``, keeping the search-tree order."""
        parent: _Node | None = None
        current = self._root
        while current is not None and current.data != data:
            parent = current
            current = current.left if data < current.data else current.right
        if current is None:
            raise KeyError(data)

        if current.left is not None and current.right is not None:
            # Replace with the in-order successor, the leftmost node of the right subtree.
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.data = successor.data
            self._replace_child(successor_parent, successor, successor.right)
        else:
            child = current.left if current.left is not None else current.right
            self._replace_child(parent, current, child)

    def lookup(self, data: Any) -> bool:
        """Return whether ``data`` is stored in the tree."""
        current = self._root
        while current is not None:
            if data < current.data:
                current = current.left
            elif data > current.data:
                current = current.right
            else:
                return True
        return False

    def __contains__(self, data: Any) -> bool:
        return self.lookup(data)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in order: left subtree, node, right subtree."""
        pending: list[_Node] = []
        current = self._root
        while current is not None or pending:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.data
            current = current.right

    def __str__(self) -> str:
        return "  ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"