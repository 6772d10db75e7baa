"""A binary search tree of unique values in linked representation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class BinarySearchTree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def is_empty(self) -> bool:
        """Return True when the tree holds no values."""
        return self._root is None

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already in the tree."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        node = self._root
        while node.value != value:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
        else:
            return False
        self._size += 1
        return True

    def _preorder(self) -> Iterator[Any]:
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def _inorder(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> list[Any]:
        """Return the values in root, left, right order."""
        return list(self._preorder())

    def inorder(self) -> list[Any]:
        """Return the values in left, root, right order (ascending)."""
        return list(self._inorder())

    def postorder(self) -> list[Any]:
        """Return the values in left, right, root order."""
        result = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        result.reverse()
        return result

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return self._inorder()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.preorder()!r})"