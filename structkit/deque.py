"""A double-ended queue built on a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class EmptyDequeError(IndexError):
    """Raised when an element is read from an empty deque."""


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class LinkedDeque:
    """A deque whose elements live in doubly linked nodes.

    Removing from an empty deque does nothing; reading from an empty deque
    raises :class:`EmptyDequeError`.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert_rear(item)

    def insert_front(self, value: Any) -> None:
        """Put ``value`` before the current front element."""
        node = _Node(value)
        if self._front is None:
            self._front = self._rear = node
        else:
            node.next = self._front
            self._front.prev = node
            self._front = node
        self._size += 1

    def insert_rear(self, value: Any) -> None:
        """Put ``value`` after the current rear element."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            node.prev = self._rear
            self._rear.next = node
            self._rear = node
        self._size += 1

    def delete_front(self) -> None:
        """Remove the front element; an empty deque is left unchanged."""
        if self._front is None:
            return
        if self._front is self._rear:
            self._front = self._rear = None
        else:
            self._front = self._front.next
            self._front.prev = None
        self._size -= 1

    def delete_rear(self) -> None:
        """Remove the rear element; an empty deque is left unchanged."""
        if self._rear is None:
            return
        if self._front is self._rear:
            self._front = self._rear = None
        else:
            self._rear = self._rear.prev
            self._rear.next = None
        self._size -= 1

    def peek_front(self) -> Any:
        """Return the front element without removing it."""
        if self._front is None:
            raise EmptyDequeError("deque is empty")
        return self._front.value

    def peek_rear(self) -> Any:
        """Return the rear element without removing it."""
        if self._rear is None:
            raise EmptyDequeError("deque is empty")
        return self._rear.value

    def is_empty(self) -> bool:
        """Return True when the deque holds no elements."""
        return self._front is None

    def clear(self) -> None:
        """Remove every element."""
        while self._front is not None:
            self.delete_front()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._rear
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"