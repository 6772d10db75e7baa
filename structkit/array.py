"""A fixed-capacity array with explicit overflow and index checking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ArrayFullError(OverflowError):
    """Raised when an element is added to an array that has no free slot."""


class FixedArray:
    """An array that holds at most ``capacity`` elements, packed from index 0.

    Elements occupy the indices ``0 .. len(self) - 1``. Inserting shifts later
    elements one place right and deleting shifts them one place left.
    """

    def __init__(self, capacity: int = 0) -> None:
        self._capacity = max(int(capacity), 0)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The largest number of elements the array can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return True when the array holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when every slot of the array is taken."""
        return len(self._items) == self._capacity

    def append(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        if self.is_full():
            raise ArrayFullError("array is full")
        self._items.append(value)

    def insert(self, index: int, value: Any) -> None:
        """Put ``value`` at ``index``, moving later elements one place right.

        ``index`` may be anything from 0 to ``len(self)`` inclusive.
        """
        if index < 0 or index > len(self._items):
            raise IndexError(f"invalid index {index}")
        if self.is_full():
            raise ArrayFullError("array is full")
        self._items.insert(index, value)

    def edit(self, index: int, value: Any) -> None:
        """Replace the element at ``index`` with ``value``."""
        self._check_index(index)
        self._items[index] = value

    def delete(self, index: int) -> None:
        """Remove the element at ``index``, moving later elements left."""
        self._check_index(index)
        del self._items[index]

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def find(self, value: Any) -> int:
        """Return the index of the first element equal to ``value``, or -1."""
        return next(
            (position for position, item in enumerate(self._items) if item == value),
            -1,
        )

    def fill(self, values: Iterable[Any]) -> None:
        """Replace the contents with exactly ``capacity`` values."""
        new_items = list(values)
        if len(new_items) != self._capacity:
            raise ValueError(
                f"expected {self._capacity} values, got {len(new_items)}"
            )
        self._items = new_items

    def copy(self) -> FixedArray:
        """Return an independent array with the same capacity and elements."""
        duplicate = type(self).__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate._items = list(self._items)
        return duplicate

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError(f"invalid index {index} or empty array")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedArray):
            return NotImplemented
        return self._capacity == other._capacity and self._items == other._items

    def __str__(self) -> str:
        if self.is_empty():
            return "Array is Empty"
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"