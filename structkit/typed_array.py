"""A fixed-capacity array whose elements must all be of one type."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from structkit.array import FixedArray


class TypedArray(FixedArray):
    """A :class:`FixedArray` that only accepts instances of ``item_type``.

    Storing a value of another type raises :class:`TypeError` and leaves the
    array unchanged.
    """

    def __init__(self, item_type: type, capacity: int = 0) -> None:
        super().__init__(capacity)
        self._item_type = item_type

    @property
    def item_type(self) -> type:
        """The type every element must have."""
        return self._item_type

    def _check_type(self, value: Any) -> None:
        if not isinstance(value, self._item_type):
            raise TypeError(
                f"expected {self._item_type.__name__}, got {type(value).__name__}"
            )

    def append(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        self._check_type(value)
        super().append(value)

    def insert(self, index: int, value: Any) -> None:
        """Put ``value`` at ``index``, moving later elements one place right."""
        self._check_type(value)
        super().insert(index, value)

    def edit(self, index: int, value: Any) -> None:
        """Replace the element at ``index`` with ``value``."""
        self._check_type(value)
        super().edit(index, value)

    def fill(self, values: Iterable[Any]) -> None:
        """Replace the contents with exactly ``capacity`` values of the item type."""
        new_items = list(values)
        for value in new_items:
            self._check_type(value)
        super().fill(new_items)

    def copy(self) -> TypedArray:
        """Return an independent array with the same type, capacity and elements."""
        duplicate = super().copy()
        assert isinstance(duplicate, TypedArray)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypedArray) and other._item_type is not self._item_type:
            return False
        return super().__eq__(other)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._item_type.__name__}, "
            f"capacity={self.capacity}, items={list(self)!r})"
        )