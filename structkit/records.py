"""Record types and containers ordered by a chosen key."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Employee:
    """An employee with an id, a name and a salary."""

    empid: int
    name: str
    salary: float

    def __str__(self) -> str:
        return f"{self.empid} {self.name} {self.salary:g}"


@dataclass
class Book:
    """A book with an id, a title and a price."""

    book_id: int
    title: str
    price: float

    def __str__(self) -> str:
        return f"{self.book_id} {self.title} {self.price:g}"


class _MaxEntry:
    __slots__ = ("key", "order", "item")

    def __init__(self, key: Any, order: int, item: Any) -> None:
        self.key = key
        self.order = order
        self.item = item

    def __lt__(self, other: _MaxEntry) -> bool:
        if self.key == other.key:
            return self.order < other.order
        return other.key < self.key


class KeyedPriorityQueue:
    """A priority queue whose top is the item with the largest key."""

    def __init__(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        self._key = key
        self._heap: list[_MaxEntry] = []
        self._counter = itertools.count()

    def _key_of(self, item: Any) -> Any:
        return item if self._key is None else self._key(item)

    def push(self, item: Any) -> None:
        """Add ``item`` to the queue."""
        heapq.heappush(
            self._heap, _MaxEntry(self._key_of(item), next(self._counter), item)
        )

    def pop(self) -> Any:
        """Remove and return the item with the largest key."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap).item

    def top(self) -> Any:
        """Return the item with the largest key without removing it."""
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._heap[0].item

    def __len__(self) -> int:
        return len(self._heap)


class KeyedSet:
    """A sorted set in which items with equal keys count as the same item.

    Adding an item whose key is already present leaves the set unchanged.
    With ``reverse`` the items are kept in descending key order.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        key: Optional[Callable[[Any], Any]] = None,
        reverse: bool = False,
    ) -> None:
        self._key = key
        self._reverse = reverse
        self._keys: list[Any] = []
        self._items: list[Any] = []
        for item in items:
            self.add(item)

    def _key_of(self, item: Any) -> Any:
        return item if self._key is None else self._key(item)

    def _before(self, a: Any, b: Any) -> bool:
        return b < a if self._reverse else a < b

    def _locate(self, key: Any) -> tuple[int, bool]:
        low, high = 0, len(self._keys)
        while low < high:
            middle = (low + high) // 2
            if self._before(self._keys[middle], key):
                low = middle + 1
            else:
                high = middle
        found = low < len(self._keys) and not self._before(key, self._keys[low])
        return low, found

    def add(self, item: Any) -> bool:
        """Insert ``item``; return False if an item with its key is present."""
        key = self._key_of(item)
        position, found = self._locate(key)
        if found:
            return False
        self._keys.insert(position, key)
        self._items.insert(position, item)
        return True

    def discard(self, item: Any) -> bool:
        """Remove the item with the key of ``item``; return whether one was removed."""
        position, found = self._locate(self._key_of(item))
        if not found:
            return False
        del self._keys[position]
        del self._items[position]
        return True

    def count(self, item: Any) -> int:
        """Return 1 if an item with the key of ``item`` is present, else 0."""
        return int(self._locate(self._key_of(item))[1])

    def erase_range(self, start: int, stop: int) -> int:
        """Remove the items at positions ``start`` up to but not including ``stop``.

        Positions follow slice rules, so negative values count from the end.
        Returns the number of items removed.
        """
        low, high, _ = slice(start, stop).indices(len(self._items))
        if high <= low:
            return 0
        self._keys = self._keys[:low] + self._keys[high:]
        self._items = self._items[:low] + self._items[high:]
        return high - low

    def __contains__(self, item: Any) -> bool:
        return self.count(item) == 1

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"