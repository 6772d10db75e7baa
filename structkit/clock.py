"""A time of day value and helpers to compare and order times."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(order=True)
class Time:
    """Hours, minutes and seconds, ordered by hour, then minute, then second."""

    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def parse(cls, text: str) -> Time:
        """Read three integers, hours minutes seconds, separated by spaces or colons."""
        parts = text.replace(":", " ").split()
        if len(parts) != 3:
            raise ValueError(f"expected hours, minutes and seconds: {text!r}")
        hour, minute, second = (int(part) for part in parts)
        return cls(hour, minute, second)

    def describe(self) -> str:
        """Return the time with unit labels."""
        return f"{self.hour}hr {self.minute}min {self.second}sec"

    def __str__(self) -> str:
        return f"{self.hour} : {self.minute} : {self.second}"


def bigger(a: T, b: T) -> T:
    """Return the larger of two values, preferring ``a`` when neither is smaller."""
    return b if a < b else a  # type: ignore[operator]


def sort_times_descending(times: Iterable[Time]) -> list[Time]:
    """Return the times ordered from latest to earliest."""
    return sorted(times, reverse=True)