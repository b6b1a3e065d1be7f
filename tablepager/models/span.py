"""
Indexed Span — ordered values with a movable active-length boundary.

INVARIANTS:
- 0 <= count <= len(values) at all times
- The first `count` values are the active (surviving) ones
- Order beyond `count` is unspecified
- Values are only reordered, never dropped (swap is a permutation)

Out-of-bounds reads return None instead of raising. Out-of-bounds swaps
raise IndexError and leave the span untouched.
"""

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from tablepager.models.failure import ConstructionFailureKind, InvalidSpanError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def in_range(value: Any, start: int, stop: int) -> bool:
    """Whether value is an integer in [start, stop). Booleans are not integers here."""
    return isinstance(value, int) and not isinstance(value, bool) and start <= value < stop


class IndexedSpan(Generic[T]):
    """
    A list plus a count of leading elements considered active.

    Usage:
        span = IndexedSpan(rows)
        span.swap(0, 3)
        span.count = 2
        for row in span:  # only the first two rows
            ...
    """

    __slots__ = ("_values", "_count")

    def __init__(self, values: list[T], count: int | None = None) -> None:
        if not isinstance(values, list):
            raise InvalidSpanError(
                "span values must be a list",
                detail=f"got {type(values).__name__}",
            )

        if count is not None and not in_range(count, 0, len(values) + 1):
            raise InvalidSpanError(
                f"initial count {count!r} is outside [0, {len(values)}]",
                kind=ConstructionFailureKind.INVALID_COUNT,
            )

        self._values = values
        self._count = len(values) if count is None else count

    @property
    def values(self) -> list[T]:
        """The backing list, in its current physical order."""
        return self._values

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, new_count: int) -> None:
        # Stray writes (None, floats, out-of-range) are dropped, not raised
        if not in_range(new_count, 0, len(self._values) + 1):
            logger.debug(
                "span_count_ignored",
                extra={"requested": repr(new_count), "length": len(self._values)},
            )
            return
        self._count = new_count

    def __len__(self) -> int:
        """Physical length, independent of count."""
        return len(self._values)

    def at(self, index: int) -> T | None:
        """Value at a physical index, or None when the index is out of bounds."""
        if not in_range(index, 0, len(self._values)):
            return None
        return self._values[index]

    def swap(self, first: int, second: int) -> None:
        """
        Exchange the values at two physical indices.

        Raises:
            IndexError: If either index is outside [0, len(span))
        """
        length = len(self._values)
        if not in_range(first, 0, length) or not in_range(second, 0, length):
            raise IndexError(f"swap({first!r}, {second!r}) out of bounds for length {length}")

        values = self._values
        values[first], values[second] = values[second], values[first]

    def push(self, value: T) -> None:
        """Append a value and count it as active."""
        self._values.append(value)
        self._count += 1

    def survivors(self) -> Iterator[T]:
        """Lazily yield the first `count` values."""
        index = 0
        while index < self._count:
            yield self._values[index]
            index += 1

    def __iter__(self) -> Iterator[T]:
        return self.survivors()

    def __repr__(self) -> str:
        return f"IndexedSpan(count={self._count}, length={len(self._values)})"
