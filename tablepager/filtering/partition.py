"""
In-place partitioning of a span prefix by one predicate.

Both partitioners walk [0, end) once, reorder values only through
span.swap, and return how many leading values they count as matches.

CONVENTIONAL:
  Non-matching values are swapped past a shrinking tail boundary.
  Afterwards exactly the returned number of leading values match, and
  that number is the true match count of the prefix.

LITERAL:
  Reproduces the historical table manager, which swaps (matched, end)
  on every iteration whether or not the value matched. What still holds:
  - the span stays a permutation of its values
  - 0 <= result <= end
  - the result is deterministic for a given input order
  What does not hold: the leading values may include non-matches, and
  matches may be undercounted. Swaps whose first index has run past the
  physical end of the span are skipped.
"""

from collections.abc import Callable
from typing import Any

from tablepager.config import PartitionMode
from tablepager.models.capabilities import Predicate
from tablepager.models.span import IndexedSpan

Partitioner = Callable[[IndexedSpan[Any], Predicate, int], int]


def partition_conventional(span: IndexedSpan[Any], predicate: Predicate, end: int) -> int:
    """Move matches of [0, end) to the front; return their number."""
    matched = 0
    while matched < end:
        if predicate.is_match(span.at(matched)):
            matched += 1
        else:
            end -= 1
            span.swap(matched, end)
    return matched


def partition_literal(span: IndexedSpan[Any], predicate: Predicate, end: int) -> int:
    """Swap-every-iteration partition of [0, end)."""
    length = len(span)
    matched = 0
    while matched < end:
        if predicate.is_match(span.at(matched)):
            matched += 1
        end -= 1
        if matched < length:
            span.swap(matched, end)
    return matched


PARTITIONERS: dict[PartitionMode, Partitioner] = {
    PartitionMode.CONVENTIONAL: partition_conventional,
    PartitionMode.LITERAL: partition_literal,
}
