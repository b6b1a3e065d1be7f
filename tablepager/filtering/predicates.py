"""
Named predicates for the filter chain.

A predicate's id is its stage identity: applying a predicate whose id is
already in the chain replaces that stage instead of adding a new one.
That is how a search box "updates" its filter as the user types.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from tablepager.models.capabilities import CellValue, read_cell
from tablepager.models.failure import ConstructionError, ConstructionFailureKind


@dataclass(frozen=True, slots=True)
class NamedPredicate:
    """Immutable (id, test) pair. The test must be callable."""

    id: str
    test: Callable[[Any], bool]

    def __post_init__(self) -> None:
        if not callable(self.test):
            raise ConstructionError(
                kind=ConstructionFailureKind.INVALID_PREDICATE,
                message=f"predicate {self.id!r} needs a callable test",
                detail=f"got {type(self.test).__name__}",
            )

    def is_match(self, item: Any) -> bool:
        return bool(self.test(item))


def ensure_pattern(template: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile string templates; pass compiled patterns through."""
    if isinstance(template, str):
        return re.compile(template)
    return template


class PatternPredicate:
    """
    Regex match against one column of an item.

    The column is read through a CellValue reader (mapping key or attribute
    by default). Matching uses search semantics, so "bolt" matches
    "Lightning Bolt". Items without the column never match.

    Usage:
        by_name = PatternPredicate(r"(?i)bolt", column="name")
        chain.apply(by_name)
        chain.apply(PatternPredicate(r"(?i)shock", column="name"))  # replaces
    """

    __slots__ = ("_pattern", "_column", "_id", "_read")

    def __init__(
        self,
        template: str | re.Pattern[str],
        column: str,
        id: str | None = None,  # noqa: A002
        cell_reader: CellValue | None = None,
    ) -> None:
        self._pattern = ensure_pattern(template)
        self._column = column
        self._id = id if id is not None else column
        self._read = cell_reader if cell_reader is not None else read_cell

    @property
    def id(self) -> str:
        return self._id

    @property
    def column(self) -> str:
        return self._column

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def is_match(self, item: Any) -> bool:
        content = self._read(item, self._column)
        if content is None:
            return False
        return self._pattern.search(str(content)) is not None

    def __repr__(self) -> str:
        return (
            f"PatternPredicate(id={self._id!r}, column={self._column!r}, "
            f"pattern={self._pattern.pattern!r})"
        )
