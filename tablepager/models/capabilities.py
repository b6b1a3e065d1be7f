"""
Capability contracts between the core and its host.

The core never touches a screen element or a table cell directly. It talks
to the host through these small protocols, and checks conformance at the
call boundary instead of probing for attributes deep inside the algorithms.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

# (item, column) -> comparable cell content, or None when absent
CellValue = Callable[[Any, str], Any]


@runtime_checkable
class Predicate(Protocol):
    """Named boolean test over one item. Identity is the id."""

    id: str

    def is_match(self, item: Any) -> bool: ...


@runtime_checkable
class Visible(Protocol):
    """Anything whose presentation can be toggled. Both calls are idempotent."""

    def show(self) -> None: ...

    def hide(self) -> None: ...


@runtime_checkable
class ActiveMarker(Protocol):
    """Optional capability of a page placeholder: highlight as the active page."""

    def set_active(self, active: bool) -> None: ...


def is_predicate(candidate: Any) -> bool:
    """
    Check that a candidate can be used as a filter stage.

    A usable predicate has a non-empty string id and a callable is_match.
    Predicates that expose a `test` attribute must have a callable one.
    """
    if candidate is None or not isinstance(candidate, Predicate):
        return False
    if not (isinstance(candidate.id, str) and candidate.id and callable(candidate.is_match)):
        return False
    return callable(getattr(candidate, "test", candidate.is_match))


def read_cell(item: Any, column: str) -> Any:
    """
    Default CellValue reader.

    Mappings are read by key, anything else by attribute.
    Returns None when the item has no such column.
    """
    if isinstance(item, Mapping):
        return item.get(column)
    return getattr(item, column, None)
