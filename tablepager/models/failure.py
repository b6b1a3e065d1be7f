"""
Failure Taxonomy — Rejections vs Construction Errors.

Two classes of failure exist and they are handled very differently.

PRECONDITION-REJECTED:
  Invalid page size, invalid page number, malformed predicate, reopening the
  page that is already open. These are routine, user-driven occurrences.
  They are NEVER raised: the operation returns False and logs a
  RejectionReason.

CONSTRUCTION-INVALID:
  A non-list backing store, an out-of-range initial count, a non-positive
  page size, a negative visibility radius. No valid state can be recovered,
  so a ConstructionError is raised immediately from the constructor.

INVARIANT: A rejected operation never leaves the span, chain or window
partially updated. Every precondition is checked before the first mutation.
"""

from enum import Enum
from typing import Any


class RejectionReason(str, Enum):
    """Why a routine operation did not take effect."""

    MALFORMED_PREDICATE = "malformed_predicate"
    INVALID_PAGE_SIZE = "invalid_page_size"
    INVALID_PAGE = "invalid_page"
    SAME_PAGE = "same_page"
    PAGE_OUT_OF_RANGE = "page_out_of_range"
    INVALID_LINK = "invalid_link"


class ConstructionFailureKind(str, Enum):
    """Classification of fatal construction failures."""

    INVALID_SPAN = "invalid_span"
    INVALID_COUNT = "invalid_count"
    NON_VISIBLE_ELEMENT = "non_visible_element"
    INVALID_PAGE_SIZE = "invalid_page_size"
    INVALID_WINDOW = "invalid_window"
    INVALID_RADIUS = "invalid_radius"
    INVALID_PREDICATE = "invalid_predicate"
    INVALID_PARTITION_MODE = "invalid_partition_mode"


class ConstructionError(ValueError):
    """
    Base class for fatal construction failures.

    Carries a machine-readable kind next to the human-readable message,
    so callers can branch on the kind without parsing text.
    """

    def __init__(
        self,
        kind: ConstructionFailureKind,
        message: str,
        detail: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)


class InvalidSpanError(ConstructionError):
    """Raised when a span, or the values backing it, cannot be used."""

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        kind: ConstructionFailureKind = ConstructionFailureKind.INVALID_SPAN,
    ):
        super().__init__(kind=kind, message=message, detail=detail)


class InvalidPageSizeError(ConstructionError):
    """Raised when a window is configured with a non-positive page size."""

    def __init__(self, page_size: Any):
        self.page_size = page_size
        super().__init__(
            kind=ConstructionFailureKind.INVALID_PAGE_SIZE,
            message=f"invalid page size value: {page_size!r}",
            detail="page size must be a positive integer",
        )


class InvalidRadiusError(ConstructionError):
    """Raised when the navigation index radius is not a non-negative integer."""

    def __init__(self, radius: Any):
        self.radius = radius
        super().__init__(
            kind=ConstructionFailureKind.INVALID_RADIUS,
            message=f"invalid visibility radius: {radius!r}",
            detail="radius must be a non-negative integer",
        )
