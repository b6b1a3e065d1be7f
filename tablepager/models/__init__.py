from tablepager.models.capabilities import (
    ActiveMarker,
    CellValue,
    Predicate,
    Visible,
    is_predicate,
    read_cell,
)
from tablepager.models.failure import (
    ConstructionError,
    ConstructionFailureKind,
    InvalidPageSizeError,
    InvalidRadiusError,
    InvalidSpanError,
    RejectionReason,
)
from tablepager.models.page import PageIndexLayout, PageRange
from tablepager.models.span import IndexedSpan, in_range

__all__ = [
    "ActiveMarker",
    "CellValue",
    "ConstructionError",
    "ConstructionFailureKind",
    "IndexedSpan",
    "InvalidPageSizeError",
    "InvalidRadiusError",
    "InvalidSpanError",
    "PageIndexLayout",
    "PageRange",
    "Predicate",
    "RejectionReason",
    "Visible",
    "in_range",
    "is_predicate",
    "read_cell",
]
