"""
tablepager — narrow a table with chained filters and page through the rest.

    span = IndexedSpan(rows)
    chain = FilterChain(span)
    window = PageWindow(span, page_size=25)
    view = PageIndexView(window)

    chain.apply(PatternPredicate("(?i)dragon", column="type_line"))
    view.refresh()
    view.switch_to(2)
"""

from tablepager.config import PartitionMode, Settings, settings
from tablepager.filtering import (
    FilterChain,
    FilterStage,
    NamedPredicate,
    PatternPredicate,
)
from tablepager.models import (
    ConstructionError,
    IndexedSpan,
    InvalidPageSizeError,
    InvalidRadiusError,
    InvalidSpanError,
    PageIndexLayout,
    PageRange,
    Predicate,
    RejectionReason,
    Visible,
)
from tablepager.paging import PageIndexView, PageLink, PageWindow

__all__ = [
    "ConstructionError",
    "FilterChain",
    "FilterStage",
    "IndexedSpan",
    "InvalidPageSizeError",
    "InvalidRadiusError",
    "InvalidSpanError",
    "NamedPredicate",
    "PageIndexLayout",
    "PageIndexView",
    "PageLink",
    "PageRange",
    "PageWindow",
    "PartitionMode",
    "PatternPredicate",
    "Predicate",
    "RejectionReason",
    "Settings",
    "Visible",
    "settings",
]
