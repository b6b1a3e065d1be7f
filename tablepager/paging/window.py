"""
Page Window — which survivors are on screen.

States:
- Closed (page == 0): nothing shown. The initial state.
- OpenOnPage(n): survivors [(n-1)*size, min(n*size, count)) shown.

INVARIANTS:
- Total pages are derived from span.count on every read, never stored
- Exactly the elements of the current range are shown after open(),
  including elements pushed into the span after construction
- reset() leaves every element of the span hidden
- Rejected opens return False and change nothing
"""

import logging
import math
from typing import Any, Generic, TypeVar

from tablepager.config import settings
from tablepager.models.capabilities import Visible
from tablepager.models.failure import (
    ConstructionFailureKind,
    InvalidPageSizeError,
    InvalidSpanError,
    RejectionReason,
)
from tablepager.models.page import PageRange
from tablepager.models.span import IndexedSpan

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Visible)


def is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def count_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size), or 0 when there is nothing to page."""
    if total <= 0 or page_size <= 0:
        return 0
    return math.ceil(total / page_size)


class PageWindow(Generic[T]):
    """
    Page state machine over the survivors of a span.

    Elements must be Visible; the window hides and shows them as pages
    change. Every element is hidden at construction, so nothing is visible
    until a page is opened explicitly.

    Usage:
        window = PageWindow(span, page_size=25)
        window.open(1)
        window.next()
    """

    def __init__(self, span: IndexedSpan[T], page_size: int | None = None) -> None:
        if not isinstance(span, IndexedSpan):
            raise InvalidSpanError(
                "page window requires an IndexedSpan",
                detail=f"got {type(span).__name__}",
            )

        size = settings.page_size if page_size is None else page_size
        if not is_positive_int(size):
            raise InvalidPageSizeError(size)

        self._span = span
        self._page_size = size
        self._page = 0
        self._shown: list[T] = []
        self._range: PageRange | None = None

        self._check_elements()
        self._hide_all()

    @property
    def span(self) -> IndexedSpan[T]:
        return self._span

    @property
    def page(self) -> int:
        """Currently open page, 0 when closed."""
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return count_pages(self._span.count, self._page_size)

    @property
    def is_open(self) -> bool:
        return self._page > 0

    @property
    def current_range(self) -> PageRange | None:
        return self._range

    @property
    def visible_items(self) -> tuple[T, ...]:
        return tuple(self._shown)

    def open(self, page: int, page_size: int | None = None) -> bool:
        """
        Switch to a page.

        Elements pushed into the span since the last open are checked and
        hidden here, so a page never leaks rows from outside its range.

        Args:
            page: 1-based page number
            page_size: Elements per page for this open only; the configured
                size still decides how many pages exist

        Returns:
            True if the window moved to the page, False if rejected
        """
        size = self._page_size if page_size is None else page_size
        if not is_positive_int(size):
            return self._reject(RejectionReason.INVALID_PAGE_SIZE, page, size)

        if not is_positive_int(page):
            return self._reject(RejectionReason.INVALID_PAGE, page, size)

        if page == self._page:
            return self._reject(RejectionReason.SAME_PAGE, page, size)

        if page > self.total_pages:
            return self._reject(RejectionReason.PAGE_OUT_OF_RANGE, page, size)

        self._check_elements()
        shown = self._show(page, size)
        self._page = page

        logger.debug(
            "page_opened",
            extra={
                "page": page,
                "range": (shown.start, shown.stop),
                "total_pages": self.total_pages,
            },
        )
        return True

    def next(self) -> bool:
        return self.open(self._page + 1)

    def previous(self) -> bool:
        return self.open(self._page - 1)

    def reset(self) -> None:
        """
        Hide every element and return to Closed.

        Call after the survivor set changed, so that page 1 can be opened
        again with the new survivors.
        """
        self._check_elements()
        self._hide_all()
        self._shown.clear()
        self._range = None
        self._page = 0

    def _check_elements(self) -> None:
        for index, element in enumerate(self._span.values):
            if not isinstance(element, Visible):
                raise InvalidSpanError(
                    "every paged element must support show() and hide()",
                    detail=f"element {index} is {type(element).__name__}",
                    kind=ConstructionFailureKind.NON_VISIBLE_ELEMENT,
                )

    def _show(self, page: int, page_size: int) -> PageRange:
        stop = min(page * page_size, self._span.count)
        start = min((page - 1) * page_size, stop)
        page_range = PageRange(start=start, stop=stop)
        self._range = page_range
        self._shown.clear()

        for index, element in enumerate(self._span.values):
            if start <= index < stop:
                self._shown.append(element)
                element.show()
            else:
                element.hide()

        return page_range

    def _hide_all(self) -> None:
        for element in self._span.values:
            element.hide()

    def _reject(self, reason: RejectionReason, page: Any, page_size: Any) -> bool:
        logger.debug(
            "page_open_rejected",
            extra={
                "reason": reason.value,
                "requested_page": repr(page),
                "page_size": repr(page_size),
                "current_page": self._page,
            },
        )
        return False
