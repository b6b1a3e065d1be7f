"""
Page Index View — which page links the navigation index shows.

Around the active page, `radius` pages are shown on each side. The first
and last page are always shown. A gap between page 1 and the window (or
between the window and the last page) is collapsed into a "..." marker
when it hides two or more pages; a gap of exactly one page shows that
page instead, since a marker would take the same room.

Example (total=10, radius=2, active=6):

    1 ... 4 5 [6] 7 8 9 10

INVARIANTS:
- One placeholder per page number, created on first need, reused forever
- The placeholder arena only grows
- Every placeholder is hidden before a new layout is shown, so no stale
  link stays visible
- Activating a link outside [1, total_pages] never changes the active page
"""

import logging
from collections.abc import Callable
from typing import Any

from tablepager.config import COLLAPSED_LABEL, settings
from tablepager.models.capabilities import ActiveMarker, Visible
from tablepager.models.failure import (
    ConstructionError,
    ConstructionFailureKind,
    InvalidRadiusError,
    RejectionReason,
)
from tablepager.models.page import PageIndexLayout
from tablepager.models.span import in_range
from tablepager.paging.window import PageWindow

logger = logging.getLogger(__name__)

# Called with the activated link's page identifier
ActivateCallback = Callable[[Any], bool]

# (label, on_activate) -> placeholder
LinkFactory = Callable[[str, ActivateCallback], Visible]


class PageLink:
    """
    In-memory page placeholder.

    Hosts that render real links pass their own link_factory; this one
    only records its state, which is enough for headless use and tests.
    """

    __slots__ = ("label", "visible", "active", "_on_activate")

    def __init__(self, label: str, on_activate: ActivateCallback | None = None) -> None:
        self.label = label
        self.visible = False
        self.active = False
        self._on_activate = on_activate

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def set_active(self, active: bool) -> None:
        self.active = active

    def click(self) -> bool:
        """Report this link's page to the view."""
        if self._on_activate is None:
            return False
        return self._on_activate(self.label)

    def __repr__(self) -> str:
        return f"PageLink({self.label!r}, visible={self.visible}, active={self.active})"


def parse_page(page_id: Any) -> int | None:
    """Integer page number from an opaque link identifier, or None."""
    if isinstance(page_id, bool):
        return None
    if isinstance(page_id, int):
        return page_id
    if isinstance(page_id, str):
        try:
            return int(page_id.strip())
        except ValueError:
            return None
    return None


class PageIndexView:
    """
    Navigation index driven by a PageWindow.

    Usage:
        view = PageIndexView(window, radius=2)
        view.switch_to(6)
        view.layout().tokens()  # [1, "...", 4, 5, 6, 7, 8, 9, 10]
    """

    def __init__(
        self,
        window: PageWindow[Any],
        link_factory: LinkFactory | None = None,
        on_link_create: Callable[[Visible], None] | None = None,
        radius: int | None = None,
    ) -> None:
        if not isinstance(window, PageWindow):
            raise ConstructionError(
                kind=ConstructionFailureKind.INVALID_WINDOW,
                message="page index view requires a PageWindow",
                detail=f"got {type(window).__name__}",
            )

        radius = settings.visible_links if radius is None else radius
        if not isinstance(radius, int) or isinstance(radius, bool) or radius < 0:
            raise InvalidRadiusError(radius)

        self._window = window
        self._radius = radius
        self._link_factory: LinkFactory = link_factory or PageLink
        self._on_link_create = on_link_create
        self._links: list[Visible] = []
        self._active = 0
        self._layout = PageIndexLayout()

        self._collapsed_before = self._create_placeholder(COLLAPSED_LABEL)
        self._collapsed_after = self._create_placeholder(COLLAPSED_LABEL)

        self.switch_to_first()

    @property
    def page(self) -> int:
        """Active page, 0 before any page was opened."""
        return self._active

    @property
    def total_pages(self) -> int:
        return self._window.total_pages

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def window(self) -> PageWindow[Any]:
        return self._window

    @property
    def collapsed_before(self) -> Visible:
        return self._collapsed_before

    @property
    def collapsed_after(self) -> Visible:
        return self._collapsed_after

    def link(self, page: int) -> Visible | None:
        """Cached placeholder for a page, or None if not created yet."""
        if not in_range(page, 1, len(self._links) + 1):
            return None
        return self._links[page - 1]

    def layout(self) -> PageIndexLayout:
        return self._layout

    def switch_to(self, page: int) -> bool:
        """
        Open a page and re-layout the index around it.

        If the requested page is out of range while the tracked active page
        is out of range too (e.g. the survivor set shrank), falls back to
        page 1 when there is one. If the window already shows the page
        because it was opened directly, only the index is re-laid out.

        Returns:
            True if the active page changed
        """
        total = self.total_pages

        if not in_range(page, 1, total + 1):
            if not in_range(self._active, 1, total + 1) and total > 0:
                return self.switch_to(1)
            logger.debug(
                "page_switch_rejected",
                extra={
                    "reason": RejectionReason.PAGE_OUT_OF_RANGE.value,
                    "requested_page": repr(page),
                    "total_pages": total,
                },
            )
            return False

        already_open = self._window.page == page and page != self._active
        if not already_open and not self._window.open(page):
            return False

        self._update_links(page, total)
        self._set_active(page)
        return True

    def switch_to_next(self) -> bool:
        return self.switch_to(self._active + 1)

    def switch_to_previous(self) -> bool:
        return self.switch_to(self._active - 1)

    def switch_to_first(self) -> bool:
        if self.total_pages > 0:
            return self.switch_to(1)
        return False

    def activate(self, page_id: Any) -> bool:
        """
        Placeholder activation callback.

        The identifier is whatever the placeholder reported (its label by
        default). Anything that is not an integer page in
        [1, total_pages] is ignored.
        """
        page = parse_page(page_id)
        if page is None or not in_range(page, 1, self.total_pages + 1):
            logger.debug(
                "page_link_ignored",
                extra={
                    "reason": RejectionReason.INVALID_LINK.value,
                    "page_id": repr(page_id),
                    "total_pages": self.total_pages,
                },
            )
            return False
        return self.switch_to(page)

    def refresh(self) -> bool:
        """
        Start over from page 1 after the survivor count changed.

        Returns:
            True if a page was opened, False if there are no pages
        """
        self._window.reset()
        self._hide_all()
        self._mark(self._active, False)
        self._active = 0
        self._layout = PageIndexLayout(total_pages=self.total_pages)
        return self.switch_to_first()

    def _update_links(self, active: int, total: int) -> None:
        self._ensure_links(total)
        self._hide_all()

        radius = self._radius
        pages = {1, total}

        # Pages strictly between 1 and the window start
        hidden_before = active - radius - 2
        collapse_before = hidden_before >= 2
        if hidden_before == 1:
            pages.add(2)

        start = max(1, active - radius)
        end = min(total, active + radius)
        pages.update(range(start, end + 1))

        # Pages strictly between the window end and the last page
        hidden_after = total - active - radius - 1
        collapse_after = hidden_after >= 2
        if hidden_after == 1:
            pages.add(total - 1)

        for page in pages:
            self._links[page - 1].show()
        if collapse_before:
            self._collapsed_before.show()
        if collapse_after:
            self._collapsed_after.show()

        self._layout = PageIndexLayout(
            active_page=active,
            total_pages=total,
            pages=tuple(sorted(pages)),
            collapsed_before=collapse_before,
            collapsed_after=collapse_after,
        )

    def _ensure_links(self, count: int) -> None:
        for page in range(len(self._links) + 1, count + 1):
            link = self._create_placeholder(str(page))
            self._links.append(link)
            if self._on_link_create is not None:
                self._on_link_create(link)

    def _create_placeholder(self, label: str) -> Visible:
        link = self._link_factory(label, self.activate)
        if not isinstance(link, Visible):
            raise TypeError(f"link factory returned {type(link).__name__}, not a Visible")
        link.hide()
        return link

    def _hide_all(self) -> None:
        self._collapsed_before.hide()
        self._collapsed_after.hide()
        for link in self._links:
            link.hide()

    def _set_active(self, page: int) -> None:
        self._mark(self._active, False)
        self._mark(page, True)
        self._active = page

    def _mark(self, page: int, active: bool) -> None:
        link = self.link(page)
        if isinstance(link, ActiveMarker):
            link.set_active(active)
