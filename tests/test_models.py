"""
Tests for paging snapshots and the failure taxonomy.
"""

import pytest
from pydantic import ValidationError

from tablepager.config import COLLAPSED_LABEL
from tablepager.models.failure import (
    ConstructionError,
    ConstructionFailureKind,
    InvalidPageSizeError,
    InvalidRadiusError,
    RejectionReason,
)
from tablepager.models.page import PageIndexLayout, PageRange


class TestPageRange:
    def test_size_and_indices(self) -> None:
        page_range = PageRange(start=3, stop=6)

        assert page_range.size == 3
        assert list(page_range.indices()) == [3, 4, 5]

    def test_empty_range(self) -> None:
        assert PageRange(start=7, stop=7).size == 0

    def test_stop_before_start_refused(self) -> None:
        with pytest.raises(ValidationError):
            PageRange(start=5, stop=2)

    def test_negative_refused(self) -> None:
        with pytest.raises(ValidationError):
            PageRange(start=-1, stop=2)

    def test_frozen(self) -> None:
        page_range = PageRange(start=0, stop=1)

        with pytest.raises(ValidationError):
            page_range.start = 1  # type: ignore[misc]


class TestPageIndexLayout:
    def test_markers_anchor_to_first_and_last_page(self) -> None:
        layout = PageIndexLayout(
            active_page=10,
            total_pages=20,
            pages=(1, 8, 9, 10, 11, 12, 20),
            collapsed_before=True,
            collapsed_after=True,
        )

        assert layout.tokens() == [1, COLLAPSED_LABEL, 8, 9, 10, 11, 12, COLLAPSED_LABEL, 20]

    def test_empty(self) -> None:
        assert PageIndexLayout().tokens() == []


class TestFailures:
    def test_page_size_error(self) -> None:
        error = InvalidPageSizeError(0)

        assert isinstance(error, ConstructionError)
        assert isinstance(error, ValueError)
        assert error.kind == ConstructionFailureKind.INVALID_PAGE_SIZE
        assert error.page_size == 0
        assert "0" in str(error)

    def test_radius_error(self) -> None:
        error = InvalidRadiusError(-2)

        assert error.kind == ConstructionFailureKind.INVALID_RADIUS
        assert error.detail

    def test_rejection_reasons_are_strings(self) -> None:
        assert RejectionReason.SAME_PAGE == "same_page"
        assert RejectionReason("invalid_link") is RejectionReason.INVALID_LINK
