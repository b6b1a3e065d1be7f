"""Snapshots of paging state handed back to callers."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tablepager.config import COLLAPSED_LABEL


class PageRange(BaseModel):
    """Half-open element-index range [start, stop) of an open page."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, description="First element index on the page")
    stop: int = Field(..., ge=0, description="One past the last element index")

    @model_validator(mode="after")
    def check_order(self) -> "PageRange":
        if self.stop < self.start:
            raise ValueError(f"stop ({self.stop}) must not precede start ({self.start})")
        return self

    @property
    def size(self) -> int:
        return self.stop - self.start

    def indices(self) -> range:
        return range(self.start, self.stop)


class PageIndexLayout(BaseModel):
    """
    What the navigation index currently shows.

    `pages` lists every page placeholder that is visible, ascending.
    The collapsed markers are anchored next to the first and last page:
    the "before" marker directly after page 1, the "after" marker
    directly before the last page.
    """

    model_config = ConfigDict(frozen=True)

    active_page: int = Field(default=0, ge=0)
    total_pages: int = Field(default=0, ge=0)
    pages: tuple[int, ...] = Field(default_factory=tuple)
    collapsed_before: bool = False
    collapsed_after: bool = False

    def tokens(self) -> list[int | str]:
        """Render order of visible placeholders, with markers as COLLAPSED_LABEL."""
        tokens: list[int | str] = []
        for page in self.pages:
            if self.collapsed_after and page == self.total_pages:
                tokens.append(COLLAPSED_LABEL)
            tokens.append(page)
            if self.collapsed_before and page == 1:
                tokens.append(COLLAPSED_LABEL)
        return tokens
