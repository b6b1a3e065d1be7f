from tablepager.paging.index_view import PageIndexView, PageLink, parse_page
from tablepager.paging.window import PageWindow, count_pages, is_positive_int

__all__ = [
    "PageIndexView",
    "PageLink",
    "PageWindow",
    "count_pages",
    "is_positive_int",
    "parse_page",
]
