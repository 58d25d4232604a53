from .counts import CountProbe
from .cursor import CursorListFetcher
from .paged import PagedListFetcher, fold_outcomes, page_count

__all__ = [
    "CountProbe",
    "CursorListFetcher",
    "PagedListFetcher",
    "fold_outcomes",
    "page_count",
]
