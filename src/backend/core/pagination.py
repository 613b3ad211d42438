"""
Page slicing helpers for in-memory result lists.

Pages are 1-indexed. Slicing never raises for a page past the end (the
slice is simply empty); callers keep the page in range with clamp_page.
"""

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


def total_pages(total: int, per_page: int) -> int:
    """Number of pages needed for ``total`` items, 0 when there are none."""
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")
    return math.ceil(total / per_page)


def clamp_page(page: int, pages: int) -> int:
    """Clamp a page number into [1, max(pages, 1)]."""
    return max(1, min(page, max(pages, 1)))


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of a result list.

    ``start_item``/``end_item`` are the 1-based positions shown as
    "Showing X to Y of Z"; both are 0 for an empty page.
    """

    items: List[T]
    page: int
    per_page: int
    total: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.per_page)

    @property
    def start_item(self) -> int:
        if not self.items:
            return 0
        return (self.page - 1) * self.per_page + 1

    @property
    def end_item(self) -> int:
        if not self.items:
            return 0
        return min(self.page * self.per_page, self.total)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def showing_label(self) -> str:
        return f"Showing {self.start_item} to {self.end_item} of {self.total}"


def paginate(items: Sequence[T], page: int, per_page: int) -> Page[T]:
    """
    Slice ``items`` to ``[(page-1)*per_page, page*per_page)``.

    Raises:
        ValueError: If page or per_page is below 1
    """
    if page < 1:
        raise ValueError(f"page must be 1 or greater, got {page}")
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")

    start = (page - 1) * per_page
    return Page(
        items=list(items[start:start + per_page]),
        page=page,
        per_page=per_page,
        total=len(items),
    )
