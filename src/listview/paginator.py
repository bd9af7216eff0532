# This file slices filtered records into pages and computes pagination metadata.
# It exists so every list screen reports totals and page counts with the same arithmetic.
# Requests past the last page echo the requested page with an empty slice instead of raising.
# The page window helper drives numbered pager controls with gap markers.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Generic, TypeVar

T = TypeVar("T")

PAGE_GAP: Final[str] = "..."
_FULL_WINDOW_MAX_PAGES: Final[int] = 7


@dataclass(frozen=True)
class PageResult(Generic[T]):
    items: tuple[T, ...]
    page: int
    limit: int
    total: int
    total_pages: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def start_item(self) -> int:
        """1-based index of the first visible record, or 0 when the page is empty."""

        if not self.items:
            return 0
        return self.offset + 1

    @property
    def end_item(self) -> int:
        if not self.items:
            return 0
        return self.offset + len(self.items)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def compute_total_pages(*, total_count: int, page_size: int) -> int:
    """Compute the page count; an empty list still has one (empty) page."""

    if total_count <= 0:
        return 1
    return ((total_count - 1) // max(1, page_size)) + 1


def paginate(records: Sequence[T], *, page: int, limit: int) -> PageResult[T]:
    limit = max(1, limit)
    page = max(1, page)
    total = len(records)
    start = min((page - 1) * limit, total)
    end = min(page * limit, total)
    return PageResult(
        items=tuple(records[start:end]),
        page=page,
        limit=limit,
        total=total,
        total_pages=compute_total_pages(total_count=total, page_size=limit),
    )


def page_window(*, current_page: int, total_pages: int, delta: int = 1) -> list[int | str]:
    """Return page numbers for a pager, with PAGE_GAP where pages are skipped."""

    if total_pages <= _FULL_WINDOW_MAX_PAGES:
        return list(range(1, max(1, total_pages) + 1))

    pages: list[int | str] = [1]
    if current_page > delta + 2:
        pages.append(PAGE_GAP)

    low = max(2, current_page - delta)
    high = min(total_pages - 1, current_page + delta)
    pages.extend(range(low, high + 1))

    if current_page < total_pages - delta - 1:
        pages.append(PAGE_GAP)
    pages.append(total_pages)
    return pages
