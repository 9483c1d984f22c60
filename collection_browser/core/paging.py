# collection_browser/core/paging.py

"""Derived pagination values for the table and the paginator."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from collection_browser.models.pagination import PaginationMeta

PAGE_SIZE_OPTIONS = (6, 12, 24, 48, 100)
DEFAULT_PAGE_SIZE = 12

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class NavigableTargets:
    """Pages reachable from the nav buttons; None where a button is disabled."""

    first: Optional[int]
    prev: Optional[int]
    next: Optional[int]
    last: Optional[int]


@dataclass(frozen=True, slots=True)
class PageView:
    current_page: int
    total_pages: int
    total_count: int
    page_size: int

    range_start: Optional[int]   # None when there are no records
    range_end: Optional[int]
    is_first: bool
    is_last: bool
    targets: NavigableTargets

    @property
    def has_records(self) -> bool:
        return self.total_count > 0


def derive(meta: PaginationMeta) -> PageView:
    """Compute record range, bounds and nav targets from paging meta-data."""
    current = meta.current_page

    if meta.total_count == 0:
        range_start: Optional[int] = None
        range_end: Optional[int] = None
    else:
        range_start = (current - 1) * meta.page_size + 1
        range_end = min(current * meta.page_size, meta.total_count)

    is_first = current <= 1
    is_last = current >= meta.total_pages or meta.total_pages <= 1

    targets = NavigableTargets(
        first=None if is_first else 1,
        prev=None if is_first else current - 1,
        next=None if is_last else current + 1,
        last=None if is_last else meta.total_pages,
    )

    return PageView(
        current_page=current,
        total_pages=meta.total_pages,
        total_count=meta.total_count,
        page_size=meta.page_size,
        range_start=range_start,
        range_end=range_end,
        is_first=is_first,
        is_last=is_last,
        targets=targets,
    )


def can_jump(meta: PaginationMeta, target: int) -> bool:
    """A jump is accepted only to an existing page other than the current one."""
    return 1 <= target <= meta.total_pages and target != meta.current_page


def parse_jump_input(text: str) -> Optional[int]:
    """Keep the digits of a go-to box entry; None if nothing usable is left."""
    digits = _NON_DIGITS.sub("", text or "")
    if not digits:
        return None
    return int(digits)
