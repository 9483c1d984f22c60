"""Page-of-results containers shared by data sources and the controller."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PaginationMeta:
    """Paging meta-data as reported by the remote collection."""

    current_page: int    # 1-based
    total_pages: int     # may be 0 for an empty collection
    total_count: int     # total items in the whole result set
    page_size: int       # requested items per page

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page}")
        if self.total_pages < 0:
            raise ValueError(f"total_pages must be >= 0, got {self.total_pages}")
        if self.total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {self.total_count}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        # an empty collection still has a page 1
        if self.current_page > max(self.total_pages, 1):
            raise ValueError(
                f"current_page {self.current_page} is past the last page ({self.total_pages})"
            )

    @classmethod
    def from_counts(cls, current_page: int, total_count: int, page_size: int) -> "PaginationMeta":
        """Build meta-data for a locally paginated collection."""
        total_pages = math.ceil(total_count / page_size) if page_size > 0 else 0
        return cls(
            current_page=current_page,
            total_pages=total_pages,
            total_count=total_count,
            page_size=page_size,
        )


@dataclass(frozen=True, slots=True)
class PageResult(Generic[T]):
    """A single page of items plus meta-data."""

    items: Sequence[T]
    pagination: PaginationMeta
