"""Paginated listing result shared by every entity service."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of items plus the total across all pages.

    items holds at most page_size entries:
    len(items) == min(page_size, max(0, total_count - (page - 1) * page_size)).
    """

    items: list[T]
    page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        """Number of non-empty pages (0 when the collection is empty)."""
        return -(-self.total_count // self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
