"""Page arithmetic shared by the entity services."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from sweem.application.dtos.pagination import PaginatedResult
from sweem.domain.exceptions import ValidationException

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

T = TypeVar("T")


def page_offset(page: int, page_size: int) -> int:
    """Return the number of rows before page (1-based). Raises on page/page_size < 1."""
    if page < 1:
        raise ValidationException("page must be >= 1", field="page")
    if page_size < 1:
        raise ValidationException("page_size must be >= 1", field="page_size")
    return (page - 1) * page_size


async def paginate(
    count: Callable[[], Awaitable[int]],
    fetch: Callable[[int, int], Awaitable[list[T]]],
    page: int,
    page_size: int,
) -> PaginatedResult[T]:
    """Build a page from a COUNT query and a bounded range fetch (skip, limit)."""
    skip = page_offset(page, page_size)
    total_count = await count()
    items = await fetch(skip, page_size) if skip < total_count else []
    return PaginatedResult(
        items=items, page=page, page_size=page_size, total_count=total_count
    )
