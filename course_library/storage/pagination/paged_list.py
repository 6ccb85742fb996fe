"""
Offset-based paged list (page 1, 2, 3...).

Builds one page of a filtered and sorted query with two statements: a
COUNT over the whole filtered set and an OFFSET/LIMIT query for the page.
Nothing is locked between them, so concurrent writes can make the count and
the page disagree.
"""

import math
from typing import Any, Generic, Iterator, Sequence, TypeVar

from sqlalchemy import Select
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.constants import MAX_PAGE_SIZE, MIN_PAGE_SIZE
from course_library.logging import logger

T = TypeVar("T")


def clamp_page_size(page_size: int, max_page_size: int = MAX_PAGE_SIZE) -> int:
    """
    Clamp a requested page size into [MIN_PAGE_SIZE, max_page_size].

    Args:
        page_size: Page size requested by the client.
        max_page_size: Upper limit.

    Returns:
        Page size that will actually be used.
    """
    return max(MIN_PAGE_SIZE, min(page_size, max_page_size))


class PagedList(Generic[T]):
    """
    One page of items plus its position within the whole result set.

    Pages past the end are legal and hold no items.

    Attributes:
        items: Items on this page.
        total_count: Number of items across all pages (after filtering).
        page_size: Effective page size (after clamping).
        current_page: Page number, 1-indexed.
        total_pages: ceil(total_count / page_size), 0 when there are no items.
    """

    def __init__(
        self,
        items: Sequence[T],
        total_count: int,
        current_page: int,
        page_size: int,
    ):
        self.items: list[T] = list(items)
        self.total_count = total_count
        self.current_page = current_page
        self.page_size = page_size
        self.total_pages = (
            math.ceil(total_count / page_size) if total_count > 0 else 0
        )

    @property
    def has_previous(self) -> bool:
        return 1 < self.current_page <= self.total_pages

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return (
            f"PagedList(page={self.current_page}/{self.total_pages}, "
            f"size={self.page_size}, total={self.total_count}, "
            f"items={len(self.items)})"
        )

    @classmethod
    async def create(
        cls,
        session: AsyncSession,
        query: Select[Any],
        page_number: int,
        page_size: int,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "PagedList[Any]":
        """
        Count the filtered query and fetch one page of it.

        Args:
            session: SQLModel async session for database queries.
            query: Select query with filters and ordering already applied.
            page_number: Page to fetch (1-indexed).
            page_size: Requested page size, clamped to max_page_size.
            max_page_size: Upper limit for the page size.

        Returns:
            PagedList with the page items and pagination metadata.

        Raises:
            SQLAlchemyError: If a database query fails.
        """
        page_size = clamp_page_size(page_size, max_page_size)

        # Count the filtered set without its ORDER BY
        count_query = select(func.count()).select_from(
            query.order_by(None).subquery()
        )
        total_result = await session.exec(count_query)
        total_count = total_result.one()

        # Past the last row every offset yields the same empty page
        offset = min((page_number - 1) * page_size, total_count)
        data_query = query.offset(offset).limit(page_size)
        results = await session.exec(data_query)
        items = results.all()

        logger.debug(
            f"Fetched page {page_number} ({len(items)} items) "
            f"of {total_count} total"
        )

        return cls(items, total_count, page_number, page_size)
