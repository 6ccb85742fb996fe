"""
Repository for Author entity with filtering, searching, sorting and paging.

This repository extends BaseRepository with the author listing pipeline:
category filter, free-text search, sorting through the property mapping
and offset pagination.

Example:
    ```python
    from course_library.repositories.author_repository import AuthorRepository
    from course_library.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session, mapping_service)
        page = await repo.get_authors(
            AuthorsQueryParams(category="Rum", order_by="age desc")
        )
        batch = await repo.get_by_ids([author_id_1, author_id_2])
    ```
"""

from typing import Any, Iterable
from uuid import UUID, uuid4

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.logging import logger
from course_library.models.author import Author
from course_library.repositories.base import BaseRepository
from course_library.schemas.author import AuthorDto
from course_library.schemas.query_params import AuthorsQueryParams
from course_library.storage.pagination import PagedList
from course_library.storage.property_mapping import PropertyMappingService
from course_library.storage.sorting import apply_sort, compile_sort


def apply_author_filters(
    query: Select[Any],
    category: str | None,
    search_query: str | None,
) -> Select[Any]:
    """
    Apply the category filter and the search filter to an author query.

    Both filters are skipped when blank and AND-combined when both are set.

    Args:
        query: Author query to filter.
        category: Exact main category, trimmed before comparing.
        search_query: Substring looked up in main category, first name and
            last name. Case sensitivity follows the database collation.

    Returns:
        The filtered query.
    """
    if category and category.strip():
        query = query.where(Author.main_category == category.strip())

    if search_query and search_query.strip():
        term = search_query.strip()
        query = query.where(
            or_(
                col(Author.main_category).contains(term, autoescape=True),
                col(Author.first_name).contains(term, autoescape=True),
                col(Author.last_name).contains(term, autoescape=True),
            )
        )

    return query


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus the
    paged author listing and batch lookups.
    """

    def __init__(
        self,
        session: AsyncSession,
        property_mapping_service: PropertyMappingService,
    ):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
            property_mapping_service: Sortable fields of public resources.
        """
        super().__init__(session, Author)
        self.property_mapping_service = property_mapping_service

    async def get_authors(
        self, query_params: AuthorsQueryParams
    ) -> PagedList[Author]:
        """
        Get one page of authors, filtered, searched and sorted.

        The orderBy string is compiled before any query runs, so an
        unknown sort field never reaches the database.

        Args:
            query_params: Filtering, searching, sorting and paging options.

        Returns:
            PagedList of authors for the requested page.

        Raises:
            UnknownSortFieldError: If orderBy names an unmapped field.
            ConfigurationError: If no author mapping is registered.
            SQLAlchemyError: If a database query fails.
        """
        mapping = self.property_mapping_service.get_mapping(AuthorDto, Author)
        sort_clauses = compile_sort(query_params.order_by, mapping)

        query = apply_author_filters(
            select(Author), query_params.category, query_params.search_query
        )
        query = apply_sort(query, sort_clauses, Author)

        logger.debug(
            f"Listing authors page {query_params.page_number} "
            f"ordered by {[tuple(c) for c in sort_clauses]}"
        )

        try:
            return await PagedList.create(
                self.session,
                query,
                query_params.page_number,
                query_params.page_size,
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing authors: {e}")
            raise

    async def get_by_ids(self, author_ids: Iterable[UUID]) -> list[Author]:
        """
        Get every author whose id is in a batch.

        Missing ids are skipped; callers compare lengths to detect them.

        Args:
            author_ids: Author ids to look up.

        Returns:
            Matching authors ordered by first name, then last name.
        """
        ids = list(author_ids)
        if not ids:
            return []

        stmt = (
            select(Author)
            .where(col(Author.id).in_(ids))
            .order_by(col(Author.first_name), col(Author.last_name))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def author_exists(self, author_id: UUID) -> bool:
        """
        Check whether an author exists.

        Args:
            author_id: Author id to check.

        Returns:
            True if the author exists.
        """
        return await self.exists(id=author_id)

    async def add_author(self, author: Author) -> Author:
        """
        Assign ids to a new author and its courses, then stage them.

        Ids are generated here rather than by the database. The author is
        not refreshed, so its courses stay loaded.

        Args:
            author: Unsaved author, possibly with courses attached.

        Returns:
            The staged author with ids assigned.
        """
        author.id = uuid4()
        for course in author.courses:
            course.id = uuid4()
            course.author_id = author.id

        return await self.create(author)
