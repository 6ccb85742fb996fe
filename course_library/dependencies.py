"""
Dependency injection configuration for FastAPI.

This module provides dependency injection setup for repositories, the
property mapping service and database sessions. Using FastAPI's Depends()
system with @lru_cache provides singleton-like behavior while maintaining
testability.

Example:
    ```python
    from fastapi import APIRouter
    from course_library.dependencies import AuthorRepoDep

    router = APIRouter()

    @router.get("/authors/{author_id}")
    async def get_author(author_id: UUID, repo: AuthorRepoDep) -> AuthorDto:
        return AuthorDto.from_entity(await repo.get_by_id(author_id))
    ```
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.repositories.author_repository import AuthorRepository
from course_library.repositories.course_repository import CourseRepository
from course_library.storage.db import get_session
from course_library.storage.property_mapping import (
    PropertyMappingService,
    build_property_mapping_service,
)

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Service Dependencies
# ============================================================================


@lru_cache
def get_property_mapping_service() -> PropertyMappingService:
    """
    Get cached property mapping service instance.

    The mapping table is built once per process. Can be overridden in tests
    using app.dependency_overrides.

    Returns:
        Cached PropertyMappingService instance.
    """
    return build_property_mapping_service()


PropertyMappingDep = Annotated[
    PropertyMappingService, Depends(get_property_mapping_service)
]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(
    session: SessionDep, property_mapping_service: PropertyMappingDep
) -> AuthorRepository:
    """
    Get author repository with injected database session.

    Args:
        session: Database session injected by FastAPI.
        property_mapping_service: Sortable fields of public resources.

    Returns:
        AuthorRepository instance with session.
    """
    return AuthorRepository(session, property_mapping_service)


def get_course_repository(session: SessionDep) -> CourseRepository:
    return CourseRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
CourseRepoDep = Annotated[CourseRepository, Depends(get_course_repository)]
