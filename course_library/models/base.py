"""
Base model for all database tables with async relationship support.

This module provides the BaseModel class that all SQLModel table models
should inherit from. It includes SQLAlchemy's AsyncAttrs mixin so that
lazy-loaded relationships can be reached in async code through the
`awaitable_attrs` accessor instead of raising MissingGreenlet.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Usage:
        Preferred approach (eager loading):
            stmt = select(Author).options(selectinload(Author.courses))
            author = (await session.exec(stmt)).one()
            courses = author.courses  # Already loaded, no await needed

        Lazy loading when needed:
            author = await session.get(Author, author_id)
            courses = await author.awaitable_attrs.courses
    """

    pass
