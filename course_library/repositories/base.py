"""
Base repository shared by the author and course repositories.

Repositories only stage and flush changes. Committing is left to the
request-scoped session (see course_library.storage.db.get_session), so
everything a request changes is saved or discarded together.

Example:
    ```python
    class CourseRepository(BaseRepository[Course]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Course)

        async def get_by_title(self, title: str) -> Course | None:
            stmt = select(Course).where(Course.title == title)
            return (await self.session.exec(stmt)).first()
    ```
"""

from typing import Any, Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Primary key lookup, existence checks and staged writes for one model.

    Attributes:
        session: Session of the current request.
        model: The SQLModel table class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: UUID) -> T | None:
        """Return the entity with this primary key, or None."""
        return await self.session.get(self.model, id)

    async def exists(self, **filters: Any) -> bool:
        """
        Check whether any row matches all of the given column values.

        Args:
            **filters: Column name and value pairs, e.g. `id=author_id`.

        Returns:
            True if at least one row matches.
        """
        stmt = select(self.model)
        for column, value in filters.items():
            stmt = stmt.where(getattr(self.model, column) == value)
        try:
            result = await self.session.exec(stmt.limit(1))
        except SQLAlchemyError as e:
            logger.error(f"Error looking up {self.model.__name__}: {e}")
            raise
        return result.first() is not None

    async def _flush(self, action: str) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error {action} {self.model.__name__}: {e}")
            raise

    async def create(self, entity: T) -> T:
        """
        Stage a new entity and flush it so constraint errors surface now.

        Raises:
            SQLAlchemyError: If the flush fails. The request session
                rolls back.
        """
        self.session.add(entity)
        await self._flush("creating")
        return entity

    async def update(self, entity: T) -> T:
        """Flush changes made to an entity loaded by this session."""
        self.session.add(entity)
        await self._flush("updating")
        return entity

    async def delete(self, entity: T) -> None:
        """Delete an entity. Cascades are left to the database."""
        await self.session.delete(entity)
        await self._flush("deleting")
