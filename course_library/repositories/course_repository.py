"""
Repository for Course entity, always scoped to the owning author.
"""

from uuid import UUID, uuid4

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.models.course import Course
from course_library.repositories.base import BaseRepository


class CourseRepository(BaseRepository[Course]):
    """
    Repository for Course entity operations.

    Lookups take the author id as well as the course id, so a course is
    never returned through the wrong author.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Course)

    async def get_courses(self, author_id: UUID) -> list[Course]:
        """
        Get all courses of an author ordered by title.

        Args:
            author_id: Owning author id.

        Returns:
            The author's courses, possibly empty.
        """
        stmt = (
            select(Course)
            .where(Course.author_id == author_id)
            .order_by(col(Course.title))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_course(self, author_id: UUID, course_id: UUID) -> Course | None:
        """
        Get one course of an author.

        Args:
            author_id: Owning author id.
            course_id: Course id.

        Returns:
            The course, or None if the author has no such course.
        """
        stmt = select(Course).where(
            Course.author_id == author_id, Course.id == course_id
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def add_course(self, author_id: UUID, course: Course) -> Course:
        """
        Attach a new course to an author and stage it.

        The author id is always taken from the argument. A course that
        already carries an id (an upsert) keeps it.

        Args:
            author_id: Owning author id.
            course: Unsaved course.

        Returns:
            The staged course.
        """
        course.author_id = author_id
        if course.id is None:
            course.id = uuid4()
        return await self.create(course)
