"""
Commands for Course business operations.

Every course operation is scoped to an author: the author must exist,
otherwise the command raises NotFoundError before touching the course.
PUT and PATCH upsert, creating the course under the given id when it does
not exist yet.
"""

from dataclasses import dataclass
from uuid import UUID

from pydantic import BaseModel

from course_library.commands.base import BaseCommand
from course_library.exceptions import NotFoundError
from course_library.logging import logger
from course_library.repositories.author_repository import AuthorRepository
from course_library.repositories.course_repository import CourseRepository
from course_library.schemas.course import (
    CourseDto,
    CourseForCreation,
    CourseForPatch,
    CourseForUpdate,
)

# ============================================================================
# Input/Output Models
# ============================================================================


class CourseLookupInput(BaseModel):  # type: ignore[misc]
    author_id: UUID
    course_id: UUID


class CreateCourseInput(BaseModel):  # type: ignore[misc]
    author_id: UUID
    course: CourseForCreation


class UpdateCourseInput(CourseLookupInput):
    course: CourseForUpdate


class PatchCourseInput(CourseLookupInput):
    patch: CourseForPatch


@dataclass
class UpsertResult:
    """Outcome of a PUT or PATCH: the course and whether it was created."""

    course: CourseDto
    created: bool


async def ensure_author_exists(
    author_repository: AuthorRepository, author_id: UUID
) -> None:
    """
    Raise NotFoundError unless the author exists.

    Args:
        author_repository: Repository used for the lookup.
        author_id: Author id from the route.

    Raises:
        NotFoundError: If the author does not exist.
    """
    if not await author_repository.author_exists(author_id):
        raise NotFoundError(f"Author with ID {author_id} not found")


# ============================================================================
# Commands
# ============================================================================


class CourseCommand:
    """Shared constructor for commands that need both repositories."""

    def __init__(
        self,
        author_repository: AuthorRepository,
        course_repository: CourseRepository,
    ):
        self.author_repository = author_repository
        self.course_repository = course_repository


class GetCoursesForAuthorCommand(
    CourseCommand, BaseCommand[UUID, list[CourseDto]]
):
    """Command to list all courses of an author."""

    async def execute(self, author_id: UUID) -> list[CourseDto]:
        """
        Execute command to list an author's courses.

        Args:
            author_id: Owning author id.

        Returns:
            Courses ordered by title, possibly empty.

        Raises:
            NotFoundError: If the author does not exist.
        """
        await ensure_author_exists(self.author_repository, author_id)
        courses = await self.course_repository.get_courses(author_id)
        return [CourseDto.from_entity(course) for course in courses]


class GetCourseForAuthorCommand(
    CourseCommand, BaseCommand[CourseLookupInput, CourseDto]
):
    """Command to get one course of an author."""

    async def execute(self, input_data: CourseLookupInput) -> CourseDto:
        """
        Execute command to get a course.

        Raises:
            NotFoundError: If the author or the course does not exist.
        """
        await ensure_author_exists(self.author_repository, input_data.author_id)
        course = await self.course_repository.get_course(
            input_data.author_id, input_data.course_id
        )
        if course is None:
            raise NotFoundError(
                f"Course with ID {input_data.course_id} not found"
            )
        return CourseDto.from_entity(course)


class CreateCourseForAuthorCommand(
    CourseCommand, BaseCommand[CreateCourseInput, CourseDto]
):
    """Command to add a new course to an author."""

    async def execute(self, input_data: CreateCourseInput) -> CourseDto:
        """
        Execute command to create a course.

        Args:
            input_data: Author id and validated course body.

        Returns:
            The created course.

        Raises:
            NotFoundError: If the author does not exist.
        """
        await ensure_author_exists(self.author_repository, input_data.author_id)
        course = await self.course_repository.add_course(
            input_data.author_id, input_data.course.to_entity()
        )
        return CourseDto.from_entity(course)


class UpdateCourseForAuthorCommand(
    CourseCommand, BaseCommand[UpdateCourseInput, UpsertResult]
):
    """
    Command to fully replace a course.

    When the course does not exist it is created under the id from the
    route and the result is flagged as created.
    """

    async def execute(self, input_data: UpdateCourseInput) -> UpsertResult:
        """
        Execute command to replace or create a course.

        Args:
            input_data: Author id, course id and the full course body.

        Returns:
            UpsertResult with created=True when the course was new.

        Raises:
            NotFoundError: If the author does not exist.
        """
        await ensure_author_exists(self.author_repository, input_data.author_id)
        course = await self.course_repository.get_course(
            input_data.author_id, input_data.course_id
        )

        if course is None:
            new_course = input_data.course.to_entity()
            new_course.id = input_data.course_id
            created = await self.course_repository.add_course(
                input_data.author_id, new_course
            )
            logger.info(f"Course {input_data.course_id} created by upsert")
            return UpsertResult(course=CourseDto.from_entity(created), created=True)

        input_data.course.apply_to(course)
        updated = await self.course_repository.update(course)
        return UpsertResult(course=CourseDto.from_entity(updated), created=False)


class PatchCourseForAuthorCommand(
    CourseCommand, BaseCommand[PatchCourseInput, UpsertResult]
):
    """
    Command to partially update a course.

    The patch is merged into the course's current state, or into an empty
    state when the course does not exist, and the result must pass the
    same rules as a full replacement.
    """

    async def execute(self, input_data: PatchCourseInput) -> UpsertResult:
        """
        Execute command to patch or create a course.

        Args:
            input_data: Author id, course id and the merge patch.

        Returns:
            UpsertResult with created=True when the course was new.

        Raises:
            NotFoundError: If the author does not exist.
            pydantic.ValidationError: If the patched course is invalid.
        """
        await ensure_author_exists(self.author_repository, input_data.author_id)
        course = await self.course_repository.get_course(
            input_data.author_id, input_data.course_id
        )

        if course is None:
            patched = input_data.patch.merge_into(None)
            new_course = patched.to_entity()
            new_course.id = input_data.course_id
            created = await self.course_repository.add_course(
                input_data.author_id, new_course
            )
            logger.info(f"Course {input_data.course_id} created by patch")
            return UpsertResult(course=CourseDto.from_entity(created), created=True)

        patched = input_data.patch.merge_into(CourseForUpdate.from_entity(course))
        patched.apply_to(course)
        updated = await self.course_repository.update(course)
        return UpsertResult(course=CourseDto.from_entity(updated), created=False)


class DeleteCourseForAuthorCommand(
    CourseCommand, BaseCommand[CourseLookupInput, None]
):
    """Command to delete one course of an author."""

    async def execute(self, input_data: CourseLookupInput) -> None:
        """
        Execute command to delete a course.

        Raises:
            NotFoundError: If the author or the course does not exist.
        """
        await ensure_author_exists(self.author_repository, input_data.author_id)
        course = await self.course_repository.get_course(
            input_data.author_id, input_data.course_id
        )
        if course is None:
            raise NotFoundError(
                f"Course with ID {input_data.course_id} not found"
            )
        await self.course_repository.delete(course)
