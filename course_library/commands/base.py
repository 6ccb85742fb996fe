"""
Base command for encapsulating business operations.

The Command pattern encapsulates business logic as objects, keeping HTTP
endpoints thin and making each operation easy to test in isolation.

Example:
    ```python
    from course_library.commands.base import BaseCommand


    class DeleteCourseCommand(BaseCommand[UUID, None]):
        def __init__(self, repository: CourseRepository):
            self.repository = repository

        async def execute(self, course_id: UUID) -> None:
            course = await self.repository.get_by_id(course_id)
            if course is None:
                raise NotFoundError(f"Course with ID {course_id} not found")
            await self.repository.delete(course)


    # Usage in HTTP handler
    @router.delete("/courses/{course_id}")
    @handle_http_errors
    async def delete_course(course_id: UUID, repo: CourseRepoDep) -> None:
        await DeleteCourseCommand(repo).execute(course_id)
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands encapsulate business logic and depend on repositories for
    data access.

    Type Parameters:
        TInput: Input data type (usually a Pydantic model).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            AppException: For business rule violations (not found,
                invalid sort or shaping fields, ...).
        """
        pass
