"""
Mock factory functions for repository testing.

Provides pre-configured repository mocks with common method stubs.
"""

from unittest.mock import AsyncMock

from course_library.repositories.author_repository import AuthorRepository
from course_library.repositories.course_repository import CourseRepository


def create_mock_author_repository():
    """
    Creates a mock AuthorRepository with common methods.

    Returns:
        AsyncMock: Mocked AuthorRepository instance
    """
    repo_mock = AsyncMock(spec=AuthorRepository)
    repo_mock.get_by_id = AsyncMock(return_value=None)
    repo_mock.get_by_ids = AsyncMock(return_value=[])
    repo_mock.get_authors = AsyncMock()
    repo_mock.author_exists = AsyncMock(return_value=True)
    repo_mock.add_author = AsyncMock(side_effect=lambda author: author)
    repo_mock.delete = AsyncMock()
    return repo_mock


def create_mock_course_repository():
    """
    Creates a mock CourseRepository with common methods.

    Returns:
        AsyncMock: Mocked CourseRepository instance
    """
    repo_mock = AsyncMock(spec=CourseRepository)
    repo_mock.get_courses = AsyncMock(return_value=[])
    repo_mock.get_course = AsyncMock(return_value=None)
    repo_mock.add_course = AsyncMock(side_effect=lambda author_id, course: course)
    repo_mock.update = AsyncMock(side_effect=lambda course: course)
    repo_mock.delete = AsyncMock()
    return repo_mock
