"""
Factories and well-known ids for author and course test data.
"""

from datetime import date
from uuid import UUID, uuid4

from course_library.models.author import Author
from course_library.models.course import Course

# Ids of sample authors loaded by seed_authors()
BERRY_ID = UUID("d28888e9-2ba9-473a-a40f-e38cb54f9b35")
NANCY_ID = UUID("da2fd609-d754-4feb-8acd-c4f9ff13ba96")
ARNOLD_ID = UUID("102b566b-ba1f-404c-b2df-e2cde39ade09")
SAMPLE_AUTHOR_COUNT = 7


def create_author_fixture(
    first_name: str = "Test",
    last_name: str = "Author",
    date_of_birth: date = date(1970, 1, 1),
    main_category: str = "Testing",
    id: UUID | None = None,
) -> Author:
    """
    Factory function to create Author instances for testing.

    Returns:
        Author: Unsaved author instance with an id
    """
    return Author(
        id=id or uuid4(),
        first_name=first_name,
        last_name=last_name,
        date_of_birth=date_of_birth,
        main_category=main_category,
    )


def create_course_fixture(
    author_id: UUID,
    title: str = "Test Course",
    description: str | None = "A course for testing",
    id: UUID | None = None,
) -> Course:
    """
    Factory function to create Course instances for testing.

    Returns:
        Course: Unsaved course instance with an id
    """
    return Course(
        id=id or uuid4(),
        title=title,
        description=description,
        author_id=author_id,
    )
