from datetime import date
from uuid import UUID

from pydantic import Field

from course_library.models.author import Author
from course_library.schemas.base import ApiModel
from course_library.schemas.course import CourseForCreation


def calculate_age(date_of_birth: date, today: date | None = None) -> int:
    """
    Whole years between a date of birth and today.

    Args:
        date_of_birth: The date the person was born.
        today: Reference date, defaults to the current date.

    Returns:
        Age in completed years.
    """
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


class AuthorDto(ApiModel):
    """
    Public representation of an author.

    Field declaration order is the order used when a client asks for all
    fields of an author.
    """

    id: UUID
    name: str
    age: int
    main_category: str

    @classmethod
    def from_entity(cls, author: Author) -> "AuthorDto":
        """
        Build the public representation of a stored author.

        Args:
            author: Author entity loaded from the database.

        Returns:
            AuthorDto with full name and current age.
        """
        return cls(
            id=author.id,
            name=f"{author.first_name} {author.last_name}",
            age=calculate_age(author.date_of_birth),
            main_category=author.main_category,
        )


class AuthorForCreation(ApiModel):
    """Request body for creating an author, optionally with courses."""

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    main_category: str = Field(..., min_length=1, max_length=50)
    courses: list[CourseForCreation] = Field(default_factory=list)

    def to_entity(self) -> Author:
        """
        Build an unsaved Author entity, including its courses.

        Ids are left empty, AuthorRepository.add_author() assigns them.
        """
        return Author(
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            main_category=self.main_category,
            courses=[course.to_entity() for course in self.courses],
        )
