from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from sqlmodel import Field, Relationship

from course_library.models.base import BaseModel

if TYPE_CHECKING:
    from course_library.models.course import Course


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    The primary key is not generated by the database: AuthorRepository
    assigns it when the author is added.

    Attributes:
        id: Primary key identifier for the author
        first_name: Author's first name
        last_name: Author's last name
        date_of_birth: Date the author was born, used to derive the age
        main_category: Main subject the author teaches
        courses: Courses owned by the author, deleted together with it
    """

    __table_args__ = {"extend_existing": True}

    id: UUID | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    date_of_birth: date
    main_category: str = Field(max_length=50)

    courses: list["Course"] = Relationship(
        back_populates="author",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
