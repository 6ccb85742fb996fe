from uuid import UUID

from sqlmodel import Field, Relationship

from course_library.models.author import Author
from course_library.models.base import BaseModel


class Course(BaseModel, table=True):
    """
    SQLModel representing a course owned by exactly one author.

    Attributes:
        id: Primary key identifier for the course
        title: Course title
        description: Optional longer description
        author_id: Foreign key of the owning author
        author: The owning author
    """

    __table_args__ = {"extend_existing": True}

    id: UUID | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=1500)
    author_id: UUID = Field(foreign_key="author.id", ondelete="CASCADE")

    author: Author | None = Relationship(back_populates="courses")
