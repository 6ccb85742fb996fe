from typing import Any
from uuid import UUID

from pydantic import Field, model_validator

from course_library.models.course import Course
from course_library.schemas.base import ApiModel

TITLE_EQUALS_DESCRIPTION_MSG = (
    "The provided description should be different from the title."
)


class CourseDto(ApiModel):
    """Public representation of a course."""

    id: UUID
    title: str
    description: str | None = None
    author_id: UUID

    @classmethod
    def from_entity(cls, course: Course) -> "CourseDto":
        return cls(
            id=course.id,
            title=course.title,
            description=course.description,
            author_id=course.author_id,
        )


class CourseForManipulation(ApiModel):
    """
    Shared fields and rules for creating and replacing a course.

    A course title must differ from its description.
    """

    title: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1500)

    @model_validator(mode="after")
    def title_must_differ_from_description(self) -> "CourseForManipulation":
        if self.title == self.description:
            raise ValueError(TITLE_EQUALS_DESCRIPTION_MSG)
        return self

    def to_entity(self) -> Course:
        """Build an unsaved Course entity, author and id are set on add."""
        return Course(title=self.title, description=self.description)

    def apply_to(self, course: Course) -> Course:
        """
        Copy every field of this schema onto an existing course.

        Args:
            course: Stored course to overwrite.

        Returns:
            The same course instance, modified in place.
        """
        course.title = self.title
        course.description = self.description
        return course


class CourseForCreation(CourseForManipulation):
    """Request body for creating a course."""


class CourseForUpdate(CourseForManipulation):
    """Request body for replacing a course, description is required."""

    description: str = Field(..., max_length=1500)

    @classmethod
    def from_entity(cls, course: Course) -> "CourseForUpdate":
        """
        Current state of a stored course, used as the base of a patch.

        Validation is skipped: a stored course may predate the update rules.
        """
        return cls.model_construct(
            title=course.title, description=course.description or ""
        )


class CourseForPatch(ApiModel):
    """
    Merge patch for a course.

    Only the fields present in the request body are applied. The merged
    result is validated as a CourseForUpdate.
    """

    title: str | None = None
    description: str | None = None

    def merge_into(self, current: CourseForUpdate | None) -> CourseForUpdate:
        """
        Apply this patch on top of a course's current state.

        Args:
            current: Current state, or None when the course does not exist
                yet and the patch creates it.

        Returns:
            Validated CourseForUpdate holding the patched state.

        Raises:
            pydantic.ValidationError: If the patched state breaks the
                update rules.
        """
        merged: dict[str, Any] = (
            current.model_dump() if current is not None else {}
        )
        merged.update(self.model_dump(exclude_unset=True))
        return CourseForUpdate.model_validate(merged)
