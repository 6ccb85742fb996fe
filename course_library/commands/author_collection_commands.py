"""
Commands for fetching and creating authors in bulk.

Author collections are addressed by a comma-separated list of ids wrapped
in parentheses, e.g. `/authorcollections/(id1,id2)`.
"""

from uuid import UUID

from course_library.commands.base import BaseCommand
from course_library.exceptions import NotFoundError, ValidationError
from course_library.repositories.author_repository import AuthorRepository
from course_library.schemas.author import AuthorDto, AuthorForCreation


def parse_author_ids(raw: str) -> list[UUID]:
    """
    Parse a comma-separated list of author ids.

    Surrounding parentheses and whitespace are ignored, so both
    `(a,b)` and `a, b` are accepted. Duplicate ids are kept once, in
    order of first appearance.

    Args:
        raw: Raw id list from the URL.

    Returns:
        The parsed ids.

    Raises:
        ValidationError: If the list is empty or an id is not a UUID.
    """
    text = raw.strip()
    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1]

    ids: list[UUID] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            author_id = UUID(part)
        except ValueError:
            raise ValidationError(f"'{part}' is not a valid author id")
        if author_id not in ids:
            ids.append(author_id)

    if not ids:
        raise ValidationError("At least one author id is required")
    return ids


class GetAuthorCollectionCommand(BaseCommand[list[UUID], list[AuthorDto]]):
    """
    Command to fetch several authors at once.

    The collection is all or nothing: if any id is missing the whole
    request is treated as not found.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: list[UUID]) -> list[AuthorDto]:
        """
        Execute command to fetch an author collection.

        Args:
            input_data: Distinct author ids.

        Returns:
            Authors ordered by first name, then last name.

        Raises:
            NotFoundError: If any id has no author.
        """
        authors = await self.repository.get_by_ids(input_data)
        if len(authors) != len(input_data):
            found = {author.id for author in authors}
            missing = [str(i) for i in input_data if i not in found]
            raise NotFoundError(f"Authors not found: {', '.join(missing)}")

        return [AuthorDto.from_entity(author) for author in authors]


class CreateAuthorCollectionCommand(
    BaseCommand[list[AuthorForCreation], list[AuthorDto]]
):
    """
    Command to create several authors in one request.

    Authors are only staged here. They are committed together by the
    request-scoped session, so a failure leaves none of them stored.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(
        self, input_data: list[AuthorForCreation]
    ) -> list[AuthorDto]:
        """
        Execute command to create an author collection.

        Args:
            input_data: Authors to create, each optionally with courses.

        Returns:
            The created authors in request order.

        Raises:
            ValidationError: If the collection is empty.
        """
        if not input_data:
            raise ValidationError("At least one author is required")

        created = []
        for author_data in input_data:
            author = await self.repository.add_author(author_data.to_entity())
            created.append(AuthorDto.from_entity(author))
        return created
