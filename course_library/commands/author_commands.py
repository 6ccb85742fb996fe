"""
Commands for Author business operations.

Example:
    ```python
    from course_library.commands.author_commands import GetAuthorsCommand


    @router.get("/authors")
    async def get_authors(repo: AuthorRepoDep, mappings: PropertyMappingDep):
        command = GetAuthorsCommand(repo, mappings)
        result = await command.execute(AuthorsQueryParams(order_by="age"))
        return result.shaped
    ```
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from course_library.commands.base import BaseCommand
from course_library.exceptions import NotFoundError, UnknownSortFieldError
from course_library.models.author import Author
from course_library.protocols import Repository
from course_library.repositories.author_repository import AuthorRepository
from course_library.schemas.author import AuthorDto, AuthorForCreation
from course_library.schemas.query_params import AuthorsQueryParams
from course_library.storage.pagination import PagedList
from course_library.storage.property_mapping import PropertyMappingService
from course_library.storage.sorting import parse_order_by
from course_library.utils.shaping import get_field_registry

# ============================================================================
# Input/Output Models
# ============================================================================


class GetAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for getting a single author."""

    author_id: UUID
    fields: str | None = Field(
        default=None, description="Comma-separated fields to return"
    )


@dataclass
class AuthorsPage:
    """
    A page of authors in both typed and shaped form.

    `authors` and `shaped` are parallel lists, so callers can build links
    from the author id even when the client did not ask for it.
    """

    page: PagedList[Author]
    authors: list[AuthorDto]
    shaped: list[dict[str, Any]]


@dataclass
class ShapedAuthor:
    author: AuthorDto
    shaped: dict[str, Any]


# ============================================================================
# Commands
# ============================================================================


class GetAuthorsCommand(BaseCommand[AuthorsQueryParams, AuthorsPage]):
    """
    Command to list authors with filtering, searching, sorting, paging and
    data shaping.

    Both the orderBy string and the field list are validated before the
    repository is called.
    """

    def __init__(
        self,
        repository: AuthorRepository,
        property_mapping_service: PropertyMappingService,
    ):
        """
        Initialize command with repository and property mappings.

        Args:
            repository: Author repository for data access.
            property_mapping_service: Sortable fields of public resources.
        """
        self.repository = repository
        self.property_mapping_service = property_mapping_service

    async def execute(self, input_data: AuthorsQueryParams) -> AuthorsPage:
        """
        Execute command to list authors.

        Args:
            input_data: Query options from the client.

        Returns:
            AuthorsPage with the page metadata and shaped authors.

        Raises:
            UnknownSortFieldError: If orderBy names an unmapped field.
            UnknownFieldError: If fields names a field AuthorDto lacks.
            ConfigurationError: If no author mapping is registered.
        """
        if not self.property_mapping_service.valid_mapping_exists(
            input_data.order_by, AuthorDto, Author
        ):
            mapping = self.property_mapping_service.get_mapping(AuthorDto, Author)
            unknown = next(
                name
                for name, _ in parse_order_by(input_data.order_by)
                if name not in mapping
            )
            raise UnknownSortFieldError(unknown)

        registry = get_field_registry(AuthorDto)
        resolved_fields = registry.resolve_fields(input_data.fields)

        page = await self.repository.get_authors(input_data)

        authors = [AuthorDto.from_entity(author) for author in page]
        shaped = [registry.shape(author, resolved_fields) for author in authors]
        return AuthorsPage(page=page, authors=authors, shaped=shaped)


class GetAuthorCommand(BaseCommand[GetAuthorInput, ShapedAuthor]):
    """Command to get a single author, shaped to the requested fields."""

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: GetAuthorInput) -> ShapedAuthor:
        """
        Execute command to get one author.

        Args:
            input_data: Author id and optional field list.

        Returns:
            ShapedAuthor with the typed and shaped author.

        Raises:
            UnknownFieldError: If fields names a field AuthorDto lacks.
            NotFoundError: If the author does not exist.
        """
        registry = get_field_registry(AuthorDto)
        resolved_fields = registry.resolve_fields(input_data.fields)

        author = await self.repository.get_by_id(input_data.author_id)
        if author is None:
            raise NotFoundError(
                f"Author with ID {input_data.author_id} not found"
            )

        dto = AuthorDto.from_entity(author)
        return ShapedAuthor(author=dto, shaped=registry.shape(dto, resolved_fields))


class CreateAuthorCommand(BaseCommand[AuthorForCreation, AuthorDto]):
    """
    Command to create an author together with any nested courses.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: AuthorForCreation) -> AuthorDto:
        """
        Execute command to create an author.

        Args:
            input_data: Author data, optionally with courses.

        Returns:
            The created author.
        """
        author = await self.repository.add_author(input_data.to_entity())
        return AuthorDto.from_entity(author)


class DeleteAuthorCommand(BaseCommand[UUID, None]):
    """
    Command to delete an author and, by cascade, its courses.

    Uses Repository[Author] protocol for flexible dependency injection,
    as it only requires standard get_by_id() and delete() methods.
    """

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, author_id: UUID) -> None:
        """
        Execute command to delete an author.

        Args:
            author_id: ID of the author to delete.

        Raises:
            NotFoundError: If author not found.
        """
        author = await self.repository.get_by_id(author_id)
        if not author:
            raise NotFoundError(f"Author with ID {author_id} not found")

        await self.repository.delete(author)
