"""
Author endpoints using Repository + Command + Dependency Injection.

The listing supports filtering, searching, paging, sorting and data
shaping, and returns hypermedia links for the collection and for each
author.

Example:
    GET /api/authors?category=Rum&orderBy=age desc&fields=id,name&pageSize=5
"""

import json
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Header, Query, Request, Response, status

from course_library.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    GetAuthorInput,
    GetAuthorsCommand,
)
from course_library.constants import (
    DEFAULT_ORDER_BY,
    HATEOAS_MEDIA_TYPE,
    PAGINATION_HEADER,
)
from course_library.dependencies import AuthorRepoDep, PropertyMappingDep
from course_library.schemas.author import AuthorDto, AuthorForCreation
from course_library.schemas.query_params import AuthorsQueryParams
from course_library.schemas.response import (
    LinkedCollectionResource,
    PaginationMetadata,
)
from course_library.utils.error_handler import handle_http_errors
from course_library.utils.links import (
    GET_AUTHOR,
    GET_AUTHORS,
    ResourceUriType,
    authors_resource_uri,
    build_url,
    links_for_author,
    links_for_authors,
    with_links,
)
from course_library.utils.media_types import parse_accept
from course_library.utils.shaping import get_field_registry

router = APIRouter(prefix="/authors", tags=["authors"])

ALLOWED_METHODS = "GET, HEAD, POST, OPTIONS"


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    name=GET_AUTHORS,
    response_model=LinkedCollectionResource,
    summary="List authors",
)
@handle_http_errors
async def get_authors(
    request: Request,
    response: Response,
    repo: AuthorRepoDep,
    mappings: PropertyMappingDep,
    category: str | None = Query(default=None),
    search_query: str | None = Query(default=None, alias="searchQuery"),
    page_number: int = Query(default=1, ge=1, alias="pageNumber"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    order_by: str = Query(default=DEFAULT_ORDER_BY, alias="orderBy"),
    fields: str | None = Query(default=None),
) -> LinkedCollectionResource:
    """
    Get one page of authors.

    Pagination metadata is returned in the X-Pagination header. Each
    author in the body carries its own links.

    Raises:
        HTTPException: 400 if orderBy or fields name an unknown field.
    """
    options: dict[str, Any] = {
        "category": category,
        "search_query": search_query,
        "page_number": page_number,
        "order_by": order_by,
        "fields": fields,
    }
    if page_size is not None:
        options["page_size"] = page_size
    params = AuthorsQueryParams(**options)

    result = await GetAuthorsCommand(repo, mappings).execute(params)
    page = result.page

    metadata = PaginationMetadata(
        total_count=page.total_count,
        page_size=page.page_size,
        current_page=page.current_page,
        total_pages=page.total_pages,
        previous_page_link=(
            authors_resource_uri(request, params, ResourceUriType.PREVIOUS_PAGE)
            if page.has_previous
            else None
        ),
        next_page_link=(
            authors_resource_uri(request, params, ResourceUriType.NEXT_PAGE)
            if page.has_next
            else None
        ),
    )
    response.headers[PAGINATION_HEADER] = json.dumps(
        metadata.model_dump(mode="json", by_alias=True)
    )

    value = [
        with_links(shaped, links_for_author(request, author.id, params.fields))
        for author, shaped in zip(result.authors, result.shaped)
    ]
    return LinkedCollectionResource(
        value=value,
        links=links_for_authors(request, params, page.has_next, page.has_previous),
    )


@router.options("", summary="Allowed methods on the author collection")
async def get_authors_options() -> Response:
    return Response(headers={"Allow": ALLOWED_METHODS})


@router.get("/{author_id}", name=GET_AUTHOR, summary="Get an author")
@handle_http_errors
async def get_author(
    author_id: UUID,
    request: Request,
    repo: AuthorRepoDep,
    fields: str | None = Query(default=None),
    accept: str | None = Header(default=None),
) -> dict[str, Any]:
    """
    Get one author, shaped to the requested fields.

    Links are included when the client accepts the hypermedia media type.

    Raises:
        HTTPException: 400 for a malformed Accept header or unknown fields,
            404 if the author is missing.
    """
    media_types = parse_accept(accept)

    result = await GetAuthorCommand(repo).execute(
        GetAuthorInput(author_id=author_id, fields=fields)
    )

    if HATEOAS_MEDIA_TYPE in media_types:
        return with_links(
            result.shaped, links_for_author(request, result.author.id, fields)
        )
    return result.shaped


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    name="CreateAuthor",
    summary="Create an author",
)
@handle_http_errors
async def create_author(
    author: AuthorForCreation,
    request: Request,
    response: Response,
    repo: AuthorRepoDep,
) -> dict[str, Any]:
    """
    Create an author, with any nested courses.

    Returns:
        The full author with links; Location points at the new author.
    """
    created: AuthorDto = await CreateAuthorCommand(repo).execute(author)

    registry = get_field_registry(AuthorDto)
    shaped = registry.shape(created, registry.resolve_fields(None))

    response.headers["Location"] = build_url(
        request, GET_AUTHOR, author_id=created.id
    )
    return with_links(shaped, links_for_author(request, created.id))


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author and its courses",
)
@handle_http_errors
async def delete_author(author_id: UUID, repo: AuthorRepoDep) -> None:
    await DeleteAuthorCommand(repo).execute(author_id)
