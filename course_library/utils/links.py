"""
Hypermedia link builders for author resources.

Links are built from route names with `request.url_for`, so they follow
the host, scheme and mount prefix of the incoming request.

Example:
    ```python
    links = links_for_author(request, author.id, fields="id,name")
    # [LinkDto(rel="self", method="GET", href="http://.../api/authors/..."), ...]
    ```
"""

from enum import Enum
from typing import Any
from uuid import UUID

from starlette.requests import Request

from course_library.schemas.links import LinkDto
from course_library.schemas.query_params import AuthorsQueryParams

# Route names, shared with the routers that declare them
GET_AUTHORS = "GetAuthors"
GET_AUTHOR = "GetAuthor"
GET_AUTHOR_COLLECTION = "GetAuthorCollection"
CREATE_COURSE_FOR_AUTHOR = "CreateCourseForAuthor"
GET_COURSES_FOR_AUTHOR = "GetCoursesForAuthor"
GET_COURSE_FOR_AUTHOR = "GetCourseForAuthor"


class ResourceUriType(Enum):
    PREVIOUS_PAGE = -1
    CURRENT = 0
    NEXT_PAGE = 1


def build_url(
    request: Request,
    name: str,
    query: dict[str, Any] | None = None,
    **path_params: Any,
) -> str:
    """
    Absolute URL of a named route, with None-valued query params dropped.

    Args:
        request: The request being handled.
        name: Route name.
        query: Query string parameters.
        **path_params: Path parameters of the route.

    Returns:
        The URL as a string.
    """
    url = request.url_for(name, **{k: str(v) for k, v in path_params.items()})
    params = {k: v for k, v in (query or {}).items() if v is not None}
    if params:
        url = url.include_query_params(**params)
    return str(url)


def authors_resource_uri(
    request: Request,
    params: AuthorsQueryParams,
    uri_type: ResourceUriType = ResourceUriType.CURRENT,
) -> str:
    """
    URL of a page of the author listing, keeping every query option.

    Args:
        request: The request being handled.
        params: Query options of the current listing.
        uri_type: Which page to point at, relative to the current one.

    Returns:
        The page URL.
    """
    return build_url(
        request,
        GET_AUTHORS,
        {
            "fields": params.fields,
            "orderBy": params.order_by,
            "pageNumber": params.page_number + uri_type.value,
            "pageSize": params.page_size,
            "category": params.category,
            "searchQuery": params.search_query,
        },
    )


def links_for_author(
    request: Request, author_id: UUID, fields: str | None = None
) -> list[LinkDto]:
    """
    Links available on a single author.

    The self link keeps the requested fields so following it returns the
    same shape.
    """
    self_query = {"fields": fields} if fields and fields.strip() else None
    return [
        LinkDto(
            href=build_url(request, GET_AUTHOR, self_query, author_id=author_id),
            rel="self",
            method="GET",
        ),
        LinkDto(
            href=build_url(request, CREATE_COURSE_FOR_AUTHOR, author_id=author_id),
            rel="create_course_for_author",
            method="POST",
        ),
        LinkDto(
            href=build_url(request, GET_COURSES_FOR_AUTHOR, author_id=author_id),
            rel="courses",
            method="GET",
        ),
    ]


def links_for_authors(
    request: Request,
    params: AuthorsQueryParams,
    has_next: bool,
    has_previous: bool,
) -> list[LinkDto]:
    """
    Links available on a page of the author listing.

    Args:
        request: The request being handled.
        params: Query options of the current listing.
        has_next: Whether a following page exists.
        has_previous: Whether a preceding page exists.

    Returns:
        The self link, then nextPage and previousPage when they exist.
    """
    links = [
        LinkDto(
            href=authors_resource_uri(request, params, ResourceUriType.CURRENT),
            rel="self",
            method="GET",
        )
    ]
    if has_next:
        links.append(
            LinkDto(
                href=authors_resource_uri(
                    request, params, ResourceUriType.NEXT_PAGE
                ),
                rel="nextPage",
                method="GET",
            )
        )
    if has_previous:
        links.append(
            LinkDto(
                href=authors_resource_uri(
                    request, params, ResourceUriType.PREVIOUS_PAGE
                ),
                rel="previousPage",
                method="GET",
            )
        )
    return links


def with_links(resource: dict[str, Any], links: list[LinkDto]) -> dict[str, Any]:
    """Copy of a shaped resource with a `links` entry added."""
    return {**resource, "links": [link.model_dump(by_alias=True) for link in links]}
