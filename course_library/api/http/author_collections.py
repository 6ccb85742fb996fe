"""
Author collection endpoints: fetch or create several authors at once.

Example:
    GET /api/authorcollections/(3f0c...,9a1d...)
"""

from fastapi import APIRouter, Request, Response, status

from course_library.commands.author_collection_commands import (
    CreateAuthorCollectionCommand,
    GetAuthorCollectionCommand,
    parse_author_ids,
)
from course_library.dependencies import AuthorRepoDep
from course_library.schemas.author import AuthorDto, AuthorForCreation
from course_library.utils.error_handler import handle_http_errors
from course_library.utils.links import GET_AUTHOR_COLLECTION, build_url

router = APIRouter(prefix="/authorcollections", tags=["author collections"])


@router.get(
    "/({ids})",
    name=GET_AUTHOR_COLLECTION,
    response_model=list[AuthorDto],
    summary="Get several authors by id",
)
@handle_http_errors
async def get_author_collection(ids: str, repo: AuthorRepoDep) -> list[AuthorDto]:
    """
    Get the authors of a comma-separated id list.

    Raises:
        HTTPException: 400 for a malformed id, 404 if any author is missing.
    """
    author_ids = parse_author_ids(ids)
    return await GetAuthorCollectionCommand(repo).execute(author_ids)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=list[AuthorDto],
    summary="Create several authors",
)
@handle_http_errors
async def create_author_collection(
    authors: list[AuthorForCreation],
    request: Request,
    response: Response,
    repo: AuthorRepoDep,
) -> list[AuthorDto]:
    """
    Create every author of the request body, or none of them.

    Location points at the collection of the created authors.
    """
    created = await CreateAuthorCollectionCommand(repo).execute(authors)

    response.headers["Location"] = build_url(
        request,
        GET_AUTHOR_COLLECTION,
        ids=",".join(str(author.id) for author in created),
    )
    return created
