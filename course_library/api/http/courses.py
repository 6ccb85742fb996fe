"""
Course endpoints, nested under the owning author.

PUT and PATCH upsert: they answer 204 when the course existed and 201
with the new course when it was created under the id from the URL.
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Request, Response, status

from course_library.commands.course_commands import (
    CourseLookupInput,
    CreateCourseForAuthorCommand,
    CreateCourseInput,
    DeleteCourseForAuthorCommand,
    GetCourseForAuthorCommand,
    GetCoursesForAuthorCommand,
    PatchCourseForAuthorCommand,
    PatchCourseInput,
    UpdateCourseForAuthorCommand,
    UpdateCourseInput,
    UpsertResult,
)
from course_library.dependencies import AuthorRepoDep, CourseRepoDep
from course_library.schemas.course import (
    CourseDto,
    CourseForCreation,
    CourseForPatch,
    CourseForUpdate,
)
from course_library.utils.error_handler import handle_http_errors
from course_library.utils.links import (
    CREATE_COURSE_FOR_AUTHOR,
    GET_COURSE_FOR_AUTHOR,
    GET_COURSES_FOR_AUTHOR,
    build_url,
)

router = APIRouter(prefix="/authors/{author_id}/courses", tags=["courses"])


def upsert_response(
    request: Request, response: Response, result: UpsertResult
) -> Any:
    """201 with the course and its Location when created, otherwise 204."""
    if not result.created:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = build_url(
        request,
        GET_COURSE_FOR_AUTHOR,
        author_id=result.course.author_id,
        course_id=result.course.id,
    )
    return result.course


@router.get(
    "",
    name=GET_COURSES_FOR_AUTHOR,
    response_model=list[CourseDto],
    summary="List the courses of an author",
)
@handle_http_errors
async def get_courses_for_author(
    author_id: UUID, authors: AuthorRepoDep, courses: CourseRepoDep
) -> list[CourseDto]:
    return await GetCoursesForAuthorCommand(authors, courses).execute(author_id)


@router.get(
    "/{course_id}",
    name=GET_COURSE_FOR_AUTHOR,
    response_model=CourseDto,
    summary="Get a course of an author",
)
@handle_http_errors
async def get_course_for_author(
    author_id: UUID,
    course_id: UUID,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> CourseDto:
    return await GetCourseForAuthorCommand(authors, courses).execute(
        CourseLookupInput(author_id=author_id, course_id=course_id)
    )


@router.post(
    "",
    name=CREATE_COURSE_FOR_AUTHOR,
    status_code=status.HTTP_201_CREATED,
    response_model=CourseDto,
    summary="Create a course for an author",
)
@handle_http_errors
async def create_course_for_author(
    author_id: UUID,
    course: CourseForCreation,
    request: Request,
    response: Response,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> CourseDto:
    """
    Create a course for an author.

    Raises:
        HTTPException: 404 if the author is missing.
    """
    created = await CreateCourseForAuthorCommand(authors, courses).execute(
        CreateCourseInput(author_id=author_id, course=course)
    )
    response.headers["Location"] = build_url(
        request, GET_COURSE_FOR_AUTHOR, author_id=author_id, course_id=created.id
    )
    return created


@router.put(
    "/{course_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=CourseDto,
    responses={204: {"description": "Course replaced"}},
    summary="Replace or create a course",
)
@handle_http_errors
async def update_course_for_author(
    author_id: UUID,
    course_id: UUID,
    course: CourseForUpdate,
    request: Request,
    response: Response,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> Any:
    """
    Replace a course, creating it when it does not exist.

    Raises:
        HTTPException: 404 if the author is missing.
    """
    result = await UpdateCourseForAuthorCommand(authors, courses).execute(
        UpdateCourseInput(author_id=author_id, course_id=course_id, course=course)
    )
    return upsert_response(request, response, result)


@router.patch(
    "/{course_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=CourseDto,
    responses={204: {"description": "Course updated"}},
    summary="Partially update or create a course",
)
@handle_http_errors
async def patch_course_for_author(
    author_id: UUID,
    course_id: UUID,
    patch: CourseForPatch,
    request: Request,
    response: Response,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> Any:
    """
    Apply a merge patch to a course, creating it when it does not exist.

    Only the fields present in the body change. The patched course must
    pass the same rules as a full replacement.

    Raises:
        HTTPException: 404 if the author is missing.
        RequestValidationError: 422 if the patched course is invalid.
    """
    result = await PatchCourseForAuthorCommand(authors, courses).execute(
        PatchCourseInput(author_id=author_id, course_id=course_id, patch=patch)
    )
    return upsert_response(request, response, result)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a course",
)
@handle_http_errors
async def delete_course_for_author(
    author_id: UUID,
    course_id: UUID,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> None:
    await DeleteCourseForAuthorCommand(authors, courses).execute(
        CourseLookupInput(author_id=author_id, course_id=course_id)
    )
