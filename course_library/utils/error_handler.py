"""
Error handler decorator for unified exception handling in HTTP endpoints.

This module provides a decorator that converts AppException instances into
HTTP responses, eliminating duplicate try/except blocks in handlers.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from course_library.exceptions import AppException
from course_library.logging import logger


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException to HTTPException.

    Conversions:
    - AppException: HTTPException with the exception's http_status.
    - pydantic.ValidationError raised after request parsing (for example
      when a merge patch yields an invalid course): the same 422 response
      FastAPI sends for an invalid request body.
    - SQLAlchemyError: 500 "Database error occurred".

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.delete("/authors/{author_id}", status_code=204)
        @handle_http_errors
        async def delete_author(author_id: UUID, repo: AuthorRepoDep) -> None:
            await DeleteAuthorCommand(repo).execute(author_id)
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            )
        except PydanticValidationError as ex:
            logger.warning(
                f"Validation failed in {func.__name__}: {ex.error_count()} errors",
                extra={"exception_type": type(ex).__name__},
            )
            raise RequestValidationError(
                ex.errors(include_url=False, include_context=False)
            )
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}",
                exc_info=True,
            )
            raise HTTPException(
                status_code=500,
                detail="Database error occurred",
            )

    return wrapper
