"""
Query parameters accepted by the author listing.

The model is built by the HTTP layer from individual query parameters and
handed to AuthorRepository.get_authors(). Page size is clamped silently
instead of being rejected.
"""

from pydantic import BaseModel, Field, field_validator

from course_library.constants import (
    DEFAULT_ORDER_BY,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)
from course_library.settings import app_settings


class AuthorsQueryParams(BaseModel):  # type: ignore[misc]
    """
    Filtering, searching, paging, sorting and shaping options.

    Example:
        >>> params = AuthorsQueryParams(page_size=1000)
        >>> params.page_size
        20
    """

    # Filtering
    category: str | None = Field(
        default=None,
        description="Exact main category match (trimmed)",
    )

    # Searching
    search_query: str | None = Field(
        default=None,
        description="Substring match on main category, first or last name",
    )

    # Paging
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default_factory=lambda: app_settings.DEFAULT_PAGE_SIZE)

    # Sorting
    order_by: str = DEFAULT_ORDER_BY

    # Shaping
    fields: str | None = None

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return max(MIN_PAGE_SIZE, min(value, MAX_PAGE_SIZE))
