from typing import Any

from course_library.schemas.base import ApiModel
from course_library.schemas.links import LinkDto


class PaginationMetadata(ApiModel):
    """Pagination details sent in the X-Pagination response header."""

    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    previous_page_link: str | None = None
    next_page_link: str | None = None


class LinkedCollectionResource(ApiModel):
    """A page of shaped resources together with collection links."""

    value: list[dict[str, Any]]
    links: list[LinkDto]
