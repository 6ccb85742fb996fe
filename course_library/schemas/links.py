from typing import Literal

from course_library.schemas.base import ApiModel


class LinkDto(ApiModel):
    """A hypermedia link describing an action available on a resource."""

    href: str
    rel: str
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
