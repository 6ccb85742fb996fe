"""
Parsing of the Accept header.

Only the syntax of each media range is checked (`type/subtype` followed by
optional `;name=value` parameters); no content negotiation happens here.
"""

import re

from course_library.exceptions import ValidationError

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_PARAMETER = rf"\s*;\s*{_TOKEN}\s*=\s*(?:{_TOKEN}|\"(?:[^\"\\]|\\.)*\")"
_MEDIA_RANGE = re.compile(rf"\s*({_TOKEN})/({_TOKEN})(?:{_PARAMETER})*\s*")


def parse_accept(accept: str | None) -> list[str]:
    """
    Parse an Accept header into its media types.

    Args:
        accept: Raw header value. A missing header accepts anything.

    Returns:
        Lower-cased `type/subtype` strings in header order, parameters
        (including q-values) dropped.

    Raises:
        ValidationError: If any element is not a valid media range.
    """
    if accept is None:
        return ["*/*"]

    media_types = []
    for element in accept.split(","):
        match = _MEDIA_RANGE.fullmatch(element)
        if match is None:
            raise ValidationError(
                "Accept header media type value is not a valid media type"
            )
        media_types.append(f"{match.group(1)}/{match.group(2)}".lower())
    return media_types
