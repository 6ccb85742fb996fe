"""
Application-level constants for hardcoded business logic.

These values represent core application behavior and should NEVER be changed
via environment variables or configuration. They define safety limits and
the shape of the public resources.

For configurable values (database URL, default page size, logging, etc.),
see course_library/settings.py where values can be overridden via
environment variables.
"""

# ============================================================================
# Pagination Safety Limits
# ============================================================================

# Maximum allowed page size for author listings
# Hard limit regardless of what client requests, larger values are clamped
# For default page size, see course_library/settings.py (DEFAULT_PAGE_SIZE)
MAX_PAGE_SIZE = 20

# Smallest page size a request can end up with after clamping
MIN_PAGE_SIZE = 1


# ============================================================================
# Sorting
# ============================================================================

# Order applied to author listings when the client sends no orderBy
DEFAULT_ORDER_BY = "name"

# Suffix marking a sort clause as descending (case-sensitive)
SORT_DESCENDING_SUFFIX = " desc"


# ============================================================================
# Media Types
# ============================================================================

# Accept header value that asks for hypermedia links on single resources
HATEOAS_MEDIA_TYPE = "application/vnd.marvin.hateoas+json"

# Header carrying pagination metadata for author listings
PAGINATION_HEADER = "X-Pagination"


# ============================================================================
# Logging
# ============================================================================

# Correlation IDs are truncated to this many characters
CORRELATION_ID_LENGTH = 8
