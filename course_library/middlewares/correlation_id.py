"""
Middleware for request correlation ID tracking.

Every request gets a short correlation id that is attached to its log
records and echoed back to the client.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from course_library.constants import CORRELATION_ID_LENGTH

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Correlation id of the request being handled
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add correlation IDs to requests.

    This middleware:
    - Takes the correlation ID from the X-Correlation-ID header or generates one
    - Truncates it to CORRELATION_ID_LENGTH characters
    - Stores it in request.state.request_id and in a context variable
    - Adds it to the response headers

    The correlation ID can be read anywhere in the request context with
    get_correlation_id().
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and add correlation ID.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            Response with X-Correlation-ID header added.
        """
        cid = request.headers.get(CORRELATION_ID_HEADER) or uuid.uuid4().hex
        cid = cid[:CORRELATION_ID_LENGTH]

        request.state.request_id = cid
        token = correlation_id.set(cid)
        try:
            response = await call_next(request)
        finally:
            correlation_id.reset(token)

        response.headers[CORRELATION_ID_HEADER] = cid
        return response


def get_correlation_id() -> str:
    """
    Get the correlation ID for the current request context.

    Returns:
        The correlation ID string, or empty string if not set.
    """
    return correlation_id.get()
