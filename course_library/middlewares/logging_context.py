"""
Middleware that adds request details to every log record of a request.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from course_library.logging import clear_log_context, logger, set_log_context


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """
    Populate the logging context with the endpoint and method of the
    request, and the status code once the response is ready.

    Must run after CorrelationIDMiddleware, whose correlation id the log
    formatters read on their own.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        set_log_context(endpoint=request.url.path, method=request.method)
        try:
            response = await call_next(request)
            set_log_context(status_code=response.status_code)
            logger.debug(
                f"{request.method} {request.url.path} -> {response.status_code}"
            )
            return response
        finally:
            clear_log_context()
