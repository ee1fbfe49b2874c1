"""
Middleware for request correlation IDs and logging context.

Every request gets a short correlation ID (taken from the
X-Correlation-ID header or generated), which is exposed to the logging
formatters through a context variable and echoed back to the client.
"""

import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from catalog.constants import CORRELATION_ID_LENGTH
from catalog.logging import clear_log_context, logger, set_log_context
from catalog.settings import app_settings

# Context variable for storing correlation ID per request
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware to track requests across log lines.

    This middleware:
    - Extracts the correlation ID from the X-Correlation-ID header or
      generates a new one, limited to CORRELATION_ID_LENGTH characters
    - Stores it in request.state.request_id and in a context variable
    - Adds endpoint and method to the log context
    - Emits one access log line per request (except LOG_EXCLUDED_PATHS)
    - Adds the correlation ID to the response headers
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request with correlation ID and logging context.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            Response with X-Correlation-ID header added.
        """
        cid = request.headers.get("X-Correlation-ID") or uuid.uuid4().hex
        cid = cid[:CORRELATION_ID_LENGTH]

        request.state.request_id = cid
        token = correlation_id.set(cid)

        set_log_context(endpoint=request.url.path, method=request.method)
        started = time.perf_counter()

        try:
            response = await call_next(request)

            if request.url.path not in app_settings.LOG_EXCLUDED_PATHS:
                duration_ms = (time.perf_counter() - started) * 1000
                set_log_context(status_code=response.status_code)
                logger.info(
                    f"{request.method} {request.url.path} "
                    f"{response.status_code} ({duration_ms:.1f} ms)"
                )

            response.headers["X-Correlation-ID"] = cid
            return response
        finally:
            clear_log_context()
            correlation_id.reset(token)


def get_correlation_id() -> str:
    """
    Get the correlation ID for the current request context.

    Returns:
        The correlation ID string, or empty string if not set.
    """
    return correlation_id.get()
