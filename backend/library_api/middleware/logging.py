"""
Library API Backend — Request Logging Middleware
=================================================

What:  One access-log line per HTTP request.
How:   Times the downstream call and logs method, path (with query string),
       status, duration, response size and client IP. The request ID is
       added by RequestIDLogFilter, so it is not repeated in the message.
When:  Runs inside RequestIDMiddleware, so the ID is already bound.

Example line:
    2026-10-19T12:00:00 [INFO] library_api.access [a1b2c3d4]: PATCH /books/1/availability?available=true 200 4.2ms 61B from 127.0.0.1

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("library_api.access")


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request/response pair; /health checks are skipped."""

    SKIPPED_PATHS = frozenset({"/health"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms %sB from %s",
            request.method,
            target,
            response.status_code,
            elapsed_ms,
            response.headers.get("content-length", "?"),
            request.client.host if request.client else "unknown",
        )
        return response
