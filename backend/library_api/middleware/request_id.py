"""
Library API Backend — Request ID Middleware
============================================

What:  Assigns a correlation ID to each incoming request and echoes it back.
How:   Reads X-Request-ID (or generates a short UUID), binds it to a
       ContextVar (each request runs in its own context), and adds it to the
       response headers. RequestIDLogFilter copies the bound value onto
       every log record as `request_id`, which setup_logging prints.
Who:   Applied to every request via Starlette middleware.

Log lines emitted outside a request (startup, shutdown) carry "-".
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Client-supplied IDs longer than this are replaced with a generated one
MAX_REQUEST_ID_LENGTH = 64

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """Short random ID; 8 hex characters are plenty for log correlation."""
    return uuid.uuid4().hex[:8]


class RequestIDLogFilter(logging.Filter):
    """
    Stamps each log record with the current request ID.

    Attach to a handler (setup_logging does this for the stdout handler) so
    records from any logger, including the service and repository modules,
    expose `%(request_id)s` to the formatter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that binds a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header when present and reasonably short
        2. Otherwise generate one
        3. Bind it to request_id_var and request.state.request_id
        4. Add it to the response as X-Request-ID
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if supplied and len(supplied) <= MAX_REQUEST_ID_LENGTH:
            rid = supplied
        else:
            rid = new_request_id()

        # Not reset afterwards: the server-error handler, which runs outside
        # this middleware, reads it for the 500 body
        request_id_var.set(rid)
        request.state.request_id = rid
        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
