"""
Board Gateway - Request ID Middleware
======================================

What:  Assigns a correlation ID to each request and echoes it back.
How:   Reuses an incoming X-Request-ID header or generates a short UUID,
       stores it in a ContextVar for loggers and exception handlers, and
       sets it on the response.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """Eight hex characters; enough to correlate log lines of one request."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate a new short ID
        3. Expose it via request_id_var and request.state.request_id
        4. Return it in the X-Request-ID response header
        5. Turn an unhandled exception into the uniform 500 body
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception as exc:
            # Answered here, while the ID is still set, so the outer
            # middlewares still add their headers to the 500
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            response = JSONResponse(
                status_code=500,
                content={"error": UNEXPECTED_ERROR_MESSAGE, "request_id": rid},
            )
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
