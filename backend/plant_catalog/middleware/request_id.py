"""
Plant Catalog Backend - Request ID Middleware
==============================================

What:  Tags every request with a short correlation ID.
Why:   The access log line and the boundary error handler's log lines for the
       same request share that ID, so a failure can be traced end to end.
How:   Reuses an incoming X-Request-ID header or generates one, stores it in a
       ContextVar, and echoes it back in the response headers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request ID and returns it as X-Request-ID.

    Client-supplied IDs are kept so callers can correlate their own logs.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 characters are plenty for correlation and stay readable in logs
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])

        request_id_var.set(rid)

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
