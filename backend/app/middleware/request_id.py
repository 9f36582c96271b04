"""
Zomato Backend — Request ID Middleware
========================================

What:  Assigns a short correlation ID to each request and echoes it in the
       X-Request-ID response header.
Why:   Access log lines and error reports from the same request share one ID.
How:   Reuses a client-supplied X-Request-ID, otherwise generates one;
       stores it in a ContextVar and on request.state.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Attaches a request ID to every request and response.

    Behavior:
        1. Use the client's X-Request-ID header if present
        2. Otherwise generate the first 8 chars of a UUID4
        3. Store in ContextVar (for loggers) and request.state (for handlers)
        4. Add to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
