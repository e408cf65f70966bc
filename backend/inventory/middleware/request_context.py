"""
Request context middleware.

WHAT: Middleware that gives every request an ID, makes it available for the
duration of the request, and writes one access log line per request.

WHY: A request ID ties together every log record produced while serving a
request (service warnings, storage errors) and is echoed back to the
client so a failing UI call can be matched to the server logs.

HOW: Stores the context in request.state and in a ContextVar so services
can read it without a request object.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@dataclass(frozen=True)
class RequestContext:
    """
    Container for request-scoped context data.

    Fields:
    - request_id: Unique identifier for the request (for log correlation)
    - client_ip: Client address (considering proxies)
    - path: Request path
    - method: HTTP method
    """

    request_id: str
    client_ip: str
    path: str
    method: str


# WHY: ContextVar gives each concurrent request its own value
_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def get_request_context() -> Optional[RequestContext]:
    """
    Get the current request context.

    Returns:
        RequestContext if within a request, None otherwise
    """
    return _request_context.get()


def get_client_ip(request: Request) -> str:
    """
    Extract the client IP address from a request.

    Checks X-Forwarded-For (first entry) before the direct connection
    address. The header is only trustworthy behind a proxy that sets it.

    Args:
        request: The incoming request

    Returns:
        Client IP address as string, or "unknown"
    """
    x_forwarded_for = request.headers.get("X-Forwarded-For")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()

    if request.client and request.client.host:
        return request.client.host

    return "unknown"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that captures request context and logs each request.

    An incoming X-Request-ID header is reused so IDs assigned by a proxy
    survive; otherwise a UUID4 is generated.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add context.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with request ID header added
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        context = RequestContext(
            request_id=request_id,
            client_ip=get_client_ip(request),
            path=request.url.path,
            method=request.method,
        )
        request.state.context = context
        token = _request_context.set(context)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors still get their access line; the traceback is
            # logged by the catch-all exception handler.
            _log_access(context, 500, started)
            raise
        finally:
            _request_context.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        _log_access(context, response.status_code, started)
        return response


def _log_access(context: RequestContext, status_code: int, started: float) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"[{context.request_id}] {context.method} {context.path} -> "
        f"{status_code} ({elapsed_ms:.1f} ms)"
    )
