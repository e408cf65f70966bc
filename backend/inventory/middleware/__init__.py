"""
Middleware package.

WHY: Middleware provides cross-cutting concerns like request tracing and
access logging that apply to all requests.
"""

from inventory.middleware.request_context import (
    RequestContextMiddleware,
    get_request_context,
    get_client_ip,
    RequestContext,
)

__all__ = [
    "RequestContextMiddleware",
    "get_request_context",
    "get_client_ip",
    "RequestContext",
]
