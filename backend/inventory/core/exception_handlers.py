"""
FastAPI exception handlers for custom exceptions.

WHY: Exception handlers convert our custom exceptions into the uniform
failure envelope ({"success": false, "error": ...}) with the status code
chosen by the error kind, so routes never format errors themselves.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory.core.exceptions import AppException
from inventory.schemas.common import describe_errors

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle custom AppException and its subclasses.

    Args:
        request: The FastAPI request object
        exc: The custom exception instance

    Returns:
        JSONResponse with the failure envelope
    """
    logger.debug(
        f"{request.method} {request.url.path} failed: {exc.kind.value} {exc.message} {exc.context}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (malformed body or path parameters).

    WHY: Field violations are client errors; they are reported as 400 with
    the same envelope and message format the services use.

    Args:
        request: The FastAPI request object
        exc: The Pydantic validation error

    Returns:
        JSONResponse with status 400
    """
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": describe_errors(exc.errors()),
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handle Starlette HTTP exceptions.

    WHY: Some HTTP exceptions (404, 405) are raised by Starlette/FastAPI
    before reaching our routes. This handler ensures they match our envelope.

    Args:
        request: The FastAPI request object
        exc: The HTTP exception

    Returns:
        JSONResponse with the failure envelope
    """
    message = "Endpoint not found" if exc.status_code == 404 else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": message,
        },
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for unexpected exceptions.

    WHY: Log the full traceback but return a generic error so
    implementation details don't leak to clients.

    Args:
        request: The FastAPI request object
        exc: The unexpected exception

    Returns:
        JSONResponse with status 500
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
        },
    )
