"""
Main FastAPI application.

WHY: This is the entry point for the application. It configures logging,
middleware, routes, exception handlers, and other application-level concerns.
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory.core.config import settings
from inventory.core.exceptions import AppException
from inventory.core.exception_handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)
from inventory.core.logging_config import setup_logging
from inventory.db.session import init_models
from inventory.middleware import RequestContextMiddleware
from inventory.api import categories, products


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    WHY: Factory pattern allows easier testing with different configurations
    and makes it possible to create multiple app instances if needed.

    Returns:
        Configured FastAPI application instance
    """
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="REST API for managing product categories and products",
        version=settings.VERSION,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
    )

    # Register exception handlers
    # WHY: Every failure leaves the API as the same {success, error} envelope
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(RequestContextMiddleware)

    # Configure CORS
    # WHY: The browser UI may be served from a different origin than the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    # WHY: Load balancers and monitoring tools need a simple endpoint
    # to verify the service is running. It does not touch the database.
    @app.get(f"{settings.API_PREFIX}/health", tags=["health"])
    async def health_check() -> dict:
        return {
            "success": True,
            "message": "API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.on_event("startup")
    async def startup_event():
        """
        Application startup event handler.

        WHY: Creates missing tables so a fresh database is usable without
        running migrations first.
        """
        if settings.AUTO_CREATE_TABLES:
            await init_models()

    # Root endpoint
    @app.get("/", tags=["root"])
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "endpoints": {
                "categories": f"{settings.API_PREFIX}/categories",
                "products": f"{settings.API_PREFIX}/products",
                "health": f"{settings.API_PREFIX}/health",
            },
        }

    # Register API routers
    app.include_router(categories.router, prefix=settings.API_PREFIX)
    app.include_router(products.router, prefix=settings.API_PREFIX)

    return app


# Create app instance
# WHY: Creating the app instance here allows it to be imported by uvicorn
# and other modules that need access to the FastAPI app.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    # WHY: This allows running the app directly with `python -m inventory.main`
    # for development. In production, use `uvicorn inventory.main:app` directly.
    uvicorn.run(
        "inventory.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
    )
