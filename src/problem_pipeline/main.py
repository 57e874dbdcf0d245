"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from problem_pipeline import __version__
from problem_pipeline.api import api_router
from problem_pipeline.config import Settings, get_settings
from problem_pipeline.core.correlation import CorrelationIdMiddleware
from problem_pipeline.core.errors import (
    ExceptionHandlingMiddleware,
    register_exception_handlers,
)
from problem_pipeline.core.logging import RequestLoggingMiddleware, configure_logging


logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
        diagnostics=settings.diagnostics_enabled,
    )

    yield

    logger.info("application_shutdown")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use instead of the environment's

    Returns:
        Configured FastAPI application instance.
    """
    settings = app_settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Uniform RFC 7807 error responses with request correlation",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        # Disable docs in production
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
    )
    app.state.settings = settings

    # Middleware added last runs first. From the outside in:
    # correlation id -> exception handling -> request logging -> routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        ExceptionHandlingMiddleware, diagnostics=settings.diagnostics_enabled
    )
    app.add_middleware(CorrelationIdMiddleware, header_name=settings.correlation_header)

    # Route framework errors through the exception handling middleware
    register_exception_handlers(app)

    app.include_router(api_router)

    return app
