"""
FastAPI application with assembled routers.

Initializes the FastAPI app, registers middleware, exception handlers and all
API routers, and configures the uvicorn server.

Dependencies: fastapi, legalaid.api.routers, legalaid.observability, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from legalaid.api.deps.dependencies import get_service_cache
from legalaid.api.errors import register_exception_handlers
from legalaid.configs import get_settings
from legalaid.observability.logger import configure_logging, get_logger
from legalaid.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import chat_router, health_router, nlp_router, sessions_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    cache = get_service_cache()
    _ = cache.matcher
    logger.info(
        "Application startup: knowledge base loaded",
        extra={"service": settings.service_name, "environment": settings.environment},
    )

    yield

    # Shutdown
    await cache.aclose()
    logger.info("Application shutdown: service cache closed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.service_name,
        description="Multilingual legal information chat with translation and voice",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )

    # Added first = last to execute
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(nlp_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "legalaid.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
