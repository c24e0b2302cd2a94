"""
FastAPI application setup for the Wanderlog travel journal API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import logging
from contextlib import asynccontextmanager

from wanderlog.config.settings import get_settings
from wanderlog.core.logging import configure_logging
from wanderlog.core.error_handlers import setup_error_handlers
from wanderlog.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: prepares photo storage and, when enabled,
    creates missing tables.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    settings.storage.get_upload_path().mkdir(parents=True, exist_ok=True)

    if settings.auto_create_tables:
        from wanderlog.core.db import init_db
        init_db()
        logger.info("Database tables ensured")

    logger.info("Application startup complete")
    yield
    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    # Add CORS middleware with configuration
    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    # Request id + access logging
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    # Serve stored photos from local storage
    if settings.storage.backend == "local" and settings.storage.public_base_url.startswith("/"):
        app.mount(
            settings.storage.public_base_url,
            StaticFiles(directory=settings.storage.get_upload_path(), check_dir=False),
            name="media",
        )

    # Include API routers
    from wanderlog.api import auth_router, trips_router, memories_router, health_router
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(trips_router)
    app.include_router(memories_router)

    return app


# Create application instance
app = create_app()


@app.get("/")
async def root():
    """Root endpoint for basic health check."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "status": "running"
    }
