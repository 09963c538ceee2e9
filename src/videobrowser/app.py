"""FastAPI application factory and lifespan management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from videobrowser import PROGRAM_NAME, __version__
from videobrowser.browse import BrowseConfig
from videobrowser.config import Settings
from videobrowser.middleware.cors import configure_cors
from videobrowser.middleware.logging import RequestLoggingMiddleware
from videobrowser.routes import browse, health

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the server.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings: Settings = app.state.settings
    logger.info(
        "server_startup",
        version=__version__,
        root=str(settings.root_dir),
        url=f"http://{settings.host}:{settings.port}",
        follow_symlinks=settings.follow_symlinks,
    )
    try:
        yield
    finally:
        logger.info("server_shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function to create configured FastAPI application.

    Args:
        settings: Configuration instance. Creates default if None.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title=PROGRAM_NAME,
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/v1/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/api/v1/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.browse_config = BrowseConfig.from_settings(settings)

    configure_cors(app, settings.cors_origins)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router, prefix="/api/v1")
    app.include_router(browse.router)

    return app
