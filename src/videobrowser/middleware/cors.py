"""CORS middleware configuration."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videobrowser.middleware.logging import REQUEST_ID_HEADER


def configure_cors(app: FastAPI, allowed_origins: list[str]) -> None:
    """Allow cross-origin GETs from the configured origins.

    Nothing is installed when no origins are configured.

    Args:
        app: FastAPI application instance.
        allowed_origins: List of allowed origin URLs.
    """
    if not allowed_origins:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
