"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

from videobrowser import PROGRAM_NAME


def configure_logging(debug: bool = False) -> None:
    """Configure structlog for the server process.

    Production output is one JSON object per line. Debug mode switches to
    the human-readable console renderer and lowers the level to DEBUG.

    Args:
        debug: Enable debug-level console logging when True.
    """
    level = logging.DEBUG if debug else logging.INFO
    renderer = (
        structlog.dev.ConsoleRenderer()
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(program=PROGRAM_NAME)

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Request lines come from RequestLoggingMiddleware instead.
    logging.getLogger("uvicorn.access").disabled = True
    for name in ["uvicorn", "uvicorn.error"]:
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True
