"""Entry point for the browse server."""

import asyncio
import contextlib
import signal
import sys

import structlog
import uvicorn

from videobrowser import PROGRAM_NAME, __version__
from videobrowser.app import create_app
from videobrowser.config import Settings
from videobrowser.lifecycle import GracefulShutdown
from videobrowser.logging import configure_logging

logger = structlog.get_logger()


async def serve(settings: Settings) -> None:
    """Run uvicorn until SIGTERM/SIGINT.

    Args:
        settings: Server configuration.
    """
    app = create_app(settings)
    shutdown = GracefulShutdown(timeout=settings.shutdown_timeout)

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "warning",
        access_log=False,
        timeout_graceful_shutdown=int(settings.shutdown_timeout),
    )
    server = uvicorn.Server(config)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, shutdown.trigger)

    async def shutdown_server() -> None:
        """Wait for shutdown signal and stop server."""
        await shutdown.wait_for_trigger()
        server.should_exit = True

    async def run_server() -> None:
        """Serve until stopped, then release the shutdown waiter."""
        try:
            await server.serve()
        finally:
            shutdown.trigger()

    await asyncio.gather(
        run_server(),
        shutdown_server(),
        return_exceptions=True,
    )


def main() -> None:
    """Entry point for python -m videobrowser."""
    settings = Settings()
    configure_logging(debug=settings.debug)

    if not settings.root_dir.is_dir():
        logger.error("root_missing", root=str(settings.root_dir))
        sys.exit(1)

    logger.info("starting", program=PROGRAM_NAME, version=__version__)

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(serve(settings))

    sys.exit(0)


if __name__ == "__main__":
    main()
