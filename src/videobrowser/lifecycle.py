"""Graceful shutdown coordination for the server process."""
import asyncio

import structlog

logger = structlog.get_logger()


class GracefulShutdown:
    """Turns SIGTERM/SIGINT into a one-shot shutdown event.

    Attributes:
        is_triggered: Whether shutdown has been triggered.
        timeout: Seconds the server may spend draining requests.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        """Initialize shutdown coordinator.

        Args:
            timeout: Seconds to allow in-flight requests to finish.
        """
        self._event = asyncio.Event()
        self.timeout = timeout

    @property
    def is_triggered(self) -> bool:
        """Check if shutdown has been triggered."""
        return self._event.is_set()

    def trigger(self) -> None:
        """Signal the server to stop accepting requests.

        Idempotent - repeated signals are ignored.
        """
        if self._event.is_set():
            return
        logger.info("shutdown_triggered", timeout_seconds=self.timeout)
        self._event.set()

    async def wait_for_trigger(self) -> None:
        """Block until trigger() is called from a signal handler."""
        await self._event.wait()
