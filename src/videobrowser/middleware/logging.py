"""Request logging middleware."""
import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

PROBE_PREFIX = "/api/v1/health/"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs its outcome.

    The id is bound into structlog's context so events raised while the
    request is served (``browse_forbidden``, ``listing_failed``) carry it,
    and it is echoed back in ``X-Request-ID``. The query string is never
    logged, so rejected paths stay out of the logs. Health probes get an id
    but no ``http_request`` event.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            start = time.perf_counter()
            response = await call_next(request)
            elapsed = time.perf_counter() - start
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        if request.url.path.startswith(PROBE_PREFIX):
            return response

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "http_request",
            request_id=request_id,
            method=request.method,
            route=request.url.path,
            status=response.status_code,
            duration_ms=round(elapsed * 1000, 2),
        )
        return response
