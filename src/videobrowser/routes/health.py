"""Health check endpoints for liveness and readiness probes."""
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter(prefix="/health", tags=["health"])


class LivenessResponse(BaseModel):
    """Response model for liveness probe.

    Attributes:
        status: Always 'alive' when process is running.
    """

    status: Literal["alive"]


class ReadinessCheck(BaseModel):
    """Individual dependency check result.

    Attributes:
        name: Identifier for the dependency being checked.
        status: Result of the check ('ok' or 'failed').
        message: Error details when status is 'failed'.
    """

    name: str
    status: Literal["ok", "failed"]
    message: str | None = None


class ReadinessResponse(BaseModel):
    """Response model for readiness probe."""

    status: Literal["ready", "not_ready"]
    checks: list[ReadinessCheck]


def _check_root(root: Path) -> ReadinessCheck:
    """Verify the root directory exists and can be listed.

    The check name never includes the root path itself.
    """
    try:
        if root.is_dir():
            next(root.iterdir(), None)
            return ReadinessCheck(name="root", status="ok")
        return ReadinessCheck(
            name="root",
            status="failed",
            message="Directory not found",
        )
    except PermissionError:
        return ReadinessCheck(name="root", status="failed", message="Permission denied")
    except OSError as e:
        return ReadinessCheck(name="root", status="failed", message=e.strerror)


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness probe endpoint.

    Returns:
        Liveness status response.
    """
    return LivenessResponse(status="alive")


@router.get("/ready", response_model=ReadinessResponse)
def readiness(request: Request) -> JSONResponse:
    """Readiness probe endpoint.

    Returns 200 if the root directory is listable, 503 otherwise.

    Returns:
        Readiness status with individual check results.
    """
    checks = [_check_root(request.app.state.browse_config.root)]
    all_ok = all(c.status == "ok" for c in checks)
    response = ReadinessResponse(
        status="ready" if all_ok else "not_ready",
        checks=checks,
    )
    code = status.HTTP_200_OK if all_ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=response.model_dump(), status_code=code)
