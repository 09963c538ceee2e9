"""Health endpoint tests."""

import shutil
from pathlib import Path

from fastapi.testclient import TestClient


def test_liveness_returns_alive(client: TestClient) -> None:
    """Liveness endpoint returns alive status."""
    response = client.get("/api/v1/health/live")
    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


def test_readiness_ok_when_root_exists(client: TestClient) -> None:
    """Readiness passes while the root directory is listable."""
    response = client.get("/api/v1/health/ready")
    data = response.json()
    assert response.status_code == 200
    assert data["status"] == "ready"
    assert data["checks"] == [{"name": "root", "status": "ok", "message": None}]


def test_readiness_fails_when_root_missing(client: TestClient, root: Path) -> None:
    """Readiness reports 503 without leaking the root path."""
    shutil.rmtree(root)

    response = client.get("/api/v1/health/ready")
    data = response.json()
    assert response.status_code == 503
    assert data["status"] == "not_ready"
    assert str(root) not in response.text
