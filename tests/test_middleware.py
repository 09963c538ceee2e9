"""Request id and CORS middleware tests."""

from fastapi.testclient import TestClient

from videobrowser.app import create_app
from videobrowser.config import Settings


def test_request_id_is_generated(client: TestClient) -> None:
    """Every response carries a fresh request id."""
    first = client.get("/").headers["X-Request-ID"]
    second = client.get("/").headers["X-Request-ID"]

    assert len(first) == 32
    assert first != second


def test_request_id_is_echoed(client: TestClient) -> None:
    """A caller-supplied id is returned unchanged, even on errors."""
    response = client.get(
        "/", params={"path": "../x"}, headers={"X-Request-ID": "trace-42"}
    )

    assert response.status_code == 403
    assert response.headers["X-Request-ID"] == "trace-42"


def test_health_probes_get_request_id(client: TestClient) -> None:
    """Probes are tagged even though they are not logged."""
    response = client.get("/api/v1/health/live")
    assert "X-Request-ID" in response.headers


def test_cors_exposes_request_id(settings: Settings) -> None:
    """Configured origins may read the request id header."""
    app = create_app(settings.model_copy(update={"cors_origins_raw": "http://a.test"}))
    client = TestClient(app)

    response = client.get("/", headers={"Origin": "http://a.test"})

    assert response.headers["access-control-allow-origin"] == "http://a.test"
    assert "X-Request-ID" in response.headers["access-control-expose-headers"]


def test_no_cors_headers_without_origins(client: TestClient) -> None:
    """CORS stays off by default."""
    response = client.get("/", headers={"Origin": "http://a.test"})
    assert "access-control-allow-origin" not in response.headers
