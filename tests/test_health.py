"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_reports_cache_and_assistant(client: AsyncClient) -> None:
    """GET /api/v1/health/ready answers once the state cache is on app.state."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["tasks"] == 0
    assert data["assistant_enabled"] is True


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Request-ID")


async def test_request_id_is_forwarded_when_safe(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """Ids with characters outside the safe set are not echoed back."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id;drop"}
    )
    assert response.headers["X-Request-ID"] != "bad id;drop"
