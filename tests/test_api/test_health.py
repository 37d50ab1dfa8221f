"""
Tests for health check endpoints.
"""

import pytest
from httpx import AsyncClient
from prometheus_client import REGISTRY

from adtracker.api.middleware.metrics import normalize_path


@pytest.mark.asyncio
async def test_ping(client: AsyncClient) -> None:
    """Test ping endpoint."""
    response = await client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"pong": True}


@pytest.mark.asyncio
async def test_live(client: AsyncClient) -> None:
    """Test liveness endpoint."""
    response = await client.get("/live")
    assert response.status_code == 200
    assert response.json() == {"alive": True}


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    await client.post("/api/ads", json={"name": "A", "platform": "Google", "type": "banner"})

    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["storage"] is True
    assert data["ads"] == 1
    assert data["revenue"] == 0


@pytest.mark.asyncio
async def test_metrics(client: AsyncClient) -> None:
    await client.post("/api/ads", json={"name": "A", "platform": "Google", "type": "banner"})

    response = await client.get("/metrics")

    assert response.status_code == 200
    assert "adtracker_ads_created_total" in response.text
    assert "adtracker_http_requests_total" in response.text


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/api/ads", "/api/ads"),
        ("/api/ads/4f9c2a7d", "/api/ads/{id}"),
        ("/api/revenue/r1", "/api/revenue/{id}"),
        ("/api/stats", "/api/stats"),
        ("/health", "/health"),
    ],
)
def test_normalize_path(path: str, expected: str) -> None:
    assert normalize_path(path) == expected


@pytest.mark.asyncio
async def test_request_metrics_recorded(client: AsyncClient) -> None:
    labels = {"method": "DELETE", "endpoint": "/api/ads/{id}"}
    before = REGISTRY.get_sample_value(
        "adtracker_http_requests_total", {**labels, "status": "404"}
    ) or 0.0

    response = await client.delete("/api/ads/missing")

    assert response.status_code == 404
    assert REGISTRY.get_sample_value(
        "adtracker_http_requests_total", {**labels, "status": "404"}
    ) == before + 1
    assert REGISTRY.get_sample_value("adtracker_http_requests_in_progress", labels) == 0.0
    assert REGISTRY.get_sample_value("adtracker_http_request_duration_seconds_count", labels) >= 1
