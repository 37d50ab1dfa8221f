"""
Tests for revenue endpoints.
"""

from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def ad(client: AsyncClient, sample_ad: dict[str, Any]) -> dict[str, Any]:
    response = await client.post("/api/ads", json=sample_ad)
    return response.json()


@pytest.mark.asyncio
async def test_list_revenue_empty(client: AsyncClient) -> None:
    response = await client.get("/api/revenue")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_revenue(
    client: AsyncClient,
    ad: dict[str, Any],
    sample_revenue: dict[str, Any],
) -> None:
    response = await client.post("/api/revenue", json={**sample_revenue, "adId": ad["id"]})

    assert response.status_code == 201
    data = response.json()
    assert data == {
        "id": "id-2",
        "adId": ad["id"],
        "amount": 10.5,
        "impressions": 1000,
        "clicks": 50,
        "date": "2024-05-01",
        "createdAt": "2024-05-01T12:30:00.000Z",
    }
    assert (await client.get("/api/revenue")).json() == [data]


@pytest.mark.asyncio
async def test_create_revenue_with_date(
    client: AsyncClient,
    ad: dict[str, Any],
) -> None:
    body = {"adId": ad["id"], "amount": 3, "impressions": 30, "clicks": 0, "date": "2024-01-31"}

    response = await client.post("/api/revenue", json=body)

    assert response.status_code == 201
    assert response.json()["date"] == "2024-01-31"


@pytest.mark.asyncio
async def test_create_revenue_unknown_ad(client: AsyncClient) -> None:
    body = {"adId": "unknown", "amount": 10, "impressions": 100, "clicks": 5}

    response = await client.post("/api/revenue", json=body)

    assert response.status_code == 404
    assert response.json()["message"] == "Ad not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("ad_id", [123, ["x"], {"id": "x"}])
async def test_create_revenue_non_string_ad_id(client: AsyncClient, ad_id: Any) -> None:
    body = {"adId": ad_id, "amount": 10, "impressions": 100, "clicks": 5}

    response = await client.post("/api/revenue", json=body)

    assert response.status_code == 404
    assert response.json()["message"] == "Ad not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["adId", "amount", "impressions", "clicks"])
async def test_create_revenue_missing_field(
    client: AsyncClient,
    ad: dict[str, Any],
    sample_revenue: dict[str, Any],
    missing: str,
) -> None:
    body = {**sample_revenue, "adId": ad["id"]}
    del body[missing]

    response = await client.post("/api/revenue", json=body)

    assert response.status_code == 400
    assert response.json()["details"]["missing"] == [missing]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field,value",
    [
        ("amount", -1),
        ("amount", "ten"),
        ("impressions", -5),
        ("impressions", "lots"),
        ("clicks", "-1"),
        ("impressions", 18446744073709551616),
        ("clicks", 10**400),
        ("amount", 10**400),
        ("date", "not-a-date"),
    ],
)
async def test_create_revenue_invalid_field(
    client: AsyncClient,
    ad: dict[str, Any],
    sample_revenue: dict[str, Any],
    field: str,
    value: Any,
) -> None:
    body = {**sample_revenue, "adId": ad["id"], field: value}

    response = await client.post("/api/revenue", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"
    assert (await client.get("/api/revenue")).json() == []


@pytest.mark.asyncio
async def test_create_revenue_zero_values(client: AsyncClient, ad: dict[str, Any]) -> None:
    body = {"adId": ad["id"], "amount": 0, "impressions": 0, "clicks": 0}

    response = await client.post("/api/revenue", json=body)

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_delete_revenue(
    client: AsyncClient,
    ad: dict[str, Any],
    sample_revenue: dict[str, Any],
) -> None:
    entry = (await client.post("/api/revenue", json={**sample_revenue, "adId": ad["id"]})).json()

    response = await client.delete(f"/api/revenue/{entry['id']}")

    assert response.status_code == 204
    assert (await client.get("/api/revenue")).json() == []
    assert len((await client.get("/api/ads")).json()) == 1


@pytest.mark.asyncio
async def test_delete_revenue_not_found(client: AsyncClient) -> None:
    response = await client.delete("/api/revenue/missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Revenue entry not found"
