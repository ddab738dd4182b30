"""Integration tests for health endpoints."""

from httpx import AsyncClient


async def test_root(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "API running"}


async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"
    assert "timestamp" in data


async def test_detailed_health_check(client: AsyncClient):
    response = await client.get("/health/detailed")

    assert response.status_code == 200
    data = response.json()
    assert data["database"] == "healthy"
    assert data["status"] == "healthy"


async def test_security_headers(client: AsyncClient):
    response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "X-Request-ID" in response.headers
