"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_liveness_endpoint(client: AsyncClient):
    """Test that liveness endpoint returns 200."""
    response = await client.get("/health/live")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "alive"


@pytest.mark.asyncio
async def test_liveness_endpoint_has_correlation_id(client: AsyncClient):
    """Test that even unlogged paths get a correlation id."""
    response = await client.get("/health/live")

    assert response.headers["X-Correlation-Id"]
