"""
Tests for health check endpoint.
"""

import pytest
from httpx import AsyncClient

from fotocrm.config import get_settings


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health check endpoint returns OK status."""
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ["ok", "degraded"]


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient):
    """Test root endpoint returns API info."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "name" in data
    assert "version" in data
    assert data["api"] == "/api/v1"


@pytest.mark.asyncio
async def test_health_reports_service_name(client: AsyncClient):
    """Test health check names the configured service."""
    response = await client.get("/api/v1/health")

    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == get_settings().PROJECT_NAME
