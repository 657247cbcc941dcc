"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from cmsstore.main import create_app


@pytest.mark.asyncio
async def test_health_check_reports_starting_without_store():
    """Health endpoint should answer even before the store is built."""
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "starting"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_health_check_reports_enabled_features(cms_store):
    app = create_app()
    app.state.cms_store = cms_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    data = response.json()
    assert data["status"] == "healthy"
    assert data["features"] == {"menus": True, "translations": True, "versioning": True}
