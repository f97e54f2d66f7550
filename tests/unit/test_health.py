"""Unit tests for the health check endpoint."""

import pytest


@pytest.mark.asyncio
async def test_health_check_returns_ok(async_client):
    """Test that health check returns status ok."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_health_check_response_structure(async_client):
    """Test that health check response has correct structure."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert "status" in data
    assert "version" in data
    assert "agent_count" in data
    assert "bootstrap_complete" in data


@pytest.mark.asyncio
async def test_health_check_content_type(async_client):
    """Test that health check returns JSON content type."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    assert "application/json" in response.headers["content-type"]


@pytest.mark.asyncio
async def test_health_check_reports_directory(async_client, test_app):
    """Test that health check reports the directory size and bootstrap state."""
    await test_app.state.bootstrap_task

    response = await async_client.get("/api/v1/health")

    data = response.json()
    assert data["agent_count"] == 0
    assert data["bootstrap_complete"] is True


@pytest.mark.asyncio
async def test_health_check_without_service(async_client, test_app):
    """Test health check when the directory service is not initialized."""
    delattr(test_app.state, "directory_service")
    delattr(test_app.state, "bootstrap_task")

    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["agent_count"] is None
    assert data["bootstrap_complete"] is None
