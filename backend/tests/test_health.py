"""
Community Board Backend — Health and Middleware Tests
=======================================================
"""

import pytest


@pytest.mark.asyncio
async def test_health_reports_connected_store(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_request_id_is_echoed(test_client):
    response = await test_client.get("/users", headers={"X-Request-ID": "abc12345"})

    assert response.headers["X-Request-ID"] == "abc12345"


@pytest.mark.asyncio
async def test_request_id_is_generated(test_client):
    response = await test_client.get("/users")

    assert len(response.headers["X-Request-ID"]) == 8


@pytest.mark.asyncio
async def test_not_found_body_carries_request_id(test_client):
    response = await test_client.get("/users/99999", headers={"X-Request-ID": "rid-404"})

    assert response.status_code == 404
    assert response.json() == {
        "error": "not_found",
        "message": "user with ID '99999' was not found",
        "request_id": "rid-404",
    }
