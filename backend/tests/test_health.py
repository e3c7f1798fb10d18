"""Health endpoint: reachable without a token, reports the database state."""

import pytest

from feedback import __version__


@pytest.mark.asyncio
async def test_health_reports_connected_database(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["version"] == __version__
    assert response.headers["X-Request-ID"]
