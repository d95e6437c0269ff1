"""Tests for health and info endpoints.

This module tests the core API endpoints including health checks,
system information, and root endpoint.
"""

from datetime import datetime
from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


def test_health_endpoint(client_no_db: TestClient):
    """Test GET /health endpoint returns healthy status."""
    response = client_no_db.get("/health")

    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert data["status"] == "healthy"
    assert set(data.keys()) == {"status", "timestamp"}
    datetime.fromisoformat(data["timestamp"])


def test_root_endpoint(client_no_db: TestClient):
    """Test GET / endpoint returns welcome message and links."""
    response = client_no_db.get("/")

    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert "Price Watch API" in data["message"]
    assert "version" in data
    assert data["docs"] == "/docs"
    assert data["health"] == "/health"
    assert data["api"] == "/api/v1/info"


def test_api_v1_info_endpoint(client: TestClient):
    """Test GET /api/v1/info checks the database through the request session."""
    response = client.get("/api/v1/info")

    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert set(data.keys()) == {
        "app_name",
        "version",
        "status",
        "database_connected",
        "timestamp",
    }
    assert data["app_name"] == "Price Watch API"
    assert data["version"] == "1.0.0"
    assert data["status"] == "running"
    assert data["database_connected"] is True


def test_info_reports_database_down(client: TestClient, test_db):
    failure = OperationalError("SELECT 1", {}, Exception("database is locked"))
    with patch.object(test_db, "execute", side_effect=failure):
        response = client.get("/api/v1/info")

    assert response.json()["database_connected"] is False


def test_openapi_lists_actions(client_no_db: TestClient):
    """Test that the OpenAPI schema documents every action."""
    response = client_no_db.get("/openapi.json")
    assert response.status_code == status.HTTP_200_OK

    paths = response.json()["paths"]
    assert "/health" in paths
    assert "/api/v1/info" in paths
    for action in (
        "createPriceWatchItem",
        "updatePriceWatchItem",
        "listPriceWatchItems",
        "addPriceSnapshot",
        "listPriceSnapshots",
    ):
        assert f"/api/v1/actions/{action}" in paths


def test_cors_headers_present(client_no_db: TestClient):
    """Test that CORS headers are returned for allowed origins."""
    response = client_no_db.get(
        "/health",
        headers={"Origin": "http://localhost:4321"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert "access-control-allow-origin" in response.headers
