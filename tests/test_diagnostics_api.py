# tests/test_diagnostics_api.py

import pytest

from hrms.core.config import settings
from hrms.api.diagnostics import TEST_USER_EMAIL, TEST_USER_PASSWORD


@pytest.mark.asyncio
async def test_root_and_health(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == settings.app_name

    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert "X-Correlation-ID" in response.headers


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    response = await client.get("/api/info", headers={"X-Correlation-ID": "req-123"})

    assert response.status_code == 200
    assert response.headers["X-Correlation-ID"] == "req-123"
    assert response.json()["sessionTimeoutHours"] == 8


@pytest.mark.asyncio
async def test_database_health(client, admin_user):
    response = await client.get("/api/test/health")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["databaseConnected"] is True
    assert data["userCount"] == 1
    assert data["employeeCount"] == 0
    assert data["environment"] == "development"


@pytest.mark.asyncio
async def test_db_stats(client, seeded, admin_employee, admin_headers):
    response = await client.get("/api/test/db-stats")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["users"] == 1
    assert data["activeUsers"] == 1
    assert data["employees"] == 1
    assert data["activeEmployees"] == 1
    assert data["departments"] == 1
    assert data["activeSessions"] == 1
    assert data["dashboardStats"] == 4
    assert data["quickActions"] == 4
    assert data["menuItems"] == 9
    assert data["recentActivities"] == 1
    assert data["activityTypes"] == 4
    assert data["rolePermissions"] > 0


@pytest.mark.asyncio
async def test_auth_test_echoes_user(client, admin_user, admin_headers):
    response = await client.get("/api/test/auth-test", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["userId"] == admin_user.id
    assert data["role"] == "Admin"


@pytest.mark.asyncio
async def test_auth_test_requires_session(client):
    response = await client.get("/api/test/auth-test")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_role_dashboard_data(client, seeded, admin_headers):
    response = await client.get("/api/test/dashboard-data/Employee", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["role"] == "Employee"
    assert data["stats"] == []
    assert data["quickActions"] == []
    assert [item["name"] for item in data["menuItems"]] == [
        "Dashboard",
        "Time & Attendance",
        "Leave Management",
        "Profile",
    ]
    assert len(data["recentActivities"]) == 1


@pytest.mark.asyncio
async def test_create_sample_data_is_idempotent(client):
    response = await client.post("/api/test/create-sample-data")

    assert response.status_code == 200
    first = response.json()["data"]
    assert first["activityTypesCreated"] == 4
    assert first["statsCreated"] == 4
    assert first["quickActionsCreated"] == 4
    assert first["menuItemsCreated"] == 9

    response = await client.post("/api/test/create-sample-data")

    second = response.json()["data"]
    assert second == {
        "activityTypesCreated": 0,
        "statsCreated": 0,
        "quickActionsCreated": 0,
        "menuItemsCreated": 0,
        "permissionsWritten": 0,
    }


@pytest.mark.asyncio
async def test_create_test_user_then_login(client):
    response = await client.post("/api/test/create-test-user")

    assert response.status_code == 200
    assert response.json()["message"] == "New test user created successfully"
    assert response.json()["data"]["created"] is True

    response = await client.post(
        "/api/auth/login",
        json={"email": TEST_USER_EMAIL, "password": TEST_USER_PASSWORD},
    )
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "Admin"

    response = await client.post("/api/test/create-test-user")
    assert response.json()["message"] == "Test user already exists"
    assert response.json()["data"]["created"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/test/create-sample-data", "/api/test/create-test-user"])
async def test_development_endpoints_blocked_in_production(client, monkeypatch, path):
    monkeypatch.setattr(settings, "environment", "production")

    response = await client.post(path)

    assert response.status_code == 403
    assert response.json()["success"] is False
    assert response.json()["message"] == "This endpoint is only available in development"
