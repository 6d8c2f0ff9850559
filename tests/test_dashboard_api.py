# tests/test_dashboard_api.py

import pytest

from hrms.models import DashboardStat, QuickAction
from tests.conftest import ADMIN_EMAIL


@pytest.mark.asyncio
async def test_stats_for_admin(client, seeded, admin_headers):
    response = await client.get("/api/dashboard/stats/Admin", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [stat["title"] for stat in body["data"]] == ["Total Employees", "Pending Tasks"]
    first = body["data"][0]
    assert first == {
        "title": "Total Employees",
        "value": "42",
        "subtitle": "Active employees",
        "icon": "People",
        "color": "#1976d2",
    }


@pytest.mark.asyncio
async def test_stats_for_super_admin(client, seeded, admin_headers):
    response = await client.get("/api/dashboard/stats/SuperAdmin", headers=admin_headers)

    titles = [stat["title"] for stat in response.json()["data"]]
    assert titles == ["Total Employees", "Pending Tasks", "Active Sessions", "System Health"]


@pytest.mark.asyncio
async def test_stats_role_match_ignores_case(client, seeded, admin_headers):
    response = await client.get("/api/dashboard/stats/admin", headers=admin_headers)

    assert len(response.json()["data"]) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["Employee", "Admi", "min"])
async def test_stats_require_exact_role_membership(client, seeded, admin_headers, role):
    response = await client.get(f"/api/dashboard/stats/{role}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_stats_without_roles_apply_to_everyone(client, session_factory, admin_headers):
    async with session_factory() as session:
        session.add_all([
            DashboardStat(stat_key="announcements", stat_name="Announcements", stat_value="3",
                          stat_color="#0288d1", applicable_roles=None, sort_order=2),
            DashboardStat(stat_key="spaced", stat_name="Spaced Roles", stat_value="1",
                          stat_color="#0288d1", applicable_roles="Admin, Employee", sort_order=1),
            DashboardStat(stat_key="retired", stat_name="Retired", stat_value="0",
                          stat_color="#0288d1", applicable_roles=None, is_active=False, sort_order=0),
        ])
        await session.commit()

    response = await client.get("/api/dashboard/stats/Employee", headers=admin_headers)

    assert [stat["title"] for stat in response.json()["data"]] == ["Spaced Roles", "Announcements"]


@pytest.mark.asyncio
async def test_quick_actions_for_admin(client, seeded, admin_headers):
    response = await client.get("/api/dashboard/quick-actions/Admin", headers=admin_headers)

    assert response.status_code == 200
    actions = response.json()["data"]
    assert [action["key"] for action in actions] == [
        "manage_employees",
        "employee_onboarding",
        "system_reports",
    ]
    assert actions[0]["label"] == "Manage Employees"
    assert actions[0]["route"] == "/employees"


@pytest.mark.asyncio
async def test_quick_actions_for_hr_admin(client, seeded, admin_headers):
    response = await client.get("/api/dashboard/quick-actions/HRAdmin", headers=admin_headers)

    assert [action["key"] for action in response.json()["data"]] == [
        "manage_employees",
        "employee_onboarding",
    ]


@pytest.mark.asyncio
async def test_inactive_quick_action_hidden(client, session_factory, admin_headers):
    async with session_factory() as session:
        session.add(QuickAction(action_key="old", title="Old", color="#000000",
                                applicable_roles="Admin", is_active=False))
        await session.commit()

    response = await client.get("/api/dashboard/quick-actions/Admin", headers=admin_headers)

    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_dashboard_requires_session(client, seeded):
    response = await client.get("/api/dashboard/stats/Admin")

    assert response.status_code == 401
    assert response.json()["message"] == "Authentication required"


@pytest.mark.asyncio
async def test_recent_activities_after_login(client, seeded, admin_user, admin_headers):
    response = await client.get(f"/api/dashboard/recent-activities/{admin_user.id}", headers=admin_headers)

    assert response.status_code == 200
    activities = response.json()["data"]
    assert len(activities) == 1
    activity = activities[0]
    assert activity["activityType"] == "Login"
    assert activity["icon"] == "Login"
    assert activity["color"] == "#4caf50"
    assert activity["userName"] == ADMIN_EMAIL
    assert activity["description"].startswith("Successful login from")


@pytest.mark.asyncio
async def test_recent_activities_capped_at_ten_newest_first(client, seeded, admin_user, login):
    headers = None
    for _ in range(12):
        headers = await login(ADMIN_EMAIL, "Admin123!")

    response = await client.get(f"/api/dashboard/recent-activities/{admin_user.id}", headers=headers)

    activities = response.json()["data"]
    assert len(activities) == 10
    ids = [activity["id"] for activity in activities]
    assert ids == sorted(ids, reverse=True)


@pytest.mark.asyncio
async def test_summary(client, seeded, admin_user, admin_headers):
    response = await client.get(f"/api/dashboard/summary/{admin_user.id}", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Complete dashboard summary retrieved from database"

    data = body["data"]
    assert len(data["stats"]) == 2
    assert [action["key"] for action in data["quickActions"]] == [
        "manage_employees",
        "employee_onboarding",
        "system_reports",
    ]
    assert "description" not in data["quickActions"][0]
    assert data["recentActivities"][0]["userName"] == "admin"
    assert data["recentActivities"][0]["activityType"] == "Login"

    info = body["systemInfo"]
    assert info["timeZone"] == "UTC"
    assert info["dataSource"] == "Database-Driven"
    assert info["recordCounts"] == {"stats": 2, "actions": 3, "activities": 1}


@pytest.mark.asyncio
async def test_summary_with_role_override(client, seeded, admin_user, admin_headers):
    response = await client.get(
        f"/api/dashboard/summary/{admin_user.id}",
        params={"role": "SuperAdmin"},
        headers=admin_headers,
    )

    assert response.json()["systemInfo"]["recordCounts"]["stats"] == 4


@pytest.mark.asyncio
async def test_config(client, admin_headers):
    response = await client.get("/api/dashboard/config", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"] == {
        "refreshInterval": 30000,
        "showNotifications": True,
        "autoRefresh": True,
        "theme": "default",
        "dateFormat": "MM/dd/yyyy",
        "timeFormat": "12-hour",
        "isDatabaseDriven": True,
    }


@pytest.mark.asyncio
async def test_dashboard_test_endpoint_is_public(client, seeded):
    response = await client.get("/api/dashboard/test")

    assert response.status_code == 200
    counts = response.json()["data"]["counts"]
    assert counts == {
        "dashboardStats": 4,
        "quickActions": 4,
        "recentActivities": 0,
        "activityTypes": 4,
    }
