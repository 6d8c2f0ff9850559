# tests/test_menu.py

import pytest

from hrms.repositories.menu_repository import MenuRepository
from hrms.services.menu_service import MenuService, build_breadcrumbs, get_allowed_routes


def _names(items):
    return [item["name"] for item in items]


# --- Pure helpers ---
@pytest.mark.parametrize(
    "role, expected",
    [
        ("Admin", ["/dashboard", "/employees", "/time-attendance", "/leave", "/onboarding", "/reports", "/settings"]),
        ("superadmin", ["/dashboard", "/employees", "/time-attendance", "/leave", "/onboarding", "/reports", "/settings"]),
        ("HR_Manager", ["/dashboard", "/employees", "/leave", "/onboarding", "/reports"]),
        ("HRAdmin", ["/dashboard", "/employees", "/leave", "/onboarding", "/reports"]),
        ("Employee", ["/dashboard", "/time-attendance", "/leave", "/profile"]),
        ("Contractor", ["/dashboard", "/profile"]),
        (None, ["/dashboard", "/profile"]),
    ],
)
def test_allowed_routes(role, expected):
    assert get_allowed_routes(role) == expected


def test_allowed_routes_returns_copy():
    routes = get_allowed_routes("Admin")
    routes.append("/secret")
    assert "/secret" not in get_allowed_routes("Admin")


def test_breadcrumbs_for_dashboard():
    crumbs = build_breadcrumbs("/dashboard")
    assert [(c.name, c.route, c.icon) for c in crumbs] == [("Dashboard", "/dashboard", "Dashboard")]
    assert build_breadcrumbs(None) == crumbs
    assert build_breadcrumbs("") == crumbs


def test_breadcrumbs_for_known_route():
    crumbs = build_breadcrumbs("/Employees")
    assert [(c.name, c.route, c.icon) for c in crumbs] == [
        ("Dashboard", "/dashboard", "Dashboard"),
        ("Employees", "/employees", "People"),
    ]


def test_breadcrumbs_for_unknown_route():
    crumbs = build_breadcrumbs("/payroll/run")
    assert [(c.name, c.route, c.icon) for c in crumbs][-1] == ("Page", "/payroll/run", "Page")


# --- Service ---
@pytest.mark.asyncio
async def test_check_permission_types(db_session, seeded):
    service = MenuService(MenuRepository(db_session))

    assert await service.check_permission("Admin", "Employees") is True
    assert await service.check_permission("Admin", "Employees", "EDIT") is True
    assert await service.check_permission("Admin", "Employees", "delete") is False
    assert await service.check_permission("SuperAdmin", "Employees", "DELETE") is True
    assert await service.check_permission("Admin", "Employees", "APPROVE") is False
    assert await service.check_permission("Employee", "Employees") is False
    assert await service.check_permission("Admin", "Payroll") is False


@pytest.mark.asyncio
async def test_inactive_item_denies_access(db_session, menu_item_factory):
    await menu_item_factory("Archive", "/archive", is_active=False, permissions={"Admin": (True, True, True)})
    service = MenuService(MenuRepository(db_session))

    assert await service.check_permission("Admin", "Archive") is False


@pytest.mark.asyncio
async def test_children_filtered_by_their_own_permission(db_session, menu_item_factory):
    parent = await menu_item_factory("Reports", "/reports", permissions={"HRAdmin": (True, False, False)})
    await menu_item_factory("Payroll Report", "/reports/payroll", sort_order=2, parent_id=parent.id,
                            permissions={"HRAdmin": (True, False, False)})
    await menu_item_factory("Audit Report", "/reports/audit", sort_order=1, parent_id=parent.id,
                            permissions={"Admin": (True, False, False)})
    await menu_item_factory("Old Report", "/reports/old", sort_order=0, parent_id=parent.id, is_active=False,
                            permissions={"HRAdmin": (True, False, False)})
    await menu_item_factory("Hidden", "/hidden", permissions={"HRAdmin": (False, False, False)})

    service = MenuService(MenuRepository(db_session))
    menu = await service.get_menu_for_role("HRAdmin")

    assert [item.name for item in menu] == ["Reports"]
    assert [child.name for child in menu[0].children] == ["Payroll Report"]


# --- API ---
@pytest.mark.asyncio
async def test_menu_for_admin(client, seeded, admin_headers):
    response = await client.get("/api/menu/items", headers=admin_headers)

    assert response.status_code == 200
    items = response.json()["data"]
    assert _names(items) == [
        "Dashboard",
        "Employees",
        "Time & Attendance",
        "Leave Management",
        "Onboarding",
        "Reports",
        "Settings",
    ]
    assert items[0]["permissions"] == {"canView": True, "canEdit": True, "canDelete": False}
    assert items[-1]["children"] == []


@pytest.mark.asyncio
async def test_menu_for_super_admin_includes_menu_management(client, seeded, admin_headers):
    response = await client.get("/api/menu/items", params={"role": "SuperAdmin"}, headers=admin_headers)

    items = response.json()["data"]
    settings_item = items[-1]
    assert settings_item["name"] == "Settings"
    assert _names(settings_item["children"]) == ["Menu Management"]
    assert settings_item["children"][0]["parentId"] == settings_item["id"]


@pytest.mark.asyncio
async def test_menu_for_employee_role(client, seeded, admin_headers):
    response = await client.get("/api/menu/items", params={"role": "employee"}, headers=admin_headers)

    items = response.json()["data"]
    assert _names(items) == ["Dashboard", "Time & Attendance", "Leave Management", "Profile"]
    assert all(item["permissions"]["canEdit"] is False for item in items)


@pytest.mark.asyncio
async def test_menu_requires_session(client, seeded):
    response = await client.get("/api/menu/items")
    assert response.status_code == 401

    response = await client.get("/api/menu/items", headers={"Authorization": "Bearer stale"})
    assert response.status_code == 401
    assert response.json()["message"] == "Session expired or invalid"


@pytest.mark.asyncio
async def test_menu_access_uses_callers_role(client, seeded, user_factory, login):
    await user_factory("staff@tpa-hr.com", "Staff123!", role="Employee")
    headers = await login("staff@tpa-hr.com", "Staff123!")

    response = await client.get("/api/menu/access/Employees", headers=headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"hasAccess": False, "menuName": "Employees", "userRole": "Employee"}

    response = await client.get("/api/menu/access/Leave Management", headers=headers)
    assert response.json()["data"]["hasAccess"] is True


@pytest.mark.asyncio
async def test_navigation_config(client, user_factory, login):
    await user_factory("manager@tpa-hr.com", "Manager123!", role="HR_Manager")
    headers = await login("manager@tpa-hr.com", "Manager123!")

    response = await client.get("/api/menu/dashboard-config", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"] == {
        "showSidebar": True,
        "defaultRoute": "/dashboard",
        "allowedRoutes": ["/dashboard", "/employees", "/leave", "/onboarding", "/reports"],
        "navigationStyle": "tabs",
        "theme": "default",
    }


@pytest.mark.asyncio
async def test_breadcrumbs_endpoint(client, admin_headers):
    response = await client.get(
        "/api/menu/breadcrumbs",
        params={"currentRoute": "/leave"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"] == [
        {"name": "Dashboard", "route": "/dashboard", "icon": "Dashboard"},
        {"name": "Leave Management", "route": "/leave", "icon": "EventAvailable"},
    ]


@pytest.mark.asyncio
async def test_menu_test_endpoint(client):
    response = await client.get("/api/menu/test")

    assert response.status_code == 200
    assert "GET /api/menu/items" in response.json()["data"]["endpoints"]
