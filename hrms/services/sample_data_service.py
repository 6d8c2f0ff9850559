"""
Idempotent seeding of reference data: activity types, dashboard tiles,
quick actions and the default navigation menu with per-role permissions.

Rows are matched by name or key; existing rows are only rewritten when
``force`` is set.
"""
from typing import List, Optional

from hrms.core.logging import get_logger
from hrms.models import DashboardStat, MenuItem, QuickAction, UserRoleEnum, utcnow
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.dashboard_repository import DashboardRepository
from hrms.repositories.menu_repository import MenuRepository
from hrms.schemas.system import SampleDataResult
from hrms.services.menu_service import get_allowed_routes

logger = get_logger(__name__)

ADMIN_ROLES = "Admin,SuperAdmin,HRAdmin"

DEFAULT_ACTIVITY_TYPES = [
    {"name": "Login", "description": "User login event", "icon_name": "Login", "color": "#4caf50"},
    {"name": "Profile Update", "description": "User profile updated", "icon_name": "Person", "color": "#2196f3"},
    {"name": "Task Completed", "description": "Task marked as completed", "icon_name": "CheckCircle", "color": "#ff9800"},
    {"name": "Document Upload", "description": "Document uploaded", "icon_name": "Upload", "color": "#9c27b0"},
]

DEFAULT_STATS = [
    {
        "stat_key": "total_employees", "stat_name": "Total Employees", "stat_value": "42",
        "stat_color": "#1976d2", "icon_name": "People", "subtitle": "Active employees",
        "applicable_roles": ADMIN_ROLES, "sort_order": 1,
    },
    {
        "stat_key": "pending_tasks", "stat_name": "Pending Tasks", "stat_value": "8",
        "stat_color": "#f57c00", "icon_name": "Assignment", "subtitle": "Requires attention",
        "applicable_roles": ADMIN_ROLES, "sort_order": 2,
    },
    {
        "stat_key": "active_sessions", "stat_name": "Active Sessions", "stat_value": "15",
        "stat_color": "#388e3c", "icon_name": "Security", "subtitle": "Logged in users",
        "applicable_roles": "SuperAdmin", "sort_order": 3,
    },
    {
        "stat_key": "system_health", "stat_name": "System Health", "stat_value": "98%",
        "stat_color": "#4caf50", "icon_name": "Health", "subtitle": "All systems operational",
        "applicable_roles": "SuperAdmin", "sort_order": 4,
    },
]

DEFAULT_QUICK_ACTIONS = [
    {
        "action_key": "manage_employees", "title": "Manage Employees", "description": "View and edit employee records",
        "icon_name": "People", "route": "/employees", "color": "#1976d2",
        "applicable_roles": ADMIN_ROLES, "sort_order": 1,
    },
    {
        "action_key": "employee_onboarding", "title": "Employee Onboarding", "description": "Start onboarding for new hires",
        "icon_name": "PersonAdd", "route": "/onboarding", "color": "#388e3c",
        "applicable_roles": ADMIN_ROLES, "sort_order": 2,
    },
    {
        "action_key": "system_reports", "title": "System Reports", "description": "Open HR reports",
        "icon_name": "Assessment", "route": "/reports", "color": "#f57c00",
        "applicable_roles": "Admin,SuperAdmin", "sort_order": 3,
    },
    {
        "action_key": "system_settings", "title": "System Settings", "description": "Configure the portal",
        "icon_name": "Settings", "route": "/settings", "color": "#7b1fa2",
        "applicable_roles": "SuperAdmin", "sort_order": 4,
    },
]

# (name, route, icon, sort_order, parent name)
DEFAULT_MENU = [
    ("Dashboard", "/dashboard", "Dashboard", 1, None),
    ("Employees", "/employees", "People", 2, None),
    ("Time & Attendance", "/time-attendance", "Schedule", 3, None),
    ("Leave Management", "/leave", "EventAvailable", 4, None),
    ("Onboarding", "/onboarding", "PersonAdd", 5, None),
    ("Reports", "/reports", "Assessment", 6, None),
    ("Settings", "/settings", "Settings", 7, None),
    ("Menu Management", "/menu-management", "Settings", 1, "Settings"),
    ("Profile", "/profile", "Person", 8, None),
]

EDITOR_ROLES = {UserRoleEnum.ADMIN.value, UserRoleEnum.SUPER_ADMIN.value}
MENU_MANAGEMENT_ROLES = {UserRoleEnum.SUPER_ADMIN.value}


def default_menu_grants(role: str, route: str) -> Optional[dict]:
    """
    Permission flags the default menu gives ``role`` on ``route``, or None
    when the role should not see it.
    """
    if route == "/menu-management":
        if role not in MENU_MANAGEMENT_ROLES:
            return None
        return {"can_view": True, "can_edit": True, "can_delete": True}

    if route not in get_allowed_routes(role):
        return None

    return {
        "can_view": True,
        "can_edit": role in EDITOR_ROLES,
        "can_delete": role == UserRoleEnum.SUPER_ADMIN.value,
    }


class SampleDataService:
    """Seeds reference data for new installations and development databases."""

    def __init__(
        self,
        activity_repository: ActivityRepository,
        dashboard_repository: DashboardRepository,
        menu_repository: MenuRepository,
    ):
        self.activity_repo = activity_repository
        self.dashboard_repo = dashboard_repository
        self.menu_repo = menu_repository

    async def seed(self, include_menu: bool = True, force: bool = False) -> SampleDataResult:
        """
        Insert every missing reference row.

        Args:
            include_menu: Also seed the navigation menu and permissions
            force: Overwrite existing rows with the defaults
        """
        types_created = await self.seed_activity_types(force)
        stats_created = await self.seed_dashboard_stats(force)
        actions_created = await self.seed_quick_actions(force)

        menu_created, permissions_written = 0, 0
        if include_menu:
            menu_created, permissions_written = await self.seed_menu(force)

        result = SampleDataResult(
            activity_types_created=types_created,
            stats_created=stats_created,
            quick_actions_created=actions_created,
            menu_items_created=menu_created,
            permissions_written=permissions_written,
        )
        logger.info("sample_data_seeded", force=force, **result.model_dump())
        return result

    async def seed_activity_types(self, force: bool = False) -> int:
        created = 0
        for spec in DEFAULT_ACTIVITY_TYPES:
            existing = await self.activity_repo.get_type_by_name(spec["name"])
            if existing is None:
                await self.activity_repo.create_type(is_active=True, **spec)
                created += 1
            elif force:
                _assign(existing, spec, is_active=True)
        return created

    async def seed_dashboard_stats(self, force: bool = False) -> int:
        created = 0
        for spec in DEFAULT_STATS:
            existing = await self.dashboard_repo.get_stat_by_key(spec["stat_key"])
            if existing is None:
                await self.dashboard_repo.add(DashboardStat(is_active=True, **spec))
                created += 1
            elif force:
                _assign(existing, spec, is_active=True, last_updated=utcnow())
        return created

    async def seed_quick_actions(self, force: bool = False) -> int:
        created = 0
        for spec in DEFAULT_QUICK_ACTIONS:
            existing = await self.dashboard_repo.get_quick_action_by_key(spec["action_key"])
            if existing is None:
                await self.dashboard_repo.add(QuickAction(is_active=True, **spec))
                created += 1
            elif force:
                _assign(existing, spec, is_active=True)
        return created

    async def seed_menu(self, force: bool = False) -> tuple[int, int]:
        """
        Seed the default menu and grant each role the items its allowed
        routes cover.

        Returns:
            Tuple of (menu items created, permission rows written)
        """
        created = 0
        permissions = 0
        items: dict = {}
        roles: List[str] = [role.value for role in UserRoleEnum]

        for name, route, icon, sort_order, parent_name in DEFAULT_MENU:
            item = await self.menu_repo.get_by_name(name)
            is_new = item is None
            if is_new:
                parent = items.get(parent_name) if parent_name else None
                item = await self.menu_repo.create(
                    name=name,
                    route=route,
                    icon=icon,
                    sort_order=sort_order,
                    parent_id=parent.id if parent else None,
                    is_active=True,
                )
                created += 1
            elif force:
                _assign(item, {"route": route, "icon": icon, "sort_order": sort_order}, is_active=True)
            items[name] = item

            if not (is_new or force):
                continue

            for role in roles:
                grants = default_menu_grants(role, route)
                if grants is None:
                    continue
                await self.menu_repo.upsert_permission(role, item.id, **grants)
                permissions += 1

        return created, permissions


def _assign(instance, values: dict, **extra) -> None:
    for field, value in {**values, **extra}.items():
        setattr(instance, field, value)
