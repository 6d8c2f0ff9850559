"""
Menu visibility and navigation access control.

Visibility is decided per role by RoleMenuPermission rows: an item is shown
when the role's row on that item grants VIEW. Children are filtered with
their own rows.
"""
from typing import Dict, List, Optional, Tuple

from hrms.core.logging import get_logger
from hrms.models import MenuItem, MenuPermissionType, RoleMenuPermission
from hrms.repositories.menu_repository import MenuRepository
from hrms.schemas.menu import Breadcrumb, MenuItemDto, MenuPermissionDto, NavigationConfig

logger = get_logger(__name__)

FULL_ACCESS_ROUTES = [
    "/dashboard", "/employees", "/time-attendance", "/leave", "/onboarding", "/reports", "/settings",
]
HR_ROUTES = ["/dashboard", "/employees", "/leave", "/onboarding", "/reports"]
EMPLOYEE_ROUTES = ["/dashboard", "/time-attendance", "/leave", "/profile"]
DEFAULT_ROUTES = ["/dashboard", "/profile"]

ALLOWED_ROUTES: Dict[str, List[str]] = {
    "admin": FULL_ACCESS_ROUTES,
    "superadmin": FULL_ACCESS_ROUTES,
    "hradmin": HR_ROUTES,
    "hr_manager": HR_ROUTES,
    "employee": EMPLOYEE_ROUTES,
}

# route -> (name, icon)
BREADCRUMB_ROUTES: Dict[str, Tuple[str, str]] = {
    "/employees": ("Employees", "People"),
    "/time-attendance": ("Time & Attendance", "Schedule"),
    "/leave": ("Leave Management", "EventAvailable"),
    "/onboarding": ("Onboarding", "PersonAdd"),
    "/reports": ("Reports", "Assessment"),
    "/settings": ("Settings", "Settings"),
    "/menu-management": ("Menu Management", "Settings"),
}

DASHBOARD_CRUMB = Breadcrumb(name="Dashboard", route="/dashboard", icon="Dashboard")


def get_allowed_routes(role: Optional[str]) -> List[str]:
    """Routes the dashboard shell exposes to ``role``."""
    return list(ALLOWED_ROUTES.get((role or "").lower(), DEFAULT_ROUTES))


def build_breadcrumbs(current_route: Optional[str]) -> List[Breadcrumb]:
    """
    Breadcrumb trail for a route. The trail always starts at the dashboard;
    unknown routes get a generic "Page" crumb.
    """
    crumbs = [DASHBOARD_CRUMB]
    if not current_route or current_route == "/dashboard":
        return crumbs

    known = BREADCRUMB_ROUTES.get(current_route.lower())
    if known:
        name, icon = known
        crumbs.append(Breadcrumb(name=name, route=current_route.lower(), icon=icon))
    else:
        crumbs.append(Breadcrumb(name="Page", route=current_route, icon="Page"))
    return crumbs


def permission_grants(permission: Optional[RoleMenuPermission], permission_type: str) -> bool:
    """Whether a permission row grants VIEW, EDIT or DELETE."""
    if permission is None:
        return False

    try:
        wanted = MenuPermissionType(permission_type.upper())
    except ValueError:
        return False

    if wanted is MenuPermissionType.VIEW:
        return permission.can_view
    if wanted is MenuPermissionType.EDIT:
        return permission.can_edit
    return permission.can_delete


class MenuService:
    """Resolves menus and access checks for a role."""

    def __init__(self, menu_repository: MenuRepository):
        self.menu_repo = menu_repository

    async def get_menu_for_role(self, role: str) -> List[MenuItemDto]:
        """
        Active top-level items the role can view, each with its viewable
        active children, ordered by sort_order.
        """
        items = await self.menu_repo.get_top_level_menu()

        menu = []
        for item in items:
            dto = self._visible_item(item, role)
            if dto is None:
                continue
            children = sorted(
                (child for child in item.children if child.is_active),
                key=lambda child: (child.sort_order, child.id),
            )
            for child in children:
                child_dto = self._visible_item(child, role)
                if child_dto is not None:
                    dto.children.append(child_dto)
            menu.append(dto)

        logger.debug("menu_resolved", role=role, items=len(menu))
        return menu

    async def check_permission(
        self,
        role: str,
        menu_name: str,
        permission_type: str = MenuPermissionType.VIEW.value,
    ) -> bool:
        """
        Whether ``role`` holds ``permission_type`` on the active menu item
        named ``menu_name``. Unknown items and permission types deny.
        """
        item = await self.menu_repo.get_active_by_name(menu_name)
        if item is None:
            return False
        return permission_grants(item.permission_for(role), permission_type)

    @staticmethod
    def get_navigation_config(role: Optional[str]) -> NavigationConfig:
        return NavigationConfig(allowed_routes=get_allowed_routes(role))

    @staticmethod
    def _visible_item(item: MenuItem, role: str) -> Optional[MenuItemDto]:
        permission = item.permission_for(role)
        if not permission_grants(permission, MenuPermissionType.VIEW.value):
            return None

        return MenuItemDto(
            id=item.id,
            name=item.name,
            route=item.route,
            icon=item.icon,
            parent_id=item.parent_id,
            sort_order=item.sort_order,
            is_active=item.is_active,
            permissions=MenuPermissionDto(
                can_view=permission.can_view,
                can_edit=permission.can_edit,
                can_delete=permission.can_delete,
            ),
        )
