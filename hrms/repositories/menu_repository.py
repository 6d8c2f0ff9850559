"""
MenuRepository for navigation items and role permissions.
"""
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hrms.models import MenuItem, RoleMenuPermission
from hrms.repositories.base import BaseRepository


class MenuRepository(BaseRepository[MenuItem]):
    """Repository for MenuItem and RoleMenuPermission models."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, MenuItem)

    async def get_top_level_menu(self) -> List[MenuItem]:
        """
        Get active top-level menu items ordered by sort_order.

        Children and every item's role permissions are loaded eagerly;
        callers skip inactive children.
        """
        result = await self.session.execute(
            select(MenuItem)
            .options(
                selectinload(MenuItem.role_permissions),
                selectinload(MenuItem.children).selectinload(MenuItem.role_permissions),
            )
            .where(MenuItem.parent_id.is_(None), MenuItem.is_active == True)
            .order_by(MenuItem.sort_order, MenuItem.id)
        )
        return list(result.scalars().all())

    async def get_active_by_name(self, name: str) -> Optional[MenuItem]:
        """Find an active menu item by name with its permissions loaded."""
        result = await self.session.execute(
            select(MenuItem)
            .options(selectinload(MenuItem.role_permissions))
            .where(MenuItem.name == name, MenuItem.is_active == True)
            .order_by(MenuItem.id)
        )
        return result.scalars().first()

    async def get_by_name(self, name: str) -> Optional[MenuItem]:
        """Find a menu item by name regardless of state."""
        result = await self.session.execute(
            select(MenuItem).where(MenuItem.name == name).order_by(MenuItem.id)
        )
        return result.scalars().first()

    async def get_permission(self, role: str, menu_item_id: int) -> Optional[RoleMenuPermission]:
        """Get the permission row for a role on one menu item."""
        result = await self.session.execute(
            select(RoleMenuPermission).where(
                RoleMenuPermission.role == role,
                RoleMenuPermission.menu_item_id == menu_item_id
            )
        )
        return result.scalar_one_or_none()

    async def upsert_permission(
        self,
        role: str,
        menu_item_id: int,
        can_view: bool = True,
        can_edit: bool = False,
        can_delete: bool = False
    ) -> RoleMenuPermission:
        """Create or overwrite the permission row for a role/menu pair."""
        permission = await self.get_permission(role, menu_item_id)
        if permission is None:
            permission = RoleMenuPermission(role=role, menu_item_id=menu_item_id)
            self.session.add(permission)
        permission.can_view = can_view
        permission.can_edit = can_edit
        permission.can_delete = can_delete
        await self.session.flush()
        return permission

    async def count_active(self) -> int:
        """Count active menu items."""
        return await self.count({"is_active": True})

    async def count_permissions(self) -> int:
        """Count role/menu permission rows."""
        result = await self.session.execute(
            select(func.count()).select_from(RoleMenuPermission)
        )
        return result.scalar()
