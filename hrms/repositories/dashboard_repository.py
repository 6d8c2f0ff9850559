"""
DashboardRepository for role-filtered statistic tiles and quick actions.
"""
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.models import DashboardStat, QuickAction
from hrms.repositories.base import BaseRepository, applies_to_role


class DashboardRepository(BaseRepository[DashboardStat]):
    """Repository for DashboardStat and QuickAction models."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, DashboardStat)

    async def get_stats_for_role(self, role: str) -> List[DashboardStat]:
        """Active stats applicable to ``role``, ordered by sort_order."""
        result = await self.session.execute(
            select(DashboardStat)
            .where(
                DashboardStat.is_active == True,
                applies_to_role(DashboardStat.applicable_roles, role)
            )
            .order_by(DashboardStat.sort_order, DashboardStat.id)
        )
        return list(result.scalars().all())

    async def get_quick_actions_for_role(self, role: str) -> List[QuickAction]:
        """Active quick actions applicable to ``role``, ordered by sort_order."""
        result = await self.session.execute(
            select(QuickAction)
            .where(
                QuickAction.is_active == True,
                applies_to_role(QuickAction.applicable_roles, role)
            )
            .order_by(QuickAction.sort_order, QuickAction.id)
        )
        return list(result.scalars().all())

    async def get_stat_by_key(self, stat_key: str) -> Optional[DashboardStat]:
        """Find a stat by its key."""
        result = await self.session.execute(
            select(DashboardStat).where(DashboardStat.stat_key == stat_key)
        )
        return result.scalars().first()

    async def get_quick_action_by_key(self, action_key: str) -> Optional[QuickAction]:
        """Find a quick action by its key."""
        result = await self.session.execute(
            select(QuickAction).where(QuickAction.action_key == action_key)
        )
        return result.scalars().first()

    async def add(self, instance):
        """Insert a stat or quick action built by the caller."""
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def count_active_stats(self) -> int:
        """Count active stats."""
        return await self.count({"is_active": True})

    async def count_active_quick_actions(self) -> int:
        """Count active quick actions."""
        result = await self.session.execute(
            select(func.count()).select_from(QuickAction).where(QuickAction.is_active == True)
        )
        return result.scalar()
