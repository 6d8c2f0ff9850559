"""
ActivityRepository for activity types and the recent-activity feed.
"""
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hrms.models import ActivityType, RecentActivity
from hrms.repositories.base import BaseRepository


class ActivityRepository(BaseRepository[RecentActivity]):
    """Repository for RecentActivity and ActivityType models."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, RecentActivity)

    async def get_active_type_by_name(self, name: str) -> Optional[ActivityType]:
        """Find an active activity type by name."""
        result = await self.session.execute(
            select(ActivityType)
            .where(ActivityType.name == name, ActivityType.is_active == True)
            .order_by(ActivityType.id)
        )
        return result.scalars().first()

    async def get_type_by_name(self, name: str) -> Optional[ActivityType]:
        """Find an activity type by name regardless of state."""
        result = await self.session.execute(
            select(ActivityType).where(ActivityType.name == name).order_by(ActivityType.id)
        )
        return result.scalars().first()

    async def create_type(self, **kwargs) -> ActivityType:
        """Insert a new activity type."""
        activity_type = ActivityType(**kwargs)
        self.session.add(activity_type)
        await self.session.flush()
        return activity_type

    async def create_activity(self, **kwargs) -> RecentActivity:
        """Append a feed entry."""
        return await self.create(**kwargs)

    async def get_recent(self, limit: int = 10) -> List[RecentActivity]:
        """
        Newest feed entries first, with user and activity type loaded.

        Args:
            limit: Maximum number of entries to return
        """
        result = await self.session.execute(
            select(RecentActivity)
            .options(
                joinedload(RecentActivity.user),
                joinedload(RecentActivity.activity_type)
            )
            .order_by(RecentActivity.created_at.desc(), RecentActivity.id.desc())
            .limit(limit)
        )
        return list(result.unique().scalars().all())

    async def count_active_types(self) -> int:
        """Count active activity types."""
        result = await self.session.execute(
            select(func.count()).select_from(ActivityType).where(ActivityType.is_active == True)
        )
        return result.scalar()
