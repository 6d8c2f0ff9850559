"""
Dashboard content assembly from the database-driven stat, quick-action and
activity tables.
"""
from typing import List

from hrms.core.config import settings
from hrms.models import RecentActivity, utcnow
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.dashboard_repository import DashboardRepository
from hrms.schemas.dashboard import (
    DashboardConfig,
    DashboardStatItem,
    DashboardSummaryData,
    DashboardSummaryResponse,
    QuickActionItem,
    QuickActionSummaryItem,
    RecentActivityItem,
    RecordCounts,
    SummaryActivityItem,
    SystemInfo,
)

RECENT_ACTIVITY_LIMIT = 10
SUMMARY_ACTIVITY_LIMIT = 5


class DashboardService:
    """Builds role-specific dashboard payloads."""

    def __init__(
        self,
        dashboard_repository: DashboardRepository,
        activity_repository: ActivityRepository,
    ):
        self.dashboard_repo = dashboard_repository
        self.activity_repo = activity_repository

    async def get_stats(self, role: str) -> List[DashboardStatItem]:
        """Stat tiles visible to ``role``."""
        stats = await self.dashboard_repo.get_stats_for_role(role)
        return [
            DashboardStatItem(
                title=stat.stat_name,
                value=stat.stat_value,
                subtitle=stat.subtitle,
                icon=stat.icon_name,
                color=stat.stat_color,
            )
            for stat in stats
        ]

    async def get_quick_actions(self, role: str) -> List[QuickActionItem]:
        """Quick actions visible to ``role``."""
        actions = await self.dashboard_repo.get_quick_actions_for_role(role)
        return [
            QuickActionItem(
                key=action.action_key,
                label=action.title,
                icon=action.icon_name,
                color=action.color,
                route=action.route,
                description=action.description,
            )
            for action in actions
        ]

    async def get_recent_activities(self, limit: int = RECENT_ACTIVITY_LIMIT) -> List[RecentActivityItem]:
        """Newest entries of the system-wide activity feed."""
        activities = await self.activity_repo.get_recent(limit)
        return [self._activity_item(activity) for activity in activities]

    async def get_summary(self, user_id: int, role: str) -> DashboardSummaryResponse:
        """
        Stats, quick actions and the five newest activities in one payload.

        ``user_id`` identifies the requesting dashboard; the feed itself is
        system-wide.
        """
        stats = await self.get_stats(role)
        actions = await self.get_quick_actions(role)
        activities = await self.activity_repo.get_recent(SUMMARY_ACTIVITY_LIMIT)

        data = DashboardSummaryData(
            stats=stats,
            quick_actions=[
                QuickActionSummaryItem(
                    key=action.key,
                    label=action.label,
                    icon=action.icon,
                    color=action.color,
                    route=action.route,
                )
                for action in actions
            ],
            recent_activities=[
                SummaryActivityItem(
                    id=activity.id,
                    description=activity.description,
                    timestamp=activity.created_at,
                    activity_type=activity.activity_type.name if activity.activity_type else "General",
                    user_name=activity.user.email.split("@")[0] if activity.user else "System",
                )
                for activity in activities
            ],
        )

        return DashboardSummaryResponse(
            data=data,
            system_info=SystemInfo(
                current_time=utcnow(),
                time_zone="UTC",
                version=settings.app_version,
                record_counts=RecordCounts(
                    stats=len(stats),
                    actions=len(actions),
                    activities=len(activities),
                ),
            ),
        )

    @staticmethod
    def get_config() -> DashboardConfig:
        """Client-side dashboard settings."""
        return DashboardConfig(
            refresh_interval=settings.dashboard_refresh_interval_ms,
            theme=settings.dashboard_theme,
            date_format=settings.dashboard_date_format,
            time_format=settings.dashboard_time_format,
        )

    async def get_counts(self) -> dict:
        """Row counts used by the diagnostic endpoints."""
        return {
            "dashboardStats": await self.dashboard_repo.count_active_stats(),
            "quickActions": await self.dashboard_repo.count_active_quick_actions(),
            "recentActivities": await self.activity_repo.count(),
            "activityTypes": await self.activity_repo.count_active_types(),
        }

    @staticmethod
    def _activity_item(activity: RecentActivity) -> RecentActivityItem:
        activity_type = activity.activity_type
        return RecentActivityItem(
            id=activity.id,
            description=activity.description,
            timestamp=activity.created_at,
            activity_type=activity_type.name if activity_type else "General",
            icon=(activity_type.icon_name if activity_type else None) or "Info",
            color=(activity_type.color if activity_type else None) or "#2196f3",
            user_name=activity.user.email if activity.user else "System",
        )
