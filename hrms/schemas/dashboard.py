"""
Pydantic schemas for dashboard content.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from hrms.schemas.common import CamelModel


class DashboardStatItem(CamelModel):
    """A statistic tile as rendered by the UI."""

    title: str
    value: str
    subtitle: Optional[str] = None
    icon: Optional[str] = None
    color: str


class QuickActionItem(CamelModel):
    """A quick-action shortcut."""

    key: str
    label: str
    icon: Optional[str] = None
    color: str
    route: Optional[str] = None
    description: Optional[str] = None


class QuickActionSummaryItem(CamelModel):
    """Quick action as embedded in the dashboard summary."""

    key: str
    label: str
    icon: Optional[str] = None
    color: str
    route: Optional[str] = None


class RecentActivityItem(CamelModel):
    """An entry of the activity feed."""

    id: int
    description: Optional[str] = None
    timestamp: datetime
    activity_type: str = Field("General", description="Activity type name")
    icon: str = "Info"
    color: str = "#2196f3"
    user_name: str = "System"


class SummaryActivityItem(CamelModel):
    """Activity feed entry as embedded in the dashboard summary."""

    id: int
    description: Optional[str] = None
    timestamp: datetime
    activity_type: str = "General"
    user_name: str = "System"


class DashboardSummaryData(CamelModel):
    stats: List[DashboardStatItem]
    quick_actions: List[QuickActionSummaryItem]
    recent_activities: List[SummaryActivityItem]


class RecordCounts(CamelModel):
    stats: int
    actions: int
    activities: int


class SystemInfo(CamelModel):
    current_time: datetime
    time_zone: str
    version: str
    data_source: str = "Database-Driven"
    record_counts: RecordCounts


class DashboardSummaryResponse(CamelModel):
    """Everything the dashboard needs in one response."""

    success: bool = True
    data: DashboardSummaryData
    system_info: SystemInfo
    message: str = "Complete dashboard summary retrieved from database"


class DashboardConfig(CamelModel):
    """Client-side dashboard behaviour."""

    refresh_interval: int
    show_notifications: bool = True
    auto_refresh: bool = True
    theme: str
    date_format: str
    time_format: str
    is_database_driven: bool = True
