"""
Pydantic schemas for diagnostics and development tooling endpoints.
"""
from datetime import datetime
from typing import Dict, List, Optional

from hrms.schemas.common import CamelModel
from hrms.schemas.dashboard import DashboardStatItem, QuickActionItem, RecentActivityItem
from hrms.schemas.menu import MenuItemDto


class DatabaseHealth(CamelModel):
    database_connected: bool
    user_count: int
    employee_count: int
    version: str
    environment: str
    timestamp: datetime


class DatabaseStats(CamelModel):
    users: int
    active_users: int
    employees: int
    active_employees: int
    departments: int
    active_sessions: int
    dashboard_stats: int
    quick_actions: int
    menu_items: int
    role_permissions: int
    recent_activities: int
    activity_types: int


class AuthTestResult(CamelModel):
    user_id: int
    email: str
    role: str
    authenticated_at: datetime


class RoleDashboardData(CamelModel):
    role: str
    stats: List[DashboardStatItem]
    quick_actions: List[QuickActionItem]
    menu_items: List[MenuItemDto]
    recent_activities: List[RecentActivityItem]


class SampleDataResult(CamelModel):
    """Rows inserted by a sample-data run; existing rows are left alone."""

    activity_types_created: int
    stats_created: int
    quick_actions_created: int
    menu_items_created: int = 0
    permissions_written: int = 0


class TestUserResult(CamelModel):
    email: str
    password: Optional[str] = None
    role: str
    created: bool


class DiagnosticInfo(CamelModel):
    message: str
    timestamp: datetime
    endpoints: List[str]
    counts: Optional[Dict[str, int]] = None
