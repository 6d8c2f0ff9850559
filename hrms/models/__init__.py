"""
Models package for database entities.

Exports all SQLAlchemy models and enums so that ``Base.metadata`` is fully
populated on import.
"""
from hrms.models.base import Base, CreatedAtMixin, TimestampMixin, utcnow
from hrms.models.enums import (
    EmployeeStatus,
    MenuPermissionType,
    UserRoleEnum,
)
from hrms.models.user import User
from hrms.models.user_session import UserSession
from hrms.models.department import Department
from hrms.models.employee import Employee
from hrms.models.menu import MenuItem, RoleMenuPermission
from hrms.models.dashboard import DashboardStat, QuickAction
from hrms.models.activity import ActivityType, RecentActivity

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "utcnow",

    # Enums
    "EmployeeStatus",
    "MenuPermissionType",
    "UserRoleEnum",

    # Models
    "User",
    "UserSession",
    "Department",
    "Employee",
    "MenuItem",
    "RoleMenuPermission",
    "DashboardStat",
    "QuickAction",
    "ActivityType",
    "RecentActivity",
]
