"""
Schemas package for API request and response models.
"""

from hrms.schemas.common import ApiResponse, CamelModel
from hrms.schemas.auth import (
    AuthStatusResponse,
    EmployeeDto,
    LoginRequest,
    LoginResponse,
    UserDto,
)
from hrms.schemas.dashboard import (
    DashboardConfig,
    DashboardStatItem,
    DashboardSummaryResponse,
    QuickActionItem,
    RecentActivityItem,
)
from hrms.schemas.menu import (
    Breadcrumb,
    MenuAccessResult,
    MenuItemDto,
    MenuPermissionDto,
    NavigationConfig,
)

__all__ = [
    "ApiResponse",
    "CamelModel",
    "AuthStatusResponse",
    "EmployeeDto",
    "LoginRequest",
    "LoginResponse",
    "UserDto",
    "DashboardConfig",
    "DashboardStatItem",
    "DashboardSummaryResponse",
    "QuickActionItem",
    "RecentActivityItem",
    "Breadcrumb",
    "MenuAccessResult",
    "MenuItemDto",
    "MenuPermissionDto",
    "NavigationConfig",
]
