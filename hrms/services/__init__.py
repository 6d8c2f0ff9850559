"""
Services package for business logic layer.

Service classes implement authentication, dashboard assembly, menu access
control and reference-data seeding for the HR portal.
"""

from hrms.services.activity_service import ActivityService
from hrms.services.auth_service import AuthService, LoginResult
from hrms.services.dashboard_service import DashboardService
from hrms.services.menu_service import MenuService
from hrms.services.sample_data_service import SampleDataService
from hrms.services.system_service import SystemService

__all__ = [
    "ActivityService",
    "AuthService",
    "LoginResult",
    "DashboardService",
    "MenuService",
    "SampleDataService",
    "SystemService",
]
