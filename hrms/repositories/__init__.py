"""
Repositories package for data access layer.

This module exports all repository classes for easy importing
throughout the application.
"""
from hrms.repositories.base import BaseRepository, applies_to_role
from hrms.repositories.user_repository import UserRepository
from hrms.repositories.session_repository import SessionRepository
from hrms.repositories.employee_repository import DepartmentRepository, EmployeeRepository
from hrms.repositories.menu_repository import MenuRepository
from hrms.repositories.dashboard_repository import DashboardRepository
from hrms.repositories.activity_repository import ActivityRepository

__all__ = [
    "BaseRepository",
    "applies_to_role",
    "UserRepository",
    "SessionRepository",
    "EmployeeRepository",
    "DepartmentRepository",
    "MenuRepository",
    "DashboardRepository",
    "ActivityRepository",
]
