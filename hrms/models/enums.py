"""
Enum definitions for roles and permissions.

Roles are stored as plain strings on users and permission rows, so these
enums list the known values without constraining the columns.
"""
from enum import Enum


class UserRoleEnum(str, Enum):
    """Roles recognised by the portal."""
    ADMIN = "Admin"
    SUPER_ADMIN = "SuperAdmin"
    HR_ADMIN = "HRAdmin"
    HR_MANAGER = "HR_Manager"
    EMPLOYEE = "Employee"


class MenuPermissionType(str, Enum):
    """Permission flags on a role/menu pair."""
    VIEW = "VIEW"
    EDIT = "EDIT"
    DELETE = "DELETE"


class EmployeeStatus(str, Enum):
    """Employment status values."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "OnLeave"
    TERMINATED = "Terminated"
