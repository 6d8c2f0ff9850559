"""
Pydantic schemas for authentication API requests and responses.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from hrms.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Request schema for email/password login."""

    email: str = Field(..., max_length=255, description="Account email address")
    password: str = Field(..., min_length=1, description="Password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """
        Require exactly one '@' that is neither the first nor the last
        character. Domains are not checked so legacy addresses such as
        ``jane@hr.local`` still log in.
        """
        stripped = v.strip()
        at = stripped.find("@")
        if at <= 0 or at == len(stripped) - 1 or stripped.count("@") != 1:
            raise ValueError("Invalid email address")
        return stripped

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "admin@tpa.example.com",
                "password": "Admin123!"
            }
        }
    )


class UserDto(CamelModel):
    """Public view of a user account."""

    id: int
    email: str
    role: str
    is_active: bool
    last_login: Optional[datetime] = None
    must_change_password: bool = False


class EmployeeDto(CamelModel):
    """Public view of an employee record."""

    id: int
    employee_number: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    position: Optional[str] = None
    department: Optional[str] = Field(None, description="Department name")
    status: str
    hire_date: Optional[datetime] = None
    onboarding_completed_date: Optional[datetime] = None

    @classmethod
    def from_employee(cls, employee) -> "EmployeeDto":
        """Build from an Employee whose department relationship is loaded."""
        return cls(
            id=employee.id,
            employee_number=employee.employee_number,
            first_name=employee.first_name,
            last_name=employee.last_name,
            full_name=employee.full_name,
            email=employee.email,
            position=employee.position,
            department=employee.department.name if employee.department else None,
            status=employee.status,
            hire_date=employee.hire_date,
            onboarding_completed_date=employee.onboarding_completed_date,
        )


class LoginResponse(CamelModel):
    """Successful login payload."""

    success: bool = True
    message: str = "Login successful"
    token: str = Field(..., description="Session token for the Authorization header")
    user: UserDto
    employee: Optional[EmployeeDto] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Login successful",
                "token": "q3Jw0yq...base64...==",
                "user": {
                    "id": 1,
                    "email": "admin@tpa.example.com",
                    "role": "Admin",
                    "isActive": True,
                    "lastLogin": "2024-05-01T08:30:00",
                    "mustChangePassword": False
                },
                "employee": None
            }
        }
    )


class AuthStatusResponse(CamelModel):
    """Current session status returned by /auth/me."""

    is_authenticated: bool
    user: Optional[UserDto] = None
    employee: Optional[EmployeeDto] = None


class AuthHealthResponse(CamelModel):
    """Health payload of the authentication service."""

    success: bool = True
    message: str = "Authentication service is healthy"
    timestamp: datetime
    service: str = "Authentication API"
