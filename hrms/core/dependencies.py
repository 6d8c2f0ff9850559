"""
FastAPI dependency functions for session authentication and service wiring.
"""
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.database import get_db
from hrms.models.user import User
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.dashboard_repository import DashboardRepository
from hrms.repositories.employee_repository import EmployeeRepository
from hrms.repositories.menu_repository import MenuRepository
from hrms.repositories.session_repository import SessionRepository
from hrms.repositories.user_repository import UserRepository
from hrms.core.config import settings
from hrms.core.exceptions import (
    AuthenticationRequiredError,
    EnvironmentRestrictedError,
    SessionInvalidError,
    UserInactiveError,
)
from hrms.core.logging import bind_user_context
from hrms.core.security import extract_session_token
from hrms.services.activity_service import ActivityService
from hrms.services.auth_service import AuthService
from hrms.services.dashboard_service import DashboardService
from hrms.services.menu_service import MenuService
from hrms.services.sample_data_service import SampleDataService
from hrms.services.system_service import SystemService


def get_session_token(
    authorization: Optional[str] = Header(None),
    x_session_token: Optional[str] = Header(None),
) -> Optional[str]:
    """
    Extract the session token from the request headers.

    Args:
        authorization: ``Authorization: Bearer <token>`` header (preferred)
        x_session_token: ``X-Session-Token`` header

    Returns:
        Session token, or None when the request carries none
    """
    return extract_session_token(authorization, x_session_token)


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Get AuthService instance with injected repositories."""
    return AuthService(
        user_repository=UserRepository(db),
        session_repository=SessionRepository(db),
        employee_repository=EmployeeRepository(db),
        activity_service=ActivityService(ActivityRepository(db)),
    )


async def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Resolve the session token to the current user.

    Returns:
        User owning the active, unexpired session

    Raises:
        AuthenticationRequiredError: If no token was sent
        SessionInvalidError: If the session is unknown, closed or expired
        UserInactiveError: If the account was disabled after login
    """
    if not token:
        raise AuthenticationRequiredError()

    user = await auth_service.validate_session(token)
    if user is None:
        raise SessionInvalidError()

    if not user.is_active:
        raise UserInactiveError()

    bind_user_context(user.id, user.role)
    return user


def require_development() -> None:
    """
    Guard for development-only endpoints.

    Raises:
        EnvironmentRestrictedError: Outside the development environment
    """
    if not settings.is_development:
        raise EnvironmentRestrictedError()


def get_dashboard_service(db: AsyncSession = Depends(get_db)) -> DashboardService:
    """Get DashboardService instance with injected repositories."""
    return DashboardService(
        dashboard_repository=DashboardRepository(db),
        activity_repository=ActivityRepository(db),
    )


def get_menu_service(db: AsyncSession = Depends(get_db)) -> MenuService:
    """Get MenuService instance with injected repository."""
    return MenuService(menu_repository=MenuRepository(db))


def get_sample_data_service(db: AsyncSession = Depends(get_db)) -> SampleDataService:
    """Get SampleDataService instance with injected repositories."""
    return SampleDataService(
        activity_repository=ActivityRepository(db),
        dashboard_repository=DashboardRepository(db),
        menu_repository=MenuRepository(db),
    )


def get_system_service(db: AsyncSession = Depends(get_db)) -> SystemService:
    """Get SystemService instance bound to the request session."""
    return SystemService(db)
