"""
FastAPI router for authentication endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.database import get_db
from hrms.models import utcnow
from hrms.services.auth_service import AuthService
from hrms.schemas.common import ApiResponse
from hrms.schemas.auth import (
    AuthHealthResponse,
    AuthStatusResponse,
    EmployeeDto,
    LoginRequest,
    LoginResponse,
    UserDto,
)
from hrms.core.dependencies import get_auth_service, get_session_token
from hrms.core.exceptions import (
    AppException,
    AuthenticationRequiredError,
    LoginFailedError,
    SessionInvalidError,
)
from hrms.core.logging import get_logger
from hrms.core.request_context import get_client_ip, get_user_agent

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Login with email and password",
    description="Authenticate and open a session. Returns the session token, user and employee record."
)
async def login(
    login_request: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service)
) -> LoginResponse:
    """Login with email/password."""
    try:
        result = await auth_service.login(
            email=login_request.email,
            password=login_request.password,
            ip_address=get_client_ip(request),
            user_agent=get_user_agent(request),
        )
    except LoginFailedError:
        # Keep the failed-attempt counter and lockout
        await db.commit()
        raise
    except AppException:
        await db.rollback()
        raise

    await db.commit()

    return LoginResponse(
        token=result.token,
        user=UserDto.model_validate(result.user),
        employee=EmployeeDto.from_employee(result.employee) if result.employee else None,
    )


@router.post(
    "/logout",
    response_model=ApiResponse[None],
    summary="Logout",
    description="Deactivate the current session. Succeeds even without a valid session."
)
async def logout(
    token: Optional[str] = Depends(get_session_token),
    db: AsyncSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service)
) -> ApiResponse[None]:
    """Logout current session."""
    if not token:
        return ApiResponse.ok(message="Already logged out")

    logged_out = await auth_service.logout(token)
    await db.commit()

    if logged_out:
        return ApiResponse.ok(message="Logged out successfully")
    return ApiResponse.ok(message="Session already invalidated")


@router.get(
    "/me",
    response_model=ApiResponse[AuthStatusResponse],
    summary="Get current session",
    description="Returns the user and employee record behind the presented session token."
)
async def get_current_session(
    token: Optional[str] = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> ApiResponse[AuthStatusResponse]:
    """Get current authenticated user."""
    if not token:
        raise AuthenticationRequiredError("Not authenticated")

    user = await auth_service.validate_session(token)
    if user is None:
        raise SessionInvalidError()

    employee = await auth_service.get_employee(user)

    return ApiResponse.ok(
        AuthStatusResponse(
            is_authenticated=True,
            user=UserDto.model_validate(user),
            employee=EmployeeDto.from_employee(employee) if employee else None,
        )
    )


@router.get(
    "/health",
    response_model=AuthHealthResponse,
    summary="Authentication service health"
)
async def auth_health() -> AuthHealthResponse:
    return AuthHealthResponse(timestamp=utcnow())
