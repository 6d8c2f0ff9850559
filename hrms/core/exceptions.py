"""
Custom exception classes and handlers.

Every error leaves the API in the same envelope the successful responses use:
``{"success": false, "message": ..., "data": null, "errors": [...]}``.
"""
from typing import Dict, List, Optional
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hrms.core.logging import get_logger

logger = get_logger(__name__)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: Optional[Dict[str, str]] = None,
        errors: Optional[List[str]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.headers = headers
        self.errors = errors or []
        super().__init__(detail)


class AuthenticationRequiredError(AppException):
    """No session token was presented."""

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class SessionInvalidError(AppException):
    """Session token is unknown, deactivated or expired."""

    def __init__(self, detail: str = "Session expired or invalid"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class LoginFailedError(AppException):
    """
    A login attempt was rejected.

    Raised after the attempt bookkeeping (failed counter, lockout) has been
    written, so callers commit before propagating.
    """

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class InvalidCredentialsError(LoginFailedError):
    """Unknown email or wrong password."""

    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(detail)


class AccountLockedError(LoginFailedError):
    """Too many failed logins; lockout window still open."""

    def __init__(self, detail: str = "Account is temporarily locked. Please try again later."):
        super().__init__(detail)


class AccountDisabledError(LoginFailedError):
    """User account has been deactivated by an administrator."""

    def __init__(self, detail: str = "Account is disabled. Please contact your administrator."):
        super().__init__(detail)


class LoginError(AppException):
    """Unexpected failure while processing a login."""

    def __init__(self, detail: str = "An error occurred during login. Please try again."):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail
        )


class UserInactiveError(AppException):
    """User account is inactive."""

    def __init__(self, detail: str = "User account is inactive"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )


class EnvironmentRestrictedError(AppException):
    """Endpoint only available in the development environment."""

    def __init__(self, detail: str = "This endpoint is only available in development"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )


class UserAlreadyExistsError(AppException):
    """User already exists."""

    def __init__(self, detail: str = "User already exists"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail
        )


def error_body(message: str, errors: Optional[List[str]] = None) -> dict:
    """Build the failure envelope."""
    return {
        "success": False,
        "message": message,
        "data": None,
        "errors": errors or [],
    }


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Global exception handler for AppException instances.

    Args:
        request: FastAPI request object
        exc: AppException instance

    Returns:
        JSONResponse with the failure envelope
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.detail, exc.errors),
        headers=exc.headers
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies as a 400 failure envelope."""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        errors.append(f"{location}: {message}" if location else message)

    logger.info(
        "request_validation_failed",
        path=request.url.path,
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid input data", errors),
    )
