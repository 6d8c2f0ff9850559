"""
Session authentication service: login with lockout, session issuance,
validation and logout.
"""
from datetime import timedelta
from typing import NamedTuple, Optional

from hrms.core.config import settings
from hrms.core.exceptions import (
    AccountDisabledError,
    AccountLockedError,
    AppException,
    InvalidCredentialsError,
    LoginError,
    UserAlreadyExistsError,
)
from hrms.core.logging import get_logger
from hrms.core.security import generate_session_token, hash_password, verify_password
from hrms.models import Employee, User, UserSession, utcnow
from hrms.repositories.employee_repository import EmployeeRepository
from hrms.repositories.session_repository import SessionRepository
from hrms.repositories.user_repository import UserRepository
from hrms.services.activity_service import ActivityService

logger = get_logger(__name__)


class LoginResult(NamedTuple):
    token: str
    user: User
    employee: Optional[Employee]


class AuthService:
    """Service for session-based authentication."""

    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        employee_repository: EmployeeRepository,
        activity_service: ActivityService,
    ):
        """
        Initialize auth service.

        Args:
            user_repository: User repository instance
            session_repository: Session repository instance
            employee_repository: Employee repository instance
            activity_service: Records login events in the activity feed
        """
        self.user_repo = user_repository
        self.session_repo = session_repository
        self.employee_repo = employee_repository
        self.activity_service = activity_service

    async def login(
        self,
        email: str,
        password: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> LoginResult:
        """
        Authenticate with email and password and open a session.

        A wrong password increments the user's failed-login counter and locks
        the account once the limit is reached. That bookkeeping is flushed
        before the error is raised, so the caller must commit on
        LoginFailedError.

        Returns:
            LoginResult with the session token, user and linked employee

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            AccountLockedError: Lockout window still open
            AccountDisabledError: User account is inactive
            LoginError: Any unexpected failure
        """
        try:
            return await self._login(email, password, ip_address, user_agent)
        except AppException:
            raise
        except Exception as exc:
            logger.error("login_error", email=email, error=str(exc), exc_info=True)
            raise LoginError() from exc

    async def _login(
        self,
        email: str,
        password: str,
        ip_address: Optional[str],
        user_agent: Optional[str],
    ) -> LoginResult:
        user = await self.user_repo.get_by_email(email)
        if user is None:
            logger.warning("login_failed_unknown_email", email=email, ip_address=ip_address)
            raise InvalidCredentialsError()

        # Lockout takes precedence over the password check
        if user.lockout_end is not None and user.lockout_end > utcnow():
            logger.warning("login_rejected_locked", user_id=user.id, lockout_end=user.lockout_end.isoformat())
            raise AccountLockedError()

        if not user.is_active:
            logger.warning("login_rejected_disabled", user_id=user.id)
            raise AccountDisabledError()

        if not verify_password(password, user.password_hash, user.salt):
            locked = await self.user_repo.record_failed_login(
                user,
                max_attempts=settings.max_failed_login_attempts,
                lockout=timedelta(minutes=settings.lockout_minutes),
            )
            logger.warning(
                "login_failed_invalid_password",
                user_id=user.id,
                failed_attempts=user.failed_login_attempts,
                locked=locked,
                ip_address=ip_address,
            )
            raise InvalidCredentialsError()

        await self.user_repo.reset_failed_logins(user)
        user_session = await self.create_session(user, ip_address, user_agent)

        employee = await self.employee_repo.get_by_user_id(user.id)
        await self.activity_service.log_login(user, employee, user_session.ip_address)

        logger.info(
            "login_succeeded",
            user_id=user.id,
            role=user.role,
            session_id=user_session.id,
            ip_address=ip_address,
        )

        return LoginResult(token=user_session.session_token, user=user, employee=employee)

    async def create_session(
        self,
        user: User,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> UserSession:
        """
        Issue a new session for ``user`` and stamp its last login.

        The session expires ``session_timeout_hours`` after creation.
        """
        now = utcnow()
        user_session = await self.session_repo.create_session(
            user_id=user.id,
            token=generate_session_token(),
            expires_at=now + timedelta(hours=settings.session_timeout_hours),
            ip_address=ip_address,
            user_agent=user_agent,
        )
        await self.user_repo.update_last_login(user, now)
        return user_session

    async def validate_session(self, token: Optional[str]) -> Optional[User]:
        """
        Resolve a session token to its user.

        Returns:
            The user of the active, unexpired session, or None
        """
        if not token:
            return None

        user_session = await self.session_repo.get_valid_session(token)
        if user_session is None:
            return None

        return user_session.user

    async def logout(self, token: Optional[str]) -> bool:
        """
        Deactivate the active session with this token.

        Returns:
            True if a session was deactivated, False if none was active
        """
        if not token:
            return False

        user_session = await self.session_repo.get_active_by_token(token)
        if user_session is None:
            return False

        await self.session_repo.deactivate(user_session)
        logger.info("logout_succeeded", user_id=user_session.user_id, session_id=user_session.id)
        return True

    async def get_employee(self, user: User) -> Optional[Employee]:
        """Employee record linked to ``user``, department loaded."""
        return await self.employee_repo.get_by_user_id(user.id)

    async def create_user(
        self,
        email: str,
        password: str,
        role: str,
        is_active: bool = True,
        must_change_password: bool = False,
    ) -> User:
        """
        Create a user with a freshly salted password hash.

        Raises:
            UserAlreadyExistsError: If the email is taken
        """
        existing = await self.user_repo.get_by_email(email)
        if existing:
            raise UserAlreadyExistsError(f"Email '{email}' already exists")

        password_hash, salt = hash_password(password)
        user = await self.user_repo.create(
            email=email.strip(),
            password_hash=password_hash,
            salt=salt,
            role=role,
            is_active=is_active,
            must_change_password=must_change_password,
            failed_login_attempts=0,
        )

        logger.info("user_created", user_id=user.id, role=role)
        return user
