# tests/test_auth_service.py

from datetime import timedelta

import pytest

from hrms.core.exceptions import AccountLockedError, InvalidCredentialsError, UserAlreadyExistsError
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.employee_repository import EmployeeRepository
from hrms.repositories.session_repository import SessionRepository
from hrms.repositories.user_repository import UserRepository
from hrms.services.activity_service import ActivityService
from hrms.services.auth_service import AuthService


@pytest.fixture
def auth_service(db_session) -> AuthService:
    return AuthService(
        user_repository=UserRepository(db_session),
        session_repository=SessionRepository(db_session),
        employee_repository=EmployeeRepository(db_session),
        activity_service=ActivityService(ActivityRepository(db_session)),
    )


@pytest.mark.asyncio
async def test_create_user_and_login(auth_service, db_session):
    user = await auth_service.create_user("new.hire@tpa-hr.com", "Welcome1!", "Employee", must_change_password=True)
    await db_session.commit()

    assert user.password_hash != "Welcome1!"
    assert user.failed_login_attempts == 0

    result = await auth_service.login("new.hire@tpa-hr.com", "Welcome1!", ip_address="10.0.0.7")
    await db_session.commit()

    assert result.user.id == user.id
    assert result.employee is None
    assert result.user.last_login is not None
    assert await auth_service.validate_session(result.token) is result.user


@pytest.mark.asyncio
async def test_create_user_rejects_duplicate_email(auth_service, db_session, admin_user):
    with pytest.raises(UserAlreadyExistsError):
        await auth_service.create_user(admin_user.email.upper(), "Another1!", "Admin")


@pytest.mark.asyncio
async def test_login_creates_login_activity_type_when_missing(auth_service, db_session, admin_user):
    await auth_service.login(admin_user.email, "Admin123!")

    activity_type = await ActivityRepository(db_session).get_active_type_by_name("Login")
    assert activity_type is not None
    assert activity_type.icon_name == "Login"


@pytest.mark.asyncio
async def test_lockout_reached_after_limit(auth_service, db_session, admin_user):
    for _ in range(4):
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login(admin_user.email, "bad")

    user = await UserRepository(db_session).get_by_email(admin_user.email)
    assert user.failed_login_attempts == 4
    assert user.lockout_end is None

    with pytest.raises(InvalidCredentialsError):
        await auth_service.login(admin_user.email, "bad")
    assert user.lockout_end is not None

    with pytest.raises(AccountLockedError):
        await auth_service.login(admin_user.email, "Admin123!")
    # Rejected while locked without touching the counter
    assert user.failed_login_attempts == 5


@pytest.mark.asyncio
async def test_session_lifetime(auth_service, db_session, admin_user):
    user = await UserRepository(db_session).get_by_id(admin_user.id)

    user_session = await auth_service.create_session(user, "127.0.0.1", "pytest")

    assert user_session.expires_at - user.last_login == timedelta(hours=8)
    assert user_session.user_agent == "pytest"


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "unknown"])
async def test_validate_and_logout_unknown_tokens(auth_service, token):
    assert await auth_service.validate_session(token) is None
    assert await auth_service.logout(token) is False


@pytest.mark.asyncio
async def test_logout_deactivates_session(auth_service, db_session, admin_user, session_row_factory):
    token = await session_row_factory(admin_user, "open-session")

    assert await auth_service.logout(token) is True
    assert await auth_service.validate_session(token) is None
