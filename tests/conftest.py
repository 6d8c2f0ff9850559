# tests/conftest.py

import os

# Settings and the application engine are built at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta
from typing import AsyncGenerator, Awaitable, Callable, Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hrms.core.security import hash_password
from hrms.database import get_db
from hrms.main import app
from hrms.models import (
    Base,
    Department,
    Employee,
    MenuItem,
    RoleMenuPermission,
    User,
    UserSession,
    utcnow,
)
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.dashboard_repository import DashboardRepository
from hrms.repositories.menu_repository import MenuRepository
from hrms.services.sample_data_service import SampleDataService

ADMIN_EMAIL = "admin@tpa-hr.com"
ADMIN_PASSWORD = "Admin123!"


# --- Database fixtures ---
@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test; StaticPool keeps one shared connection."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with get_db pointed at the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# --- Data factories ---
@pytest.fixture
def user_factory(session_factory) -> Callable[..., Awaitable[User]]:
    """Create and commit a user with a salted password hash."""

    async def _create_user(
        email: str,
        password: str = "Passw0rd!",
        role: str = "Employee",
        is_active: bool = True,
        **kwargs,
    ) -> User:
        password_hash, salt = hash_password(password)
        async with session_factory() as session:
            user = User(
                email=email,
                password_hash=password_hash,
                salt=salt,
                role=role,
                is_active=is_active,
                **kwargs,
            )
            session.add(user)
            await session.commit()
            return user

    return _create_user


@pytest_asyncio.fixture
async def admin_user(user_factory) -> User:
    return await user_factory(ADMIN_EMAIL, ADMIN_PASSWORD, role="Admin")


@pytest_asyncio.fixture
async def admin_employee(session_factory, admin_user) -> Employee:
    """Employee record in the People Operations department linked to the admin."""
    async with session_factory() as session:
        department = Department(name="People Operations", description="HR team")
        session.add(department)
        await session.flush()

        employee = Employee(
            employee_number="EMP-0001",
            first_name="Alex",
            last_name="Morgan",
            email="alex.morgan@tpa-hr.com",
            position="HR Director",
            department_id=department.id,
            user_id=admin_user.id,
            hire_date=datetime(2020, 3, 2),
        )
        session.add(employee)
        await session.commit()
        return employee


@pytest.fixture
def session_row_factory(session_factory) -> Callable[..., Awaitable[str]]:
    """Insert a session row directly, for expiry and deactivation scenarios."""

    async def _create_session(
        user: User,
        token: str,
        expires_at: Optional[datetime] = None,
        is_active: bool = True,
    ) -> str:
        async with session_factory() as session:
            session.add(
                UserSession(
                    user_id=user.id,
                    session_token=token,
                    expires_at=expires_at or utcnow() + timedelta(hours=1),
                    is_active=is_active,
                )
            )
            await session.commit()
        return token

    return _create_session


@pytest_asyncio.fixture
async def seeded(session_factory):
    """Default activity types, dashboard tiles, quick actions and menu."""
    async with session_factory() as session:
        service = SampleDataService(
            activity_repository=ActivityRepository(session),
            dashboard_repository=DashboardRepository(session),
            menu_repository=MenuRepository(session),
        )
        result = await service.seed()
        await session.commit()
    return result


@pytest.fixture
def menu_item_factory(session_factory) -> Callable[..., Awaitable[MenuItem]]:
    """Create a menu item with permissions given as {role: (view, edit, delete)}."""

    async def _create_item(
        name: str,
        route: str,
        sort_order: int = 0,
        parent_id: Optional[int] = None,
        is_active: bool = True,
        permissions: Optional[Dict[str, tuple]] = None,
    ) -> MenuItem:
        async with session_factory() as session:
            item = MenuItem(
                name=name,
                route=route,
                icon="Folder",
                sort_order=sort_order,
                parent_id=parent_id,
                is_active=is_active,
            )
            session.add(item)
            await session.flush()
            for role, (view, edit, delete) in (permissions or {}).items():
                session.add(
                    RoleMenuPermission(
                        role=role,
                        menu_item_id=item.id,
                        can_view=view,
                        can_edit=edit,
                        can_delete=delete,
                    )
                )
            await session.commit()
            return item

    return _create_item


# --- HTTP helpers ---
@pytest.fixture
def login(client) -> Callable[..., Awaitable[Dict[str, str]]]:
    """Log in through the API and return the Authorization header."""

    async def _login(email: str, password: str) -> Dict[str, str]:
        response = await client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest_asyncio.fixture
async def admin_headers(admin_user, login) -> Dict[str, str]:
    return await login(ADMIN_EMAIL, ADMIN_PASSWORD)
