"""
FastAPI router for diagnostics and development tooling.

The create-* endpoints only work when ENVIRONMENT=development.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.database import get_db
from hrms.models import UserRoleEnum, utcnow
from hrms.models.user import User
from hrms.services.auth_service import AuthService
from hrms.services.sample_data_service import SampleDataService
from hrms.services.system_service import SystemService
from hrms.schemas.common import ApiResponse
from hrms.schemas.system import (
    AuthTestResult,
    DatabaseHealth,
    DatabaseStats,
    RoleDashboardData,
    SampleDataResult,
    TestUserResult,
)
from hrms.core.dependencies import (
    get_auth_service,
    get_current_user,
    get_sample_data_service,
    get_system_service,
    require_development,
)
from hrms.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/test", tags=["Diagnostics"])

TEST_USER_EMAIL = "testuser@tpa.com"
TEST_USER_PASSWORD = "Test123!"


@router.get("/health", response_model=ApiResponse[DatabaseHealth], summary="Database health")
async def database_health(
    system_service: SystemService = Depends(get_system_service)
) -> ApiResponse[DatabaseHealth]:
    return ApiResponse.ok(await system_service.get_health(), message="Database connection healthy")


@router.get("/auth-test", response_model=ApiResponse[AuthTestResult], summary="Echo the authenticated user")
async def auth_test(
    current_user: User = Depends(get_current_user)
) -> ApiResponse[AuthTestResult]:
    return ApiResponse.ok(
        AuthTestResult(
            user_id=current_user.id,
            email=current_user.email,
            role=current_user.role,
            authenticated_at=utcnow(),
        ),
        message="Authentication is working"
    )


@router.get("/db-stats", response_model=ApiResponse[DatabaseStats], summary="Row counts per table")
async def database_stats(
    system_service: SystemService = Depends(get_system_service)
) -> ApiResponse[DatabaseStats]:
    return ApiResponse.ok(await system_service.get_stats(), message="Complete database statistics retrieved")


@router.get(
    "/dashboard-data/{role}",
    response_model=ApiResponse[RoleDashboardData],
    summary="Everything a role sees"
)
async def role_dashboard_data(
    role: str,
    current_user: User = Depends(get_current_user),
    system_service: SystemService = Depends(get_system_service)
) -> ApiResponse[RoleDashboardData]:
    data = await system_service.get_role_dashboard_data(role)
    return ApiResponse.ok(data, message=f"Dashboard data for role {role} retrieved")


@router.post(
    "/create-sample-data",
    response_model=ApiResponse[SampleDataResult],
    dependencies=[Depends(require_development)],
    summary="Seed reference data (development only)"
)
async def create_sample_data(
    db: AsyncSession = Depends(get_db),
    sample_data_service: SampleDataService = Depends(get_sample_data_service)
) -> ApiResponse[SampleDataResult]:
    result = await sample_data_service.seed()
    await db.commit()
    return ApiResponse.ok(result, message="Sample data created successfully")


@router.post(
    "/create-test-user",
    response_model=ApiResponse[TestUserResult],
    dependencies=[Depends(require_development)],
    summary="Create the Admin test user (development only)"
)
async def create_test_user(
    db: AsyncSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service)
) -> ApiResponse[TestUserResult]:
    existing = await auth_service.user_repo.get_by_email(TEST_USER_EMAIL)
    if existing:
        return ApiResponse.ok(
            TestUserResult(email=TEST_USER_EMAIL, password=TEST_USER_PASSWORD, role=existing.role, created=False),
            message="Test user already exists"
        )

    user = await auth_service.create_user(
        email=TEST_USER_EMAIL,
        password=TEST_USER_PASSWORD,
        role=UserRoleEnum.ADMIN.value,
    )
    await db.commit()
    logger.info("test_user_created", user_id=user.id)

    return ApiResponse.ok(
        TestUserResult(email=TEST_USER_EMAIL, password=TEST_USER_PASSWORD, role=user.role, created=True),
        message="New test user created successfully"
    )
