"""
Database diagnostics used by the /test endpoints.
"""
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.core.config import settings
from hrms.core.logging import get_logger
from hrms.models import EmployeeStatus, utcnow
from hrms.repositories.activity_repository import ActivityRepository
from hrms.repositories.dashboard_repository import DashboardRepository
from hrms.repositories.employee_repository import DepartmentRepository, EmployeeRepository
from hrms.repositories.menu_repository import MenuRepository
from hrms.repositories.session_repository import SessionRepository
from hrms.repositories.user_repository import UserRepository
from hrms.schemas.system import DatabaseHealth, DatabaseStats, RoleDashboardData
from hrms.services.dashboard_service import DashboardService
from hrms.services.menu_service import MenuService

logger = get_logger(__name__)


class SystemService:
    """Read-only statistics over every table of the portal."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.session_repo = SessionRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.department_repo = DepartmentRepository(session)
        self.menu_repo = MenuRepository(session)
        self.dashboard_repo = DashboardRepository(session)
        self.activity_repo = ActivityRepository(session)

    async def get_health(self) -> DatabaseHealth:
        """Connectivity check plus headline counts."""
        await self.session.execute(text("SELECT 1"))
        return DatabaseHealth(
            database_connected=True,
            user_count=await self.user_repo.count(),
            employee_count=await self.employee_repo.count(),
            version=settings.app_version,
            environment=settings.environment,
            timestamp=utcnow(),
        )

    async def get_stats(self) -> DatabaseStats:
        """Row counts per table."""
        stats = DatabaseStats(
            users=await self.user_repo.count(),
            active_users=await self.user_repo.count_active(),
            employees=await self.employee_repo.count(),
            active_employees=await self.employee_repo.count_by_status(EmployeeStatus.ACTIVE.value),
            departments=await self.department_repo.count(),
            active_sessions=await self.session_repo.count_active(),
            dashboard_stats=await self.dashboard_repo.count_active_stats(),
            quick_actions=await self.dashboard_repo.count_active_quick_actions(),
            menu_items=await self.menu_repo.count_active(),
            role_permissions=await self.menu_repo.count_permissions(),
            recent_activities=await self.activity_repo.count(),
            activity_types=await self.activity_repo.count_active_types(),
        )
        logger.debug("database_stats_collected", **stats.model_dump())
        return stats

    async def get_role_dashboard_data(self, role: str) -> RoleDashboardData:
        """Everything a role would see, resolved in one call."""
        dashboard_service = DashboardService(self.dashboard_repo, self.activity_repo)
        menu_service = MenuService(self.menu_repo)
        return RoleDashboardData(
            role=role,
            stats=await dashboard_service.get_stats(role),
            quick_actions=await dashboard_service.get_quick_actions(role),
            menu_items=await menu_service.get_menu_for_role(role),
            recent_activities=await dashboard_service.get_recent_activities(),
        )
