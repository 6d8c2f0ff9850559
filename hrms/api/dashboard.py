"""
FastAPI router for role-based dashboard content.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from hrms.models.user import User
from hrms.services.dashboard_service import DashboardService
from hrms.schemas.common import ApiResponse
from hrms.schemas.dashboard import (
    DashboardConfig,
    DashboardStatItem,
    DashboardSummaryResponse,
    QuickActionItem,
    RecentActivityItem,
)
from hrms.schemas.system import DiagnosticInfo
from hrms.core.dependencies import get_current_user, get_dashboard_service
from hrms.core.logging import get_logger
from hrms.models import utcnow

logger = get_logger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/stats/{role}",
    response_model=ApiResponse[List[DashboardStatItem]],
    summary="Stat tiles for a role"
)
async def get_dashboard_stats(
    role: str,
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
) -> ApiResponse[List[DashboardStatItem]]:
    stats = await dashboard_service.get_stats(role)
    logger.info("dashboard_stats_retrieved", role=role, count=len(stats))
    return ApiResponse.ok(stats, message="Dashboard stats retrieved")


@router.get(
    "/quick-actions/{role}",
    response_model=ApiResponse[List[QuickActionItem]],
    summary="Quick actions for a role"
)
async def get_quick_actions(
    role: str,
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
) -> ApiResponse[List[QuickActionItem]]:
    actions = await dashboard_service.get_quick_actions(role)
    logger.info("quick_actions_retrieved", role=role, count=len(actions))
    return ApiResponse.ok(actions, message="Quick actions retrieved")


@router.get(
    "/recent-activities/{user_id}",
    response_model=ApiResponse[List[RecentActivityItem]],
    summary="Recent activity feed",
    description="The ten newest activities across the system."
)
async def get_recent_activities(
    user_id: int,
    role: Optional[str] = Query(None, description="Role of the requesting dashboard"),
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
) -> ApiResponse[List[RecentActivityItem]]:
    activities = await dashboard_service.get_recent_activities()
    return ApiResponse.ok(activities, message="Recent activities retrieved")


@router.get(
    "/summary/{user_id}",
    response_model=DashboardSummaryResponse,
    summary="Complete dashboard payload"
)
async def get_dashboard_summary(
    user_id: int,
    role: Optional[str] = Query(None, description="Role to render; defaults to the caller's role"),
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
) -> DashboardSummaryResponse:
    return await dashboard_service.get_summary(user_id, role or current_user.role)


@router.get(
    "/config",
    response_model=ApiResponse[DashboardConfig],
    summary="Client-side dashboard configuration"
)
async def get_dashboard_config(
    current_user: User = Depends(get_current_user)
) -> ApiResponse[DashboardConfig]:
    return ApiResponse.ok(DashboardService.get_config(), message="Dashboard configuration retrieved")


@router.get(
    "/test",
    response_model=ApiResponse[DiagnosticInfo],
    summary="Dashboard diagnostics"
)
async def dashboard_test(
    dashboard_service: DashboardService = Depends(get_dashboard_service)
) -> ApiResponse[DiagnosticInfo]:
    counts = await dashboard_service.get_counts()
    return ApiResponse.ok(
        DiagnosticInfo(
            message="Dashboard API is working with database",
            timestamp=utcnow(),
            endpoints=[
                "GET /api/dashboard/stats/{role}",
                "GET /api/dashboard/quick-actions/{role}",
                "GET /api/dashboard/recent-activities/{userId}",
                "GET /api/dashboard/summary/{userId}",
                "GET /api/dashboard/config",
            ],
            counts=counts,
        )
    )
