"""
FastAPI router for menu visibility and navigation.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from hrms.models import utcnow
from hrms.models.user import User
from hrms.services.menu_service import MenuService, build_breadcrumbs
from hrms.schemas.common import ApiResponse
from hrms.schemas.menu import (
    BreadcrumbResponse,
    MenuAccessResult,
    MenuItemDto,
    NavigationConfig,
)
from hrms.schemas.system import DiagnosticInfo
from hrms.core.dependencies import get_current_user, get_menu_service
from hrms.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/menu", tags=["Menu"])


@router.get(
    "/items",
    response_model=ApiResponse[List[MenuItemDto]],
    summary="Menu items visible to a role",
    description="Defaults to the caller's role when no role is given."
)
async def get_menu_items(
    role: Optional[str] = Query(None, description="Role to resolve the menu for"),
    current_user: User = Depends(get_current_user),
    menu_service: MenuService = Depends(get_menu_service)
) -> ApiResponse[List[MenuItemDto]]:
    effective_role = role or current_user.role
    items = await menu_service.get_menu_for_role(effective_role)
    logger.info("menu_items_retrieved", role=effective_role, count=len(items))
    return ApiResponse.ok(items, message="Menu items retrieved from database")


@router.get(
    "/access/{menu_name}",
    response_model=ApiResponse[MenuAccessResult],
    summary="Check VIEW access to a menu item"
)
async def check_menu_access(
    menu_name: str,
    current_user: User = Depends(get_current_user),
    menu_service: MenuService = Depends(get_menu_service)
) -> ApiResponse[MenuAccessResult]:
    has_access = await menu_service.check_permission(current_user.role, menu_name)
    return ApiResponse.ok(
        MenuAccessResult(has_access=has_access, menu_name=menu_name, user_role=current_user.role)
    )


@router.get(
    "/dashboard-config",
    response_model=ApiResponse[NavigationConfig],
    summary="Navigation settings for the caller's role"
)
async def get_navigation_config(
    current_user: User = Depends(get_current_user)
) -> ApiResponse[NavigationConfig]:
    return ApiResponse.ok(
        MenuService.get_navigation_config(current_user.role),
        message="Dashboard configuration retrieved"
    )


@router.get(
    "/breadcrumbs",
    response_model=BreadcrumbResponse,
    summary="Breadcrumb trail for a route"
)
async def get_breadcrumbs(
    current_route: Optional[str] = Query(None, alias="currentRoute"),
    current_user: User = Depends(get_current_user)
) -> BreadcrumbResponse:
    return BreadcrumbResponse(data=build_breadcrumbs(current_route))


@router.get(
    "/test",
    response_model=ApiResponse[DiagnosticInfo],
    summary="Menu API diagnostics"
)
async def menu_test() -> ApiResponse[DiagnosticInfo]:
    return ApiResponse.ok(
        DiagnosticInfo(
            message="Menu API is working",
            timestamp=utcnow(),
            endpoints=[
                "GET /api/menu/items",
                "GET /api/menu/access/{menuName}",
                "GET /api/menu/dashboard-config",
                "GET /api/menu/breadcrumbs",
            ],
        )
    )
