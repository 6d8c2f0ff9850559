"""
Pydantic schemas for menu and navigation endpoints.
"""
from typing import List, Optional

from pydantic import Field

from hrms.schemas.common import CamelModel


class MenuPermissionDto(CamelModel):
    """Permission flags of the requesting role on a menu item."""

    can_view: bool
    can_edit: bool
    can_delete: bool


class MenuItemDto(CamelModel):
    """A menu item and the children visible to the same role."""

    id: int
    name: str
    route: str
    icon: Optional[str] = None
    parent_id: Optional[int] = None
    sort_order: int
    is_active: bool
    permissions: Optional[MenuPermissionDto] = None
    children: List["MenuItemDto"] = Field(default_factory=list)


MenuItemDto.model_rebuild()


class MenuAccessResult(CamelModel):
    has_access: bool
    menu_name: str
    user_role: str


class NavigationConfig(CamelModel):
    """Per-role navigation settings for the dashboard shell."""

    show_sidebar: bool = True
    default_route: str = "/dashboard"
    allowed_routes: List[str]
    navigation_style: str = "tabs"
    theme: str = "default"


class Breadcrumb(CamelModel):
    name: str
    route: str
    icon: str


class BreadcrumbResponse(CamelModel):
    success: bool = True
    data: List[Breadcrumb]
    message: str = "Breadcrumbs generated"
