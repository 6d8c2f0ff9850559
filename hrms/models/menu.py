"""
Navigation menu models and per-role permissions.
"""
from typing import Optional, List

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, CreatedAtMixin


class MenuItem(Base, CreatedAtMixin):
    """
    A navigation entry. Items with a ``parent_id`` are rendered as children
    of that item; top-level items have none.
    """
    __tablename__ = "menu_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    route: Mapped[str] = mapped_column(String(255), nullable=False)
    icon: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    required_permission: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    parent_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("menu_items.id", ondelete="RESTRICT"),
        nullable=True,
        index=True
    )

    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    parent: Mapped[Optional["MenuItem"]] = relationship(
        "MenuItem",
        remote_side=[id],
        back_populates="children",
        lazy="select"
    )

    children: Mapped[List["MenuItem"]] = relationship(
        "MenuItem",
        back_populates="parent",
        order_by="MenuItem.sort_order",
        lazy="select"
    )

    role_permissions: Mapped[List["RoleMenuPermission"]] = relationship(
        "RoleMenuPermission",
        back_populates="menu_item",
        cascade="all, delete-orphan",
        lazy="select"
    )

    def permission_for(self, role: str) -> Optional["RoleMenuPermission"]:
        """Return the permission row for ``role`` (case-insensitive), if loaded."""
        wanted = role.lower()
        for permission in self.role_permissions:
            if permission.role.lower() == wanted:
                return permission
        return None

    def __repr__(self) -> str:
        return f"<MenuItem(id={self.id}, name={self.name}, route={self.route})>"


class RoleMenuPermission(Base, CreatedAtMixin):
    """View/edit/delete flags for one role on one menu item."""
    __tablename__ = "role_menu_permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    role: Mapped[str] = mapped_column(String(50), nullable=False)

    menu_item_id: Mapped[int] = mapped_column(
        ForeignKey("menu_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    can_view: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    can_edit: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    can_delete: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    menu_item: Mapped["MenuItem"] = relationship(
        "MenuItem",
        back_populates="role_permissions",
        lazy="select"
    )

    __table_args__ = (
        UniqueConstraint("role", "menu_item_id", name="uq_role_menu_permissions_role_menu_item"),
    )

    def __repr__(self) -> str:
        return (
            f"<RoleMenuPermission(role={self.role}, menu_item_id={self.menu_item_id}, "
            f"view={self.can_view}, edit={self.can_edit}, delete={self.can_delete})>"
        )
