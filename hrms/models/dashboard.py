"""
Database-driven dashboard content: statistic tiles and quick actions.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from hrms.models.base import Base, CreatedAtMixin, utcnow


class DashboardStat(Base, CreatedAtMixin):
    """
    A statistic tile.

    ``applicable_roles`` is a comma-separated role list; NULL shows the tile
    to every role.
    """
    __tablename__ = "dashboard_stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    stat_key: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    stat_name: Mapped[str] = mapped_column(String(200), nullable=False)
    stat_value: Mapped[str] = mapped_column(String(100), nullable=False)
    stat_color: Mapped[str] = mapped_column(String(50), nullable=False)
    icon_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    subtitle: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    applicable_roles: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    last_updated: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        server_default=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<DashboardStat(id={self.id}, stat_key={self.stat_key}, value={self.stat_value})>"


class QuickAction(Base, CreatedAtMixin):
    """A dashboard shortcut button, filtered by role like DashboardStat."""
    __tablename__ = "quick_actions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    action_key: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    icon_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    route: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    color: Mapped[str] = mapped_column(String(50), nullable=False)
    applicable_roles: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<QuickAction(id={self.id}, action_key={self.action_key}, route={self.route})>"
