"""
Activity feed models.
"""
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, CreatedAtMixin


class ActivityType(Base, CreatedAtMixin):
    """Category of a feed entry, carrying its icon and color."""
    __tablename__ = "activity_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    icon_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    color: Mapped[str] = mapped_column(String(50), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<ActivityType(id={self.id}, name={self.name})>"


class RecentActivity(Base, CreatedAtMixin):
    """
    Append-only activity feed entry.

    ``activity_metadata`` holds a JSON document serialized to text; the
    column is named ``metadata`` in the database.
    """
    __tablename__ = "recent_activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )
    employee_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"),
        nullable=True
    )
    activity_type_id: Mapped[int] = mapped_column(
        ForeignKey("activity_types.id"),
        nullable=False
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    activity_metadata: Mapped[Optional[str]] = mapped_column("metadata", String(1000), nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", lazy="select")
    employee: Mapped[Optional["Employee"]] = relationship("Employee", lazy="select")
    activity_type: Mapped["ActivityType"] = relationship("ActivityType", lazy="select")

    __table_args__ = (
        Index("ix_recent_activities_user_id_created_at", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<RecentActivity(id={self.id}, title={self.title}, created_at={self.created_at})>"
