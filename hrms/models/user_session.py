"""
UserSession model for opaque, expiring login sessions.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, CreatedAtMixin


class UserSession(Base, CreatedAtMixin):
    """
    A login session identified by a random token.

    A session is valid while ``is_active`` is set and ``expires_at`` lies in
    the future. Logout clears ``is_active``; rows are never deleted.
    """
    __tablename__ = "user_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    session_token: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    # Client context
    ip_address: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    user_agent: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    user: Mapped["User"] = relationship(
        "User",
        back_populates="sessions",
        lazy="joined"
    )

    __table_args__ = (
        Index("ix_user_sessions_token_active", "session_token", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<UserSession(id={self.id}, user_id={self.user_id}, expires_at={self.expires_at}, is_active={self.is_active})>"
