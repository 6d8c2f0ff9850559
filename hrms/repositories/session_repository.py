"""
SessionRepository for login session storage and validation.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hrms.models import UserSession, utcnow
from hrms.repositories.base import BaseRepository


def clip_to_column(value: Optional[str], column) -> Optional[str]:
    """Cut a client-supplied string to the length of its VARCHAR column."""
    if value is None:
        return None
    return value[:column.type.length]


class SessionRepository(BaseRepository[UserSession]):
    """Repository for UserSession model."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, UserSession)

    async def create_session(
        self,
        user_id: int,
        token: str,
        expires_at: datetime,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> UserSession:
        """
        Insert an active session row.

        ``ip_address`` and ``user_agent`` come from request headers and are
        clipped to their column lengths.
        """
        return await self.create(
            user_id=user_id,
            session_token=token,
            ip_address=clip_to_column(ip_address, UserSession.__table__.c.ip_address),
            user_agent=clip_to_column(user_agent, UserSession.__table__.c.user_agent),
            expires_at=expires_at,
            is_active=True,
        )

    async def get_valid_session(self, token: str) -> Optional[UserSession]:
        """
        Find an active, unexpired session by token with its user loaded.

        Args:
            token: Session token presented by the client

        Returns:
            UserSession or None
        """
        result = await self.session.execute(
            select(UserSession)
            .options(joinedload(UserSession.user))
            .where(
                UserSession.session_token == token,
                UserSession.is_active == True,
                UserSession.expires_at > utcnow()
            )
        )
        return result.unique().scalar_one_or_none()

    async def get_active_by_token(self, token: str) -> Optional[UserSession]:
        """Find an active session by token, expired or not."""
        result = await self.session.execute(
            select(UserSession).where(
                UserSession.session_token == token,
                UserSession.is_active == True
            )
        )
        return result.unique().scalar_one_or_none()

    async def deactivate(self, user_session: UserSession) -> None:
        """Mark a session inactive."""
        user_session.is_active = False
        await self.session.flush()

    async def count_active(self) -> int:
        """Count sessions that are active and not yet expired."""
        result = await self.session.execute(
            select(func.count())
            .select_from(UserSession)
            .where(UserSession.is_active == True, UserSession.expires_at > utcnow())
        )
        return result.scalar()
