"""
UserRepository for User-specific database operations.
"""
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.models import User, utcnow
from hrms.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model with login bookkeeping queries."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Find user by email, ignoring case."""
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def record_failed_login(
        self,
        user: User,
        max_attempts: int,
        lockout: timedelta
    ) -> bool:
        """
        Increment the failed-login counter and lock the account once it
        reaches ``max_attempts``.

        Returns:
            True if this attempt triggered a lockout
        """
        now = utcnow()
        user.failed_login_attempts = (user.failed_login_attempts or 0) + 1
        user.updated_at = now

        locked = user.failed_login_attempts >= max_attempts
        if locked:
            user.lockout_end = now + lockout

        await self.session.flush()
        return locked

    async def reset_failed_logins(self, user: User) -> None:
        """Clear the failed-login counter and any lockout."""
        user.failed_login_attempts = 0
        user.lockout_end = None
        await self.session.flush()

    async def update_last_login(self, user: User, when: Optional[datetime] = None) -> None:
        """Set last_login (and updated_at) to ``when`` or now."""
        now = when or utcnow()
        user.last_login = now
        user.updated_at = now
        await self.session.flush()

    async def count_active(self) -> int:
        """Count users whose account is enabled."""
        return await self.count({"is_active": True})
