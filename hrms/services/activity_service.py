"""
Activity feed recording.

Feed entries are best-effort: a failure to record one is logged and never
fails the operation that triggered it.
"""
import json
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from hrms.core.logging import get_logger
from hrms.models import ActivityType, Employee, RecentActivity, User
from hrms.repositories.activity_repository import ActivityRepository

logger = get_logger(__name__)

LOGIN_ACTIVITY_TYPE = {
    "name": "Login",
    "description": "User login event",
    "icon_name": "Login",
    "color": "#4caf50",
}


class ActivityService:
    """Writes entries to the recent-activity feed."""

    def __init__(self, repository: ActivityRepository):
        """
        Args:
            repository: ActivityRepository instance for database operations
        """
        self.repository = repository

    async def get_or_create_type(self, name: str, **defaults) -> ActivityType:
        """Return the active activity type ``name``, creating it if missing."""
        activity_type = await self.repository.get_active_type_by_name(name)
        if activity_type is None:
            activity_type = await self.repository.create_type(name=name, is_active=True, **defaults)
            logger.info("activity_type_created", name=name, activity_type_id=activity_type.id)
        return activity_type

    async def log_login(
        self,
        user: User,
        employee: Optional[Employee],
        ip_address: Optional[str],
    ) -> Optional[RecentActivity]:
        """
        Record a successful login in the feed.

        Runs inside a savepoint so a failure rolls back only the feed entry.

        Returns:
            The created entry, or None if it could not be recorded
        """
        defaults = {k: v for k, v in LOGIN_ACTIVITY_TYPE.items() if k != "name"}
        metadata = json.dumps({"ipAddress": ip_address, "role": user.role})

        try:
            async with self.repository.session.begin_nested():
                activity_type = await self.get_or_create_type(LOGIN_ACTIVITY_TYPE["name"], **defaults)
                activity = await self.repository.create_activity(
                    user_id=user.id,
                    employee_id=employee.id if employee else None,
                    activity_type_id=activity_type.id,
                    title="User Login",
                    description=f"Successful login from {ip_address or 'unknown location'}",
                    activity_metadata=metadata,
                )
        except SQLAlchemyError as exc:
            logger.error("login_activity_failed", user_id=user.id, error=str(exc))
            return None

        logger.info(
            "activity_recorded",
            activity_id=activity.id,
            activity_type=LOGIN_ACTIVITY_TYPE["name"],
            user_id=user.id,
        )
        return activity
