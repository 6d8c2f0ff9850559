"""
EmployeeRepository and DepartmentRepository.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hrms.models import Department, Employee
from hrms.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for Employee model."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Employee)

    async def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        """Get the employee record linked to a user, with department loaded."""
        result = await self.session.execute(
            select(Employee)
            .options(joinedload(Employee.department))
            .where(Employee.user_id == user_id)
            .order_by(Employee.id)
            .limit(1)
        )
        return result.unique().scalar_one_or_none()

    async def count_by_status(self, status: str) -> int:
        """Count employees with the given status."""
        return await self.count({"status": status})


class DepartmentRepository(BaseRepository[Department]):
    """Repository for Department model."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Department)
