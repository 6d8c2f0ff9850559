"""
Department model.
"""
from typing import Optional, List

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, CreatedAtMixin


class Department(Base, CreatedAtMixin):
    """Organisational unit employees belong to."""
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    employees: Mapped[List["Employee"]] = relationship(
        "Employee",
        back_populates="department",
        lazy="select"
    )

    def __repr__(self) -> str:
        return f"<Department(id={self.id}, name={self.name})>"
