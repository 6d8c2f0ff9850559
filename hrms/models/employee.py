"""
Employee model linking HR records to user accounts.
"""
from datetime import datetime
from typing import Optional, List

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, TimestampMixin
from hrms.models.enums import EmployeeStatus


class Employee(Base, TimestampMixin):
    """
    Employee record.

    ``user_id`` links the record to a login account. Employees without an
    account (or whose account was removed) keep their HR history.
    """
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    employee_number: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    position: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Foreign keys
    department_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("departments.id", ondelete="RESTRICT"),
        nullable=True,
        index=True
    )
    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    manager_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"),
        nullable=True
    )

    # Employment dates
    hire_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    termination_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    onboarding_completed_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    status: Mapped[str] = mapped_column(
        String(20),
        default=EmployeeStatus.ACTIVE.value,
        nullable=False,
        index=True
    )

    # Contact details
    address: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    zip_code: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    date_of_birth: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    # Relationships
    user: Mapped[Optional["User"]] = relationship(
        "User",
        back_populates="employees",
        foreign_keys=[user_id],
        lazy="select"
    )

    department: Mapped[Optional["Department"]] = relationship(
        "Department",
        back_populates="employees",
        lazy="select"
    )

    manager: Mapped[Optional["Employee"]] = relationship(
        "Employee",
        remote_side=[id],
        back_populates="direct_reports",
        lazy="select"
    )

    direct_reports: Mapped[List["Employee"]] = relationship(
        "Employee",
        back_populates="manager",
        lazy="select"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, employee_number={self.employee_number}, email={self.email})>"
