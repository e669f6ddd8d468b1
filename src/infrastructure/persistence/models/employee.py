"""Employee database model.

Each employee references exactly one company. The reference cascades on
update and restricts on delete.
"""

from datetime import date
from uuid import UUID

from sqlalchemy import Boolean, Date, Enum, ForeignKey, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.domain.enums.department import Department
from src.infrastructure.persistence.base import BaseMutableModel


class EmployeeModel(BaseMutableModel):
    """Employee model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        first_name / last_name: Person name parts
        email: Unique email address
        phone_number: Optional phone number
        department: ``department`` enum type
        position: Job title
        hire_date: Calendar date of hire
        salary: Non-negative whole amount
        is_active: False once soft-deleted
        company_id: FK to companies.id

    Indexes:
        - ix_employees_company_id: FK lookup and per-company counts
    """

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)

    department: Mapped[Department] = mapped_column(
        Enum(
            Department,
            name="department",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )

    position: Mapped[str] = mapped_column(String(100), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[int] = mapped_column(Integer, nullable=False)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    company_id: Mapped[UUID] = mapped_column(
        ForeignKey("companies.id", onupdate="CASCADE", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="FK to companies table",
    )

    company: Mapped["CompanyModel"] = relationship(  # noqa: F821
        back_populates="employees",
        lazy="raise",
    )
