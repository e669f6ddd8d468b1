"""Employee domain entity.

Employees reference exactly one company. ``is_active`` is a soft-delete flag:
an inactive employee stays in storage and is still retrievable by id, but is
left out of active listings.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID

from src.domain.enums.department import Department


@dataclass
class Employee:
    """Employee entity.

    Attributes:
        id: Unique employee identifier (immutable).
        first_name: Given name.
        last_name: Family name.
        email: Email address, unique across employees.
        department: Department the employee works in.
        position: Job title.
        hire_date: Calendar date the employee was hired.
        salary: Non-negative whole salary amount.
        company_id: Owning company.
        phone_number: Optional phone number.
        is_active: False once soft-deleted.
        created_at: When the employee was created.
        updated_at: When the employee was last modified.
    """

    id: UUID
    first_name: str
    last_name: str
    email: str
    department: Department
    position: str
    hire_date: date
    salary: int
    company_id: UUID
    phone_number: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            str: Human-readable string.
        """
        status = "active" if self.is_active else "inactive"
        return f"{self.full_name} <{self.email}> - {status}"
