"""Employee repository protocol.

Defines the interface for employee persistence operations.
"""

from collections.abc import Mapping
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.employee import Employee
from src.domain.enums.department import Department
from src.domain.errors import ConstraintViolationError


class EmployeeRepository(Protocol):
    """Protocol for employee persistence operations.

    **Design Principles**:
    - Read methods return domain entities, never database models
    - Absence is ``None``, not an error
    - One unit of work per method (connection acquired and released inside)
    - Duplicate emails and dangling company references come back as
      ``Failure(ConstraintViolationError)``
    """

    async def list_all(self) -> list[Employee]:
        """List every employee (active and inactive)."""
        ...

    async def find_by_id(self, employee_id: UUID) -> Employee | None:
        """Find employee by ID.

        Args:
            employee_id: Employee identifier.

        Returns:
            Employee entity if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Employee | None:
        """Find employee by exact email address.

        Args:
            email: Email address.

        Returns:
            Employee entity if found, None otherwise.
        """
        ...

    async def create(
        self, employee: Employee
    ) -> Result[Employee, ConstraintViolationError]:
        """Insert a new employee.

        Returns:
            Success(persisted employee), or Failure(ConstraintViolationError)
            for a duplicate email or an unknown company.
        """
        ...

    async def update(
        self, employee_id: UUID, changes: Mapping[str, Any]
    ) -> Result[Employee | None, ConstraintViolationError]:
        """Apply a partial update and refresh ``updated_at``.

        Args:
            employee_id: Employee identifier.
            changes: Column name to new value (only supplied fields).

        Returns:
            Success(updated employee), Success(None) if absent, or
            Failure(ConstraintViolationError).
        """
        ...

    async def delete(self, employee_id: UUID) -> Employee | None:
        """Hard-delete an employee.

        Returns:
            The removed employee, or None if absent.
        """
        ...

    async def soft_delete(self, employee_id: UUID) -> Employee | None:
        """Mark an employee inactive without removing the row.

        Returns:
            The updated employee, or None if absent.
        """
        ...

    async def list_by_department(self, department: Department) -> list[Employee]:
        """List employees of one department."""
        ...

    async def list_active(self) -> list[Employee]:
        """List employees with ``is_active`` set."""
        ...
