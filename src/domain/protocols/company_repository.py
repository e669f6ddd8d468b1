"""Company repository protocol.

Defines the interface for company persistence operations.
"""

from collections.abc import Mapping
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.company import Company
from src.domain.entities.company_roster import CompanyEmployeeCount, CompanyWithEmployees
from src.domain.errors import ConstraintViolationError, ReferentialIntegrityError


class CompanyRepository(Protocol):
    """Protocol for company persistence operations.

    Infrastructure layer provides concrete implementations (PostgreSQL via
    SQLAlchemy).

    **Design Principles**:
    - Read methods return domain entities, never database models
    - Absence is ``None`` (or ``Success(None)`` for writes), not an error
    - Each method is one unit of work: it acquires a connection, runs its
      statements and releases the connection before returning
    - Constraint failures are returned as ``Failure``; unexpected datastore
      errors propagate as exceptions
    """

    async def list_all(self) -> list[Company]:
        """List every company in storage order."""
        ...

    async def find_by_id(self, company_id: UUID) -> Company | None:
        """Find company by ID.

        Args:
            company_id: Company identifier.

        Returns:
            Company entity if found, None otherwise.
        """
        ...

    async def find_by_slug(self, slug: str) -> Company | None:
        """Find company by slug.

        Args:
            slug: Company slug (e.g., "tech-corp").

        Returns:
            Company entity if found, None otherwise.
        """
        ...

    async def find_with_employees(
        self, company_id: UUID
    ) -> CompanyWithEmployees | None:
        """Load a company together with all of its employees.

        Args:
            company_id: Company identifier.

        Returns:
            CompanyWithEmployees if the company exists, None otherwise.
        """
        ...

    async def create(
        self, company: Company
    ) -> Result[Company, ConstraintViolationError]:
        """Insert a new company.

        Args:
            company: Entity with generated id and timestamps.

        Returns:
            Success(persisted company), or Failure(ConstraintViolationError)
            when the slug is already taken.
        """
        ...

    async def update(
        self, company_id: UUID, changes: Mapping[str, Any]
    ) -> Result[Company | None, ConstraintViolationError]:
        """Apply a partial update and refresh ``updated_at``.

        ``updated_at`` is refreshed even when ``changes`` is empty.

        Args:
            company_id: Company identifier.
            changes: Column name to new value (only supplied fields).

        Returns:
            Success(updated company), Success(None) if absent, or
            Failure(ConstraintViolationError) on a duplicate slug.
        """
        ...

    async def delete(
        self, company_id: UUID
    ) -> Result[Company | None, ReferentialIntegrityError]:
        """Delete a company that no employee references.

        The employee count check and the delete run in one transaction with
        the company row locked.

        Args:
            company_id: Company identifier.

        Returns:
            Success(removed company), Success(None) if absent, or
            Failure(ReferentialIntegrityError) while employees reference it.
        """
        ...

    async def count_employees(self, company_id: UUID) -> CompanyEmployeeCount | None:
        """Count employees of one company (outer join).

        Returns:
            Count (possibly 0) if the company exists, None otherwise.
        """
        ...

    async def list_with_employee_count(self) -> list[CompanyEmployeeCount]:
        """Count employees for every company (outer join).

        Companies without employees are included with a count of 0.
        """
        ...
