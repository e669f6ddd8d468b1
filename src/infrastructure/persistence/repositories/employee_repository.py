"""EmployeeRepository - SQLAlchemy implementation of EmployeeRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Employee entities and database EmployeeModel.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from src.core.result import Failure, Result, Success
from src.domain.entities.employee import Employee
from src.domain.enums.department import Department
from src.domain.errors import ConstraintViolationError
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.integrity import to_constraint_violation
from src.infrastructure.persistence.models.employee import EmployeeModel

_UPDATABLE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "email",
        "phone_number",
        "department",
        "position",
        "hire_date",
        "salary",
        "is_active",
        "company_id",
    }
)


class EmployeeRepository:
    """SQLAlchemy implementation of EmployeeRepository protocol.

    Each public method is one unit of work on its own session.

    This class does NOT inherit from EmployeeRepository protocol (Protocol
    uses structural typing).

    Example:
        >>> repo = EmployeeRepository(database)
        >>> employee = await repo.find_by_email("jane.doe@example.com")
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the database.

        Args:
            database: Database providing sessions.
        """
        self.database = database

    async def list_all(self) -> list[Employee]:
        """List every employee, active or not."""
        return await self._list()

    async def find_by_id(self, employee_id: UUID) -> Employee | None:
        """Find employee by ID.

        Args:
            employee_id: Employee identifier.

        Returns:
            Domain Employee entity if found, None otherwise.
        """
        async with self.database.get_session() as session:
            model = await session.get(EmployeeModel, employee_id)
            return None if model is None else self._to_domain(model)

    async def find_by_email(self, email: str) -> Employee | None:
        """Find employee by email address (exact match).

        Args:
            email: Email address.

        Returns:
            Domain Employee entity if found, None otherwise.
        """
        async with self.database.get_session() as session:
            stmt = select(EmployeeModel).where(EmployeeModel.email == email)
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return None if model is None else self._to_domain(model)

    async def create(
        self, employee: Employee
    ) -> Result[Employee, ConstraintViolationError]:
        """Insert a new employee.

        Args:
            employee: Domain Employee entity to persist.

        Returns:
            Success(persisted employee) or Failure(ConstraintViolationError)
            for a duplicate email or a missing company.
        """
        model = self._to_model(employee)
        async with self.database.get_session() as session:
            session.add(model)
            try:
                await session.flush()
            except IntegrityError as e:
                await session.rollback()
                return Failure(error=to_constraint_violation(e, "Employee"))
            await session.refresh(model)
            return Success(value=self._to_domain(model))

    async def update(
        self, employee_id: UUID, changes: Mapping[str, Any]
    ) -> Result[Employee | None, ConstraintViolationError]:
        """Apply a partial update and refresh ``updated_at``.

        Args:
            employee_id: Employee identifier.
            changes: Column name to new value.

        Returns:
            Success(updated employee), Success(None) if not found, or
            Failure(ConstraintViolationError).
        """
        async with self.database.get_session() as session:
            model = await session.get(EmployeeModel, employee_id)
            if model is None:
                return Success(value=None)

            for name, value in changes.items():
                if name in _UPDATABLE_FIELDS:
                    setattr(model, name, value)
            model.updated_at = datetime.now(UTC)

            try:
                await session.flush()
            except IntegrityError as e:
                await session.rollback()
                return Failure(error=to_constraint_violation(e, "Employee"))
            await session.refresh(model)
            return Success(value=self._to_domain(model))

    async def delete(self, employee_id: UUID) -> Employee | None:
        """Hard-delete an employee.

        Args:
            employee_id: Employee identifier.

        Returns:
            The removed employee, or None if not found.
        """
        async with self.database.get_session() as session:
            model = await session.get(EmployeeModel, employee_id)
            if model is None:
                return None
            employee = self._to_domain(model)
            await session.execute(
                delete(EmployeeModel).where(EmployeeModel.id == employee_id)
            )
            return employee

    async def soft_delete(self, employee_id: UUID) -> Employee | None:
        """Set ``is_active`` to False, keeping the row.

        Args:
            employee_id: Employee identifier.

        Returns:
            The updated employee, or None if not found.
        """
        async with self.database.get_session() as session:
            model = await session.get(EmployeeModel, employee_id)
            if model is None:
                return None
            model.is_active = False
            model.updated_at = datetime.now(UTC)
            await session.flush()
            await session.refresh(model)
            return self._to_domain(model)

    async def list_by_department(self, department: Department) -> list[Employee]:
        """List employees in one department."""
        return await self._list(EmployeeModel.department == department)

    async def list_active(self) -> list[Employee]:
        """List employees that have not been soft-deleted."""
        return await self._list(EmployeeModel.is_active.is_(True))

    async def _list(self, *criteria: Any) -> list[Employee]:
        async with self.database.get_session() as session:
            stmt = (
                select(EmployeeModel)
                .where(*criteria)
                .order_by(EmployeeModel.created_at, EmployeeModel.id)
            )
            result = await session.execute(stmt)
            return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: EmployeeModel) -> Employee:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy EmployeeModel instance.

        Returns:
            Domain Employee entity.
        """
        return Employee(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone_number=model.phone_number,
            department=Department(model.department),
            position=model.position,
            hire_date=model.hire_date,
            salary=model.salary,
            is_active=model.is_active,
            company_id=model.company_id,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @staticmethod
    def _to_model(employee: Employee) -> EmployeeModel:
        """Convert domain entity to database model.

        Args:
            employee: Domain Employee entity.

        Returns:
            SQLAlchemy EmployeeModel instance.
        """
        return EmployeeModel(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            phone_number=employee.phone_number,
            department=employee.department,
            position=employee.position,
            hire_date=employee.hire_date,
            salary=employee.salary,
            is_active=employee.is_active,
            company_id=employee.company_id,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )
