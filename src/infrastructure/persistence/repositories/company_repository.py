"""CompanyRepository - SQLAlchemy implementation of CompanyRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Company entities and database CompanyModel.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.company import Company
from src.domain.entities.company_roster import (
    CompanyEmployeeCount,
    CompanyWithEmployees,
)
from src.domain.errors import ConstraintViolationError, ReferentialIntegrityError
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.integrity import to_constraint_violation
from src.infrastructure.persistence.models.company import CompanyModel
from src.infrastructure.persistence.models.employee import EmployeeModel
from src.infrastructure.persistence.repositories.employee_repository import (
    EmployeeRepository,
)

DELETE_BLOCKED_MESSAGE = "Cannot delete company with existing employees"

_UPDATABLE_FIELDS = frozenset({"name", "slug", "domain"})


class CompanyRepository:
    """SQLAlchemy implementation of CompanyRepository protocol.

    Every public method opens its own session, so each call is one unit of
    work that commits (or rolls back) and releases its connection before
    returning.

    This class does NOT inherit from CompanyRepository protocol (Protocol uses
    structural typing).

    Example:
        >>> repo = CompanyRepository(database)
        >>> company = await repo.find_by_slug("tech-corp")
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the database.

        Args:
            database: Database providing sessions.
        """
        self.database = database

    async def list_all(self) -> list[Company]:
        """List every company in storage order."""
        async with self.database.get_session() as session:
            stmt = select(CompanyModel).order_by(
                CompanyModel.created_at, CompanyModel.id
            )
            result = await session.execute(stmt)
            return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, company_id: UUID) -> Company | None:
        """Find company by ID.

        Args:
            company_id: Company identifier.

        Returns:
            Domain Company entity if found, None otherwise.
        """
        async with self.database.get_session() as session:
            model = await session.get(CompanyModel, company_id)
            return None if model is None else self._to_domain(model)

    async def find_by_slug(self, slug: str) -> Company | None:
        """Find company by slug (exact match).

        Args:
            slug: Company slug.

        Returns:
            Domain Company entity if found, None otherwise.
        """
        async with self.database.get_session() as session:
            stmt = select(CompanyModel).where(CompanyModel.slug == slug)
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return None if model is None else self._to_domain(model)

    async def find_with_employees(
        self, company_id: UUID
    ) -> CompanyWithEmployees | None:
        """Load a company and its employees in one unit of work.

        Args:
            company_id: Company identifier.

        Returns:
            CompanyWithEmployees if found, None otherwise.
        """
        async with self.database.get_session() as session:
            stmt = (
                select(CompanyModel)
                .options(selectinload(CompanyModel.employees))
                .where(CompanyModel.id == company_id)
            )
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            if model is None:
                return None
            return CompanyWithEmployees(
                company=self._to_domain(model),
                employees=[
                    EmployeeRepository._to_domain(employee)
                    for employee in model.employees
                ],
            )

    async def create(
        self, company: Company
    ) -> Result[Company, ConstraintViolationError]:
        """Insert a new company.

        Args:
            company: Domain Company entity to persist.

        Returns:
            Success(persisted company) or Failure(ConstraintViolationError)
            when the slug is taken.
        """
        model = self._to_model(company)
        async with self.database.get_session() as session:
            session.add(model)
            try:
                await session.flush()
            except IntegrityError as e:
                await session.rollback()
                return Failure(error=to_constraint_violation(e, "Company"))
            await session.refresh(model)
            return Success(value=self._to_domain(model))

    async def update(
        self, company_id: UUID, changes: Mapping[str, Any]
    ) -> Result[Company | None, ConstraintViolationError]:
        """Apply a partial update.

        ``updated_at`` is refreshed even when ``changes`` is empty.

        Args:
            company_id: Company identifier.
            changes: Column name to new value.

        Returns:
            Success(updated company), Success(None) if not found, or
            Failure(ConstraintViolationError).
        """
        async with self.database.get_session() as session:
            model = await session.get(CompanyModel, company_id)
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
                return Failure(error=to_constraint_violation(e, "Company"))
            await session.refresh(model)
            return Success(value=self._to_domain(model))

    async def delete(
        self, company_id: UUID
    ) -> Result[Company | None, ReferentialIntegrityError]:
        """Delete a company nobody references.

        The company row is locked (``SELECT ... FOR UPDATE``) before employees
        are counted, and the count and delete share one transaction. The
        ``ON DELETE RESTRICT`` foreign key still backs the check: a reference
        the count missed fails the delete instead of orphaning employees.

        Args:
            company_id: Company identifier.

        Returns:
            Success(removed company), Success(None) if not found, or
            Failure(ReferentialIntegrityError).
        """
        async with self.database.get_session() as session:
            stmt = (
                select(CompanyModel)
                .where(CompanyModel.id == company_id)
                .with_for_update()
            )
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            if model is None:
                return Success(value=None)

            dependents = await self._count_employees(session, company_id)
            if dependents > 0:
                return Failure(
                    error=self._delete_blocked(company_id, dependents)
                )

            company = self._to_domain(model)
            try:
                await session.execute(
                    delete(CompanyModel).where(CompanyModel.id == company_id)
                )
                await session.flush()
            except IntegrityError:
                await session.rollback()
                return Failure(error=self._delete_blocked(company_id, 0))
            return Success(value=company)

    async def count_employees(self, company_id: UUID) -> CompanyEmployeeCount | None:
        """Employee head count for one company.

        Args:
            company_id: Company identifier.

        Returns:
            CompanyEmployeeCount (count 0 for an empty company), or None if
            the company does not exist.
        """
        async with self.database.get_session() as session:
            stmt = self._employee_count_query().where(CompanyModel.id == company_id)
            result = await session.execute(stmt)
            row = result.one_or_none()
            return None if row is None else self._to_count(row)

    async def list_with_employee_count(self) -> list[CompanyEmployeeCount]:
        """Employee head count for every company, including empty ones."""
        async with self.database.get_session() as session:
            stmt = self._employee_count_query().order_by(
                CompanyModel.created_at, CompanyModel.id
            )
            result = await session.execute(stmt)
            return [self._to_count(row) for row in result.all()]

    async def _count_employees(self, session: AsyncSession, company_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(EmployeeModel)
            .where(EmployeeModel.company_id == company_id)
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    @staticmethod
    def _employee_count_query() -> Any:
        return (
            select(
                CompanyModel.id,
                CompanyModel.name,
                CompanyModel.slug,
                CompanyModel.domain,
                func.count(EmployeeModel.id).label("employee_count"),
            )
            .outerjoin(EmployeeModel, EmployeeModel.company_id == CompanyModel.id)
            .group_by(
                CompanyModel.id,
                CompanyModel.name,
                CompanyModel.slug,
                CompanyModel.domain,
            )
        )

    @staticmethod
    def _delete_blocked(
        company_id: UUID, dependents: int
    ) -> ReferentialIntegrityError:
        return ReferentialIntegrityError(
            code=ErrorCode.REFERENTIAL_INTEGRITY_VIOLATION,
            message=DELETE_BLOCKED_MESSAGE,
            resource_type="Company",
            resource_id=str(company_id),
            dependent_count=dependents,
        )

    @staticmethod
    def _to_count(row: Any) -> CompanyEmployeeCount:
        return CompanyEmployeeCount(
            company_id=row.id,
            company_name=row.name,
            company_slug=row.slug,
            company_domain=row.domain,
            employee_count=int(row.employee_count),
        )

    @staticmethod
    def _to_domain(model: CompanyModel) -> Company:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy CompanyModel instance.

        Returns:
            Domain Company entity.
        """
        return Company(
            id=model.id,
            name=model.name,
            slug=model.slug,
            domain=model.domain,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @staticmethod
    def _to_model(company: Company) -> CompanyModel:
        """Convert domain entity to database model.

        Args:
            company: Domain Company entity.

        Returns:
            SQLAlchemy CompanyModel instance.
        """
        return CompanyModel(
            id=company.id,
            name=company.name,
            slug=company.slug,
            domain=company.domain,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )
