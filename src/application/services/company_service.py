"""Company service.

Validated CRUD over companies. Every operation validates its input first,
then makes exactly one repository call, and reports the outcome as a
``Result``.

Architecture:
    - Application service (uses the CompanyRepository port)
    - Expected failures (validation, constraints, integrity) are Failure
    - Not found is Success(None)
    - Unexpected datastore exceptions propagate to the caller

Usage:
    service = CompanyService(company_repo=repo, logger=logger)

    result = await service.create({"name": "Tech Corp", "slug": "tech-corp"})
    if isinstance(result, Success):
        company = result.value
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from uuid_extensions import uuid7

from src.core.errors import DomainError, InvalidArgumentError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import (
    Company,
    CompanyEmployeeCount,
    CompanyWithEmployees,
)
from src.domain.errors import ConstraintViolationError, ReferentialIntegrityError
from src.domain.protocols.company_repository import CompanyRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.schemas.company_schemas import (
    validate_company_id,
    validate_company_insert,
    validate_company_slug,
    validate_company_update,
)


class CompanyService:
    """Service for company CRUD and employee counts.

    Dependencies (injected via constructor):
        - CompanyRepository: Persistence (one unit of work per call)
        - LoggerProtocol: Structured logging

    Example:
        >>> service = CompanyService(company_repo=repo, logger=logger)
        >>> result = await service.get_by_slug("tech-corp")
        >>> if isinstance(result, Success) and result.value is None:
        ...     print("not found")
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize company service with dependencies.

        Args:
            company_repo: Repository for company persistence.
            logger: Structured logger.
        """
        self._company_repo = company_repo
        self._logger = logger

    async def create(
        self, data: Mapping[str, Any]
    ) -> Result[Company, ValidationError | ConstraintViolationError]:
        """Validate and insert a company.

        Args:
            data: Untyped payload (camelCase or snake_case keys).

        Returns:
            Success(Company): Persisted company with generated id.
            Failure(ValidationError): Payload rejected.
            Failure(ConstraintViolationError): Slug already taken.
        """
        validation = validate_company_insert(data)
        if isinstance(validation, Failure):
            self._log_invalid("create", validation.error)
            return validation
        payload = validation.value

        now = datetime.now(UTC)
        company = Company(
            id=uuid7(),
            name=payload.name,
            slug=payload.slug,
            domain=payload.domain,
            created_at=now,
            updated_at=now,
        )

        result = await self._company_repo.create(company)
        if isinstance(result, Failure):
            self._logger.warning(
                "company_create_rejected",
                slug=company.slug,
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "company_created",
            company_id=str(result.value.id),
            slug=result.value.slug,
        )
        return result

    async def list_all(self) -> Result[list[Company], DomainError]:
        """List every company."""
        companies = await self._company_repo.list_all()
        self._logger.debug("companies_listed", count=len(companies))
        return Success(value=companies)

    async def get_by_id(
        self, company_id: Any
    ) -> Result[Company | None, InvalidArgumentError]:
        """Find a company by id.

        Args:
            company_id: UUID or UUID string.

        Returns:
            Success(Company), Success(None) if absent, or
            Failure(InvalidArgumentError) for a malformed id.
        """
        id_result = validate_company_id(company_id)
        if isinstance(id_result, Failure):
            return id_result

        company = await self._company_repo.find_by_id(id_result.value)
        if company is None:
            self._logger.info("company_not_found", company_id=str(id_result.value))
        return Success(value=company)

    async def get_by_slug(
        self, slug: Any
    ) -> Result[Company | None, InvalidArgumentError]:
        """Find a company by slug.

        Args:
            slug: Company slug.

        Returns:
            Success(Company), Success(None) if absent, or
            Failure(InvalidArgumentError) for a malformed slug.
        """
        slug_result = validate_company_slug(slug)
        if isinstance(slug_result, Failure):
            return slug_result

        company = await self._company_repo.find_by_slug(slug_result.value)
        if company is None:
            self._logger.info("company_not_found", slug=slug_result.value)
        return Success(value=company)

    async def get_with_employees(
        self, company_id: Any
    ) -> Result[CompanyWithEmployees | None, InvalidArgumentError]:
        """Load a company with all of its employees.

        Returns:
            Success(CompanyWithEmployees), Success(None) if the company is
            absent, or Failure(InvalidArgumentError).
        """
        id_result = validate_company_id(company_id)
        if isinstance(id_result, Failure):
            return id_result

        roster = await self._company_repo.find_with_employees(id_result.value)
        if roster is None:
            self._logger.info("company_not_found", company_id=str(id_result.value))
        return Success(value=roster)

    async def update(
        self, company_id: Any, data: Mapping[str, Any]
    ) -> Result[
        Company | None,
        InvalidArgumentError | ValidationError | ConstraintViolationError,
    ]:
        """Apply a partial update.

        Only supplied fields change; ``updated_at`` is refreshed even for an
        empty payload.

        Args:
            company_id: UUID or UUID string.
            data: Partial payload.

        Returns:
            Success(Company), Success(None) if absent, or Failure for a bad
            id, a rejected payload or a duplicate slug.
        """
        id_result = validate_company_id(company_id)
        if isinstance(id_result, Failure):
            return id_result

        validation = validate_company_update(data)
        if isinstance(validation, Failure):
            self._log_invalid("update", validation.error)
            return validation
        changes = validation.value.model_dump(exclude_unset=True)

        result = await self._company_repo.update(id_result.value, changes)
        if isinstance(result, Failure):
            self._logger.warning(
                "company_update_rejected",
                company_id=str(id_result.value),
                error_code=result.error.code.value,
            )
        elif result.value is None:
            self._logger.info("company_not_found", company_id=str(id_result.value))
        else:
            self._logger.info(
                "company_updated",
                company_id=str(id_result.value),
                fields=sorted(changes),
            )
        return result

    async def delete(
        self, company_id: Any
    ) -> Result[Company | None, InvalidArgumentError | ReferentialIntegrityError]:
        """Delete a company that has no employees.

        Returns:
            Success(removed Company), Success(None) if absent,
            Failure(ReferentialIntegrityError) while employees reference it,
            or Failure(InvalidArgumentError).
        """
        id_result = validate_company_id(company_id)
        if isinstance(id_result, Failure):
            return id_result

        result = await self._company_repo.delete(id_result.value)
        if isinstance(result, Failure):
            self._logger.warning(
                "company_delete_blocked",
                company_id=str(id_result.value),
                count=result.error.dependent_count,
            )
        elif result.value is None:
            self._logger.info("company_not_found", company_id=str(id_result.value))
        else:
            self._logger.info(
                "company_deleted",
                company_id=str(id_result.value),
                slug=result.value.slug,
            )
        return result

    async def employee_count(
        self, company_id: Any
    ) -> Result[CompanyEmployeeCount | None, InvalidArgumentError]:
        """Employee head count for one company.

        Returns:
            Success(CompanyEmployeeCount) (count may be 0), Success(None) if
            the company is absent, or Failure(InvalidArgumentError).
        """
        id_result = validate_company_id(company_id)
        if isinstance(id_result, Failure):
            return id_result

        count = await self._company_repo.count_employees(id_result.value)
        if count is None:
            self._logger.info("company_not_found", company_id=str(id_result.value))
        return Success(value=count)

    async def all_with_employee_count(
        self,
    ) -> Result[list[CompanyEmployeeCount], DomainError]:
        """Employee head count for every company, including empty ones."""
        counts = await self._company_repo.list_with_employee_count()
        return Success(value=counts)

    def _log_invalid(self, operation: str, error: ValidationError) -> None:
        self._logger.warning(
            "company_validation_failed",
            operation=operation,
            fields=sorted(error.field_errors),
        )
