"""Employee service.

Validated CRUD over employees, plus soft delete and the department and
active-only listings. Mirrors CompanyService: validate, one repository call,
Result out.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from uuid_extensions import uuid7

from src.core.errors import DomainError, InvalidArgumentError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Employee
from src.domain.errors import ConstraintViolationError
from src.domain.protocols.employee_repository import EmployeeRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.schemas.employee_schemas import (
    validate_department,
    validate_employee_email,
    validate_employee_id,
    validate_employee_insert,
    validate_employee_update,
)


class EmployeeService:
    """Service for employee CRUD.

    Dependencies (injected via constructor):
        - EmployeeRepository: Persistence (one unit of work per call)
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize employee service with dependencies.

        Args:
            employee_repo: Repository for employee persistence.
            logger: Structured logger.
        """
        self._employee_repo = employee_repo
        self._logger = logger

    async def create(
        self, data: Mapping[str, Any]
    ) -> Result[Employee, ValidationError | ConstraintViolationError]:
        """Validate and insert an employee.

        Args:
            data: Untyped payload (camelCase or snake_case keys).

        Returns:
            Success(Employee): Persisted employee (``is_active`` defaults true).
            Failure(ValidationError): Payload rejected.
            Failure(ConstraintViolationError): Duplicate email or unknown
                company.
        """
        validation = validate_employee_insert(data)
        if isinstance(validation, Failure):
            self._log_invalid("create", validation.error)
            return validation
        payload = validation.value

        now = datetime.now(UTC)
        employee = Employee(
            id=uuid7(),
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone_number=payload.phone_number,
            department=payload.department,
            position=payload.position,
            hire_date=payload.hire_date,
            salary=payload.salary,
            is_active=payload.is_active,
            company_id=payload.company_id,
            created_at=now,
            updated_at=now,
        )

        result = await self._employee_repo.create(employee)
        if isinstance(result, Failure):
            self._logger.warning(
                "employee_create_rejected",
                email=employee.email,
                company_id=str(employee.company_id),
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "employee_created",
            employee_id=str(result.value.id),
            company_id=str(result.value.company_id),
            email=result.value.email,
        )
        return result

    async def list_all(self) -> Result[list[Employee], DomainError]:
        """List every employee, active or not."""
        employees = await self._employee_repo.list_all()
        self._logger.debug("employees_listed", count=len(employees))
        return Success(value=employees)

    async def get_by_id(
        self, employee_id: Any
    ) -> Result[Employee | None, InvalidArgumentError]:
        """Find an employee by id (inactive employees included).

        Returns:
            Success(Employee), Success(None) if absent, or
            Failure(InvalidArgumentError) for a malformed id.
        """
        id_result = validate_employee_id(employee_id)
        if isinstance(id_result, Failure):
            return id_result

        employee = await self._employee_repo.find_by_id(id_result.value)
        if employee is None:
            self._logger.info("employee_not_found", employee_id=str(id_result.value))
        return Success(value=employee)

    async def get_by_email(
        self, email: Any
    ) -> Result[Employee | None, InvalidArgumentError]:
        """Find an employee by email address.

        Returns:
            Success(Employee), Success(None) if absent, or
            Failure(InvalidArgumentError) for a malformed email.
        """
        email_result = validate_employee_email(email)
        if isinstance(email_result, Failure):
            return email_result

        employee = await self._employee_repo.find_by_email(email_result.value)
        if employee is None:
            self._logger.info("employee_not_found", email=email_result.value)
        return Success(value=employee)

    async def update(
        self, employee_id: Any, data: Mapping[str, Any]
    ) -> Result[
        Employee | None,
        InvalidArgumentError | ValidationError | ConstraintViolationError,
    ]:
        """Apply a partial update.

        ``isActive: true`` reactivates a soft-deleted employee.

        Args:
            employee_id: UUID or UUID string.
            data: Partial payload.

        Returns:
            Success(Employee), Success(None) if absent, or Failure for a bad
            id, a rejected payload, a duplicate email or an unknown company.
        """
        id_result = validate_employee_id(employee_id)
        if isinstance(id_result, Failure):
            return id_result

        validation = validate_employee_update(data)
        if isinstance(validation, Failure):
            self._log_invalid("update", validation.error)
            return validation
        changes = validation.value.model_dump(exclude_unset=True)

        result = await self._employee_repo.update(id_result.value, changes)
        if isinstance(result, Failure):
            self._logger.warning(
                "employee_update_rejected",
                employee_id=str(id_result.value),
                error_code=result.error.code.value,
            )
        elif result.value is None:
            self._logger.info("employee_not_found", employee_id=str(id_result.value))
        else:
            self._logger.info(
                "employee_updated",
                employee_id=str(id_result.value),
                fields=sorted(changes),
            )
        return result

    async def delete(
        self, employee_id: Any
    ) -> Result[Employee | None, InvalidArgumentError]:
        """Hard-delete an employee.

        Returns:
            Success(removed Employee), Success(None) if absent, or
            Failure(InvalidArgumentError).
        """
        id_result = validate_employee_id(employee_id)
        if isinstance(id_result, Failure):
            return id_result

        employee = await self._employee_repo.delete(id_result.value)
        if employee is None:
            self._logger.info("employee_not_found", employee_id=str(id_result.value))
        else:
            self._logger.info(
                "employee_deleted",
                employee_id=str(employee.id),
                company_id=str(employee.company_id),
            )
        return Success(value=employee)

    async def soft_delete(
        self, employee_id: Any
    ) -> Result[Employee | None, InvalidArgumentError]:
        """Mark an employee inactive, keeping the record.

        Returns:
            Success(updated Employee), Success(None) if absent, or
            Failure(InvalidArgumentError).
        """
        id_result = validate_employee_id(employee_id)
        if isinstance(id_result, Failure):
            return id_result

        employee = await self._employee_repo.soft_delete(id_result.value)
        if employee is None:
            self._logger.info("employee_not_found", employee_id=str(id_result.value))
        else:
            self._logger.info("employee_soft_deleted", employee_id=str(employee.id))
        return Success(value=employee)

    async def list_by_department(
        self, department: Any
    ) -> Result[list[Employee], InvalidArgumentError]:
        """List employees of one department.

        Args:
            department: Department name (e.g. "engineering").

        Returns:
            Success(list) or Failure(InvalidArgumentError) for a name outside
            the department set.
        """
        department_result = validate_department(department)
        if isinstance(department_result, Failure):
            return department_result

        employees = await self._employee_repo.list_by_department(
            department_result.value
        )
        return Success(value=employees)

    async def list_active(self) -> Result[list[Employee], DomainError]:
        """List employees that have not been soft-deleted."""
        employees = await self._employee_repo.list_active()
        return Success(value=employees)

    def _log_invalid(self, operation: str, error: ValidationError) -> None:
        self._logger.warning(
            "employee_validation_failed",
            operation=operation,
            fields=sorted(error.field_errors),
        )
