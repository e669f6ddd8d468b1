"""Employee input schemas and validators.

Coercion happens before checks: ``"75000"`` becomes ``75000``,
``"2024-01-15"`` becomes a date, ``"true"`` becomes ``True`` and UUID strings
become UUIDs. Values that cannot be coerced (``"abc"`` for salary) fail.
"""

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.core.enums import ErrorCode
from src.core.errors import InvalidArgumentError, ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import validate_pattern, validate_payload, validate_uuid
from src.domain.enums import Department
from src.domain.types import EmailAddress, PersonName, PhoneNumber, Position, Salary
from src.domain.validators import EMAIL_PATTERN

EMAIL_MAX_LENGTH = 255

_INPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)

_REQUIRED_COLUMNS = (
    "first_name",
    "last_name",
    "email",
    "department",
    "position",
    "hire_date",
    "salary",
    "is_active",
    "company_id",
)


class EmployeeInsert(BaseModel):
    """Payload for creating an employee.

    ``isActive`` defaults to true; an empty ``phoneNumber`` is stored as null.
    """

    model_config = _INPUT_CONFIG

    first_name: PersonName = Field(..., examples=["Jane"])
    last_name: PersonName = Field(..., examples=["Doe"])
    email: EmailAddress = Field(..., examples=["jane.doe@example.com"])
    phone_number: PhoneNumber | None = Field(default=None, examples=["+1 555 0100"])
    department: Department
    position: Position = Field(..., examples=["Software Engineer"])
    hire_date: date
    salary: Salary
    is_active: bool = True
    company_id: UUID

    @field_validator("phone_number", mode="before")
    @classmethod
    def empty_phone_is_null(cls, v: Any) -> Any:
        """Treat an empty phone number as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class EmployeeUpdate(BaseModel):
    """Partial payload for updating an employee.

    Only ``phoneNumber`` accepts an explicit null. Sending ``isActive: true``
    reactivates a soft-deleted employee.
    """

    model_config = _INPUT_CONFIG

    first_name: PersonName | None = None
    last_name: PersonName | None = None
    email: EmailAddress | None = None
    phone_number: PhoneNumber | None = None
    department: Department | None = None
    position: Position | None = None
    hire_date: date | None = None
    salary: Salary | None = None
    is_active: bool | None = None
    company_id: UUID | None = None

    @field_validator(*_REQUIRED_COLUMNS, mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        """Reject explicit null for required columns."""
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("phone_number", mode="before")
    @classmethod
    def empty_phone_is_null(cls, v: Any) -> Any:
        """Treat an empty phone number as null."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def validate_employee_insert(data: Any) -> Result[EmployeeInsert, ValidationError]:
    """Validate a create payload, reporting every failing field."""
    return validate_payload(EmployeeInsert, data, entity="employee")


def validate_employee_update(data: Any) -> Result[EmployeeUpdate, ValidationError]:
    """Validate a partial update payload; only supplied fields are checked."""
    return validate_payload(EmployeeUpdate, data, entity="employee update")


def validate_employee_id(value: Any) -> Result[UUID, InvalidArgumentError]:
    """Validate an employee id (UUID string or UUID)."""
    return validate_uuid(value, "id")


def validate_employee_email(value: Any) -> Result[str, InvalidArgumentError]:
    """Validate an email used as a lookup key."""
    return validate_pattern(
        value, EMAIL_PATTERN, "email", max_length=EMAIL_MAX_LENGTH
    )


def validate_department(value: Any) -> Result[Department, InvalidArgumentError]:
    """Validate a department name against the closed set.

    Args:
        value: Raw department (e.g. "engineering").

    Returns:
        Success(Department) or Failure(InvalidArgumentError) naming the
        allowed values.
    """
    if isinstance(value, Department):
        return Success(value=value)
    if isinstance(value, str) and Department.is_valid(value):
        return Success(value=Department(value))
    return Failure(
        error=InvalidArgumentError(
            code=ErrorCode.INVALID_ARGUMENT,
            message=(
                "Invalid department. Must be one of: "
                + ", ".join(Department.values())
            ),
            argument="department",
            value=str(value),
        )
    )
