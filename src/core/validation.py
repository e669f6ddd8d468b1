"""Validation framework for input validation.

Generic helpers shared by the entity validators in ``src.schemas``. All
functions are pure and return Result types for consistent error handling.

Usage:
    from src.core.validation import validate_uuid
    from src.core.result import Success, Failure

    match validate_uuid(raw_id, "id"):
        case Success(value=company_id):
            ...
        case Failure(error=error):
            print(error.message)
"""

import re
from collections.abc import Mapping
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.core.enums import ErrorCode
from src.core.errors import InvalidArgumentError, ValidationError
from src.core.result import Failure, Result, Success

ModelT = TypeVar("ModelT", bound=BaseModel)

# Key used when the payload itself (not a field) is rejected
PAYLOAD_FIELD = "payload"


def _reason(message: str) -> str:
    # pydantic prefixes messages raised from custom validators
    for prefix in ("Value error, ", "Assertion failed, "):
        if message.startswith(prefix):
            return message[len(prefix) :]
    return message


def collect_field_errors(
    exc: PydanticValidationError, public_names: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Flatten a pydantic error into ``{field: reason}``.

    Only the first reason per field is kept. Fields are reported by their
    public (camelCase) name whichever key spelling the caller used.

    Args:
        exc: Error raised by ``model_validate``.
        public_names: Field name to public name.

    Returns:
        Mapping of failing field to human-readable reason.
    """
    field_errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc") or ()]
        if loc and public_names:
            loc[0] = public_names.get(loc[0], loc[0])
        field = ".".join(loc) or PAYLOAD_FIELD
        field_errors.setdefault(field, _reason(error.get("msg", "invalid value")))
    return field_errors


def _public_names(model: type[BaseModel]) -> dict[str, str]:
    return {
        name: field.alias
        for name, field in model.model_fields.items()
        if field.alias and field.alias != name
    }


def validate_payload(
    model: type[ModelT], data: Mapping[str, Any] | Any, *, entity: str
) -> Result[ModelT, ValidationError]:
    """Coerce and check a raw payload against a pydantic model.

    Args:
        model: Pydantic model describing the payload.
        data: Untyped field mapping from the caller.
        entity: Entity name used in the summary message.

    Returns:
        Success with the validated model, or Failure listing every bad field.
    """
    if not isinstance(data, Mapping):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Invalid {entity} payload",
                field_errors={PAYLOAD_FIELD: "Input should be an object"},
            )
        )

    try:
        return Success(value=model.model_validate(dict(data)))
    except PydanticValidationError as exc:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Invalid {entity} payload",
                field_errors=collect_field_errors(exc, _public_names(model)),
            )
        )


def validate_uuid(value: Any, argument: str) -> Result[UUID, InvalidArgumentError]:
    """Validate that a lookup key is a UUID.

    Args:
        value: Raw value (string or UUID).
        argument: Name of the argument being validated.

    Returns:
        Success with the parsed UUID, Failure with InvalidArgumentError otherwise.
    """
    if isinstance(value, UUID):
        return Success(value=value)
    try:
        return Success(value=UUID(str(value).strip()))
    except (TypeError, ValueError, AttributeError):
        return Failure(
            error=InvalidArgumentError(
                code=ErrorCode.INVALID_ARGUMENT,
                message=f"{argument} must be a valid UUID",
                argument=argument,
                value=str(value),
            )
        )


def validate_pattern(
    value: Any, pattern: re.Pattern[str], argument: str, *, max_length: int
) -> Result[str, InvalidArgumentError]:
    """Validate a string lookup key against a regex and a maximum length.

    Args:
        value: Raw value.
        pattern: Compiled pattern the whole value must match.
        argument: Name of the argument being validated.
        max_length: Maximum allowed length.

    Returns:
        Success with the value, Failure with InvalidArgumentError otherwise.
    """
    if (
        not isinstance(value, str)
        or not value
        or len(value) > max_length
        or not pattern.fullmatch(value)
    ):
        return Failure(
            error=InvalidArgumentError(
                code=ErrorCode.INVALID_ARGUMENT,
                message=f"Invalid {argument} format",
                argument=argument,
                value=str(value),
            )
        )
    return Success(value=value)
