"""Common error classes used across all layers.

Error Types:
- ValidationError: A payload failed shape/format rules (every field listed)
- InvalidArgumentError: A single lookup key (id, slug, email, department)
  is malformed

Usage:
    from src.core.errors import InvalidArgumentError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=InvalidArgumentError(
        code=ErrorCode.INVALID_ARGUMENT,
        message="Invalid company id",
        argument="id",
        value="not-a-uuid",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable summary.
        field_errors: Every failing field mapped to its reason.
        details: Additional context.
    """

    field_errors: dict[str, str]

    def __str__(self) -> str:
        """Summary followed by each failing field."""
        reasons = "; ".join(
            f"{field}: {reason}" for field, reason in self.field_errors.items()
        )
        return f"{self.code.value}: {self.message} ({reasons})"


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidArgumentError(DomainError):
    """A lookup key failed its shape check.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        argument: Name of the argument (id, slug, email, department).
        value: The rejected raw value.
        details: Additional context.
    """

    argument: str
    value: str
