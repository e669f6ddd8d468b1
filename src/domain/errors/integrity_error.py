"""Integrity error types for repository contracts.

These errors are part of the repository protocol contracts: they describe the
ways a write can be refused by the datastore or by the application's own
integrity guard.

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- Infrastructure repositories map driver exceptions to these errors

Usage:
    from src.domain.errors import ReferentialIntegrityError

    return Failure(
        error=ReferentialIntegrityError(
            code=ErrorCode.REFERENTIAL_INTEGRITY_VIOLATION,
            message="Cannot delete company with existing employees",
            resource_type="Company",
            resource_id=str(company_id),
            dependent_count=3,
        )
    )
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ConstraintViolationError(DomainError):
    """A unique or foreign-key constraint rejected a write.

    Raised when:
    - A company slug is already taken
    - An employee email is already taken
    - An employee references a company that does not exist

    Attributes:
        code: Domain ErrorCode (DUPLICATE_SLUG, DUPLICATE_EMAIL,
            COMPANY_REFERENCE_INVALID or CONSTRAINT_VIOLATION).
        message: Human-readable message.
        resource_type: Entity being written ("Company", "Employee").
        constraint_field: Column the constraint guards, when known.
    """

    resource_type: str
    constraint_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferentialIntegrityError(DomainError):
    """Deletion blocked because other records still reference the target.

    Attributes:
        code: Domain ErrorCode (REFERENTIAL_INTEGRITY_VIOLATION).
        message: Human-readable message.
        resource_type: Entity that could not be deleted.
        resource_id: Its identifier.
        dependent_count: Number of referencing records seen (0 when the
            datastore caught a reference the pre-check missed).
    """

    resource_type: str
    resource_id: str
    dependent_count: int = 0
