"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention where an entity
applies. Used with Result types for railway-oriented programming.

Categories:
- Validation errors (VALIDATION_*, INVALID_*)
- Datastore constraint errors (CONSTRAINT_*, DUPLICATE_*, *_REFERENCE_*)
- Business rule violations (REFERENTIAL_INTEGRITY_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_ARGUMENT = "invalid_argument"

    # Datastore constraint errors
    CONSTRAINT_VIOLATION = "constraint_violation"
    DUPLICATE_SLUG = "duplicate_slug"
    DUPLICATE_EMAIL = "duplicate_email"
    COMPANY_REFERENCE_INVALID = "company_reference_invalid"

    # Business rule violations
    REFERENTIAL_INTEGRITY_VIOLATION = "referential_integrity_violation"
