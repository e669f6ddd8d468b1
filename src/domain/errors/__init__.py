"""Domain error types.

Exports:
    ConstraintViolationError: Unique/foreign-key constraint rejected a write
    ReferentialIntegrityError: Delete blocked by referencing records
"""

from src.domain.errors.integrity_error import (
    ConstraintViolationError,
    ReferentialIntegrityError,
)

__all__ = [
    "ConstraintViolationError",
    "ReferentialIntegrityError",
]
