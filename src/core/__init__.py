"""Core shared kernel.

Foundational pieces used by every layer:
- Result types for railway-oriented programming
- Base error classes carried inside Failure
- Generic validation helpers

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    DomainError,
    InvalidArgumentError,
    ValidationError,
)
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "InvalidArgumentError",
    "Result",
    "Success",
    "ValidationError",
]
