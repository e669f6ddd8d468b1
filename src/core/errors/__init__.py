"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DomainError, ValidationError
"""

from src.core.errors.common_errors import InvalidArgumentError, ValidationError
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
