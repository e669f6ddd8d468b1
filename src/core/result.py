"""Result types for railway-oriented programming.

Every service operation returns a Result instead of raising for expected
failures (bad input, duplicate keys, blocked deletes). Absence of a record is
a normal outcome and is returned as ``Success(value=None)``.

Usage:
    result = await company_service.get_by_slug("acme")
    match result:
        case Success(value=None):
            print("No company with that slug")
        case Success(value=company):
            print(company.name)
        case Failure(error=error):
            print(f"Lookup failed: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The result value (None means "not found" for lookups).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
