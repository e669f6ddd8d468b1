"""Repository dependency factories.

Repositories hold the app-scoped Database and open one session per
operation, so a single instance can be shared.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.infrastructure import get_database

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        CompanyRepository,
        EmployeeRepository,
    )


# ============================================================================
# Repository Factories
# ============================================================================


@lru_cache()
def get_company_repository() -> "CompanyRepository":
    """Get company repository backed by the shared database."""
    from src.infrastructure.persistence.repositories import CompanyRepository

    return CompanyRepository(get_database())


@lru_cache()
def get_employee_repository() -> "EmployeeRepository":
    """Get employee repository backed by the shared database."""
    from src.infrastructure.persistence.repositories import EmployeeRepository

    return EmployeeRepository(get_database())
