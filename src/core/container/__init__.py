"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_database, get_company_service, ...

The container is organized into modules by concern:
- infrastructure: Database and logging singletons
- repositories: Repository factories
- services: Application service factories
"""

# Infrastructure services
from src.core.container.infrastructure import get_database, get_logger

# Repositories
from src.core.container.repositories import (
    get_company_repository,
    get_employee_repository,
)

# Application services
from src.core.container.services import (
    get_company_service,
    get_employee_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    # Repositories
    "get_company_repository",
    "get_employee_repository",
    # Services
    "get_company_service",
    "get_employee_service",
]
