"""Repository implementations (adapters for the domain repository protocols)."""

from src.infrastructure.persistence.repositories.company_repository import (
    CompanyRepository,
)
from src.infrastructure.persistence.repositories.employee_repository import (
    EmployeeRepository,
)

__all__ = [
    "CompanyRepository",
    "EmployeeRepository",
]
