"""Application services."""

from src.application.services.company_service import CompanyService
from src.application.services.employee_service import EmployeeService

__all__ = [
    "CompanyService",
    "EmployeeService",
]
