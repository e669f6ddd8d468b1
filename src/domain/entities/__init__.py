"""Domain entities."""

from src.domain.entities.company import Company
from src.domain.entities.company_roster import CompanyEmployeeCount, CompanyWithEmployees
from src.domain.entities.employee import Employee

__all__ = [
    "Company",
    "CompanyEmployeeCount",
    "CompanyWithEmployees",
    "Employee",
]
