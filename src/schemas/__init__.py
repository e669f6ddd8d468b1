"""Input schemas and validation functions.

Pydantic models for validating untyped input before it reaches the
repositories, and the Result-returning validators built on them.

Usage:
    from src.schemas import validate_company_insert, validate_employee_id
"""

from src.schemas.company_schemas import (
    CompanyInsert,
    CompanyUpdate,
    validate_company_id,
    validate_company_insert,
    validate_company_slug,
    validate_company_update,
)
from src.schemas.employee_schemas import (
    EmployeeInsert,
    EmployeeUpdate,
    validate_department,
    validate_employee_email,
    validate_employee_id,
    validate_employee_insert,
    validate_employee_update,
)

__all__ = [
    # Company
    "CompanyInsert",
    "CompanyUpdate",
    "validate_company_id",
    "validate_company_insert",
    "validate_company_slug",
    "validate_company_update",
    # Employee
    "EmployeeInsert",
    "EmployeeUpdate",
    "validate_department",
    "validate_employee_email",
    "validate_employee_id",
    "validate_employee_insert",
    "validate_employee_update",
]
