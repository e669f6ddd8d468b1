"""Application service factories.

Wires repositories and the logger into the roster services.

Usage:
    from src.core.container import get_company_service

    service = get_company_service()
    result = await service.get_by_slug("tech-corp")
"""

from typing import TYPE_CHECKING

from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_company_repository,
    get_employee_repository,
)

if TYPE_CHECKING:
    from src.application.services.company_service import CompanyService
    from src.application.services.employee_service import EmployeeService


def get_company_service() -> "CompanyService":
    """Get company service with its dependencies."""
    from src.application.services.company_service import CompanyService

    return CompanyService(
        company_repo=get_company_repository(),
        logger=get_logger(),
    )


def get_employee_service() -> "EmployeeService":
    """Get employee service with its dependencies."""
    from src.application.services.employee_service import EmployeeService

    return EmployeeService(
        employee_repo=get_employee_repository(),
        logger=get_logger(),
    )
