"""Domain protocols (ports).

Structural interfaces implemented by the infrastructure layer.
"""

from src.domain.protocols.company_repository import CompanyRepository
from src.domain.protocols.employee_repository import EmployeeRepository
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CompanyRepository",
    "EmployeeRepository",
    "LoggerProtocol",
]
