"""Read models that combine companies with their employees.

These are query results, not persisted entities.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities.company import Company
from src.domain.entities.employee import Employee


@dataclass
class CompanyWithEmployees:
    """A company together with every employee that references it.

    Attributes:
        company: The company.
        employees: Its employees, in storage order.
    """

    company: Company
    employees: list[Employee] = field(default_factory=list)

    @property
    def employee_count(self) -> int:
        """Number of employees loaded with the company."""
        return len(self.employees)


@dataclass(frozen=True, kw_only=True)
class CompanyEmployeeCount:
    """Per-company employee head count.

    Companies without employees are reported with ``employee_count == 0``.

    Attributes:
        company_id: Company identifier.
        company_name: Company name.
        company_slug: Company slug.
        company_domain: Company domain, if any.
        employee_count: Number of employees referencing the company.
    """

    company_id: UUID
    company_name: str
    company_slug: str
    company_domain: str | None
    employee_count: int
