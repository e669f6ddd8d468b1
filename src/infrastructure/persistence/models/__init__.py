"""Database models for the persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and are not imported by the domain layer.

Models Organization:
    - company.py: companies table
    - employee.py: employees table (FK to companies)

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.company import CompanyModel
from src.infrastructure.persistence.models.employee import EmployeeModel

__all__ = [
    "CompanyModel",
    "EmployeeModel",
]
