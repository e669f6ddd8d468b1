"""Domain enums for business logic.

Available Enums:
    - Department: Closed set of employee departments
"""

from src.domain.enums.department import Department

__all__ = [
    "Department",
]
