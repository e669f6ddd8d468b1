"""Department enum for employees.

Closed set of departments an employee can belong to. Stored as the
PostgreSQL enum type ``department``.

Usage:
    from src.domain.enums import Department

    employee.department == Department.SALES
"""

from enum import Enum


class Department(str, Enum):
    """Department an employee works in.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.
    """

    ENGINEERING = "engineering"
    SALES = "sales"
    MARKETING = "marketing"
    HR = "hr"
    FINANCE = "finance"

    @classmethod
    def values(cls) -> list[str]:
        """Get all department values as strings.

        Returns:
            list[str]: List of department values.
        """
        return [department.value for department in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid department.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid department.
        """
        return value in cls.values()
