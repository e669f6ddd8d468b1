"""Pytest configuration shared by unit and integration tests.

Integration tests run against an in-memory SQLite database (via aiosqlite)
with foreign keys enforced, so no external database is needed.
"""

import os
from datetime import UTC, date, datetime
from typing import Any
from unittest.mock import MagicMock

# Settings require DATABASE_URL; set it before any src import reads it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities import Company, Employee  # noqa: E402
from src.domain.enums import Department  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Fresh in-memory database with the full schema (one per test)."""
    database = Database(TEST_DATABASE_URL)
    await database.create_all()
    yield database
    await database.close()


# ============================================================================
# Logger Fixtures
# ============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording every call."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


# ============================================================================
# Entity / Payload Helpers
# ============================================================================


def create_test_company(
    company_id=None,
    name: str = "Tech Corp",
    slug: str = "tech-corp",
    domain: str | None = "techcorp.com",
) -> Company:
    """Create a Company entity with sensible defaults."""
    now = datetime.now(UTC)
    return Company(
        id=company_id or uuid7(),
        name=name,
        slug=slug,
        domain=domain,
        created_at=now,
        updated_at=now,
    )


def create_test_employee(
    company_id,
    employee_id=None,
    email: str = "jane.smith@example.com",
    department: Department = Department.SALES,
    is_active: bool = True,
) -> Employee:
    """Create an Employee entity with sensible defaults."""
    now = datetime.now(UTC)
    return Employee(
        id=employee_id or uuid7(),
        first_name="Jane",
        last_name="Smith",
        email=email,
        phone_number="098-765-4321",
        department=department,
        position="Sales Manager",
        hire_date=date(2024, 3, 20),
        salary=75000,
        is_active=is_active,
        company_id=company_id,
        created_at=now,
        updated_at=now,
    )


def company_payload(**overrides: Any) -> dict[str, Any]:
    """Valid camelCase company create payload."""
    payload: dict[str, Any] = {
        "name": "Tech Corp",
        "slug": "tech-corp",
        "domain": "techcorp.com",
    }
    payload.update(overrides)
    return payload


def employee_payload(company_id, **overrides: Any) -> dict[str, Any]:
    """Valid camelCase employee create payload."""
    payload: dict[str, Any] = {
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@example.com",
        "phoneNumber": "098-765-4321",
        "department": "sales",
        "position": "Sales Manager",
        "hireDate": "2024-03-20",
        "salary": 75000,
        "companyId": str(company_id),
    }
    payload.update(overrides)
    return payload


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real (SQLite) database"
    )
