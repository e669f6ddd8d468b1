"""Integration tests for CompanyService and EmployeeService over a real database.

Payloads go in untyped (camelCase, strings for numbers and dates) exactly as
the CLI sends them.
"""

import pytest
import pytest_asyncio

from src.application.services import CompanyService, EmployeeService
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.infrastructure.persistence.repositories import (
    CompanyRepository,
    EmployeeRepository,
)
from tests.conftest import company_payload, employee_payload


@pytest_asyncio.fixture
async def company_service(test_database, mock_logger) -> CompanyService:
    return CompanyService(
        company_repo=CompanyRepository(test_database), logger=mock_logger
    )


@pytest_asyncio.fixture
async def employee_service(test_database, mock_logger) -> EmployeeService:
    return EmployeeService(
        employee_repo=EmployeeRepository(test_database), logger=mock_logger
    )


@pytest.mark.integration
class TestRosterLifecycle:
    @pytest.mark.asyncio
    async def test_company_and_employee_lifecycle(
        self, company_service, employee_service
    ):
        company = (await company_service.create(company_payload())).value

        created = await employee_service.create(
            employee_payload(company.id, salary="75000", isActive="true")
        )
        assert isinstance(created, Success)
        employee = created.value

        blocked = await company_service.delete(str(company.id))
        assert isinstance(blocked, Failure)
        assert blocked.error.dependent_count == 1

        count = await company_service.employee_count(str(company.id))
        assert count.value.employee_count == 1

        await employee_service.delete(str(employee.id))

        deleted = await company_service.delete(str(company.id))
        assert deleted.value.id == company.id
        assert await company_service.get_by_id(str(company.id)) == Success(value=None)

    @pytest.mark.asyncio
    async def test_soft_delete_then_reactivate(self, company_service, employee_service):
        company = (await company_service.create(company_payload())).value
        employee = (await employee_service.create(employee_payload(company.id))).value

        await employee_service.soft_delete(str(employee.id))
        assert (await employee_service.list_active()).value == []
        assert (await employee_service.get_by_id(str(employee.id))).value is not None

        reactivated = await employee_service.update(str(employee.id), {"isActive": True})

        assert reactivated.value.is_active is True
        assert len((await employee_service.list_active()).value) == 1

    @pytest.mark.asyncio
    async def test_invalid_payload_leaves_storage_untouched(self, employee_service):
        result = await employee_service.create({"firstName": "Jane"})

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert "lastName" in result.error.field_errors
        assert (await employee_service.list_all()).value == []

    @pytest.mark.asyncio
    async def test_duplicate_slug_through_service(self, company_service):
        await company_service.create(company_payload())

        result = await company_service.create(company_payload(name="Other"))

        assert result.error.code == ErrorCode.DUPLICATE_SLUG

    @pytest.mark.asyncio
    async def test_department_listing(self, company_service, employee_service):
        company = (await company_service.create(company_payload())).value
        await employee_service.create(
            employee_payload(company.id, department="engineering", email="e@example.com")
        )

        engineers = await employee_service.list_by_department("engineering")
        unknown = await employee_service.list_by_department("legal")

        assert len(engineers.value) == 1
        assert isinstance(unknown, Failure)
        assert unknown.error.message.startswith("Invalid department. Must be one of:")
