"""Tests for the ``companies`` and ``employees`` verbs with mocked services."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import CompanyEmployeeCount, CompanyWithEmployees
from src.domain.errors import ReferentialIntegrityError
from src.presentation.cli import company_cli, employee_cli, runner
from tests.conftest import create_test_company, create_test_employee


@pytest.fixture(autouse=True)
def cli_infrastructure(monkeypatch, mock_logger):
    """Keep dispatch away from the real database and logger."""
    database = MagicMock()
    database.close = AsyncMock()
    monkeypatch.setattr(runner, "get_database", lambda: database)
    monkeypatch.setattr(runner, "get_logger", lambda: mock_logger)


@pytest.fixture
def company_service(monkeypatch) -> AsyncMock:
    service = AsyncMock()
    monkeypatch.setattr(company_cli, "get_company_service", lambda: service)
    monkeypatch.setattr(employee_cli, "get_company_service", lambda: service)
    return service


@pytest.fixture
def employee_service(monkeypatch) -> AsyncMock:
    service = AsyncMock()
    monkeypatch.setattr(employee_cli, "get_employee_service", lambda: service)
    return service


async def _companies(*args: str) -> int:
    return await runner.run(
        list(args), company_cli.COMMANDS, program="companies", usage=company_cli.USAGE
    )


async def _employees(*args: str) -> int:
    return await runner.run(
        list(args), employee_cli.COMMANDS, program="employees", usage=employee_cli.USAGE
    )


@pytest.mark.unit
class TestCompanyCommands:
    @pytest.mark.asyncio
    async def test_create_with_sample_data(self, company_service, capsys):
        company_service.create.return_value = Success(value=create_test_company())

        assert await _companies("create") == 0

        payload = company_service.create.await_args.args[0]
        assert payload["slug"].startswith("tech-corp-")
        assert capsys.readouterr().out.startswith("Company created:")

    @pytest.mark.asyncio
    async def test_create_with_json(self, company_service):
        company_service.create.return_value = Success(value=create_test_company())

        await _companies("create", '{"name": "Acme", "slug": "acme"}')

        company_service.create.assert_awaited_once_with({"name": "Acme", "slug": "acme"})

    @pytest.mark.asyncio
    async def test_read_id_not_found(self, company_service, capsys):
        company_service.get_by_id.return_value = Success(value=None)

        assert await _companies("read-id", "abc") == 0
        assert capsys.readouterr().out == "No company found with id: abc\n"

    @pytest.mark.asyncio
    async def test_update_uses_sample_update(self, company_service):
        company = create_test_company()
        company_service.update.return_value = Success(value=company)

        await _companies("update", str(company.id))

        company_service.update.assert_awaited_once_with(
            str(company.id), company_cli.sample_company_update()
        )

    @pytest.mark.asyncio
    async def test_delete_blocked_exits_one(self, company_service, capsys):
        company_id = uuid7()
        company_service.delete.return_value = Failure(
            error=ReferentialIntegrityError(
                code=ErrorCode.REFERENTIAL_INTEGRITY_VIOLATION,
                message="Cannot delete company with existing employees",
                resource_type="Company",
                resource_id=str(company_id),
                dependent_count=2,
            )
        )

        assert await _companies("delete", str(company_id)) == 1
        assert "Cannot delete company with existing employees" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_employee_count(self, company_service, capsys):
        company_service.employee_count.return_value = Success(
            value=CompanyEmployeeCount(
                company_id=uuid7(),
                company_name="Tech Corp",
                company_slug="tech-corp",
                company_domain=None,
                employee_count=4,
            )
        )

        await _companies("employee-count", "x")

        assert capsys.readouterr().out == "Company Tech Corp has 4 employees\n"

    @pytest.mark.asyncio
    async def test_read_with_employees(self, company_service, capsys):
        company = create_test_company()
        company_service.get_with_employees.return_value = Success(
            value=CompanyWithEmployees(
                company=company, employees=[create_test_employee(company.id)]
            )
        )

        await _companies("read-with-employees", str(company.id))

        out = capsys.readouterr().out
        assert out.startswith("Company found with 1 employees:")
        assert "jane.smith@example.com" in out

    @pytest.mark.asyncio
    async def test_read_all_empty(self, company_service, capsys):
        company_service.list_all.return_value = Success(value=[])

        await _companies("read-all")

        assert capsys.readouterr().out == "Found 0 companies\n(no rows)\n"


@pytest.mark.unit
class TestEmployeeCommands:
    @pytest.mark.asyncio
    async def test_create_sample_uses_first_company(
        self, company_service, employee_service
    ):
        company = create_test_company()
        company_service.list_all.return_value = Success(value=[company])
        employee_service.create.return_value = Success(
            value=create_test_employee(company.id)
        )

        assert await _employees("create") == 0

        payload = employee_service.create.await_args.args[0]
        assert payload["companyId"] == str(company.id)

    @pytest.mark.asyncio
    async def test_create_sample_without_company(
        self, company_service, employee_service, capsys
    ):
        company_service.list_all.return_value = Success(value=[])

        assert await _employees("create") == 1

        assert "No company found. Create a company first" in capsys.readouterr().err
        employee_service.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_department(self, employee_service, capsys):
        employee_service.list_by_department.return_value = Success(value=[])

        await _employees("read-department", "engineering")

        employee_service.list_by_department.assert_awaited_once_with("engineering")
        assert capsys.readouterr().out.startswith(
            "Found 0 employees in engineering department"
        )

    @pytest.mark.asyncio
    async def test_soft_delete(self, employee_service, capsys):
        employee = create_test_employee(uuid7(), is_active=False)
        employee_service.soft_delete.return_value = Success(value=employee)

        assert await _employees("soft-delete", str(employee.id)) == 0
        assert capsys.readouterr().out.startswith("Employee soft deleted:")

    @pytest.mark.asyncio
    async def test_read_email_requires_argument(self, employee_service, capsys):
        assert await _employees("read-email") == 1
        assert capsys.readouterr().err == "Please provide an email\n"

    @pytest.mark.asyncio
    async def test_invalid_json_update(self, employee_service, capsys):
        assert await _employees("update", "abc", "{bad") == 1
        employee_service.update.assert_not_awaited()
        assert "Invalid JSON payload" in capsys.readouterr().err
