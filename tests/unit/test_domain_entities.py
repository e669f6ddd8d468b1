"""Tests for the company and employee entities and the Department enum."""

from datetime import date

import pytest
from uuid_extensions import uuid7

from src.domain.entities import CompanyEmployeeCount, CompanyWithEmployees
from src.domain.enums import Department
from tests.conftest import create_test_company, create_test_employee


@pytest.mark.unit
class TestDepartment:
    """Test Department enum helpers."""

    def test_values(self):
        assert Department.values() == [
            "engineering",
            "sales",
            "marketing",
            "hr",
            "finance",
        ]

    @pytest.mark.parametrize("value", ["engineering", "hr"])
    def test_is_valid(self, value):
        assert Department.is_valid(value)

    @pytest.mark.parametrize("value", ["Engineering", "legal", ""])
    def test_is_not_valid(self, value):
        assert not Department.is_valid(value)

    def test_is_string(self):
        assert Department.SALES == "sales"


@pytest.mark.unit
class TestCompany:
    def test_domain_defaults_to_none(self):
        company = create_test_company(domain=None)
        assert company.domain is None

    def test_str(self):
        assert str(create_test_company()) == "Tech Corp (tech-corp)"


@pytest.mark.unit
class TestEmployee:
    def test_full_name(self):
        assert create_test_employee(uuid7()).full_name == "Jane Smith"

    def test_str_shows_status(self):
        employee = create_test_employee(uuid7(), is_active=False)
        assert str(employee) == "Jane Smith <jane.smith@example.com> - inactive"

    def test_hire_date_is_calendar_date(self):
        employee = create_test_employee(uuid7())
        assert employee.hire_date == date(2024, 3, 20)


@pytest.mark.unit
class TestReadModels:
    def test_company_with_employees_count(self):
        company = create_test_company()
        roster = CompanyWithEmployees(
            company=company,
            employees=[
                create_test_employee(company.id, email="a@example.com"),
                create_test_employee(company.id, email="b@example.com"),
            ],
        )
        assert roster.employee_count == 2

    def test_company_with_no_employees(self):
        assert CompanyWithEmployees(company=create_test_company()).employees == []

    def test_employee_count_is_immutable(self):
        count = CompanyEmployeeCount(
            company_id=uuid7(),
            company_name="Tech Corp",
            company_slug="tech-corp",
            company_domain=None,
            employee_count=0,
        )
        with pytest.raises(AttributeError):
            count.employee_count = 1  # type: ignore[misc]
