"""``employees`` command: CRUD, soft delete and listings over employees.

Usage:
    employees create [json]
    employees read-department engineering
    python -m src.presentation.cli.employee_cli read-active
"""

import asyncio
import random
import sys
from collections.abc import Callable
from typing import Any

from src.core.container import get_company_service, get_employee_service
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.cli.output import print_record, print_table
from src.presentation.cli.runner import (
    EXIT_ERROR,
    EXIT_OK,
    Command,
    parse_payload,
    report,
    report_failure,
    run,
)

USAGE = """
Usage:
  employees create [json]                 - Create an employee (sample data without json)
  employees read-all                      - Get all employees
  employees read-id <id>                  - Get employee by ID
  employees read-email <email>            - Get employee by email
  employees update <id> [json]            - Update employee (sample update without json)
  employees delete <id>                   - Delete employee
  employees soft-delete <id>              - Soft delete employee (set isActive to false)
  employees read-department <dept>        - Get employees by department
  employees read-active                   - Get all active employees
"""


def sample_employee() -> dict[str, Any]:
    """Sample create payload with a random numeric email suffix.

    ``companyId`` is filled in from the first stored company.
    """
    suffix = random.randint(0, 9999)
    return {
        "firstName": "Jane",
        "lastName": "Smith",
        "email": f"jane.smith{suffix}@example.com",
        "phoneNumber": "098-765-4321",
        "department": "sales",
        "position": "Sales Manager",
        "hireDate": "2024-03-20",
        "salary": 75000,
        "isActive": True,
    }


def sample_employee_update() -> dict[str, Any]:
    """Sample partial update payload."""
    return {"position": "Senior Software Engineer", "salary": 95000}


async def _sample_with_company() -> dict[str, Any] | None:
    companies = await get_company_service().list_all()
    if isinstance(companies, Failure) or not companies.value:
        return None
    payload = sample_employee()
    payload["companyId"] = str(companies.value[0].id)
    return payload


def _print_list(
    result: Any, logger: LoggerProtocol, summary: Callable[[int], str]
) -> int:
    if isinstance(result, Failure):
        return report_failure(result, logger)
    print(summary(len(result.value)))
    print_table(result.value)
    return EXIT_OK


# ============================================================================
# Verb handlers
# ============================================================================


async def create(args: list[str], logger: LoggerProtocol) -> int:
    if args:
        payload = parse_payload(args[0], sample_employee)
    else:
        payload = await _sample_with_company()
        if payload is None:
            print("No company found. Create a company first", file=sys.stderr)
            return EXIT_ERROR

    result = await get_employee_service().create(payload)
    return report(
        result,
        logger,
        not_found="",
        render=lambda employee: print_record(employee, title="Employee created:"),
    )


async def read_all(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_employee_service().list_all()
    return _print_list(result, logger, lambda n: f"Found {n} employees")


async def read_id(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_employee_service().get_by_id(args[0])
    return report(
        result,
        logger,
        not_found=f"No employee found with id: {args[0]}",
        render=lambda employee: print_record(employee, title="Employee found:"),
    )


async def read_email(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_employee_service().get_by_email(args[0])
    return report(
        result,
        logger,
        not_found=f"No employee found with email: {args[0]}",
        render=lambda employee: print_record(employee, title="Employee found:"),
    )


async def update(args: list[str], logger: LoggerProtocol) -> int:
    payload = parse_payload(args[1] if len(args) > 1 else None, sample_employee_update)
    result = await get_employee_service().update(args[0], payload)
    return report(
        result,
        logger,
        not_found=f"No employee found with id: {args[0]}",
        render=lambda employee: print_record(employee, title="Employee updated:"),
    )


async def delete(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_employee_service().delete(args[0])
    return report(
        result,
        logger,
        not_found=f"No employee found with id: {args[0]}",
        render=lambda employee: print_record(employee, title="Employee deleted:"),
    )


async def soft_delete(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_employee_service().soft_delete(args[0])
    return report(
        result,
        logger,
        not_found=f"No employee found with id: {args[0]}",
        render=lambda employee: print_record(employee, title="Employee soft deleted:"),
    )


async def read_department(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_employee_service().list_by_department(args[0])
    return _print_list(
        result, logger, lambda n: f"Found {n} employees in {args[0]} department"
    )


async def read_active(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_employee_service().list_active()
    return _print_list(result, logger, lambda n: f"Found {n} active employees")


COMMANDS: dict[str, Command] = {
    "create": Command(handler=create),
    "read-all": Command(handler=read_all),
    "read-id": Command(handler=read_id, argument="an employee ID"),
    "read-email": Command(handler=read_email, argument="an email"),
    "update": Command(handler=update, argument="an employee ID"),
    "delete": Command(handler=delete, argument="an employee ID"),
    "soft-delete": Command(handler=soft_delete, argument="an employee ID"),
    "read-department": Command(handler=read_department, argument="a department"),
    "read-active": Command(handler=read_active),
}


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``employees`` command."""
    args = sys.argv[1:] if argv is None else argv
    return asyncio.run(run(args, COMMANDS, program="employees", usage=USAGE))


if __name__ == "__main__":
    sys.exit(main())
