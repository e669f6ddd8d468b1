"""``companies`` command: CRUD and head counts over companies.

Usage:
    companies create [json]
    companies read-id <id>
    python -m src.presentation.cli.company_cli all-with-count
"""

import asyncio
import random
import sys
from typing import Any

from src.core.container import get_company_service
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.cli.output import print_record, print_table
from src.presentation.cli.runner import (
    EXIT_OK,
    Command,
    parse_payload,
    report,
    report_failure,
    run,
)

USAGE = """
Usage:
  companies create [json]                 - Create a company (sample data without json)
  companies read-all                      - Get all companies
  companies read-id <id>                  - Get company by ID
  companies read-slug <slug>              - Get company by slug
  companies read-with-employees <id>      - Get company with all its employees
  companies update <id> [json]            - Update company (sample update without json)
  companies delete <id>                   - Delete company (only if no employees)
  companies employee-count <id>           - Get employee count for a company
  companies all-with-count                - Get all companies with employee counts
"""


def sample_company() -> dict[str, Any]:
    """Sample create payload with a random numeric suffix."""
    suffix = random.randint(0, 9999)
    return {
        "name": f"Tech Corp {suffix}",
        "slug": f"tech-corp-{suffix}",
        "domain": f"techcorp{suffix}.com",
    }


def sample_company_update() -> dict[str, Any]:
    """Sample partial update payload."""
    return {"name": "Updated Tech Corp", "domain": "updatedtechcorp.com"}


# ============================================================================
# Verb handlers
# ============================================================================


async def create(args: list[str], logger: LoggerProtocol) -> int:
    payload = parse_payload(args[0] if args else None, sample_company)
    result = await get_company_service().create(payload)
    return report(
        result,
        logger,
        not_found="",
        render=lambda company: print_record(company, title="Company created:"),
    )


async def read_all(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_company_service().list_all()
    if isinstance(result, Failure):
        return report_failure(result, logger)
    print(f"Found {len(result.value)} companies")
    print_table(result.value)
    return EXIT_OK


async def read_id(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_company_service().get_by_id(args[0])
    return report(
        result,
        logger,
        not_found=f"No company found with id: {args[0]}",
        render=lambda company: print_record(company, title="Company found:"),
    )


async def read_slug(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_company_service().get_by_slug(args[0])
    return report(
        result,
        logger,
        not_found=f"No company found with slug: {args[0]}",
        render=lambda company: print_record(company, title="Company found:"),
    )


async def read_with_employees(args: list[str], logger: LoggerProtocol) -> int:
    def render(roster: Any) -> None:
        print_record(
            roster.company,
            title=f"Company found with {roster.employee_count} employees:",
        )
        print_table(roster.employees)

    result = await get_company_service().get_with_employees(args[0])
    return report(
        result,
        logger,
        not_found=f"No company found with id: {args[0]}",
        render=render,
    )


async def update(args: list[str], logger: LoggerProtocol) -> int:
    payload = parse_payload(args[1] if len(args) > 1 else None, sample_company_update)
    result = await get_company_service().update(args[0], payload)
    return report(
        result,
        logger,
        not_found=f"No company found with id: {args[0]}",
        render=lambda company: print_record(company, title="Company updated:"),
    )


async def delete(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_company_service().delete(args[0])
    return report(
        result,
        logger,
        not_found=f"No company found with id: {args[0]}",
        render=lambda company: print_record(company, title="Company deleted:"),
    )


async def employee_count(args: list[str], logger: LoggerProtocol) -> int:
    def render(count: Any) -> None:
        print(f"Company {count.company_name} has {count.employee_count} employees")

    result = await get_company_service().employee_count(args[0])
    return report(
        result,
        logger,
        not_found=f"No company found with id: {args[0]}",
        render=render,
    )


async def all_with_count(args: list[str], logger: LoggerProtocol) -> int:
    result = await get_company_service().all_with_employee_count()
    if isinstance(result, Failure):
        return report_failure(result, logger)
    print(f"Found {len(result.value)} companies with employee counts")
    print_table(result.value)
    return EXIT_OK


COMMANDS: dict[str, Command] = {
    "create": Command(handler=create),
    "read-all": Command(handler=read_all),
    "read-id": Command(handler=read_id, argument="a company ID"),
    "read-slug": Command(handler=read_slug, argument="a company slug"),
    "read-with-employees": Command(handler=read_with_employees, argument="a company ID"),
    "update": Command(handler=update, argument="a company ID"),
    "delete": Command(handler=delete, argument="a company ID"),
    "employee-count": Command(handler=employee_count, argument="a company ID"),
    "all-with-count": Command(handler=all_with_count),
}


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``companies`` command."""
    args = sys.argv[1:] if argv is None else argv
    return asyncio.run(run(args, COMMANDS, program="companies", usage=USAGE))


if __name__ == "__main__":
    sys.exit(main())
