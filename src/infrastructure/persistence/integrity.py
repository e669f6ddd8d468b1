"""Map datastore integrity exceptions to domain errors.

Violations are classified by the constraint or column the datastore names,
never by the rejected value. PostgreSQL names the constraint
(``"companies_slug_key"``) and the key column (``Key (slug)=``); SQLite names
``table.column`` (``UNIQUE constraint failed: companies.slug``) or says
``FOREIGN KEY constraint failed``.
"""

import re

from sqlalchemy.exc import IntegrityError

from src.core.enums import ErrorCode
from src.domain.errors import ConstraintViolationError

_CONSTRAINT_NAME = re.compile(r'constraint "(?P<name>[^"]+)"')
_KEY_COLUMNS = re.compile(r"Key \((?P<columns>[^)]+)\)=")
_SQLITE_COLUMNS = re.compile(r"constraint failed: (?P<columns>[\w.]+(?:, [\w.]+)*)")

# resource type -> (constraint name, column, error code); a write can only
# break the rules of its own table
_RULES: dict[str, tuple[tuple[str, str, ErrorCode], ...]] = {
    "Company": (("companies_slug_key", "slug", ErrorCode.DUPLICATE_SLUG),),
    "Employee": (
        (
            "employees_company_id_fkey",
            "company_id",
            ErrorCode.COMPANY_REFERENCE_INVALID,
        ),
        ("employees_email_key", "email", ErrorCode.DUPLICATE_EMAIL),
    ),
}

_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.COMPANY_REFERENCE_INVALID: "Referenced company does not exist",
    ErrorCode.DUPLICATE_EMAIL: "Email is already in use",
    ErrorCode.DUPLICATE_SLUG: "Slug is already in use",
}


def _violated(detail: str) -> tuple[set[str], set[str], bool]:
    """Constraint names, column names and whether a foreign key failed."""
    headline = detail.splitlines()[0] if detail else ""

    names = {m.group("name") for m in _CONSTRAINT_NAME.finditer(headline)}

    columns: set[str] = set()
    key = _KEY_COLUMNS.search(detail)
    if key:
        columns.update(c.strip() for c in key.group("columns").split(","))
    sqlite = _SQLITE_COLUMNS.search(headline)
    if sqlite:
        columns.update(
            c.strip().rsplit(".", 1)[-1] for c in sqlite.group("columns").split(",")
        )

    foreign_key = "foreign key constraint" in headline.lower()
    return names, columns, foreign_key


def to_constraint_violation(
    exc: IntegrityError, resource_type: str
) -> ConstraintViolationError:
    """Translate an IntegrityError raised by a write.

    Args:
        exc: Exception raised on flush.
        resource_type: Entity being written ("Company", "Employee").

    Returns:
        ConstraintViolationError naming the violated column when recognised.
    """
    detail = str(exc.orig)
    names, columns, foreign_key = _violated(detail)

    for constraint, field_name, code in _RULES.get(resource_type, ()):
        if code is ErrorCode.COMPANY_REFERENCE_INVALID:
            matched = constraint in names or (foreign_key and not names)
        else:
            matched = constraint in names or (
                not foreign_key and field_name in columns
            )
        if matched:
            return ConstraintViolationError(
                code=code,
                message=_MESSAGES[code],
                resource_type=resource_type,
                constraint_field=field_name,
                details={"error": detail},
            )
    return ConstraintViolationError(
        code=ErrorCode.CONSTRAINT_VIOLATION,
        message=f"{resource_type} violates a database constraint",
        resource_type=resource_type,
        details={"error": detail},
    )
