"""Plain-text rendering for CLI results.

Records print as ``key: value`` lines; lists print as an aligned table with
one column per field.
"""

import sys
from collections.abc import Mapping, Sequence
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, TextIO

EMPTY_CELL = "-"


def format_value(value: Any) -> str:
    """Render one field value for display."""
    if value is None:
        return EMPTY_CELL
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    return str(value)


def to_row(record: Any) -> dict[str, Any]:
    """Flatten a dataclass (or mapping) into an ordered field mapping."""
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    if isinstance(record, Mapping):
        return dict(record)
    raise TypeError(f"Cannot render {type(record).__name__}")


def print_record(record: Any, *, title: str | None = None, out: TextIO | None = None) -> None:
    """Print one record as aligned ``key: value`` lines.

    Args:
        record: Dataclass instance or mapping.
        title: Optional heading line.
        out: Stream (defaults to stdout).
    """
    stream = out or sys.stdout
    row = to_row(record)
    if title:
        print(title, file=stream)
    width = max((len(key) for key in row), default=0)
    for key, value in row.items():
        print(f"  {key.ljust(width)} : {format_value(value)}", file=stream)


def print_table(records: Sequence[Any], *, out: TextIO | None = None) -> None:
    """Print records as a table, or ``(no rows)`` when empty.

    Args:
        records: Dataclass instances or mappings sharing the same fields.
        out: Stream (defaults to stdout).
    """
    stream = out or sys.stdout
    if not records:
        print("(no rows)", file=stream)
        return

    rows = [to_row(record) for record in records]
    columns = list(rows[0])
    cells = [[format_value(row.get(column)) for column in columns] for row in rows]
    widths = [
        max(len(column), *(len(line[index]) for line in cells))
        for index, column in enumerate(columns)
    ]

    print(" | ".join(c.ljust(w) for c, w in zip(columns, widths)), file=stream)
    print("-+-".join("-" * w for w in widths), file=stream)
    for line in cells:
        print(" | ".join(c.ljust(w) for c, w in zip(line, widths)), file=stream)
