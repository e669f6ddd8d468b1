"""Verb dispatch shared by the ``companies`` and ``employees`` commands.

Exit codes:
    0: Success, not found, or usage shown
    1: Missing argument, invalid JSON, configuration error, or any Failure
"""

import json
import sys
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as SettingsValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.core.config import get_settings
from src.core.container import get_database, get_logger
from src.core.result import Failure, Result
from src.core.validation import collect_field_errors
from src.domain.protocols.logger_protocol import LoggerProtocol

EXIT_OK = 0
EXIT_ERROR = 1

MISSING_DATABASE_URL = "DATABASE_URL is missing. Put it in .env"

Handler = Callable[[list[str], LoggerProtocol], Awaitable[int]]


@dataclass(frozen=True, kw_only=True)
class Command:
    """One CLI verb.

    Attributes:
        handler: Coroutine receiving the remaining arguments and a logger.
        argument: Description of the required positional (e.g. "a company
            ID"), or None when the verb takes none.
    """

    handler: Handler
    argument: str | None = None


class InvalidPayloadError(ValueError):
    """Raised when a JSON argument cannot be decoded."""


def parse_payload(raw: str | None, sample: Callable[[], Mapping[str, Any]]) -> Any:
    """Decode the optional JSON argument, falling back to sample data.

    Args:
        raw: JSON text from the command line, or None.
        sample: Builds the sample payload used when no JSON is given.

    Raises:
        InvalidPayloadError: If ``raw`` is not valid JSON.
    """
    if raw is None:
        return dict(sample())
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidPayloadError(f"Invalid JSON payload: {e.msg}") from e


def report_failure(result: Failure[Any], logger: LoggerProtocol) -> int:
    """Log and print a Failure, returning the error exit code."""
    error = result.error
    logger.error("command_failed", error_code=error.code.value, reason=error.message)
    print(f"Error: {error}", file=sys.stderr)
    return EXIT_ERROR


def report(
    result: Result[Any, Any],
    logger: LoggerProtocol,
    *,
    not_found: str,
    render: Callable[[Any], None],
) -> int:
    """Print a service result.

    Args:
        result: Service outcome.
        logger: Logger for failures.
        not_found: Message printed when the value is None.
        render: Prints the value.

    Returns:
        Exit code.
    """
    if isinstance(result, Failure):
        return report_failure(result, logger)
    if result.value is None:
        print(not_found)
        return EXIT_OK
    render(result.value)
    return EXIT_OK


def _configuration_error() -> str | None:
    try:
        get_settings()
    except SettingsValidationError as e:
        field_errors = collect_field_errors(e)
        if "database_url" in field_errors:
            return MISSING_DATABASE_URL
        return "Invalid configuration: " + "; ".join(
            f"{name}: {reason}" for name, reason in field_errors.items()
        )
    return None


async def run(
    args: list[str],
    commands: Mapping[str, Command],
    *,
    program: str,
    usage: str,
) -> int:
    """Dispatch ``args`` to a verb.

    Args:
        args: Command line without the program name.
        commands: Verb name to Command.
        program: Program name bound into log context.
        usage: Text printed for an unknown or missing verb.

    Returns:
        Process exit code.
    """
    if not args or args[0] not in commands:
        print(usage)
        return EXIT_OK

    verb, rest = args[0], args[1:]
    command = commands[verb]
    if command.argument is not None and not rest:
        print(f"Please provide {command.argument}", file=sys.stderr)
        return EXIT_ERROR

    problem = _configuration_error()
    if problem is not None:
        print(problem, file=sys.stderr)
        return EXIT_ERROR

    logger = get_logger().bind(command=program, action=verb)
    try:
        return await command.handler(rest, logger)
    except InvalidPayloadError as e:
        print(str(e), file=sys.stderr)
        return EXIT_ERROR
    except SQLAlchemyError as e:
        logger.error("database_error", error=e)
        print(f"Database error: {e}", file=sys.stderr)
        return EXIT_ERROR
    finally:
        await get_database().close()
