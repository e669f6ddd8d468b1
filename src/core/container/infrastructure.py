"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL engine and connection pool)
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Pool size, timeouts, TLS and query echo come from settings.

    Returns:
        Database manager instance.

    Raises:
        pydantic.ValidationError: If DATABASE_URL is missing.

    Usage:
        db = get_database()
        async with db.get_session() as session:
            ...
        await db.close()
    """
    settings = get_settings()
    return Database(
        database_url=settings.async_database_url,
        echo=settings.db_echo,
        pool_size=settings.pg_pool_max,
        pool_timeout=settings.pg_connect_timeout,
        pool_recycle=settings.pg_idle_timeout,
        ssl_required=settings.ssl_required,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Settings are read leniently: the logger must work even when DATABASE_URL
    is missing so the CLI can report that failure.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from pydantic import ValidationError

    from src.core.config import Settings
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    try:
        settings = get_settings()
        env, level = settings.environment, settings.log_level
    except ValidationError:
        fields = Settings.model_fields
        env, level = fields["environment"].default, fields["log_level"].default

    return ConsoleAdapter(use_json=env != Environment.DEVELOPMENT, level=level)
