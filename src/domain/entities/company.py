"""Company domain entity.

A company owns many employees by reference (1:N). It does not own their
lifetime: employees are independent rows pointing at a company id, and a
company cannot be removed while any of them still point at it.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Company:
    """Company entity.

    Attributes:
        id: Unique company identifier (immutable).
        name: Display name.
        slug: URL-safe identifier, unique across companies.
        domain: Optional web domain (e.g., "acme.com").
        created_at: When the company was created.
        updated_at: When the company was last modified.

    Example:
        >>> company = Company(id=uuid7(), name="Acme", slug="acme")
        >>> company.domain is None
        True
    """

    id: UUID
    name: str
    slug: str
    domain: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            str: Human-readable string.
        """
        return f"{self.name} ({self.slug})"
