"""Annotated types with centralized validation (DRY principle).

Define each field rule once, use it in every input schema.
All custom types use Pydantic's Annotated with StringConstraints/Field and
AfterValidator, so coercion (strip whitespace, str -> int) runs first and
format checks run after.

Usage:
    from src.domain.types import CompanyName, Slug

    class CompanyInsert(BaseModel):
        name: CompanyName
        slug: Slug
"""

from typing import Annotated

from pydantic import AfterValidator, Field, StringConstraints

from src.domain.validators import (
    validate_domain,
    validate_email,
    validate_phone_number,
    validate_slug,
)

# ============================================================================
# Company Types
# ============================================================================

CompanyName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=120),
]
"""Company display name (1-120 chars after trimming)."""

Slug = Annotated[
    str,
    StringConstraints(min_length=1, max_length=80),
    AfterValidator(validate_slug),
]
"""URL-safe company identifier.

Validation:
- 1-80 characters
- Lowercase alphanumeric segments joined by single hyphens

Examples:
    >>> class Payload(BaseModel):
    ...     slug: Slug
    >>> Payload(slug="tech-corp").slug
    'tech-corp'
"""

DomainName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=120),
    AfterValidator(validate_domain),
]
"""Dotted domain name such as ``acme.com`` (case-insensitive, <=120 chars)."""

# ============================================================================
# Employee Types
# ============================================================================

PersonName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=50),
]
"""First or last name (1-50 chars after trimming)."""

EmailAddress = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=255),
    AfterValidator(validate_email),
]
"""Email address (user@domain.tld, <=255 chars)."""

PhoneNumber = Annotated[
    str,
    StringConstraints(max_length=20),
    AfterValidator(validate_phone_number),
]
"""Loose phone number: digits, spaces and ``+-()``, 7-20 chars."""

Position = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]
"""Job title (1-100 chars after trimming)."""

# Upper bound of the 32-bit integer salary column
SALARY_MAX = 2_147_483_647

Salary = Annotated[int, Field(ge=0, le=SALARY_MAX)]
"""Non-negative whole salary amount that fits the integer column."""
