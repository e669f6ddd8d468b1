"""Centralized validation functions (DRY principle).

All format rules are defined once here and reused by the Annotated types in
``src.domain.types`` and by the lookup-key validators in ``src.schemas``.
Validators are pure functions that raise ValueError on validation failure.
"""

import re

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
DOMAIN_PATTERN = re.compile(r"^([a-z0-9]+(-[a-z0-9]+)*\.)+[a-z]{2,}$", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_PATTERN = re.compile(r"^[0-9+\-() ]{7,20}$")


def validate_slug(v: str) -> str:
    """Validate slug format.

    Args:
        v: Slug to validate.

    Returns:
        Slug unchanged (validation only).

    Raises:
        ValueError: If slug format is invalid.

    Example:
        >>> validate_slug("tech-corp-42")
        'tech-corp-42'
        >>> validate_slug("Tech Corp")
        ValueError: Slug must be lowercase letters, numbers, and hyphens only
    """
    if not SLUG_PATTERN.fullmatch(v):
        raise ValueError("Slug must be lowercase letters, numbers, and hyphens only")
    return v


def validate_domain(v: str) -> str:
    """Validate a dotted domain name (e.g. ``acme.com``).

    Raises:
        ValueError: If domain format is invalid.
    """
    if not DOMAIN_PATTERN.fullmatch(v):
        raise ValueError("Invalid domain format")
    return v


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Email unchanged (no case folding, lookups are exact).

    Raises:
        ValueError: If email format is invalid.
    """
    if not EMAIL_PATTERN.fullmatch(v):
        raise ValueError("Invalid email format")
    return v


def validate_phone_number(v: str) -> str:
    """Validate a loose phone number (digits, spaces, ``+-()``, 7-20 chars).

    Raises:
        ValueError: If phone number format is invalid.
    """
    if not PHONE_PATTERN.fullmatch(v):
        raise ValueError("Invalid phone number format")
    return v
