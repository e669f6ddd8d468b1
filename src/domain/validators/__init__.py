"""Validators package exports."""

from src.domain.validators.functions import (
    DOMAIN_PATTERN,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    SLUG_PATTERN,
    validate_domain,
    validate_email,
    validate_phone_number,
    validate_slug,
)

__all__ = [
    "DOMAIN_PATTERN",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "SLUG_PATTERN",
    "validate_domain",
    "validate_email",
    "validate_phone_number",
    "validate_slug",
]
