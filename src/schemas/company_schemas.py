"""Company input schemas and validators.

Pydantic models describing what callers may send when creating or updating
a company, plus the Result-returning validation functions built on them.
Keys are accepted in camelCase or snake_case; unknown keys (including
``id``, ``createdAt`` and ``updatedAt``) are dropped.

Usage:
    match validate_company_insert({"name": "Acme", "slug": "acme"}):
        case Success(value=payload):
            payload.model_dump()
        case Failure(error=error):
            error.field_errors
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.core.errors import InvalidArgumentError, ValidationError
from src.core.result import Result
from src.core.validation import validate_pattern, validate_payload, validate_uuid
from src.domain.types import CompanyName, DomainName, Slug
from src.domain.validators import SLUG_PATTERN

SLUG_MAX_LENGTH = 80

_INPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _reject_null(v: Any) -> Any:
    if v is None:
        raise ValueError("Field may not be null")
    return v


# =============================================================================
# Insert
# =============================================================================


class CompanyInsert(BaseModel):
    """Payload for creating a company.

    An empty ``domain`` is stored as null.
    """

    model_config = _INPUT_CONFIG

    name: CompanyName = Field(..., examples=["Tech Corp"])
    slug: Slug = Field(..., examples=["tech-corp"])
    domain: DomainName | None = Field(default=None, examples=["techcorp.com"])

    @field_validator("domain", mode="before")
    @classmethod
    def empty_domain_is_null(cls, v: Any) -> Any:
        """Treat an empty domain as absent."""
        return _blank_to_none(v)


# =============================================================================
# Update
# =============================================================================


class CompanyUpdate(BaseModel):
    """Partial payload for updating a company.

    Every field is optional and only supplied fields are applied
    (``model_dump(exclude_unset=True)``). ``domain`` may be set to null;
    ``name`` and ``slug`` may not.
    """

    model_config = _INPUT_CONFIG

    name: CompanyName | None = None
    slug: Slug | None = None
    domain: DomainName | None = None

    @field_validator("name", "slug", mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        """Reject explicit null for required columns."""
        return _reject_null(v)

    @field_validator("domain", mode="before")
    @classmethod
    def empty_domain_is_null(cls, v: Any) -> Any:
        """Treat an empty domain as null."""
        return _blank_to_none(v)


# =============================================================================
# Validation functions
# =============================================================================


def validate_company_insert(data: Any) -> Result[CompanyInsert, ValidationError]:
    """Validate a create payload, reporting every failing field."""
    return validate_payload(CompanyInsert, data, entity="company")


def validate_company_update(data: Any) -> Result[CompanyUpdate, ValidationError]:
    """Validate a partial update payload; only supplied fields are checked."""
    return validate_payload(CompanyUpdate, data, entity="company update")


def validate_company_id(value: Any) -> Result[UUID, InvalidArgumentError]:
    """Validate a company id (UUID string or UUID)."""
    return validate_uuid(value, "id")


def validate_company_slug(value: Any) -> Result[str, InvalidArgumentError]:
    """Validate a slug used as a lookup key."""
    return validate_pattern(value, SLUG_PATTERN, "slug", max_length=SLUG_MAX_LENGTH)
