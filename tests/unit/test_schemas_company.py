"""Unit tests for company input validation (src/schemas/company_schemas.py)."""

import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.schemas import (
    validate_company_id,
    validate_company_insert,
    validate_company_slug,
    validate_company_update,
)
from tests.conftest import company_payload


@pytest.mark.unit
class TestValidateCompanyInsert:
    """Test validate_company_insert."""

    def test_valid_payload(self):
        result = validate_company_insert(company_payload())

        assert isinstance(result, Success)
        assert result.value.model_dump() == {
            "name": "Tech Corp",
            "slug": "tech-corp",
            "domain": "techcorp.com",
        }

    def test_name_is_trimmed(self):
        result = validate_company_insert(company_payload(name="  Tech Corp  "))

        assert isinstance(result, Success)
        assert result.value.name == "Tech Corp"

    def test_domain_is_optional(self):
        payload = company_payload()
        del payload["domain"]

        result = validate_company_insert(payload)

        assert isinstance(result, Success)
        assert result.value.domain is None

    def test_empty_domain_becomes_null(self):
        result = validate_company_insert(company_payload(domain=""))

        assert isinstance(result, Success)
        assert result.value.domain is None

    def test_server_managed_and_unknown_keys_are_ignored(self):
        result = validate_company_insert(
            company_payload(
                id=str(uuid7()),
                createdAt="2020-01-01T00:00:00Z",
                updatedAt="2020-01-01T00:00:00Z",
                favouriteColour="blue",
            )
        )

        assert isinstance(result, Success)
        assert set(result.value.model_dump()) == {"name", "slug", "domain"}

    @pytest.mark.parametrize(
        "slug", ["Tech Corp", "tech--corp", "-tech", "tech-", "TECH", "tech_corp", ""]
    )
    def test_invalid_slug(self, slug):
        result = validate_company_insert(company_payload(slug=slug))

        assert isinstance(result, Failure)
        assert "slug" in result.error.field_errors

    def test_slug_too_long(self):
        result = validate_company_insert(company_payload(slug="a" * 81))

        assert isinstance(result, Failure)
        assert "slug" in result.error.field_errors

    def test_slug_at_max_length(self):
        assert isinstance(
            validate_company_insert(company_payload(slug="a" * 80)), Success
        )

    @pytest.mark.parametrize("domain", ["not a domain", "acme", "acme.c", "-acme.com"])
    def test_invalid_domain(self, domain):
        result = validate_company_insert(company_payload(domain=domain))

        assert isinstance(result, Failure)
        assert "domain" in result.error.field_errors

    def test_domain_is_case_insensitive(self):
        assert isinstance(
            validate_company_insert(company_payload(domain="TechCorp.COM")), Success
        )

    def test_blank_name_rejected(self):
        result = validate_company_insert(company_payload(name="   "))

        assert isinstance(result, Failure)
        assert "name" in result.error.field_errors

    def test_all_failing_fields_reported_together(self):
        result = validate_company_insert({"name": "", "slug": "Bad Slug", "domain": "x"})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert set(result.error.field_errors) == {"name", "slug", "domain"}

    def test_missing_required_fields(self):
        result = validate_company_insert({})

        assert isinstance(result, Failure)
        assert set(result.error.field_errors) == {"name", "slug"}


@pytest.mark.unit
class TestValidateCompanyUpdate:
    """Test validate_company_update."""

    def test_empty_payload_is_valid(self):
        result = validate_company_update({})

        assert isinstance(result, Success)
        assert result.value.model_dump(exclude_unset=True) == {}

    def test_only_supplied_fields_are_carried(self):
        result = validate_company_update({"name": "Renamed"})

        assert isinstance(result, Success)
        assert result.value.model_dump(exclude_unset=True) == {"name": "Renamed"}

    def test_domain_may_be_cleared(self):
        result = validate_company_update({"domain": None})

        assert isinstance(result, Success)
        assert result.value.model_dump(exclude_unset=True) == {"domain": None}

    @pytest.mark.parametrize("field", ["name", "slug"])
    def test_required_columns_reject_null(self, field):
        result = validate_company_update({field: None})

        assert isinstance(result, Failure)
        assert field in result.error.field_errors

    def test_supplied_fields_are_checked(self):
        result = validate_company_update({"slug": "Not Valid"})

        assert isinstance(result, Failure)
        assert "slug" in result.error.field_errors

    def test_server_managed_keys_are_dropped(self):
        result = validate_company_update({"id": str(uuid7()), "updatedAt": "x"})

        assert isinstance(result, Success)
        assert result.value.model_dump(exclude_unset=True) == {}


@pytest.mark.unit
class TestCompanyKeyValidators:
    """Test validate_company_id and validate_company_slug."""

    def test_company_id_accepts_uuid_string(self):
        company_id = uuid7()

        assert validate_company_id(str(company_id)) == Success(value=company_id)

    def test_company_id_rejects_garbage(self):
        result = validate_company_id("not-a-uuid")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ARGUMENT

    def test_slug_key(self):
        assert validate_company_slug("tech-corp") == Success(value="tech-corp")

    @pytest.mark.parametrize("slug", ["Tech Corp", "", "a" * 81])
    def test_slug_key_rejected(self, slug):
        result = validate_company_slug(slug)

        assert isinstance(result, Failure)
        assert result.error.argument == "slug"
