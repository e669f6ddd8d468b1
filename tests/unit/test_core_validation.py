"""Unit tests for src/core/validation.py.

Tests cover:
- Payload validation wrapping (Success / Failure with every field)
- Non-mapping payloads
- Field error flattening (first reason per field, prefix stripping)
- UUID and pattern lookup-key validation
"""

import re
from uuid import UUID

import pytest
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import InvalidArgumentError, ValidationError
from src.core.result import Failure, Success
from src.core.validation import (
    PAYLOAD_FIELD,
    validate_pattern,
    validate_payload,
    validate_uuid,
)


class _Sample(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    display_name: str
    head_count: int

    @field_validator("display_name")
    @classmethod
    def no_digits(cls, v: str) -> str:
        if any(ch.isdigit() for ch in v):
            raise ValueError("Digits are not allowed")
        return v


@pytest.mark.unit
class TestValidatePayload:
    """Test validate_payload wrapping of pydantic models."""

    def test_valid_payload_returns_model(self):
        result = validate_payload(
            _Sample, {"displayName": "Acme", "headCount": "12"}, entity="sample"
        )

        assert isinstance(result, Success)
        assert result.value.display_name == "Acme"
        assert result.value.head_count == 12

    def test_every_failing_field_is_reported(self):
        result = validate_payload(
            _Sample, {"displayName": "Acme 2", "headCount": "abc"}, entity="sample"
        )

        assert isinstance(result, Failure)
        error = result.error
        assert isinstance(error, ValidationError)
        assert error.code == ErrorCode.VALIDATION_FAILED
        assert set(error.field_errors) == {"displayName", "headCount"}

    def test_custom_validator_prefix_is_stripped(self):
        result = validate_payload(
            _Sample, {"displayName": "Acme 2", "headCount": 1}, entity="sample"
        )

        assert isinstance(result, Failure)
        assert result.error.field_errors["displayName"] == "Digits are not allowed"

    def test_snake_case_keys_reported_by_public_name(self):
        result = validate_payload(
            _Sample, {"display_name": "Acme", "head_count": "abc"}, entity="sample"
        )

        assert isinstance(result, Failure)
        assert "headCount" in result.error.field_errors

    def test_missing_field_reported(self):
        result = validate_payload(_Sample, {"displayName": "Acme"}, entity="sample")

        assert isinstance(result, Failure)
        assert "headCount" in result.error.field_errors

    @pytest.mark.parametrize("payload", [None, "text", 42, ["a", "b"]])
    def test_non_mapping_payload_fails(self, payload):
        result = validate_payload(_Sample, payload, entity="sample")

        assert isinstance(result, Failure)
        assert PAYLOAD_FIELD in result.error.field_errors
        assert result.error.message == "Invalid sample payload"


@pytest.mark.unit
class TestValidateUuid:
    """Test validate_uuid."""

    def test_uuid_instance_passes_through(self):
        value = uuid7()

        result = validate_uuid(value, "id")

        assert result == Success(value=value)

    def test_uuid_string_is_parsed(self):
        value = uuid7()

        result = validate_uuid(str(value), "id")

        assert isinstance(result, Success)
        assert isinstance(result.value, UUID)
        assert result.value == value

    @pytest.mark.parametrize("raw", ["not-a-uuid", "", "1234", None])
    def test_malformed_value_fails(self, raw):
        result = validate_uuid(raw, "id")

        assert isinstance(result, Failure)
        error = result.error
        assert isinstance(error, InvalidArgumentError)
        assert error.code == ErrorCode.INVALID_ARGUMENT
        assert error.argument == "id"


@pytest.mark.unit
class TestValidatePattern:
    """Test validate_pattern."""

    PATTERN = re.compile(r"^[a-z]+$")

    def test_matching_value_passes(self):
        assert validate_pattern("abc", self.PATTERN, "key", max_length=5) == Success(
            value="abc"
        )

    def test_too_long_value_fails(self):
        result = validate_pattern("abcdef", self.PATTERN, "key", max_length=5)

        assert isinstance(result, Failure)
        assert result.error.argument == "key"

    def test_trailing_newline_rejected(self):
        result = validate_pattern("abc\n", self.PATTERN, "key", max_length=5)

        assert isinstance(result, Failure)

    @pytest.mark.parametrize("raw", ["", None, 12, "ABC"])
    def test_non_matching_values_fail(self, raw):
        assert isinstance(
            validate_pattern(raw, self.PATTERN, "key", max_length=5), Failure
        )
