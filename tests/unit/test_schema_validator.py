"""Unit tests for appcore.schema: SchemaValidator, violation rendering,
and the non-string key check.
"""
from __future__ import annotations

import pytest

from appcore.errors import (
    MetadataValidationError,
    NonStringKeyError,
    ParametersValidationError,
)
from appcore.schema import (
    METADATA_SCHEMA,
    SchemaValidator,
    Violation,
    check_string_keys,
    validate_metadata,
    validate_parameters,
)
from appcore.schema.violations import field_path


def _messages(error: pytest.ExceptionInfo[BaseException]) -> list[str]:
    return str(error.value).splitlines()


# ===========================================================================
# Violation rendering
# ===========================================================================


class TestViolation:
    def test_str(self) -> None:
        assert str(Violation("maintainers.2.email", "bad")) == "maintainers.2.email: bad"

    def test_field_path_root(self) -> None:
        assert field_path([]) == "(root)"

    def test_field_path_mixed(self) -> None:
        assert field_path(["maintainers", 2, "email"]) == "maintainers.2.email"


# ===========================================================================
# Metadata
# ===========================================================================


class TestMetadataValidation:
    def test_valid(self) -> None:
        validate_metadata({"name": "app", "version": "0.1.0"})

    def test_unknown_fields_are_tolerated(self) -> None:
        validate_metadata({"name": "app", "version": "0.1.0", "unknown": "property"})

    def test_missing_version(self) -> None:
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata({"name": "app"})
        assert _messages(exc_info) == [
            "failed to validate metadata:",
            "- (root): version is required",
        ]

    def test_every_missing_field_reported(self) -> None:
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata({})
        assert _messages(exc_info)[1:] == [
            "- (root): version is required",
            "- (root): name is required",
        ]

    def test_bad_email(self) -> None:
        document = {
            "name": "app",
            "version": "1.0",
            "maintainers": [{"name": "a", "email": "a@example.com"}, {"name": "b", "email": "nope"}],
        }
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata(document)
        assert exc_info.value.violations == [
            Violation("maintainers.1.email", "Does not match format 'email'")
        ]

    @pytest.mark.parametrize("email", ["dev@", "@", "not an@ email", "a@@b", "dev@localhost\n"])
    def test_malformed_email_rejected(self, email: str) -> None:
        document = {"name": "app", "version": "1", "maintainers": [{"name": "a", "email": email}]}
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata(document)
        assert exc_info.value.violations == [
            Violation("maintainers.0.email", "Does not match format 'email'")
        ]

    @pytest.mark.parametrize("email", ["a@b.c", "dev@example.com", "first.last+tag@mail.example.org"])
    def test_well_formed_email_accepted(self, email: str) -> None:
        validate_metadata({"name": "app", "version": "1", "maintainers": [{"name": "a", "email": email}]})

    def test_missing_field_and_bad_email_aggregate(self) -> None:
        document = {
            "name": "app",
            "maintainers": [{"name": "a"}, {"name": "b"}, {"name": "c", "email": "bad-email"}],
        }
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata(document)
        assert str(exc_info.value) == (
            "failed to validate metadata:\n"
            "- (root): version is required\n"
            "- maintainers.2.email: Does not match format 'email'"
        )

    def test_nested_required(self) -> None:
        document = {"name": "app", "version": "1", "maintainers": [{"email": "a@b.c"}]}
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata(document)
        assert exc_info.value.violations == [Violation("maintainers.0", "name is required")]

    def test_wrong_type(self) -> None:
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata({"name": "app", "version": 1})
        assert exc_info.value.violations == [
            Violation("version", "Invalid type. Expected: string, given: integer")
        ]

    def test_empty_document(self) -> None:
        with pytest.raises(MetadataValidationError) as exc_info:
            validate_metadata(None)
        assert exc_info.value.violations == [
            Violation("(root)", "Invalid type. Expected: object, given: null")
        ]

    def test_output_is_stable(self) -> None:
        document = {"maintainers": [{"email": "x"}, {"name": 3}]}
        validator = SchemaValidator()
        first = validator.metadata_violations(document)
        second = validator.metadata_violations(document)
        assert first == second
        assert len(first) == 5

    def test_custom_schema(self) -> None:
        schema = {**METADATA_SCHEMA, "required": ["version", "name", "description"]}
        validator = SchemaValidator(metadata_schema=schema)
        with pytest.raises(MetadataValidationError, match="description is required"):
            validator.validate_metadata({"name": "app", "version": "1"})


# ===========================================================================
# Parameters
# ===========================================================================


class TestParametersValidation:
    def test_valid(self) -> None:
        validate_parameters({"foo": "bar", "nested": {"list": [1, {"a": 2}]}})

    def test_non_mapping(self) -> None:
        with pytest.raises(ParametersValidationError) as exc_info:
            validate_parameters(["a"])
        assert _messages(exc_info) == [
            "failed to validate parameters:",
            "- (root): Invalid type. Expected: object, given: array",
        ]

    def test_integer_key_deep_in_valid_document(self) -> None:
        with pytest.raises(NonStringKeyError, match="Non-string key in ok.deep: 3"):
            validate_parameters({"ok": {"deep": {3: "v"}}})


class TestCheckStringKeys:
    def test_top_level(self) -> None:
        with pytest.raises(NonStringKeyError) as exc_info:
            check_string_keys({1: "x"})
        assert str(exc_info.value) == "Non-string key at top level: 1"
        assert exc_info.value.key == 1
        assert exc_info.value.path == ""

    def test_nested(self) -> None:
        with pytest.raises(NonStringKeyError) as exc_info:
            check_string_keys({"my-parameters": {1: "toto"}})
        assert str(exc_info.value) == "Non-string key in my-parameters: 1"

    def test_inside_list(self) -> None:
        with pytest.raises(NonStringKeyError, match=r"Non-string key in a\[0\]\.b: 2"):
            check_string_keys({"a": [{"b": {2: "x"}}]})

    def test_boolean_key(self) -> None:
        with pytest.raises(NonStringKeyError, match="True"):
            check_string_keys({"flags": {True: "on"}})

    def test_all_strings(self) -> None:
        check_string_keys({"a": {"b": [{"c": 1}]}, "d": None})
