"""Schema validation of metadata and merged parameters.

``SchemaValidator`` checks a loaded document against a JSON Schema and
reports every violation in one error rather than stopping at the first.
Violations keep jsonschema's traversal order, which follows the schema's
keyword order, so the output is stable across runs.

Usage
-----
::

    from appcore.schema import SchemaValidator

    validator = SchemaValidator()
    validator.validate_metadata({"name": "app"})
    # MetadataValidationError: failed to validate metadata:
    # - (root): version is required
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import jsonschema

from appcore.errors import MetadataValidationError, ParametersValidationError
from appcore.schema.keys import check_string_keys
from appcore.schema.schemas import METADATA_SCHEMA, PARAMETERS_SCHEMA, Schema
from appcore.schema.violations import Violation, to_violations


class SchemaValidator:
    """Validates app documents against fixed schemas.

    Parameters
    ----------
    metadata_schema:
        Schema for the metadata document.  Defaults to
        ``METADATA_SCHEMA``.
    parameters_schema:
        Schema for the merged parameters.  Defaults to
        ``PARAMETERS_SCHEMA``.
    """

    def __init__(
        self,
        metadata_schema: Schema | None = None,
        parameters_schema: Schema | None = None,
    ) -> None:
        self._metadata = _compile(metadata_schema or METADATA_SCHEMA)
        self._parameters = _compile(parameters_schema or PARAMETERS_SCHEMA)

    def metadata_violations(self, document: Any) -> list[Violation]:
        """Return every metadata violation, empty when ``document`` is valid."""
        return list(to_violations(self._metadata.iter_errors(document)))

    def parameters_violations(self, parameters: Any) -> list[Violation]:
        """Return every parameters schema violation."""
        return list(to_violations(self._parameters.iter_errors(parameters)))

    def validate_metadata(self, document: Any) -> None:
        """Raise ``MetadataValidationError`` if ``document`` is invalid."""
        violations = self.metadata_violations(document)
        if violations:
            raise MetadataValidationError(violations)

    def validate_parameters(self, parameters: Any) -> None:
        """Validate merged parameters.

        Raises
        ------
        NonStringKeyError
            If any mapping key, at any depth, is not a string.  Checked
            before the schema.
        ParametersValidationError
            If the schema reports any violation.
        """
        if isinstance(parameters, Mapping):
            check_string_keys(parameters)
        violations = self.parameters_violations(parameters)
        if violations:
            raise ParametersValidationError(violations)


# jsonschema only checks for an "@" in emails.
_EMAIL = re.compile(r"[^@\s]+@[^@\s.]+(\.[^@\s.]+)+")

_FORMAT_CHECKER = jsonschema.FormatChecker()


@_FORMAT_CHECKER.checks("email")
def _is_email(instance: object) -> bool:
    if not isinstance(instance, str):
        return True
    return _EMAIL.fullmatch(instance) is not None


def _compile(schema: Schema) -> jsonschema.protocols.Validator:
    validator_class = jsonschema.validators.validator_for(schema)
    validator_class.check_schema(schema)
    return validator_class(schema, format_checker=_FORMAT_CHECKER)


_DEFAULT_VALIDATOR: SchemaValidator | None = None


def default_validator() -> SchemaValidator:
    """Return the shared validator built from the default schemas."""
    global _DEFAULT_VALIDATOR
    if _DEFAULT_VALIDATOR is None:
        _DEFAULT_VALIDATOR = SchemaValidator()
    return _DEFAULT_VALIDATOR


def validate_metadata(document: Any) -> None:
    """Convenience function: validate metadata with the default schema."""
    default_validator().validate_metadata(document)


def validate_parameters(parameters: Any) -> None:
    """Convenience function: validate parameters with the default schema."""
    default_validator().validate_parameters(parameters)
