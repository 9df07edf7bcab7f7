"""appcore schema module.

Exports the ``SchemaValidator`` class, the ``validate_metadata`` and
``validate_parameters`` convenience functions, the fixed schemas, the
``Violation`` type and the non-string key check.
"""
from __future__ import annotations

from appcore.schema.keys import check_string_keys
from appcore.schema.schemas import METADATA_SCHEMA, PARAMETERS_SCHEMA, SCHEMA_VERSION
from appcore.schema.validator import (
    SchemaValidator,
    default_validator,
    validate_metadata,
    validate_parameters,
)
from appcore.schema.violations import Violation

__all__ = [
    "SchemaValidator",
    "default_validator",
    "validate_metadata",
    "validate_parameters",
    "check_string_keys",
    "Violation",
    "METADATA_SCHEMA",
    "PARAMETERS_SCHEMA",
    "SCHEMA_VERSION",
]
