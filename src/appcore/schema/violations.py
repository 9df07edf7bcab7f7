"""Violation type and rendering of jsonschema errors.

jsonschema reports errors with its own wording; downstream tooling
expects the short ``<field>: <description>`` form, e.g.
``maintainers.2.email: Does not match format 'email'``.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

import jsonschema

ROOT_FIELD = "(root)"

_JSON_TYPE_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "integer",
    float: "number",
    type(None): "null",
}


@dataclass(frozen=True)
class Violation:
    """One broken schema rule.

    Parameters
    ----------
    field:
        Dotted/indexed path of the offending value, ``(root)`` for the
        document itself.
    description:
        Human-readable rule description.
    """

    field: str
    description: str

    def __str__(self) -> str:
        return f"{self.field}: {self.description}"


def field_path(path: Iterable[str | int]) -> str:
    """Render a jsonschema error path as ``a.2.b`` or ``(root)``."""
    parts = [str(part) for part in path]
    return ".".join(parts) if parts else ROOT_FIELD


def _json_type(value: object) -> str:
    for python_type, name in _JSON_TYPE_NAMES.items():
        if type(value) is python_type:
            return name
    return type(value).__name__


def _describe(error: jsonschema.ValidationError) -> str:
    if error.validator == "format":
        return f"Does not match format '{error.validator_value}'"
    if error.validator == "type":
        expected = error.validator_value
        if isinstance(expected, list):
            expected = "/".join(expected)
        return f"Invalid type. Expected: {expected}, given: {_json_type(error.instance)}"
    if error.validator == "pattern":
        return f"Does not match pattern '{error.validator_value}'"
    return error.message


def to_violations(errors: Iterable[jsonschema.ValidationError]) -> Iterator[Violation]:
    """Convert jsonschema errors to violations, keeping their order.

    jsonschema emits one ``required`` error per missing property, all
    sharing the same schema node; the first of them expands to every
    missing property and the rest are skipped.
    """
    expanded: set[tuple[str, int]] = set()
    for error in errors:
        field = field_path(error.absolute_path)
        if error.validator == "required":
            key = (field, id(error.schema))
            if key in expanded:
                continue
            expanded.add(key)
            instance = error.instance
            for name in error.validator_value:
                if isinstance(instance, Mapping) and name not in instance:
                    yield Violation(field, f"{name} is required")
            continue
        yield Violation(field, _describe(error))
