"""Parsed views over validated app documents.

``AppMetadata`` is built only from metadata that already passed the
metadata schema, so it can assume ``name`` and ``version`` exist.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Maintainer:
    """A maintainer entry from the metadata document."""

    name: str
    email: str | None = None

    def __str__(self) -> str:
        if self.email:
            return f"{self.name} <{self.email}>"
        return self.name


@dataclass(frozen=True)
class AppMetadata:
    """The parsed metadata document.

    Parameters
    ----------
    name:
        App name.
    version:
        App version string.
    description:
        Free-text description, empty when absent.
    maintainers:
        Maintainers in document order.
    """

    name: str
    version: str
    description: str = ""
    maintainers: tuple[Maintainer, ...] = field(default_factory=tuple)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "AppMetadata":
        """Build an ``AppMetadata`` from a schema-valid metadata mapping."""
        maintainers = tuple(
            Maintainer(name=entry["name"], email=entry.get("email"))
            for entry in document.get("maintainers") or ()
        )
        return cls(
            name=document["name"],
            version=document["version"],
            description=document.get("description") or "",
            maintainers=maintainers,
        )


def flatten_parameters(parameters: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested parameters into a single level of dotted keys.

    ``{"a": {"b": 1}, "c": [1, 2]}`` becomes ``{"a.b": 1, "c": [1, 2]}``.
    Lists are leaves.  An empty nested mapping disappears.
    """
    flat: dict[str, Any] = {}
    for key, value in parameters.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_parameters(value, dotted))
        else:
            flat[dotted] = value
    return flat
