"""Fixed JSON Schemas for app metadata and parameters.

The schemas are plain dicts.  Keyword order matters: the validator walks
keywords in insertion order, and that order is the order violations are
reported in, so ``required`` sits before ``properties``.
"""
from __future__ import annotations

from typing import Any, Final

SCHEMA_VERSION: Final[str] = "v0.2"

Schema = dict[str, Any]

METADATA_SCHEMA: Final[Schema] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": f"https://appcore.dev/schemas/metadata/{SCHEMA_VERSION}/schema.json",
    "title": "App metadata",
    "type": "object",
    "required": ["version", "name"],
    "properties": {
        "version": {
            "description": "Version of the app",
            "type": "string",
        },
        "name": {
            "description": "Name of the app",
            "type": "string",
        },
        "description": {
            "description": "Free-text description of the app",
            "type": "string",
        },
        "maintainers": {
            "description": "People responsible for the app",
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string"},
                    "email": {"type": "string", "format": "email"},
                },
            },
        },
    },
}

PARAMETERS_SCHEMA: Final[Schema] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": f"https://appcore.dev/schemas/parameters/{SCHEMA_VERSION}/schema.json",
    "title": "App parameters",
    "type": "object",
}
