"""Structural check: every mapping key in parameters must be a string.

YAML happily loads ``1: toto`` with an integer key.  Parameters are
addressed by dotted text paths, so such keys are rejected outright,
whether or not the schema would otherwise accept the document.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from appcore.errors import NonStringKeyError


def check_string_keys(value: Any, path: str = "") -> None:
    """Raise ``NonStringKeyError`` on the first non-string mapping key.

    Keys are visited in document order.  Nested mappings extend the
    path with ``.key``; list items extend it with ``[index]``.

    Parameters
    ----------
    value:
        A loaded parameters document or any value nested inside it.
    path:
        Path of ``value`` within the document; empty for the top level.
    """
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise NonStringKeyError(key, path)
            check_string_keys(item, f"{path}.{key}" if path else key)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            check_string_keys(item, f"{path}[{index}]")
