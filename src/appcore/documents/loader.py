"""YAML loading and parameter merging.

Metadata and parameters are YAML documents.  They are parsed with
``yaml.safe_load`` so that only plain data types come back; compose
documents are never parsed here.
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any

import yaml

from appcore.errors import DocumentParseError

logger = logging.getLogger(__name__)


def load_document(data: bytes, kind: str) -> Any:
    """Parse one YAML document.

    Parameters
    ----------
    data:
        Raw document bytes.
    kind:
        ``"metadata"`` or ``"parameters"``; used in error messages.

    Returns
    -------
    Any
        The loaded value.  An empty document loads as ``None``.

    Raises
    ------
    DocumentParseError
        If ``data`` is not valid YAML.
    """
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise DocumentParseError(kind, str(exc)) from exc
    logger.debug("Loaded %s document (%d bytes)", kind, len(data))
    return document


def merge_parameters(documents: Iterable[Mapping[str, Any] | None]) -> dict[str, Any]:
    """Deep-merge parameter mappings in order.

    Later documents win.  Nested mappings are merged key by key; any
    other value, lists included, replaces the earlier one.  ``None``
    (an empty document) contributes nothing.
    """
    merged: dict[str, Any] = {}
    for document in documents:
        if document is None:
            continue
        _merge_into(merged, document)
    return merged


def _merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _merge_into(target[key], value)
        else:
            target[key] = copy.deepcopy(value)
