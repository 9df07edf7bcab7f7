"""appcore model module.

Exports the ``App`` aggregate, ``Attachment``, ``AppSourceKind`` and the
parsed metadata types.
"""
from __future__ import annotations

from appcore.model.app import App, AppSourceKind, Attachment
from appcore.model.metadata import AppMetadata, Maintainer, flatten_parameters

__all__ = [
    "App",
    "AppSourceKind",
    "Attachment",
    "AppMetadata",
    "Maintainer",
    "flatten_parameters",
]
