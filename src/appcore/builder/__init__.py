"""appcore builder module.

Exports the ``AppBuilder`` class, the ``new_app`` and
``new_app_from_default_files`` convenience functions, and every option
factory.
"""
from __future__ import annotations

from appcore.builder.builder import AppBuilder, new_app, new_app_from_default_files
from appcore.builder.options import (
    Option,
    with_attachments,
    with_cleanup,
    with_compose_files,
    with_composes,
    with_metadata,
    with_metadata_file,
    with_parameters,
    with_parameters_files,
    with_path,
    with_source,
)

__all__ = [
    "AppBuilder",
    "new_app",
    "new_app_from_default_files",
    "Option",
    "with_path",
    "with_cleanup",
    "with_source",
    "with_parameters_files",
    "with_parameters",
    "with_compose_files",
    "with_composes",
    "with_metadata_file",
    "with_metadata",
    "with_attachments",
]
