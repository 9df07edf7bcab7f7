"""Construction options for ``App``.

An option is any callable ``(App) -> None``.  It either mutates the app
and returns, or raises and leaves the fields it owns untouched.  The
factories below cover every input the builder supports; callers may
pass their own callables alongside them.

Options that read documents accept file paths or already-open streams.
Streams are read to the end and never closed; they may yield bytes or
text (text is encoded as UTF-8).
"""
from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import IO, AnyStr

from appcore.documents import load_document, merge_parameters
from appcore.errors import AppIOError
from appcore.model.app import App, AppSourceKind
from appcore.model.metadata import AppMetadata
from appcore.scanner import AttachmentScanner
from appcore.schema import SchemaValidator, check_string_keys, default_validator

logger = logging.getLogger(__name__)

Option = Callable[[App], None]
PathLike = str | os.PathLike[str]


# ---------------------------------------------------------------------------
# Reading helpers
# ---------------------------------------------------------------------------


def _read_file(path: PathLike, kind: str) -> bytes:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise AppIOError(os.fspath(path), exc.strerror or str(exc), f"read {kind} file") from exc
    logger.debug("Read %s file %s (%d bytes)", kind, os.fspath(path), len(data))
    return data


def _read_stream(stream: IO[AnyStr]) -> bytes:
    data = stream.read()
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


# ---------------------------------------------------------------------------
# Document handling shared by file and stream options
# ---------------------------------------------------------------------------


def _set_metadata(app: App, data: bytes, validator: SchemaValidator) -> None:
    document = load_document(data, "metadata")
    validator.validate_metadata(document)
    app._metadata_raw = data
    app._metadata = AppMetadata.from_document(document)


def _add_parameters(app: App, documents: list[bytes], validator: SchemaValidator) -> None:
    raw = [*app._parameters_raw, *documents]
    loaded = [load_document(data, "parameters") for data in raw]
    for document in loaded:
        if isinstance(document, Mapping):
            check_string_keys(document)
        elif document is not None:
            validator.validate_parameters(document)
    merged = merge_parameters(loaded)
    validator.validate_parameters(merged)
    app._parameters_raw = raw
    app._parameters = merged


# ---------------------------------------------------------------------------
# Option factories
# ---------------------------------------------------------------------------


def with_path(path: str) -> Option:
    """Replace the app path."""

    def apply_path(app: App) -> None:
        app.path = path

    return apply_path


def with_cleanup(cleanup: Callable[[], None]) -> Option:
    """Register a teardown action.  It is stored, not called."""

    def apply_cleanup(app: App) -> None:
        app.cleanup = cleanup

    return apply_cleanup


def with_source(source: AppSourceKind) -> Option:
    """Record where the app documents came from."""

    def apply_source(app: App) -> None:
        app.source = source

    return apply_source


def with_parameters_files(
    *paths: PathLike, validator: SchemaValidator | None = None
) -> Option:
    """Append parameter documents read from files, in the given order.

    All accumulated parameter documents are merged and validated as a
    whole.  A missing or unreadable file raises ``AppIOError`` naming it.
    """

    def apply_parameters_files(app: App) -> None:
        documents = [_read_file(path, "parameters") for path in paths]
        _add_parameters(app, documents, validator or default_validator())

    return apply_parameters_files


def with_parameters(
    *streams: IO[AnyStr], validator: SchemaValidator | None = None
) -> Option:
    """Append parameter documents read from open streams."""

    def apply_parameters(app: App) -> None:
        documents = [_read_stream(stream) for stream in streams]
        _add_parameters(app, documents, validator or default_validator())

    return apply_parameters


def with_compose_files(*paths: PathLike) -> Option:
    """Append compose documents read from files.  Content is not parsed."""

    def apply_compose_files(app: App) -> None:
        documents = [_read_file(path, "compose") for path in paths]
        app._composes.extend(documents)

    return apply_compose_files


def with_composes(*streams: IO[AnyStr]) -> Option:
    """Append compose documents read from open streams."""

    def apply_composes(app: App) -> None:
        app._composes.extend(_read_stream(stream) for stream in streams)

    return apply_composes


def with_metadata_file(path: PathLike, validator: SchemaValidator | None = None) -> Option:
    """Load metadata from a file and validate it immediately.

    Raises ``MetadataValidationError`` listing every violation when the
    document breaks the schema; the app keeps no metadata in that case.
    """

    def apply_metadata_file(app: App) -> None:
        _set_metadata(app, _read_file(path, "metadata"), validator or default_validator())

    return apply_metadata_file


def with_metadata(stream: IO[AnyStr], validator: SchemaValidator | None = None) -> Option:
    """Load metadata from an open stream and validate it immediately."""

    def apply_metadata(app: App) -> None:
        _set_metadata(app, _read_stream(stream), validator or default_validator())

    return apply_metadata


def with_attachments(directory: PathLike, scanner: AttachmentScanner | None = None) -> Option:
    """Scan ``directory`` and replace the app attachments with the result."""

    def apply_attachments(app: App) -> None:
        app._attachments = (scanner or AttachmentScanner()).scan(directory)

    return apply_attachments
