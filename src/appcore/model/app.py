"""The ``App`` aggregate and its ``Attachment`` entries.

An ``App`` starts out holding only a path.  Options from
``appcore.builder`` fill in its documents one at a time; once the
builder returns, callers only read it through the properties below.

Usage
-----
::

    from appcore import new_app_from_default_files

    with new_app_from_default_files("my-app") as app:
        print(app.metadata.name, len(app.attachments))
"""
from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from types import TracebackType
from typing import Any

from appcore.model.metadata import AppMetadata, flatten_parameters


class AppSourceKind(Enum):
    """Where the app documents came from."""

    UNKNOWN = auto()
    SPLIT = auto()
    MERGED = auto()
    IMAGE = auto()


@dataclass(frozen=True)
class Attachment:
    """A non-core file shipped with the app.

    Parameters
    ----------
    path:
        Slash-separated path relative to the app root.
    size:
        File size in bytes.
    """

    path: str
    size: int


class App:
    """In-memory model of one app: its documents plus attachments.

    Parameters
    ----------
    path:
        Root location of the app.  Semantic only; it need not exist on
        the filesystem.
    """

    def __init__(self, path: str) -> None:
        self.path: str = path
        self.cleanup: Callable[[], None] | None = None
        self.source: AppSourceKind = AppSourceKind.UNKNOWN
        # Populated by appcore.builder.options.
        self._metadata_raw: bytes | None = None
        self._metadata: AppMetadata | None = None
        self._parameters_raw: list[bytes] = []
        self._parameters: dict[str, Any] = {}
        self._composes: list[bytes] = []
        self._attachments: list[Attachment] = []
        self._closed = False

    # ------------------------------------------------------------------
    # Raw documents
    # ------------------------------------------------------------------

    @property
    def metadata_raw(self) -> bytes | None:
        """Raw metadata bytes, or ``None`` when no metadata was loaded."""
        return self._metadata_raw

    @property
    def parameters_raw(self) -> tuple[bytes, ...]:
        """Raw parameter documents in load order."""
        return tuple(self._parameters_raw)

    @property
    def composes(self) -> tuple[bytes, ...]:
        """Raw compose documents in load order."""
        return tuple(self._composes)

    @property
    def attachments(self) -> tuple[Attachment, ...]:
        """Attachments sorted by path."""
        return tuple(self._attachments)

    # ------------------------------------------------------------------
    # Parsed views
    # ------------------------------------------------------------------

    @property
    def metadata(self) -> AppMetadata | None:
        """Parsed metadata, or ``None`` when no metadata was loaded."""
        return self._metadata

    @property
    def parameters(self) -> dict[str, Any]:
        """All parameter documents merged into one mapping.

        Each access returns a fresh deep copy, so edits to the result
        never reach the app.
        """
        return copy.deepcopy(self._parameters)

    def flat_parameters(self) -> dict[str, Any]:
        """Return the merged parameters with dotted keys."""
        return flatten_parameters(copy.deepcopy(self._parameters))

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Run the registered cleanup action.  Later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        if self.cleanup is not None:
            self.cleanup()

    def __enter__(self) -> "App":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"App(path={self.path!r}, parameters={len(self._parameters_raw)}, "
            f"composes={len(self._composes)}, attachments={len(self._attachments)})"
        )
