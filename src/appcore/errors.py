"""Error types raised while assembling an ``App``.

Every failure during construction is an ``AppError``.  The concrete
classes separate the three kinds of problem a caller may want to react
to differently:

- I/O failures (``AppIOError``): a file or directory could not be read.
- Validation failures (``ValidationError`` and its subclasses): a
  document parsed fine but breaks the schema; all violations are
  reported at once.
- Structural failures (``NonStringKeyError``): a parameters mapping
  uses a key that is not text.

``AppBuildError`` wraps whichever of these an option raised so that the
caller can see which option failed without digging into internals.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from appcore.schema.violations import Violation


class AppError(Exception):
    """Base class for every error raised by appcore."""


class AppIOError(AppError):
    """Raised when a file or directory cannot be read.

    Parameters
    ----------
    path:
        The location that failed, exactly as supplied by the caller.
    reason:
        Short human-readable cause, usually the OS error string.
    action:
        What was being attempted, e.g. ``"read parameters file"``.
    """

    def __init__(self, path: str, reason: str, action: str = "read") -> None:
        self.path = path
        self.reason = reason
        self.action = action
        super().__init__(f"failed to {action} {path}: {reason}")


class DocumentParseError(AppError):
    """Raised when a metadata or parameters document is not valid YAML."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"failed to parse {kind}: {reason}")


class ValidationError(AppError):
    """Aggregates every schema violation found in one document.

    The message starts with ``failed to validate <kind>:`` and lists one
    ``- <field>: <description>`` line per violation, in the order the
    schema validator reported them.

    Parameters
    ----------
    kind:
        Which document failed, ``"metadata"`` or ``"parameters"``.
    violations:
        The ordered violations.  Must not be empty.
    """

    def __init__(self, kind: str, violations: Sequence["Violation"]) -> None:
        self.kind = kind
        self.violations: list[Violation] = list(violations)
        lines = [f"failed to validate {kind}:"]
        lines.extend(f"- {violation}" for violation in self.violations)
        super().__init__("\n".join(lines))


class MetadataValidationError(ValidationError):
    """Raised when metadata breaks the metadata schema."""

    def __init__(self, violations: Sequence["Violation"]) -> None:
        super().__init__("metadata", violations)


class ParametersValidationError(ValidationError):
    """Raised when merged parameters break the parameters schema."""

    def __init__(self, violations: Sequence["Violation"]) -> None:
        super().__init__("parameters", violations)


class NonStringKeyError(AppError):
    """Raised when a parameters mapping has a key that is not a string.

    Parameters
    ----------
    key:
        The offending key, as loaded from YAML (e.g. the integer ``1``).
    path:
        Dotted path of the enclosing mapping; empty for the top level.
    """

    def __init__(self, key: object, path: str = "") -> None:
        self.key = key
        self.path = path
        if path:
            message = f"Non-string key in {path}: {key}"
        else:
            message = f"Non-string key at top level: {key}"
        super().__init__(message)


class AppBuildError(AppError):
    """Raised by the builder when one of its options fails.

    The original exception is chained as ``__cause__`` and also exposed
    as ``cause``.

    Parameters
    ----------
    path:
        The path of the app being built.
    option:
        Name of the option that failed.
    cause:
        The exception the option raised.
    """

    def __init__(self, path: str, option: str, cause: BaseException) -> None:
        self.path = path
        self.option = option
        self.cause = cause
        super().__init__(f"failed to build app {path!r} ({option}): {cause}")
