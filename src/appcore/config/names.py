"""Reserved file names for the core documents of an app.

The packaging stage looks for exactly these names, so the defaults must
not drift.  Builders and scanners receive a ``CoreFileNames`` instance
instead of reading module globals, which keeps them testable with other
naming schemes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class CoreFileNames:
    """The three reserved core file names.

    Parameters
    ----------
    metadata:
        File holding the app metadata document.
    parameters:
        File holding the default parameters document.
    compose:
        File holding the compose document.
    """

    metadata: str = "metadata.yml"
    parameters: str = "parameters.yml"
    compose: str = "docker-compose.yml"

    def as_set(self) -> frozenset[str]:
        """Return the reserved names as a frozenset."""
        return frozenset((self.metadata, self.parameters, self.compose))

    def __contains__(self, name: object) -> bool:
        return name in self.as_set()


DEFAULT_FILE_NAMES: Final[CoreFileNames] = CoreFileNames()
