"""Attachment scanner: lists every non-core file under an app root.

Only the core files sitting directly in the root define the app.  A
core-named file found in a subdirectory is ordinary payload and is
returned as an attachment like any other file.

The result is sorted by the byte-wise order of the full relative path,
so nested files interleave with root files by plain string comparison::

    a.cfg < b.cfg < nesteddirectory/a.cfg < z.cfg

Usage
-----
::

    from appcore.scanner import scan_attachments

    for attachment in scan_attachments("my-app"):
        print(attachment.path, attachment.size)
"""
from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from appcore.config import DEFAULT_FILE_NAMES, CoreFileNames
from appcore.errors import AppIOError
from appcore.model.app import Attachment

logger = logging.getLogger(__name__)


class AttachmentScanner:
    """Walks an app directory and classifies files.

    Parameters
    ----------
    file_names:
        Reserved core file names excluded at the scan root.
    """

    def __init__(self, file_names: CoreFileNames = DEFAULT_FILE_NAMES) -> None:
        self._file_names = file_names

    def scan(self, root: str | os.PathLike[str]) -> list[Attachment]:
        """Return the attachments under ``root`` sorted by path.

        Parameters
        ----------
        root:
            Directory to scan.

        Returns
        -------
        list[Attachment]
            One entry per regular file, core files at the root excluded.

        Raises
        ------
        AppIOError
            If any directory listing or file ``stat`` fails.  Nothing is
            returned in that case.
        """
        root_path = Path(root)
        found: dict[str, Attachment] = {}
        for directory, relative_dir, filenames in self._walk(root_path):
            for filename in filenames:
                if not relative_dir and filename in self._file_names:
                    continue
                full_path = directory / filename
                try:
                    info = full_path.stat()
                except OSError as exc:
                    raise AppIOError(str(full_path), _reason(exc), "scan attachment") from exc
                if not stat.S_ISREG(info.st_mode):
                    continue
                relative = f"{relative_dir}/{filename}" if relative_dir else filename
                found[relative] = Attachment(path=relative, size=info.st_size)

        attachments = sorted(found.values(), key=lambda a: os.fsencode(a.path))
        logger.debug("Scanned %s: %d attachment(s)", root_path, len(attachments))
        return attachments

    def _walk(self, root: Path) -> Iterator[tuple[Path, str, list[str]]]:
        def on_error(exc: OSError) -> None:
            raise AppIOError(str(exc.filename or root), _reason(exc), "scan directory") from exc

        for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error):
            directory = Path(dirpath)
            relative_dir = directory.relative_to(root).as_posix()
            yield directory, "" if relative_dir == "." else relative_dir, filenames


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def scan_attachments(
    root: str | os.PathLike[str],
    file_names: CoreFileNames = DEFAULT_FILE_NAMES,
) -> list[Attachment]:
    """Convenience function: scan ``root`` with an ``AttachmentScanner``."""
    return AttachmentScanner(file_names).scan(root)
