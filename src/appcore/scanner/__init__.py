"""appcore scanner module.

Exports the ``AttachmentScanner`` class and the ``scan_attachments``
convenience function.
"""
from __future__ import annotations

from appcore.scanner.scanner import AttachmentScanner, scan_attachments

__all__ = ["AttachmentScanner", "scan_attachments"]
