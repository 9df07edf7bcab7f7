"""Configuration for appcore.

Exports ``CoreFileNames`` and the shared ``DEFAULT_FILE_NAMES`` instance.
"""
from __future__ import annotations

from appcore.config.names import DEFAULT_FILE_NAMES, CoreFileNames

__all__ = ["CoreFileNames", "DEFAULT_FILE_NAMES"]
