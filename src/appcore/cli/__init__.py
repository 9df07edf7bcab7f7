"""CLI package.

The ``cli`` sub-package contains the Click application used to load,
validate and inspect app directories from a terminal.
"""
from __future__ import annotations
