"""Shared test fixtures for appcore.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

from appcore.config import DEFAULT_FILE_NAMES

_METADATA = """name: test-app
version: 0.1.0"""

_COMPOSE = """version: "3.0"
services:
  web:
    image: nginx"""


def _write_tree(root: Path, tree: Mapping[str, Any]) -> None:
    root.mkdir(parents=True, exist_ok=True)
    for name, content in tree.items():
        if isinstance(content, str):
            (root / name).write_text(content, encoding="utf-8")
        else:
            _write_tree(root / name, content)


@pytest.fixture()
def core_tree() -> dict[str, str]:
    """The three core documents keyed by their reserved file names."""
    return {
        DEFAULT_FILE_NAMES.metadata: _METADATA,
        DEFAULT_FILE_NAMES.parameters: "foo: bar",
        DEFAULT_FILE_NAMES.compose: _COMPOSE,
    }


@pytest.fixture()
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a file tree and returns its root.

    String values become files; mapping values become directories.
    """

    def _make(tree: Mapping[str, Any], name: str = "my-app") -> Path:
        root = tmp_path / name
        _write_tree(root, tree)
        return root

    return _make


@pytest.fixture()
def app_dir(make_tree: Callable[..., Path], core_tree: dict[str, str]) -> Path:
    """An app directory holding only the three core files."""
    return make_tree(core_tree)


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"
