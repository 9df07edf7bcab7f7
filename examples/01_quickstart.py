#!/usr/bin/env python3
"""Example: Quickstart: appcore

Minimal working example: write an app directory, load it by file
convention, then rebuild it from explicit options with a parameters
override.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install appcore
"""
from __future__ import annotations

import io
import tempfile
from pathlib import Path

import appcore

METADATA = """name: hello
version: 0.1.0
maintainers:
  - name: dev
    email: dev@example.com
"""

PARAMETERS = """web:
  port: 8080
  replicas: 1
"""

COMPOSE = """version: "3.6"
services:
  web:
    image: nginx
"""


def main() -> None:
    print(f"appcore version: {appcore.__version__}")

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp) / "hello"
        (root / "config").mkdir(parents=True)
        (root / "metadata.yml").write_text(METADATA)
        (root / "parameters.yml").write_text(PARAMETERS)
        (root / "docker-compose.yml").write_text(COMPOSE)
        (root / "config" / "nginx.conf").write_text("server {}\n")

        # Step 1: Load by directory convention
        with appcore.new_app_from_default_files(root) as app:
            print(f"Loaded '{app.metadata.name}' {app.metadata.version}")
            for maintainer in app.metadata.maintainers:
                print(f"  maintainer: {maintainer}")
            for attachment in app.attachments:
                print(f"  attachment: {attachment.path} ({attachment.size} bytes)")

        # Step 2: Compose options explicitly, overriding one parameter
        app = appcore.new_app(
            str(root),
            appcore.with_metadata_file(root / "metadata.yml"),
            appcore.with_parameters_files(root / "parameters.yml"),
            appcore.with_parameters(io.StringIO("web:\n  replicas: 3\n")),
            appcore.with_cleanup(lambda: print("cleaned up")),
        )
        with app:
            print(f"Parameters: {app.flat_parameters()}")

        # Step 3: Broken metadata reports every violation at once
        try:
            appcore.new_app("broken", appcore.with_metadata(io.StringIO("name: x")))
        except appcore.AppBuildError as exc:
            print(exc.cause)


if __name__ == "__main__":
    main()
