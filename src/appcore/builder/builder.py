"""App builder: applies construction options to a fresh ``App``.

Options run strictly in the order given.  The first one that raises
stops construction; its error is wrapped in ``AppBuildError`` and the
half-built app is dropped.  Options already applied are not undone,
which is why no partially built app is ever handed back.

Usage
-----
::

    from appcore.builder import AppBuilder, with_metadata_file, with_parameters_files

    builder = AppBuilder()
    app = builder.build(
        "my-app",
        with_metadata_file("my-app/metadata.yml"),
        with_parameters_files("my-app/parameters.yml", "prod.yml"),
    )

    app = builder.from_default_files("my-app")
"""
from __future__ import annotations

import logging
from pathlib import Path

from appcore.builder.options import (
    Option,
    PathLike,
    with_attachments,
    with_compose_files,
    with_metadata_file,
    with_parameters_files,
    with_source,
)
from appcore.config import DEFAULT_FILE_NAMES, CoreFileNames
from appcore.errors import AppBuildError, AppIOError
from appcore.model.app import App, AppSourceKind
from appcore.scanner import AttachmentScanner
from appcore.schema import SchemaValidator, default_validator

logger = logging.getLogger(__name__)


def _option_name(option: Option) -> str:
    return getattr(option, "__name__", type(option).__name__)


def _when_present(path: Path, option: Option) -> Option:
    """Wrap ``option`` so it only runs when ``path`` exists at build time."""

    def apply(app: App) -> None:
        try:
            present = path.exists()
        except OSError as exc:
            raise AppIOError(str(path), exc.strerror or str(exc), "stat core file") from exc
        if present:
            option(app)
        else:
            logger.debug("No %s in app %r, skipping", path.name, app.path)

    apply.__name__ = _option_name(option)
    return apply


class AppBuilder:
    """Builds ``App`` instances from options or from a directory.

    Parameters
    ----------
    file_names:
        Reserved core file names used by ``from_default_files``.
    validator:
        Schema validator handed to metadata and parameters options.
        Defaults to the shared validator for the built-in schemas.
    scanner:
        Attachment scanner.  Defaults to one using ``file_names``.
    """

    def __init__(
        self,
        file_names: CoreFileNames = DEFAULT_FILE_NAMES,
        validator: SchemaValidator | None = None,
        scanner: AttachmentScanner | None = None,
    ) -> None:
        self._file_names = file_names
        self._validator = validator or default_validator()
        self._scanner = scanner or AttachmentScanner(file_names)

    @property
    def file_names(self) -> CoreFileNames:
        """The reserved core file names this builder looks for."""
        return self._file_names

    def build(self, path: str, *options: Option) -> App:
        """Create an app at ``path`` and apply ``options`` in order.

        Parameters
        ----------
        path:
            Root location recorded on the app.
        options:
            Callables ``(App) -> None`` applied one after another.

        Returns
        -------
        App
            The fully populated app.

        Raises
        ------
        AppBuildError
            If any option raises.  The option's own error is the cause.
        """
        app = App(path)
        for option in options:
            name = _option_name(option)
            logger.debug("Applying %s to app %r", name, path)
            try:
                option(app)
            except Exception as exc:  # noqa: BLE001
                raise AppBuildError(path, name, exc) from exc
        return app

    def default_file_options(self, directory: PathLike) -> list[Option]:
        """Return the options that load ``directory`` by file convention.

        Core files missing from the top of ``directory`` are skipped.  The
        check happens when the options run, so a failing ``stat`` surfaces
        as an ``AppBuildError`` like any other option error.  Attachments
        are always scanned.
        """
        root = Path(directory)
        options: list[Option] = []
        metadata = root / self._file_names.metadata
        options.append(_when_present(metadata, with_metadata_file(metadata, validator=self._validator)))
        parameters = root / self._file_names.parameters
        options.append(
            _when_present(parameters, with_parameters_files(parameters, validator=self._validator))
        )
        compose = root / self._file_names.compose
        options.append(_when_present(compose, with_compose_files(compose)))
        options.append(with_source(AppSourceKind.SPLIT))
        options.append(with_attachments(root, scanner=self._scanner))
        return options

    def from_default_files(self, directory: PathLike, *options: Option) -> App:
        """Build an app from the core files and attachments in ``directory``.

        Extra ``options`` run after the directory has been loaded, so
        they may add parameter overrides or register a cleanup.
        """
        return self.build(str(directory), *self.default_file_options(directory), *options)


def new_app(path: str, *options: Option) -> App:
    """Convenience function: build an app with a default ``AppBuilder``."""
    return AppBuilder().build(path, *options)


def new_app_from_default_files(directory: PathLike, *options: Option) -> App:
    """Convenience function: load an app directory with a default ``AppBuilder``."""
    return AppBuilder().from_default_files(directory, *options)
