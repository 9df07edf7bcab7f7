"""CLI entry point for appcore.

Invoked as::

    appcore [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m appcore.cli.main

Commands
--------
validate    Load an app directory and report whether it is valid
inspect     Show the documents and attachments of an app directory
version     Show version information
"""
from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from appcore.builder import AppBuilder, with_parameters_files
from appcore.errors import AppBuildError, ValidationError
from appcore.model.app import App

console = Console()
err_console = Console(stderr=True)


def _load_or_exit(directory: str, parameters_files: tuple[str, ...] = ()) -> App:
    """Load an app directory, printing the error and exiting on failure."""
    options = [with_parameters_files(*parameters_files)] if parameters_files else []
    try:
        return AppBuilder().from_default_files(directory, *options)
    except AppBuildError as exc:
        cause = exc.cause
        if isinstance(cause, ValidationError):
            err_console.print(f"[red]Invalid {cause.kind}[/red] in {escape(directory)}:", soft_wrap=True)
            for violation in cause.violations:
                err_console.print(f"  - {violation}", markup=False, soft_wrap=True)
        else:
            err_console.print(f"[red]Error:[/red] {escape(str(cause))}", soft_wrap=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="appcore")
def cli() -> None:
    """Load, validate and inspect app directories."""


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from appcore import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]appcore[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# validate command
# ---------------------------------------------------------------------------


@cli.command(name="validate")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--parameters-file",
    "-p",
    "parameters_files",
    multiple=True,
    type=click.Path(),
    help="Extra parameters file merged over the app defaults. Repeatable.",
)
def validate_command(directory: str, parameters_files: tuple[str, ...]) -> None:
    """Load DIRECTORY and report whether its documents are valid."""
    with _load_or_exit(directory, parameters_files) as app:
        name = app.metadata.name if app.metadata else directory
        console.print(f"[green]Valid:[/green] {name}")


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
def inspect_command(directory: str) -> None:
    """Show the metadata, document counts and attachments of DIRECTORY."""
    with _load_or_exit(directory) as app:
        summary = Table(show_header=False, box=None)
        if app.metadata is not None:
            summary.add_row("[bold]Name[/bold]", app.metadata.name)
            summary.add_row("[bold]Version[/bold]", app.metadata.version)
            if app.metadata.description:
                summary.add_row("[bold]Description[/bold]", app.metadata.description)
            for maintainer in app.metadata.maintainers:
                summary.add_row("[bold]Maintainer[/bold]", str(maintainer))
        else:
            summary.add_row("[bold]Metadata[/bold]", "[yellow]missing[/yellow]")
        summary.add_row("[bold]Parameters[/bold]", str(len(app.parameters_raw)))
        summary.add_row("[bold]Composes[/bold]", str(len(app.composes)))
        console.print(summary)

        if not app.attachments:
            return
        table = Table(title="Attachments")
        table.add_column("Path")
        table.add_column("Size", justify="right")
        for attachment in app.attachments:
            table.add_row(attachment.path, str(attachment.size))
        console.print(table)


if __name__ == "__main__":
    cli()
