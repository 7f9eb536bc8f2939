"""
vendorstat CLI Entry Point.

This module implements the command-line interface for vendorstat, a tool that
reports the lifecycle status of every import path in a project: whether it is
vendored, copied into an internal tree, external and uncopied, part of the
project, from the standard distribution, missing, or no longer used.

The pipeline operates in three stages:

1.  **Loading**: A package loader runs (or reads) the dependency analysis.
    The bundled loader reads a JSON analysis manifest.
2.  **Assembly**: `Context.list_status()` turns the analyzed packages into
    display records ordered by status rank, then canonical path.
3.  **Rendering**: The records are optionally filtered by status and printed
    one per line, `<status-char> <path> [<vendor-path>]`.

Usage:
    $ python main.py --manifest deps.json +vendor +outside

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal output and colours.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich import print as pr
from rich.markup import escape

from adapters.manifest import JsonManifestLoader
from core.config import load_settings
from core.context import Context
from core.exceptions import (
    AnalysisError,
    ConfigError,
    InvalidStatusFilterError,
    ManifestLoadError,
)
from core.status import filter_list_items, parse_status_filter
from models import ListStatus
from ui.report import render_report
from utils import console, debug, set_debug

app = typer.Typer()


@app.command()
def main(
    filters: Annotated[
        list[str] | None,
        typer.Argument(
            help=(
                "Status filters such as +vendor or +e. Groups: +outside, +all. "
                f"Statuses: {', '.join(s.value for s in ListStatus)}"
            ),
            show_default=False,
        ),
    ] = None,
    manifest: Annotated[
        Path | None,
        typer.Option(
            "--manifest",
            "-m",
            exists=True,  # Typer throws error if path doesn't exist
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
            help="JSON analysis manifest. Defaults to the 'manifest' setting.",
        ),
    ] = None,
    color: Annotated[
        bool | None,
        typer.Option("--color/--no-color", help="Colour report lines by status."),
    ] = None,
    summary: Annotated[
        bool,
        typer.Option("--summary/--no-summary", help="Print per-status counts."),
    ] = True,
    debug_output: Annotated[
        bool,
        typer.Option("--debug", help="Print debug information."),
    ] = False,
):
    """
    List the status of every package in the project.

    Raises:
        typer.Exit: With code 1 on configuration, filter or analysis errors.
    """
    try:
        settings = load_settings()
    except ConfigError as e:
        print_config_err(e)
        return

    set_debug(debug_output or settings.debug)

    manifest = manifest or settings.manifest
    if manifest is None:
        pr("[red]Error:[/red] No analysis manifest given.")
        pr("Pass [green]--manifest PATH[/green] or set 'manifest' in the settings file.")
        raise typer.Exit(code=1)

    try:
        statuses = parse_status_filter(filters or [])
    except InvalidStatusFilterError as e:
        pr(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    debug("manifest:", manifest)
    debug("statuses:", ", ".join(sorted(s.value for s in statuses)))

    context = Context(JsonManifestLoader(manifest))
    try:
        items = context.list_status()
    except AnalysisError as e:
        print_analysis_err(e)
        return

    debug("packages analyzed:", len(items))
    items = filter_list_items(items, statuses)

    render_report(
        items,
        console,
        color=settings.color if color is None else color,
        show_summary=summary,
    )


def print_analysis_err(e: AnalysisError) -> None:
    """
    Displays a user-friendly error message for analysis failures.

    Args:
        e (AnalysisError): The exception raised by the package loader.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Analysis Error[/bold red]")
    pr(f"The project's dependencies could not be analyzed: {escape(e.message)}")
    if isinstance(e, ManifestLoadError) and e.file_path:
        pr(f"Manifest: [yellow]{escape(e.file_path)}[/yellow]")
    if e.original_exception:
        pr(f"\nTechnical details: {escape(str(e.original_exception))}")
    pr(f"Diagnostics: {escape(str(e.diagnostic_info))}")
    raise typer.Exit(code=1) from e


def print_config_err(e: ConfigError) -> None:
    """
    Displays a user-friendly error message for an unusable settings file.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Configuration Error[/bold red]")
    pr(escape(e.message))
    if e.file_path:
        pr(f"\n[yellow]Quick Fix:[/yellow] Fix or remove [green]{escape(e.file_path)}[/green]")
    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
