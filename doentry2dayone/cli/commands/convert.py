"""
Convert command: Day One Classic bundle -> Day One JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TextColumn, TimeRemainingColumn
from rich.table import Table

from doentry2dayone import __version__ as app_version
from doentry2dayone.cli.logging import setup_cli_logging
from doentry2dayone.core.config import Settings
from doentry2dayone.core.exceptions import ConversionError
from doentry2dayone.schemas.dto import ConversionSummary
from doentry2dayone.services.convert_service import ConvertService

app = typer.Typer(help="Convert a Day One Classic bundle", invoke_without_command=True)
console = Console()

MAX_SKIPPED_ROWS = 50


def _build_settings(**overrides: Any) -> Settings:
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def _print_summary(summary: ConversionSummary) -> None:
    table = Table(title="Conversion Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Files found", str(summary.files_found))
    table.add_row("Entries converted", str(summary.entries_converted))
    table.add_row("Entries skipped", str(summary.entries_skipped))
    table.add_row("Photos attached", str(summary.photos_attached))
    if summary.photos_copied:
        table.add_row("Photos copied", str(summary.photos_copied))
    table.add_row("Output", escape(summary.output_path or "-"))
    console.print(table)

    if summary.skipped:
        skipped = Table(title="Skipped Files")
        skipped.add_column("File", style="yellow", overflow="fold")
        skipped.add_column("Error", style="red", overflow="fold")
        for item in summary.skipped[:MAX_SKIPPED_ROWS]:
            skipped.add_row(escape(item.path), escape(item.error))
        console.print(skipped)
        if len(summary.skipped) > MAX_SKIPPED_ROWS:
            console.print(f"... and {len(summary.skipped) - MAX_SKIPPED_ROWS} more")

    for warning in summary.warnings:
        console.print(f"[yellow]{escape(warning)}[/yellow]", highlight=False)


@app.callback()
def run_convert(
    source: Annotated[
        Optional[Path],
        typer.Option("--source", "-s", help="Day One Classic bundle root (contains entries/ and photos/)"),
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Journal.json to write")
    ] = None,
    starred_key: Annotated[
        Optional[str],
        typer.Option("--starred-key", help="Only read starred from the boolean after this key"),
    ] = None,
    copy_photos: Annotated[
        Optional[bool],
        typer.Option("--copy-photos/--no-copy-photos", help="Copy photos next to the output"),
    ] = None,
    indent: Annotated[
        Optional[int], typer.Option("--indent", min=0, help="JSON indentation width")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every converted entry")
    ] = False,
):
    """Convert every entry in the bundle and write one Day One JSON file."""
    try:
        settings = _build_settings(
            source_root=source,
            output_path=output,
            starred_key=starred_key,
            copy_photos=copy_photos,
            json_indent=indent,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=2)

    logger = setup_cli_logging("convert", verbose=verbose, level=settings.log_level, console=console)
    logger.info(f"Starting convert command (version {app_version})")

    service = ConvertService(settings)

    try:
        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            TimeRemainingColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("Converting entries...", total=None)

            def on_progress(processed: int, total: int) -> None:
                progress.update(task, completed=processed, total=total)

            summary = service.convert(progress_callback=on_progress)
    except ConversionError as e:
        console.print(f"[red]Conversion failed:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1)

    _print_summary(summary)
