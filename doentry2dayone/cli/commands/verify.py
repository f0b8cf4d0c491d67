"""
Verify command: check a generated Journal.json against the Day One models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from doentry2dayone.cli.logging import setup_cli_logging
from doentry2dayone.cli.streaming.json_streamer import stream_parse_dayone_entries
from doentry2dayone.data_transfer.dayone.models import DayOneEntry

console = Console()

MAX_REPORTED_ERRORS = 20


def run_verify(
    file_path: Annotated[Path, typer.Argument(help="Journal.json to check")],
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
):
    """Stream the file and validate every entry."""
    logger = setup_cli_logging("verify", verbose=verbose, console=console)

    entry_count = 0
    photo_count = 0
    invalid: list[tuple[int, str]] = []

    try:
        for index, raw_entry in enumerate(stream_parse_dayone_entries(file_path)):
            entry_count += 1
            try:
                entry = DayOneEntry.model_validate(raw_entry)
            except ValidationError as e:
                invalid.append((index, str(e)))
                continue
            photo_count += len(entry.photos)
    except (FileNotFoundError, ValueError, IOError) as e:
        logger.error(f"Cannot read {file_path}: {e}")
        console.print(f"[red]Cannot read file:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1)

    table = Table(title="Verification Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Entries", str(entry_count))
    table.add_row("Photos", str(photo_count))
    table.add_row("Invalid entries", str(len(invalid)))
    console.print(table)

    if invalid:
        for index, error in invalid[:MAX_REPORTED_ERRORS]:
            console.print(f"[red]Entry #{index}:[/red] {escape(error)}", highlight=False)
        raise typer.Exit(code=1)

    console.print("[green]File is a valid Day One import[/green]")
