"""Rich console helpers for CLI output.

Messages go to stderr; JSON results go to stdout so they can be piped.
"""

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from ..core.models import CatalogSnapshot

console = Console()
err_console = Console(stderr=True)


def print_info(message: str) -> None:
    err_console.print(f"[blue]{message}[/blue]")


def print_success(message: str) -> None:
    err_console.print(f"[green]✓ {message}[/green]")


def print_warning(message: str) -> None:
    err_console.print(f"[yellow]! {message}[/yellow]")


def print_error(message: str) -> None:
    err_console.print(f"[red]✗ {message}[/red]")


def print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


def print_catalog_summary(snapshot: CatalogSnapshot) -> None:
    table = Table(title="Foundation catalog")
    table.add_column("Catalog", style="cyan")
    table.add_column("Entries", justify="right")
    table.add_column("Slugs")

    for label, entries in (
        ("Plugins", snapshot.plugins),
        ("Components", snapshot.components),
        ("Utilities", snapshot.utilities),
        ("Grids", snapshot.grids),
    ):
        table.add_row(label, str(len(entries)), ", ".join(entry.slug for entry in entries))

    console.print(table)
