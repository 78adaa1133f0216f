"""``ledgerpulse entry-types DEFINITIONS`` — list the entry types the monitor shows."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ledgerpulse.config import config
from ledgerpulse.core.catalog import NON_ENABLED_ENTRY_TYPES, displayable_entry_types
from ledgerpulse.cli.commands.replay import load_entry_types

console = Console()


def entry_types_cmd(
    definitions: Path = typer.Argument(
        ...,
        help="Saved server_definitions JSON.",
    ),
) -> None:
    """List entry types from a saved ``server_definitions`` result."""
    if not definitions.exists():
        console.print(f"[bold red]Definitions not found:[/bold red] {definitions}")
        raise typer.Exit(code=1)

    try:
        names = load_entry_types(definitions)
    except (OSError, ValueError) as exc:
        console.print(f"[bold red]Cannot read definitions:[/bold red] {exc}")
        raise typer.Exit(code=1)

    shown = names if config.show_non_enabled else displayable_entry_types(names)
    if not shown:
        console.print("[dim]No entry types in definitions.[/dim]")
        return

    table = Table(title="Ledger Entry Types")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", justify="center")
    for name in shown:
        enabled = "[yellow]No[/yellow]" if name in NON_ENABLED_ENTRY_TYPES else "[green]Yes[/green]"
        table.add_row(name, enabled)

    console.print(table)
