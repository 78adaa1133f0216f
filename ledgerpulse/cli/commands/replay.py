"""``ledgerpulse replay CAPTURE`` — fold a captured stream and show each closed ledger.

The capture is a JSON-lines file with one stream message per line, as
received from a ``subscribe`` to the ``ledger`` and ``transactions``
streams.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ledgerpulse.config import config
from ledgerpulse.core.catalog import catalog_from_definitions, known_entry_types
from ledgerpulse.core.event_stream import (
    EventDecodeError,
    LedgerStreamProcessor,
    iter_events,
)
from ledgerpulse.monitor.renderer import SnapshotRenderer

console = Console()


def load_entry_types(definitions: Path) -> list[str]:
    """Read a saved ``server_definitions`` result and return the known entry types."""
    payload = json.loads(definitions.read_text(encoding="utf-8"))
    return known_entry_types(catalog_from_definitions(payload))


def replay_cmd(
    capture: Path = typer.Argument(
        ...,
        help="JSON-lines file of captured stream messages.",
    ),
    definitions: Optional[Path] = typer.Option(
        None,
        "--definitions",
        "-d",
        help="Saved server_definitions JSON used to list entry types.",
    ),
    last: bool = typer.Option(
        False,
        "--last",
        help="Only show the last closed ledger.",
    ),
) -> None:
    """Replay a captured stream through the accumulator."""
    if not capture.exists():
        console.print(f"[bold red]Capture not found:[/bold red] {capture}")
        raise typer.Exit(code=1)

    entry_types: list[str] | None = None
    if definitions is not None:
        try:
            entry_types = load_entry_types(definitions)
        except (OSError, ValueError) as exc:
            console.print(f"[bold red]Cannot read definitions:[/bold red] {exc}")
            raise typer.Exit(code=1)

    renderer = SnapshotRenderer(
        console=console,
        show_non_enabled=config.show_non_enabled,
        marker_limit=config.marker_limit,
    )
    processor = LedgerStreamProcessor()
    latest = None

    try:
        with capture.open(encoding="utf-8") as fh:
            messages = (line for line in fh if line.strip())
            for closed in processor.run(iter_events(messages)):
                latest = closed
                if not last:
                    renderer.print_closed(closed, entry_types)
    except EventDecodeError as exc:
        console.print(f"[bold red]Malformed stream message:[/bold red] {exc}")
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[bold red]Cannot read capture:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if latest is None:
        console.print("[dim]No ledger closed in capture.[/dim]")
    elif last:
        renderer.print_closed(latest, entry_types)

    console.print(
        f"[dim]Processed {processor.transactions_seen} transactions "
        f"across {processor.ledgers_closed} closed ledgers.[/dim]"
    )
