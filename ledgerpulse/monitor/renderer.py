"""Rich terminal renderer for closed-ledger snapshots.

One marker is drawn per effect record, coloured by kind.

Color scheme
------------
- blue  : created
- green : modified
- red   : deleted
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ledgerpulse.core.catalog import displayable_entry_types
from ledgerpulse.core.classifier import classify_all
from ledgerpulse.models.effects import (
    ClosedLedger,
    EffectKind,
    EntryTypeEffects,
    LedgerSnapshot,
)

_KIND_STYLES: dict[EffectKind, str] = {
    EffectKind.CREATED: "blue",
    EffectKind.MODIFIED: "green",
    EffectKind.DELETED: "red",
}

_MARKER = "■"


class SnapshotRenderer:
    """Renders ``ClosedLedger`` snapshots as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    show_non_enabled:
        Also render entry types that are hidden by default.
    marker_limit:
        Maximum markers drawn per cell; the rest are summarised as ``+N``.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        show_non_enabled: bool = False,
        marker_limit: int = 48,
    ) -> None:
        self.console = console or Console()
        self.show_non_enabled = show_non_enabled
        self.marker_limit = marker_limit

    # ------------------------------------------------------------------
    # Single snapshot render
    # ------------------------------------------------------------------

    def render_closed(
        self,
        closed: ClosedLedger,
        entry_types: Iterable[str] | None = None,
    ) -> Panel:
        """Render a closed ledger as a Rich Panel.

        *entry_types* picks the per-type rows and their order.  When not
        given, the types present in the snapshot are used.
        """
        snapshot = closed.snapshot
        names = list(entry_types) if entry_types is not None else snapshot.entry_types
        if not self.show_non_enabled:
            names = displayable_entry_types(names)

        kind_table = self._build_kind_table(snapshot)
        type_table = self._build_entry_type_table(classify_all(snapshot, names))

        summary_parts: list[str] = [
            f"[bold]Ledger:[/bold] {closed.ledger_index}",
            f"[bold]Entries:[/bold] {snapshot.total_count}",
            f"[bold]Types:[/bold] {len(snapshot.entry_types)}",
        ]
        if snapshot.ledger_index not in (0, closed.ledger_index):
            summary_parts.append(
                f"[yellow]accumulated under ledger {snapshot.ledger_index}[/yellow]"
            )
        summary = "  |  ".join(summary_parts)

        return Panel(
            Group(kind_table, Text(""), type_table, Text(""), Text.from_markup(summary)),
            title="[bold]Live Ledger Entries[/bold]",
            subtitle=f"Ledger {closed.ledger_index}",
            border_style="blue",
            padding=(1, 2),
        )

    def markers(self, count: int, style: str) -> Text:
        """A run of *count* markers, truncated at ``marker_limit``."""
        shown = min(count, self.marker_limit)
        text = Text(_MARKER * shown, style=style)
        if count > shown:
            text.append(f" +{count - shown}", style="dim")
        return text

    def _build_kind_table(self, snapshot: LedgerSnapshot) -> Table:
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Kind", min_width=10)
        table.add_column("Count", justify="right", width=7)
        table.add_column("Entries")

        for kind in EffectKind:
            style = _KIND_STYLES[kind]
            count = len(snapshot.effects(kind))
            table.add_row(
                f"[{style}]{kind.value.capitalize()}[/{style}]",
                str(count),
                self.markers(count, style),
            )
        return table

    def _build_entry_type_table(self, groups: list[EntryTypeEffects]) -> Table:
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Entry type", min_width=20)
        table.add_column("C", justify="right", width=5)
        table.add_column("M", justify="right", width=5)
        table.add_column("D", justify="right", width=5)
        table.add_column("Entries")

        for group in groups:
            cell = Text()
            for kind in EffectKind:
                records = getattr(group, kind.value)
                if records:
                    cell.append_text(self.markers(len(records), _KIND_STYLES[kind]))
            name_style = "" if group.total_count else "dim"
            table.add_row(
                Text(group.entry_type, style=name_style),
                str(len(group.created)),
                str(len(group.modified)),
                str(len(group.deleted)),
                cell,
            )
        return table

    # ------------------------------------------------------------------
    # Standalone print
    # ------------------------------------------------------------------

    def print_closed(
        self,
        closed: ClosedLedger,
        entry_types: Iterable[str] | None = None,
    ) -> None:
        """Print a single closed-ledger panel to the console."""
        self.console.print(self.render_closed(closed, entry_types))
