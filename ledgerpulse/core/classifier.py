"""Entry-type classifier — partitions a snapshot's effects by entry type."""

from __future__ import annotations

from collections.abc import Iterable

from ledgerpulse.models.effects import EntryTypeEffects, LedgerSnapshot


def classify(snapshot: LedgerSnapshot, entry_type: str) -> EntryTypeEffects:
    """Return the effects of *snapshot* whose entry type is *entry_type*.

    An entry type absent from the snapshot yields three empty buckets.
    """
    return EntryTypeEffects(
        entry_type=entry_type,
        created=tuple(r for r in snapshot.created if r.entry_type == entry_type),
        modified=tuple(r for r in snapshot.modified if r.entry_type == entry_type),
        deleted=tuple(r for r in snapshot.deleted if r.entry_type == entry_type),
    )


def classify_all(
    snapshot: LedgerSnapshot, entry_types: Iterable[str]
) -> list[EntryTypeEffects]:
    """Classify *snapshot* once per name, in the order given."""
    return [classify(snapshot, entry_type) for entry_type in entry_types]
