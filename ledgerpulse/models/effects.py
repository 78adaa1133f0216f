"""Effect records and ledger snapshots — the aggregation engine's vocabulary.

An ``EffectRecord`` is one ledger-entry-level side effect of a transaction.
A ``LedgerSnapshot`` is the deduplicated set of effects accumulated for one
ledger, handed out as a frozen copy.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class EffectKind(str, Enum):
    """The three ways a transaction can touch a ledger entry."""

    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"


class EffectRecord(BaseModel):
    """One ledger entry touched by a transaction.

    ``identity`` is the entry's stable key (its ledger index hash), the
    same no matter which transaction touched it.
    """

    model_config = ConfigDict(frozen=True)

    entry_type: str
    identity: str


class LedgerSnapshot(BaseModel):
    """Accumulated, deduplicated effects for a single ledger.

    Within each bucket every ``identity`` appears at most once.  The same
    identity may appear in more than one bucket.
    """

    model_config = ConfigDict(frozen=True)

    ledger_index: int = 0
    created: tuple[EffectRecord, ...] = ()
    modified: tuple[EffectRecord, ...] = ()
    deleted: tuple[EffectRecord, ...] = ()

    def effects(self, kind: EffectKind) -> tuple[EffectRecord, ...]:
        """Return the bucket for *kind*."""
        return getattr(self, kind.value)

    @property
    def total_count(self) -> int:
        """Number of effect records across all three buckets."""
        return len(self.created) + len(self.modified) + len(self.deleted)

    @property
    def entry_types(self) -> list[str]:
        """Sorted entry-type names present in any bucket."""
        return sorted(
            {r.entry_type for kind in EffectKind for r in self.effects(kind)}
        )


class ClosedLedger(BaseModel):
    """A snapshot published when a ledger closes.

    ``ledger_index`` is the index of the ledger that just closed, which
    is one less than the index the stream reports.
    """

    model_config = ConfigDict(frozen=True)

    ledger_index: int
    snapshot: LedgerSnapshot


class EntryTypeEffects(BaseModel):
    """The effects of a snapshot restricted to one entry type."""

    model_config = ConfigDict(frozen=True)

    entry_type: str
    created: tuple[EffectRecord, ...] = ()
    modified: tuple[EffectRecord, ...] = ()
    deleted: tuple[EffectRecord, ...] = ()

    @property
    def total_count(self) -> int:
        return len(self.created) + len(self.modified) + len(self.deleted)
