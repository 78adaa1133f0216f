"""LedgerAccumulator — folds transaction effects into the current ledger's snapshot.

The accumulator owns exactly one mutable aggregate keyed by ledger index.
It is the only writer; everything it hands out is a frozen copy.

Boundary policy
---------------
- A transaction whose ledger index is greater than the current one resets
  all three buckets before its effects are folded in.
- An equal index keeps accumulating the same ledger.
- A lower index is treated as a late delivery: no reset, the index is not
  lowered, and its effects are still folded into the current buckets.
  A very late event can therefore land in the wrong ledger; no data is
  dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from ledgerpulse.core.extractor import extract_effects
from ledgerpulse.models.effects import (
    ClosedLedger,
    EffectKind,
    EffectRecord,
    LedgerSnapshot,
)
from ledgerpulse.models.events import TransactionEvent

logger = logging.getLogger(__name__)


class AccumulatorState(str, Enum):
    """Idle until the first transaction arrives, then accumulating forever."""

    IDLE = "idle"
    ACCUMULATING = "accumulating"


def dedupe_by_identity(records: Iterable[EffectRecord]) -> list[EffectRecord]:
    """Keep one record per identity.

    Surviving keys keep the position of their first occurrence; the value
    is taken from the last occurrence.
    """
    unique: dict[str, EffectRecord] = {}
    for record in records:
        unique[record.identity] = record
    return list(unique.values())


class LedgerAccumulator:
    """Accumulates deduplicated effects for the ledger currently being built.

    Usage
    -----
    >>> acc = LedgerAccumulator()
    >>> acc.on_transaction(10, created=[EffectRecord(entry_type="AccountRoot", identity="A")])
    >>> acc.snapshot().ledger_index
    10
    """

    def __init__(self) -> None:
        self._ledger_index = 0
        self._buckets: dict[EffectKind, list[EffectRecord]] = {
            kind: [] for kind in EffectKind
        }

    @property
    def ledger_index(self) -> int:
        return self._ledger_index

    @property
    def state(self) -> AccumulatorState:
        if self._ledger_index == 0:
            return AccumulatorState.IDLE
        return AccumulatorState.ACCUMULATING

    # ------------------------------------------------------------------
    # Folding
    # ------------------------------------------------------------------

    def on_transaction(
        self,
        ledger_index: int,
        created: Iterable[EffectRecord] = (),
        modified: Iterable[EffectRecord] = (),
        deleted: Iterable[EffectRecord] = (),
    ) -> None:
        """Fold one transaction's effects into the current snapshot."""
        if ledger_index > self._ledger_index:
            self._reset(ledger_index)
        elif ledger_index < self._ledger_index:
            logger.debug(
                "Late transaction for ledger %d folded into ledger %d",
                ledger_index,
                self._ledger_index,
            )

        incoming = {
            EffectKind.CREATED: created,
            EffectKind.MODIFIED: modified,
            EffectKind.DELETED: deleted,
        }
        for kind, records in incoming.items():
            bucket = self._buckets[kind]
            bucket.extend(records)
            self._buckets[kind] = dedupe_by_identity(bucket)

    def on_transaction_event(self, event: TransactionEvent) -> None:
        """Extract a transaction event's effects and fold them in."""
        effects = extract_effects(event.meta)
        self.on_transaction(
            event.ledger_index,
            created=effects.created,
            modified=effects.modified,
            deleted=effects.deleted,
        )

    def _reset(self, ledger_index: int) -> None:
        logger.debug(
            "Ledger boundary %d -> %d, clearing accumulated effects",
            self._ledger_index,
            ledger_index,
        )
        self._ledger_index = ledger_index
        for kind in EffectKind:
            self._buckets[kind] = []

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------

    def snapshot(self) -> LedgerSnapshot:
        """Return a frozen copy of the current state."""
        return LedgerSnapshot(
            ledger_index=self._ledger_index,
            created=tuple(self._buckets[EffectKind.CREATED]),
            modified=tuple(self._buckets[EffectKind.MODIFIED]),
            deleted=tuple(self._buckets[EffectKind.DELETED]),
        )

    def on_ledger_closed(self, reported_index: int) -> ClosedLedger:
        """Publish the current state for a ``ledgerClosed`` message.

        *reported_index* is the index carried by the stream; the closed
        ledger is the one before it.  The accumulator is not reset here;
        the next transaction with a higher index does that.
        """
        snapshot = self.snapshot()
        closed = ClosedLedger(ledger_index=reported_index - 1, snapshot=snapshot)
        logger.info(
            "Ledger %d closed: %d created, %d modified, %d deleted",
            closed.ledger_index,
            len(snapshot.created),
            len(snapshot.modified),
            len(snapshot.deleted),
        )
        return closed
