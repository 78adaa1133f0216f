"""Ledgerpulse data models — all Pydantic v2, all frozen (immutable)."""

from ledgerpulse.models.effects import (
    ClosedLedger,
    EffectKind,
    EffectRecord,
    EntryTypeEffects,
    LedgerSnapshot,
)
from ledgerpulse.models.events import (
    STREAM_EVENT_TYPE_MAP,
    AffectedNode,
    CreatedNode,
    DeletedNode,
    EntryTypeCatalog,
    LedgerClosedEvent,
    LedgerNode,
    ModifiedNode,
    StreamEvent,
    TransactionEvent,
    TransactionMeta,
)

__all__ = [
    # effects
    "EffectKind",
    "EffectRecord",
    "LedgerSnapshot",
    "ClosedLedger",
    "EntryTypeEffects",
    # events
    "LedgerNode",
    "CreatedNode",
    "ModifiedNode",
    "DeletedNode",
    "AffectedNode",
    "TransactionMeta",
    "TransactionEvent",
    "LedgerClosedEvent",
    "StreamEvent",
    "EntryTypeCatalog",
    "STREAM_EVENT_TYPE_MAP",
]
