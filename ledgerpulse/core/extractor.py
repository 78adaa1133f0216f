"""Effect extractor — projects a transaction's affected nodes into effect records."""

from __future__ import annotations

from typing import NamedTuple

from ledgerpulse.models.effects import EffectRecord
from ledgerpulse.models.events import (
    CreatedNode,
    DeletedNode,
    LedgerNode,
    ModifiedNode,
    TransactionMeta,
)


class ExtractedEffects(NamedTuple):
    created: list[EffectRecord]
    modified: list[EffectRecord]
    deleted: list[EffectRecord]


def _to_record(node: LedgerNode) -> EffectRecord:
    return EffectRecord(entry_type=node.entry_type, identity=node.ledger_index)


def extract_effects(meta: TransactionMeta | None) -> ExtractedEffects:
    """Split a transaction's affected nodes into created/modified/deleted records.

    A transaction without metadata yields three empty lists.  Node order
    is preserved within each list.
    """
    effects = ExtractedEffects([], [], [])
    if meta is None:
        return effects

    for node in meta.affected_nodes:
        match node:
            case CreatedNode(created_node=body):
                effects.created.append(_to_record(body))
            case ModifiedNode(modified_node=body):
                effects.modified.append(_to_record(body))
            case DeletedNode(deleted_node=body):
                effects.deleted.append(_to_record(body))
            case _:
                raise TypeError(f"Unsupported affected node: {node!r}")

    return effects
