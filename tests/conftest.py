"""Shared test fixtures for Ledgerpulse."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from ledgerpulse.core.accumulator import LedgerAccumulator
from ledgerpulse.models.effects import EffectKind, EffectRecord

_NODE_KEYS = {
    EffectKind.CREATED: "CreatedNode",
    EffectKind.MODIFIED: "ModifiedNode",
    EffectKind.DELETED: "DeletedNode",
}


@pytest.fixture
def accumulator() -> LedgerAccumulator:
    """Provide a fresh, idle LedgerAccumulator."""
    return LedgerAccumulator()


# ---------------------------------------------------------------------------
# Record and stream-message factories shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_record() -> Callable[..., EffectRecord]:
    """Factory fixture: build an EffectRecord with sensible defaults."""

    def _factory(identity: str = "A", entry_type: str = "AccountRoot") -> EffectRecord:
        return EffectRecord(entry_type=entry_type, identity=identity)

    return _factory


@pytest.fixture
def make_node() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build one raw affected-node entry as found in tx meta."""

    def _factory(
        kind: EffectKind = EffectKind.MODIFIED,
        identity: str = "A",
        entry_type: str = "AccountRoot",
        **fields: Any,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            "LedgerEntryType": entry_type,
            "LedgerIndex": identity,
        }
        body.update(fields)
        return {_NODE_KEYS[kind]: body}

    return _factory


@pytest.fixture
def make_transaction_message() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build a raw ``transaction`` stream message.

    Pass ``nodes=None`` for a transaction without metadata.
    """

    def _factory(
        ledger_index: int = 10,
        nodes: list[dict[str, Any]] | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        message: dict[str, Any] = {
            "type": "transaction",
            "ledger_index": ledger_index,
            "validated": True,
            "engine_result": "tesSUCCESS",
            "transaction": {"TransactionType": "Payment"},
        }
        if nodes is not None:
            message["meta"] = {
                "AffectedNodes": nodes,
                "TransactionIndex": 0,
                "TransactionResult": "tesSUCCESS",
            }
        message.update(overrides)
        return message

    return _factory


@pytest.fixture
def make_ledger_closed_message() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build a raw ``ledgerClosed`` stream message."""

    def _factory(ledger_index: int = 11, **overrides: Any) -> dict[str, Any]:
        message: dict[str, Any] = {
            "type": "ledgerClosed",
            "ledger_index": ledger_index,
            "ledger_hash": "F" * 64,
            "txn_count": 0,
        }
        message.update(overrides)
        return message

    return _factory
