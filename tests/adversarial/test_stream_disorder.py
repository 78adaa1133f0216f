"""Adversarial tests — disordered, duplicated and gapped stream delivery.

These tests verify that:
1. Re-delivered transactions do not change the snapshot
2. Late transactions never move the ledger index backwards
3. A ledgerClosed arriving before its transactions does not lose them
4. Reconnect gaps reset cleanly on the next higher index
"""

from __future__ import annotations

import pytest

from ledgerpulse.core.event_stream import LedgerStreamProcessor, iter_events
from ledgerpulse.models.effects import EffectKind


class TestRedelivery:
    def test_full_replay_of_ledger_is_idempotent(
        self, make_transaction_message, make_ledger_closed_message, make_node
    ):
        ledger = [
            make_transaction_message(
                30,
                nodes=[
                    make_node(EffectKind.CREATED, "A"),
                    make_node(EffectKind.MODIFIED, "B"),
                    make_node(EffectKind.DELETED, "C", "Offer"),
                ],
            ),
            make_transaction_message(30, nodes=[make_node(EffectKind.MODIFIED, "B")]),
        ]
        once = LedgerStreamProcessor()
        twice = LedgerStreamProcessor()
        [first] = once.run(iter_events([*ledger, make_ledger_closed_message(31)]))
        [second] = twice.run(
            iter_events([*ledger, *ledger, make_ledger_closed_message(31)])
        )
        assert first.snapshot == second.snapshot


class TestOutOfOrder:
    def test_late_transaction_never_lowers_index(self, accumulator, make_record):
        accumulator.on_transaction(40)
        for late in (39, 12, 0):
            accumulator.on_transaction(late, modified=[make_record(f"L{late}")])
        assert accumulator.ledger_index == 40
        assert len(accumulator.snapshot().modified) == 3

    def test_close_before_transactions_keeps_them(
        self, make_transaction_message, make_ledger_closed_message, make_node
    ):
        """ledgerClosed for N arrives before the last tx of N; that tx is still folded."""
        processor = LedgerStreamProcessor()
        closed = list(
            processor.run(
                iter_events(
                    [
                        make_transaction_message(50, nodes=[make_node(identity="A")]),
                        make_ledger_closed_message(51),
                        make_transaction_message(50, nodes=[make_node(identity="B")]),
                        make_ledger_closed_message(52),
                    ]
                )
            )
        )
        assert [r.identity for r in closed[0].snapshot.modified] == ["A"]
        # The straggler lands in the still-current ledger 50 aggregate
        assert [r.identity for r in closed[1].snapshot.modified] == ["A", "B"]
        assert closed[1].snapshot.ledger_index == 50

    def test_repeated_close_without_transactions(self, accumulator, make_record):
        accumulator.on_transaction(60, created=[make_record("A")])
        first = accumulator.on_ledger_closed(61)
        second = accumulator.on_ledger_closed(62)
        assert first.snapshot == second.snapshot
        assert second.ledger_index == 61


class TestReconnectGap:
    @pytest.mark.parametrize("jump", [1, 5, 1000])
    def test_gap_resets_on_next_index(self, accumulator, make_record, jump):
        accumulator.on_transaction(70, created=[make_record("A")])
        accumulator.on_transaction(70 + jump, deleted=[make_record("B")])
        snap = accumulator.snapshot()
        assert snap.ledger_index == 70 + jump
        assert snap.created == ()
        assert [r.identity for r in snap.deleted] == ["B"]
