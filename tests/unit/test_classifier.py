"""Tests for the entry-type classifier."""

from __future__ import annotations

import pytest

from ledgerpulse.core.classifier import classify, classify_all
from ledgerpulse.models.effects import EffectKind, EffectRecord, LedgerSnapshot


@pytest.fixture
def snapshot() -> LedgerSnapshot:
    return LedgerSnapshot(
        ledger_index=20,
        created=[
            EffectRecord(entry_type="Offer", identity="O1"),
            EffectRecord(entry_type="RippleState", identity="R1"),
        ],
        modified=[
            EffectRecord(entry_type="AccountRoot", identity="A1"),
            EffectRecord(entry_type="AccountRoot", identity="A2"),
            EffectRecord(entry_type="Offer", identity="O2"),
            EffectRecord(entry_type="DirectoryNode", identity="D1"),
        ],
        deleted=[EffectRecord(entry_type="Offer", identity="O3")],
    )


class TestClassify:
    def test_filters_each_bucket(self, snapshot):
        offers = classify(snapshot, "Offer")
        assert offers.entry_type == "Offer"
        assert [r.identity for r in offers.created] == ["O1"]
        assert [r.identity for r in offers.modified] == ["O2"]
        assert [r.identity for r in offers.deleted] == ["O3"]

    def test_preserves_bucket_order(self, snapshot):
        roots = classify(snapshot, "AccountRoot")
        assert [r.identity for r in roots.modified] == ["A1", "A2"]

    def test_unknown_entry_type_is_empty(self, snapshot):
        result = classify(snapshot, "NFTokenPage")
        assert result.created == () and result.modified == () and result.deleted == ()
        assert result.total_count == 0

    def test_does_not_mutate_snapshot(self, snapshot):
        before = snapshot.model_copy(deep=True)
        classify(snapshot, "Offer")
        assert snapshot == before

    def test_buckets_are_tuples(self, snapshot):
        offers = classify(snapshot, "Offer")
        assert isinstance(offers.created, tuple)
        assert isinstance(offers.modified, tuple)
        assert isinstance(offers.deleted, tuple)

    def test_partition_is_complete(self, snapshot):
        """Classifying by every present type reassembles each bucket exactly."""
        groups = classify_all(snapshot, snapshot.entry_types)
        for kind in EffectKind:
            regrouped = [r for g in groups for r in getattr(g, kind.value)]
            assert sorted(regrouped, key=lambda r: r.identity) == sorted(
                snapshot.effects(kind), key=lambda r: r.identity
            )

    def test_classify_all_keeps_requested_order(self, snapshot):
        groups = classify_all(snapshot, ["RippleState", "Offer", "Check"])
        assert [g.entry_type for g in groups] == ["RippleState", "Offer", "Check"]
        assert groups[2].total_count == 0
