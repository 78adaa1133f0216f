"""Ledgerpulse monitor — terminal presentation of closed-ledger snapshots.

Modules
-------
renderer
    ``SnapshotRenderer`` turns a ``ClosedLedger`` into Rich renderables,
    one coloured marker per effect record, grouped by entry type.
"""
