"""Ledgerpulse: live view of ledger entry changes, grouped by entry type.

Folds a stream of transaction and ``ledgerClosed`` events into a
deduplicated per-ledger snapshot of created, modified and deleted ledger
entries, and renders it in the terminal.
"""

__version__ = "0.1.0"
__description__ = "Incremental per-ledger aggregation of ledger entry changes"

from ledgerpulse.core.accumulator import LedgerAccumulator
from ledgerpulse.core.classifier import classify
from ledgerpulse.core.event_stream import LedgerStreamProcessor
from ledgerpulse.core.extractor import extract_effects
from ledgerpulse.cli.app import app as cli

__all__ = [
    "LedgerAccumulator",
    "LedgerStreamProcessor",
    "classify",
    "extract_effects",
    "cli",
    "__version__",
]
