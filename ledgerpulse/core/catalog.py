"""Entry-type catalog filtering.

The server's ``server_definitions`` result lists every entry-type name it
knows.  Some of those are internal placeholders and never appear on a
ledger; others are real but not yet shown by the monitor.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ledgerpulse.models.events import EntryTypeCatalog

# Internal or obsolete names that never correspond to real ledger entries
IGNORED_ENTRY_TYPES: tuple[str, ...] = (
    "Invalid",
    "Any",
    "Child",
    "Nickname",
    "Contract",
    "GeneratorMap",
)

# Real entry types hidden at the presentation boundary only
NON_ENABLED_ENTRY_TYPES: tuple[str, ...] = (
    "Bridge",
    "XChainOwnedClaimID",
    "XChainOwnedCreateAccountClaimID",
    "DID",
)


def catalog_from_definitions(payload: Any) -> EntryTypeCatalog:
    """Build a catalog from a ``server_definitions`` result.

    Accepts either the bare result or a full response wrapping it under
    ``result``.  A missing ``LEDGER_ENTRY_TYPES`` table gives an empty
    catalog.

    Raises
    ------
    ValueError
        If the payload, its ``result`` or the entry-type table is not a
        JSON object.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(
            f"server_definitions payload must be a JSON object, got {type(payload).__name__}"
        )
    result = payload.get("result", payload)
    if not isinstance(result, Mapping):
        raise ValueError(
            f"server_definitions result must be a JSON object, got {type(result).__name__}"
        )
    entry_types = result.get("LEDGER_ENTRY_TYPES") or {}
    if not isinstance(entry_types, Mapping):
        raise ValueError(
            f"LEDGER_ENTRY_TYPES must be a JSON object, got {type(entry_types).__name__}"
        )
    return EntryTypeCatalog(entry_type_names=list(entry_types))


def known_entry_types(catalog: EntryTypeCatalog) -> list[str]:
    """Catalog names minus the ignored placeholders, in catalog order."""
    return [
        name for name in catalog.entry_type_names if name not in IGNORED_ENTRY_TYPES
    ]


def displayable_entry_types(names: Iterable[str]) -> list[str]:
    """Drop entry types the monitor does not display yet."""
    return [name for name in names if name not in NON_ENABLED_ENTRY_TYPES]
