"""Typed stream events delivered by the transport boundary.

Field aliases follow the ledger's JSON stream (``LedgerEntryType``,
``AffectedNodes`` ...).  Unknown fields are ignored; missing required
fields fail validation.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

_NODE_TAGS = ("CreatedNode", "ModifiedNode", "DeletedNode")


class LedgerNode(BaseModel):
    """The fields shared by all three affected-node layouts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    entry_type: str = Field(alias="LedgerEntryType")
    ledger_index: str = Field(alias="LedgerIndex")  # entry identity hash


class CreatedNode(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    node_tag: ClassVar[str] = "CreatedNode"
    created_node: LedgerNode = Field(alias="CreatedNode")


class ModifiedNode(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    node_tag: ClassVar[str] = "ModifiedNode"
    modified_node: LedgerNode = Field(alias="ModifiedNode")


class DeletedNode(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    node_tag: ClassVar[str] = "DeletedNode"
    deleted_node: LedgerNode = Field(alias="DeletedNode")


def _affected_node_tag(value: Any) -> str | None:
    """Pick the node variant from the single wrapping key."""
    if isinstance(value, dict):
        return next((tag for tag in _NODE_TAGS if tag in value), None)
    return getattr(value, "node_tag", None)


AffectedNode = Annotated[
    Union[
        Annotated[CreatedNode, Tag("CreatedNode")],
        Annotated[ModifiedNode, Tag("ModifiedNode")],
        Annotated[DeletedNode, Tag("DeletedNode")],
    ],
    Discriminator(_affected_node_tag),
]


class TransactionMeta(BaseModel):
    """Transaction metadata: the ordered list of affected nodes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    affected_nodes: list[AffectedNode] = Field(alias="AffectedNodes")
    transaction_result: str = Field("", alias="TransactionResult")


class TransactionEvent(BaseModel):
    """A transaction from the ``transactions`` stream.

    ``meta`` is absent for transactions that carry no metadata; that is
    a valid event with no effects.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["transaction"] = "transaction"
    ledger_index: int
    meta: TransactionMeta | None = None


class LedgerClosedEvent(BaseModel):
    """A ``ledgerClosed`` message from the ``ledger`` stream.

    ``ledger_index`` is the index the stream reports; the ledger that
    actually closed is ``ledger_index - 1``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["ledgerClosed"] = "ledgerClosed"
    ledger_index: int
    ledger_hash: str = ""
    txn_count: int = 0


class EntryTypeCatalog(BaseModel):
    """Entry-type names known to the server, fetched once at startup."""

    model_config = ConfigDict(frozen=True)

    entry_type_names: list[str] = []


StreamEvent = Union[TransactionEvent, LedgerClosedEvent]

# Registry for decoding by the message's ``type`` field
STREAM_EVENT_TYPE_MAP: dict[str, type[BaseModel]] = {
    "transaction": TransactionEvent,
    "ledgerClosed": LedgerClosedEvent,
}
