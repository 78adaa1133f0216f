"""Event stream boundary — decodes stream messages and drives the accumulator.

The transport hands over a lazy sequence of decoded JSON messages.  This
module turns them into typed events and feeds them, one at a time and on
the caller's thread, to a ``LedgerAccumulator``.  Each ``ledgerClosed``
event publishes a frozen snapshot.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from ledgerpulse.core.accumulator import LedgerAccumulator
from ledgerpulse.models.effects import ClosedLedger
from ledgerpulse.models.events import (
    STREAM_EVENT_TYPE_MAP,
    LedgerClosedEvent,
    StreamEvent,
    TransactionEvent,
)

logger = logging.getLogger(__name__)


class EventDecodeError(ValueError):
    """Raised when a stream message is malformed."""


def decode_event(raw: Mapping[str, Any] | str | bytes) -> StreamEvent | None:
    """Validate one stream message into a typed event.

    Messages of a type the engine does not consume (subscription
    responses, validations ...) return ``None``.

    Raises
    ------
    EventDecodeError
        If the message is not a JSON object, has no ``type``, or fails
        validation for its declared type.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EventDecodeError(f"Stream message is not UTF-8: {exc}") from exc

    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise EventDecodeError(f"Invalid JSON: {exc}") from exc
    else:
        data = raw

    if not isinstance(data, Mapping):
        raise EventDecodeError(
            f"Stream message must be a JSON object, got {type(data).__name__}"
        )

    kind = data.get("type")
    if not kind:
        raise EventDecodeError("Missing type field")
    if not isinstance(kind, str):
        raise EventDecodeError(
            f"type field must be a string, got {type(kind).__name__}"
        )

    model_cls = STREAM_EVENT_TYPE_MAP.get(kind)
    if model_cls is None:
        logger.debug("Skipping stream message of type %r", kind)
        return None

    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise EventDecodeError(f"Invalid {kind} message: {exc}") from exc


def iter_events(
    messages: Iterable[Mapping[str, Any] | str | bytes],
) -> Iterator[StreamEvent]:
    """Lazily decode *messages*, dropping the ones the engine ignores."""
    for raw in messages:
        event = decode_event(raw)
        if event is not None:
            yield event


class LedgerStreamProcessor:
    """Feeds typed stream events into a single ``LedgerAccumulator``.

    Parameters
    ----------
    accumulator:
        The accumulator to drive.  A fresh one is created if not provided.
    """

    def __init__(self, accumulator: LedgerAccumulator | None = None) -> None:
        self.accumulator = accumulator or LedgerAccumulator()
        self.transactions_seen = 0
        self.ledgers_closed = 0

    def process(self, event: StreamEvent) -> ClosedLedger | None:
        """Apply one event; return the published snapshot on a ledger close."""
        if isinstance(event, TransactionEvent):
            self.accumulator.on_transaction_event(event)
            self.transactions_seen += 1
            return None
        if isinstance(event, LedgerClosedEvent):
            self.ledgers_closed += 1
            return self.accumulator.on_ledger_closed(event.ledger_index)
        raise TypeError(f"Unsupported stream event: {type(event).__name__}")

    def run(self, events: Iterable[StreamEvent]) -> Iterator[ClosedLedger]:
        """Consume *events* and yield a snapshot for every ledger close.

        *events* may be unbounded; it is read lazily and only once.
        """
        for event in events:
            closed = self.process(event)
            if closed is not None:
                yield closed
