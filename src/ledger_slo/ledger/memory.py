"""In-memory ledger for embedding and tests."""

from __future__ import annotations

import threading
from collections.abc import Collection, Iterable

from ledger_slo.ledger.base import Ledger
from ledger_slo.ledger.events import LedgerEvent, LedgerEventType


class InMemoryLedger(Ledger):
    """Thread-safe ledger backed by a list of events."""

    def __init__(self, events: Iterable[LedgerEvent] | None = None) -> None:
        self._lock = threading.Lock()
        self._events: list[LedgerEvent] = list(events or [])

    def record(self, event: LedgerEvent) -> None:
        """Append a single event."""
        with self._lock:
            self._events.append(event)

    def extend(self, events: Iterable[LedgerEvent]) -> None:
        """Append several events."""
        with self._lock:
            self._events.extend(events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def fetch_events(
        self,
        limit: int,
        since: float,
        event_types: Collection[LedgerEventType] | None = None,
    ) -> list[LedgerEvent]:
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")

        types = frozenset(event_types) if event_types is not None else None
        with self._lock:
            snapshot = list(self._events)

        matched = [
            e for e in snapshot
            if e.timestamp >= since and (types is None or e.event_type in types)
        ]
        matched.sort(key=lambda e: e.timestamp)
        return matched[:limit]
