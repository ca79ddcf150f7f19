"""Ledger collaborator interface and its failure types."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Collection

from ledger_slo.ledger.events import LedgerEvent, LedgerEventType

# Measurements need the whole windowed population, never a page.
UNBOUNDED_LIMIT = sys.maxsize


class LedgerError(Exception):
    """Raised when the ledger cannot answer a query."""


class LedgerUnavailableError(LedgerError):
    """The backing store could not be reached."""


class LedgerCorruptError(LedgerError):
    """The backing store returned unreadable data."""


class Ledger(ABC):
    """Read access to the append-only event ledger.

    Implementations must be safe to call from several threads at once:
    report generation issues its three queries in parallel.
    """

    @abstractmethod
    def fetch_events(
        self,
        limit: int,
        since: float,
        event_types: Collection[LedgerEventType] | None = None,
    ) -> list[LedgerEvent]:
        """Return events with ``timestamp >= since``, oldest first.

        Args:
            limit: Maximum number of events to return.
            since: Window start as epoch seconds (inclusive).
            event_types: Restrict results to these types when given.

        Raises:
            LedgerError: The store is unreachable or corrupt. An empty
                list always means "no events", never a failure.
        """
