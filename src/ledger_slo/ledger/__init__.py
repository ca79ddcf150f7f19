"""Ledger: the event source SLO measurements are computed from."""

from ledger_slo.ledger.base import (
    UNBOUNDED_LIMIT,
    Ledger,
    LedgerCorruptError,
    LedgerError,
    LedgerUnavailableError,
)
from ledger_slo.ledger.events import (
    LedgerEvent,
    LedgerEventStatus,
    LedgerEventType,
    VerificationMode,
)
from ledger_slo.ledger.memory import InMemoryLedger

__all__ = [
    "UNBOUNDED_LIMIT",
    "InMemoryLedger",
    "Ledger",
    "LedgerCorruptError",
    "LedgerError",
    "LedgerEvent",
    "LedgerEventStatus",
    "LedgerEventType",
    "LedgerUnavailableError",
    "VerificationMode",
]
