"""Ledger SLO — Service Level Objective compliance from ledger events.

ledger-slo turns the operational history kept in an event ledger (app
launches, crashes, installs, syncs) into SLO compliance figures:

Core concepts
-------------
* **SLO (Service Level Objective)** — a success-rate target over a
  rolling window (24h, 7d, 30d or 90d).  The built-in catalog covers
  crash-free sessions, verified install success and sync success.

* **Error Budget** — the tolerable shortfall below 100%
  (``100 − target``).  A measurement reports how much of it is left and
  flags the SLO once less than 10% remains.

* **Ledger** — the external event store.  The measurer only reads from
  it through :class:`ledger_slo.ledger.Ledger`; failures propagate to
  the caller untouched.

Quick start::

    from ledger_slo import InMemoryLedger, SLOMeasurer

    measurer = SLOMeasurer(InMemoryLedger(events))
    report = measurer.generate_report()
    for label, m in report.needs_attention.items():
        print(label, m.success_rate)
"""

from ledger_slo.ledger import InMemoryLedger, Ledger, LedgerError, LedgerEvent
from ledger_slo.slo.measurement import SLOMeasurement, SLOReport
from ledger_slo.slo.measurer import SLOMeasurer
from ledger_slo.slo.objectives import SLO, MeasurementWindow

__all__ = [
    "InMemoryLedger",
    "Ledger",
    "LedgerError",
    "LedgerEvent",
    "MeasurementWindow",
    "SLO",
    "SLOMeasurement",
    "SLOMeasurer",
    "SLOReport",
]

__version__ = "0.1.0"
