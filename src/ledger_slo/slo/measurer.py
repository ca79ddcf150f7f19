"""SLO measurement engine.

Computes success rates and error budgets for SLOs from ledger events.
Each call queries the ledger afresh; nothing is cached between calls.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Collection
from concurrent.futures import Future, ThreadPoolExecutor

from ledger_slo.ledger.base import UNBOUNDED_LIMIT, Ledger
from ledger_slo.ledger.events import LedgerEvent, LedgerEventStatus, LedgerEventType
from ledger_slo.slo.measurement import SLOMeasurement, SLOReport
from ledger_slo.slo.objectives import (
    CRASH_FREE_SESSIONS,
    SECONDS_PER_DAY,
    SLO,
    SYNC_SUCCESS,
    VERIFIED_INSTALL_SUCCESS,
)

logger = logging.getLogger(__name__)


class SLOMeasurer:
    """Measures SLO compliance from ledger data.

    The measurer keeps no state between calls other than its ledger
    handle, so one instance may be shared across threads. Ledger errors
    are never caught here: they reach the caller unchanged.

    Args:
        ledger: Event source to query.
        clock: Returns the current time as epoch seconds.
        parallel: Run the three report measurements concurrently.
        max_workers: Thread pool size when ``parallel`` is set.
    """

    def __init__(
        self,
        ledger: Ledger,
        clock: Callable[[], float] = time.time,
        parallel: bool = True,
        max_workers: int = 3,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._ledger = ledger
        self._clock = clock
        self._parallel = parallel
        self._max_workers = max_workers

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def window_start(self, slo: SLO) -> float:
        """Epoch seconds at which the SLO's rolling window begins."""
        return self._clock() - slo.window.calendar_days * SECONDS_PER_DAY

    def _fetch(
        self,
        slo: SLO,
        event_types: Collection[LedgerEventType] | None = None,
    ) -> list[LedgerEvent]:
        since = self.window_start(slo)
        events = self._ledger.fetch_events(UNBOUNDED_LIMIT, since, event_types)
        logger.debug(
            "Fetched %d events since %.0f for '%s' (%s)",
            len(events), since, slo.description, slo.window.value,
        )
        return events

    def measure_crash_free_sessions(self, slo: SLO = CRASH_FREE_SESSIONS) -> SLOMeasurement:
        """Percentage of app launches that did not end in a crash.

        Launches and crashes are counted as independent streams over all
        events in the window; crashes are not paired with launches.
        """
        sessions = 0
        crashes = 0
        for event in self._fetch(slo):
            if event.event_type is LedgerEventType.APP_LAUNCH:
                sessions += 1
            elif event.event_type is LedgerEventType.CRASH:
                crashes += 1

        crash_free = max(0, sessions - crashes)
        measurement = SLOMeasurement.from_counts(slo, crash_free, sessions)
        logger.debug("Crash-free sessions: %d launches, %d crashes", sessions, crashes)
        return measurement

    def measure_verified_install_success(
        self, slo: SLO = VERIFIED_INSTALL_SUCCESS
    ) -> SLOMeasurement:
        """Percentage of installs that succeeded with signature verification."""
        installs = self._fetch(slo, [LedgerEventType.INSTALL])
        verified = sum(
            1 for e in installs
            if e.verification is not None and e.status is LedgerEventStatus.SUCCESS
        )
        return SLOMeasurement.from_counts(slo, verified, len(installs))

    def measure_sync_success(self, slo: SLO = SYNC_SUCCESS) -> SLOMeasurement:
        """Percentage of sync operations that completed without errors."""
        syncs = self._fetch(slo, [LedgerEventType.SYNC])
        succeeded = sum(1 for e in syncs if e.status is LedgerEventStatus.SUCCESS)
        return SLOMeasurement.from_counts(slo, succeeded, len(syncs))

    def generate_report(self) -> SLOReport:
        """Measure the three built-in SLOs and assemble a report.

        Either every measurement succeeds or the first failure is raised;
        a partial report is never returned.
        """
        tasks: dict[str, Callable[[], SLOMeasurement]] = {
            "crash_free_sessions": self.measure_crash_free_sessions,
            "verified_install_success": self.measure_verified_install_success,
            "sync_success": self.measure_sync_success,
        }

        if self._parallel:
            results = self._run_parallel(tasks)
        else:
            results = {name: task() for name, task in tasks.items()}

        report = SLOReport(generated_at=self._clock(), **results)

        attention = report.needs_attention
        logger.info(
            "SLO report generated: compliant=%s, needs_attention=%d",
            report.is_compliant, len(attention),
        )
        for label, m in attention.items():
            logger.warning(
                "SLO '%s' needs attention: rate=%.2f%% target=%.2f%% budget_left=%.2f%%",
                label, m.success_rate, m.slo.target, m.error_budget_remaining,
            )
        return report

    def _run_parallel(
        self, tasks: dict[str, Callable[[], SLOMeasurement]]
    ) -> dict[str, SLOMeasurement]:
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="slo-measure"
        ) as pool:
            futures: dict[str, Future[SLOMeasurement]] = {
                name: pool.submit(task) for name, task in tasks.items()
            }
            try:
                return {name: future.result() for name, future in futures.items()}
            except BaseException:
                for future in futures.values():
                    future.cancel()
                raise
