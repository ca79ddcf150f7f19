"""Measurement results and the composite SLO report."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ledger_slo.slo.objectives import SLO

# Alert once less than this fraction of the error budget is left.
ALERT_BUDGET_FRACTION = 0.1

CRASH_FREE_SESSIONS_LABEL = "Crash-Free Sessions"
VERIFIED_INSTALLS_LABEL = "Verified Installs"
SYNC_SUCCESS_LABEL = "Sync Success"


def success_rate(success_count: int, total_count: int) -> float:
    """Success percentage; an empty window counts as fully successful."""
    if total_count <= 0:
        return 100.0
    return success_count / total_count * 100.0


def remaining_budget(error_budget: float, rate: float) -> float:
    """Budget left after the observed shortfall, clamped to [0, error_budget]."""
    remaining = error_budget - (100.0 - rate)
    return max(0.0, min(error_budget, remaining))


@dataclass(frozen=True)
class SLOMeasurement:
    """Result of measuring one SLO against ledger data."""

    slo: SLO
    success_rate: float
    success_count: int
    total_count: int
    error_budget: float
    error_budget_remaining: float

    def __post_init__(self) -> None:
        if self.total_count < 0 or self.success_count < 0:
            raise ValueError(
                f"Counts must be non-negative, got {self.success_count}/{self.total_count}"
            )
        if self.success_count > self.total_count:
            raise ValueError(
                f"success_count ({self.success_count}) exceeds total_count ({self.total_count})"
            )
        if not 0.0 <= self.success_rate <= 100.0:
            raise ValueError(f"success_rate must be between 0 and 100, got {self.success_rate}")
        if not math.isclose(self.error_budget, self.slo.error_budget_percent, abs_tol=1e-9):
            raise ValueError(
                f"error_budget ({self.error_budget}) does not match the SLO's "
                f"error_budget_percent ({self.slo.error_budget_percent})"
            )
        if not 0.0 <= self.error_budget_remaining <= self.error_budget:
            raise ValueError(
                f"error_budget_remaining must be between 0 and {self.error_budget}, "
                f"got {self.error_budget_remaining}"
            )

    @classmethod
    def from_counts(cls, slo: SLO, success_count: int, total_count: int) -> SLOMeasurement:
        """Derive rate and budget figures from raw counts."""
        rate = success_rate(success_count, total_count)
        budget = slo.error_budget_percent
        return cls(
            slo=slo,
            success_rate=rate,
            success_count=success_count,
            total_count=total_count,
            error_budget=budget,
            error_budget_remaining=remaining_budget(budget, rate),
        )

    @property
    def is_compliant(self) -> bool:
        return self.success_rate >= self.slo.target

    @property
    def error_budget_consumed(self) -> float:
        return self.error_budget - self.error_budget_remaining

    @property
    def should_alert(self) -> bool:
        return self.error_budget_remaining < self.error_budget * ALERT_BUDGET_FRACTION

    @property
    def needs_attention(self) -> bool:
        return not self.is_compliant or self.should_alert

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "slo": self.slo.to_dict(),
            "success_rate": self.success_rate,
            "success_count": self.success_count,
            "total_count": self.total_count,
            "error_budget": self.error_budget,
            "error_budget_remaining": self.error_budget_remaining,
            "error_budget_consumed": self.error_budget_consumed,
            "is_compliant": self.is_compliant,
            "should_alert": self.should_alert,
        }

    def __repr__(self) -> str:
        return (
            f"SLOMeasurement(target={self.slo.target}, window={self.slo.window.value}, "
            f"rate={self.success_rate:.2f}%, budget_left={self.error_budget_remaining:.2f}%)"
        )


@dataclass(frozen=True)
class SLOReport:
    """Snapshot of the three built-in SLOs."""

    generated_at: float
    crash_free_sessions: SLOMeasurement
    verified_install_success: SLOMeasurement
    sync_success: SLOMeasurement

    def measurements(self) -> dict[str, SLOMeasurement]:
        """All measurements keyed by their display label."""
        return {
            CRASH_FREE_SESSIONS_LABEL: self.crash_free_sessions,
            VERIFIED_INSTALLS_LABEL: self.verified_install_success,
            SYNC_SUCCESS_LABEL: self.sync_success,
        }

    @property
    def is_compliant(self) -> bool:
        """True only if every SLO is met."""
        return all(m.is_compliant for m in self.measurements().values())

    @property
    def needs_attention(self) -> dict[str, SLOMeasurement]:
        """SLOs that are not compliant or are low on error budget."""
        return {
            label: m for label, m in self.measurements().items() if m.needs_attention
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "crash_free_sessions": self.crash_free_sessions.to_dict(),
            "verified_install_success": self.verified_install_success.to_dict(),
            "sync_success": self.sync_success.to_dict(),
            "is_compliant": self.is_compliant,
            "needs_attention": {
                label: m.to_dict() for label, m in self.needs_attention.items()
            },
        }
