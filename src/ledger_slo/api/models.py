"""Pydantic interchange models for SLO measurements and reports."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ledger_slo.slo.measurement import SLOMeasurement, SLOReport
from ledger_slo.slo.objectives import SLO


class SLOModel(BaseModel):
    """Serialised objective definition."""

    target: float = Field(..., ge=0.0, le=100.0, description="Target percentage (0-100)")
    window: str
    description: str = ""
    error_budget_percent: float

    @classmethod
    def from_slo(cls, slo: SLO) -> SLOModel:
        return cls(
            target=slo.target,
            window=slo.window.value,
            description=slo.description,
            error_budget_percent=slo.error_budget_percent,
        )

    def to_slo(self) -> SLO:
        return SLO(target=self.target, window=self.window, description=self.description)


class SLOMeasurementModel(BaseModel):
    """Serialised measurement, derived fields included."""

    slo: SLOModel
    success_rate: float = Field(..., ge=0.0, le=100.0)
    success_count: int = Field(..., ge=0)
    total_count: int = Field(..., ge=0)
    error_budget: float
    error_budget_remaining: float
    error_budget_consumed: float
    is_compliant: bool
    should_alert: bool

    @classmethod
    def from_measurement(cls, measurement: SLOMeasurement) -> SLOMeasurementModel:
        return cls(
            slo=SLOModel.from_slo(measurement.slo),
            success_rate=measurement.success_rate,
            success_count=measurement.success_count,
            total_count=measurement.total_count,
            error_budget=measurement.error_budget,
            error_budget_remaining=measurement.error_budget_remaining,
            error_budget_consumed=measurement.error_budget_consumed,
            is_compliant=measurement.is_compliant,
            should_alert=measurement.should_alert,
        )


class SLOReportModel(BaseModel):
    """Serialised composite report."""

    generated_at: float
    crash_free_sessions: SLOMeasurementModel
    verified_install_success: SLOMeasurementModel
    sync_success: SLOMeasurementModel
    is_compliant: bool
    needs_attention: dict[str, SLOMeasurementModel] = Field(default_factory=dict)

    @classmethod
    def from_report(cls, report: SLOReport) -> SLOReportModel:
        return cls(
            generated_at=report.generated_at,
            crash_free_sessions=SLOMeasurementModel.from_measurement(report.crash_free_sessions),
            verified_install_success=SLOMeasurementModel.from_measurement(
                report.verified_install_success
            ),
            sync_success=SLOMeasurementModel.from_measurement(report.sync_success),
            is_compliant=report.is_compliant,
            needs_attention={
                label: SLOMeasurementModel.from_measurement(m)
                for label, m in report.needs_attention.items()
            },
        )
