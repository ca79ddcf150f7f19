"""OpenTelemetry metrics exporter for SLO measurements.

Publishes success rates, error budget gauges and compliance flags as
native OTEL metrics that any OTLP-compatible backend can ingest.

Usage:
    from ledger_slo.integrations.otel import MetricsExporter

    exporter = MetricsExporter()
    exporter.record_report(measurer.generate_report())
"""

from __future__ import annotations

import logging
from typing import Any

from opentelemetry import metrics
from opentelemetry.metrics import Meter

from ledger_slo import __version__
from ledger_slo.integrations.otel.conventions import (
    METRIC_COMPLIANT,
    METRIC_ERROR_BUDGET_CONSUMED,
    METRIC_ERROR_BUDGET_REMAINING,
    METRIC_EVENT_COUNT,
    METRIC_REPORT_COMPLIANT,
    METRIC_REPORT_NEEDS_ATTENTION,
    METRIC_SHOULD_ALERT,
    METRIC_SUCCESS_RATE,
    SLO_DESCRIPTION,
    SLO_LABEL,
    SLO_TARGET,
    SLO_WINDOW,
)
from ledger_slo.slo.measurement import SLOMeasurement, SLOReport

logger = logging.getLogger(__name__)


class MetricsExporter:
    """Exports SLO measurements via the OpenTelemetry Metrics API.

    Metrics go through whatever MeterProvider is configured (OTLP,
    Prometheus, console, etc.).
    """

    def __init__(
        self,
        service_name: str = "ledger-slo",
        meter_provider: metrics.MeterProvider | None = None,
    ) -> None:
        self._service_name = service_name
        if meter_provider:
            self._meter: Meter = meter_provider.get_meter("ledger_slo", version=__version__)
        else:
            self._meter = metrics.get_meter("ledger_slo", version=__version__)

        self._success_rate = self._meter.create_gauge(
            METRIC_SUCCESS_RATE,
            unit="%",
            description="Observed success rate within the SLO window",
        )
        self._event_count = self._meter.create_gauge(
            METRIC_EVENT_COUNT,
            unit="1",
            description="Events counted toward the success rate",
        )
        self._budget_remaining = self._meter.create_gauge(
            METRIC_ERROR_BUDGET_REMAINING,
            unit="%",
            description="Error budget remaining (percentage points)",
        )
        self._budget_consumed = self._meter.create_gauge(
            METRIC_ERROR_BUDGET_CONSUMED,
            unit="%",
            description="Error budget consumed (percentage points)",
        )
        self._compliant = self._meter.create_gauge(
            METRIC_COMPLIANT,
            unit="1",
            description="1 if the success rate meets the target, else 0",
        )
        self._should_alert = self._meter.create_gauge(
            METRIC_SHOULD_ALERT,
            unit="1",
            description="1 if less than 10% of the error budget remains, else 0",
        )
        self._report_compliant = self._meter.create_gauge(
            METRIC_REPORT_COMPLIANT,
            unit="1",
            description="1 if every SLO in the report is met, else 0",
        )
        self._report_attention = self._meter.create_gauge(
            METRIC_REPORT_NEEDS_ATTENTION,
            unit="1",
            description="Number of SLOs in the report needing attention",
        )

    def record_measurement(
        self,
        measurement: SLOMeasurement,
        label: str = "",
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record a single measurement as OTEL gauges.

        Args:
            measurement: Measurement to export.
            label: Display label of the SLO, if it has one.
            labels: Additional attributes.
        """
        slo = measurement.slo
        attrs: dict[str, Any] = {
            SLO_DESCRIPTION: slo.description,
            SLO_TARGET: slo.target,
            SLO_WINDOW: slo.window.value,
            **(labels or {}),
        }
        if label:
            attrs[SLO_LABEL] = label

        self._success_rate.set(measurement.success_rate, attrs)
        self._event_count.set(measurement.total_count, attrs)
        self._budget_remaining.set(measurement.error_budget_remaining, attrs)
        self._budget_consumed.set(measurement.error_budget_consumed, attrs)
        self._compliant.set(int(measurement.is_compliant), attrs)
        self._should_alert.set(int(measurement.should_alert), attrs)

    def record_report(self, report: SLOReport, labels: dict[str, str] | None = None) -> None:
        """Record every measurement in a report plus report-level gauges."""
        for label, measurement in report.measurements().items():
            self.record_measurement(measurement, label=label, labels=labels)

        attrs: dict[str, Any] = dict(labels or {})
        self._report_compliant.set(int(report.is_compliant), attrs)
        self._report_attention.set(len(report.needs_attention), attrs)
        logger.debug(
            "Exported SLO report for %s (compliant=%s)",
            self._service_name, report.is_compliant,
        )
