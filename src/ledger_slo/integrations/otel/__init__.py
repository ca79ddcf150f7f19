"""OpenTelemetry integration: SLO measurements as native OTEL metrics.

Usage:
    from ledger_slo.integrations.otel import MetricsExporter

    metrics = MetricsExporter(service_name="skills-app")
    metrics.record_report(report)
"""

from ledger_slo.integrations.otel.metrics import MetricsExporter

__all__ = ["MetricsExporter"]
