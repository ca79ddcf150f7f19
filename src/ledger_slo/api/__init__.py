"""Structured interchange models for display and alerting consumers."""

from ledger_slo.api.models import SLOMeasurementModel, SLOModel, SLOReportModel

__all__ = ["SLOMeasurementModel", "SLOModel", "SLOReportModel"]
