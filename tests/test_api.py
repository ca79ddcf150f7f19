"""Tests for the pydantic interchange models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ledger_slo.api.models import SLOMeasurementModel, SLOModel, SLOReportModel
from ledger_slo.ledger import (
    InMemoryLedger,
    LedgerEvent,
    LedgerEventStatus,
    LedgerEventType,
)
from ledger_slo.slo.measurement import SLOMeasurement
from ledger_slo.slo.measurer import SLOMeasurer
from ledger_slo.slo.objectives import SYNC_SUCCESS, MeasurementWindow

NOW = 1_800_000_000.0


@pytest.fixture()
def report():
    events = [
        LedgerEvent(
            id=i,
            timestamp=NOW - 3600,
            event_type=LedgerEventType.SYNC,
            skill_name="demo",
            status=LedgerEventStatus.SUCCESS if i % 10 else LedgerEventStatus.FAILURE,
        )
        for i in range(1, 21)
    ]
    return SLOMeasurer(InMemoryLedger(events), clock=lambda: NOW).generate_report()


class TestSLOModel:
    def test_from_slo(self) -> None:
        model = SLOModel.from_slo(SYNC_SUCCESS)
        assert model.target == 98.0
        assert model.window == "7d"
        assert model.error_budget_percent == pytest.approx(2.0)

    def test_to_slo(self) -> None:
        slo = SLOModel.from_slo(SYNC_SUCCESS).to_slo()
        assert slo == SYNC_SUCCESS
        assert slo.window is MeasurementWindow.ROLLING_7D

    def test_rejects_target_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            SLOModel(target=101.0, window="7d", error_budget_percent=-1.0)


class TestSLOMeasurementModel:
    def test_fields_match_measurement(self) -> None:
        measurement = SLOMeasurement.from_counts(SYNC_SUCCESS, 18, 20)
        model = SLOMeasurementModel.from_measurement(measurement)
        assert model.success_count == 18
        assert model.total_count == 20
        assert model.success_rate == pytest.approx(90.0)
        assert model.is_compliant is False
        assert model.should_alert is True
        assert model.error_budget_remaining == 0.0
        assert model.model_dump() == measurement.to_dict()


class TestSLOReportModel:
    def test_from_report(self, report) -> None:
        model = SLOReportModel.from_report(report)
        assert model.generated_at == NOW
        assert model.is_compliant is False
        assert list(model.needs_attention) == ["Sync Success"]
        assert model.needs_attention["Sync Success"] == model.sync_success
        assert model.sync_success.total_count == 20
        assert model.sync_success.success_count == 18

    def test_json_roundtrip(self, report) -> None:
        model = SLOReportModel.from_report(report)
        payload = json.loads(model.model_dump_json())
        assert payload["crash_free_sessions"]["slo"]["window"] == "30d"
        assert SLOReportModel.model_validate(payload) == model

    def test_matches_to_dict(self, report) -> None:
        assert SLOReportModel.from_report(report).model_dump() == report.to_dict()
