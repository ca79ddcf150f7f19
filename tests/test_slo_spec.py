"""Tests for SLO-as-code: spec loading, validation and conversion."""

from __future__ import annotations

import math
import tempfile
from pathlib import Path

import pytest
import yaml

from ledger_slo.slo.objectives import MeasurementWindow
from ledger_slo.slo.spec import SLOSpec, load_slo_specs
from ledger_slo.slo.validator import validate_spec

# ---- Fixtures ----


@pytest.fixture()
def base_spec() -> SLOSpec:
    return SLOSpec(
        name="sync-base",
        description="Sync operations completed without errors",
        target=98.0,
        window="7d",
        labels={"tier": "standard"},
    )


@pytest.fixture()
def child_spec() -> SLOSpec:
    return SLOSpec(
        name="sync-strict",
        target=99.5,
        window="7d",
        labels={"tier": "critical"},
    )


# ---- YAML roundtrip ----


class TestYAMLRoundtrip:
    def test_save_and_load(self, base_spec: SLOSpec) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "sync.yaml"
            base_spec.to_yaml(path)
            loaded = SLOSpec.from_yaml(path)
            assert loaded == base_spec

    def test_load_directory(self, base_spec: SLOSpec, child_spec: SLOSpec) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            base_spec.to_yaml(Path(tmpdir) / "a.yaml")
            child_spec.to_yaml(Path(tmpdir) / "b.yml")
            specs = load_slo_specs(tmpdir)
            assert [s.name for s in specs] == ["sync-base", "sync-strict"]

    def test_yml_shadowed_by_yaml(self, base_spec: SLOSpec) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            base_spec.to_yaml(Path(tmpdir) / "sync.yaml")
            base_spec.to_yaml(Path(tmpdir) / "sync.yml")
            assert len(load_slo_specs(tmpdir)) == 1

    def test_duplicate_names_rejected(self, base_spec: SLOSpec) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            base_spec.to_yaml(Path(tmpdir) / "a.yaml")
            base_spec.to_yaml(Path(tmpdir) / "b.yaml")
            with pytest.raises(ValueError, match="Duplicate SLO name 'sync-base'"):
                load_slo_specs(tmpdir)

    def test_hand_written_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "installs.yaml"
            path.write_text(
                yaml.safe_dump({
                    "name": "installs-quarterly",
                    "target": 97.5,
                    "window": "90d",
                }),
                encoding="utf-8",
            )
            slo = SLOSpec.from_yaml(path).to_slo()
            assert slo.target == 97.5
            assert slo.window is MeasurementWindow.QUARTER
            assert slo.description == "installs-quarterly"


# ---- Conversion ----


class TestToSLO:
    def test_to_slo(self, base_spec: SLOSpec) -> None:
        slo = base_spec.to_slo()
        assert slo.target == 98.0
        assert slo.window is MeasurementWindow.ROLLING_7D
        assert slo.description == base_spec.description
        assert slo.error_budget_percent == pytest.approx(2.0)

    def test_invalid_target_raises(self) -> None:
        spec = SLOSpec(name="bad", target=120.0)
        with pytest.raises(ValueError, match="target"):
            spec.to_slo()

    def test_nan_target_raises(self) -> None:
        spec = SLOSpec(name="bad", target=math.nan)
        with pytest.raises(ValueError, match="Invalid SLO spec 'bad': target"):
            spec.to_slo()

    def test_invalid_window_raises(self) -> None:
        spec = SLOSpec(name="bad", window="14d")
        with pytest.raises(ValueError, match="window"):
            spec.to_slo()

    def test_warning_does_not_block(self) -> None:
        slo = SLOSpec(name="five-nines-plus", target=99.9999).to_slo()
        assert slo.target == 99.9999


# ---- Validation ----


class TestValidation:
    def test_valid_spec(self, base_spec: SLOSpec) -> None:
        assert validate_spec(base_spec) == []

    def test_target_out_of_range(self) -> None:
        errors = validate_spec(SLOSpec(name="x", target=-1.0))
        assert [e.field for e in errors] == ["target"]
        assert errors[0].severity == "error"

    def test_nan_target(self) -> None:
        errors = validate_spec(SLOSpec(name="x", target=math.nan))
        assert [e.field for e in errors] == ["target"]
        assert errors[0].severity == "error"

    def test_unknown_window(self) -> None:
        errors = validate_spec(SLOSpec(name="x", window="1h"))
        assert errors[0].field == "window"
        assert "24h" in errors[0].message

    def test_empty_name(self) -> None:
        errors = validate_spec(SLOSpec(name="  "))
        assert errors[0].field == "name"

    def test_strict_target_warning(self) -> None:
        errors = validate_spec(SLOSpec(name="x", target=100.0))
        assert len(errors) == 1
        assert errors[0].severity == "warning"
