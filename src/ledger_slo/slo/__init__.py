"""SLO engine: objectives, measurements and the ledger-backed measurer."""

from ledger_slo.slo.measurement import SLOMeasurement, SLOReport
from ledger_slo.slo.measurer import SLOMeasurer
from ledger_slo.slo.objectives import (
    CRASH_FREE_SESSIONS,
    DEFAULT_OBJECTIVES,
    SLO,
    SYNC_SUCCESS,
    VERIFIED_INSTALL_SUCCESS,
    MeasurementWindow,
)
from ledger_slo.slo.spec import SLOSpec, load_slo_specs
from ledger_slo.slo.validator import validate_spec

__all__ = [
    "CRASH_FREE_SESSIONS",
    "DEFAULT_OBJECTIVES",
    "SYNC_SUCCESS",
    "VERIFIED_INSTALL_SUCCESS",
    "MeasurementWindow",
    "SLO",
    "SLOMeasurement",
    "SLOMeasurer",
    "SLOReport",
    "SLOSpec",
    "load_slo_specs",
    "validate_spec",
]
