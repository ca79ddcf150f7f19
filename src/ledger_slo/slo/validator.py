"""SLO spec validation."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from ledger_slo.slo.objectives import MeasurementWindow
from ledger_slo.slo.spec import SLOSpec

# Targets this strict leave under a thousandth of a percent of budget.
_STRICT_TARGET = 99.999


class ValidationError(BaseModel):
    """A single validation error on an SLO spec."""

    field: str
    message: str
    severity: str = Field(default="error")  # error, warning


def validate_spec(spec: SLOSpec) -> list[ValidationError]:
    """Validate an SLO spec and return any errors found.

    Checks:
        - Name is non-empty
        - Target is between 0-100%
        - Window is one of the supported measurement windows
    """
    errors: list[ValidationError] = []

    if not spec.name.strip():
        errors.append(ValidationError(field="name", message="SLO name must be non-empty."))

    if math.isnan(spec.target) or spec.target < 0 or spec.target > 100:
        errors.append(ValidationError(
            field="target",
            message=f"Target must be between 0 and 100, got {spec.target}",
        ))
    elif spec.target > _STRICT_TARGET:
        errors.append(ValidationError(
            field="target",
            message=f"Target {spec.target} leaves almost no error budget.",
            severity="warning",
        ))

    valid_windows = [w.value for w in MeasurementWindow]
    if spec.window not in valid_windows:
        errors.append(ValidationError(
            field="window",
            message=(
                f"Invalid window: '{spec.window}'. "
                f"Use one of: {', '.join(valid_windows)}."
            ),
        ))

    return errors
