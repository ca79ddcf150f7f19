"""SLO definitions and the built-in objective catalog."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

SECONDS_PER_DAY = 24 * 60 * 60


class MeasurementWindow(Enum):
    """Rolling windows an SLO can be measured over."""

    ROLLING_24H = "24h"
    ROLLING_7D = "7d"
    ROLLING_30D = "30d"
    QUARTER = "90d"

    @property
    def calendar_days(self) -> int:
        _map = {"24h": 1, "7d": 7, "30d": 30, "90d": 90}
        return _map[self.value]

    @property
    def seconds(self) -> int:
        return self.calendar_days * SECONDS_PER_DAY


@dataclass(frozen=True)
class SLO:
    """A success-rate objective over a rolling window.

    ``target`` is a percentage (e.g. 99.5 means 99.5%). The error budget
    is whatever the target leaves over: ``100 - target``.
    """

    target: float
    window: MeasurementWindow
    description: str

    def __post_init__(self) -> None:
        if isinstance(self.target, bool) or not isinstance(self.target, (int, float)):
            raise ValueError(f"SLO target must be a number, got {self.target!r}")
        if math.isnan(self.target) or not 0.0 <= self.target <= 100.0:
            raise ValueError(f"SLO target must be between 0 and 100, got {self.target}")
        if isinstance(self.window, str):
            try:
                object.__setattr__(self, "window", MeasurementWindow(self.window))
            except ValueError:
                valid = ", ".join(w.value for w in MeasurementWindow)
                raise ValueError(
                    f"Unknown measurement window '{self.window}'. Use one of: {valid}."
                ) from None
        elif not isinstance(self.window, MeasurementWindow):
            raise ValueError(f"Unknown measurement window {self.window!r}")
        object.__setattr__(self, "target", float(self.target))

    @property
    def error_budget_percent(self) -> float:
        """Allowed shortfall below 100%, as a percentage."""
        return 100.0 - self.target

    @property
    def window_seconds(self) -> int:
        return self.window.seconds

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "target": self.target,
            "window": self.window.value,
            "description": self.description,
            "error_budget_percent": self.error_budget_percent,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SLO:
        return cls(
            target=data["target"],
            window=data["window"],
            description=data.get("description", ""),
        )


CRASH_FREE_SESSIONS = SLO(
    target=99.5,
    window=MeasurementWindow.ROLLING_30D,
    description="Crash-free sessions (app launches without crashes)",
)

VERIFIED_INSTALL_SUCCESS = SLO(
    target=95.0,
    window=MeasurementWindow.ROLLING_30D,
    description="Verified install success (skills installed with signature verification)",
)

SYNC_SUCCESS = SLO(
    target=98.0,
    window=MeasurementWindow.ROLLING_7D,
    description="Sync operations completed without errors",
)

DEFAULT_OBJECTIVES: MappingProxyType[str, SLO] = MappingProxyType({
    "crash_free_sessions": CRASH_FREE_SESSIONS,
    "verified_install_success": VERIFIED_INSTALL_SUCCESS,
    "sync_success": SYNC_SUCCESS,
})
