"""Ledger event records consumed by the SLO measurer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LedgerEventType(Enum):
    """Kinds of operations recorded in the ledger."""

    INSTALL = "install"
    UPDATE = "update"
    REMOVE = "remove"
    VERIFY = "verify"
    SYNC = "sync"
    APP_LAUNCH = "appLaunch"
    CRASH = "crash"
    DIAGNOSTIC_BUNDLE = "diagnosticBundle"
    ANALYTICS_QUERY = "analyticsQuery"
    SECURITY_SCAN = "securityScan"


class LedgerEventStatus(Enum):
    """Outcome of a recorded operation."""

    SUCCESS = "success"
    FAILURE = "failure"


class VerificationMode(Enum):
    """Signature verification applied to an install."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True)
class LedgerEvent:
    """A single read-only ledger entry.

    Only ``event_type``, ``status`` and ``verification`` are inspected by
    the measurer. ``timestamp`` (epoch seconds) is used by ledgers for
    window filtering.
    """

    id: int
    timestamp: float
    event_type: LedgerEventType
    skill_name: str
    status: LedgerEventStatus
    verification: VerificationMode | None = None
    skill_slug: str | None = None
    version: str | None = None
    agent: str | None = None
    note: str | None = None
    source: str | None = None
    manifest_sha256: str | None = None
    signer_key_id: str | None = None

    @property
    def is_verified(self) -> bool:
        """True if a verification marker is present."""
        return self.verification is not None

    @property
    def succeeded(self) -> bool:
        return self.status is LedgerEventStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting unset optional fields."""
        data: dict[str, Any] = {
            "id": self.id,
            "timestamp": self.timestamp,
            "event_type": self.event_type.value,
            "skill_name": self.skill_name,
            "status": self.status.value,
        }
        if self.verification is not None:
            data["verification"] = self.verification.value
        for key in (
            "skill_slug",
            "version",
            "agent",
            "note",
            "source",
            "manifest_sha256",
            "signer_key_id",
        ):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LedgerEvent:
        """Build an event from its dictionary form."""
        verification = data.get("verification")
        return cls(
            id=int(data["id"]),
            timestamp=float(data["timestamp"]),
            event_type=LedgerEventType(data["event_type"]),
            skill_name=data.get("skill_name", ""),
            status=LedgerEventStatus(data["status"]),
            verification=VerificationMode(verification) if verification is not None else None,
            skill_slug=data.get("skill_slug"),
            version=data.get("version"),
            agent=data.get("agent"),
            note=data.get("note"),
            source=data.get("source"),
            manifest_sha256=data.get("manifest_sha256"),
            signer_key_id=data.get("signer_key_id"),
        )
