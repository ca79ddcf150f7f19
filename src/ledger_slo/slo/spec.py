"""SLO-as-code: version-controlled objective definitions in YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from ledger_slo.slo.objectives import SLO


class SLOSpec(BaseModel):
    """Declarative definition of an ad hoc SLO.

    Can be serialized to/from YAML and converted into an :class:`SLO`.
    """

    name: str = Field(..., description="Unique SLO name")
    description: str = Field(default="", description="Human-readable description")
    target: float = Field(default=99.0, description="Target percentage (0-100)")
    window: str = Field(default="30d", description="Measurement window: 24h, 7d, 30d or 90d")
    labels: dict[str, str] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SLOSpec:
        """Load an SLO spec from a YAML file."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    def to_yaml(self, path: str | Path) -> None:
        """Save this SLO spec to a YAML file."""
        path = Path(path)
        data = self.model_dump(mode="json", exclude_none=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def to_slo(self) -> SLO:
        """Build the SLO this spec describes.

        Raises:
            ValueError: This SLOSpec fails validation.
        """
        from ledger_slo.slo.validator import validate_spec

        errors = [e for e in validate_spec(self) if e.severity == "error"]
        if errors:
            details = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ValueError(f"Invalid SLO spec '{self.name}': {details}")
        return SLO(
            target=self.target,
            window=self.window,
            description=self.description or self.name,
        )


def load_slo_specs(directory: str | Path) -> list[SLOSpec]:
    """Load every ``*.yaml`` and ``*.yml`` spec in a directory, ordered by file stem.

    A ``.yaml`` file wins over a ``.yml`` file with the same stem.

    Raises:
        ValueError: Two files declare the same SLO name.
    """
    directory = Path(directory)
    by_stem: dict[str, Path] = {}
    for suffix in ("yml", "yaml"):
        for path in directory.glob(f"*.{suffix}"):
            by_stem[path.stem] = path

    specs: list[SLOSpec] = []
    seen: dict[str, Path] = {}
    for stem in sorted(by_stem):
        spec = SLOSpec.from_yaml(by_stem[stem])
        if spec.name in seen:
            raise ValueError(
                f"Duplicate SLO name '{spec.name}' in {seen[spec.name].name} "
                f"and {by_stem[stem].name}"
            )
        seen[spec.name] = by_stem[stem]
        specs.append(spec)
    return specs
