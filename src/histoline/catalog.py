"""Histogram catalog - declarative linear histogram definitions.

Pydantic models for describing the linear histograms a process registers,
loaded from YAML. Bucket layouts are validated at load time with the same
rules ``LinearBuckets`` enforces, so a broken definition fails before any
histogram is built.

Usage:
    catalog = HistogramCatalog.from_yaml("histograms.yaml")
    buckets = catalog.get("GC_MS").to_buckets()

YAML layout:
    histograms:
      - name: GC_MS
        min: 0
        max: 10000
        buckets: 50
      - name: PAGE_LOAD_MS
        min: 0
        max: 60000
        buckets: 100
        subset: all_keyed
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, field_validator, model_validator

from histoline.core.buckets import LinearBuckets
from histoline.core.config import HistolineSettings
from histoline.core.flatten import U32_MAX
from histoline.core.formats import Subset


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge override into base dict."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class HistogramDefinition(BaseModel):
    """One linear histogram: name, value range and bucket count."""

    name: str = Field(min_length=1)
    min: int = Field(ge=0, le=U32_MAX)
    max: int = Field(ge=0, le=U32_MAX)
    buckets: int = Field(gt=0)
    subset: Subset = Subset.ALL_PLAIN

    @model_validator(mode="after")
    def validate_layout(self) -> HistogramDefinition:
        # Raises BucketConfigurationError (a ValueError) on a bad layout
        self.to_buckets()
        return self

    def to_buckets(self) -> LinearBuckets:
        return LinearBuckets(self.min, self.max, self.buckets)


class HistogramCatalog(BaseModel):
    """Collection of histogram definitions with unique names."""

    histograms: list[HistogramDefinition] = Field(default_factory=list)

    @field_validator("histograms")
    @classmethod
    def validate_unique_names(cls, v: list[HistogramDefinition]) -> list[HistogramDefinition]:
        seen: set[str] = set()
        for definition in v:
            if definition.name in seen:
                raise ValueError(f"Duplicate histogram name: {definition.name}")
            seen.add(definition.name)
        return v

    def get(self, name: str) -> HistogramDefinition | None:
        for definition in self.histograms:
            if definition.name == name:
                return definition
        return None

    def names(self, subset: Subset | None = None) -> list[str]:
        return [d.name for d in self.histograms if subset is None or d.subset is subset]

    @classmethod
    def from_yaml(cls, path: Path | str, overrides: dict[str, Any] | None = None) -> HistogramCatalog:
        """Load a catalog from a YAML file.

        Args:
            path: Path to YAML catalog file.
            overrides: Optional dict of values to override.

        Returns:
            Validated HistogramCatalog instance.

        Raises:
            ValueError: If the YAML file is empty, malformed, not a mapping,
                or holds an invalid definition.
        """
        path = Path(path)
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Histogram catalog YAML is malformed: {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError(
                f"Histogram catalog YAML must be a mapping, got {type(data).__name__}: {path}"
            )

        if overrides:
            data = deep_merge(data, overrides)

        return cls(**data)

    @classmethod
    def from_settings(cls, settings: HistolineSettings | None = None) -> HistogramCatalog:
        """Load the catalog named by ``HISTOLINE_CATALOG_PATH``, or an empty one."""
        settings = settings or HistolineSettings()
        if settings.catalog_path is None:
            return cls()
        return cls.from_yaml(settings.catalog_path)


__all__ = ["deep_merge", "HistogramDefinition", "HistogramCatalog"]
