from __future__ import annotations

from dataclasses import dataclass
from math import isfinite

from src.bezier_curve.constants import default_constants


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class SubdivisionSettings:
    tolerance_rad: float
    max_depth: int
    max_seam_splits: int

    def __post_init__(self) -> None:
        if not isfinite(self.tolerance_rad) or self.tolerance_rad <= 0:
            raise ValueError("tolerance_rad must be a positive finite angle.")
        if self.max_depth < 1 or self.max_seam_splits < 1:
            raise ValueError("Subdivision limits must be positive.")

    @classmethod
    def from_dict(cls, data: dict | None = None) -> "SubdivisionSettings":
        merged = _deep_merge(default_constants(), data or {})
        limits = merged["limits"]
        return cls(
            tolerance_rad=float(merged["tolerance_rad"]),
            max_depth=int(limits["max_depth"]),
            max_seam_splits=int(limits["max_seam_splits"]),
        )

    @classmethod
    def defaults(cls) -> "SubdivisionSettings":
        return cls.from_dict()

    def with_tolerance(self, tolerance_rad: float) -> "SubdivisionSettings":
        return SubdivisionSettings(
            tolerance_rad=float(tolerance_rad),
            max_depth=self.max_depth,
            max_seam_splits=self.max_seam_splits,
        )
