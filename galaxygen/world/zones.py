"""Orbital zone classification and boundaries."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict


class ZoneType(IntEnum):
    """Orbital zone classification, ordered by increasing distance."""

    EPISTELLAR = 0
    INNER = 1
    HABITABLE = 2
    OUTER = 3
    FAR_OUTER = 4
    BEYOND = 5

    @property
    def label(self) -> str:
        return _ZONE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "ZoneType":
        for zone, text in _ZONE_LABELS.items():
            if text == label:
                return zone
        return cls[label]


_ZONE_LABELS = {
    ZoneType.EPISTELLAR: "Epistellar",
    ZoneType.INNER: "Inner",
    ZoneType.HABITABLE: "Habitable",
    ZoneType.OUTER: "Outer",
    ZoneType.FAR_OUTER: "FarOuter",
    ZoneType.BEYOND: "Beyond",
}


@dataclass
class OrbitalZones:
    """Zone boundaries in AU.

    A habitable bound of ``UNAVAILABLE`` means no habitable zone exists, which
    is distinct from a legitimate boundary at 0 AU.
    """

    UNAVAILABLE = -1.0

    epistellar_inner: float = 0.0
    epistellar_outer: float = 0.0
    inner_zone_start: float = 0.0
    habitable_zone_inner: float = 0.0
    habitable_zone_outer: float = 0.0
    frost_line: float = 0.0
    system_limit: float = 0.0

    @property
    def habitable_zone_available(self) -> bool:
        return self.habitable_zone_inner >= 0.0 and self.habitable_zone_outer >= 0.0

    def mark_habitable_unavailable(self) -> None:
        self.habitable_zone_inner = self.UNAVAILABLE
        self.habitable_zone_outer = self.UNAVAILABLE

    def zone_type(self, distance: float) -> ZoneType:
        # Unavailable habitable bounds are negative and never match.
        if distance <= self.epistellar_outer:
            return ZoneType.EPISTELLAR
        if distance <= self.habitable_zone_inner:
            return ZoneType.INNER
        if distance <= self.habitable_zone_outer:
            return ZoneType.HABITABLE
        if distance <= self.frost_line:
            return ZoneType.OUTER
        if distance <= self.system_limit:
            return ZoneType.FAR_OUTER
        return ZoneType.BEYOND

    def to_dict(self) -> Dict[str, float]:
        return {
            "epistellar_inner": self.epistellar_inner,
            "epistellar_outer": self.epistellar_outer,
            "inner_zone_start": self.inner_zone_start,
            "habitable_zone_inner": self.habitable_zone_inner,
            "habitable_zone_outer": self.habitable_zone_outer,
            "frost_line": self.frost_line,
            "system_limit": self.system_limit,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrbitalZones":
        return cls(**{key: float(data.get(key, 0.0)) for key in cls().to_dict()})


__all__ = ["ZoneType", "OrbitalZones"]
