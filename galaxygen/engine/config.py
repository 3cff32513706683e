"""Generation parameters and the settings.json loader."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from galaxygen.engine.errors import ConfigurationError


class GalaxyType(IntEnum):
    UNIFORM = 0
    SPIRAL = 1
    ELLIPTICAL = 2
    IRREGULAR = 3

    @classmethod
    def parse(cls, value: Any) -> Optional["GalaxyType"]:
        """Resolve a code or name, returning ``None`` when unrecognised."""

        if isinstance(value, GalaxyType):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            try:
                value = int(key)
            except ValueError:
                return None
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return None


# Sector offset between the local grid origin and the galactic centre.
DEFAULT_GALACTIC_OFFSET: Tuple[int, int, int] = (8015, 25, 5)


@dataclass
class GenerationConfig:
    """Parameters for a sector generation run."""

    sector_size_x: int = 5
    sector_size_y: int = 5
    sector_size_z: int = 5
    parsecs_per_sector: int = 10
    star_density: float = 0.12
    anomaly_chance: float = 0.001
    random_seed: Optional[int] = None
    galaxy_type: Any = GalaxyType.UNIFORM
    spectral_distribution: int = 1
    galactic_offset: Tuple[int, int, int] = DEFAULT_GALACTIC_OFFSET

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenerationConfig":
        defaults = cls()
        offset = data.get("galactic_offset", defaults.galactic_offset)
        return cls(
            sector_size_x=data.get("sector_size_x", defaults.sector_size_x),
            sector_size_y=data.get("sector_size_y", defaults.sector_size_y),
            sector_size_z=data.get("sector_size_z", defaults.sector_size_z),
            parsecs_per_sector=data.get("parsecs_per_sector", defaults.parsecs_per_sector),
            star_density=data.get("star_density", defaults.star_density),
            anomaly_chance=data.get("anomaly_chance", defaults.anomaly_chance),
            random_seed=data.get("random_seed", defaults.random_seed),
            galaxy_type=data.get("galaxy_type", defaults.galaxy_type),
            spectral_distribution=data.get("spectral_distribution", defaults.spectral_distribution),
            galactic_offset=tuple(offset),
        )

    @classmethod
    def from_settings(cls, settings_path: Path) -> "GenerationConfig":
        if not settings_path.exists():
            return cls()
        try:
            data = json.loads(settings_path.read_text())
        except json.JSONDecodeError:
            return cls()
        return cls.from_dict(data.get("generation", {}))

    @property
    def sector_size(self) -> Tuple[int, int, int]:
        return (self.sector_size_x, self.sector_size_y, self.sector_size_z)

    @property
    def resolved_galaxy_type(self) -> GalaxyType:
        """Galaxy shape to use; unrecognised codes behave as uniform."""

        return GalaxyType.parse(self.galaxy_type) or GalaxyType.UNIFORM

    @property
    def galaxy_type_recognised(self) -> bool:
        return GalaxyType.parse(self.galaxy_type) is not None

    def validate(self) -> "GenerationConfig":
        for name in ("sector_size_x", "sector_size_y", "sector_size_z", "parsecs_per_sector"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if not isinstance(self.star_density, (int, float)) or self.star_density < 0.0:
            raise ConfigurationError(f"star_density must be non-negative, got {self.star_density!r}")
        if not isinstance(self.anomaly_chance, (int, float)) or not 0.0 <= self.anomaly_chance <= 1.0:
            raise ConfigurationError(f"anomaly_chance must be within [0, 1], got {self.anomaly_chance!r}")
        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise ConfigurationError(f"random_seed must be an integer or null, got {self.random_seed!r}")
        if self.spectral_distribution not in (0, 1, 2):
            raise ConfigurationError(
                f"spectral_distribution must be 0, 1 or 2, got {self.spectral_distribution!r}"
            )
        if len(self.galactic_offset) != 3:
            raise ConfigurationError(f"galactic_offset must have three components, got {self.galactic_offset!r}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["galaxy_type"] = int(self.resolved_galaxy_type)
        data["galactic_offset"] = list(self.galactic_offset)
        return data


__all__ = ["GalaxyType", "GenerationConfig", "DEFAULT_GALACTIC_OFFSET"]
