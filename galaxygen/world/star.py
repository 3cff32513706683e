"""Star entities."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from galaxygen.world.bodies import AsteroidBelt, Orbit, Planet
from galaxygen.world.zones import OrbitalZones


@dataclass
class Star:
    """A generated star and everything orbiting it directly."""

    id: str
    system_id: str
    spectral_class: str = "G"
    subclass: int = 2
    luminosity_class: str = "V"
    mass: float = 1.0
    radius: float = 1.0
    luminosity: float = 1.0
    temperature: float = 5778.0
    zones: OrbitalZones = field(default_factory=OrbitalZones)
    orbits: List[Orbit] = field(default_factory=list)
    planets: List[Planet] = field(default_factory=list)
    asteroid_belts: List[AsteroidBelt] = field(default_factory=list)

    @property
    def designation(self) -> str:
        return f"{self.spectral_class}{self.subclass}{self.luminosity_class}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "system_id": self.system_id,
            "spectral_class": self.spectral_class,
            "subclass": self.subclass,
            "luminosity_class": self.luminosity_class,
            "mass": self.mass,
            "radius": self.radius,
            "luminosity": self.luminosity,
            "temperature": self.temperature,
            "zones": self.zones.to_dict(),
            "orbits": [orbit.to_dict() for orbit in self.orbits],
            "planets": [planet.to_dict() for planet in self.planets],
            "asteroid_belts": [belt.to_dict() for belt in self.asteroid_belts],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Star":
        return cls(
            id=data["id"],
            system_id=data.get("system_id", ""),
            spectral_class=data.get("spectral_class", "G"),
            subclass=int(data.get("subclass", 2)),
            luminosity_class=data.get("luminosity_class", "V"),
            mass=float(data.get("mass", 1.0)),
            radius=float(data.get("radius", 1.0)),
            luminosity=float(data.get("luminosity", 1.0)),
            temperature=float(data.get("temperature", 5778.0)),
            zones=OrbitalZones.from_dict(data.get("zones", {})),
            orbits=[Orbit.from_dict(entry) for entry in data.get("orbits", [])],
            planets=[Planet.from_dict(entry) for entry in data.get("planets", [])],
            asteroid_belts=[AsteroidBelt.from_dict(entry) for entry in data.get("asteroid_belts", [])],
        )


__all__ = ["Star"]
