"""Orbit candidates and the planetary bodies built from them."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from galaxygen.world.zones import ZoneType


class PlanetType(Enum):
    """Composition classes for planets and minor bodies."""

    METIAN = "Metian"
    MENOETIAN = "Menoetian"
    PROMETHEAN = "Promethean"
    TETHYSIAN = "Tethysian"
    GAIAN = "Gaian"
    OCEANIAN = "Oceanian"
    PHOEBOAN = "Phoeboan"
    RHEAN = "Rhean"
    DIONEAN = "Dionean"
    CRIUSIAN = "Criusian"
    THEIAN = "Theian"
    IAPETIAN = "Iapetian"
    HELIAN = "Helian"
    LELANTIAN = "Lelantian"
    HYPERION = "Hyperion"
    ATLANTEAN = "Atlantean"
    VULCANIAN = "Vulcanian"
    CRONUSIAN = "Cronusian"
    ASTERIAN = "Asterian"


@dataclass
class Orbit:
    """Accepted orbital slot handed to the body generators.

    ``mass`` is in Earth masses and ``density`` relative to Earth.
    """

    distance: float
    mass: float
    planet_type: PlanetType
    zone: ZoneType
    has_moons: bool = False
    eccentricity: float = 0.0
    inclination: float = 0.0
    temperature: float = 0.0
    density: float = 1.0
    is_asteroid_belt: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "distance": self.distance,
            "mass": self.mass,
            "planet_type": self.planet_type.value,
            "zone": self.zone.label,
            "has_moons": self.has_moons,
            "eccentricity": self.eccentricity,
            "inclination": self.inclination,
            "temperature": self.temperature,
            "density": self.density,
            "is_asteroid_belt": self.is_asteroid_belt,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Orbit":
        return cls(
            distance=float(data["distance"]),
            mass=float(data["mass"]),
            planet_type=PlanetType(data["planet_type"]),
            zone=ZoneType.from_label(data["zone"]),
            has_moons=bool(data.get("has_moons", False)),
            eccentricity=float(data.get("eccentricity", 0.0)),
            inclination=float(data.get("inclination", 0.0)),
            temperature=float(data.get("temperature", 0.0)),
            density=float(data.get("density", 1.0)),
            is_asteroid_belt=bool(data.get("is_asteroid_belt", False)),
        )


@dataclass
class Planet:
    """A planet on a star or circumbinary orbit."""

    id: str
    host_id: str
    planet_type: PlanetType
    zone: ZoneType
    mass: float
    radius: float
    density: float
    semi_major_axis: float
    eccentricity: float
    inclination: float
    orbital_period: float
    temperature: float
    has_moons: bool = False
    has_rings: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "host_id": self.host_id,
            "planet_type": self.planet_type.value,
            "zone": self.zone.label,
            "mass": self.mass,
            "radius": self.radius,
            "density": self.density,
            "semi_major_axis": self.semi_major_axis,
            "eccentricity": self.eccentricity,
            "inclination": self.inclination,
            "orbital_period": self.orbital_period,
            "temperature": self.temperature,
            "has_moons": self.has_moons,
            "has_rings": self.has_rings,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Planet":
        return cls(
            id=data["id"],
            host_id=data.get("host_id", ""),
            planet_type=PlanetType(data["planet_type"]),
            zone=ZoneType.from_label(data["zone"]),
            mass=float(data["mass"]),
            radius=float(data.get("radius", 0.0)),
            density=float(data.get("density", 1.0)),
            semi_major_axis=float(data["semi_major_axis"]),
            eccentricity=float(data.get("eccentricity", 0.0)),
            inclination=float(data.get("inclination", 0.0)),
            orbital_period=float(data.get("orbital_period", 0.0)),
            temperature=float(data.get("temperature", 0.0)),
            has_moons=bool(data.get("has_moons", False)),
            has_rings=bool(data.get("has_rings", False)),
        )


@dataclass
class AsteroidBelt:
    """A ring of minor bodies spanning ``inner_radius`` to ``outer_radius`` AU."""

    id: str
    host_id: str
    zone: ZoneType
    inner_radius: float
    outer_radius: float
    mass: float
    thickness: float
    density: float

    @property
    def width(self) -> float:
        return self.outer_radius - self.inner_radius

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "host_id": self.host_id,
            "zone": self.zone.label,
            "inner_radius": self.inner_radius,
            "outer_radius": self.outer_radius,
            "mass": self.mass,
            "thickness": self.thickness,
            "density": self.density,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AsteroidBelt":
        return cls(
            id=data["id"],
            host_id=data.get("host_id", ""),
            zone=ZoneType.from_label(data["zone"]),
            inner_radius=float(data["inner_radius"]),
            outer_radius=float(data["outer_radius"]),
            mass=float(data.get("mass", 0.0)),
            thickness=float(data.get("thickness", 0.0)),
            density=float(data.get("density", 0.0)),
        )


__all__ = ["PlanetType", "Orbit", "Planet", "AsteroidBelt"]
