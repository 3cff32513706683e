"""Star systems and their binary hierarchy.

Stars and binary pairs live in flat per-system collections. Hierarchy edges
are ``ComponentRef`` values (kind + id) resolved through the owning system,
so nested pairs never hold each other directly.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

from pygame.math import Vector3

from galaxygen.world.bodies import AsteroidBelt, Orbit, Planet
from galaxygen.world.star import Star
from galaxygen.world.zones import OrbitalZones


class ComponentKind(Enum):
    STAR = "Star"
    BINARY_PAIR = "BinaryPair"


@dataclass(frozen=True)
class ComponentRef:
    """Reference to one side of a binary pair."""

    kind: ComponentKind
    id: str

    @classmethod
    def star(cls, star_id: str) -> "ComponentRef":
        return cls(ComponentKind.STAR, star_id)

    @classmethod
    def pair(cls, pair_id: str) -> "ComponentRef":
        return cls(ComponentKind.BINARY_PAIR, pair_id)

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "id": self.id}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "ComponentRef":
        return cls(ComponentKind(data["kind"]), data["id"])


@dataclass
class BinaryPair:
    """Two components orbiting their common barycentre."""

    id: str
    system_id: str
    primary: ComponentRef
    secondary: ComponentRef
    separation: float = 0.0
    orbital_period: float = 0.0
    primary_orbit_radius: float = 0.0
    secondary_orbit_radius: float = 0.0
    circumbinary_zones: OrbitalZones = field(default_factory=OrbitalZones)
    circumbinary_orbits: List[Orbit] = field(default_factory=list)
    planets: List[Planet] = field(default_factory=list)
    asteroid_belts: List[AsteroidBelt] = field(default_factory=list)

    def components(self) -> tuple[ComponentRef, ComponentRef]:
        return (self.primary, self.secondary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "system_id": self.system_id,
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict(),
            "separation": self.separation,
            "orbital_period": self.orbital_period,
            "primary_orbit_radius": self.primary_orbit_radius,
            "secondary_orbit_radius": self.secondary_orbit_radius,
            "circumbinary_zones": self.circumbinary_zones.to_dict(),
            "circumbinary_orbits": [orbit.to_dict() for orbit in self.circumbinary_orbits],
            "planets": [planet.to_dict() for planet in self.planets],
            "asteroid_belts": [belt.to_dict() for belt in self.asteroid_belts],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BinaryPair":
        return cls(
            id=data["id"],
            system_id=data.get("system_id", ""),
            primary=ComponentRef.from_dict(data["primary"]),
            secondary=ComponentRef.from_dict(data["secondary"]),
            separation=float(data.get("separation", 0.0)),
            orbital_period=float(data.get("orbital_period", 0.0)),
            primary_orbit_radius=float(data.get("primary_orbit_radius", 0.0)),
            secondary_orbit_radius=float(data.get("secondary_orbit_radius", 0.0)),
            circumbinary_zones=OrbitalZones.from_dict(data.get("circumbinary_zones", {})),
            circumbinary_orbits=[Orbit.from_dict(entry) for entry in data.get("circumbinary_orbits", [])],
            planets=[Planet.from_dict(entry) for entry in data.get("planets", [])],
            asteroid_belts=[AsteroidBelt.from_dict(entry) for entry in data.get("asteroid_belts", [])],
        )


class StarSystem:
    """A placed star system with id-indexed stars and pairs."""

    def __init__(self, system_id: str, sector_id: str, position: Vector3) -> None:
        self.id = system_id
        self.sector_id = sector_id
        self.position = Vector3(position)
        self.stars: List[Star] = []
        self.binary_pairs: List[BinaryPair] = []
        self.root_pair_id: Optional[str] = None
        self._stars_by_id: Dict[str, Star] = {}
        self._pairs_by_id: Dict[str, BinaryPair] = {}

    def add_star(self, star: Star) -> None:
        self.stars.append(star)
        self._stars_by_id[star.id] = star

    def add_binary_pair(self, pair: BinaryPair) -> None:
        self.binary_pairs.append(pair)
        self._pairs_by_id[pair.id] = pair

    def find_star(self, star_id: str) -> Optional[Star]:
        return self._stars_by_id.get(star_id)

    def find_binary_pair(self, pair_id: str) -> Optional[BinaryPair]:
        return self._pairs_by_id.get(pair_id)

    def resolve(self, ref: ComponentRef) -> Optional[Union[Star, BinaryPair]]:
        if ref.kind is ComponentKind.STAR:
            return self.find_star(ref.id)
        return self.find_binary_pair(ref.id)

    @property
    def primary_star(self) -> Optional[Star]:
        if not self.stars:
            return None
        return max(self.stars, key=lambda star: star.mass)

    def root_binary_pair(self) -> Optional[BinaryPair]:
        if self.root_pair_id is None:
            return None
        return self.find_binary_pair(self.root_pair_id)

    def stars_in(self, ref: ComponentRef) -> Iterator[Star]:
        """Walk every star beneath a component, skipping dangling ids."""

        if ref.kind is ComponentKind.STAR:
            star = self.find_star(ref.id)
            if star is not None:
                yield star
            return
        pair = self.find_binary_pair(ref.id)
        if pair is None:
            return
        for child in pair.components():
            yield from self.stars_in(child)

    def is_in_binary_pair(self, star_id: str) -> bool:
        return any(
            ref.kind is ComponentKind.STAR and ref.id == star_id
            for pair in self.binary_pairs
            for ref in pair.components()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "sector_id": self.sector_id,
            "position": [self.position.x, self.position.y, self.position.z],
            "root_pair_id": self.root_pair_id,
            "stars": [star.to_dict() for star in self.stars],
            "binary_pairs": [pair.to_dict() for pair in self.binary_pairs],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StarSystem":
        system = cls(data["id"], data.get("sector_id", ""), Vector3(data.get("position", (0.0, 0.0, 0.0))))
        for entry in data.get("stars", []):
            system.add_star(Star.from_dict(entry))
        for entry in data.get("binary_pairs", []):
            system.add_binary_pair(BinaryPair.from_dict(entry))
        system.root_pair_id = data.get("root_pair_id")
        return system


__all__ = ["ComponentKind", "ComponentRef", "BinaryPair", "StarSystem"]
