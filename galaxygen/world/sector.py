"""Sector containers and the inter-system distance map."""
from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from galaxygen.world.system import StarSystem

MISSING_DISTANCE = -1.0


@dataclass(frozen=True)
class GalaxyCoordinate:
    """Integer sector position on the galactic grid."""

    x: int
    y: int
    z: int

    def relative_to_center(self, offset: Tuple[int, int, int]) -> "GalaxyCoordinate":
        return GalaxyCoordinate(self.x + offset[0], self.y + offset[1], self.z + offset[2])

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)


def sector_id_for(center: Tuple[float, float, float]) -> str:
    """Encode a sector centre (parsecs from galactic centre) as an id."""

    x, y, z = center
    theta = math.degrees(math.atan2(y, x))
    if theta < 0.0:
        theta += 360.0
    phi = math.degrees(math.atan2(z, math.hypot(x, y)))
    distance = math.sqrt(x * x + y * y + z * z)
    return f"SEC_{theta:.1f}/{phi:.1f}/{distance:.0f}"


def cell_grid(cells_per_edge: int) -> Iterator[Tuple[int, int, int]]:
    """Cells of a sector in generation order: x outermost, z innermost."""

    for x in range(cells_per_edge):
        for y in range(cells_per_edge):
            for z in range(cells_per_edge):
                yield (x, y, z)


class Sector:
    """A generated sector with its systems and pairwise distances."""

    def __init__(self, sector_id: str, coordinate: GalaxyCoordinate, seed: Optional[int] = None) -> None:
        self.id = sector_id
        self.coordinate = coordinate
        self.seed = seed
        self.systems: List[StarSystem] = []
        self._systems_by_id: Dict[str, StarSystem] = {}
        self._distances: Dict[str, Dict[str, float]] = {}

    def add_system(self, system: StarSystem) -> None:
        self.systems.append(system)
        self._systems_by_id[system.id] = system

    def find_system(self, system_id: str) -> Optional[StarSystem]:
        return self._systems_by_id.get(system_id)

    def rebuild_distance_map(self) -> None:
        """Recompute all pairwise light-year distances from system positions."""

        distances: Dict[str, Dict[str, float]] = {system.id: {} for system in self.systems}
        for index, a in enumerate(self.systems):
            for b in self.systems[index + 1:]:
                distance = a.position.distance_to(b.position)
                distances[a.id][b.id] = distance
                distances[b.id][a.id] = distance
        self._distances = distances

    def distance_map(self) -> Dict[str, Dict[str, float]]:
        return {key: dict(value) for key, value in self._distances.items()}

    def system_distance(self, a_id: str, b_id: str) -> float:
        if a_id == b_id:
            return 0.0 if self.find_system(a_id) is not None else MISSING_DISTANCE
        return self._distances.get(a_id, {}).get(b_id, MISSING_DISTANCE)

    def nearest_systems(self, system_id: str, count: int = 5) -> List[Tuple[StarSystem, float]]:
        neighbours = self._distances.get(system_id, {})
        ordered = sorted(neighbours.items(), key=lambda item: (item[1], item[0]))
        return [(self.find_system(other), distance) for other, distance in ordered[:count]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "coordinate": list(self.coordinate.as_tuple()),
            "seed": self.seed,
            "systems": [system.to_dict() for system in self.systems],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sector":
        sector = cls(data["id"], GalaxyCoordinate(*data.get("coordinate", (0, 0, 0))), data.get("seed"))
        for entry in data.get("systems", []):
            sector.add_system(StarSystem.from_dict(entry))
        sector.rebuild_distance_map()
        return sector

    @classmethod
    def from_json(cls, payload: str) -> "Sector":
        return cls.from_dict(json.loads(payload))


__all__ = ["GalaxyCoordinate", "Sector", "sector_id_for", "cell_grid", "MISSING_DISTANCE"]
