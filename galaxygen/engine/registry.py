"""In-memory store of generated entities keyed by id."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from galaxygen.engine.logger import ChannelLogger, GenerationLogger

if TYPE_CHECKING:
    from galaxygen.world.bodies import AsteroidBelt, Planet
    from galaxygen.world.sector import Sector
    from galaxygen.world.star import Star
    from galaxygen.world.system import BinaryPair, StarSystem


class EntityRegistry:
    """Keeps every generated sector, system, star, pair and body reachable by id."""

    def __init__(self, logger: Optional[GenerationLogger] = None) -> None:
        self.sectors: Dict[str, "Sector"] = {}
        self.systems: Dict[str, "StarSystem"] = {}
        self.stars: Dict[str, "Star"] = {}
        self.binary_pairs: Dict[str, "BinaryPair"] = {}
        self.planets: Dict[str, "Planet"] = {}
        self.asteroid_belts: Dict[str, "AsteroidBelt"] = {}
        self._log: ChannelLogger = (logger or GenerationLogger.quiet()).channel("registry")

    def _store(self, table: Dict[str, object], kind: str, entity_id: str, entity: object) -> None:
        if entity_id in table and table[entity_id] is not entity:
            self._log.warning("Replacing %s %s", kind, entity_id)
        table[entity_id] = entity

    def register_sector(self, sector: "Sector") -> None:
        self._store(self.sectors, "sector", sector.id, sector)

    def register_system(self, system: "StarSystem") -> None:
        self._store(self.systems, "system", system.id, system)

    def register_star(self, star: "Star") -> None:
        self._store(self.stars, "star", star.id, star)

    def register_binary_pair(self, pair: "BinaryPair") -> None:
        self._store(self.binary_pairs, "binary pair", pair.id, pair)

    def register_planet(self, planet: "Planet") -> None:
        self._store(self.planets, "planet", planet.id, planet)

    def register_asteroid_belt(self, belt: "AsteroidBelt") -> None:
        self._store(self.asteroid_belts, "asteroid belt", belt.id, belt)

    def register_sector_tree(self, sector: "Sector") -> None:
        """Register a sector and everything it contains."""

        self.register_sector(sector)
        for system in sector.systems:
            self.register_system(system)
            for star in system.stars:
                self.register_star(star)
                for planet in star.planets:
                    self.register_planet(planet)
                for belt in star.asteroid_belts:
                    self.register_asteroid_belt(belt)
            for pair in system.binary_pairs:
                self.register_binary_pair(pair)
                for planet in pair.planets:
                    self.register_planet(planet)
                for belt in pair.asteroid_belts:
                    self.register_asteroid_belt(belt)

    def get_sector(self, sector_id: str) -> Optional["Sector"]:
        return self.sectors.get(sector_id)

    def get_system(self, system_id: str) -> Optional["StarSystem"]:
        return self.systems.get(system_id)

    def get_star(self, star_id: str) -> Optional["Star"]:
        return self.stars.get(star_id)

    def get_binary_pair(self, pair_id: str) -> Optional["BinaryPair"]:
        return self.binary_pairs.get(pair_id)

    def get_planet(self, planet_id: str) -> Optional["Planet"]:
        return self.planets.get(planet_id)

    def get_asteroid_belt(self, belt_id: str) -> Optional["AsteroidBelt"]:
        return self.asteroid_belts.get(belt_id)

    def counts(self) -> Dict[str, int]:
        return {
            "sectors": len(self.sectors),
            "systems": len(self.systems),
            "stars": len(self.stars),
            "binary_pairs": len(self.binary_pairs),
            "planets": len(self.planets),
            "asteroid_belts": len(self.asteroid_belts),
        }

    def clear(self) -> None:
        self.sectors.clear()
        self.systems.clear()
        self.stars.clear()
        self.binary_pairs.clear()
        self.planets.clear()
        self.asteroid_belts.clear()
        self._log.debug("Registry cleared")


__all__ = ["EntityRegistry"]
