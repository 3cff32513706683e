"""Populates a star system: stars, hierarchy, zones, orbits and bodies."""
from __future__ import annotations

import math
from typing import Dict, Optional

from galaxygen.engine.logger import GenerationLogger
from galaxygen.engine.roll import Roll
from galaxygen.generation.bodies import BodyBuilder, BodyHost
from galaxygen.generation.hierarchy import (
    HierarchyBuilder,
    effective_temperature,
    max_radius,
    pair_total_luminosity,
    total_mass,
)
from galaxygen.generation.orbits import OrbitGenerator
from galaxygen.generation.star_generator import StarGenerator
from galaxygen.generation.zones import ZoneCalculator
from galaxygen.world.star import Star
from galaxygen.world.system import BinaryPair, ComponentKind, ComponentRef, StarSystem

# Cumulative thresholds on the 1..10000 scale mapped to star count.
STAR_COUNT_DISTRIBUTION: Dict[float, int] = {
    5400: 1,
    8800: 2,
    9600: 3,
    9900: 4,
    9950: 5,
    9980: 6,
    9990: 7,
    9995: 8,
    9998: 9,
    10000: 10,
}

CLOSE_BINARY_SEPARATION = 10.0


class SystemGenerator:
    """Fills a freshly placed ``StarSystem`` in place."""

    def __init__(
        self,
        roll: Roll,
        logger: Optional[GenerationLogger] = None,
        star_generator: Optional[StarGenerator] = None,
        hierarchy: Optional[HierarchyBuilder] = None,
        zones: Optional[ZoneCalculator] = None,
        orbits: Optional[OrbitGenerator] = None,
        bodies: Optional[BodyBuilder] = None,
    ) -> None:
        logger = logger or GenerationLogger.quiet()
        self._roll = roll
        self._log = logger.channel("system")
        self._hierarchy_log = logger.channel("hierarchy")
        self.star_generator = star_generator or StarGenerator(roll, logger=logger)
        self.hierarchy = hierarchy or HierarchyBuilder(roll, logger)
        self.zones = zones or ZoneCalculator(logger)
        self.orbits = orbits or OrbitGenerator(roll, logger)
        self.bodies = bodies or BodyBuilder(roll, logger)

    def generate(self, system: StarSystem) -> StarSystem:
        count = self._roll.seek(STAR_COUNT_DISTRIBUTION)
        for index in range(count):
            system.add_star(self.star_generator.generate(f"{system.id}-S{index + 1}", system.id))

        system.root_pair_id = self.hierarchy.organize(system)
        self.assign_zones(system)
        self.populate_orbits(system)
        primary = system.primary_star
        self._log.debug(
            "System %s: %d stars, %d pairs, primary %s",
            system.id,
            len(system.stars),
            len(system.binary_pairs),
            primary.designation if primary is not None else "none",
        )
        return system

    def assign_zones(self, system: StarSystem) -> None:
        for star in system.stars:
            star.zones = self.zones.zones_for_star(star)
        for pair in system.binary_pairs:
            self._assign_pair_zones(system, pair)

    def _assign_pair_zones(self, system: StarSystem, pair: BinaryPair) -> None:
        if pair.primary.kind is not ComponentKind.STAR or pair.secondary.kind is not ComponentKind.STAR:
            pair.circumbinary_zones = self.zones.zones_for_hierarchy(pair.separation)
            return

        components = [
            star
            for star in (
                self._component_star(system, pair.primary),
                self._component_star(system, pair.secondary),
            )
            if star is not None
        ]
        if pair.separation < CLOSE_BINARY_SEPARATION:
            combined = Star(
                id=f"{pair.id}-combined",
                system_id=system.id,
                mass=sum(star.mass for star in components),
                luminosity=sum(star.luminosity for star in components),
                temperature=max((star.temperature for star in components), default=0.0),
                radius=max((star.radius for star in components), default=0.0),
            )
            pair.circumbinary_zones = self.zones.zones_for_star(combined)
        else:
            pair.circumbinary_zones = self.zones.zones_for_pair(pair, system)
        for star in components:
            self.zones.adjust_for_interference(star.zones, pair.separation)

    def _component_star(self, system: StarSystem, ref: ComponentRef) -> Optional[Star]:
        if ref.kind is not ComponentKind.STAR:
            return None
        star = system.find_star(ref.id)
        if star is None:
            self._hierarchy_log.warning("System %s references missing star %s", system.id, ref.id)
        return star

    def populate_orbits(self, system: StarSystem) -> None:
        for star in system.stars:
            if not system.is_in_binary_pair(star.id):
                self._populate_star(star, 0.0, math.inf)

        for pair in system.binary_pairs:
            primary_mass = total_mass(system, pair.primary, self._hierarchy_log)
            secondary_mass = total_mass(system, pair.secondary, self._hierarchy_log)
            if pair.primary.kind is ComponentKind.STAR:
                star = system.find_star(pair.primary.id)
                if star is not None:
                    self._populate_star(star, secondary_mass, pair.separation)
            if pair.secondary.kind is ComponentKind.STAR:
                star = system.find_star(pair.secondary.id)
                if star is not None:
                    self._populate_star(star, primary_mass, pair.separation)
            self._populate_pair(system, pair, primary_mass, secondary_mass)

    def _populate_star(self, star: Star, companion_mass: float, separation: float) -> None:
        star.orbits = self.orbits.circumstellar_orbits(star, companion_mass, separation)
        host = BodyHost(star.id, star.mass, star.luminosity, star.temperature)
        star.planets, star.asteroid_belts = self.bodies.build(star.orbits, host, star.id)

    def _populate_pair(
        self, system: StarSystem, pair: BinaryPair, primary_mass: float, secondary_mass: float
    ) -> None:
        luminosity = pair_total_luminosity(system, pair, self._hierarchy_log)
        pair.circumbinary_orbits = self.orbits.circumbinary_orbits(
            pair.circumbinary_zones,
            primary_mass,
            secondary_mass,
            pair.separation,
            max_radius(system, pair.primary, self._hierarchy_log),
            max_radius(system, pair.secondary, self._hierarchy_log),
            luminosity,
        )
        host = BodyHost(
            pair.id,
            primary_mass + secondary_mass,
            luminosity,
            effective_temperature(system, ComponentRef.pair(pair.id), self._hierarchy_log),
        )
        pair.planets, pair.asteroid_belts = self.bodies.build(pair.circumbinary_orbits, host, pair.id)


__all__ = ["SystemGenerator", "STAR_COUNT_DISTRIBUTION", "CLOSE_BINARY_SEPARATION"]
