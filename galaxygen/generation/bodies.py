"""Turns accepted orbits into planets and asteroid belts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from galaxygen.engine.logger import GenerationLogger
from galaxygen.engine.roll import Roll
from galaxygen.math.astro import planet_period
from galaxygen.world.bodies import AsteroidBelt, Orbit, Planet
from galaxygen.world.zones import ZoneType

BELT_INNER_FACTOR = 0.9
BELT_OUTER_FACTOR = 1.1
BELT_THICKNESS_RANGE = (0.1, 0.5)
# Objects per cubic AU.
BELT_DENSITY_RANGE = (5000.0, 15000.0)
RING_CHANCE_PERCENT = 20


@dataclass(frozen=True)
class BodyHost:
    """The star, or combined pair, that a set of orbits circles."""

    id: str
    mass: float
    luminosity: float
    temperature: float


class PlanetGenerator:
    def __init__(self, roll: Roll) -> None:
        self._roll = roll

    def generate(self, planet_id: str, orbit: Orbit, host: BodyHost) -> Planet:
        density = orbit.density if orbit.density > 0.0 else 1.0
        return Planet(
            id=planet_id,
            host_id=host.id,
            planet_type=orbit.planet_type,
            zone=orbit.zone,
            mass=orbit.mass,
            radius=(orbit.mass / density) ** (1.0 / 3.0),
            density=density,
            semi_major_axis=orbit.distance,
            eccentricity=orbit.eccentricity,
            inclination=orbit.inclination,
            orbital_period=planet_period(orbit.distance, host.mass, orbit.mass),
            temperature=orbit.temperature,
            has_moons=orbit.has_moons,
            has_rings=orbit.has_moons and self._roll.dice(1, 100) <= RING_CHANCE_PERCENT,
        )


class AsteroidBeltGenerator:
    def __init__(self, roll: Roll) -> None:
        self._roll = roll

    def generate(
        self,
        belt_id: str,
        host_id: str,
        inner_radius: float,
        outer_radius: float,
        zone: ZoneType,
        mass: float,
    ) -> AsteroidBelt:
        return AsteroidBelt(
            id=belt_id,
            host_id=host_id,
            zone=zone,
            inner_radius=inner_radius,
            outer_radius=outer_radius,
            mass=mass,
            thickness=self._roll.uniform(*BELT_THICKNESS_RANGE),
            density=self._roll.uniform(*BELT_DENSITY_RANGE),
        )


class BodyBuilder:
    """Dispatches each orbit to the planet or asteroid belt generator."""

    def __init__(self, roll: Roll, logger: Optional[GenerationLogger] = None) -> None:
        self.planets = PlanetGenerator(roll)
        self.belts = AsteroidBeltGenerator(roll)
        self._log = (logger or GenerationLogger.quiet()).channel("orbits")

    def build(self, orbits: List[Orbit], host: BodyHost, id_prefix: str) -> Tuple[List[Planet], List[AsteroidBelt]]:
        planets: List[Planet] = []
        belts: List[AsteroidBelt] = []
        for orbit in orbits:
            if orbit.is_asteroid_belt:
                belts.append(
                    self.belts.generate(
                        f"{id_prefix}-ABelt-{len(belts) + 1}",
                        host.id,
                        orbit.distance * BELT_INNER_FACTOR,
                        orbit.distance * BELT_OUTER_FACTOR,
                        orbit.zone,
                        orbit.mass,
                    )
                )
            else:
                planets.append(self.planets.generate(f"{id_prefix}-P{len(planets) + 1}", orbit, host))
        self._log.debug("Host %s: %d planets, %d belts", host.id, len(planets), len(belts))
        return planets, belts


__all__ = ["BodyHost", "PlanetGenerator", "AsteroidBeltGenerator", "BodyBuilder"]
