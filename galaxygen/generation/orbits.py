"""Stable orbit placement around stars and binary barycentres."""
from __future__ import annotations

import math
from typing import List, Optional, Sequence

from galaxygen.engine.logger import GenerationLogger
from galaxygen.engine.roll import Roll
from galaxygen.generation import orbit_data
from galaxygen.math.astro import (
    SOLAR_RADIUS_TO_AU,
    blackbody_temperature,
    planet_hill_sphere,
    roche_limit_au,
    stellar_hill_sphere,
)
from galaxygen.world.bodies import Orbit, PlanetType
from galaxygen.world.star import Star
from galaxygen.world.zones import OrbitalZones

TITIUS_BODE_A = 0.4
TITIUS_BODE_B = 0.3
CIRCUMBINARY_SEQUENCE_SCALE = 1.5
MAX_CANDIDATES = 15

COMPANION_MASS_THRESHOLD = 0.001
COMPANION_HILL_FRACTION = 0.3
ISOLATED_HILL_FRACTION = 0.9

SURFACE_CLEARANCE = 1.1
HILL_SPACING = 8.0
STABILITY_LOOKBACK = 2
BASE_ACCEPT_CHANCE = 0.7
CIRCUMBINARY_ACCEPT_FACTOR = 0.6
CIRCUMBINARY_ECCENTRICITY_FACTOR = 0.6


def titius_bode_candidates(minimum: float, maximum: float, circumbinary: bool = False) -> List[float]:
    """Candidate distances ``a + b * 2**n`` within ``[minimum, maximum]``."""

    if minimum >= maximum:
        return []
    a, b = TITIUS_BODE_A, TITIUS_BODE_B
    if circumbinary:
        a *= CIRCUMBINARY_SEQUENCE_SCALE
        b *= CIRCUMBINARY_SEQUENCE_SCALE
    n = math.ceil(math.log2(max(0.01, minimum - a)) - math.log2(b))
    candidates: List[float] = []
    while len(candidates) < MAX_CANDIDATES:
        distance = a + b * 2.0 ** n
        if distance > maximum:
            break
        if distance >= minimum:
            candidates.append(distance)
        n += 1
    return candidates


class OrbitGenerator:
    """Places orbits and rolls the attributes of the bodies on them."""

    def __init__(self, roll: Roll, logger: Optional[GenerationLogger] = None) -> None:
        self._roll = roll
        self._log = (logger or GenerationLogger.quiet()).channel("orbits")

    def circumstellar_orbits(self, star: Star, companion_mass: float, separation: float) -> List[Orbit]:
        minimum = max(roche_limit_au(star.mass, 0.0, star.radius), star.zones.epistellar_inner)
        hill = stellar_hill_sphere(star.mass, companion_mass, separation)
        if companion_mass > COMPANION_MASS_THRESHOLD:
            maximum = hill * COMPANION_HILL_FRACTION
        else:
            maximum = hill * ISOLATED_HILL_FRACTION
        orbits = self._orbit_set(
            minimum,
            maximum,
            star.zones,
            star.mass,
            star.luminosity,
            star.radius,
            circumbinary=False,
        )
        self._log.debug(
            "Star %s: %d orbits in [%.4f, %.4f] AU", star.id, len(orbits), minimum, maximum
        )
        return orbits

    def circumbinary_orbits(
        self,
        zones: OrbitalZones,
        mass1: float,
        mass2: float,
        separation: float,
        radius1: float,
        radius2: float,
        total_luminosity: float,
    ) -> List[Orbit]:
        if mass1 <= 0.0 or mass2 <= 0.0 or separation <= 0.0:
            return []
        hill1 = stellar_hill_sphere(mass1, mass2, separation)
        hill2 = stellar_hill_sphere(mass2, mass1, separation)
        if hill1 + hill2 <= separation:
            return []
        minimum = max(
            2.5 * separation,
            roche_limit_au(mass1, mass2, radius1),
            roche_limit_au(mass2, mass1, radius2),
            zones.epistellar_inner,
        )
        maximum = 0.2 * min(hill1, hill2)
        if minimum >= maximum:
            self._log.debug(
                "No circumbinary region: min %.3f AU >= max %.3f AU", minimum, maximum
            )
            return []
        return self._orbit_set(
            minimum,
            maximum,
            zones,
            mass1 + mass2,
            total_luminosity,
            radius1,
            circumbinary=True,
        )

    def _orbit_set(
        self,
        minimum: float,
        maximum: float,
        zones: OrbitalZones,
        stellar_mass: float,
        luminosity: float,
        stellar_radius: float,
        circumbinary: bool,
    ) -> List[Orbit]:
        orbits: List[Orbit] = []
        for distance in titius_bode_candidates(minimum, maximum, circumbinary):
            if self.is_viable(distance, orbits, stellar_radius, circumbinary):
                orbits.append(self.build_orbit(distance, zones, luminosity, stellar_mass, circumbinary))
        return orbits

    def is_viable(
        self,
        distance: float,
        accepted: Sequence[Orbit],
        stellar_radius: float,
        circumbinary: bool = False,
    ) -> bool:
        """Stability filter for one candidate distance."""

        if distance <= stellar_radius * SOLAR_RADIUS_TO_AU * SURFACE_CLEARANCE:
            return False
        for previous in accepted[-STABILITY_LOOKBACK:]:
            hill = planet_hill_sphere(distance, previous.mass)
            if abs(distance - previous.distance) < HILL_SPACING * hill:
                return False
        chance = BASE_ACCEPT_CHANCE
        if circumbinary:
            chance *= CIRCUMBINARY_ACCEPT_FACTOR
        if distance > 50.0 * stellar_radius:
            chance *= 0.8
        elif distance < 0.5 * stellar_radius:
            chance *= 0.9
        return self._roll.chance(chance)

    def build_orbit(
        self,
        distance: float,
        zones: OrbitalZones,
        luminosity: float,
        stellar_mass: float,
        circumbinary: bool = False,
    ) -> Orbit:
        zone = zones.zone_type(distance)
        temperature = blackbody_temperature(luminosity, distance)
        is_belt = self._roll.uniform(0.0, 1.0) < orbit_data.asteroid_belt_chance(zone)
        if is_belt:
            mass = self._roll.uniform(0.001, 0.1)
            density = 0.0
            planet_type = PlanetType.ASTERIAN
            moons = False
        else:
            mass = self._roll.vary(orbit_data.mass_for_zone(self._roll, zone))
            density = orbit_data.estimate_density(self._roll, mass, zone)
            planet_type = orbit_data.determine_planet_type(self._roll, mass, density, zone, temperature)
            moons = orbit_data.has_moons(self._roll, mass, stellar_mass)
        eccentricity = orbit_data.eccentricity(self._roll, is_belt)
        if circumbinary:
            eccentricity *= CIRCUMBINARY_ECCENTRICITY_FACTOR
        return Orbit(
            distance=distance,
            mass=mass,
            planet_type=planet_type,
            zone=zone,
            has_moons=moons,
            eccentricity=eccentricity,
            inclination=orbit_data.inclination(self._roll),
            temperature=temperature,
            density=density,
            is_asteroid_belt=is_belt,
        )


__all__ = ["OrbitGenerator", "titius_bode_candidates"]
