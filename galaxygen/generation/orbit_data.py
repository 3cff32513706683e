"""Zone- and mass-dependent attribute tables for orbiting bodies.

Masses are in Earth masses and densities relative to Earth.
"""
from __future__ import annotations

from typing import Dict, Tuple

from galaxygen.engine.roll import Roll
from galaxygen.world.bodies import PlanetType
from galaxygen.world.zones import ZoneType

ASTEROID_BELT_CHANCE: Dict[ZoneType, float] = {
    ZoneType.INNER: 0.05,
    ZoneType.HABITABLE: 0.01,
    ZoneType.OUTER: 0.15,
    ZoneType.FAR_OUTER: 0.20,
}
DEFAULT_ASTEROID_BELT_CHANCE = 0.10

# Per zone: (upper d100 bound, dice count, dice modifier, multiplier, offset).
MASS_TABLES: Dict[ZoneType, Tuple[Tuple[int, int, int, float, float], ...]] = {
    ZoneType.EPISTELLAR: (
        (50, 1, 3, 0.2, 0.0),
        (80, 1, 0, 0.6, 0.0),
        (100, 1, 0, 3.0, 0.0),
    ),
    ZoneType.INNER: (
        (70, 1, 0, 0.3, 0.0),
        (90, 1, 0, 0.8, 0.0),
        (100, 1, 3, 1.0, 0.0),
    ),
    ZoneType.HABITABLE: (
        (60, 1, 0, 0.4, 0.4),
        (85, 1, 2, 0.6, 0.0),
        (100, 1, 5, 1.2, 0.0),
    ),
    ZoneType.OUTER: (
        (40, 1, 10, 2.5, 0.0),
        (70, 1, 15, 8.0, 0.0),
        (100, 1, 20, 16.0, 0.0),
    ),
    ZoneType.FAR_OUTER: (
        (60, 1, 0, 0.15, 0.05),
        (80, 1, 3, 0.8, 0.0),
        (95, 1, 5, 3.0, 0.0),
        (100, 2, 20, 5.0, 0.0),
    ),
}

# (minimum planet mass, moon chance), heaviest tier first.
MOON_CHANCE_TIERS = (
    (100.0, 0.95),
    (10.0, 0.8),
    (2.0, 0.6),
    (0.5, 0.4),
    (0.1, 0.2),
)
MIN_MOON_CHANCE = 0.05

INSIDE_FROST_LINE = (ZoneType.EPISTELLAR, ZoneType.INNER, ZoneType.HABITABLE)


def asteroid_belt_chance(zone: ZoneType) -> float:
    return ASTEROID_BELT_CHANCE.get(zone, DEFAULT_ASTEROID_BELT_CHANCE)


def mass_for_zone(roll: Roll, zone: ZoneType) -> float:
    table = MASS_TABLES.get(zone)
    if table is None:
        return roll.vary(1.0)
    pick = roll.dice(1, 100)
    for bound, count, modifier, multiplier, offset in table:
        if pick <= bound:
            return roll.vary(roll.dice(count, 6, modifier) * multiplier + offset)
    return roll.vary(1.0)


def moon_chance(planet_mass: float, stellar_mass: float) -> float:
    chance = MIN_MOON_CHANCE
    for minimum, tier_chance in MOON_CHANCE_TIERS:
        if planet_mass >= minimum:
            chance = tier_chance
            break
    # Heavier hosts strip moons more readily.
    return chance * max(0.5, 2.0 - 0.5 * stellar_mass)


def has_moons(roll: Roll, planet_mass: float, stellar_mass: float) -> bool:
    return roll.uniform(0.0, 1.0) <= moon_chance(planet_mass, stellar_mass)


def eccentricity(roll: Roll, is_asteroid_belt: bool) -> float:
    if is_asteroid_belt:
        return roll.uniform(0.1, 0.3)
    if roll.uniform(0.0, 1.0) <= 0.1:
        return roll.uniform(0.1, 0.5)
    return roll.uniform(0.01, 0.1)


def inclination(roll: Roll) -> float:
    if roll.uniform(0.0, 1.0) <= 0.05:
        return roll.uniform(10.0, 30.0)
    return roll.uniform(0.0, 10.0)


def estimate_density(roll: Roll, mass: float, zone: ZoneType) -> float:
    if mass >= 10.0:
        base = 0.15 + 0.005 * mass
    elif mass >= 2.0:
        base = 0.6 + 0.1 * mass
    else:
        base = 0.8 + 0.2 * mass
    if zone is ZoneType.EPISTELLAR:
        base *= 0.95
    elif zone is ZoneType.FAR_OUTER:
        base *= 1.1
    return roll.vary(base, 0.15)


def water_content(roll: Roll, zone: ZoneType, temperature: float) -> float:
    """Surface water fraction in [0, 1]."""

    if zone is ZoneType.EPISTELLAR:
        return 0.0
    if zone is ZoneType.INNER:
        return 0.05 if temperature > 600.0 else roll.uniform(0.1, 0.4)
    if zone is ZoneType.HABITABLE:
        return roll.uniform(0.0, 1.0)
    if zone is ZoneType.OUTER:
        return roll.uniform(0.5, 0.9)
    if zone is ZoneType.FAR_OUTER:
        return roll.uniform(0.7, 0.95)
    return 0.0


def determine_planet_type(
    roll: Roll,
    mass: float,
    density: float,
    zone: ZoneType,
    temperature: float,
    water: float = -1.0,
) -> PlanetType:
    """Classify a planet; a negative ``water`` is rolled when first needed."""

    if mass < 0.01:
        return PlanetType.ASTERIAN
    if mass < 0.1:
        return PlanetType.METIAN

    inside_frost = zone in INSIDE_FROST_LINE
    hot = temperature > 700.0
    extreme = temperature > 1200.0 or (zone is ZoneType.EPISTELLAR and mass > 0.3)

    if extreme and mass < 2.0:
        return PlanetType.VULCANIAN
    if hot and mass > 5.0 and density > 0.8 * mass:
        return PlanetType.CRONUSIAN
    if density > 1.1 and zone is not ZoneType.FAR_OUTER and mass < 10.0:
        return PlanetType.LELANTIAN

    if mass >= 50.0:
        if zone in (ZoneType.EPISTELLAR, ZoneType.INNER):
            return PlanetType.HYPERION
        return PlanetType.ATLANTEAN
    if mass >= 30.0:
        return PlanetType.HYPERION if inside_frost else PlanetType.ATLANTEAN
    if mass >= 20.0:
        if inside_frost:
            return PlanetType.HYPERION
        return PlanetType.HELIAN if density < 0.2 else PlanetType.IAPETIAN
    if mass >= 10.0:
        return PlanetType.CRIUSIAN if inside_frost else PlanetType.IAPETIAN

    if water < 0.0 and inside_frost:
        water = water_content(roll, zone, temperature)

    if mass >= 2.0:
        if inside_frost:
            return PlanetType.OCEANIAN if water > 0.9 else PlanetType.RHEAN
        return PlanetType.THEIAN if temperature > 200.0 else PlanetType.DIONEAN

    if not inside_frost:
        return PlanetType.PHOEBOAN
    if water > 0.9:
        return PlanetType.OCEANIAN
    if water > 0.5:
        return PlanetType.GAIAN
    if water > 0.25:
        return PlanetType.TETHYSIAN
    if water > 0.01:
        return PlanetType.PROMETHEAN
    return PlanetType.MENOETIAN


__all__ = [
    "ASTEROID_BELT_CHANCE",
    "MASS_TABLES",
    "asteroid_belt_chance",
    "mass_for_zone",
    "moon_chance",
    "has_moons",
    "eccentricity",
    "inclination",
    "estimate_density",
    "water_content",
    "determine_planet_type",
]
