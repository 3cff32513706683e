"""Astrophysical constants and formulas shared by the generators.

Distances are in AU unless a name says otherwise, masses in solar masses,
radii in solar radii and luminosities in solar luminosities.
"""
from __future__ import annotations

import math

SOLAR_RADIUS_TO_AU = 0.00465
AU_TO_SOLAR_RADIUS = 215.032
EARTH_MASSES_PER_SOLAR_MASS = 332946.0
SUN_TEMPERATURE = 5778.0
LIGHT_YEARS_PER_PARSEC = 3.26

EARTH_ALBEDO = 0.306
DEFAULT_ALBEDO = 0.3


def roche_limit(primary_mass: float, secondary_mass: float, primary_radius: float) -> float:
    """Fluid Roche limit in solar radii."""

    total = primary_mass + secondary_mass
    if total <= 0.0 or primary_radius <= 0.0:
        return 0.0
    return primary_radius * 2.44 * (primary_mass / total) ** (1.0 / 3.0)


def roche_limit_au(primary_mass: float, secondary_mass: float, primary_radius: float) -> float:
    return roche_limit(primary_mass, secondary_mass, primary_radius) * SOLAR_RADIUS_TO_AU


def stellar_hill_sphere(mass: float, companion_mass: float, separation: float) -> float:
    """Hill radius of ``mass`` perturbed by ``companion_mass`` at ``separation``.

    An effectively isolated star gets a nominal sphere scaled by its mass.
    """

    if mass <= 0.0:
        return 0.0
    if companion_mass < 0.001:
        return math.sqrt(mass) * 40.0
    return separation * (mass / (3.0 * companion_mass)) ** (1.0 / 3.0)


def planet_hill_sphere(distance: float, planet_mass_earth: float, star_mass: float = 1.0) -> float:
    if distance <= 0.0 or planet_mass_earth <= 0.0 or star_mass <= 0.0:
        return 0.0
    return distance * (planet_mass_earth / (EARTH_MASSES_PER_SOLAR_MASS * star_mass)) ** (1.0 / 3.0)


def binary_period(separation: float, total_mass: float) -> float:
    """Orbital period in years from Kepler's third law."""

    if separation <= 0.0 or total_mass <= 0.0:
        return 0.0
    return math.sqrt(separation ** 3 / total_mass)


def planet_period(semi_major_axis: float, star_mass: float, planet_mass_earth: float = 0.0) -> float:
    total = star_mass + planet_mass_earth / EARTH_MASSES_PER_SOLAR_MASS
    if semi_major_axis <= 0.0 or total <= 0.0:
        return 0.0
    return math.sqrt(semi_major_axis ** 3 / total)


def blackbody_temperature(luminosity: float, distance: float, albedo: float = DEFAULT_ALBEDO) -> float:
    """Equilibrium temperature in kelvin, normalised to Earth's 255 K."""

    if distance <= 0.0 or luminosity <= 0.0:
        return 0.0
    flux = luminosity / (distance * distance)
    return 255.0 * flux ** 0.25 * ((1.0 - albedo) / (1.0 - EARTH_ALBEDO)) ** 0.25


def barycentric_radii(separation: float, primary_mass: float, secondary_mass: float) -> tuple[float, float]:
    """Distances of each component from the common centre of mass."""

    total = primary_mass + secondary_mass
    if total <= 0.0:
        return (0.0, 0.0)
    return (
        separation * (1.0 - primary_mass / total),
        separation * (primary_mass / total),
    )


__all__ = [
    "SOLAR_RADIUS_TO_AU",
    "AU_TO_SOLAR_RADIUS",
    "EARTH_MASSES_PER_SOLAR_MASS",
    "SUN_TEMPERATURE",
    "LIGHT_YEARS_PER_PARSEC",
    "DEFAULT_ALBEDO",
    "roche_limit",
    "roche_limit_au",
    "stellar_hill_sphere",
    "planet_hill_sphere",
    "binary_period",
    "planet_period",
    "blackbody_temperature",
    "barycentric_radii",
]
