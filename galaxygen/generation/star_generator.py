"""Default stellar attribute generator."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from galaxygen.engine.logger import ChannelLogger, GenerationLogger
from galaxygen.engine.roll import DISTRIBUTION_MAX, Roll
from galaxygen.math.astro import SUN_TEMPERATURE
from galaxygen.world.star import Star


@dataclass(frozen=True)
class SpectralRange:
    min_mass: float
    max_mass: float
    min_temperature: float
    max_temperature: float
    min_luminosity: float = 0.0
    max_luminosity: float = 0.0
    min_radius: float = 0.0
    max_radius: float = 0.0


# Cumulative thresholds on the 1..10000 distribution scale.
SPECTRAL_TYPE_DISTRIBUTION: Dict[float, str] = {
    428.66: "M",
    429.18: "L",
    429.49: "T",
    429.60: "Y",
    2816.0: "K",
    4875.84: "G",
    7216.23: "F",
    8909.36: "A",
    9850.73: "B",
    9874.73: "W",
    9898.73: "O",
    9925.85: "C",
    9978.0: "I",
    9998.86: "N",
    10000.0: "S",
}

SPECTRAL_RANGES: Dict[str, SpectralRange] = {
    "O": SpectralRange(16.0, 150.0, 30000.0, 50000.0),
    "B": SpectralRange(2.1, 16.0, 10000.0, 30000.0),
    "A": SpectralRange(1.4, 2.1, 7500.0, 10000.0),
    "F": SpectralRange(1.04, 1.4, 6000.0, 7500.0),
    "G": SpectralRange(0.8, 1.04, 5200.0, 6000.0),
    "K": SpectralRange(0.45, 0.8, 3700.0, 5200.0),
    "M": SpectralRange(0.08, 0.45, 2400.0, 3700.0),
    "I": SpectralRange(0.17, 1.4, 8000.0, 40000.0, 0.0001, 0.1, 0.01, 0.01),
    "W": SpectralRange(10.0, 50.0, 30000.0, 200000.0, 0.0, 0.0, 3.0, 20.0),
    "C": SpectralRange(0.8, 10.0, 2500.0, 5000.0, 0.0, 0.0, 25.0, 500.0),
    "L": SpectralRange(0.013, 0.08, 1300.0, 2400.0),
    "T": SpectralRange(0.004, 0.013, 800.0, 1300.0),
    "Y": SpectralRange(0.001, 0.004, 300.0, 800.0),
    "N": SpectralRange(1.4, 3.0, 500000.0, 3000000.0, 0.00001, 10.0, 0.00001, 0.00002),
    "S": SpectralRange(3.0, 100.0, 0.0, 0.0, 0.0, 0.0, 0.0001, 0.0001),
}

# Evolution stage odds for normal spectral types, cumulative on 1..10000.
LUMINOSITY_CLASS_DISTRIBUTIONS: Dict[str, Dict[float, str]] = {
    "O": {1650.0: "I", 2070.0: "II", 2800.0: "III", 3070.0: "IV", 10000.0: "V"},
    "B": {440.0: "I", 930.0: "II", 2100.0: "III", 3370.0: "IV", 10000.0: "V"},
    "A": {60.0: "I", 140.0: "II", 450.0: "III", 1290.0: "IV", 10000.0: "V"},
    "F": {60.0: "I", 130.0: "II", 320.0: "III", 1100.0: "IV", 10000.0: "V"},
    "G": {70.0: "I", 200.0: "II", 1770.0: "III", 2600.0: "IV", 10000.0: "V"},
    "K": {30.0: "I", 150.0: "II", 4140.0: "III", 4380.0: "IV", 10000.0: "V"},
    "M": {130.0: "I", 270.0: "II", 4430.0: "III", 4440.0: "IV", 10000.0: "V"},
}

DEFAULT_LUMINOSITY_CLASS = {
    "W": "I",
    "C": "III",
    "L": "V",
    "T": "V",
    "Y": "V",
    "I": "VII",
    "N": "",
    "S": "",
}

LUMINOSITY_CLASS_FACTOR = {"IV": 2.5, "III": 10.0, "II": 30.0, "I": 100.0}
RADIUS_CAP = {"I": 1500.0, "II": 500.0, "III": 200.0, "IV": 50.0}
MAIN_SEQUENCE_RADIUS_CAP = 20.0

# Remnants whose attributes come straight from their ranges.
DIRECT_RANGE_TYPES = ("I", "N", "S")
EXOTIC_TYPES = ("I", "W", "N", "S", "L", "T", "Y", "C")

HOT_TYPES = {"O": 3.0, "B": 3.0, "W": 3.0, "A": 1.5, "F": 1.5}
COOL_TYPES = {"M": 3.0, "K": 3.0, "L": 2.0, "T": 2.0, "Y": 2.0}


def spectral_table(mode: int) -> Dict[float, str]:
    """Spectral distribution for a preference mode (0 hot, 1 realistic, 2 cool)."""

    if mode == 1:
        return dict(SPECTRAL_TYPE_DISTRIBUTION)
    weights = HOT_TYPES if mode == 0 else COOL_TYPES
    shares: list[Tuple[str, float]] = []
    previous = 0.0
    for threshold in sorted(SPECTRAL_TYPE_DISTRIBUTION):
        spectral = SPECTRAL_TYPE_DISTRIBUTION[threshold]
        shares.append((spectral, (threshold - previous) * weights.get(spectral, 1.0)))
        previous = threshold
    total = sum(share for _, share in shares)
    table: Dict[float, str] = {}
    running = 0.0
    for spectral, share in shares:
        running += share
        table[running / total * DISTRIBUTION_MAX] = spectral
    return table


def luminosity_for(mass: float, spectral: str, luminosity_class: str) -> float:
    if spectral == "I":
        luminosity = mass * 0.001
    elif spectral == "W":
        luminosity = mass ** 3.0 * 1000.0
    elif spectral == "C":
        luminosity = mass ** 3.0 * 10.0
    elif spectral == "N":
        luminosity = 0.001
    elif spectral == "S":
        luminosity = 0.0
    elif spectral in ("O", "B"):
        luminosity = mass ** 3.5
    elif spectral in ("A", "F"):
        luminosity = mass ** 4.0
    elif spectral in ("G", "K"):
        luminosity = mass ** 4.5
    elif spectral == "M":
        luminosity = mass ** 2.3
    elif spectral in ("L", "T", "Y"):
        luminosity = mass * mass * 0.01
    else:
        luminosity = mass ** 3.5
    if spectral not in ("I", "W", "N", "S"):
        luminosity *= LUMINOSITY_CLASS_FACTOR.get(luminosity_class, 1.0)
    return luminosity


def radius_for(luminosity: float, temperature: float, luminosity_class: str) -> float:
    """Stefan-Boltzmann radius in solar radii, capped by evolution stage."""

    if temperature <= 0.0 or luminosity <= 0.0:
        return 0.0
    radius = math.sqrt(luminosity / (temperature / SUN_TEMPERATURE) ** 4)
    return min(radius, RADIUS_CAP.get(luminosity_class, MAIN_SEQUENCE_RADIUS_CAP))


class StarGenerator:
    """Rolls spectral type and physical attributes for new stars."""

    def __init__(self, roll: Roll, spectral_mode: int = 1, logger: Optional[GenerationLogger] = None) -> None:
        self._roll = roll
        self._table = spectral_table(spectral_mode)
        self._log: ChannelLogger = (logger or GenerationLogger.quiet()).channel("system")

    def generate(self, star_id: str, system_id: str) -> Star:
        spectral = self._roll.seek(self._table)
        star_range = SPECTRAL_RANGES[spectral]
        subclass = self._roll.dice(1, 10) - 1
        luminosity_class = self._luminosity_class(spectral)

        if spectral in DIRECT_RANGE_TYPES:
            mass = self._roll.uniform(star_range.min_mass, star_range.max_mass)
            temperature = self._roll.uniform(star_range.min_temperature, star_range.max_temperature)
            luminosity = self._roll.uniform(star_range.min_luminosity, star_range.max_luminosity)
            if star_range.min_radius == star_range.max_radius:
                radius = star_range.min_radius
            else:
                radius = self._roll.uniform(star_range.min_radius, star_range.max_radius)
        else:
            position = subclass / 9.0
            if spectral in EXOTIC_TYPES:
                mass = self._roll.uniform(star_range.min_mass, star_range.max_mass)
            else:
                mass = star_range.min_mass + (1.0 - position) * (star_range.max_mass - star_range.min_mass)
                mass = max(star_range.min_mass, min(mass, star_range.max_mass))
            temperature = star_range.max_temperature - position * (
                star_range.max_temperature - star_range.min_temperature
            )
            luminosity = luminosity_for(mass, spectral, luminosity_class)
            radius = radius_for(luminosity, temperature, luminosity_class)
            if star_range.max_radius > 0.0:
                radius = max(star_range.min_radius, min(radius, star_range.max_radius))

        star = Star(
            id=star_id,
            system_id=system_id,
            spectral_class=spectral,
            subclass=subclass,
            luminosity_class=luminosity_class,
            mass=mass,
            radius=self._roll.vary(radius, 0.05),
            luminosity=self._roll.vary(luminosity, 0.1),
            temperature=self._roll.vary(temperature, 0.05),
        )
        self._log.debug("Star %s rolled as %s (%.3f Msun)", star.id, star.designation, star.mass)
        return star

    def _luminosity_class(self, spectral: str) -> str:
        table = LUMINOSITY_CLASS_DISTRIBUTIONS.get(spectral)
        if table is None:
            return DEFAULT_LUMINOSITY_CLASS.get(spectral, "V")
        return self._roll.seek(table)


__all__ = [
    "StarGenerator",
    "SpectralRange",
    "SPECTRAL_TYPE_DISTRIBUTION",
    "SPECTRAL_RANGES",
    "spectral_table",
    "luminosity_for",
    "radius_for",
]
