"""Orbital zone boundaries for stars and binary pairs."""
from __future__ import annotations

import math
from typing import Optional

from galaxygen.engine.logger import GenerationLogger
from galaxygen.math.astro import SOLAR_RADIUS_TO_AU, SUN_TEMPERATURE, roche_limit_au
from galaxygen.world.star import Star
from galaxygen.world.system import BinaryPair, StarSystem
from galaxygen.world.zones import OrbitalZones
from galaxygen.generation.hierarchy import pair_total_luminosity, pair_total_mass

RADIATION_FLOOR = 0.01
HABITABLE_INNER = 0.95
HABITABLE_OUTER = 1.37
FROST_LINE = 4.85
SYSTEM_LIMIT_SCALE = 50.0
INTERFERENCE_FACTOR = 0.3
DEEP_HIERARCHY_LIMIT_FACTOR = 5.0


def _ordered(zones: OrbitalZones) -> OrbitalZones:
    """Raise each boundary to at least the one before it."""

    zones.epistellar_outer = max(zones.epistellar_outer, zones.epistellar_inner)
    zones.inner_zone_start = max(zones.inner_zone_start, zones.epistellar_outer)
    zones.habitable_zone_inner = max(zones.habitable_zone_inner, zones.inner_zone_start)
    zones.habitable_zone_outer = max(zones.habitable_zone_outer, zones.habitable_zone_inner)
    zones.frost_line = max(zones.frost_line, zones.habitable_zone_outer)
    zones.system_limit = max(zones.system_limit, zones.frost_line)
    return zones


class ZoneCalculator:
    """Computes and adjusts ``OrbitalZones``."""

    def __init__(self, logger: Optional[GenerationLogger] = None) -> None:
        logger = logger or GenerationLogger.quiet()
        self._log = logger.channel("zones")
        self._hierarchy_log = logger.channel("hierarchy")

    def zones_for_star(self, star: Star) -> OrbitalZones:
        root_luminosity = math.sqrt(max(star.luminosity, 0.0))
        epistellar_outer = star.radius * SOLAR_RADIUS_TO_AU
        temperature_scale = math.sqrt(max(star.temperature, 0.0) / SUN_TEMPERATURE)
        zones = OrbitalZones(
            epistellar_inner=max(
                roche_limit_au(star.mass, 0.0, star.radius),
                RADIATION_FLOOR * root_luminosity,
            ),
            epistellar_outer=epistellar_outer,
            inner_zone_start=epistellar_outer,
            habitable_zone_inner=HABITABLE_INNER * root_luminosity,
            habitable_zone_outer=HABITABLE_OUTER * root_luminosity,
            frost_line=FROST_LINE * root_luminosity,
            system_limit=SYSTEM_LIMIT_SCALE * max(star.mass, 0.0) ** (1.0 / 3.0) * temperature_scale,
        )
        return _ordered(zones)

    def zones_for_pair(self, pair: BinaryPair, system: StarSystem) -> OrbitalZones:
        """Circumbinary zones around a wide pair's barycentre."""

        separation = pair.separation
        luminosity = pair_total_luminosity(system, pair, self._hierarchy_log)
        mass = pair_total_mass(system, pair, self._hierarchy_log)
        root_luminosity = math.sqrt(max(luminosity, 0.0))
        epistellar_outer = separation * 4.0
        zones = OrbitalZones(
            epistellar_inner=separation * 3.0,
            epistellar_outer=epistellar_outer,
            inner_zone_start=epistellar_outer,
            habitable_zone_inner=max(HABITABLE_INNER * root_luminosity, epistellar_outer),
            habitable_zone_outer=HABITABLE_OUTER * root_luminosity,
            frost_line=FROST_LINE * root_luminosity,
            system_limit=separation * 0.2 * min(100.0, max(mass, 0.0) ** (1.0 / 3.0)),
        )
        return zones

    def zones_for_hierarchy(self, separation: float) -> OrbitalZones:
        """Flat estimate used when a pair wraps another pair."""

        zones = OrbitalZones(system_limit=separation * DEEP_HIERARCHY_LIMIT_FACTOR)
        zones.mark_habitable_unavailable()
        return zones

    def adjust_for_interference(self, zones: OrbitalZones, companion_distance: float) -> OrbitalZones:
        """Clamp zones that a companion at ``companion_distance`` would disrupt."""

        limit = INTERFERENCE_FACTOR * companion_distance
        zones.system_limit = min(zones.system_limit, limit)
        if limit < zones.frost_line:
            zones.frost_line = limit
        if zones.habitable_zone_available:
            if limit < zones.habitable_zone_outer:
                zones.habitable_zone_outer = limit
            if limit < zones.habitable_zone_inner:
                zones.mark_habitable_unavailable()
                self._log.debug("Companion at %.3f AU removes the habitable zone", companion_distance)
        return zones


__all__ = ["ZoneCalculator"]
