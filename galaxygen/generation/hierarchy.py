"""Nested binary hierarchy construction and component aggregation."""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Union

from galaxygen.engine.logger import ChannelLogger, GenerationLogger
from galaxygen.engine.roll import Roll
from galaxygen.math.astro import AU_TO_SOLAR_RADIUS, barycentric_radii, binary_period
from galaxygen.world.star import Star
from galaxygen.world.system import BinaryPair, ComponentKind, ComponentRef, StarSystem

Component = Union[ComponentRef, str]

MIN_SAFE_SEPARATION_FACTOR = 2.5
LOW_MASS_RATIO = 0.2

# (upper roll bound, min factor, max factor); factors scale with cbrt(total mass).
SEPARATION_BUCKETS = (
    (2000, 0.0, 1.0),
    (6000, 1.0, 50.0),
    (9000, 50.0, 1000.0),
    (10000, 1000.0, 20000.0),
)
CLOSE_BINARY_FLOOR = 0.1


def component_property(
    system: StarSystem,
    component: Component,
    extractor: Callable[[Star], float],
    combiner: Callable[[float, float], float],
    log: Optional[ChannelLogger] = None,
) -> float:
    """Aggregate a star property over everything beneath ``component``.

    Plain string ids are looked up as a star first, then as a pair. Ids that
    resolve to nothing contribute 0.0.
    """

    if isinstance(component, str):
        if system.find_star(component) is not None:
            component = ComponentRef.star(component)
        elif system.find_binary_pair(component) is not None:
            component = ComponentRef.pair(component)
        else:
            if log is not None:
                log.warning("System %s has no component %s", system.id, component)
            return 0.0

    if component.kind is ComponentKind.STAR:
        star = system.find_star(component.id)
        if star is None:
            if log is not None:
                log.warning("System %s references missing star %s", system.id, component.id)
            return 0.0
        return extractor(star)

    pair = system.find_binary_pair(component.id)
    if pair is None:
        if log is not None:
            log.warning("System %s references missing pair %s", system.id, component.id)
        return 0.0
    return combiner(
        component_property(system, pair.primary, extractor, combiner, log),
        component_property(system, pair.secondary, extractor, combiner, log),
    )


def _sum(a: float, b: float) -> float:
    return a + b


def total_mass(system: StarSystem, component: Component, log: Optional[ChannelLogger] = None) -> float:
    return component_property(system, component, lambda star: star.mass, _sum, log)


def total_luminosity(system: StarSystem, component: Component, log: Optional[ChannelLogger] = None) -> float:
    return component_property(system, component, lambda star: star.luminosity, _sum, log)


def max_radius(system: StarSystem, component: Component, log: Optional[ChannelLogger] = None) -> float:
    return component_property(system, component, lambda star: star.radius, max, log)


def max_temperature(system: StarSystem, component: Component, log: Optional[ChannelLogger] = None) -> float:
    return component_property(system, component, lambda star: star.temperature, max, log)


def effective_temperature(system: StarSystem, component: Component, log: Optional[ChannelLogger] = None) -> float:
    """Luminosity-weighted mean temperature, 0.0 for a dark component."""

    luminosity = total_luminosity(system, component, log)
    if luminosity <= 0.0:
        return 0.0
    weighted = component_property(
        system, component, lambda star: star.temperature * star.luminosity, _sum, log
    )
    return weighted / luminosity


def pair_total_mass(system: StarSystem, pair: BinaryPair, log: Optional[ChannelLogger] = None) -> float:
    return total_mass(system, pair.primary, log) + total_mass(system, pair.secondary, log)


def pair_total_luminosity(system: StarSystem, pair: BinaryPair, log: Optional[ChannelLogger] = None) -> float:
    return total_luminosity(system, pair.primary, log) + total_luminosity(system, pair.secondary, log)


class HierarchyBuilder:
    """Organises a system's stars into nested binary pairs."""

    def __init__(self, roll: Roll, logger: Optional[GenerationLogger] = None) -> None:
        self._roll = roll
        self._log = (logger or GenerationLogger.quiet()).channel("hierarchy")

    def organize(self, system: StarSystem, stars: Optional[Sequence[Star]] = None) -> Optional[str]:
        """Build pairs for ``stars`` and return the root pair id, if any.

        Pairs are registered on ``system`` outermost first, so the root pair
        is always the first one created.
        """

        members = list(system.stars if stars is None else stars)
        if len(members) < 2:
            return None
        ordered = sorted(members, key=lambda star: star.mass, reverse=True)
        return self._organize_sorted(system, ordered)

    def _organize_sorted(self, system: StarSystem, stars: List[Star]) -> Optional[str]:
        if len(stars) < 2:
            return None

        primary = stars[0]
        pair = BinaryPair(
            id=f"{system.id}-P{len(system.binary_pairs) + 1}",
            system_id=system.id,
            primary=ComponentRef.star(primary.id),
            secondary=ComponentRef.star(stars[1].id),
        )
        system.add_binary_pair(pair)

        if len(stars) > 2:
            remainder = stars[1:]
            sub_root = self._organize_sorted(system, remainder)
            if sub_root is not None:
                pair.secondary = ComponentRef.pair(sub_root)
            else:
                pair.secondary = ComponentRef.star(remainder[0].id)

        primary_mass = total_mass(system, pair.primary, self._log)
        secondary_mass = total_mass(system, pair.secondary, self._log)
        pair.separation = self.separation(
            primary_mass,
            secondary_mass,
            max_radius(system, pair.primary, self._log),
            max_radius(system, pair.secondary, self._log),
        )
        pair.orbital_period = binary_period(pair.separation, primary_mass + secondary_mass)
        pair.primary_orbit_radius, pair.secondary_orbit_radius = barycentric_radii(
            pair.separation, primary_mass, secondary_mass
        )
        self._log.debug(
            "Pair %s: %s + %s at %.3f AU (period %.3f yr)",
            pair.id,
            pair.primary.id,
            pair.secondary.id,
            pair.separation,
            pair.orbital_period,
        )
        return pair.id

    def separation(self, mass1: float, mass2: float, radius1: float, radius2: float) -> float:
        """Draw a separation in AU for two components."""

        heavier = max(mass1, mass2)
        mass_ratio = min(mass1, mass2) / heavier if heavier > 0.0 else 1.0
        mass_factor = max(mass1 + mass2, 0.0) ** (1.0 / 3.0)
        min_safe = (radius1 + radius2) * MIN_SAFE_SEPARATION_FACTOR / AU_TO_SOLAR_RADIUS

        roll = self._roll.distribution()
        low, high = SEPARATION_BUCKETS[-1][1:]
        for bound, low_factor, high_factor in SEPARATION_BUCKETS:
            if roll < bound:
                low, high = low_factor, high_factor
                break
        minimum = low * mass_factor
        maximum = high * mass_factor
        if low == 0.0:
            minimum = CLOSE_BINARY_FLOOR
        if mass_ratio < LOW_MASS_RATIO:
            minimum *= 2.0
            maximum *= 2.0
        minimum = max(minimum, min_safe)
        maximum = max(maximum, minimum)
        return self._roll.uniform(minimum, maximum)


__all__ = [
    "HierarchyBuilder",
    "component_property",
    "total_mass",
    "total_luminosity",
    "max_radius",
    "max_temperature",
    "effective_temperature",
    "pair_total_mass",
    "pair_total_luminosity",
]
