import math

import pytest
from pygame.math import Vector3

from galaxygen.engine.roll import Roll
from galaxygen.generation.hierarchy import (
    HierarchyBuilder,
    component_property,
    effective_temperature,
    max_radius,
    total_luminosity,
    total_mass,
)
from galaxygen.world.star import Star
from galaxygen.world.system import BinaryPair, ComponentKind, ComponentRef, StarSystem


def _system(*masses: float) -> StarSystem:
    system = StarSystem("SYS", "SEC", Vector3())
    for index, mass in enumerate(masses):
        system.add_star(
            Star(
                id=f"SYS-S{index + 1}",
                system_id=system.id,
                mass=mass,
                radius=mass,
                luminosity=mass ** 4,
                temperature=5000.0 + 100.0 * index,
            )
        )
    return system


def _descendant_stars(system: StarSystem, ref: ComponentRef) -> list:
    return [star.id for star in system.stars_in(ref)]


def test_single_star_has_no_pairs() -> None:
    system = _system(1.0)
    assert HierarchyBuilder(Roll(1)).organize(system) is None
    assert system.binary_pairs == []
    assert HierarchyBuilder(Roll(1)).organize(_system()) is None


def test_two_stars_form_one_pair_with_heavier_primary() -> None:
    system = _system(0.5, 1.2)
    root = HierarchyBuilder(Roll(2)).organize(system)
    assert root == "SYS-P1"
    pair = system.find_binary_pair(root)
    assert pair.primary == ComponentRef.star("SYS-S2")
    assert pair.secondary == ComponentRef.star("SYS-S1")
    assert pair.separation > 0.0
    assert pair.orbital_period == pytest.approx(math.sqrt(pair.separation ** 3 / 1.7))


def test_orbit_radii_split_by_inverse_mass_ratio() -> None:
    system = _system(3.0, 1.0)
    pair = system.find_binary_pair(HierarchyBuilder(Roll(3)).organize(system))
    assert pair.primary_orbit_radius == pytest.approx(pair.separation * 0.25)
    assert pair.secondary_orbit_radius == pytest.approx(pair.separation * 0.75)
    assert pair.primary_orbit_radius + pair.secondary_orbit_radius == pytest.approx(pair.separation)


def test_three_stars_nest_remaining_pair() -> None:
    system = _system(1.0, 3.0, 0.5)
    root_id = HierarchyBuilder(Roll(4)).organize(system)
    assert len(system.binary_pairs) == 2
    root = system.binary_pairs[0]
    assert root.id == root_id
    assert root.primary == ComponentRef.star("SYS-S2")
    assert root.secondary.kind is ComponentKind.BINARY_PAIR
    inner = system.find_binary_pair(root.secondary.id)
    assert inner.primary == ComponentRef.star("SYS-S1")
    assert inner.secondary == ComponentRef.star("SYS-S3")
    assert root.orbital_period == pytest.approx(math.sqrt(root.separation ** 3 / 4.5))


@pytest.mark.parametrize("count", [2, 3, 4, 6, 10])
def test_every_star_appears_exactly_once_and_pairs_cover_two_or_more(count: int) -> None:
    system = _system(*[0.2 + 0.3 * index for index in range(count)])
    root_id = HierarchyBuilder(Roll(count)).organize(system)
    assert len(system.binary_pairs) == count - 1
    star_refs = [
        ref.id
        for pair in system.binary_pairs
        for ref in pair.components()
        if ref.kind is ComponentKind.STAR
    ]
    assert sorted(star_refs) == sorted(star.id for star in system.stars)
    assert sorted(_descendant_stars(system, ComponentRef.pair(root_id))) == sorted(
        star.id for star in system.stars
    )
    for pair in system.binary_pairs:
        assert len(_descendant_stars(system, ComponentRef.pair(pair.id))) >= 2


def test_pair_references_resolve_within_system() -> None:
    system = _system(1.0, 2.0, 3.0, 0.4)
    HierarchyBuilder(Roll(8)).organize(system)
    for pair in system.binary_pairs:
        for ref in pair.components():
            assert system.resolve(ref) is not None


def test_hierarchy_is_deterministic() -> None:
    first = _system(1.0, 2.0, 0.7)
    second = _system(1.0, 2.0, 0.7)
    HierarchyBuilder(Roll(77)).organize(first)
    HierarchyBuilder(Roll(77)).organize(second)
    assert [pair.to_dict() for pair in first.binary_pairs] == [pair.to_dict() for pair in second.binary_pairs]


def test_component_property_aggregates_recursively() -> None:
    system = _system(1.0, 3.0, 0.5)
    root = HierarchyBuilder(Roll(5)).organize(system)
    ref = ComponentRef.pair(root)
    assert total_mass(system, ref) == pytest.approx(4.5)
    assert max_radius(system, ref) == pytest.approx(3.0)
    assert total_luminosity(system, ref) == pytest.approx(1.0 + 81.0 + 0.0625)
    assert component_property(system, root, lambda star: 1.0, lambda a, b: a + b) == pytest.approx(3.0)
    assert total_mass(system, "SYS-S1") == pytest.approx(1.0)


def test_missing_component_contributes_zero() -> None:
    system = _system(1.0, 2.0)
    system.add_binary_pair(
        BinaryPair(
            id="SYS-PX",
            system_id=system.id,
            primary=ComponentRef.star("SYS-S1"),
            secondary=ComponentRef.star("SYS-S9"),
        )
    )
    assert total_mass(system, ComponentRef.pair("SYS-PX")) == pytest.approx(1.0)
    assert total_mass(system, ComponentRef.pair("SYS-P404")) == 0.0
    assert total_mass(system, "unknown") == 0.0


def test_effective_temperature_is_luminosity_weighted() -> None:
    system = _system(1.0, 2.0)
    root = HierarchyBuilder(Roll(6)).organize(system)
    expected = (5000.0 * 1.0 + 5100.0 * 16.0) / 17.0
    assert effective_temperature(system, ComponentRef.pair(root)) == pytest.approx(expected)


def test_separation_respects_minimum_safe_distance() -> None:
    builder = HierarchyBuilder(Roll(9))
    for _ in range(200):
        separation = builder.separation(1.0, 1.0, 400.0, 300.0)
        assert separation >= (700.0 * 2.5 / 215.032) - 1e-9


def test_separation_ranges_scale_with_mass() -> None:
    builder = HierarchyBuilder(Roll(10))
    samples = [builder.separation(1.0, 1.0, 1.0, 1.0) for _ in range(500)]
    mass_factor = 2.0 ** (1.0 / 3.0)
    assert min(samples) >= 0.1
    assert max(samples) <= 20000.0 * mass_factor
