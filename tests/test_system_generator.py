import pytest
from pygame.math import Vector3

from galaxygen.engine.roll import Roll
from galaxygen.generation.system_generator import CLOSE_BINARY_SEPARATION, STAR_COUNT_DISTRIBUTION, SystemGenerator
from galaxygen.generation.zones import ZoneCalculator
from galaxygen.world.star import Star
from galaxygen.world.system import BinaryPair, ComponentKind, ComponentRef, StarSystem
from galaxygen.world.zones import OrbitalZones


def _star(star_id: str, mass: float, luminosity: float = 1.0) -> Star:
    return Star(id=star_id, system_id="SYS", mass=mass, radius=1.0, luminosity=luminosity, temperature=5778.0)


def _pair_system(separation: float) -> StarSystem:
    system = StarSystem("SYS", "SEC", Vector3())
    system.add_star(_star("SYS-S1", 1.0))
    system.add_star(_star("SYS-S2", 0.8, 0.5))
    system.add_binary_pair(
        BinaryPair(
            id="SYS-P1",
            system_id="SYS",
            primary=ComponentRef.star("SYS-S1"),
            secondary=ComponentRef.star("SYS-S2"),
            separation=separation,
        )
    )
    system.root_pair_id = "SYS-P1"
    return system


def test_star_count_distribution_is_cumulative() -> None:
    keys = sorted(STAR_COUNT_DISTRIBUTION)
    assert keys[-1] == 10000
    assert [STAR_COUNT_DISTRIBUTION[key] for key in keys] == list(range(1, 11))


def test_close_binary_uses_combined_star_zones() -> None:
    system = _pair_system(2.0)
    SystemGenerator(Roll(1)).assign_zones(system)
    pair = system.find_binary_pair("SYS-P1")
    combined = Star(id="C", system_id="SYS", mass=1.8, radius=1.0, luminosity=1.5, temperature=5778.0)
    expected = ZoneCalculator().zones_for_star(combined)
    assert pair.circumbinary_zones.to_dict() == pytest.approx(expected.to_dict())
    primary = system.find_star("SYS-S1")
    assert primary.zones.system_limit == pytest.approx(0.6)
    assert not primary.zones.habitable_zone_available


def test_wide_binary_uses_pair_zones_and_interference() -> None:
    system = _pair_system(40.0)
    SystemGenerator(Roll(2)).assign_zones(system)
    pair = system.find_binary_pair("SYS-P1")
    assert pair.circumbinary_zones.epistellar_inner == pytest.approx(120.0)
    assert pair.circumbinary_zones.epistellar_outer == pytest.approx(160.0)
    for star in system.stars:
        assert star.zones.system_limit == pytest.approx(12.0)
    assert system.find_star("SYS-S1").zones.habitable_zone_available


def test_deep_hierarchy_uses_flat_estimate() -> None:
    system = StarSystem("SYS", "SEC", Vector3())
    for index, mass in enumerate((3.0, 1.0, 0.5)):
        system.add_star(_star(f"SYS-S{index + 1}", mass))
    generator = SystemGenerator(Roll(3))
    system.root_pair_id = generator.hierarchy.organize(system)
    generator.assign_zones(system)
    root = system.root_binary_pair()
    assert root.secondary.kind is ComponentKind.BINARY_PAIR
    assert root.circumbinary_zones.system_limit == pytest.approx(root.separation * 5.0)
    assert root.circumbinary_zones.habitable_zone_inner == OrbitalZones.UNAVAILABLE
    assert root.circumbinary_zones.habitable_zone_outer == OrbitalZones.UNAVAILABLE


def test_missing_star_reference_degrades_without_raising() -> None:
    system = StarSystem("SYS", "SEC", Vector3())
    system.add_star(_star("SYS-S1", 1.0))
    system.add_binary_pair(
        BinaryPair(
            id="SYS-P1",
            system_id="SYS",
            primary=ComponentRef.star("SYS-S1"),
            secondary=ComponentRef.star("SYS-S404"),
            separation=50.0,
        )
    )
    generator = SystemGenerator(Roll(4))
    generator.assign_zones(system)
    generator.populate_orbits(system)
    pair = system.find_binary_pair("SYS-P1")
    assert pair.circumbinary_orbits == []
    assert system.find_star("SYS-S1").zones.system_limit == pytest.approx(15.0)


def test_generate_builds_consistent_system() -> None:
    for seed in range(40):
        system = StarSystem(f"SYS{seed}", "SEC", Vector3())
        SystemGenerator(Roll(seed)).generate(system)
        assert 1 <= len(system.stars) <= 10
        assert len(system.binary_pairs) == len(system.stars) - 1
        if len(system.stars) == 1:
            assert system.root_pair_id is None
        else:
            assert system.root_pair_id == system.binary_pairs[0].id
        for index, star in enumerate(system.stars):
            assert star.id == f"SYS{seed}-S{index + 1}"
            assert star.system_id == system.id
            assert len(star.planets) + len(star.asteroid_belts) == len(star.orbits)
        for pair in system.binary_pairs:
            assert len(pair.planets) + len(pair.asteroid_belts) == len(pair.circumbinary_orbits)


def test_generate_is_deterministic() -> None:
    first = StarSystem("SYS", "SEC", Vector3(1.0, 2.0, 3.0))
    second = StarSystem("SYS", "SEC", Vector3(1.0, 2.0, 3.0))
    SystemGenerator(Roll(123)).generate(first)
    SystemGenerator(Roll(123)).generate(second)
    assert first.to_dict() == second.to_dict()


def test_single_star_gets_isolated_orbits() -> None:
    system = StarSystem("SYS", "SEC", Vector3())
    star = _star("SYS-S1", 1.0)
    system.add_star(star)
    generator = SystemGenerator(Roll(5))
    generator.assign_zones(system)
    generator.populate_orbits(system)
    assert all(orbit.distance <= 36.0 for orbit in star.orbits)
    for planet in star.planets:
        assert planet.host_id == "SYS-S1"
        assert planet.id.startswith("SYS-S1-P")


def test_close_binary_threshold() -> None:
    assert CLOSE_BINARY_SEPARATION == 10.0


def test_primary_star_is_most_massive_and_heads_root_pair() -> None:
    system = StarSystem("SYS", "SEC", Vector3())
    for index, mass in enumerate((0.5, 3.0, 1.0)):
        system.add_star(_star(f"SYS-S{index + 1}", mass))
    assert system.primary_star.id == "SYS-S2"
    system.root_pair_id = SystemGenerator(Roll(4)).hierarchy.organize(system)
    assert system.root_binary_pair().primary == ComponentRef.star("SYS-S2")
    assert StarSystem("EMPTY", "SEC", Vector3()).primary_star is None
