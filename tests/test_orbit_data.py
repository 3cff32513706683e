import pytest

from galaxygen.engine.roll import Roll
from galaxygen.generation import orbit_data
from galaxygen.world.bodies import PlanetType
from galaxygen.world.zones import ZoneType


def test_asteroid_chance_per_zone() -> None:
    assert orbit_data.asteroid_belt_chance(ZoneType.INNER) == pytest.approx(0.05)
    assert orbit_data.asteroid_belt_chance(ZoneType.HABITABLE) == pytest.approx(0.01)
    assert orbit_data.asteroid_belt_chance(ZoneType.OUTER) == pytest.approx(0.15)
    assert orbit_data.asteroid_belt_chance(ZoneType.FAR_OUTER) == pytest.approx(0.20)
    assert orbit_data.asteroid_belt_chance(ZoneType.EPISTELLAR) == pytest.approx(0.10)
    assert orbit_data.asteroid_belt_chance(ZoneType.BEYOND) == pytest.approx(0.10)


@pytest.mark.parametrize(
    "zone,low,high",
    [
        (ZoneType.EPISTELLAR, 0.6 * 0.95, 18.0 * 1.05),
        (ZoneType.INNER, 0.3 * 0.95, 9.0 * 1.05),
        (ZoneType.HABITABLE, 0.8 * 0.95, 13.2 * 1.05),
        (ZoneType.OUTER, 27.5 * 0.95, 416.0 * 1.05),
        (ZoneType.FAR_OUTER, 0.2 * 0.95, 160.0 * 1.05),
        (ZoneType.BEYOND, 0.95, 1.05),
    ],
)
def test_mass_tables_bounds(zone: ZoneType, low: float, high: float) -> None:
    roll = Roll(40)
    for _ in range(500):
        mass = orbit_data.mass_for_zone(roll, zone)
        assert low <= mass <= high


def test_outer_zone_masses_are_giants_on_average() -> None:
    roll = Roll(41)
    outer = [orbit_data.mass_for_zone(roll, ZoneType.OUTER) for _ in range(300)]
    inner = [orbit_data.mass_for_zone(roll, ZoneType.INNER) for _ in range(300)]
    assert sum(outer) / len(outer) > 10 * sum(inner) / len(inner)


def test_moon_chance_tiers_and_stellar_scaling() -> None:
    assert orbit_data.moon_chance(150.0, 1.0) == pytest.approx(0.95 * 1.5)
    assert orbit_data.moon_chance(15.0, 2.0) == pytest.approx(0.8)
    assert orbit_data.moon_chance(3.0, 3.0) == pytest.approx(0.6 * 0.5)
    assert orbit_data.moon_chance(0.6, 10.0) == pytest.approx(0.4 * 0.5)
    assert orbit_data.moon_chance(0.2, 2.0) == pytest.approx(0.2)
    assert orbit_data.moon_chance(0.01, 2.0) == pytest.approx(0.05)


def test_eccentricity_ranges() -> None:
    roll = Roll(42)
    for _ in range(300):
        assert 0.1 <= orbit_data.eccentricity(roll, True) <= 0.3
        assert 0.01 <= orbit_data.eccentricity(roll, False) <= 0.5


def test_planet_eccentricity_mostly_low() -> None:
    roll = Roll(43)
    values = [orbit_data.eccentricity(roll, False) for _ in range(2000)]
    low = sum(1 for value in values if value <= 0.1)
    assert low / len(values) > 0.85


def test_inclination_ranges() -> None:
    roll = Roll(44)
    values = [orbit_data.inclination(roll) for _ in range(2000)]
    assert all(0.0 <= value <= 30.0 for value in values)
    assert sum(1 for value in values if value > 10.0) / len(values) < 0.1


def test_density_curve_with_noise() -> None:
    roll = Roll(45)
    for _ in range(200):
        assert 0.85 * 1.0 <= orbit_data.estimate_density(roll, 1.0, ZoneType.INNER) <= 1.15 * 1.0
        assert 0.85 * 0.95 <= orbit_data.estimate_density(roll, 1.0, ZoneType.EPISTELLAR) <= 1.15 * 0.95
        giant = 0.15 + 0.005 * 100.0
        assert 0.85 * giant * 1.1 <= orbit_data.estimate_density(roll, 100.0, ZoneType.FAR_OUTER) <= 1.15 * giant * 1.1


def test_water_content_by_zone() -> None:
    roll = Roll(46)
    assert orbit_data.water_content(roll, ZoneType.EPISTELLAR, 300.0) == 0.0
    assert orbit_data.water_content(roll, ZoneType.INNER, 700.0) == pytest.approx(0.05)
    assert 0.1 <= orbit_data.water_content(roll, ZoneType.INNER, 400.0) <= 0.4
    assert 0.5 <= orbit_data.water_content(roll, ZoneType.OUTER, 100.0) <= 0.9
    assert 0.7 <= orbit_data.water_content(roll, ZoneType.FAR_OUTER, 40.0) <= 0.95


def _classify(mass, density, zone, temperature, water=-1.0) -> PlanetType:
    return orbit_data.determine_planet_type(Roll(0), mass, density, zone, temperature, water)


def test_classification_small_bodies() -> None:
    assert _classify(0.005, 1.0, ZoneType.HABITABLE, 280.0) is PlanetType.ASTERIAN
    assert _classify(0.05, 1.0, ZoneType.HABITABLE, 280.0) is PlanetType.METIAN


def test_classification_extremes() -> None:
    assert _classify(1.0, 1.0, ZoneType.INNER, 1500.0) is PlanetType.VULCANIAN
    assert _classify(0.5, 0.9, ZoneType.EPISTELLAR, 500.0) is PlanetType.VULCANIAN
    assert _classify(6.0, 5.0, ZoneType.EPISTELLAR, 900.0) is PlanetType.CRONUSIAN
    assert _classify(1.5, 1.2, ZoneType.HABITABLE, 280.0) is PlanetType.LELANTIAN


def test_classification_giants() -> None:
    assert _classify(300.0, 0.4, ZoneType.INNER, 400.0) is PlanetType.HYPERION
    assert _classify(300.0, 0.4, ZoneType.HABITABLE, 280.0) is PlanetType.ATLANTEAN
    assert _classify(40.0, 0.3, ZoneType.HABITABLE, 280.0) is PlanetType.HYPERION
    assert _classify(40.0, 0.3, ZoneType.OUTER, 100.0) is PlanetType.ATLANTEAN
    assert _classify(25.0, 0.1, ZoneType.OUTER, 100.0) is PlanetType.HELIAN
    assert _classify(25.0, 0.3, ZoneType.OUTER, 100.0) is PlanetType.IAPETIAN
    assert _classify(15.0, 0.3, ZoneType.INNER, 400.0) is PlanetType.CRIUSIAN
    assert _classify(15.0, 0.3, ZoneType.OUTER, 100.0) is PlanetType.IAPETIAN


def test_classification_super_earths() -> None:
    assert _classify(3.0, 0.9, ZoneType.HABITABLE, 280.0, water=0.95) is PlanetType.OCEANIAN
    assert _classify(3.0, 0.9, ZoneType.HABITABLE, 280.0, water=0.3) is PlanetType.RHEAN
    assert _classify(3.0, 0.9, ZoneType.OUTER, 250.0) is PlanetType.THEIAN
    assert _classify(3.0, 0.9, ZoneType.OUTER, 90.0) is PlanetType.DIONEAN


def test_classification_terrestrials_by_water() -> None:
    assert _classify(1.0, 0.9, ZoneType.OUTER, 150.0) is PlanetType.PHOEBOAN
    assert _classify(1.0, 0.9, ZoneType.HABITABLE, 280.0, water=0.95) is PlanetType.OCEANIAN
    assert _classify(1.0, 0.9, ZoneType.HABITABLE, 280.0, water=0.7) is PlanetType.GAIAN
    assert _classify(1.0, 0.9, ZoneType.HABITABLE, 280.0, water=0.3) is PlanetType.TETHYSIAN
    assert _classify(1.0, 0.9, ZoneType.HABITABLE, 280.0, water=0.1) is PlanetType.PROMETHEAN
    assert _classify(1.0, 0.9, ZoneType.HABITABLE, 280.0, water=0.0) is PlanetType.MENOETIAN
    assert _classify(1.0, 0.9, ZoneType.INNER, 650.0) is PlanetType.PROMETHEAN


def test_classification_is_total() -> None:
    roll = Roll(47)
    for zone in ZoneType:
        for mass in (0.001, 0.05, 0.3, 1.0, 3.0, 12.0, 25.0, 40.0, 80.0, 400.0):
            for temperature in (40.0, 250.0, 800.0, 1500.0):
                density = orbit_data.estimate_density(roll, mass, zone)
                assert isinstance(
                    orbit_data.determine_planet_type(roll, mass, density, zone, temperature),
                    PlanetType,
                )


def test_planet_type_catalogue() -> None:
    assert len(PlanetType) == 19
