from galaxygen.engine.roll import DISTRIBUTION_MAX, Roll, hash_seed


def test_same_seed_replays_sequence() -> None:
    a = Roll(42)
    b = Roll(42)
    first = [a.uniform(0.0, 1.0), a.dice(3, 6), a.distribution(), a.vary(10.0)]
    second = [b.uniform(0.0, 1.0), b.dice(3, 6), b.distribution(), b.vary(10.0)]
    assert first == second


def test_reseed_restarts_stream() -> None:
    roll = Roll(7)
    values = [roll.uniform(0.0, 1.0) for _ in range(5)]
    roll.seed(7)
    assert [roll.uniform(0.0, 1.0) for _ in range(5)] == values
    assert roll.seed_value == 7


def test_dice_bounds_and_modifier() -> None:
    roll = Roll(1)
    for _ in range(200):
        value = roll.dice(2, 6, 3)
        assert 5 <= value <= 15
    assert roll.dice(0, 6) == 0
    assert roll.dice(2, 0, 5) == 0


def test_distribution_range() -> None:
    roll = Roll(3)
    values = [roll.distribution() for _ in range(2000)]
    assert min(values) >= 1
    assert max(values) <= DISTRIBUTION_MAX


def test_vary_stays_within_factor() -> None:
    roll = Roll(5)
    for _ in range(200):
        value = roll.vary(100.0, 0.1)
        assert 90.0 <= value <= 110.0


def test_chance_matches_uniform_threshold() -> None:
    roll = Roll(9)
    replay = Roll(9)
    for _ in range(200):
        assert roll.chance(0.3) == (replay.uniform(0.0, 1.0) <= 0.3)
    assert all(Roll(10).chance(1.0) for _ in range(50))


def test_seek_picks_first_threshold_at_or_above_roll() -> None:
    roll = Roll(11)
    table = {5000: "low", 10000: "high"}
    for _ in range(200):
        assert roll.seek(table) in ("low", "high")
    assert Roll(0).seek({10000: "only"}) == "only"


def test_seek_matches_distribution_roll() -> None:
    expected_roll = Roll(99).distribution()
    result = Roll(99).seek({2500: "a", 5000: "b", 7500: "c", 10000: "d"})
    expected = "a" if expected_roll <= 2500 else "b" if expected_roll <= 5000 else "c" if expected_roll <= 7500 else "d"
    assert result == expected


def test_hash_seed_is_stable_and_distinct() -> None:
    assert hash_seed(1, 0, 0, 0) == hash_seed(1, 0, 0, 0)
    assert hash_seed(1, 0, 0, 0) != hash_seed(1, 0, 0, 1)
    assert 0 <= hash_seed("x") < 2 ** 64
