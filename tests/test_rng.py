import pytest

from tinkerkit.game.rng import URandom, seed, urand


def test_same_seed_gives_same_sequence():
    first = URandom(42)
    second = URandom(42)
    assert [first.between(0, 100) for _ in range(50)] == [
        second.between(0, 100) for _ in range(50)
    ]


def test_reseed_restarts_sequence():
    rng = URandom(9)
    before = [rng.below(1000) for _ in range(20)]
    rng.reseed(9)
    after = [rng.below(1000) for _ in range(20)]
    assert before == after


def test_between_stays_within_bounds():
    rng = URandom(1)
    draws = [rng.between(3, 8) for _ in range(500)]
    assert min(draws) >= 3
    assert max(draws) <= 8


def test_between_includes_both_ends():
    rng = URandom(5)
    assert {rng.between(1, 2) for _ in range(300)} == {1, 2}


def test_between_single_value():
    rng = URandom(3)
    assert rng.between(5, 5) == 5


def test_below_zero_limit_is_zero():
    assert URandom(0).below(0) == 0


def test_below_stays_under_limit():
    rng = URandom(11)
    assert all(0 <= rng.below(4) < 4 for _ in range(200))


def test_below_negative_limit_raises():
    with pytest.raises(ValueError):
        URandom(0).below(-1)


def test_between_reversed_range_raises():
    with pytest.raises(ValueError):
        URandom(0).between(3, 2)


def test_module_urand_is_reproducible_after_seed():
    seed(7)
    first = [urand(0, 1000) for _ in range(30)]
    seed(7)
    second = [urand(0, 1000) for _ in range(30)]
    assert first == second
    assert all(0 <= value <= 1000 for value in first)