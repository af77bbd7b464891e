import pytest

from novakit.randomness import RandomDevice


def test_random_int_is_inclusive():
    rd = RandomDevice(seed=1)
    seen = {rd.random_int(0, 1) for _ in range(200)}
    assert seen == {0, 1}


def test_random_int_within_bounds():
    rd = RandomDevice(seed=2)
    assert all(-3 <= rd.random_int(-3, 3) <= 3 for _ in range(300))


def test_random_float_within_bounds():
    rd = RandomDevice(seed=3)
    assert all(-1.5 <= rd.random_float(-1.5, 2.5) <= 2.5 for _ in range(300))


def test_random_index_for_string_and_list():
    rd = RandomDevice(seed=4)
    assert all(0 <= rd.random_index("abc") <= 2 for _ in range(100))
    assert all(0 <= rd.random_index([10, 20]) <= 1 for _ in range(100))


def test_random_index_empty_raises():
    with pytest.raises(ValueError):
        RandomDevice().random_index([])


def test_random_item_is_member():
    rd = RandomDevice(seed=5)
    items = ["a", "b", "c"]
    assert all(rd.random_item(items) in items for _ in range(50))


def test_shuffle_length_and_membership():
    rd = RandomDevice(seed=6)
    source = [1, 2, 3, 4, 5]
    values = ["x", "y"]
    result = rd.shuffle(source, values)
    assert len(result) == len(source)
    assert set(result) <= set(values)


def test_seed_reproducible():
    a = RandomDevice(seed=42)
    b = RandomDevice(seed=42)
    assert [a.random_int(0, 100) for _ in range(20)] == [
        b.random_int(0, 100) for _ in range(20)
    ]