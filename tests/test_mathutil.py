import random

import pytest

from flaggame.mathutil import distance, rand_below, two_digits


def test_rand_below_zero_limit_gives_zero():
    assert rand_below(0, random.Random(1)) == 0


@pytest.mark.parametrize("limit", [1, 5, 37, -12])
def test_rand_below_stays_in_range(limit):
    rng = random.Random(42)
    values = [rand_below(limit, rng) for _ in range(200)]
    assert all(0 <= v < abs(limit) for v in values)


def test_rand_below_limit_one_always_zero():
    rng = random.Random(3)
    assert {rand_below(1, rng) for _ in range(20)} == {0}


def test_rand_below_is_repeatable_with_same_seed():
    first = [rand_below(100, random.Random(7)) for _ in range(5)]
    second = [rand_below(100, random.Random(7)) for _ in range(5)]
    assert first == second


def test_rand_below_default_source_in_range():
    assert 0 <= rand_below(10) < 10


@pytest.mark.parametrize("value", [0, 7, 1234, 98765, 123456, 99999999])
def test_two_digits_reassemble_value(value):
    low = two_digits(value, 1)
    mid = two_digits(value, 100)
    high = two_digits(value, 10000)
    assert all(0 <= part < 100 for part in (low, mid, high))
    assert low + 100 * mid + 10000 * high == value % 1000000


def test_two_digits_known_value():
    assert two_digits(123456, 100) == 34


def test_two_digits_negative_keeps_sign():
    assert two_digits(-123456, 1) == -two_digits(123456, 1)
    assert two_digits(-123456, 100) == -two_digits(123456, 100)


def test_two_digits_zero_step_raises():
    with pytest.raises(ZeroDivisionError):
        two_digits(10, 0)


def test_distance_pythagorean():
    assert distance(3, 4) == 5


def test_distance_truncates():
    assert distance(1, 1) == 1


@pytest.mark.parametrize("a,b", [(0, 0), (7, 0), (-9, 0), (12, -5), (100, 250)])
def test_distance_properties(a, b):
    d = distance(a, b)
    assert d == distance(b, a) == distance(-a, -b)
    assert d * d <= a * a + b * b < (d + 1) * (d + 1)
    if b == 0:
        assert d == abs(a)