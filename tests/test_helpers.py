import math

import pytest

from squaremat.helpers import fmod, power


@pytest.mark.parametrize(
    "num, scalar",
    [(7.0, 2), (7.0, -2), (-7.0, 2), (-7.0, -2), (9.5, 3), (1.0, 5), (0.0, 4)],
)
def test_fmod_matches_truncated_remainder(num, scalar):
    assert fmod(num, scalar) == pytest.approx(math.fmod(num, scalar))


@pytest.mark.parametrize("num", [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0])
def test_fmod_sign_follows_dividend(num):
    assert fmod(num, -2) >= 0
    assert fmod(-num, 2) <= 0


@pytest.mark.parametrize("num", [-3.0, 0.0, 4.0])
def test_fmod_by_zero_raises(num):
    with pytest.raises(ZeroDivisionError):
        fmod(num, 0)


def test_fmod_of_multiple_is_zero():
    assert fmod(12.0, 3) == 0


@pytest.mark.parametrize("num", [0.0, 2.5, -3.0, 7.0])
def test_power_zero_is_one(num):
    assert power(num, 0) == 1


@pytest.mark.parametrize("num, exponent", [(2.0, 5), (-3.0, 3), (1.5, 4), (10.0, 1)])
def test_power_matches_builtin(num, exponent):
    assert power(num, exponent) == pytest.approx(num**exponent)


@pytest.mark.parametrize("exponent", range(6))
def test_power_of_minus_one_alternates(exponent):
    assert power(-1, exponent) == (1 if exponent % 2 == 0 else -1)


def test_power_negative_exponent_gives_one():
    assert power(5.0, -2) == 1