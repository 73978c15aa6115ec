import math

import pytest

from skatemechanics.utils import deg2rad, fmt, rad2deg, round_sig, safe_div


@pytest.mark.parametrize("value, sig, expected", [
    (0.434782, 3, 0.435),
    (1.20428, 4, 1.204),
    (-6.5262, 2, -6.5),
    (123456.0, 3, 123000.0),
    (0.000123456, 2, 0.00012),
])
def test_round_sig(value, sig, expected):
    assert round_sig(value, sig) == pytest.approx(expected)


@pytest.mark.parametrize("value", [0.0, math.nan, math.inf, -math.inf])
def test_round_sig_degenerate(value):
    assert round_sig(value) == 0.0


def test_fmt():
    assert fmt(0.434782) == "0.435"
    assert fmt(4.5) == "4.5"
    assert fmt(math.nan) == "0"
    assert fmt(-0.0) == "0"


def test_safe_div():
    assert safe_div(1.0, 4.0) == 0.25
    assert safe_div(1.0, 0.0) == 0.0
    assert safe_div(1.0, 1e-15, fallback=-1.0) == -1.0


def test_angle_conversion():
    assert deg2rad(180.0) == pytest.approx(math.pi)
    assert rad2deg(math.pi / 2) == pytest.approx(90.0)
