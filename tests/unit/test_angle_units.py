"""
Tests for degree/radian conversion and display rounding.
"""

import math

import pytest

from angle_units import round_to, to_degrees, to_radians


class TestConversion:
    def test_half_turn(self) -> None:
        assert to_degrees(math.pi) == pytest.approx(180.0)
        assert to_radians(180.0) == pytest.approx(math.pi)

    def test_negative_angles(self) -> None:
        assert to_degrees(-math.pi / 2) == pytest.approx(-90.0)
        assert to_radians(-45.0) == pytest.approx(-math.pi / 4)

    @pytest.mark.parametrize("deg", [-720.0, -135.0, 0.0, 1e-9, 33.3, 360.0])
    def test_inverse_pair(self, deg: float) -> None:
        assert to_degrees(to_radians(deg)) == pytest.approx(deg, abs=1e-9)


class TestRoundTo:
    def test_default_two_decimals(self) -> None:
        assert round_to(3.14159) == 3.14
        assert round_to(2.71828) == 2.72

    def test_custom_decimals(self) -> None:
        assert round_to(3.14159, 3) == 3.142
        assert round_to(7.6, 0) == 8.0

    def test_negative_values(self) -> None:
        assert round_to(-3.14159) == -3.14
        assert round_to(-2.71828) == -2.72

    def test_halves_round_toward_positive_infinity(self) -> None:
        assert round_to(2.5, 0) == 3.0
        assert round_to(-2.5, 0) == -2.0
        assert round_to(0.5, 0) == 1.0
        assert round_to(-0.5, 0) == 0.0

    def test_no_signed_zero(self) -> None:
        result = round_to(-0.001)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0
        assert math.copysign(1.0, round_to(-0.0)) == 1.0

    def test_large_values_do_not_overflow(self) -> None:
        assert round_to(1e307) == 1e307
        assert round_to(-1.7976931348623157e308) == -1.7976931348623157e308
        assert round_to(1e300, 10) == 1e300

    def test_extreme_decimals(self) -> None:
        assert round_to(1.5, 400) == 1.5
        assert round_to(123.0, -400) == 0.0

    def test_non_finite_passthrough(self) -> None:
        assert round_to(math.inf) == math.inf
        assert math.isnan(round_to(math.nan))
