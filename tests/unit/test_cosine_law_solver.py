"""
Tests for the bidirectional Law-of-Cosines solver and the triangle-inequality helpers.
"""

import math

import pytest

from cosine_law_solver import (
    angle_from_sides,
    clamp_third_side,
    run_validation_suite,
    side_from_angle,
    third_side_range,
)


class TestSideFromAngle:
    def test_right_triangle(self) -> None:
        assert side_from_angle(3.0, 4.0, 90.0) == pytest.approx(5.0)

    def test_equilateral(self) -> None:
        assert side_from_angle(2.0, 2.0, 60.0) == pytest.approx(2.0)

    def test_zero_angle_clamps_to_zero(self) -> None:
        result = side_from_angle(5.0, 5.0, 0.0)
        assert result == 0.0
        assert not math.isnan(result)

    def test_negative_squared_side_clamps_to_zero(self) -> None:
        # Raw a^2 + b^2 - 2ab cos(0) rounds to about -7.1e-15 for these sides.
        a, b = 4.2636586502253655, 4.263658648169572
        assert a * a + b * b - 2.0 * a * b < 0.0
        result = side_from_angle(a, b, 0.0)
        assert not math.isnan(result)
        assert result == 0.0

    def test_straight_angle(self) -> None:
        assert side_from_angle(2.0, 3.0, 180.0) == pytest.approx(5.0)


class TestAngleFromSides:
    def test_right_triangle(self) -> None:
        assert angle_from_sides(3.0, 4.0, 5.0) == pytest.approx(90.0)

    def test_equilateral(self) -> None:
        assert angle_from_sides(7.0, 7.0, 7.0) == pytest.approx(60.0)

    def test_too_long_third_side_soft_fails_to_half_turn(self) -> None:
        assert angle_from_sides(1.0, 1.0, 5.0) == pytest.approx(180.0)

    def test_too_short_third_side_soft_fails_to_zero(self) -> None:
        assert angle_from_sides(3.0, 1.0, 1.0) == 0.0

    def test_zero_side_rejected(self) -> None:
        with pytest.raises(ValueError):
            angle_from_sides(0.0, 4.0, 3.0)

    @pytest.mark.parametrize("angle", [0.5, 30.0, 89.9, 120.0, 179.5])
    def test_round_trip(self, angle: float) -> None:
        a, b = 2.5, 6.0
        assert angle_from_sides(a, b, side_from_angle(a, b, angle)) == pytest.approx(angle, abs=1e-6)


class TestThirdSideRange:
    def test_range(self) -> None:
        lo, hi = third_side_range(3.0, 4.0)
        assert lo == pytest.approx(1.01)
        assert hi == pytest.approx(6.99)

    def test_symmetric_in_sides(self) -> None:
        assert third_side_range(4.0, 3.0) == pytest.approx(third_side_range(3.0, 4.0))

    def test_custom_margin(self) -> None:
        assert third_side_range(2.0, 2.0, margin=0.0) == (0.0, 4.0)

    def test_short_sides_collapse_to_midpoint(self) -> None:
        lo, hi = third_side_range(0.004, 0.004)
        assert lo == hi
        assert lo == pytest.approx(0.004)
        assert clamp_third_side(0.004, 0.004, 1.0) == pytest.approx(0.004)
        assert clamp_third_side(0.004, 0.004, 0.0) == pytest.approx(0.004)

    def test_non_positive_sides_rejected(self) -> None:
        with pytest.raises(ValueError):
            third_side_range(-1.0, 2.0)

    @pytest.mark.parametrize(
        "c, expected",
        [(0.2, 1.01), (5.0, 5.0), (9.0, 6.99)],
    )
    def test_clamp(self, c: float, expected: float) -> None:
        assert clamp_third_side(3.0, 4.0, c) == pytest.approx(expected)


def test_validation_suite_runs() -> None:
    assert run_validation_suite(random_trials=100, seed=11) >= 100
