"""
Law of Cosines in both directions.

For a triangle with sides a, b enclosing the angle C, the opposite side c obeys

    c^2 = a^2 + b^2 - 2ab * cos(C).

``side_from_angle`` evaluates it forward; ``angle_from_sides`` inverts it through

    cos(C) = (a^2 + b^2 - c^2) / (2ab).

Both directions absorb floating-point drift at the boundary instead of failing:
c^2 is clamped to >= 0 before the square root (C = 0° or 180°), and cos(C) is
clamped to [-1, 1] before ``acos``.  Side lengths that violate the triangle
inequality |a - b| < c < a + b therefore still produce 0° or 180° rather than an
error.  Keeping c in range is the caller's job; ``third_side_range`` and
``clamp_third_side`` give the interval a slider should be limited to.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from angle_units import to_degrees, to_radians


TRIANGLE_MARGIN = 0.01
ANGLE_TOL = 1e-6


def side_from_angle(a: float, b: float, angle_c: float) -> float:
    """
    Length of the side opposite ``angle_c`` (degrees), given the two enclosing sides.

    Example:
        >>> side_from_angle(3.0, 4.0, 90.0)
        5.0
    """

    c_sq = a * a + b * b - 2.0 * a * b * math.cos(to_radians(angle_c))
    return math.sqrt(max(0.0, c_sq))


def angle_from_sides(a: float, b: float, c: float) -> float:
    """
    Angle opposite ``c`` in degrees, in [0°, 180°].

    Raises:
        ValueError: when ``a`` or ``b`` is zero, which leaves the angle undefined.
    """

    if a == 0 or b == 0:
        raise ValueError("Sides a and b must be nonzero to define the enclosed angle.")
    cos_c = (a * a + b * b - c * c) / (2.0 * a * b)
    cos_c = max(-1.0, min(1.0, cos_c))
    return to_degrees(math.acos(cos_c))


def third_side_range(a: float, b: float, margin: float = TRIANGLE_MARGIN) -> Tuple[float, float]:
    """
    Open interval ``(|a - b|, a + b)`` shrunk by ``margin`` on both ends.

    This is the range the third side may take while the triangle stays proper.
    When the sides are too short for the margin, the range collapses to its
    midpoint so that ``lo <= hi`` always holds.
    """

    if a <= 0 or b <= 0:
        raise ValueError("Sides a and b must be positive.")
    lo = abs(a - b) + margin
    hi = a + b - margin
    if lo > hi:
        mid = 0.5 * (lo + hi)
        return mid, mid
    return lo, hi


def clamp_third_side(a: float, b: float, c: float, margin: float = TRIANGLE_MARGIN) -> float:
    """Pull ``c`` back inside ``third_side_range(a, b, margin)``."""

    lo, hi = third_side_range(a, b, margin)
    return max(lo, min(hi, c))


def run_validation_suite(random_trials: int = 1000, seed: int | None = 0) -> int:
    """
    Execute deterministic edge tests followed by randomized forward/inverse round trips.

    Returns:
        Number of successful verifications. Raises AssertionError on failure.
    """

    total = 0

    def expect(condition: bool, message: str) -> None:
        nonlocal total
        if not condition:
            raise AssertionError(message)
        print(f"ASSERTION: {message}")
        total += 1

    rng = np.random.default_rng(seed)

    expect(math.isclose(angle_from_sides(3.0, 4.0, 5.0), 90.0), "3-4-5 triangle is right-angled.")
    expect(math.isclose(side_from_angle(3.0, 4.0, 90.0), 5.0), "Hypotenuse of 3-4 right triangle is 5.")
    expect(side_from_angle(2.0, 2.0, 0.0) == 0.0, "Zero angle between equal sides closes c to 0.")
    expect(math.isclose(side_from_angle(2.0, 3.0, 180.0), 5.0), "Straight angle stretches c to a + b.")
    expect(math.isclose(angle_from_sides(1.0, 1.0, 5.0), 180.0), "Overlong c clamps to 180 degrees.")
    expect(angle_from_sides(3.0, 1.0, 1.0) == 0.0, "Short c clamps to 0 degrees.")
    lo, hi = third_side_range(3.0, 4.0)
    expect(math.isclose(lo, 1.01) and math.isclose(hi, 6.99), "Third side range honors the margin.")

    worst = 0.0
    for _ in range(random_trials):
        a, b = (float(v) for v in rng.uniform(0.5, 10.0, size=2))
        angle = float(rng.uniform(1.0, 179.0))
        recovered = angle_from_sides(a, b, side_from_angle(a, b, angle))
        err = abs(recovered - angle)
        if err > ANGLE_TOL:
            raise AssertionError(f"Round trip failed for {(a, b, angle)}: got {recovered}.")
        worst = max(worst, err)
        total += 1
    print(f"[round-trip] {random_trials} random triangles, max angle error {worst:.2e} deg")

    return total


if __name__ == "__main__":
    total = run_validation_suite()
    print(f"Validation succeeded for {total} checks.")
