"""
Cartesian <-> polar conversion for planar points.

The polar angle is always taken from ``atan2(y, x)``, never from ``atan(y / x)``.
``atan2`` looks at the signs of both components, so it places the angle uniquely
in (-180°, 180°]; ``atan(y / x)`` is undefined at x = 0 and folds quadrant III
onto quadrant I:

    atan2( 3, -3) ->  135°        atan( 3 / -3) -> -45°
    atan2(-3, -3) -> -135°        atan(-3 / -3) ->  45°

``naive_atan_angle`` is kept next to the real conversion so the two can be
compared side by side.

The origin is a degenerate case: its radius is zero and its angle is reported as
0°, whatever the signs of its zero components.  A signed zero ``y = -0.0`` with a negative ``x`` would make ``atan2`` return
-180°; that endpoint is folded onto +180° so the range stays half-open.

``polar_to_cartesian`` does not restrict the sign of ``r``.  A negative radius
is a valid point lying opposite the given angle and is passed straight through.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple

import numpy as np

from angle_units import to_degrees, to_radians


ROUND_TRIP_TOL = 1e-6


class Vector2D(NamedTuple):
    """A point or free vector in the plane."""

    x: float
    y: float


class Polar(NamedTuple):
    """Polar form of a point; ``theta`` is in degrees."""

    r: float
    theta: float


def cartesian_to_polar(x: float, y: float) -> Polar:
    """
    Convert ``(x, y)`` to ``(r, theta)`` with theta in (-180°, 180°].

    Example:
        >>> cartesian_to_polar(4.0, 0.0)
        Polar(r=4.0, theta=0.0)
    """

    r = math.hypot(x, y)
    if r == 0.0:
        # atan2 of a signed-zero origin can be ±180°.
        return Polar(0.0, 0.0)
    rad = math.atan2(y, x)
    if abs(rad) == math.pi:
        return Polar(r, 180.0)
    return Polar(r, to_degrees(rad))


def polar_to_cartesian(r: float, theta: float) -> Vector2D:
    """Convert ``(r, theta)`` with theta in degrees back to ``(x, y)``."""

    rad = to_radians(theta)
    return Vector2D(r * math.cos(rad), r * math.sin(rad))


def naive_atan_angle(x: float, y: float) -> float:
    """
    Angle of ``(x, y)`` from ``atan(y / x)`` in degrees, for comparison only.

    Returns ±90° on the vertical axis (the limit of y / x) and NaN at the origin.
    """

    if x == 0.0:
        if y == 0.0:
            return math.nan
        return math.copysign(90.0, y)
    return to_degrees(math.atan(y / x))


def quadrant(x: float, y: float) -> int:
    """Return the quadrant (1-4) containing ``(x, y)``, or 0 when it lies on an axis."""

    if x == 0.0 or y == 0.0:
        return 0
    if x > 0.0:
        return 1 if y > 0.0 else 4
    return 2 if y > 0.0 else 3


def run_validation_suite(random_trials: int = 1000, seed: int | None = 0) -> int:
    """
    Check quadrant disambiguation, the origin and axis cases, and randomized
    Cartesian -> polar -> Cartesian round trips.

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

    expect(
        math.isclose(cartesian_to_polar(-3.0, 3.0).theta, 135.0),
        "Quadrant II point resolved to 135 degrees.",
    )
    expect(
        math.isclose(cartesian_to_polar(-3.0, -3.0).theta, -135.0),
        "Quadrant III point resolved to -135 degrees.",
    )
    expect(
        math.isclose(naive_atan_angle(-3.0, -3.0), naive_atan_angle(3.0, 3.0)),
        "atan(y/x) folds quadrant III onto quadrant I.",
    )
    expect(cartesian_to_polar(0.0, 0.0) == Polar(0.0, 0.0), "Origin maps to r=0, theta=0.")
    expect(cartesian_to_polar(-2.0, -0.0).theta == 180.0, "Negative x-axis reports +180 degrees.")
    expect(
        math.isclose(cartesian_to_polar(0.0, -4.0).theta, -90.0),
        "Negative y-axis reports -90 degrees.",
    )

    failures: List[Vector2D] = []
    for _ in range(random_trials):
        x, y = (float(v) for v in rng.uniform(-10.0, 10.0, size=2))
        polar = cartesian_to_polar(x, y)
        back = polar_to_cartesian(polar.r, polar.theta)
        if abs(back.x - x) > ROUND_TRIP_TOL or abs(back.y - y) > ROUND_TRIP_TOL:
            failures.append(Vector2D(x, y))
        else:
            total += 1
    if failures:
        raise AssertionError(f"Round trip failed for {len(failures)} points, e.g. {failures[0]}.")
    print(f"[round-trip] {random_trials} random points within {ROUND_TRIP_TOL:.0e}")

    return total


if __name__ == "__main__":
    total = run_validation_suite()
    print(f"Validation succeeded for {total} checks.")
