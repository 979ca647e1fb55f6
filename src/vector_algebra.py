"""
Addition, magnitude and distance for planar vectors.

Inputs may be ``Vector2D`` values or plain ``(x, y)`` pairs.  Lengths come from
the polar radius of ``coordinate_transform``, so a vector's magnitude and the
``r`` shown next to it are the same number.
"""

from __future__ import annotations

from typing import Sequence

from coordinate_transform import Polar, Vector2D, cartesian_to_polar


def add(v1: Sequence[float], v2: Sequence[float]) -> Vector2D:
    x1, y1 = v1
    x2, y2 = v2
    return Vector2D(x1 + x2, y1 + y2)


def magnitude(v: Sequence[float]) -> float:
    x, y = v
    return cartesian_to_polar(x, y).r


def to_polar(v: Sequence[float]) -> Polar:
    x, y = v
    return cartesian_to_polar(x, y)


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Euclidean distance between two points; symmetric and never negative."""

    x1, y1 = p1
    x2, y2 = p2
    return cartesian_to_polar(x2 - x1, y2 - y1).r
