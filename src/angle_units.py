"""
Degree/radian conversion and fixed-precision rounding.

Every solver in this package works in radians internally and reports angles in
degrees, so these helpers sit underneath all of them.  ``round_to`` is a display
and comparison aid, not a numerical method: it scales, rounds half-way values
toward positive infinity, and scales back.
"""

from __future__ import annotations

import math


DEFAULT_DECIMALS = 2
# 10.0 ** 309 overflows a double.
MAX_DECIMALS = 308


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def round_to(value: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """
    Round ``value`` to ``decimals`` places.

    Halves go toward positive infinity (``2.5 -> 3`` but ``-2.5 -> -2``), which is
    ``floor(x + 0.5)`` on the scaled value.  The result is never a signed zero.
    Non-finite inputs, and values too large to scale by ``10**decimals``, are
    returned unchanged.

    Example:
        >>> round_to(3.14159)
        3.14
        >>> round_to(-1.005, 1)
        -1.0
    """

    if not math.isfinite(value) or decimals > MAX_DECIMALS:
        return value
    factor = 10.0 ** decimals
    if factor == 0.0:
        return 0.0
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    # floor() returns an int, so a negative input that rounds to zero comes back as 0.0.
    return math.floor(scaled + 0.5) / factor
