"""
Real-root solver for a*x^2 + b*x + c = 0.

The solver follows the textbook quadratic formula on purpose: the discriminant
``D = b^2 - 4ac`` decides the outcome with no tolerance band,

    D < 0  ->  []                                   (no real roots)
    D == 0 ->  [-b / 2a]                            (one repeated root)
    D > 0  ->  [(-b + sqrt(D)) / 2a, (-b - sqrt(D)) / 2a]

and the two roots always come back in that order, so callers may label them
"root 1" and "root 2" positionally.  When ``a > 0`` the larger root is first.

A zero leading coefficient is a precondition violation, not a linear fallback:
the formula divides by ``2a``, so ``solve_quadratic`` raises ``ValueError``
instead of returning an infinite or NaN root.  Callers that can hit a vanishing
``a`` (the half-angle reduction in ``solve_trig_eq_solver``) must branch to the
linear case before calling it.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import numpy as np


DEFAULT_SPAN = 10.0
DEFAULT_SAMPLES = 101


class RootKind(Enum):
    TWO_REAL = "two real roots"
    ONE_REAL = "one real root"
    NO_REAL = "no real roots"


@dataclass(frozen=True)
class QuadraticCoefficients:
    """Coefficients of ``a*x^2 + b*x + c = 0``."""

    a: float
    b: float
    c: float

    @property
    def discriminant(self) -> float:
        return quadratic_discriminant(self.a, self.b, self.c)

    @property
    def kind(self) -> RootKind:
        return classify_quadratic(self.a, self.b, self.c)

    def roots(self) -> List[float]:
        return solve_quadratic(self.a, self.b, self.c)

    def evaluate(self, x: float) -> float:
        return self.a * x * x + self.b * x + self.c


def quadratic_discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4.0 * a * c


def classify_quadratic(a: float, b: float, c: float) -> RootKind:
    """Classify by the sign of the discriminant, using the same exact test as the solver."""

    disc = quadratic_discriminant(a, b, c)
    if disc < 0:
        return RootKind.NO_REAL
    if disc == 0:
        return RootKind.ONE_REAL
    return RootKind.TWO_REAL


def solve_quadratic(a: float, b: float, c: float) -> List[float]:
    """
    Return the real roots of ``a*x^2 + b*x + c = 0``.

    Args:
        a, b, c: Real coefficients; ``a`` must be nonzero.

    Returns:
        Zero, one, or two roots.  Two roots are ordered ``+sqrt(D)`` first.

    Raises:
        ValueError: when ``a == 0``.

    Example:
        >>> solve_quadratic(1.0, -2.0, -3.0)
        [3.0, -1.0]
    """

    if a == 0:
        raise ValueError("Leading coefficient a must be nonzero; the equation is linear.")

    disc = quadratic_discriminant(a, b, c)
    if disc < 0:
        return []
    if disc == 0:
        return [-b / (2.0 * a)]
    sqrt_disc = math.sqrt(disc)
    return [(-b + sqrt_disc) / (2.0 * a), (-b - sqrt_disc) / (2.0 * a)]


def quadratic_curve(
    a: float,
    b: float,
    c: float,
    span: float = DEFAULT_SPAN,
    samples: int = DEFAULT_SAMPLES,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample ``y = a*x^2 + b*x + c`` on ``[-span, span]`` for plotting.

    Unlike ``solve_quadratic`` this accepts ``a == 0`` (the curve is just a line).

    Returns:
        ``(xs, ys)`` arrays of length ``samples``.
    """

    if samples < 2:
        raise ValueError("samples must be at least 2.")
    xs = np.linspace(-span, span, samples)
    ys = (a * xs + b) * xs + c
    return xs, ys


def stress_test_solver(
    num_trials: int = 1000,
    rng_seed: int = 51877,
    root_tol: float = 1e-8,
) -> None:
    """
    Randomized validation that the solver recovers roots built from known factors.

    Each trial draws two separated roots r1 > r2 and a positive scale k, expands
    k*(x - r1)*(x - r2), and checks that both roots come back in order.  Fixed
    cases cover a repeated root, a negative discriminant and the ``a == 0`` guard.
    """

    rng = np.random.default_rng(rng_seed)
    start = time.perf_counter()
    deterministic_cases = 0

    assert solve_quadratic(1.0, -2.0, -3.0) == [3.0, -1.0]
    deterministic_cases += 1

    assert solve_quadratic(1.0, -4.0, 4.0) == [2.0]
    deterministic_cases += 1

    assert solve_quadratic(1.0, 0.0, 1.0) == []
    deterministic_cases += 1

    roots = solve_quadratic(-1.0, 0.0, 4.0)
    assert roots == [-2.0, 2.0], roots  # a < 0 puts the smaller root first.
    deterministic_cases += 1

    try:
        solve_quadratic(0.0, 5.0, 10.0)
    except ValueError:
        deterministic_cases += 1
    else:
        raise AssertionError("a == 0 was not rejected.")

    for _ in range(num_trials):
        r1 = float(rng.uniform(-10.0, 10.0))
        r2 = r1 - float(rng.uniform(0.5, 10.0))
        k = float(rng.uniform(0.5, 5.0))
        a, b, c = k, -k * (r1 + r2), k * r1 * r2
        roots = solve_quadratic(a, b, c)
        assert len(roots) in (1, 2), f"No roots for {(a, b, c)}"
        scale = max(1.0, abs(r1), abs(r2))
        assert abs(roots[0] - r1) <= root_tol * scale, (
            f"Root 1 {roots[0]} != {r1} for coefficients {(a, b, c)}"
        )
        assert abs(roots[-1] - r2) <= root_tol * scale, (
            f"Root 2 {roots[-1]} != {r2} for coefficients {(a, b, c)}"
        )

    elapsed = time.perf_counter() - start
    total_cases = num_trials + deterministic_cases
    print(
        f"Stress test passed: {total_cases} cases "
        f"({num_trials} randomized + {deterministic_cases} deterministic edge cases) "
        f"with seed {rng_seed} in {elapsed * 1e3:.1f} ms."
    )


if __name__ == "__main__":
    stress_test_solver()
