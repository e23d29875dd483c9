"""Gauss-Legendre quadrature on single and composite intervals."""

from __future__ import annotations

from collections.abc import Callable
from math import exp, sin, sqrt

_RULES: dict[int, tuple[tuple[float, ...], tuple[float, ...]]] = {
    2: ((-1.0 / sqrt(3), 1.0 / sqrt(3)), (1.0, 1.0)),
    3: ((-sqrt(3.0 / 5), 0.0, sqrt(3.0 / 5)), (5.0 / 9, 8.0 / 9, 5.0 / 9)),
    4: (
        (-0.8611363116, -0.3399810436, 0.3399810436, 0.8611363116),
        (0.3478548451, 0.6521451549, 0.6521451549, 0.3478548451),
    ),
}


def transform(x: float, a: float, b: float) -> float:
    """Map ``x`` from ``[-1, 1]`` onto ``[a, b]``."""
    return ((b - a) / 2) * x + (a + b) / 2


class GaussLegendre:
    """A Gauss-Legendre rule with 2, 3 or 4 nodes."""

    def __init__(self, n: int) -> None:
        try:
            nodes, weights = _RULES[n]
        except KeyError:
            raise ValueError("only 2, 3 or 4 nodes are supported") from None
        self.n = n
        self.nodes = list(nodes)
        self.weights = list(weights)

    def integrate(self, f: Callable[[float], float], a: float, b: float) -> float:
        """Approximate the integral of ``f`` over ``[a, b]``."""
        total = sum(
            weight * f(transform(node, a, b))
            for node, weight in zip(self.nodes, self.weights)
        )
        return total * (b - a) / 2.0


def f1(x: float) -> float:
    """x^2 * sin(x)^3."""
    return x * x * sin(x) ** 3


def f2(x: float) -> float:
    """exp(x^2) * (1 - x)."""
    return exp(x * x) * (1 - x)


def f3(x: float) -> float:
    """-5 + 5x - x^2 + 7x^3 - 5x^4."""
    return -5 + 5 * x - x * x + 7 * x * x * x - 5 * x * x * x * x


def section_integrate(
    f: Callable[[float], float],
    a: float,
    b: float,
    n_intervals: int,
    n_nodes: int,
) -> float:
    """Composite Gauss-Legendre integral of ``f`` over ``n_intervals`` equal parts."""
    if n_intervals < 1:
        raise ValueError("number of intervals must be positive")
    rule = GaussLegendre(n_nodes)
    h = (b - a) / n_intervals
    total = 0.0
    for i in range(n_intervals):
        x0 = a + i * h
        total += rule.integrate(f, x0, x0 + h)
    return total