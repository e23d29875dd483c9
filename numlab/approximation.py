"""Least-squares polynomial approximation in the monomial basis."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from numlab.gauss_legendre import GaussLegendre, section_integrate
from numlab.linear import LinearSystem

_SAMPLE_STEP = 0.2


@dataclass(frozen=True)
class Approximator:
    """Continuous least-squares fit of degree ``degree`` on ``[a, b]``.

    Integrals use ``n_intervals`` sections with ``n_nodes`` Gauss-Legendre nodes.
    """

    degree: int
    a: float
    b: float
    n_intervals: int
    n_nodes: int

    def __post_init__(self) -> None:
        if self.degree < 0:
            raise ValueError("degree must not be negative")
        if self.n_intervals < 1:
            raise ValueError("number of intervals must be positive")
        GaussLegendre(self.n_nodes)

    def _integral(self, f: Callable[[float], float]) -> float:
        return section_integrate(f, self.a, self.b, self.n_intervals, self.n_nodes)

    def approximate(self, f: Callable[[float], float]) -> list[float]:
        """Return coefficients ``c[0..degree]`` of the best polynomial fit of ``f``."""
        size = self.degree + 1
        moments = [
            self._integral(lambda x, k=k: x**k) for k in range(2 * self.degree + 1)
        ]
        matrix = [moments[i : i + size] for i in range(size)]
        rhs = [self._integral(lambda x, i=i: f(x) * x**i) for i in range(size)]
        return LinearSystem(matrix, rhs).solve()

    def evaluate(self, coefficients: Sequence[float], x: float) -> float:
        """Value of the polynomial with ``coefficients`` at ``x``."""
        return sum(c * x**power for power, c in enumerate(coefficients))

    def test_accuracy(
        self, f: Callable[[float], float], coefficients: Sequence[float]
    ) -> list[tuple[float, float]]:
        """Return ``(x, |f(x) - p(x)|)`` at points from ``a`` to ``b`` in steps of 0.2."""
        results = []
        x = self.a
        while x <= self.b:
            results.append((x, abs(f(x) - self.evaluate(coefficients, x))))
            x += _SAMPLE_STEP
        return results