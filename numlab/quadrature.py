"""Composite Newton-Cotes quadratures of polynomials."""

from __future__ import annotations

from collections.abc import Sequence

from numlab.polynomial import horner_value


def _check_intervals(n: int) -> None:
    if n < 1:
        raise ValueError("number of intervals must be positive")


def _value(coefficients: Sequence[float], x: float) -> float:
    return horner_value(coefficients, x, len(coefficients))


def rectangles(coefficients: Sequence[float], a: float, b: float, n: int) -> float:
    """Left-rectangle rule over ``n`` intervals of ``[a, b]``."""
    _check_intervals(n)
    h = (b - a) / n
    return h * sum(_value(coefficients, a + i * h) for i in range(n))


def trapezoids(coefficients: Sequence[float], a: float, b: float, n: int) -> float:
    """Trapezoidal rule over ``n`` intervals of ``[a, b]``."""
    _check_intervals(n)
    h = (b - a) / n
    total = (_value(coefficients, a) + _value(coefficients, b)) / 2.0
    total += sum(_value(coefficients, a + i * h) for i in range(1, n))
    return total * h


def simpson(coefficients: Sequence[float], a: float, b: float, n: int) -> float:
    """Simpson's rule; an odd ``n`` is raised to the next even number."""
    _check_intervals(n)
    if n % 2:
        n += 1
    h = (b - a) / n
    total = _value(coefficients, a) + _value(coefficients, b)
    total += sum(
        _value(coefficients, a + i * h) * (2 if i % 2 == 0 else 4)
        for i in range(1, n)
    )
    return total * h / 3.0