"""Polynomial evaluation and Newton divided-difference interpolation."""

from __future__ import annotations

from collections.abc import Sequence


def polynomial_value(coefficients: Sequence[float], x: float, n: int) -> float:
    """Evaluate ``sum(coefficients[i] * x**i)`` over the first ``n`` terms, term by term."""
    result = 0.0
    for power, coefficient in enumerate(coefficients[:n]):
        term = float(coefficient)
        for _ in range(power):
            term *= x
        result += term
    return result


def horner_value(coefficients: Sequence[float], x: float, n: int) -> float:
    """Evaluate the polynomial of the first ``n`` coefficients using Horner's scheme.

    Coefficients are ordered from the constant term upwards.
    """
    result = 0.0
    for coefficient in reversed(coefficients[:n]):
        result = result * x + coefficient
    return result


def newton_coefficients(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Return the Newton divided-difference coefficients for the nodes ``xs``, ``ys``."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    column = [float(y) for y in ys]
    coefficients: list[float] = []
    for order in range(len(xs)):
        if order:
            column = [
                (upper - lower) / (xs[i + order] - xs[i])
                for i, (lower, upper) in enumerate(zip(column, column[1:]))
            ]
        coefficients.append(column[0])
    return coefficients


def newton_interpolation(
    xs: Sequence[float], coefficients: Sequence[float], value: float
) -> float:
    """Evaluate the Newton-form polynomial with nodes ``xs`` at ``value``."""
    if not coefficients:
        raise ValueError("coefficients must not be empty")
    result = float(coefficients[0])
    term = 1.0
    for node, coefficient in zip(xs, coefficients[1:]):
        term *= value - node
        result += coefficient * term
    return result