"""Lagrange polynomial interpolation."""

from __future__ import annotations

from collections.abc import Sequence


def lagrange_interpolation(
    xs: Sequence[float], ys: Sequence[float], xp: float
) -> float:
    """Evaluate the Lagrange interpolating polynomial through ``(xs, ys)`` at ``xp``."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    result = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        basis = float(yi)
        for j, xj in enumerate(xs):
            if i != j:
                basis *= (xp - xj) / (xi - xj)
        result += basis
    return result