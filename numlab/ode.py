"""One-step methods for the initial value problem ``y' = f(t, y)``."""

from __future__ import annotations

from collections.abc import Callable, Iterator

Derivative = Callable[[float, float], float]


def sphere_cooling(t: float, temperature: float) -> float:
    """Radiative cooling rate ``-27e-12 * T**4``."""
    return -27 * 10.0**-12 * temperature**4


def _step(n: int, a: float, b: float) -> float:
    if n < 1:
        raise ValueError("number of intervals must be positive")
    step = (b - a) / n
    if step == 0:
        raise ValueError("integration interval must not be empty")
    return step


def _grid(a: float, b: float, step: float) -> Iterator[float]:
    # The abscissa accumulates the step and is compared with b inclusively.
    t = a
    while t <= b:
        yield t
        t += step


def euler(f: Derivative, n: int, a: float, b: float, y0: float) -> float:
    """Explicit Euler method with step ``(b - a) / n``."""
    h = _step(n, a, b)
    y = y0
    for t in _grid(a, b, h):
        y += h * f(t, y)
    return y


def heun(f: Derivative, n: int, a: float, b: float, y0: float) -> float:
    """Heun's method (explicit trapezoid)."""
    h = _step(n, a, b)
    y = y0
    for t in _grid(a, b, h):
        slope = f(t, y)
        predicted = y + h * slope
        y += h / 2 * (slope + f(t + h, predicted))
    return y


def midpoint(f: Derivative, n: int, a: float, b: float, y0: float) -> float:
    """Explicit midpoint method."""
    h = _step(n, a, b)
    y = y0
    for t in _grid(a, b, h):
        y += h * f(t + h / 2, y + (h / 2) * f(t, y))
    return y


def runge_kutta(f: Derivative, n: int, a: float, b: float, y0: float) -> float:
    """Classical fourth-order Runge-Kutta method."""
    h = _step(n, a, b)
    y = y0
    for t in _grid(a, b, h):
        k1 = h * f(t, y)
        k2 = h * f(t + h / 2, y + k1 / 2)
        k3 = h * f(t + h / 2, y + k2 / 2)
        k4 = h * f(t + h, y + k3)
        y += (k1 + 2 * k2 + 2 * k3 + k4) / 6
    return y