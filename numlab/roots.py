"""Root finding for nonlinear equations, with a set of sample functions."""

from __future__ import annotations

import math
from collections.abc import Callable

Function = Callable[[float], float]


def fn1(x: float) -> float:
    """ln(x + 1) - 1 / (x + 3)."""
    return math.log(x + 1) - 1 / (x + 3)


def fn2(x: float) -> float:
    """x^3 + 30 cos(x) - 1 / x."""
    return x * x * x + 30 * math.cos(x) - 1 / x


def fn3(x: float) -> float:
    """sin(3 pi x) / (x + 2) + 1 / (x + 4)."""
    return math.sin(3 * math.pi * x) / (x + 2) + 1 / (x + 4)


def dfn1(x: float) -> float:
    """Derivative of :func:`fn1`."""
    return 1 / ((x + 3) * (x + 3)) + 1 / (x + 1)


def dfn2(x: float) -> float:
    """Derivative of :func:`fn2`."""
    return -30 * math.sin(x) + 3 * x * x + 1 / (x * x)


def dfn3(x: float) -> float:
    """Derivative of :func:`fn3`."""
    angle = 3 * math.pi * x
    return (3 * math.pi * (x + 2) * math.cos(angle) - math.sin(angle)) / (
        (x + 2) * (x + 2)
    ) - 1 / ((x + 4) * (x + 4))


def fn21(x: float) -> float:
    """log10(x + 1) - x^3."""
    return math.log10(x + 1) - x * x * x


def fn22(x: float) -> float:
    """cosh(x) - |x| - 0.55."""
    return math.cosh(x) - math.sqrt(x * x) - 0.55


def fn23(x: float) -> float:
    """cos(3 pi x) / (x + 1)."""
    return math.cos(3 * math.pi * x) / (x + 1)


def numeric_derivative(f: Function, x: float, h: float = 1e-6) -> float:
    """Central difference approximation of ``f'(x)``."""
    return (f(x + h) - f(x - h)) / (h * 2)


def _require_sign_change(f: Function, a: float, b: float) -> None:
    if f(a) * f(b) >= 0:
        raise ValueError(f"f does not change sign on [{a}, {b}]")


def bisection(f: Function, a: float, b: float, tol: float = 1e-6) -> float:
    """Find a root of ``f`` in ``[a, b]`` by halving the bracket."""
    _require_sign_change(f, a, b)
    while (b - a) / 2.0 > tol:
        c = (a + b) / 2.0
        fc = f(c)
        if abs(fc) < tol:
            return c
        if f(a) * fc < 0:
            b = c
        else:
            a = c
    return (a + b) / 2.0


def _newton(
    f: Function, derivative: Function, x0: float, tol: float, max_iter: int
) -> float:
    x = x0
    for _ in range(max_iter):
        fx = f(x)
        dfx = derivative(x)
        if abs(dfx) < tol:
            raise ValueError(f"derivative vanishes near x = {x}")
        x_new = x - fx / dfx
        if abs(x_new - x) < tol:
            return x_new
        x = x_new
    raise ValueError(f"no convergence within {max_iter} iterations")


def newton(
    f: Function,
    df: Function,
    x0: float,
    tol: float = 1e-7,
    max_iter: int = 100,
) -> float:
    """Newton's method with the analytic derivative ``df``."""
    return _newton(f, df, x0, tol, max_iter)


def newton_numeric(
    f: Function, x0: float, tol: float = 1e-7, max_iter: int = 100
) -> float:
    """Newton's method with a central-difference derivative."""
    return _newton(f, lambda x: numeric_derivative(f, x), x0, tol, max_iter)


def _finite(value: float, what: str) -> float:
    if not math.isfinite(value):
        raise ValueError(f"{what} is not finite")
    return value


def secants(
    f: Function,
    x0: float,
    x1: float,
    tol: float = 1e-7,
    max_iter: int = 100,
) -> float:
    """Secant method started from ``x0`` and ``x1``."""
    f0 = f(x0)
    f1 = f(x1)
    for _ in range(max_iter):
        _finite(f0, "function value")
        _finite(f1, "function value")
        denominator = _finite(f1 - f0, "secant slope")
        if abs(denominator) < tol:
            raise ValueError("secant is too flat")
        x2 = _finite(x1 - f1 * (x1 - x0) / denominator, "next approximation")
        f2 = _finite(f(x2), "function value")
        if abs(x2 - x1) < tol and abs(f2) < tol:
            return x2
        x0, f0, x1, f1 = x1, f1, x2, f2
    raise ValueError(f"no convergence within {max_iter} iterations")


def falsi(
    f: Function,
    a: float,
    b: float,
    tol: float = 1e-7,
    max_iter: int = 10,
) -> float:
    """Regula falsi; returns the last approximation if ``max_iter`` runs out."""
    _require_sign_change(f, a, b)
    c = a
    for _ in range(max_iter):
        fa, fb = f(a), f(b)
        c = (a * fb - b * fa) / (fb - fa)
        fc = f(c)
        if abs(fc) < tol:
            return c
        if fa * fc < 0:
            b = c
        else:
            a = c
    return c