"""Command-line driver that runs the numerical experiments."""

from __future__ import annotations

import argparse
import math
import sys
import time
from collections.abc import Callable, Sequence
from os import PathLike
from pathlib import Path
from typing import TextIO

from numlab.approximation import Approximator
from numlab.datafile import load_from_file
from numlab.error import mean_squared_error
from numlab.gauss_legendre import f1, f2, f3, section_integrate
from numlab.lagrange import lagrange_interpolation
from numlab.linear import load_gauss_system
from numlab.ode import euler, heun, midpoint, runge_kutta, sphere_cooling
from numlab.polynomial import newton_coefficients, newton_interpolation
from numlab.quadrature import rectangles, simpson, trapezoids
from numlab.roots import bisection, falsi, fn22, newton_numeric, secants

Function = Callable[[float], float]
RootReport = tuple[float, float, dict[str, float]]

_FALSI_TOL = 1e-3
_COOLING_EXACT = 182.57481
_COOLING_START = 2027.0
_INTEGRAL_EXACT = -1656.08333
_INTERVAL_COUNTS = (5, 10, 20, 40, 80, 160, 320, 640, 1000, 10000, 100000, 1000000)
_GL_INTERVALS = (1, 2, 3, 5, 10, 20, 50, 100, 1000)
_GL_SECTIONS = (
    ("FIRST FUNCTION", f1, 1.0, 4.764798248, -10.1010101105917),
    ("SECOND FUNCTION", f2, -2.0, 3.20870913294, -9876.54321007546),
    ("THIRD FUNCTION", f3, -4.0, 3.0, -1656.08333),
)
_ODE_METHODS = (
    ("Euler T ------- ", euler),
    ("Heun T -------- ", heun),
    ("Midpoint T ---- ", midpoint),
    ("Runge Kutta T - ", runge_kutta),
)


def f4(x: float) -> float:
    """exp(x) cos(5x) - x^3."""
    return math.exp(x) * math.cos(5 * x) - x * x * x


def _attempt(method: Callable[..., float], *args: float | Function) -> float:
    try:
        return method(*args)
    except (ValueError, ArithmeticError):
        return math.nan


def find_roots(
    f: Function, start: float, stop: float, width: float
) -> list[RootReport]:
    """Scan ``[start, stop)`` in brackets of ``width``; report every bracket holding a root.

    Each report is ``(a, b, estimates)`` where ``estimates`` maps a method name
    to its root estimate, ``nan`` where that method failed.
    """
    if width <= 0:
        raise ValueError("bracket width must be positive")
    reports: list[RootReport] = []
    a = start
    while a < stop:
        b = a + width
        root = _attempt(falsi, f, a, b, _FALSI_TOL)
        if math.isfinite(root):
            reports.append(
                (
                    a,
                    b,
                    {
                        "bisection": _attempt(bisection, f, a, b),
                        "newton": _attempt(newton_numeric, f, a),
                        "secants": _attempt(secants, f, a, b),
                        "falsi": root,
                    },
                )
            )
        a += width
    return reports


def _residual(f: Function, root: float) -> float:
    if math.isnan(root):
        return math.nan
    try:
        return abs(f(root))
    except (ValueError, ArithmeticError):
        return math.nan


def run_roots(out: TextIO) -> int:
    """Locate the roots of :func:`fn22` on ``[-3, 3]`` and print every method's estimate."""
    labels = {
        "bisection": "Bisection: ",
        "newton": "Newton:    ",
        "secants": "Secants:   ",
        "falsi": "Falsi:     ",
    }
    reports = find_roots(fn22, -3.0, 3.0, 0.01)
    for a, b, estimates in reports:
        print(f"Range {a:g} -> {b:g}. ", file=out)
        for name, label in labels.items():
            root = estimates[name]
            print(f"{label}{root:g} Error: {_residual(fn22, root):g}", file=out)
    print(f"Root count: {len(reports)}", file=out)
    return len(reports)


def run_differential(out: TextIO, directory: str | PathLike[str]) -> None:
    """Solve the sphere cooling problem and write result tables as CSV into ``directory``."""
    a = 0.0
    end = _COOLING_START
    y0 = _COOLING_START
    for steps in (300, 500, 1000, 10000):
        print(f"Number of intervals {steps}: ", file=out)
        for label, method in _ODE_METHODS:
            temperature = method(sphere_cooling, steps, a, end, y0)
            error = (temperature - _COOLING_EXACT) ** 2
            print(f"{label}{temperature:g}, error: {error:g}", file=out)
        print(file=out)

    target = Path(directory)
    with open(target / "diff_cooling_results.csv", "w", encoding="utf-8") as handle:
        handle.write("t,Euler T,Heun T,Midpoint T,Runge Kutta T\n")
        b = end
        while b >= 1:
            values = [method(sphere_cooling, 1000, a, b, y0) for _, method in _ODE_METHODS]
            handle.write(",".join(f"{v:g}" for v in (b, *values)) + "\n")
            b -= 1
        handle.write(f"0,{y0:g},{y0:g},{y0:g},{y0:g}\n")

    with open(target / "diff_errors_results.csv", "w", encoding="utf-8") as handle:
        handle.write("steps,Error Euler,Error Heun,Error Midpoint,Error Runge Kutta\n")
        for steps in range(300, 1001):
            errors = [
                (method(sphere_cooling, steps, a, end, y0) - _COOLING_EXACT) ** 2
                for _, method in _ODE_METHODS
            ]
            handle.write(f"{steps}," + ",".join(f"{e:g}" for e in errors) + "\n")


def run_approximation(out: TextIO, degree: int) -> list[float]:
    """Fit :func:`f4` on ``[-1, 2]`` and print the pointwise errors."""
    approximator = Approximator(degree, -1.0, 2.0, 10, 4)
    coefficients = approximator.approximate(f4)
    for x, error in approximator.test_accuracy(f4, coefficients):
        print(f"x = {x:g}, error = {error:g}", file=out)
    return coefficients


def run_gauss_legendre(out: TextIO) -> None:
    """Print composite Gauss-Legendre results for the three sample integrals."""
    for number, (title, f, a, b, exact) in enumerate(_GL_SECTIONS):
        if number:
            print(f"{'-' * 48} {title} {'-' * 48}\n", file=out)
        for intervals in _GL_INTERVALS:
            for nodes in (2, 3, 4):
                result = section_integrate(f, a, b, intervals, nodes)
                print(f"intervals: {intervals}", file=out)
                print(f"n = {nodes}, result = {result:g}", file=out)
                print(f"error = {abs(result - exact):g}", file=out)
            print(file=out)


def _read_integration_input(
    path: str | PathLike[str],
) -> tuple[list[float], float, float]:
    with open(path, encoding="utf-8") as handle:
        tokens = iter(handle.read().split())
    try:
        degree = int(next(tokens))
        if degree < 0:
            raise ValueError("polynomial degree must not be negative")
        coefficients = [float(next(tokens)) for _ in range(degree + 1)]
        a = float(next(tokens))
        b = float(next(tokens))
    except StopIteration:
        raise ValueError(f"{path}: file ends before the input is complete") from None
    return coefficients, a, b


def _timed(method: Callable[..., float], *args: object) -> tuple[float, int]:
    start = time.perf_counter_ns()
    value = method(*args)
    return value, (time.perf_counter_ns() - start) // 1000


def run_integration(out: TextIO, path: str | PathLike[str]) -> None:
    """Compare the rectangle, trapezoid and Simpson rules on the polynomial in ``path``."""
    coefficients, a, b = _read_integration_input(path)
    methods = (rectangles, trapezoids, simpson)

    print("\nResults of the methods and their run times:", file=out)
    print("n\tRectangles\tt [us]\tTrapezoids\tt [us]\tSimpson\t\tt [us]", file=out)
    for n in _INTERVAL_COUNTS:
        cells = []
        for method in methods:
            value, micros = _timed(method, coefficients, a, b, n)
            cells.append(f"{value:.6f}\t{micros}")
        print(f"{n}\t" + "\t".join(cells), file=out)

    print("\nErrors:", file=out)
    print("n\tRectangles\tTrapezoids\tSimpson", file=out)
    for n in _INTERVAL_COUNTS:
        errors = [method(coefficients, a, b, n) - _INTEGRAL_EXACT for method in methods]
        print(f"{n}\t" + "\t".join(f"{e:.6f}" for e in errors), file=out)


def run_gauss(out: TextIO, path: str | PathLike[str]) -> list[float]:
    """Solve the system in ``path`` by Gaussian elimination and print the check and result."""
    system = load_gauss_system(path)
    print(system.format(), file=out)
    print(file=out)
    system.partial_pivot()
    solution = system.back_substitute()
    print("Checking...", file=out)
    for row, computed, expected in system.verify_solution(solution):
        print(f"Row {row} error: {computed:g} != {expected:g}", file=out)
    print("Check finished.", file=out)
    print("Result: ", file=out)
    print("".join(f"X{i} = {value:g} " for i, value in enumerate(solution)), file=out)
    return solution


def run_lagrange(out: TextIO, path: str | PathLike[str], step: int) -> float:
    """Interpolate the data in ``path`` through every ``step``-th point; print the error."""
    data = load_from_file(path)
    nodes = data.every(step)
    interpolated = [lagrange_interpolation(nodes.x, nodes.y, x) for x in data.x]
    error = mean_squared_error(data.y, interpolated, step)
    print(f"Node spacing: {step}, mean squared error: {error:g}", file=out)
    return error


def run_newton(out: TextIO, path: str | PathLike[str], step: int) -> float:
    """Newton-form interpolation through every ``step``-th point; print the error."""
    data = load_from_file(path)
    nodes = data.every(step)
    coefficients = newton_coefficients(nodes.x, nodes.y)
    interpolated = [newton_interpolation(nodes.x, coefficients, x) for x in data.x]
    error = mean_squared_error(interpolated, data.y, step)
    print(file=out)
    print(f"Mean error: {error:g}  (nodes every {step} elements)", file=out)
    return error


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numlab", description="Run numerical methods experiments."
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("roots", help="find the roots of a sample function")
    differential = commands.add_parser("differential", help="sphere cooling ODE")
    differential.add_argument("--directory", default=".")
    approximation = commands.add_parser("approximation", help="least-squares fit")
    approximation.add_argument("degree", type=int)
    commands.add_parser("gauss-legendre", help="Gauss-Legendre quadrature")
    integration = commands.add_parser("integration", help="Newton-Cotes quadratures")
    integration.add_argument("path", nargs="?", default="kwadratury_gr_4.txt")
    gauss = commands.add_parser("gauss", help="Gaussian elimination")
    gauss.add_argument("path", nargs="?", default="gauss_elimination_gr4_A.txt")
    lagrange = commands.add_parser("lagrange", help="Lagrange interpolation")
    lagrange.add_argument("path", nargs="?", default="interpolacja_gr_4_ITE 1.txt")
    lagrange.add_argument("--step", type=int, required=True)
    newton = commands.add_parser("newton", help="Newton interpolation")
    newton.add_argument("path", nargs="?", default="interpolacja_N_gr_4.txt")
    newton.add_argument("--step", type=int, required=True)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; runs the root finder when no command is given."""
    args = _parser().parse_args(argv)
    out = sys.stdout
    try:
        match args.command:
            case None | "roots":
                run_roots(out)
            case "differential":
                run_differential(out, args.directory)
            case "approximation":
                run_approximation(out, args.degree)
            case "gauss-legendre":
                run_gauss_legendre(out)
            case "integration":
                run_integration(out, args.path)
            case "gauss":
                run_gauss(out, args.path)
            case "lagrange":
                run_lagrange(out, args.path, args.step)
            case "newton":
                run_newton(out, args.path, args.step)
    except (OSError, ValueError) as exc:
        print(f"numlab: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())