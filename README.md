# numlab

numlab is a set of numerical methods for study and experimentation. It is written in pure Python and needs no third-party dependencies.

## What it contains

- `numlab.polynomial`: polynomial evaluation.
  - `polynomial_value` evaluates term by term.
  - `horner_value` uses the Horner scheme.
  - Coefficients run from the constant term upwards.
  - `newton_coefficients` computes Newton divided-difference coefficients, and `newton_interpolation` evaluates the resulting polynomial.
- `numlab.lagrange`: `lagrange_interpolation(xs, ys, xp)`.
- `numlab.error`: `mean_squared_error(f, g, step)`. It averages squared differences over the points whose index is not a multiple of `step`, that is, the points that were not interpolation nodes.
- `numlab.datafile`: `load_from_file(path)` reads a `FunctionData`.
  - The x values come from the first line of the file and the y values from the second; values on a line are tab-separated.
  - `FunctionData.every(step)` keeps every `step`-th point.
- `numlab.quadrature`: `rectangles` (left rectangles), `trapezoids` and `simpson` integrate a polynomial given by its coefficients. `simpson` raises an odd interval count to the next even number.
- `numlab.gauss_legendre`: `GaussLegendre(n)` is a rule with 2, 3 or 4 nodes. Other values raise `ValueError`.
  - `section_integrate(f, a, b, n_intervals, n_nodes)` applies the rule as a composite rule.
  - Sample integrands: `f1`, `f2`, `f3`.
  - `transform` maps points from [-1, 1] onto [a, b].
- `numlab.linear`: `LinearSystem(a, b)` holds a square system.
  - `partial_pivot` does elimination with partial pivoting, and `back_substitute` finishes the solve.
  - `solve` runs both steps on a copy and leaves the system unchanged.
  - `verify_solution` returns the rows that a solution fails to satisfy, and `format` renders the augmented matrix.
  - `lu_decompose` is a Doolittle decomposition, and `lu_solve` solves a system through it.
  - `load_gauss_system(path)` reads a system from a file.
- `numlab.approximation`: `Approximator(degree, a, b, n_intervals, n_nodes)` computes a continuous least-squares polynomial fit in the monomial basis.
  - The integrals use composite Gauss–Legendre.
  - `approximate`, `evaluate` and `test_accuracy` are the main methods. `test_accuracy` returns the `(x, |f(x) - p(x)|)` pairs for x from a to b in steps of 0.2.
- `numlab.ode`: `euler`, `heun`, `midpoint` and `runge_kutta` solve `y' = f(t, y)` with `n` steps on [a, b].
  - `sphere_cooling` is the sample right-hand side, the rate `-27e-12 * T**4`.
- `numlab.roots`: root finders.
  - `bisection`, `secants`, `newton` (analytic derivative), `newton_numeric` (central-difference derivative) and `falsi` (regula falsi).
  - `numeric_derivative` computes the central-difference derivative.
  - Sample functions: `fn1`, `fn2`, `fn3` with derivatives `dfn1`, `dfn2`, `dfn3`, and `fn21`, `fn22`, `fn23`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from numlab.gauss_legendre import section_integrate, f3
from numlab.ode import runge_kutta, sphere_cooling
from numlab.roots import bisection, fn22

area = section_integrate(f3, -4, 3, 10, 4)          # about -1656.08333
temperature = runge_kutta(sphere_cooling, 1000, 0, 2027, 2027)
root = bisection(fn22, -1.0, 0.0)
```

When a root finder cannot work or does not converge, it raises `ValueError`. This happens when:

- `bisection` or `falsi` get a bracket without a sign change;
- a derivative or secant slope is too flat;
- `secants` gets a value that is not finite;
- the iteration limit runs out.

`falsi` is the exception to the last case: it returns its last approximation when `max_iter` runs out.

`numlab.cli.find_roots(f, start, stop, width)` scans an interval in brackets of `width`. It reports each bracket in which regula falsi finds a root, and gives `nan` for any method that failed on that bracket.

## Command line

```
numlab
```

With no command, or with `numlab roots`, it scans `fn22` over [-3, 3) in brackets of width 0.01. For each root it prints every method's estimate and its residual, then the root count.

The other commands are:

- `numlab differential [--directory DIR]`: solves the sphere cooling problem with each ODE method and prints the results. It writes `diff_cooling_results.csv` and `diff_errors_results.csv` into `DIR` (default: the current directory).
- `numlab approximation DEGREE`: fits `exp(x) cos(5x) - x^3` on [-1, 2] and prints the pointwise errors.
- `numlab gauss-legendre`: prints the composite Gauss–Legendre results and errors for `f1`, `f2` and `f3`.
- `numlab integration [PATH]`: compares rectangles, trapezoids and Simpson, with timings and errors, on a polynomial read from `PATH`.
  - The file holds the degree, then the coefficients from the constant term up, then `a` and `b`, all separated by whitespace.
  - Errors are measured against -1656.08333.
- `numlab gauss [PATH]`: reads a system from `PATH`, solves it by Gaussian elimination, checks the solution and prints it.
  - The file holds `n`, then the `n` right-hand values, then the `n*n` matrix row by row.
- `numlab lagrange [PATH] --step N`: interpolates the data file through every N-th point and prints the mean squared error.
- `numlab newton [PATH] --step N`: the same, using Newton's form.

Each command that takes `PATH` has a default file name in the current directory. Run `numlab --help` or `numlab COMMAND --help` for details.

## Limits

- The Newton–Cotes quadratures only integrate polynomials given by coefficients.
- Gauss–Legendre rules are available with 2, 3 or 4 nodes only.
- The differential equation command writes CSV tables but draws no plots.