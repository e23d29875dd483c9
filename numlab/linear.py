"""Linear systems: Gaussian elimination with partial pivoting and LU decomposition."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from os import PathLike

_PIVOT_EPSILON = 1e-6


@dataclass
class LinearSystem:
    """The square system ``a @ x = b``."""

    a: list[list[float]]
    b: list[float]

    def __post_init__(self) -> None:
        self.a = [[float(value) for value in row] for row in self.a]
        self.b = [float(value) for value in self.b]
        size = len(self.b)
        if len(self.a) != size or any(len(row) != size for row in self.a):
            raise ValueError("matrix must be square and match the right-hand side")

    @property
    def n(self) -> int:
        """Number of equations."""
        return len(self.b)

    def partial_pivot(self) -> None:
        """Reduce the system to upper-triangular form in place."""
        a, b = self.a, self.b
        for i in range(self.n):
            pivot = max(range(i, self.n), key=lambda row: abs(a[row][i]))
            if pivot != i:
                a[i], a[pivot] = a[pivot], a[i]
                b[i], b[pivot] = b[pivot], b[i]
            pivot_row = a[i]
            if abs(pivot_row[i]) < _PIVOT_EPSILON:
                continue
            for j in range(i + 1, self.n):
                factor = a[j][i] / pivot_row[i]
                a[j][i:] = [
                    value - factor * p for value, p in zip(a[j][i:], pivot_row[i:])
                ]
                b[j] -= factor * b[i]

    def back_substitute(self) -> list[float]:
        """Solve an upper-triangular system."""
        x = [0.0] * self.n
        for i in reversed(range(self.n)):
            row = self.a[i]
            if row[i] == 0:
                raise ValueError("matrix is singular")
            known = sum(c * v for c, v in zip(row[i + 1 :], x[i + 1 :]))
            x[i] = (self.b[i] - known) / row[i]
        return x

    def solve(self) -> list[float]:
        """Solve the system, leaving this one unchanged."""
        work = replace(self)
        work.partial_pivot()
        return work.back_substitute()

    def verify_solution(
        self, x: Sequence[float], tol: float = 1e-6
    ) -> list[tuple[int, float, float]]:
        """Return ``(row, computed, expected)`` for every row that ``x`` does not satisfy."""
        if len(x) != self.n:
            raise ValueError("solution has the wrong length")
        failures = []
        for index, (row, expected) in enumerate(zip(self.a, self.b)):
            computed = sum(c * v for c, v in zip(row, x))
            if abs(computed - expected) > tol:
                failures.append((index, computed, expected))
        return failures

    def format(self) -> str:
        """Render the augmented matrix, one row per line."""
        return "\n".join(
            "".join(f"{value:g} " for value in row) + f"|{rhs:g}"
            for row, rhs in zip(self.a, self.b)
        )


def load_gauss_system(path: str | PathLike[str]) -> LinearSystem:
    """Read ``n``, then ``n`` right-hand values, then the ``n*n`` matrix, row by row."""
    with open(path, encoding="utf-8") as handle:
        tokens = iter(handle.read().split())
    try:
        n = int(next(tokens))
        if n < 0:
            raise ValueError("system size must not be negative")
        b = [float(next(tokens)) for _ in range(n)]
        a = [[float(next(tokens)) for _ in range(n)] for _ in range(n)]
    except StopIteration:
        raise ValueError(f"{path}: file ends before the system is complete") from None
    return LinearSystem(a, b)


def lu_decompose(
    matrix: Sequence[Sequence[float]],
) -> tuple[list[list[float]], list[list[float]]]:
    """Doolittle decomposition: return unit lower ``L`` and upper ``U`` with ``L @ U == matrix``."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    lower = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    upper = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i, n):
            upper[i][j] = matrix[i][j] - sum(lower[i][k] * upper[k][j] for k in range(i))
        if upper[i][i] == 0:
            raise ValueError("matrix has a zero leading minor")
        for j in range(i + 1, n):
            lower[j][i] = (
                matrix[j][i] - sum(lower[j][k] * upper[k][i] for k in range(i))
            ) / upper[i][i]
    return lower, upper


def lu_solve(system: LinearSystem) -> list[float]:
    """Solve ``system`` through its LU decomposition."""
    lower, upper = lu_decompose(system.a)
    y: list[float] = []
    for row, rhs in zip(lower, system.b):
        y.append(rhs - sum(c * v for c, v in zip(row, y)))
    x = [0.0] * system.n
    for i in reversed(range(system.n)):
        row = upper[i]
        known = sum(c * v for c, v in zip(row[i + 1 :], x[i + 1 :]))
        x[i] = (y[i] - known) / row[i]
    return x