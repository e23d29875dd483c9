import io

import pytest

from numlab.approximation import Approximator
from numlab.cli import (
    f4,
    find_roots,
    main,
    run_approximation,
    run_gauss,
    run_gauss_legendre,
    run_integration,
    run_lagrange,
    run_newton,
    run_roots,
)
from numlab.linear import LinearSystem
from numlab.roots import fn22


@pytest.fixture
def quadratic_file(tmp_path):
    xs = list(range(9))
    path = tmp_path / "data.txt"
    path.write_text(
        "\t".join(str(x) for x in xs) + "\n" + "\t".join(str(x * x) for x in xs) + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def gauss_file(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text("2\n1 2\n4 1\n2 3\n", encoding="utf-8")
    return path


def test_f4_at_zero():
    assert f4(0) == pytest.approx(1.0)


def test_find_roots_reports_roots_inside_brackets():
    reports = find_roots(fn22, -3.0, 3.0, 0.01)
    assert len(reports) == 4
    for a, b, estimates in reports:
        assert a - 1e-9 <= estimates["falsi"] <= b + 1e-9
        assert abs(fn22(estimates["falsi"])) < 1e-3
        assert abs(fn22(estimates["bisection"])) < 1e-5


def test_find_roots_are_symmetric():
    roots = [estimates["bisection"] for _, _, estimates in find_roots(fn22, -3.0, 3.0, 0.01)]
    for left, right in zip(roots, reversed(roots)):
        assert left == pytest.approx(-right, abs=1e-4)


def test_find_roots_rejects_bad_width():
    with pytest.raises(ValueError):
        find_roots(fn22, -1.0, 1.0, 0.0)


def test_run_roots_prints_count():
    out = io.StringIO()
    count = run_roots(out)
    lines = out.getvalue().splitlines()
    assert lines[-1] == f"Root count: {count}"
    assert sum(line.startswith("Range ") for line in lines) == count


def test_run_gauss_solution_matches_solver(gauss_file):
    out = io.StringIO()
    solution = run_gauss(out, gauss_file)
    expected = LinearSystem([[4, 1], [2, 3]], [1, 2]).solve()
    assert solution == pytest.approx(expected)
    text = out.getvalue()
    assert "Check finished." in text
    assert "error:" not in text
    result_line = text.splitlines()[-1].split()
    printed = [float(result_line[i]) for i in (2, 5)]
    assert printed == pytest.approx(expected, rel=1e-5)


def test_run_lagrange_reproduces_quadratic(quadratic_file):
    out = io.StringIO()
    error = run_lagrange(out, quadratic_file, 2)
    assert error == pytest.approx(0.0, abs=1e-9)
    assert out.getvalue().startswith("Node spacing: 2,")


def test_run_newton_reproduces_quadratic(quadratic_file):
    out = io.StringIO()
    error = run_newton(out, quadratic_file, 2)
    assert error == pytest.approx(0.0, abs=1e-9)
    assert "(nodes every 2 elements)" in out.getvalue()


def test_run_approximation_matches_approximator():
    out = io.StringIO()
    coefficients = run_approximation(out, 3)
    approximator = Approximator(3, -1.0, 2.0, 10, 4)
    assert coefficients == pytest.approx(approximator.approximate(f4))
    lines = out.getvalue().splitlines()
    assert len(lines) == len(approximator.test_accuracy(f4, coefficients))
    assert all(line.startswith("x = ") for line in lines)


def test_run_gauss_legendre_prints_every_combination():
    out = io.StringIO()
    run_gauss_legendre(out)
    lines = out.getvalue().splitlines()
    assert sum(line.startswith("n = ") for line in lines) == 3 * 9 * 3
    assert sum(line.startswith("error = ") for line in lines) == 3 * 9 * 3


def test_run_integration_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_integration(io.StringIO(), tmp_path / "absent.txt")


def test_run_integration_truncated_file(tmp_path):
    path = tmp_path / "poly.txt"
    path.write_text("2 1 2 3 0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        run_integration(io.StringIO(), path)


def test_main_gauss(gauss_file, capsys):
    assert main(["gauss", str(gauss_file)]) == 0
    assert "Result:" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main(["gauss", str(tmp_path / "absent.txt")]) == 1
    assert "numlab:" in capsys.readouterr().err


def test_main_defaults_to_roots(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines()[-1].startswith("Root count: ")