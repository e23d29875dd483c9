import pytest

from numlab.quadrature import rectangles, simpson, trapezoids


def _antiderivative_integral(coeffs, a, b):
    def prim(x):
        return sum(c * x ** (k + 1) / (k + 1) for k, c in enumerate(coeffs))

    return prim(b) - prim(a)


@pytest.mark.parametrize("rule", [rectangles, trapezoids, simpson])
def test_constant_exact(rule):
    assert rule([3.0], 1.0, 5.0, 4) == pytest.approx(3.0 * (5.0 - 1.0))


@pytest.mark.parametrize("rule", [trapezoids, simpson])
def test_linear_exact(rule):
    coeffs = [1.0, 2.0]
    assert rule(coeffs, -1.0, 3.0, 5) == pytest.approx(
        _antiderivative_integral(coeffs, -1.0, 3.0)
    )


@pytest.mark.parametrize("n", [2, 3, 7, 10])
def test_simpson_exact_for_cubic(n):
    coeffs = [-5.0, 5.0, -1.0, 7.0]
    assert simpson(coeffs, -4.0, 3.0, n) == pytest.approx(
        _antiderivative_integral(coeffs, -4.0, 3.0)
    )


def test_simpson_odd_equals_next_even():
    coeffs = [-5.0, 5.0, -1.0, 7.0, -5.0]
    assert simpson(coeffs, -4.0, 3.0, 9) == simpson(coeffs, -4.0, 3.0, 10)


def test_rectangles_left_endpoint():
    # increasing function: left rectangles underestimate
    coeffs = [0.0, 1.0]
    assert rectangles(coeffs, 0.0, 2.0, 4) < _antiderivative_integral(coeffs, 0.0, 2.0)


@pytest.mark.parametrize("rule", [rectangles, trapezoids, simpson])
def test_converges_for_quartic(rule):
    coeffs = [-5.0, 5.0, -1.0, 7.0, -5.0]
    exact = _antiderivative_integral(coeffs, -4.0, 3.0)
    coarse = abs(rule(coeffs, -4.0, 3.0, 10) - exact)
    fine = abs(rule(coeffs, -4.0, 3.0, 1000) - exact)
    assert fine < coarse


@pytest.mark.parametrize("rule", [rectangles, trapezoids, simpson])
def test_zero_intervals_rejected(rule):
    with pytest.raises(ValueError):
        rule([1.0], 0.0, 1.0, 0)