import math

import pytest

from numlab.gauss_legendre import (
    GaussLegendre,
    f1,
    f2,
    f3,
    section_integrate,
    transform,
)


def test_transform_maps_endpoints():
    assert transform(-1.0, 2.0, 5.0) == pytest.approx(2.0)
    assert transform(1.0, 2.0, 5.0) == pytest.approx(5.0)
    assert transform(0.0, 2.0, 5.0) == pytest.approx(3.5)


@pytest.mark.parametrize("n", [0, 1, 5])
def test_unsupported_node_count(n):
    with pytest.raises(ValueError):
        GaussLegendre(n)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_weights_sum_to_interval_length(n):
    rule = GaussLegendre(n)
    assert sum(rule.weights) == pytest.approx(2.0)
    assert len(rule.nodes) == n


@pytest.mark.parametrize("n,degree", [(2, 3), (3, 5), (4, 7)])
def test_exact_for_polynomials(n, degree):
    a, b = -1.5, 2.0
    expected = (b ** (degree + 1) - a ** (degree + 1)) / (degree + 1)
    result = GaussLegendre(n).integrate(lambda x: x**degree, a, b)
    assert result == pytest.approx(expected, rel=1e-8)


def test_section_integrate_matches_single_rule_for_one_interval():
    rule = GaussLegendre(3)
    assert section_integrate(math.cos, 0.0, 2.0, 1, 3) == pytest.approx(
        rule.integrate(math.cos, 0.0, 2.0)
    )


def test_section_integrate_rejects_zero_intervals():
    with pytest.raises(ValueError):
        section_integrate(math.sin, 0.0, 1.0, 0, 2)


def test_section_integrate_f3_polynomial():
    assert section_integrate(f3, -4, 3, 1, 3) == pytest.approx(-1656.08333, abs=1e-3)


def test_section_integrate_f1_converges():
    result = section_integrate(f1, 1, 4.764798248, 1000, 4)
    assert result == pytest.approx(-10.1010101105917, rel=1e-6)


def test_section_integrate_f2_converges():
    result = section_integrate(f2, -2, 3.20870913294, 1000, 4)
    assert result == pytest.approx(-9876.54321007546, rel=1e-6)


def test_more_intervals_do_not_worsen_error():
    exact = -10.1010101105917
    coarse = abs(section_integrate(f1, 1, 4.764798248, 2, 2) - exact)
    fine = abs(section_integrate(f1, 1, 4.764798248, 50, 2) - exact)
    assert fine < coarse