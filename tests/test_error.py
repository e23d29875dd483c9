import pytest

from numlab.error import mean_squared_error


def test_skips_node_indices():
    assert mean_squared_error([1.0, 2.0, 3.0, 4.0], [1.0, 0.0, 3.0, 1.0], 2) == 6.5


def test_identical_is_zero():
    data = [0.5, -1.0, 2.0, 8.0, 3.0]
    assert mean_squared_error(data, list(data), 2) == 0.0


def test_differences_at_nodes_ignored():
    f = [100.0, 1.0, 200.0, 1.0]
    g = [0.0, 1.0, 0.0, 1.0]
    assert mean_squared_error(f, g, 2) == 0.0


def test_symmetric():
    f = [1.0, 4.0, 2.0, 9.0, 3.0]
    g = [0.0, 1.5, 2.0, 5.0, 1.0]
    assert mean_squared_error(f, g, 3) == mean_squared_error(g, f, 3)


def test_step_one_has_no_points():
    with pytest.raises(ValueError):
        mean_squared_error([1.0, 2.0], [1.0, 2.0], 1)


def test_non_positive_step():
    with pytest.raises(ValueError):
        mean_squared_error([1.0, 2.0], [1.0, 2.0], 0)


def test_length_mismatch():
    with pytest.raises(ValueError):
        mean_squared_error([1.0, 2.0, 3.0], [1.0, 2.0], 2)