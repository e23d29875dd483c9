"""Error measures between sampled functions."""

from __future__ import annotations

from collections.abc import Sequence


def mean_squared_error(f: Sequence[float], g: Sequence[float], step: int) -> float:
    """Mean squared difference of ``f`` and ``g`` over the points that are not nodes.

    Points whose index is a multiple of ``step`` were used as interpolation
    nodes and are left out of the mean.
    """
    if step < 1:
        raise ValueError("step must be a positive integer")
    squares = [
        (a - b) ** 2
        for i, (a, b) in enumerate(zip(f, g, strict=True))
        if i % step != 0
    ]
    if not squares:
        raise ValueError("no points left outside the nodes")
    return sum(squares) / len(squares)