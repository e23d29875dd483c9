"""Loading of sampled function data from tab-separated text files."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike


@dataclass
class FunctionData:
    """Sample points ``x`` with the function values ``y``."""

    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)

    def every(self, step: int) -> FunctionData:
        """Return the points whose index is a multiple of ``step``."""
        if step < 1:
            raise ValueError("step must be a positive integer")
        return FunctionData(x=self.x[::step], y=self.y[::step])


def _parse_row(line: str) -> list[float]:
    parts = line.rstrip("\r\n").split("\t")
    if parts and parts[-1] == "":
        parts.pop()
    return [float(part) for part in parts]


def load_from_file(path: str | PathLike[str]) -> FunctionData:
    """Read x values from the first line and y values from the second.

    Values on a line are separated by tabs; further lines are ignored.
    """
    data = FunctionData()
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle):
            if number == 0:
                data.x.extend(_parse_row(line))
            elif number == 1:
                data.y.extend(_parse_row(line))
            else:
                break
    return data