"""Summary statistics for timing samples."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


class QuartileError(ValueError):
    """Raised when there are too few values to compute quartiles."""


def _require_four(values: Sequence[float]) -> int:
    n = len(values)
    if n < 4:
        raise QuartileError("quartiles needs at least 4 data points.")
    return n


def _combine(n: int, at) -> tuple[float, float, float, float, float]:
    """Five-number summary from a function giving the value of a given rank."""
    q0 = at(0)
    q4 = at(n - 1)
    if n % 2 == 1:
        q2 = at(n // 2)
    else:
        q2 = (at(n // 2 - 1) + at(n // 2)) / 2.0
    if n % 4 >= 2:
        q1 = at(n // 4)
        q3 = at(3 * n // 4)
    else:
        p = n // 4
        q1 = 0.25 * at(p - 1) + 0.75 * at(p)
        p = 3 * n // 4
        q3 = 0.75 * at(p - 1) + 0.25 * at(p)
    return q0, q1, q2, q3, q4


def quartiles(data: Iterable[float]) -> tuple[float, float, float, float, float]:
    """Minimum, lower quartile, median, upper quartile and maximum, by sorting."""
    values = sorted(data)
    n = _require_four(values)
    return _combine(n, values.__getitem__)


def _select(values: list[float], k: int) -> float:
    """The value of rank ``k`` (0-based) in ``values``, without sorting them all."""
    while True:
        pivot = values[len(values) // 2]
        lows = [v for v in values if v < pivot]
        equal = sum(1 for v in values if v == pivot)
        if k < len(lows):
            values = lows
        elif k < len(lows) + equal:
            return pivot
        else:
            k -= len(lows) + equal
            values = [v for v in values if v > pivot]


def quartiles_nth(data: Iterable[float]) -> tuple[float, float, float, float, float]:
    """Same summary as :func:`quartiles`, found by selection instead of a full sort."""
    values = list(data)
    n = _require_four(values)
    return _combine(n, lambda k: _select(values, k))


def mean_stdev(values: Iterable[float]) -> tuple[float, float]:
    """Mean and unbiased (n - 1) standard deviation."""
    samples = list(values)
    if len(samples) < 2:
        raise ValueError("at least two values are needed for a standard deviation")
    mean = sum(samples) / len(samples)
    variance = sum((v - mean) ** 2 for v in samples) / (len(samples) - 1)
    return mean, math.sqrt(variance)