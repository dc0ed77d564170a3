"""Closest-pair-of-points algorithms and random point generators."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from itertools import combinations

Point = tuple[float, float]

MAX_NEIGHBOR_CHECK = 7
"""How many following strip points each strip point is compared with."""

_BRUTE_FORCE_CEILING = 10_000_000.0


def dist(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(dist_squared(a, b))


def dist_squared(a: Point, b: Point) -> float:
    """Squared Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def _check_range(points: Sequence[Point], lo: int, hi: int | None) -> int:
    if hi is None:
        hi = len(points)
    if not 0 <= lo <= hi <= len(points):
        raise IndexError(f"range [{lo}, {hi}) is outside the point sequence")
    if hi - lo < 2:
        raise ValueError("at least two points are needed to find a closest pair")
    return hi


def _strip(points: Sequence[Point], lo: int, mid: int, hi: int, within) -> list[Point]:
    """Points around ``mid`` whose x-distance to it satisfies ``within``, sorted by y."""
    left = mid
    while left > lo and within(points[mid][0] - points[left - 1][0]):
        left -= 1
    right = mid
    while right < hi - 1 and within(points[right + 1][0] - points[mid][0]):
        right += 1
    return sorted(points[left:right + 1], key=lambda p: p[1])


def _strip_pairs(strip: list[Point]):
    for i, point in enumerate(strip):
        for other in strip[i + 1:i + 1 + MAX_NEIGHBOR_CHECK]:
            yield point, other


def divide_and_conquer(points: Sequence[Point], lo: int = 0, hi: int | None = None) -> float:
    """Smallest distance among ``points[lo:hi]`` by divide and conquer.

    The points are expected to be sorted by x; the result is only exact then.
    """
    hi = _check_range(points, lo, hi)
    size = hi - lo
    if size == 2:
        return dist(points[lo], points[lo + 1])
    if size == 3:
        a, b, c = points[lo:hi]
        return min(dist(a, b), dist(a, c), dist(b, c))

    mid = lo + size // 2
    d = min(divide_and_conquer(points, lo, mid), divide_and_conquer(points, mid, hi))
    strip = _strip(points, lo, mid, hi, lambda dx: dx < d)
    return min([d, *(dist(a, b) for a, b in _strip_pairs(strip))])


def divide_and_conquer_squared(points: Sequence[Point], lo: int = 0, hi: int | None = None) -> float:
    """Smallest distance among ``points[lo:hi]``, comparing squared distances.

    The points are expected to be sorted by x; the result is only exact then.
    """
    hi = _check_range(points, lo, hi)
    size = hi - lo
    if size == 2:
        return math.sqrt(dist_squared(points[lo], points[lo + 1]))
    if size == 3:
        a, b, c = points[lo:hi]
        return math.sqrt(min(dist_squared(a, b), dist_squared(a, c), dist_squared(b, c)))

    mid = lo + size // 2
    d = min(
        divide_and_conquer_squared(points, lo, mid),
        divide_and_conquer_squared(points, mid, hi),
    )
    min_sq = d * d
    strip = _strip(points, lo, mid, hi, lambda dx: dx * dx < min_sq)
    min_sq = min([min_sq, *(dist_squared(a, b) for a, b in _strip_pairs(strip))])
    return math.sqrt(min_sq)


def brute_force(points: Sequence[Point]) -> float:
    """Smallest distance between any two points, checking every pair.

    Returns 10,000,000 when there are fewer than two points or every pair
    is farther apart than that.
    """
    return min(
        [_BRUTE_FORCE_CEILING, *(dist(a, b) for a, b in combinations(points, 2))]
    )


def better_brute_force(points: Sequence[Point]) -> float:
    """Smallest squared distance between any two points; infinity if there is no pair."""
    return min((dist_squared(a, b) for a, b in combinations(points, 2)), default=math.inf)


def random_points(
    count: int,
    rng: random.Random | None = None,
    min_coord: float = 100,
    max_coord: float = 1100,
) -> list[Point]:
    """``count`` points with coordinates drawn uniformly from ``[min_coord, max_coord)``."""
    rng = rng or random.Random()
    return [(rng.uniform(min_coord, max_coord), rng.uniform(min_coord, max_coord)) for _ in range(count)]


def random_int_points(count: int, rng: random.Random | None = None) -> list[Point]:
    """``count`` points with integer-valued coordinates drawn uniformly from 0 to 100."""
    rng = rng or random.Random()
    return [(float(rng.randint(0, 100)), float(rng.randint(0, 100))) for _ in range(count)]