"""Close pairs of points in the plane.

Every function here assumes that each point pattern is sorted in increasing
order of its ``x`` coordinate; the searches rely on that ordering to stop
scanning early.  Point indices in the results are zero-based.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

import numpy as np

__all__ = [
    "PairOverflowError",
    "ClosePair",
    "pair_count",
    "cross_count",
    "duplicated_xy",
    "close_pairs",
    "cross_pairs",
    "close_pairs_alt",
    "close_pairs_fixed",
    "cross_pairs_fixed",
]


@dataclass(frozen=True)
class ClosePair:
    """A pair of points ``(i, j)`` lying within the search distance.

    ``dx`` and ``dy`` are the coordinates of point ``j`` minus those of
    point ``i``.  ``within`` is set only when a threshold was requested and
    tells whether the distance is at most that threshold.
    """

    i: int
    j: int
    xi: float
    yi: float
    xj: float
    yj: float
    dx: float
    dy: float
    d: float
    within: bool | None = None


class PairOverflowError(Exception):
    """More close pairs were found than the permitted limit.

    ``pairs`` holds the pairs collected before the limit was reached.
    """

    def __init__(self, limit: int, pairs: list[ClosePair]):
        super().__init__(f"more than {limit} close pairs found")
        self.limit = limit
        self.pairs = pairs


def _coords(x: Sequence[float], y: Sequence[float]) -> tuple[list[float], list[float]]:
    xs = [float(v) for v in np.asarray(x, dtype=float).ravel()]
    ys = [float(v) for v in np.asarray(y, dtype=float).ravel()]
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length")
    return xs, ys


def _pair(i: int, j: int, xi: float, yi: float, xj: float, yj: float,
          dx: float, dy: float, d2: float, s2: float | None) -> ClosePair:
    return ClosePair(
        i=i, j=j, xi=xi, yi=yi, xj=xj, yj=yj, dx=dx, dy=dy,
        d=math.sqrt(d2),
        within=None if s2 is None else d2 <= s2,
    )


def _sweep(
    x1: list[float], y1: list[float], x2: list[float], y2: list[float],
    margin: float, beyond: Callable[[float], bool],
) -> Iterator[tuple[int, int, float, float]]:
    """Yield ``(i, j, dx, dy)`` for candidates of the second pattern near each first point.

    The start index advances past points with ``x2 < x1[i] - margin``; the
    scan for each ``i`` stops when ``beyond(dx)`` holds.
    """
    n2 = len(x2)
    if not x1 or n2 == 0:
        return
    jleft = 0
    for i, (x1i, y1i) in enumerate(zip(x1, y1)):
        xleft = x1i - margin
        while x2[jleft] < xleft and jleft + 1 < n2:
            jleft += 1
        for j in range(jleft, n2):
            dx = x2[j] - x1i
            if beyond(dx):
                break
            yield i, j, dx, y2[j] - y1i


def pair_count(x: Sequence[float], y: Sequence[float], rmax: float) -> int:
    """Number of ordered pairs ``(i, j)``, ``i != j``, at distance at most ``rmax``."""
    xs, ys = _coords(x, y)
    r2max = rmax * rmax
    n = len(xs)
    counted = 0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        for scan in (range(i - 1, -1, -1), range(i + 1, n)):
            for j in scan:
                dx = xs[j] - xi
                a = r2max - dx * dx
                if a < 0:
                    break
                dy = ys[j] - yi
                a -= dy * dy
                if a >= 0:
                    counted += 1
    return counted


def cross_count(
    x1: Sequence[float], y1: Sequence[float],
    x2: Sequence[float], y2: Sequence[float], rmax: float,
) -> int:
    """Number of pairs between two patterns at distance strictly less than ``rmax``."""
    ax, ay = _coords(x1, y1)
    bx, by = _coords(x2, y2)
    r2max = rmax * rmax
    counted = 0
    for _i, _j, dx, dy in _sweep(ax, ay, bx, by, rmax,
                                 lambda dx: r2max - dx * dx < 0):
        if r2max - dx * dx - dy * dy > 0:
            counted += 1
    return counted


def duplicated_xy(x: Sequence[float], y: Sequence[float]) -> list[bool]:
    """Flag each point that repeats the location of an earlier point.

    The points need not be sorted.
    """
    xs, ys = _coords(x, y)
    seen: set[tuple[float, float]] = set()
    flags: list[bool] = []
    for point in zip(xs, ys):
        flags.append(point in seen)
        seen.add(point)
    return flags


def close_pairs(
    x: Sequence[float], y: Sequence[float], rmax: float,
    threshold: float | None = None,
) -> list[ClosePair]:
    """All pairs ``i < j`` at distance at most ``rmax``.

    If ``threshold`` is given, each pair records whether its distance is at
    most the threshold.
    """
    xs, ys = _coords(x, y)
    n = len(xs)
    r2max = rmax * rmax
    rmaxplus = rmax + rmax / 16.0
    s2 = None if threshold is None else threshold * threshold
    pairs: list[ClosePair] = []
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        for j in range(i + 1, n):
            dx = xs[j] - xi
            if dx > rmaxplus:
                break
            dy = ys[j] - yi
            d2 = dx * dx + dy * dy
            if d2 <= r2max:
                pairs.append(_pair(i, j, xi, yi, xs[j], ys[j], dx, dy, d2, s2))
    return pairs


def _sweep_pairs(
    ax: list[float], ay: list[float], bx: list[float], by: list[float],
    rmax: float, threshold: float | None,
) -> list[ClosePair]:
    r2max = rmax * rmax
    rmaxplus = rmax + rmax / 16.0
    s2 = None if threshold is None else threshold * threshold
    return [
        _pair(i, j, ax[i], ay[i], bx[j], by[j], dx, dy, dx * dx + dy * dy, s2)
        for i, j, dx, dy in _sweep(ax, ay, bx, by, rmaxplus, lambda dx: dx > rmaxplus)
        if dx * dx + dy * dy <= r2max
    ]


def cross_pairs(
    x1: Sequence[float], y1: Sequence[float],
    x2: Sequence[float], y2: Sequence[float], rmax: float,
    threshold: float | None = None,
) -> list[ClosePair]:
    """All pairs between two patterns at distance at most ``rmax``."""
    ax, ay = _coords(x1, y1)
    bx, by = _coords(x2, y2)
    return _sweep_pairs(ax, ay, bx, by, rmax, threshold)


def close_pairs_alt(
    x: Sequence[float], y: Sequence[float], rmax: float,
    threshold: float | None = None,
) -> list[ClosePair]:
    """Close pairs found by sweeping the pattern against itself.

    Unlike :func:`close_pairs`, the result holds every ordered pair,
    including each point paired with itself.
    """
    xs, ys = _coords(x, y)
    return _sweep_pairs(xs, ys, xs, ys, rmax, threshold)


def close_pairs_fixed(
    x: Sequence[float], y: Sequence[float], rmax: float, limit: int,
) -> list[ClosePair]:
    """All ordered pairs ``(i, j)``, ``i != j``, at distance at most ``rmax``.

    Raises :class:`PairOverflowError` if there are more than ``limit`` pairs.
    """
    xs, ys = _coords(x, y)
    n = len(xs)
    r2max = rmax * rmax
    pairs: list[ClosePair] = []
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        for scan in (range(i - 1, -1, -1), range(i + 1, n)):
            for j in scan:
                dx = xs[j] - xi
                dx2 = dx * dx
                if dx2 > r2max:
                    break
                dy = ys[j] - yi
                d2 = dx2 + dy * dy
                if d2 <= r2max:
                    if len(pairs) >= limit:
                        raise PairOverflowError(limit, pairs)
                    pairs.append(_pair(i, j, xi, yi, xs[j], ys[j], dx, dy, d2, None))
    return pairs


def cross_pairs_fixed(
    x1: Sequence[float], y1: Sequence[float],
    x2: Sequence[float], y2: Sequence[float], rmax: float, limit: int,
) -> list[ClosePair]:
    """All pairs between two patterns at distance at most ``rmax``.

    Raises :class:`PairOverflowError` if there are more than ``limit`` pairs.
    """
    ax, ay = _coords(x1, y1)
    bx, by = _coords(x2, y2)
    r2max = rmax * rmax
    pairs: list[ClosePair] = []
    for i, j, dx, dy in _sweep(ax, ay, bx, by, rmax, lambda dx: dx * dx > r2max):
        d2 = dx * dx + dy * dy
        if d2 <= r2max:
            if len(pairs) >= limit:
                raise PairOverflowError(limit, pairs)
            pairs.append(_pair(i, j, ax[i], ay[i], bx[j], by[j], dx, dy, d2, None))
    return pairs