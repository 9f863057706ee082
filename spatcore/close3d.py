"""Close pairs of points in three dimensions.

Every function here assumes that each point pattern is sorted in increasing
order of its ``x`` coordinate. The searches use that ordering to stop
scanning early. Point indices in the results are zero-based.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

__all__ = ["ClosePair3D", "close_pairs_3d", "cross_pairs_3d", "close_pairs_3d_alt"]


@dataclass(frozen=True)
class ClosePair3D:
    """A pair of points ``(i, j)`` in space lying within the search distance.

    ``dx``, ``dy`` and ``dz`` are the coordinates of point ``j`` minus those
    of point ``i``. ``within`` is set only when a threshold was requested.
    It tells whether the distance is at most that threshold.
    """

    i: int
    j: int
    xi: float
    yi: float
    zi: float
    xj: float
    yj: float
    zj: float
    dx: float
    dy: float
    dz: float
    d: float
    within: bool | None = None


_Points = tuple[list[float], list[float], list[float]]


def _coords(x: Sequence[float], y: Sequence[float], z: Sequence[float]) -> _Points:
    cols = [[float(v) for v in np.asarray(c, dtype=float).ravel()] for c in (x, y, z)]
    if len({len(c) for c in cols}) > 1:
        raise ValueError("x, y and z must have the same length")
    return cols[0], cols[1], cols[2]


def _within_3d(
    i: int, j: int, a: _Points, b: _Points, r2max: float, s2: float | None
) -> ClosePair3D | None:
    """Return the pair if point ``b[j]`` lies within ``sqrt(r2max)`` of ``a[i]``."""
    ax, ay, az = a
    bx, by, bz = b
    dx = bx[j] - ax[i]
    dy = by[j] - ay[i]
    d2 = dx * dx + dy * dy
    if d2 > r2max:
        return None
    dz = bz[j] - az[i]
    d2 += dz * dz
    if d2 > r2max:
        return None
    return ClosePair3D(
        i=i, j=j,
        xi=ax[i], yi=ay[i], zi=az[i],
        xj=bx[j], yj=by[j], zj=bz[j],
        dx=dx, dy=dy, dz=dz,
        d=math.sqrt(d2),
        within=None if s2 is None else d2 <= s2,
    )


def _sweep(a: _Points, b: _Points, margin: float) -> Iterator[tuple[int, int]]:
    """Yield candidate index pairs ``(i, j)`` with ``|b.x[j] - a.x[i]|`` near ``margin``."""
    ax = a[0]
    bx = b[0]
    n2 = len(bx)
    if not ax or n2 == 0:
        return
    jleft = 0
    for i, xi in enumerate(ax):
        xleft = xi - margin
        while bx[jleft] < xleft and jleft + 1 < n2:
            jleft += 1
        for j in range(jleft, n2):
            if bx[j] - xi > margin:
                break
            yield i, j


def _limits(rmax: float, threshold: float | None) -> tuple[float, float, float | None]:
    r2max = rmax * rmax
    rmaxplus = rmax + rmax / 16.0
    s2 = None if threshold is None else threshold * threshold
    return r2max, rmaxplus, s2


def close_pairs_3d(
    x: Sequence[float], y: Sequence[float], z: Sequence[float], rmax: float,
    threshold: float | None = None,
) -> list[ClosePair3D]:
    """All pairs ``i < j`` at distance at most ``rmax``."""
    pts = _coords(x, y, z)
    xs = pts[0]
    n = len(xs)
    r2max, rmaxplus, s2 = _limits(rmax, threshold)
    pairs: list[ClosePair3D] = []
    for i, xi in enumerate(xs):
        for j in range(i + 1, n):
            if xs[j] - xi > rmaxplus:
                break
            pair = _within_3d(i, j, pts, pts, r2max, s2)
            if pair is not None:
                pairs.append(pair)
    return pairs


def _sweep_pairs(a: _Points, b: _Points, rmax: float,
                 threshold: float | None) -> list[ClosePair3D]:
    r2max, rmaxplus, s2 = _limits(rmax, threshold)
    found = (_within_3d(i, j, a, b, r2max, s2) for i, j in _sweep(a, b, rmaxplus))
    return [pair for pair in found if pair is not None]


def cross_pairs_3d(
    x1: Sequence[float], y1: Sequence[float], z1: Sequence[float],
    x2: Sequence[float], y2: Sequence[float], z2: Sequence[float],
    rmax: float, threshold: float | None = None,
) -> list[ClosePair3D]:
    """All pairs between two spatial patterns at distance at most ``rmax``."""
    return _sweep_pairs(_coords(x1, y1, z1), _coords(x2, y2, z2), rmax, threshold)


def close_pairs_3d_alt(
    x: Sequence[float], y: Sequence[float], z: Sequence[float], rmax: float,
    threshold: float | None = None,
) -> list[ClosePair3D]:
    """Close pairs found by sweeping the pattern against itself.

    The result holds every ordered pair, including each point paired with
    itself.
    """
    pts = _coords(x, y, z)
    return _sweep_pairs(pts, pts, rmax, threshold)