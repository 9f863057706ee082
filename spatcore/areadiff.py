"""Uncovered area of a disc, estimated by point counting on a fine grid.

For a radius ``r`` and a point pattern ``x``, the quantity computed is the
area of the disc ``b(0, r)`` that is not covered by any of the discs
``b(x_i, r)``.
"""

from __future__ import annotations

import math
from itertools import accumulate, repeat
from typing import Iterable, Sequence

import numpy as np

__all__ = ["area_diff", "area_diffs", "area_diff_box"]


def _grid(start: float, step: float, count: int) -> np.ndarray:
    """Return ``count`` coordinates reached by repeatedly adding ``step``."""
    if count <= 0:
        return np.empty(0, dtype=float)
    values = accumulate(repeat(step, count - 1), initial=start)
    return np.fromiter(values, dtype=float, count=count)


def _points(x: Iterable[float], y: Iterable[float]) -> tuple[np.ndarray, np.ndarray]:
    px = np.asarray(list(x) if not isinstance(x, np.ndarray) else x, dtype=float).ravel()
    py = np.asarray(list(y) if not isinstance(y, np.ndarray) else y, dtype=float).ravel()
    if px.shape != py.shape:
        raise ValueError("x and y must have the same length")
    return px, py


def _check_grid(ngrid: int) -> int:
    ngrid = int(ngrid)
    if ngrid < 2:
        raise ValueError("ngrid must be at least 2")
    return ngrid


def _uncovered(xg: float, ygs: np.ndarray, px: np.ndarray, py: np.ndarray, r2: float) -> int:
    """Count grid points ``(xg, yg)`` not within distance ``r`` of any data point."""
    if ygs.size == 0:
        return 0
    xdif = px - xg
    b2 = r2 - xdif * xdif
    near = b2 > 0
    if not near.any():
        return int(ygs.size)
    ydif = py[near][None, :] - ygs[:, None]
    covered = ((b2[near][None, :] - ydif * ydif) > 0).any(axis=1)
    return int(ygs.size - np.count_nonzero(covered))


def area_diff(radius: float, x: Sequence[float], y: Sequence[float], ngrid: int) -> float:
    """Uncovered area of the disc of the given radius, on an ``ngrid`` square grid."""
    px, py = _points(x, y)
    ngrid = _check_grid(ngrid)
    r = float(radius)
    r2 = r * r
    step = 2 * r / (ngrid - 1)
    columns = _grid(-r, step, ngrid)
    count = 0
    for xg in _grid(-r, step, ngrid):
        a2 = r2 - xg * xg
        inside = columns[columns * columns < a2]
        count += _uncovered(xg, inside, px, py, r2)
    return float(count * step * step)


def area_diffs(
    radii: Iterable[float], x: Sequence[float], y: Sequence[float], ngrid: int
) -> list[float]:
    """Uncovered disc area for each radius in ``radii``."""
    px, py = _points(x, y)
    ngrid = _check_grid(ngrid)
    areas: list[float] = []
    for radius in radii:
        r = float(radius)
        if r == 0.0:
            areas.append(0.0)
            continue
        if px.size == 0:
            areas.append(math.pi * r * r)
            continue
        r2 = r * r
        step = 2 * r / (ngrid - 1)
        count = 0
        for xg in _grid(-r, step, ngrid):
            a2 = r2 - xg * xg
            m0 = math.floor(math.sqrt(a2) / step) if a2 > 0.0 else 0
            ygs = _grid(-m0 * step, step, 2 * m0 + 1)
            count += _uncovered(xg, ygs, px, py, r2)
        areas.append(float(count * step * step))
    return areas


def area_diff_box(
    radii: Iterable[float],
    x: Sequence[float],
    y: Sequence[float],
    ngrid: int,
    xmin: float,
    ymin: float,
    xmax: float,
    ymax: float,
) -> list[float]:
    """Uncovered disc area for each radius, restricted to the given rectangle.

    The rectangle is expressed relative to the disc centre.
    """
    px, py = _points(x, y)
    ngrid = _check_grid(ngrid)
    areas: list[float] = []
    for radius in radii:
        r = float(radius)
        if r == 0.0:
            areas.append(0.0)
            continue
        if px.size == 0:
            areas.append(math.pi * r * r)
            continue
        r2 = r * r
        step = 2 * r / (ngrid - 1)
        count = 0
        xleft = xmin if xmin > -r else -r
        xright = xmax if xmax < r else r
        ileft = math.ceil(xleft / step)
        iright = math.floor(xright / step)
        if ileft <= iright:
            for xg in _grid(ileft * step, step, iright - ileft + 1):
                a2 = r2 - xg * xg
                a = math.sqrt(a2) if a2 > 0 else 0.0
                yhigh = ymax if ymax < a else a
                ylow = ymin if ymin > -a else -a
                mhigh = math.floor(yhigh / step)
                mlow = math.ceil(ylow / step)
                if mlow <= mhigh:
                    ygs = _grid(mlow * step, step, mhigh - mlow + 1)
                    count += _uncovered(xg, ygs, px, py, r2)
        areas.append(float(count * step * step))
    return areas