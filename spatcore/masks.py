"""Operations on binary pixel masks and pixel grids.

Grids are arrays of shape ``(ny, nx)``: the row index runs along ``y`` and
the column index along ``x``.
"""

from __future__ import annotations

import math
from itertools import accumulate, repeat
from typing import Sequence

import numpy as np

__all__ = ["discs_to_grid", "boundary_mask", "far_distance_grid"]


def _grid(start: float, step: float, count: int) -> np.ndarray:
    if count <= 0:
        return np.empty(0, dtype=float)
    values = accumulate(repeat(step, count - 1), initial=start)
    return np.fromiter(values, dtype=float, count=count)


def discs_to_grid(
    nx: int,
    x0: float,
    xstep: float,
    ny: int,
    y0: float,
    ystep: float,
    xd: Sequence[float],
    yd: Sequence[float],
    rd: Sequence[float],
) -> np.ndarray:
    """Mask of the pixels whose centres lie in any of the given discs."""
    if not len(xd) == len(yd) == len(rd):
        raise ValueError("disc parameter vectors must have the same length")
    out = np.zeros((ny, nx), dtype=int)
    for xk, yk, rk in zip(xd, yd, rd):
        imax = math.floor((yk + rk - y0) / ystep)
        imin = math.ceil((yk - rk - y0) / ystep)
        jmax = math.floor((xk + rk - x0) / xstep)
        jmin = math.ceil((xk - rk - x0) / xstep)
        if not (imax >= 0 and imin < ny and jmax >= 0 and jmin < nx
                and imax >= imin and jmax >= jmin):
            continue
        jmin = max(jmin, 0)
        jmax = min(jmax, nx - 1)
        rk2 = rk * rk
        offsets = _grid(x0 + jmin * xstep - xk, xstep, jmax - jmin + 1)
        for j, dx in enumerate(offsets, start=jmin):
            spare = rk2 - dx * dx
            if spare < 0:
                continue
            dymax = math.sqrt(spare)
            imaxj = math.floor((yk + dymax - y0) / ystep)
            iminj = math.ceil((yk - dymax - y0) / ystep)
            if imaxj >= 0 and iminj < ny:
                iminj = max(iminj, 0)
                imaxj = min(imaxj, ny - 1)
                out[iminj:imaxj + 1, j] = 1
    return out


def boundary_mask(mask) -> np.ndarray:
    """Boundary pixels of a binary mask.

    Pixels on the frame keep the mask value; interior pixels are 1 where
    they differ from one of their four neighbours and 0 otherwise.
    """
    m = np.asarray(mask)
    if m.ndim != 2:
        raise ValueError("mask must be two-dimensional")
    m = m.astype(int)
    b = np.zeros_like(m)
    if m.size == 0:
        return b
    b[0, :] = m[0, :]
    b[-1, :] = m[-1, :]
    b[:, 0] = m[:, 0]
    b[:, -1] = m[:, -1]
    if m.shape[0] > 2 and m.shape[1] > 2:
        centre = m[1:-1, 1:-1]
        differs = (
            (centre != m[:-2, 1:-1])
            | (centre != m[2:, 1:-1])
            | (centre != m[1:-1, :-2])
            | (centre != m[1:-1, 2:])
        )
        b[1:-1, 1:-1] = differs.astype(int)
    return b


def far_distance_grid(
    nx: int,
    x0: float,
    xstep: float,
    ny: int,
    y0: float,
    ystep: float,
    xp: Sequence[float],
    yp: Sequence[float],
    squared: bool = False,
) -> np.ndarray:
    """Distance from each pixel to the furthest data point.

    With no data points every entry is zero.
    """
    px = np.asarray(xp, dtype=float).ravel()
    py = np.asarray(yp, dtype=float).ravel()
    if px.shape != py.shape:
        raise ValueError("xp and yp must have the same length")
    out = np.zeros((ny, nx), dtype=float)
    if px.size == 0 or out.size == 0:
        return out
    xs = _grid(x0, xstep, nx)
    ys = _grid(y0, ystep, ny)
    dx = xs[None, :, None] - px[None, None, :]
    dy = ys[:, None, None] - py[None, None, :]
    d2 = dx * dx + dy * dy
    d2max = np.maximum(d2.max(axis=2), 0.0)
    return d2max if squared else np.sqrt(d2max)