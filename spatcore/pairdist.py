"""Distances between pairs of points in two and three dimensions.

Pairwise results are symmetric matrices of shape ``(n, n)`` with a zero
diagonal.  Cross results have shape ``(nfrom, nto)``: entry ``[i, j]`` is the
distance from point ``i`` of the first set to point ``j`` of the second.
The periodic variants measure each coordinate difference on a torus whose
side lengths are given, using the nearest of the three images
``d``, ``d - side`` and ``d + side``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = [
    "pair_distances",
    "cross_distances",
    "periodic_pair_distances",
    "periodic_cross_distances",
    "pair_distances_3d",
    "cross_distances_3d",
    "periodic_pair_distances_3d",
    "periodic_cross_distances_3d",
    "match_xyz",
]


def _coords(*columns: Sequence[float]) -> list[np.ndarray]:
    """Convert coordinate vectors to flat float arrays of one common length."""
    arrays = [np.asarray(c, dtype=float).ravel() for c in columns]
    if len({a.size for a in arrays}) > 1:
        raise ValueError("coordinate vectors must have the same length")
    return arrays


def _square(dx: np.ndarray) -> np.ndarray:
    return dx * dx


def _periodic_square(dx: np.ndarray, side: float) -> np.ndarray:
    """Squared difference to the nearest periodic image."""
    best = dx * dx
    below = (dx - side) * (dx - side)
    best = np.where(below < best, below, best)
    above = (dx + side) * (dx + side)
    return np.where(above < best, above, best)


def _finish(d2: np.ndarray, squared: bool) -> np.ndarray:
    return d2 if squared else np.sqrt(d2)


def _pairwise(columns: list[np.ndarray], sides, squared: bool) -> np.ndarray:
    n = columns[0].size
    total = np.zeros((n, n), dtype=float)
    for coord, side in zip(columns, sides):
        diff = coord[:, None] - coord[None, :]
        total = total + (_square(diff) if side is None else _periodic_square(diff, side))
    out = _finish(total, squared)
    np.fill_diagonal(out, 0.0)
    return out


def _crosswise(from_cols: list[np.ndarray], to_cols: list[np.ndarray], sides,
               squared: bool) -> np.ndarray:
    nf, nt = from_cols[0].size, to_cols[0].size
    total = np.zeros((nf, nt), dtype=float)
    for cf, ct, side in zip(from_cols, to_cols, sides):
        diff = ct[None, :] - cf[:, None]
        total = total + (_square(diff) if side is None else _periodic_square(diff, side))
    return _finish(total, squared)


def pair_distances(x: Sequence[float], y: Sequence[float], squared: bool = False) -> np.ndarray:
    """Matrix of distances between all pairs of points in the plane."""
    cols = _coords(x, y)
    return _pairwise(cols, (None, None), squared)


def cross_distances(
    xfrom: Sequence[float],
    yfrom: Sequence[float],
    xto: Sequence[float],
    yto: Sequence[float],
    squared: bool = False,
) -> np.ndarray:
    """Distances from each point of one planar set to each point of another."""
    fcols = _coords(xfrom, yfrom)
    tcols = _coords(xto, yto)
    return _crosswise(fcols, tcols, (None, None), squared)


def periodic_pair_distances(
    x: Sequence[float],
    y: Sequence[float],
    width: float,
    height: float,
    squared: bool = False,
) -> np.ndarray:
    """Pairwise planar distances with periodic edge correction."""
    cols = _coords(x, y)
    return _pairwise(cols, (float(width), float(height)), squared)


def periodic_cross_distances(
    xfrom: Sequence[float],
    yfrom: Sequence[float],
    xto: Sequence[float],
    yto: Sequence[float],
    width: float,
    height: float,
    squared: bool = False,
) -> np.ndarray:
    """Planar cross distances with periodic edge correction."""
    fcols = _coords(xfrom, yfrom)
    tcols = _coords(xto, yto)
    return _crosswise(fcols, tcols, (float(width), float(height)), squared)


def pair_distances_3d(
    x: Sequence[float], y: Sequence[float], z: Sequence[float], squared: bool = False
) -> np.ndarray:
    """Matrix of distances between all pairs of points in space."""
    cols = _coords(x, y, z)
    return _pairwise(cols, (None, None, None), squared)


def cross_distances_3d(
    xfrom: Sequence[float],
    yfrom: Sequence[float],
    zfrom: Sequence[float],
    xto: Sequence[float],
    yto: Sequence[float],
    zto: Sequence[float],
    squared: bool = False,
) -> np.ndarray:
    """Distances from each point of one spatial set to each point of another."""
    fcols = _coords(xfrom, yfrom, zfrom)
    tcols = _coords(xto, yto, zto)
    return _crosswise(fcols, tcols, (None, None, None), squared)


def periodic_pair_distances_3d(
    x: Sequence[float],
    y: Sequence[float],
    z: Sequence[float],
    width: float,
    height: float,
    depth: float,
    squared: bool = False,
) -> np.ndarray:
    """Pairwise spatial distances with periodic edge correction."""
    cols = _coords(x, y, z)
    return _pairwise(cols, (float(width), float(height), float(depth)), squared)


def periodic_cross_distances_3d(
    xfrom: Sequence[float],
    yfrom: Sequence[float],
    zfrom: Sequence[float],
    xto: Sequence[float],
    yto: Sequence[float],
    zto: Sequence[float],
    width: float,
    height: float,
    depth: float,
    squared: bool = False,
) -> np.ndarray:
    """Spatial cross distances with periodic edge correction."""
    fcols = _coords(xfrom, yfrom, zfrom)
    tcols = _coords(xto, yto, zto)
    return _crosswise(fcols, tcols, (float(width), float(height), float(depth)), squared)


def match_xyz(
    xa: Sequence[float],
    ya: Sequence[float],
    za: Sequence[float],
    xb: Sequence[float],
    yb: Sequence[float],
    zb: Sequence[float],
) -> list[int]:
    """Index in ``b`` of the first point identical to each point of ``a``.

    Entries are 0 where no match exists.  The first point of ``a`` is not
    examined and its entry is always 0.
    """
    a_points = list(zip(*_coords(xa, ya, za)))
    b_points = list(zip(*_coords(xb, yb, zb)))
    result = [0] * len(a_points)
    for i, point in enumerate(a_points[1:], start=1):
        result[i] = next((j for j, other in enumerate(b_points) if other == point), 0)
    return result