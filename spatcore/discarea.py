"""Area of intersection between discs and a polygonal window."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

__all__ = ["disc_contrib", "disc_area_poly"]


def _trigbit(v: float) -> float:
    """Area of the unit disc lying in the half-plane ``x <= v``."""
    if v <= -1.0:
        return 0.0
    if v >= 1.0:
        return math.pi
    return math.pi / 2 + math.asin(v) + v * math.sqrt(1 - v * v)


def disc_contrib(xleft: float, yleft: float, xright: float, yright: float, eps: float) -> float:
    """Area of the unit disc at the origin lying under the segment from left to right.

    The region is the trapezium beneath the segment; ``xleft < xright`` is assumed.
    """
    xlo = max(xleft, -1.0)
    xhi = min(xright, 1.0)
    if xlo >= xhi - eps:
        return 0.0

    slope = (yright - yleft) / (xright - xleft)
    intercept = yleft - slope * xleft
    a = 1 + slope * slope
    b = 2 * slope * intercept
    c = intercept * intercept - 1.0
    det = b * b - 4 * a * c

    if det <= 0.0:
        if intercept < 0.0:
            return 0.0
        return _trigbit(xhi) - _trigbit(xlo)

    root = math.sqrt(det)
    xcut1 = (-b - root) / (2 * a)
    xcut2 = (-b + root) / (2 * a)
    if xcut1 >= xhi or xcut2 <= xlo:
        if yleft < 0.0:
            return 0.0
        return _trigbit(xhi) - _trigbit(xlo)

    result = 0.0
    ycut1 = intercept + slope * xcut1
    ycut2 = intercept + slope * xcut2
    if xcut1 > xlo and ycut1 >= 0.0:
        result += _trigbit(xcut1) - _trigbit(xlo)
    if xcut2 < xhi and ycut2 >= 0.0:
        result += _trigbit(xhi) - _trigbit(xcut2)

    xunder1 = max(xlo, xcut1)
    xunder2 = min(xhi, xcut2)
    dx = xunder2 - xunder1
    dx2 = xunder2 * xunder2 - xunder1 * xunder1
    result += intercept * dx + slope * dx2 / 2 + (_trigbit(xunder2) - _trigbit(xunder1)) / 2
    return result


def disc_area_poly(
    xc: Sequence[float],
    yc: Sequence[float],
    radii,
    x0: Sequence[float],
    y0: Sequence[float],
    x1: Sequence[float],
    y1: Sequence[float],
    eps: float,
) -> np.ndarray:
    """Area of intersection between discs and a polygon given by its edges.

    ``radii`` has one row per centre and one column per radius; a flat
    sequence gives one radius per centre.  Edges run from ``(x0, y0)`` to
    ``(x1, y1)``; outer boundaries are taken anticlockwise.  The result has
    the same shape as the radius matrix.
    """
    centres_x = [float(v) for v in xc]
    centres_y = [float(v) for v in yc]
    if len(centres_x) != len(centres_y):
        raise ValueError("xc and yc must have the same length")
    rmat = np.asarray(radii, dtype=float)
    if rmat.ndim == 1:
        rmat = rmat.reshape(-1, 1)
    if rmat.ndim != 2 or rmat.shape[0] != len(centres_x):
        raise ValueError("radii must have one row per centre")
    segments = list(zip(x0, y0, x1, y1))
    if not len(x0) == len(y0) == len(x1) == len(y1):
        raise ValueError("segment coordinate vectors must have the same length")

    out = np.zeros(rmat.shape, dtype=float)
    for i, (xcentre, ycentre) in enumerate(zip(centres_x, centres_y)):
        for j, radius in enumerate(rmat[i]):
            radius = float(radius)
            radius2 = radius * radius
            total = 0.0
            for xx0, yy0, xx1, yy1 in segments:
                if radius <= eps:
                    contrib = 0.0
                elif xx0 < xx1:
                    contrib = -radius2 * disc_contrib(
                        (xx0 - xcentre) / radius,
                        (yy0 - ycentre) / radius,
                        (xx1 - xcentre) / radius,
                        (yy1 - ycentre) / radius,
                        eps,
                    )
                else:
                    contrib = radius2 * disc_contrib(
                        (xx1 - xcentre) / radius,
                        (yy1 - ycentre) / radius,
                        (xx0 - xcentre) / radius,
                        (yy0 - ycentre) / radius,
                        eps,
                    )
                total += contrib
            out[i, j] = total
    return out