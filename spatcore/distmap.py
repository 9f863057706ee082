"""Distance transforms on rectangular pixel rasters.

A raster covers the rectangle ``[xmin, xmax] x [ymin, ymax]`` with
``nrow`` by ``ncol`` pixel centres, the first and last centres lying on the
edges of the rectangle.  Internally the raster carries a margin of pixels
on every side; row indices run along ``y`` and column indices along ``x``.
Results are returned for the interior pixels only, as arrays of shape
``(nrow, ncol)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

__all__ = [
    "RasterGrid",
    "DistanceMap",
    "distance_to_boundary",
    "binary_distance_map",
    "exact_distance_transform",
    "pseudo_exact_distance_transform",
]

_UNDEFINED = -1


@dataclass(frozen=True)
class RasterGrid:
    """Geometry of a raster with a margin of pixels around its interior.

    ``nrow`` and ``ncol`` count the interior pixels; ``mrow`` and ``mcol``
    are the margin widths.  Row and column indices used by the methods
    refer to the full raster, margins included.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float
    nrow: int
    ncol: int
    mrow: int = 1
    mcol: int = 1

    def __post_init__(self) -> None:
        if self.nrow < 2 or self.ncol < 2:
            raise ValueError("a raster needs at least two rows and two columns")
        if self.mrow < 1 or self.mcol < 1:
            raise ValueError("margins must be at least one pixel wide")

    @property
    def xstep(self) -> float:
        return (self.xmax - self.xmin) / (self.ncol - 1)

    @property
    def ystep(self) -> float:
        return (self.ymax - self.ymin) / (self.nrow - 1)

    @property
    def rmin(self) -> int:
        return self.mrow

    @property
    def rmax(self) -> int:
        return self.mrow + self.nrow - 1

    @property
    def cmin(self) -> int:
        return self.mcol

    @property
    def cmax(self) -> int:
        return self.mcol + self.ncol - 1

    @property
    def shape(self) -> tuple[int, int]:
        """Shape of the full raster, margins included."""
        return self.nrow + 2 * self.mrow, self.ncol + 2 * self.mcol

    @property
    def interior(self) -> tuple[slice, slice]:
        return slice(self.rmin, self.rmax + 1), slice(self.cmin, self.cmax + 1)

    def x_position(self, col: int) -> float:
        """x coordinate of the centre of a pixel column."""
        return self.xmin + self.xstep * (col - self.cmin)

    def y_position(self, row: int) -> float:
        """y coordinate of the centre of a pixel row."""
        return self.ymin + self.ystep * (row - self.rmin)

    def row_index(self, y: float) -> int:
        """Row whose centre is the nearest at or below ``y``."""
        return self.rmin + math.floor((y - self.ymin) / self.ystep)

    def col_index(self, x: float) -> int:
        """Column whose centre is the nearest at or left of ``x``."""
        return self.cmin + math.floor((x - self.xmin) / self.xstep)

    def _diagonal_squared(self) -> float:
        return (self.xmin - self.xmax) ** 2 + (self.ymin - self.ymax) ** 2


@dataclass(frozen=True)
class DistanceMap:
    """Result of a distance transform over the interior pixels.

    ``distance`` holds the distance to the nearest feature and ``boundary``
    the distance to the edge of the rectangle.  ``index`` gives the nearest
    data point for point-pattern transforms; ``rows`` and ``cols`` give the
    nearest foreground pixel (interior indices) for image transforms.
    Undefined entries are -1.
    """

    distance: np.ndarray
    boundary: np.ndarray
    index: np.ndarray | None = None
    rows: np.ndarray | None = None
    cols: np.ndarray | None = None


def distance_to_boundary(grid: RasterGrid) -> np.ndarray:
    """Distance from each interior pixel centre to the edge of the rectangle."""
    out = np.zeros((grid.nrow, grid.ncol), dtype=float)
    for r, row in enumerate(range(grid.rmin, grid.rmax + 1)):
        y = grid.y_position(row)
        yd = min(y - grid.ymin, grid.ymax - y)
        for c, col in enumerate(range(grid.cmin, grid.cmax + 1)):
            x = grid.x_position(col)
            xd = min(x - grid.xmin, grid.xmax - x)
            out[r, c] = min(xd, yd)
    return out


def _interior_mask(mask, grid: RasterGrid) -> list[list[bool]]:
    m = np.asarray(mask)
    if m.shape != (grid.nrow, grid.ncol):
        raise ValueError("mask must have the interior shape of the raster")
    full = np.zeros(grid.shape, dtype=bool)
    full[grid.interior] = m != 0
    return full.tolist()


def binary_distance_map(mask, xmin: float, ymin: float, xmax: float, ymax: float) -> DistanceMap:
    """Chamfer distance from each pixel to the nearest nonzero pixel.

    Paths move between 8-connected neighbours; steps cost the pixel width,
    the pixel height or the pixel diagonal.  Pixels with no foreground at
    all keep a large sentinel distance (twice the rectangle's diagonal).
    """
    m = np.asarray(mask)
    if m.ndim != 2:
        raise ValueError("mask must be two-dimensional")
    grid = RasterGrid(xmin, ymin, xmax, ymax, m.shape[0], m.shape[1])
    inside = _interior_mask(m, grid)

    xstep = grid.xstep
    ystep = grid.ystep
    diagstep = math.sqrt(xstep * xstep + ystep * ystep)
    xstep = abs(xstep)
    ystep = abs(ystep)
    huge = 2.0 * math.sqrt(grid._diagonal_squared())

    nfull, cfull = grid.shape
    dist = [[0.0] * cfull for _ in range(nfull)]
    rmin, rmax, cmin, cmax = grid.rmin, grid.rmax, grid.cmin, grid.cmax
    for j in range(rmin - 1, rmax + 2):
        for k in (cmin - 1, cmax + 1):
            dist[j][k] = 0.0 if inside[j][k] else huge
    for k in range(cmin - 1, cmax + 2):
        for j in (rmin - 1, rmax + 1):
            dist[j][k] = 0.0 if inside[j][k] else huge

    for j in range(rmin, rmax + 1):
        for k in range(cmin, cmax + 1):
            if inside[j][k]:
                dist[j][k] = 0.0
            else:
                dist[j][k] = min(
                    huge,
                    diagstep + dist[j - 1][k - 1],
                    ystep + dist[j - 1][k],
                    diagstep + dist[j - 1][k + 1],
                    xstep + dist[j][k - 1],
                )

    for j in range(rmax, rmin - 1, -1):
        for k in range(cmax, cmin - 1, -1):
            if not inside[j][k]:
                dist[j][k] = min(
                    dist[j][k],
                    diagstep + dist[j + 1][k + 1],
                    ystep + dist[j + 1][k],
                    diagstep + dist[j + 1][k - 1],
                    xstep + dist[j][k + 1],
                )

    distance = np.array(dist, dtype=float)[grid.interior]
    return DistanceMap(distance=distance, boundary=distance_to_boundary(grid))


_FORWARD = ((-1, -1), (-1, 0), (-1, 1), (0, -1))
_BACKWARD = ((1, 1), (1, 0), (1, -1), (0, 1))


def exact_distance_transform(
    x: Sequence[float], y: Sequence[float], grid: RasterGrid
) -> DistanceMap:
    """Distance from each pixel centre to the nearest data point.

    The points must lie within the rectangle of the grid.  ``index`` gives
    the nearest point for each pixel.  With no data points every index is
    -1 and every distance is a sentinel equal to twice the squared diagonal
    of the rectangle.
    """
    xs = [float(v) for v in np.asarray(x, dtype=float).ravel()]
    ys = [float(v) for v in np.asarray(y, dtype=float).ravel()]
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length")

    nfull, cfull = grid.shape
    huge = 2.0 * grid._diagonal_squared()
    dist = [[huge] * cfull for _ in range(nfull)]
    index = [[_UNDEFINED] * cfull for _ in range(nfull)]
    xpos = [grid.x_position(c) for c in range(cfull)]
    ypos = [grid.y_position(r) for r in range(nfull)]

    if not xs:
        return DistanceMap(
            distance=np.array(dist, dtype=float)[grid.interior],
            boundary=distance_to_boundary(grid),
            index=np.array(index, dtype=int)[grid.interior],
        )

    for i, (px, py) in enumerate(zip(xs, ys)):
        j = grid.row_index(py)
        k = grid.col_index(px)
        if not (0 <= j and j + 1 < nfull and 0 <= k and k + 1 < cfull):
            raise ValueError(f"point {i} lies outside the raster")
        for row in (j, j + 1):
            for col in (k, k + 1):
                d = (px - xpos[col]) ** 2 + (py - ypos[row]) ** 2
                if index[row][col] < 0 or dist[row][col] > d:
                    index[row][col] = i
                    dist[row][col] = d

    def compare(row: int, col: int, offsets) -> None:
        for dr, dc in offsets:
            rr, cc = row + dr, col + dc
            d = dist[row][col]
            ii = index[rr][cc]
            if ii >= 0 and dist[rr][cc] < d:
                dd = (xs[ii] - xpos[col]) ** 2 + (ys[ii] - ypos[row]) ** 2
                if dd < d:
                    index[row][col] = ii
                    dist[row][col] = dd

    for row in range(grid.rmin, grid.rmax + 1):
        for col in range(grid.cmin, grid.cmax + 1):
            compare(row, col, _FORWARD)
    for row in range(grid.rmax, grid.rmin - 1, -1):
        for col in range(grid.cmax, grid.cmin - 1, -1):
            compare(row, col, _BACKWARD)

    distance = np.sqrt(np.array(dist, dtype=float)[grid.interior])
    return DistanceMap(
        distance=distance,
        boundary=distance_to_boundary(grid),
        index=np.array(index, dtype=int)[grid.interior],
    )


def pseudo_exact_distance_transform(mask, grid: RasterGrid) -> DistanceMap:
    """Distance from each pixel centre to the nearest nonzero pixel centre.

    ``mask`` has the interior shape of the grid.  ``rows`` and ``cols``
    give the interior indices of the nearest foreground pixel.  Where the
    mask has no foreground the indices are -1 and the distance is the
    square root of twice the squared diagonal of the rectangle.
    """
    inside = _interior_mask(mask, grid)
    nfull, cfull = grid.shape
    huge = 2.0 * grid._diagonal_squared()
    dist = [[huge] * cfull for _ in range(nfull)]
    rows = [[_UNDEFINED] * cfull for _ in range(nfull)]
    cols = [[_UNDEFINED] * cfull for _ in range(nfull)]
    xpos = [grid.x_position(c) for c in range(cfull)]
    ypos = [grid.y_position(r) for r in range(nfull)]

    for j in range(grid.rmin, grid.rmax + 1):
        for k in range(grid.cmin, grid.cmax + 1):
            if inside[j][k]:
                dist[j][k] = 0.0
                rows[j][k] = j
                cols[j][k] = k

    def compare(row: int, col: int, offsets) -> None:
        x = xpos[col]
        y = ypos[row]
        d = dist[row][col]
        for dr, dc in offsets:
            rr, cc = row + dr, col + dc
            r = rows[rr][cc]
            c = cols[rr][cc]
            if r >= 0 and c >= 0 and dist[rr][cc] < d:
                dnew = (x - xpos[c]) ** 2 + (y - ypos[r]) ** 2
                if dnew < d:
                    rows[row][col] = r
                    cols[row][col] = c
                    dist[row][col] = dnew
                    d = dnew

    for row in range(grid.rmin, grid.rmax + 1):
        for col in range(grid.cmin, grid.cmax + 1):
            compare(row, col, _FORWARD)
    for row in range(grid.rmax, grid.rmin - 1, -1):
        for col in range(grid.cmax, grid.cmin - 1, -1):
            compare(row, col, _BACKWARD)

    row_arr = np.array(rows, dtype=int)[grid.interior]
    col_arr = np.array(cols, dtype=int)[grid.interior]
    row_arr = np.where(row_arr >= 0, row_arr - grid.mrow, _UNDEFINED)
    col_arr = np.where(col_arr >= 0, col_arr - grid.mcol, _UNDEFINED)
    return DistanceMap(
        distance=np.sqrt(np.array(dist, dtype=float)[grid.interior]),
        boundary=distance_to_boundary(grid),
        rows=row_arr,
        cols=col_arr,
    )