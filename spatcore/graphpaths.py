"""Shortest-path distances in a graph given by edge lengths."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

__all__ = ["PathStatus", "PathResult", "shortest_path_distances", "UNREACHABLE"]

UNREACHABLE = -1
"""Distance recorded for pairs of vertices joined by no path."""


class PathStatus(enum.IntEnum):
    """How the iteration ended."""

    NOT_CONVERGED = -1
    CONVERGED = 0
    TOLERANCE = 1


@dataclass(frozen=True)
class PathResult:
    """Shortest-path distance matrix together with the iteration outcome.

    Unreachable pairs hold :data:`UNREACHABLE`.
    """

    distances: np.ndarray
    iterations: int
    status: PathStatus


def shortest_path_distances(d, adj, tol=0.0) -> PathResult:
    """Compute shortest-path distances from a matrix of edge lengths.

    ``adj`` marks the edges (nonzero entries). Negative edge lengths are
    treated as missing edges. For integer lengths the tolerance is ignored;
    for real lengths the iteration also stops once the largest improvement
    in a sweep falls below ``tol``.
    """
    dmat = np.asarray(d)
    amat = np.asarray(adj)
    if dmat.ndim != 2 or dmat.shape[0] != dmat.shape[1]:
        raise ValueError("d must be a square matrix")
    if amat.shape != dmat.shape:
        raise ValueError("adj must have the same shape as d")
    floaty = not np.issubdtype(dmat.dtype, np.integer)
    convert = float if floaty else int
    n = dmat.shape[0]
    lengths = [[convert(v) for v in row] for row in dmat.tolist()]
    edges = [[bool(v) for v in row] for row in amat.tolist()]

    dpath = [
        [0 if i == j else (lengths[i][j] if edges[i][j] else UNREACHABLE) for j in range(n)]
        for i in range(n)
    ]
    if floaty:
        dpath = [[float(v) for v in row] for row in dpath]
    total_edges = sum(edges[i][j] for i in range(n) for j in range(n) if i != j)
    maxiter = 2 + max(total_edges, n)
    neighbours = [
        [j for j in range(n) if j != i and edges[i][j] and lengths[i][j] >= 0]
        for i in range(n)
    ]

    status = PathStatus.NOT_CONVERGED
    iteration = 0
    while iteration < maxiter:
        changed = False
        maxdiff = 0.0
        for i, nbrs in enumerate(neighbours):
            row_i = dpath[i]
            for k in nbrs:
                dik = row_i[k]
                row_k = dpath[k]
                for j in range(n):
                    if j == i or j == k:
                        continue
                    dkj = row_k[j]
                    if dkj < 0:
                        continue
                    dij = row_i[j]
                    dikj = dik + dkj
                    if dij < 0 or dikj < dij:
                        row_i[j] = dikj
                        dpath[j][i] = dikj
                        changed = True
                        diff = dij - dikj if dij >= 0 else dikj
                        if diff > maxdiff:
                            maxdiff = diff
        if not changed:
            status = PathStatus.CONVERGED
            break
        if floaty and maxdiff >= 0 and maxdiff < tol:
            status = PathStatus.TOLERANCE
            break
        iteration += 1

    result = np.array(dpath, dtype=float if floaty else int).reshape(n, n)
    return PathResult(distances=result, iterations=iteration, status=status)