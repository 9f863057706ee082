"""Bottleneck assignment by exhaustive search over permutations.

Permutations are listed with the Johnson-Trotter algorithm; the permutation
with the smallest maximal cost is kept.
"""

from __future__ import annotations

import numpy as np

__all__ = ["bottleneck_assignment"]


def bottleneck_assignment(cost) -> list[int]:
    """Permutation minimising the largest cost ``cost[i][perm[i]]``.

    Among permutations with equal bottleneck the first one listed is kept,
    starting from the identity.  Indices are zero-based.
    """
    matrix = np.asarray(cost)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("cost must be a square matrix")
    c = matrix.tolist()
    n = len(c)
    if n <= 1:
        return list(range(n))

    travel = [-1] * n
    mobile = [True] * n
    current = list(range(n))
    best = list(current)
    best_value = max(c[i][i] for i in range(n))

    while any(mobile):
        largest = max(v for v, m in zip(current, mobile) if m)
        lmp = current.index(largest)
        lmq = lmp + travel[lmp]
        current[lmp], current[lmq] = current[lmq], current[lmp]
        travel[lmp], travel[lmq] = travel[lmq], travel[lmp]
        moved = current[lmq]
        for i in range(n):
            if current[i] > moved:
                travel[i] = -travel[i]
            j = i + travel[i]
            mobile[i] = not (j < 0 or j > n - 1 or current[i] < current[j])
        value = max(c[i][current[i]] for i in range(n))
        if value < best_value:
            best_value = value
            best = list(current)
    return best