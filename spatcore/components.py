"""Connected component labelling of binary images and of graphs."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["ConvergenceError", "label_image_components", "label_graph_components"]


class ConvergenceError(RuntimeError):
    """The labelling did not settle within the permitted number of sweeps."""


def label_image_components(mask) -> np.ndarray:
    """Label the 8-connected components of a binary image.

    Nonzero pixels are foreground.  Each foreground pixel is first given a
    distinct serial number, counting from 1 in row-major order; every pixel
    of a component then receives the smallest serial number found in that
    component.  Background pixels are 0.
    """
    m = np.asarray(mask)
    if m.ndim != 2:
        raise ValueError("mask must be two-dimensional")
    foreground = m != 0
    count = int(np.count_nonzero(foreground))
    labels = np.zeros(m.shape, dtype=int)
    labels[foreground] = np.arange(1, count + 1)
    if count == 0:
        return labels

    padded = np.pad(labels, 1)
    nrow, ncol = labels.shape
    sentinel = count + 1
    while True:
        inner = padded[1:-1, 1:-1]
        candidates = np.where(padded == 0, sentinel, padded)
        best = np.full(inner.shape, sentinel, dtype=int)
        for dr in range(3):
            for dc in range(3):
                best = np.minimum(best, candidates[dr:dr + nrow, dc:dc + ncol])
        updated = np.where(inner != 0, np.minimum(inner, best), 0)
        if np.array_equal(updated, inner):
            break
        padded[1:-1, 1:-1] = updated
    return padded[1:-1, 1:-1].copy()


def label_graph_components(nv: int, ie: Sequence[int], je: Sequence[int]) -> list[int]:
    """Component label for each vertex of a graph given by its edge list.

    Edge ``k`` joins vertices ``ie[k]`` and ``je[k]`` (zero-based).  The
    label of a vertex is the lowest index of any vertex in its component.
    Raises :class:`ConvergenceError` if the labels do not settle within
    ``nv`` sweeps over the edges.
    """
    nv = int(nv)
    if nv < 0:
        raise ValueError("number of vertices must be non-negative")
    if len(ie) != len(je):
        raise ValueError("ie and je must have the same length")
    edges = [(int(i), int(j)) for i, j in zip(ie, je)]
    if any(not (0 <= i < nv and 0 <= j < nv) for i, j in edges):
        raise ValueError("edge endpoints must be valid vertex indices")

    label = list(range(nv))
    for _ in range(nv):
        changed = False
        for i, j in edges:
            li, lj = label[i], label[j]
            if li < lj:
                label[j] = li
                changed = True
            elif lj < li:
                label[i] = lj
                changed = True
        if not changed:
            return label
    raise ConvergenceError(f"labels did not converge within {nv} sweeps")