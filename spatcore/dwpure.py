"""Optimal transport between integer masses by the primal-dual algorithm."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["transport_plan"]

_NONE = -1
_SOURCE = -5


class _Transport:
    def __init__(self, cost: list[list[int]], row_mass: list[int], col_mass: list[int]):
        self.cost = cost
        self.n1 = len(row_mass)
        self.n2 = len(col_mass)
        self.flow = [[0] * self.n2 for _ in range(self.n1)]
        self.row_surplus = list(row_mass)
        self.col_surplus = list(col_mass)
        self.row_lab = [0] * self.n1
        self.col_lab = [0] * self.n2
        self.row_flow = [0] * self.n1
        self.col_flow = [0] * self.n2
        self.u = [min(row) for row in cost]
        self.v = [
            min(cost[i][j] - self.u[i] for i in range(self.n1)) for j in range(self.n2)
        ]
        self.arc: list[list[bool]] = []
        self.update_arcs()

    def update_arcs(self) -> None:
        self.arc = [
            [self.cost[i][j] == self.u[i] + self.v[j] for j in range(self.n2)]
            for i in range(self.n1)
        ]

    def solve(self) -> list[list[int]]:
        while True:
            self.max_flow()
            if sum(self.row_surplus) > 0:
                self.update_duals()
            else:
                return self.flow

    def max_flow(self) -> None:
        label_found = True
        while label_found:
            breakthrough = _NONE
            for i, surplus in enumerate(self.row_surplus):
                if surplus > 0:
                    self.row_lab[i] = _SOURCE
                    self.row_flow[i] = surplus
                else:
                    self.row_lab[i] = _NONE
            self.col_lab = [_NONE] * self.n2

            while label_found and breakthrough == _NONE:
                label_found = False
                for i in range(self.n1):
                    if self.row_lab[i] == _NONE:
                        continue
                    for j in range(self.n2):
                        if self.arc[i][j] and self.col_lab[j] == _NONE:
                            self.col_lab[j] = i
                            self.col_flow[j] = self.row_flow[i]
                            label_found = True
                            if self.col_surplus[j] > 0 and breakthrough == _NONE:
                                breakthrough = j
                for j in range(self.n2):
                    if self.col_lab[j] == _NONE:
                        continue
                    for i in range(self.n1):
                        if self.flow[i][j] > 0 and self.row_lab[i] == _NONE:
                            self.row_lab[i] = j
                            self.row_flow[i] = min(self.col_flow[j], self.flow[i][j])
                            label_found = True
            if breakthrough != _NONE:
                self.augment(breakthrough)

    def update_duals(self) -> None:
        candidates = [
            self.cost[i][j] - self.u[i] - self.v[j]
            for i in range(self.n1)
            for j in range(self.n2)
            if self.row_lab[i] != _NONE and self.col_lab[j] == _NONE
        ]
        step = min(candidates) if candidates else -1
        for i in range(self.n1):
            if self.row_lab[i] != _NONE:
                self.u[i] += step
        for j in range(self.n2):
            if self.col_lab[j] != _NONE:
                self.v[j] -= step
        self.update_arcs()

    def augment(self, start_col: int) -> None:
        col = start_col
        amount = min(self.col_flow[col], self.col_surplus[col])
        self.col_surplus[col] -= amount
        row = self.col_lab[col]
        self.flow[row][col] += amount
        col = self.row_lab[row]
        while col != _SOURCE:
            self.flow[row][col] -= amount
            row = self.col_lab[col]
            self.flow[row][col] += amount
            col = self.row_lab[row]
        self.row_surplus[row] -= amount


def transport_plan(
    cost, row_mass: Sequence[int], col_mass: Sequence[int]
) -> np.ndarray:
    """Flow matrix moving ``row_mass`` to ``col_mass`` at minimal total cost.

    ``cost`` is an integer matrix with one row per source and one column per
    destination.  The masses must be non-negative integers with equal
    totals.  Entry ``[i, j]`` of the result is the mass sent from ``i`` to
    ``j``.
    """
    matrix = np.asarray(cost)
    if matrix.ndim != 2:
        raise ValueError("cost must be a matrix")
    rows = [int(m) for m in row_mass]
    cols = [int(m) for m in col_mass]
    if matrix.shape != (len(rows), len(cols)):
        raise ValueError("cost must have one row per source and one column per destination")
    if not rows or not cols:
        raise ValueError("there must be at least one source and one destination")
    if any(m < 0 for m in rows) or any(m < 0 for m in cols):
        raise ValueError("masses must be non-negative")
    if sum(rows) != sum(cols):
        raise ValueError("row and column masses must have equal totals")
    int_cost = [[int(v) for v in row] for row in matrix.tolist()]
    flow = _Transport(int_cost, rows, cols).solve()
    return np.array(flow, dtype=int).reshape(len(rows), len(cols))