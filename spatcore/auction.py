"""Forward/reverse auction algorithm for the assignment problem.

Persons bid for objects (forward phase) and objects lure persons (reverse
phase) until everybody is assigned.  The phases are repeated for each value
of the bidding increment, which allows eps-scaling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

__all__ = ["AuctionResult", "auction_assignment"]


@dataclass(frozen=True)
class AuctionResult:
    """Outcome of an auction.

    ``assignment[i]`` is the object (zero-based) given to person ``i``;
    ``price`` holds the final object prices and ``profit`` the final
    person profits.
    """

    assignment: list[int]
    price: list[float]
    profit: list[float]


def _argmax(values: Sequence[float]) -> int:
    """First index of the largest value."""
    best = 0
    for index, value in enumerate(values):
        if value > values[best]:
            best = index
    return best


def _second(values: Sequence[float], arg: int) -> float:
    """Largest value among all entries except the one at ``arg``."""
    return max(value for index, value in enumerate(values) if index != arg)


class _Auction:
    def __init__(self, desire: list[list[float]], price: list[float]):
        self.desire = desire
        self.n = len(desire)
        self.price = price
        # Initial profits are the column index of each person's favourite object.
        self.profit = [float(_argmax(row)) for row in desire]
        self.eps = 0.0
        self.backwards = False
        self.assigned = 0
        self.pers_to_obj = [-1] * self.n
        self.obj_to_pers = [-1] * self.n

    def run(self, eps: float) -> None:
        self.backwards = False
        self.eps = eps
        self.assigned = 0
        self.pers_to_obj = [-1] * self.n
        self.obj_to_pers = [-1] * self.n
        while self.assigned < self.n:
            if not self.backwards:
                for person in range(self.n):
                    if self.pers_to_obj[person] == -1:
                        self.bid(person)
            else:
                for obj in range(self.n):
                    if self.obj_to_pers[obj] == -1:
                        self.lure(obj)

    def bid(self, person: int) -> None:
        row = self.desire[person]
        values = [d - p for d, p in zip(row, self.price)]
        target = _argmax(values)
        amount = values[target] - _second(values, target) + self.eps
        previous = self.obj_to_pers[target]
        if previous == -1:
            self.assigned += 1
            self.backwards = True
        else:
            self.pers_to_obj[previous] = -1
        self.pers_to_obj[person] = target
        self.obj_to_pers[target] = person
        self.price[target] += amount
        self.profit[person] = row[target] - self.price[target]

    def lure(self, obj: int) -> None:
        values = [self.desire[i][obj] - self.profit[i] for i in range(self.n)]
        target = _argmax(values)
        amount = values[target] - _second(values, target) + self.eps
        previous = self.pers_to_obj[target]
        if previous == -1:
            self.assigned += 1
            self.backwards = False
        else:
            self.obj_to_pers[previous] = -1
        self.obj_to_pers[obj] = target
        self.pers_to_obj[target] = obj
        self.profit[target] += amount
        self.price[obj] = self.desire[target][obj] - self.profit[target]


def auction_assignment(
    desire, eps: Iterable[float], price: Sequence[float] | None = None
) -> AuctionResult:
    """Assign persons to objects maximising total desire.

    ``desire[i][j]`` is the desire of person ``i`` for object ``j``; the
    matrix must be square with at least two rows.  ``eps`` gives the
    bidding increments, used in turn; each must be positive.  ``price``
    holds the starting prices (zero by default).
    """
    matrix = np.asarray(desire, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("desire must be a square matrix")
    n = matrix.shape[0]
    if n < 2:
        raise ValueError("at least two persons are required")
    increments = [float(e) for e in eps]
    if any(e <= 0 for e in increments):
        raise ValueError("eps values must be positive")
    prices = [0.0] * n if price is None else [float(p) for p in price]
    if len(prices) != n:
        raise ValueError("price must have one entry per object")

    auction = _Auction(matrix.tolist(), prices)
    for e in increments:
        auction.run(e)
    return AuctionResult(
        assignment=list(auction.pers_to_obj),
        price=list(auction.price),
        profit=list(auction.profit),
    )