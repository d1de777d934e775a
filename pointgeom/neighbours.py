"""Nearest-neighbour distances and identifiers for planar and 3-D point patterns.

The planar searches assume the points are sorted by increasing ``y``;
the 3-D cross search assumes both patterns are sorted by increasing ``z``.
Indices in results are zero-based; ``None`` marks a neighbour that was not
found within the ``huge`` search limit.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Neighbours:
    """Distances to neighbours and the indices of those neighbours.

    For single-neighbour searches each entry is a number (or index); for
    k-neighbour searches each entry is a tuple of length k, ordered by
    increasing distance.
    """

    distances: list[Any]
    which: list[Any]


class _Candidates:
    """The k best squared distances found so far, kept in ascending order."""

    __slots__ = ("d2", "which")

    def __init__(self, k: int, limit2: float) -> None:
        self.d2: list[float] = [limit2] * k
        self.which: list[int | None] = [None] * k

    @property
    def bound(self) -> float:
        return self.d2[-1]

    def offer(self, d2: float, index: int) -> None:
        """Replace the worst candidate; ties keep earlier entries in front."""
        self.d2.pop()
        self.which.pop()
        pos = bisect_right(self.d2, d2)
        self.d2.insert(pos, d2)
        self.which.insert(pos, index)

    def distances(self) -> tuple[float, ...]:
        return tuple(math.sqrt(d) for d in self.d2)


def _floats(*columns: Sequence[float]) -> list[list[float]]:
    lists = [[float(v) for v in col] for col in columns]
    if len({len(col) for col in lists}) > 1:
        raise ValueError("coordinate sequences must have equal length")
    return lists


def _check_k(kmax: int) -> int:
    kmax = int(kmax)
    if kmax < 1:
        raise ValueError("kmax must be at least 1")
    return kmax


def nearest_neighbours(x, y, huge) -> Neighbours:
    """Distance to, and index of, the nearest other point for each point."""
    xs, ys = _floats(x, y)
    n = len(xs)
    hu2 = huge * huge
    distances: list[float] = []
    which: list[int | None] = []
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        d2min = hu2
        best: int | None = None
        for j in range(i + 1, n):
            dy = ys[j] - yi
            dy2 = dy * dy
            if dy2 > d2min:
                break
            dx = xs[j] - xi
            d2 = dx * dx + dy2
            if d2 < d2min:
                d2min = d2
                best = j
        for j in range(i - 1, -1, -1):
            dy = yi - ys[j]
            dy2 = dy * dy
            if dy2 > d2min:
                break
            dx = xs[j] - xi
            d2 = dx * dx + dy2
            if d2 < d2min:
                d2min = d2
                best = j
        distances.append(math.sqrt(d2min))
        which.append(best)
    return Neighbours(distances, which)


def k_nearest_neighbours(x, y, kmax, huge) -> Neighbours:
    """Distances to, and indices of, the ``kmax`` nearest other points."""
    xs, ys = _floats(x, y)
    k = _check_k(kmax)
    n = len(xs)
    hu2 = huge * huge
    distances: list[tuple[float, ...]] = []
    which: list[tuple[int | None, ...]] = []
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        cand = _Candidates(k, hu2)
        for j in range(i - 1, -1, -1):
            dy = yi - ys[j]
            dy2 = dy * dy
            if dy2 > cand.bound:
                break
            dx = xs[j] - xi
            d2 = dx * dx + dy2
            if d2 < cand.bound:
                cand.offer(d2, j)
        for j in range(i + 1, n):
            dy = ys[j] - yi
            dy2 = dy * dy
            if dy2 > cand.bound:
                break
            dx = xs[j] - xi
            d2 = dx * dx + dy2
            if d2 < cand.bound:
                cand.offer(d2, j)
        distances.append(cand.distances())
        which.append(tuple(cand.which))
    return Neighbours(distances, which)


def max_nn_distance_squared(x, y, huge, ignore_zero=False) -> float:
    """Largest squared nearest-neighbour distance over all points.

    With ``ignore_zero`` true, coincident points are not counted as
    neighbours. An empty pattern gives 0.0.
    """
    xs, ys = _floats(x, y)
    n = len(xs)
    hu2 = huge * huge
    d2max = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        d2mini = hu2
        for j in range(i + 1, n):
            dy = ys[j] - yi
            dy2 = dy * dy
            if dy2 > d2mini:
                break
            dx = xs[j] - xi
            d2 = dx * dx + dy2
            if d2 < d2mini and (not ignore_zero or d2 > 0):
                d2mini = d2
                if d2mini <= d2max:
                    break
        if i > 0 and d2mini > d2max:
            for j in range(i - 1, -1, -1):
                dy = yi - ys[j]
                dy2 = dy * dy
                if dy2 > d2mini:
                    break
                dx = xs[j] - xi
                d2 = dx * dx + dy2
                if d2 < d2mini and (not ignore_zero or d2 > 0):
                    d2mini = d2
                    if d2mini <= d2max:
                        break
        if d2mini > d2max:
            d2max = d2mini
    return d2max


def cross_k_nearest_3d(
    x1, y1, z1, x2, y2, z2, kmax, huge, id1=None, id2=None
) -> Neighbours:
    """For each point of X, the ``kmax`` nearest points of Y in 3-D.

    Both patterns must be sorted by increasing ``z``. When identifiers
    ``id1`` and ``id2`` are given, X[i] and Y[j] with equal identifiers are
    treated as the same point and never paired.
    """
    if (id1 is None) != (id2 is None):
        raise ValueError("id1 and id2 must be given together")
    xs1, ys1, zs1 = _floats(x1, y1, z1)
    xs2, ys2, zs2 = _floats(x2, y2, z2)
    k = _check_k(kmax)
    exclude = id1 is not None
    if exclude:
        ids1 = list(id1)
        ids2 = list(id2)
        if len(ids1) != len(xs1) or len(ids2) != len(xs2):
            raise ValueError("identifier sequences must match the patterns")
    n2 = len(xs2)
    hu2 = huge * huge
    distances: list[tuple[float, ...]] = []
    which: list[tuple[int | None, ...]] = []
    last = 0
    for i, (xi, yi, zi) in enumerate(zip(xs1, ys1, zs1)):
        cand = _Candidates(k, hu2)
        found: int | None = None
        idi = ids1[i] if exclude else None
        for j in range(last, n2):
            dz = zs2[j] - zi
            dz2 = dz * dz
            if dz2 > cand.bound:
                break
            if exclude and ids2[j] == idi:
                continue
            dy = ys2[j] - yi
            d2 = dy * dy + dz2
            if d2 < cand.bound:
                dx = xs2[j] - xi
                d2 = dx * dx + d2
                if d2 < cand.bound:
                    cand.offer(d2, j)
                    found = j
        for j in range(last - 1, -1, -1):
            dz = zi - zs2[j]
            dz2 = dz * dz
            if dz2 > cand.bound:
                break
            dy = ys2[j] - yi
            d2 = dy * dy + dz2
            if d2 < cand.bound:
                dx = xs2[j] - xi
                d2 = dx * dx + d2
                if d2 < cand.bound:
                    cand.offer(d2, j)
                    found = j
        distances.append(cand.distances())
        which.append(tuple(cand.which))
        if not exclude and found is not None:
            last = found
    return Neighbours(distances, which)