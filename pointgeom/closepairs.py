"""Enumeration of close pairs of points, plain, crossed and periodic."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClosePairs:
    """Zero-based indices ``i``, ``j`` of close pairs and their distances ``d``."""

    i: list[int] = field(default_factory=list)
    j: list[int] = field(default_factory=list)
    d: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.i)

    def __iter__(self) -> Iterator[tuple[int, int, float]]:
        return iter(zip(self.i, self.j, self.d))


def _floats(*columns) -> list[list[float]]:
    lists = [[float(v) for v in col] for col in columns]
    if len({len(col) for col in lists}) > 1:
        raise ValueError("coordinate sequences must have equal length")
    return lists


def iter_close_pairs(x, y, rmax) -> Iterator[tuple[int, int, float]]:
    """Yield ``(i, j, d2)`` for every ordered pair within distance ``rmax``.

    The points must be sorted by increasing ``x``. For each ``i`` the
    neighbours before it are visited first, nearest first, then those after.
    """
    xs, ys = _floats(x, y)
    n = len(xs)
    r2max = rmax * rmax
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        for js in (range(i - 1, -1, -1), range(i + 1, n)):
            for j in js:
                dx = xs[j] - xi
                dx2 = dx * dx
                if dx2 > r2max:
                    break
                dy = ys[j] - yi
                d2 = dx2 + dy * dy
                if d2 <= r2max:
                    yield i, j, d2


def iter_cross_pairs(x1, y1, x2, y2, rmax) -> Iterator[tuple[int, int, float]]:
    """Yield ``(i, j, d2)`` for points of the first and second pattern within ``rmax``.

    The second pattern must be sorted by increasing ``x``.
    """
    xs1, ys1 = _floats(x1, y1)
    xs2, ys2 = _floats(x2, y2)
    n2 = len(xs2)
    if n2 == 0:
        return
    r2max = rmax * rmax
    for i, (xi, yi) in enumerate(zip(xs1, ys1)):
        jleft = min(bisect_left(xs2, xi - rmax), n2 - 1)
        for j in range(jleft, n2):
            dx = xs2[j] - xi
            if dx > rmax:
                break
            dy = ys2[j] - yi
            d2 = dx * dx + dy * dy
            if d2 <= r2max:
                yield i, j, d2


def _wrap(delta: float, period: float) -> float:
    delta = abs(delta)
    return min(delta, period - delta)


def periodic_close_pairs(x, y, period, rmax) -> ClosePairs:
    """All ordered pairs within ``rmax`` under periodic (toroidal) distance.

    ``period`` gives the x and y periods. The points need not be sorted.
    """
    xs, ys = _floats(x, y)
    xperiod, yperiod = (float(p) for p in period)
    n = len(xs)
    r2max = rmax * rmax
    out = ClosePairs()
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        for j in (*range(i - 1, -1, -1), *range(i + 1, n)):
            dx = _wrap(xs[j] - xi, xperiod)
            if dx < rmax:
                dy = _wrap(ys[j] - yi, yperiod)
                d2 = dx * dx + dy * dy
                if d2 <= r2max:
                    out.i.append(i)
                    out.j.append(j)
                    out.d.append(d2**0.5)
    return out