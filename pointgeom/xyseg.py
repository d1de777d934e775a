"""Intersections between line segments.

A segment is given by its first endpoint ``(x0, y0)`` and the vector
``(dx, dy)`` to its second endpoint. A point on it is written in parametric
form ``(x0, y0) + t * (dx, dy)``, so the segment itself is ``0 <= t <= 1``.
Two segments are tested only when the determinant of their direction
vectors exceeds ``eps`` in absolute value; ``eps`` also widens the
parameter interval slightly. Indices in results are zero-based, and entries
that are not defined are ``None``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Segments:
    """A list of line segments stored as start points and direction vectors."""

    x0: list[float]
    y0: list[float]
    dx: list[float]
    dy: list[float]

    def __post_init__(self) -> None:
        columns = [[float(v) for v in col] for col in (self.x0, self.y0, self.dx, self.dy)]
        if len({len(col) for col in columns}) > 1:
            raise ValueError("segment coordinate sequences must have equal length")
        for name, col in zip(("x0", "y0", "dx", "dy"), columns):
            object.__setattr__(self, name, col)

    @classmethod
    def from_endpoints(cls, x0, y0, x1, y1) -> "Segments":
        """Build segments from both endpoints."""
        xs0 = [float(v) for v in x0]
        ys0 = [float(v) for v in y0]
        xs1 = [float(v) for v in x1]
        ys1 = [float(v) for v in y1]
        if len({len(xs0), len(ys0), len(xs1), len(ys1)}) > 1:
            raise ValueError("segment coordinate sequences must have equal length")
        return cls(
            xs0,
            ys0,
            [b - a for a, b in zip(xs0, xs1)],
            [b - a for a, b in zip(ys0, ys1)],
        )

    def __len__(self) -> int:
        return len(self.x0)

    def __getitem__(self, index: int) -> tuple[float, float, float, float]:
        return self.x0[index], self.y0[index], self.dx[index], self.dy[index]


@dataclass(frozen=True)
class IntersectionMatrices:
    """Pairwise intersection information, indexed ``[row][col]``.

    ``ok`` says whether the row segment meets the column segment, ``xx`` and
    ``yy`` give the crossing point, ``ta`` the parameter of that point on the
    row segment and ``tb`` its parameter on the column segment. The
    parameters are set whenever the segments are not parallel, even if they
    do not meet.
    """

    xx: list[list[float | None]]
    yy: list[list[float | None]]
    ta: list[list[float | None]]
    tb: list[list[float | None]]
    ok: list[list[bool]]

    @classmethod
    def empty(cls, nrow: int, ncol: int) -> "IntersectionMatrices":
        def blank() -> list[list[Any]]:
            return [[None] * ncol for _ in range(nrow)]

        return cls(blank(), blank(), blank(), blank(), [[False] * ncol for _ in range(nrow)])


@dataclass(frozen=True)
class Intersections:
    """The crossing pairs found, one entry per crossing.

    ``i`` and ``j`` index the two segments, ``ti`` and ``tj`` are the
    parameters of the crossing on each, and ``x``, ``y`` its position.
    """

    i: list[int] = field(default_factory=list)
    j: list[int] = field(default_factory=list)
    ti: list[float] = field(default_factory=list)
    tj: list[float] = field(default_factory=list)
    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.i)

    def add(self, i: int, j: int, ti: float, tj: float, x: float, y: float) -> None:
        self.i.append(i)
        self.j.append(j)
        self.ti.append(ti)
        self.tj.append(tj)
        self.x.append(x)
        self.y.append(y)


def _inside01(t: float, eps: float) -> bool:
    return t * (1.0 - t) >= -eps


def _parameters(a, b, eps: float, diff: tuple[float, float] | None = None):
    """Parameters (ta, tb) of the crossing of lines a and b, or None if parallel."""
    ax0, ay0, adx, ady = a
    bx0, by0, bdx, bdy = b
    determinant = bdx * ady - bdy * adx
    if abs(determinant) <= eps:
        return None
    if diff is None:
        diff = (bx0 - ax0, by0 - ay0)
    diffx = diff[0] / determinant
    diffy = diff[1] / determinant
    ta = -bdy * diffx + bdx * diffy
    tb = -ady * diffx + adx * diffy
    return ta, tb


def _crossing(a, b, eps: float):
    """(ta, tb, meets) for segments a and b, or None if they are parallel."""
    params = _parameters(a, b, eps)
    if params is None:
        return None
    ta, tb = params
    return ta, tb, _inside01(ta, eps) and _inside01(tb, eps)


def _cross_pairs(a: Segments, b: Segments) -> Iterator[tuple[int, int]]:
    for j in range(len(b)):
        for i in range(len(a)):
            yield i, j


def _self_pairs(n: int) -> Iterator[tuple[int, int]]:
    """Pairs (i, j) with i > j, j outermost."""
    for j in range(n - 1):
        for i in range(j + 1, n):
            yield i, j


def _polygon_pairs(n: int) -> Iterator[tuple[int, int]]:
    """Pairs of edges that are not cyclically adjacent, j outermost."""
    if n <= 2:
        return
    for j in range(n - 2):
        stop = n if j > 0 else n - 1
        for i in range(j + 2, stop):
            yield i, j


def cross_intersection_matrices(a, b, eps) -> IntersectionMatrices:
    """Intersection information for every segment of ``a`` against every one of ``b``."""
    out = IntersectionMatrices.empty(len(a), len(b))
    for i, j in _cross_pairs(a, b):
        found = _crossing(a[i], b[j], eps)
        if found is None:
            continue
        ta, tb, meets = found
        out.ta[i][j] = ta
        out.tb[i][j] = tb
        if meets:
            out.ok[i][j] = True
            out.xx[i][j] = a.x0[i] + ta * a.dx[i]
            out.yy[i][j] = a.y0[i] + ta * a.dy[i]
    return out


def cross_intersects(a, b, eps) -> list[list[bool]]:
    """Whether each segment of ``a`` meets each segment of ``b``."""
    ok = [[False] * len(b) for _ in range(len(a))]
    for i, j in _cross_pairs(a, b):
        found = _crossing(a[i], b[j], eps)
        if found is not None and found[2]:
            ok[i][j] = True
    return ok


def any_cross_intersection(a, b, eps) -> bool:
    """True if some segment of ``a`` meets some segment of ``b``."""
    for i, j in _cross_pairs(a, b):
        found = _crossing(a[i], b[j], eps)
        if found is not None and found[2]:
            return True
    return False


def vertical_slice(xa, b, eps) -> tuple[list[list[float | None]], list[list[bool]]]:
    """Crossings of the vertical lines ``x = xa[i]`` with the segments ``b``.

    Returns ``(yy, ok)`` indexed ``[i][j]``. Where a segment has
    ``|dx| <= eps`` its crossing height is found by linear interpolation;
    otherwise the height of the segment's midpoint is reported. A segment
    with ``dx == 0`` gives NaN.
    """
    xs = [float(v) for v in xa]
    yy: list[list[float | None]] = [[None] * len(b) for _ in xs]
    ok = [[False] * len(b) for _ in xs]
    for j in range(len(b)):
        x0, y0, width, dy = b[j]
        interpolate = abs(width) <= eps
        for i, x in enumerate(xs):
            diffx0 = x - x0
            diffx1 = diffx0 - width
            if diffx0 * diffx1 <= 0:
                ok[i][j] = True
                if interpolate:
                    num = diffx0 * dy
                    yy[i][j] = y0 + (num / width if width != 0 else math.nan)
                else:
                    yy[i][j] = y0 + dy / 2.0
    return yy, ok


def _fill_symmetric(out: IntersectionMatrices, segs: Segments, i: int, j: int, eps) -> None:
    found = _crossing(segs[i], segs[j], eps)
    if found is None:
        return
    ti, tj, meets = found
    out.ta[i][j] = ti
    out.tb[i][j] = tj
    out.tb[j][i] = ti
    out.ta[j][i] = tj
    if meets:
        out.ok[i][j] = out.ok[j][i] = True
        x = segs.x0[i] + ti * segs.dx[i]
        y = segs.y0[i] + ti * segs.dy[i]
        out.xx[i][j] = out.xx[j][i] = x
        out.yy[i][j] = out.yy[j][i] = y


def self_intersection_matrices(segs, eps) -> IntersectionMatrices:
    """Intersection information for all pairs of distinct segments in one list."""
    n = len(segs)
    out = IntersectionMatrices.empty(n, n)
    for i, j in _self_pairs(n):
        _fill_symmetric(out, segs, i, j, eps)
    return out


def self_intersects(segs, eps) -> list[list[bool]]:
    """Whether each pair of distinct segments in one list meet."""
    n = len(segs)
    ok = [[False] * n for _ in range(n)]
    for i, j in _self_pairs(n):
        found = _crossing(segs[i], segs[j], eps)
        if found is not None and found[2]:
            ok[i][j] = ok[j][i] = True
    return ok


def polygon_self_intersection_matrices(segs, eps) -> IntersectionMatrices:
    """Intersection information for the edges of a closed polygon.

    Edges that are cyclically adjacent, including the first and last, are
    not compared.
    """
    n = len(segs)
    out = IntersectionMatrices.empty(n, n)
    for i, j in _polygon_pairs(n):
        _fill_symmetric(out, segs, i, j, eps)
    return out


def polygon_has_self_intersection(segs, xsep, ysep, eps, proper=False) -> bool:
    """True if two non-adjacent edges of a closed polygon meet.

    Edges whose start points differ by ``xsep`` or more in x, or ``ysep`` or
    more in y, are not compared. With ``proper`` true, a meeting at an
    endpoint of both edges does not count.
    """
    for i, j in _polygon_pairs(len(segs)):
        diffx = segs.x0[j] - segs.x0[i]
        diffy = segs.y0[j] - segs.y0[i]
        if not (-xsep < diffx < xsep and -ysep < diffy < ysep):
            continue
        params = _parameters(segs[i], segs[j], eps, diff=(diffx, diffy))
        if params is None:
            continue
        ti, tj = params
        if _inside01(ti, eps) and _inside01(tj, eps):
            if not proper or ti not in (0.0, 1.0) or tj not in (0.0, 1.0):
                return True
    return False


def cross_intersections(a, b, eps) -> Intersections:
    """Every crossing between a segment of ``a`` (``i``) and one of ``b`` (``j``)."""
    out = Intersections()
    for i, j in _cross_pairs(a, b):
        found = _crossing(a[i], b[j], eps)
        if found is not None and found[2]:
            ta, tb, _ = found
            out.add(i, j, ta, tb, a.x0[i] + ta * a.dx[i], a.y0[i] + ta * a.dy[i])
    return out


def self_intersections(segs, eps) -> Intersections:
    """Every crossing between two distinct segments of one list, with ``i > j``."""
    out = Intersections()
    for i, j in _self_pairs(len(segs)):
        found = _crossing(segs[i], segs[j], eps)
        if found is not None and found[2]:
            ti, tj, _ = found
            out.add(i, j, ti, tj, segs.x0[i] + ti * segs.dx[i], segs.y0[i] + ti * segs.dy[i])
    return out