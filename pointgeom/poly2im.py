"""Conversion of a closed polygon to a pixel image.

Pixels are addressed by integer column ``j`` (x) and row ``i`` (y); results
are lists of rows, so ``image[i][j]`` belongs to the pixel at column ``j`` and
row ``i``. Polygons are given by their vertex coordinates with the first
vertex repeated at the end. Anticlockwise polygons give positive values,
clockwise polygons negative ones.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

_BELOW = -1
_INSIDE = 0
_ABOVE = 1


class PolygonRasterError(ArithmeticError):
    """Raised when a polygon edge cannot be classified against a pixel."""


def _coords(xp, yp) -> tuple[list[float], list[float]]:
    xs = [float(v) for v in xp]
    ys = [float(v) for v in yp]
    if len(xs) != len(ys):
        raise ValueError("coordinate sequences must have equal length")
    return xs, ys


def _dims(*sizes) -> list[int]:
    dims = [int(s) for s in sizes]
    if any(d < 0 for d in dims):
        raise ValueError("image dimensions must not be negative")
    return dims


def _edges(
    xs: list[float], ys: list[float]
) -> Iterator[tuple[float, float, float, float]]:
    for (xa, ya), (xb, yb) in zip(zip(xs, ys), zip(xs[1:], ys[1:])):
        yield xa, ya, xb, yb


def _orient(xa, ya, xb, yb):
    """Return (xleft, yleft, xright, yright, sign) for an edge."""
    if xa < xb:
        return xa, ya, xb, yb, -1
    return xb, yb, xa, ya, 1


def polygon_indicator_image(xp, yp, nx, ny) -> list[list[int]]:
    """Indicator of the lattice points (j, i) lying inside the polygon.

    The lattice runs from (0, 0) to (nx - 1, ny - 1); the result has ``ny``
    rows of ``nx`` entries.
    """
    xs, ys = _coords(xp, yp)
    nx, ny = _dims(nx, ny)
    out = [[0] * nx for _ in range(ny)]
    for xa, ya, xb, yb in _edges(xs, ys):
        xleft, yleft, xright, yright, sign = _orient(xa, ya, xb, yb)
        if xleft == xright:
            # vertical edges contribute nothing to the region below them
            continue
        jleft = math.ceil(xleft)
        jright = math.floor(xright)
        if not (jleft < nx and jright >= 0 and jleft <= jright):
            continue
        jleft = max(jleft, 0)
        jright = min(jright, nx - 1)
        slope = (yright - yleft) / (xright - xleft)
        intercept = yleft - slope * xleft
        for j in range(jleft, jright + 1):
            imax = min(math.floor(slope * j + intercept), ny - 1)
            for i in range(imax + 1):
                out[i][j] += sign
    return out


def _level(y: float, i: int) -> int:
    if y <= i:
        return _BELOW
    if y >= i + 1:
        return _ABOVE
    return _INSIDE


def _pixel_area(i, x0, y0, x1, y1, ylo, yhi, slope) -> float:
    """Area of the trapezium below the edge within the trimmed pixel row ``i``."""
    klo = _level(ylo, i)
    khi = _level(yhi, i)
    top = i + 1
    if klo == _ABOVE:
        return x1 - x0
    if khi == _BELOW:
        return 0.0
    if klo == _INSIDE and khi == _INSIDE:
        return (x1 - x0) * ((ylo + yhi) / 2.0 - i)
    if klo == _INSIDE and khi == _ABOVE:
        xcut = x0 + (top - y0) / slope
        if slope > 0:
            return (xcut - x0) * ((y0 + top) / 2 - i) + (x1 - xcut)
        return (x1 - xcut) * ((y1 + top) / 2 - i) + (xcut - x0)
    if klo == _BELOW and khi == _INSIDE:
        xcut = x0 + (i - y0) / slope
        if slope > 0:
            return (x1 - xcut) * ((y1 + i) / 2 - i)
        return (xcut - x0) * ((y0 + i) / 2 - i)
    if klo == _BELOW and khi == _ABOVE:
        xcut_a = x0 + (i - y0) / slope
        xcut_b = x0 + (top - y0) / slope
        if slope > 0:
            return (xcut_b - xcut_a) / 2 + (x1 - xcut_b)
        return (xcut_b - x0) + (xcut_a - xcut_b) / 2
    raise PolygonRasterError(
        f"edge from ({x0}, {y0}) to ({x1}, {y1}) cannot be placed in row {i}"
    )


def polygon_area_image(ncol, nrow, xpoly, ypoly) -> list[list[float]]:
    """Area of intersection between the polygon and each unit pixel.

    Pixels are the unit squares from (0, 0) to (ncol, nrow); the result has
    ``nrow`` rows of ``ncol`` entries.
    """
    nx, ny = _dims(ncol, nrow)
    xs, ys = _coords(xpoly, ypoly)
    out = [[0.0] * nx for _ in range(ny)]
    for xa, ya, xb, yb in _edges(xs, ys):
        if xa == xb:
            continue
        xleft, yleft, xright, yright, sgn = _orient(xa, ya, xb, yb)
        slope = (yright - yleft) / (xright - xleft)
        jmin = max(math.floor(xleft), 0)
        jmax = min(math.ceil(xright), nx - 1)
        imin = max(math.floor(min(yleft, yright)), 0)
        imax = min(math.ceil(max(yleft, yright)), ny - 1)
        for j in range(jmin, jmax + 1):
            if not (xleft <= j + 1 and xright >= j):
                continue
            if xleft >= j:
                x0, y0 = xleft, yleft
            else:
                x0 = float(j)
                y0 = yleft + slope * (x0 - xleft)
            if xright <= j + 1:
                x1, y1 = xright, yright
            else:
                x1 = float(j + 1)
                y1 = yright + slope * (x1 - xright)
            ylo, yhi = (y0, y1) if y0 < y1 else (y1, y0)
            width = x1 - x0
            for i in range(min(imin, ny)):
                out[i][j] += sgn * width
            for i in range(imin, imax + 1):
                out[i][j] += sgn * _pixel_area(i, x0, y0, x1, y1, ylo, yhi, slope)
    return out