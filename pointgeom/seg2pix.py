"""Discretisation of line segments on a pixel grid.

Coordinates are rescaled so that pixels are unit squares: columns
``0 .. nx - 1`` with boundaries at x = 0 and x = nx, rows ``0 .. ny - 1``
with boundaries at y = 0 and y = ny. Points outside the grid are clamped to
the border pixels. Results are lists of ``ny`` rows of ``nx`` entries.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

_TINY = 0.001


def _clamp(k: int, lo: int, hi: int) -> int:
    return max(lo, min(k, hi))


def _columns(*columns) -> list[list[float]]:
    lists = [[float(v) for v in col] for col in columns]
    if len({len(col) for col in lists}) > 1:
        raise ValueError("segment coordinates and weights must have equal length")
    return lists


def _check_dims(nx, ny) -> tuple[int, int]:
    nx, ny = int(nx), int(ny)
    if nx < 1 or ny < 1:
        raise ValueError("pixel grid must have at least one row and column")
    return nx, ny


def _cells(xa, ya, xb, yb, nx, ny) -> Iterator[tuple[int, int]]:
    """Yield (row, col) of every pixel crossed by the segment."""
    fxa, fya, fxb, fyb = math.floor(xa), math.floor(ya), math.floor(xb), math.floor(yb)
    if math.hypot(xb - xa, yb - ya) < _TINY or (fxa == fxb and fya == fyb):
        yield _clamp(fya, 0, ny - 1), _clamp(fxa, 0, nx - 1)
    elif fya == fyb:
        row = _clamp(fyb, 0, ny - 1)
        m0, m1 = _clamp(fxa, 0, nx - 1), _clamp(fxb, 0, nx - 1)
        for col in range(min(m0, m1), max(m0, m1) + 1):
            yield row, col
    elif fxa == fxb:
        col = _clamp(fxb, 0, nx - 1)
        m0, m1 = _clamp(fya, 0, ny - 1), _clamp(fyb, 0, ny - 1)
        for row in range(min(m0, m1), max(m0, m1) + 1):
            yield row, col
    else:
        if xb > xa:
            xleft, yleft, xright, yright = xa, ya, xb, yb
        else:
            xleft, yleft, xright, yright = xb, yb, xa, ya
        slope = (yright - yleft) / (xright - xleft)
        mleft = _clamp(math.floor(xleft), 0, nx - 1)
        mright = _clamp(math.floor(xright), 0, nx - 1)
        for m in range(mleft, mright + 1):
            ystart = yleft if m == mleft else yleft + slope * (m - xleft)
            yfinish = yright if m == mright else yleft + slope * (m + 1 - xleft)
            kstart = _clamp(math.floor(ystart), 0, ny - 1)
            kfinish = _clamp(math.floor(yfinish), 0, ny - 1)
            for k in range(min(kstart, kfinish), max(kstart, kfinish) + 1):
                yield k, m


def segment_indicator_image(x0, y0, x1, y1, nx, ny) -> list[list[int]]:
    """1 for each pixel crossed by at least one segment, 0 elsewhere."""
    xs0, ys0, xs1, ys1 = _columns(x0, y0, x1, y1)
    nx, ny = _check_dims(nx, ny)
    out = [[0] * nx for _ in range(ny)]
    for seg in zip(xs0, ys0, xs1, ys1):
        for row, col in _cells(*seg, nx, ny):
            out[row][col] = 1
    return out


def segment_count_image(x0, y0, x1, y1, weights, nx, ny) -> list[list[float]]:
    """Total weight of the segments crossing each pixel."""
    xs0, ys0, xs1, ys1, ws = _columns(x0, y0, x1, y1, weights)
    nx, ny = _check_dims(nx, ny)
    out = [[0.0] * nx for _ in range(ny)]
    for xa, ya, xb, yb, w in zip(xs0, ys0, xs1, ys1, ws):
        for row, col in _cells(xa, ya, xb, yb, nx, ny):
            out[row][col] += w
    return out


def _length_pieces(
    xa, ya, xb, yb, pw2, ph2, nx, ny
) -> Iterator[tuple[int, int, float]]:
    """Yield (row, col, length) for the pieces of a segment, in original units."""
    leni = math.sqrt(pw2 * (xb - xa) ** 2 + ph2 * (yb - ya) ** 2)
    fxa, fya, fxb, fyb = math.floor(xa), math.floor(ya), math.floor(xb), math.floor(yb)
    if leni < _TINY or (fxa == fxb and fya == fyb):
        yield _clamp(fya, 0, ny - 1), _clamp(fxa, 0, nx - 1), leni
    elif fya == fyb:
        row = _clamp(fyb, 0, ny - 1)
        if xb > xa:
            xleft, yleft, xright, yright = xa, ya, xb, yb
        else:
            xleft, yleft, xright, yright = xb, yb, xa, ya
        mmin = _clamp(math.floor(xleft), 0, nx - 1)
        mmax = _clamp(math.floor(xright), 0, nx - 1)
        slope = (yright - yleft) / (xright - xleft)
        secant = math.sqrt(pw2 + slope * slope * ph2)
        for k in range(mmin, mmax + 1):
            xstart = xleft if k == mmin else k
            xfinish = xright if k == mmax else k + 1
            yield row, k, (xfinish - xstart) * secant
    elif fxa == fxb:
        col = _clamp(fxb, 0, nx - 1)
        if yb > ya:
            xlow, ylow, xhigh, yhigh = xa, ya, xb, yb
        else:
            xlow, ylow, xhigh, yhigh = xb, yb, xa, ya
        mmin = _clamp(math.floor(ylow), 0, ny - 1)
        mmax = _clamp(math.floor(yhigh), 0, ny - 1)
        invslope = (xhigh - xlow) / (yhigh - ylow)
        cosecant = math.sqrt(ph2 + invslope * invslope * pw2)
        for j in range(mmin, mmax + 1):
            ystart = ylow if j == mmin else j
            yfinish = yhigh if j == mmax else j + 1
            yield j, col, (yfinish - ystart) * cosecant
    else:
        if xb > xa:
            xleft, yleft, xright, yright = xa, ya, xb, yb
        else:
            xleft, yleft, xright, yright = xb, yb, xa, ya
        slope = (yright - yleft) / (xright - xleft)
        mleft = _clamp(math.floor(xleft), 0, nx - 1)
        mright = _clamp(math.floor(xright), 0, nx - 1)
        for m in range(mleft, mright + 1):
            if m == mleft:
                xstart, ystart = xleft, yleft
            else:
                xstart = float(m)
                ystart = yleft + slope * (xstart - xleft)
            if m == mright:
                xfinish, yfinish = xright, yright
            else:
                xfinish = float(m + 1)
                yfinish = yleft + slope * (xfinish - xleft)
            kstart = _clamp(math.floor(ystart), 0, ny - 1)
            kfinish = _clamp(math.floor(yfinish), 0, ny - 1)
            if ystart < yfinish:
                kmin, kmax, ylow, yhigh = kstart, kfinish, ystart, yfinish
            else:
                kmin, kmax, ylow, yhigh = kfinish, kstart, yfinish, ystart
            for k in range(kmin, kmax + 1):
                yy0 = ylow if k == kmin else k
                yy1 = yhigh if k == kmax else k + 1
                xx0 = xstart + (yy0 - ystart) / slope
                xx1 = xstart + (yy1 - ystart) / slope
                yield k, m, math.sqrt((yy1 - yy0) ** 2 * ph2 + (xx1 - xx0) ** 2 * pw2)


def segment_length_image(
    x0, y0, x1, y1, weights, pixwidth, pixheight, nx, ny
) -> list[list[float]]:
    """Total weighted length of segments inside each pixel.

    One pixel is ``pixwidth`` by ``pixheight`` in original units, and lengths
    are reported in original units.
    """
    xs0, ys0, xs1, ys1, ws = _columns(x0, y0, x1, y1, weights)
    nx, ny = _check_dims(nx, ny)
    pw2 = float(pixwidth) ** 2
    ph2 = float(pixheight) ** 2
    out = [[0.0] * nx for _ in range(ny)]
    for xa, ya, xb, yb, w in zip(xs0, ys0, xs1, ys1, ws):
        for row, col, length in _length_pieces(xa, ya, xb, yb, pw2, ph2, nx, ny):
            out[row][col] += w * length
    return out