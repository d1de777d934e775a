"""Scan transform: count data points within a radius of each raster position."""

from __future__ import annotations

import math

from .raster import Raster


def scan_transform(x, y, xmin, ymin, xmax, ymax, nrow, ncol, radius) -> list[list[int]]:
    """Number of points within ``radius`` of each raster position.

    The raster has ``nrow`` rows spanning ``[ymin, ymax]`` and ``ncol``
    columns spanning ``[xmin, xmax]``; the result is a list of rows.
    """
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if len(xs) != len(ys):
        raise ValueError("coordinate sequences must have equal length")
    ras = Raster.from_bounds(None, xmin, ymin, xmax, ymax, nrow, ncol, 0, 0)
    if not xs:
        return ras.rows()
    r2 = radius * radius
    rrow = max(1, math.ceil(radius / ras.ystep))
    rcol = max(1, math.ceil(radius / ras.xstep))
    for xi, yi in zip(xs, ys):
        j = ras.row_index(yi)
        k = ras.col_index(xi)
        for row in range(max(j - rrow, ras.rmin), min(j + rrow, ras.rmax) + 1):
            for col in range(max(k - rcol, ras.cmin), min(k + rcol, ras.cmax) + 1):
                if ras.distance_squared_to(xi, yi, row, col) <= r2:
                    ras[row, col] += 1
    return ras.rows()