"""Local cumulative sums and products of data values around test points.

For each test point, entry ``k`` of its row combines the values of all data
points within distance ``r_k = k * rmax / (nr - 1)``. The data points must be
sorted by increasing ``x``; test points are scanned in order and the search
window only moves forward, so they should be sorted by ``x`` as well.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable


def _local_cumulative(
    xtest, ytest, xdata, ydata, vdata, nr, rmax,
    initial: float, combine: Callable[[float, float], float],
) -> list[list[float]]:
    xt = [float(v) for v in xtest]
    yt = [float(v) for v in ytest]
    xd = [float(v) for v in xdata]
    yd = [float(v) for v in ydata]
    vd = [float(v) for v in vdata]
    if len(xt) != len(yt):
        raise ValueError("test coordinate sequences must have equal length")
    if len({len(xd), len(yd), len(vd)}) > 1:
        raise ValueError("data coordinates and values must have equal length")
    nr = int(nr)
    if nr < 1:
        raise ValueError("nr must be at least 1")
    rmax = float(rmax)
    result = [[initial] * nr for _ in xt]
    ndata = len(xd)
    if not xt or ndata == 0:
        return result
    rstep = rmax / (nr - 1) if nr > 1 else math.inf
    rmax2 = rmax * rmax
    jleft = 0
    for xi, yi, row in zip(xt, yt, result):
        xleft = xi - rmax
        while xd[jleft] < xleft and jleft + 1 < ndata:
            jleft += 1
        for j in range(jleft, ndata):
            dx = xd[j] - xi
            dx2 = dx * dx
            if dx2 > rmax2:
                break
            dy = yd[j] - yi
            d2 = dx2 + dy * dy
            if d2 <= rmax2:
                kmin = math.ceil(math.sqrt(d2) / rstep)
                for k in range(kmin, nr):
                    row[k] = combine(row[k], vd[j])
    return result


def local_cumulative_sum(xtest, ytest, xdata, ydata, vdata, nr, rmax) -> list[list[float]]:
    """For each test point, sums of data values within each of ``nr`` radii."""
    return _local_cumulative(
        xtest, ytest, xdata, ydata, vdata, nr, rmax, 0.0, operator.add
    )


def local_cumulative_product(xtest, ytest, xdata, ydata, vdata, nr, rmax) -> list[list[float]]:
    """For each test point, products of data values within each of ``nr`` radii."""
    return _local_cumulative(
        xtest, ytest, xdata, ydata, vdata, nr, rmax, 1.0, operator.mul
    )