"""Rectangular rasters mapped onto a region of the plane.

Entries are stored row by row in a flat list. A margin of ``mrow`` rows and
``mcol`` columns may be clipped off each side; the valid sub-rectangle is
mapped linearly onto ``[xmin, xmax] x [ymin, ymax]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass
class Raster:
    """A raster with its mapping from entries to positions in the plane."""

    data: list[Any]
    nrow: int
    ncol: int
    rmin: int
    rmax: int
    cmin: int
    cmax: int
    x0: float
    y0: float
    x1: float
    y1: float
    xstep: float
    ystep: float
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @classmethod
    def from_bounds(
        cls, data, xmin, ymin, xmax, ymax, nrow, ncol, mrow=0, mcol=0
    ) -> "Raster":
        """Build a raster whose valid entries span the given bounding box.

        ``data`` is a flat row-major sequence of ``nrow * ncol`` entries, or
        None for a raster of zeros.
        """
        nrow, ncol, mrow, mcol = int(nrow), int(ncol), int(mrow), int(mcol)
        length = nrow * ncol
        if data is None:
            values = [0] * length
        else:
            values = list(data)
            if len(values) != length:
                raise ValueError(
                    f"data has {len(values)} entries, expected {length}"
                )
        valid_cols = ncol - 2 * mcol
        valid_rows = nrow - 2 * mrow
        if valid_cols < 2 or valid_rows < 2:
            raise ValueError("raster needs at least two valid rows and columns")
        xmin, ymin, xmax, ymax = float(xmin), float(ymin), float(xmax), float(ymax)
        return cls(
            data=values,
            nrow=nrow,
            ncol=ncol,
            rmin=mrow,
            rmax=nrow - mrow - 1,
            cmin=mcol,
            cmax=ncol - mcol - 1,
            x0=xmin,
            y0=ymin,
            x1=xmax,
            y1=ymax,
            xstep=(xmax - xmin) / (valid_cols - 1),
            ystep=(ymax - ymin) / (valid_rows - 1),
            xmin=xmin,
            xmax=xmax,
            ymin=ymin,
            ymax=ymax,
        )

    @property
    def length(self) -> int:
        return self.nrow * self.ncol

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = key
        return self.data[col + row * self.ncol]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self.data[col + row * self.ncol] = value

    def rows(self) -> list[list[Any]]:
        """The entries as a list of rows."""
        return [
            self.data[r * self.ncol : (r + 1) * self.ncol] for r in range(self.nrow)
        ]

    def clear(self, value=0) -> None:
        """Set every entry to ``value``."""
        self.data[:] = [value] * self.length

    def inside(self, row, col) -> bool:
        """True if (row, col) lies in the valid sub-rectangle."""
        return self.rmin <= row <= self.rmax and self.cmin <= col <= self.cmax

    def xpos(self, col) -> float:
        """The x coordinate of column ``col``."""
        return self.x0 + self.xstep * (col - self.cmin)

    def ypos(self, row) -> float:
        """The y coordinate of row ``row``."""
        return self.y0 + self.ystep * (row - self.rmin)

    def row_index(self, y) -> int:
        """The row at or just below the position ``y``."""
        return self.rmin + math.floor((y - self.y0) / self.ystep)

    def col_index(self, x) -> int:
        """The column at or just left of the position ``x``."""
        return self.cmin + math.floor((x - self.x0) / self.xstep)

    def distance_squared_to(self, x, y, row, col) -> float:
        """Squared distance from (x, y) to the position of entry (row, col)."""
        dx = x - self.xpos(col)
        dy = y - self.ypos(row)
        return dx * dx + dy * dy