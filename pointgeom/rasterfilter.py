"""Linear 3x3 filtering of a raster image."""

from __future__ import annotations

# Contributions are summed in this order: centre, same row, row above, row below.
_OFFSETS = (
    (0, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def raster3_filter(image, weights) -> list[list[float]]:
    """Apply a 3x3 filter to an image given as a list of rows.

    ``weights[di + 1][dj + 1]`` multiplies the pixel at row offset ``di`` and
    column offset ``dj``. Neighbours outside the image contribute nothing.
    """
    rows = [[float(v) for v in row] for row in image]
    ny = len(rows)
    nx = len(rows[0]) if rows else 0
    if any(len(row) != nx for row in rows):
        raise ValueError("image rows must have equal length")
    w = [[float(v) for v in row] for row in weights]
    if len(w) != 3 or any(len(row) != 3 for row in w):
        raise ValueError("weights must be a 3x3 array")
    return [
        [
            sum(
                w[di + 1][dj + 1] * rows[i + di][j + dj]
                for di, dj in _OFFSETS
                if 0 <= i + di < ny and 0 <= j + dj < nx
            )
            for j in range(nx)
        ]
        for i in range(ny)
    ]