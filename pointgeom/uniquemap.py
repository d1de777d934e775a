"""Detection of duplicated points in a pattern sorted by increasing x."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

_EPS = sys.float_info.epsilon


def _duplicate_pairs(
    x: Sequence[float],
    y: Sequence[float],
    marks: Sequence[int] | None,
    mapping: list[int | None] | None = None,
) -> Iterator[tuple[int, int]]:
    """Yield (i, j), i < j, where point j duplicates point i.

    When ``mapping`` is given, points already known to be duplicates are not
    searched for duplicates of their own.
    """
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if len(xs) != len(ys):
        raise ValueError("coordinate sequences must have equal length")
    if marks is not None:
        marks = list(marks)
        if len(marks) != len(xs):
            raise ValueError("marks must have the same length as the coordinates")
    n = len(xs)
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        if mapping is not None and mapping[i] is not None:
            continue
        mi = marks[i] if marks is not None else None
        for j in range(i + 1, n):
            dx = xs[j] - xi
            if dx > _EPS:
                break
            dy = ys[j] - yi
            if dx * dx + dy * dy <= 0.0 and (marks is None or marks[j] == mi):
                yield i, j


def unique_map(x, y, marks=None) -> list[int | None]:
    """For each point, the index of the earlier point it duplicates, or None."""
    mapping: list[int | None] = [None] * len(x)
    for i, j in _duplicate_pairs(x, y, marks, mapping):
        mapping[j] = i
    return mapping


def any_duplicated(x, y, marks=None) -> bool:
    """True if any two points coincide (with equal marks, if given)."""
    return next(_duplicate_pairs(x, y, marks), None) is not None