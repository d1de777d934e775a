"""Tabulation of sorted values against unique values, and weighted histograms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def _accumulate(
    x: Sequence[float], amounts: Iterable[float], values: Sequence[float]
) -> list[float]:
    vals = [float(v) for v in values]
    totals = [0.0] * len(vals)
    j = 0
    for xi, amount in zip(x, amounts):
        while j < len(vals) and xi > vals[j]:
            j += 1
        if j < len(vals):
            totals[j] += amount
    return totals


def tabulate_sorted(x, values) -> list[float]:
    """Count each sorted ``x`` against the smallest sorted value at least as large.

    Entries of ``x`` larger than every value are not counted.
    """
    xs = [float(v) for v in x]
    return _accumulate(xs, (1.0 for _ in xs), values)


def tabulate_weights(x, weights, values) -> list[float]:
    """Sum ``weights`` of sorted ``x`` against the smallest value at least as large."""
    xs = [float(v) for v in x]
    ws = [float(w) for w in weights]
    if len(xs) != len(ws):
        raise ValueError("x and weights must have equal length")
    return _accumulate(xs, ws, values)


def weighted_histogram(indices, weights, nbins) -> list[float]:
    """Sum weights into ``nbins`` bins given zero-based bin indices.

    Indices that are None or out of range, and weights that are not finite,
    are skipped.
    """
    nbins = int(nbins)
    if nbins < 0:
        raise ValueError("nbins must not be negative")
    idx = list(indices)
    ws = [float(w) for w in weights]
    if len(idx) != len(ws):
        raise ValueError("indices and weights must have equal length")
    totals = [0.0] * nbins
    for j, w in zip(idx, ws):
        if j is not None and math.isfinite(w) and 0 <= j < nbins:
            totals[j] += w
    return totals