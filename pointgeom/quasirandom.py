"""Quasi-random sequence generators."""

from __future__ import annotations


def van_der_corput(base, n) -> list[float]:
    """The first ``n`` terms (from index 1) of the van der Corput sequence in ``base``."""
    b = int(base)
    count = int(n)
    if b < 2:
        raise ValueError("base must be at least 2")
    if count < 0:
        raise ValueError("n must not be negative")
    f0 = 1.0 / b
    result = []
    for index in range(1, count + 1):
        z = 0.0
        f = f0
        j = index
        while j > 0:
            j, digit = divmod(j, b)
            z = z + f * digit
            f = f / b
        result.append(z)
    return result