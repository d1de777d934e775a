"""Triangles of a planar graph together with their diameters.

The diameter of a triangle is the length of its longest edge. Vertices are
numbered from 0 and each edge ``m`` joins ``iedge[m]`` and ``jedge[m]`` and
has length ``edgelength[m]``. Triangles are reported as ``(i, j, k)`` with
``i < j < k``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .triangles import _edges


@dataclass(frozen=True)
class TriangleDiameters:
    """Vertex indices ``i``, ``j``, ``k`` of triangles and their diameters ``d``."""

    i: list[int] = field(default_factory=list)
    j: list[int] = field(default_factory=list)
    k: list[int] = field(default_factory=list)
    d: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.i)

    def __iter__(self) -> Iterator[tuple[int, int, int, float]]:
        return iter(zip(self.i, self.j, self.k, self.d))

    def add(self, i: int, j: int, k: int, d: float) -> None:
        self.i.append(i)
        self.j.append(j)
        self.k.append(k)
        self.d.append(d)


def _inputs(iedge, jedge, edgelength) -> tuple[list[int], list[int], list[float]]:
    ie, je = _edges(iedge, jedge)
    lengths = [float(v) for v in edgelength]
    if len(lengths) != len(ie):
        raise ValueError("edgelength must have one entry per edge")
    return ie, je, lengths


def _iter_diameters(
    nv: int, ie: list[int], je: list[int], lengths: list[float]
) -> Iterator[tuple[int, int, int, float]]:
    edges = list(zip(ie, je, lengths))
    for i in range(nv):
        above: list[tuple[int, float]] = []
        for a, b, length in edges:
            if a == i:
                if b > i:
                    above.append((b, length))
            elif b == i:
                if a > i:
                    above.append((a, length))
        above.sort(key=lambda item: item[0])
        for pos, (j, dij) in enumerate(above):
            for k, dik in above[pos + 1 :]:
                if j == k:
                    continue
                for a, b, djk in edges:
                    if (a == j and b == k) or (a == k and b == j):
                        diam = dij if dij > dik else dik
                        if djk > diam:
                            diam = djk
                        yield i, j, k, diam


def triangle_diameters(nv, iedge, jedge, edgelength) -> TriangleDiameters:
    """All triangles of the graph on ``0 .. nv - 1`` with their diameters."""
    ie, je, lengths = _inputs(iedge, jedge, edgelength)
    out = TriangleDiameters()
    for i, j, k, d in _iter_diameters(int(nv), ie, je, lengths):
        out.add(i, j, k, d)
    return out


def triangle_diameters_bounded(nv, iedge, jedge, edgelength, dmax) -> TriangleDiameters:
    """The triangles whose diameter is at most ``dmax``, with their diameters."""
    ie, je, lengths = _inputs(iedge, jedge, edgelength)
    limit = float(dmax)
    out = TriangleDiameters()
    for i, j, k, d in _iter_diameters(int(nv), ie, je, lengths):
        if d <= limit:
            out.add(i, j, k, d)
    return out