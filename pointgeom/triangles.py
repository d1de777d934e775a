"""Enumeration of the triangles in a planar graph given its list of edges.

Vertices are numbered from 0. Edges are given as two parallel sequences
``iedge`` and ``jedge``; the edge ``m`` joins ``iedge[m]`` and
``jedge[m]``. Every triangle is reported once, as ``(i, j, k)`` with
``i < j < k``. An edge listed more than once yields its triangles once for
each listing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field


class TriangleOverflowError(OverflowError):
    """Raised when more triangles are found than the storage limit allows."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"more than {limit} triangles found")
        self.limit = limit


@dataclass(frozen=True)
class Triangles:
    """Vertex indices ``i``, ``j``, ``k`` of the triangles found."""

    i: list[int] = field(default_factory=list)
    j: list[int] = field(default_factory=list)
    k: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.i)

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        return iter(zip(self.i, self.j, self.k))

    def add(self, i: int, j: int, k: int) -> None:
        self.i.append(i)
        self.j.append(j)
        self.k.append(k)


def _edges(iedge, jedge) -> tuple[list[int], list[int]]:
    ie = [int(v) for v in iedge]
    je = [int(v) for v in jedge]
    if len(ie) != len(je):
        raise ValueError("iedge and jedge must have equal length")
    return ie, je


def _collect(triples: Iterable[tuple[int, int, int]], limit: int | None) -> Triangles:
    out = Triangles()
    for i, j, k in triples:
        if limit is not None and len(out) >= limit:
            raise TriangleOverflowError(limit)
        out.add(i, j, k)
    return out


def _higher_neighbours(i: int, ie: Sequence[int], je: Sequence[int]) -> list[int]:
    """Sorted list of the vertices above ``i`` joined to it, with repeats."""
    found = []
    for a, b in zip(ie, je):
        if a == i:
            if b > i:
                found.append(b)
        elif b == i:
            if a > i:
                found.append(a)
    return sorted(found)


def _iter_triangles(
    nv: int,
    ie: list[int],
    je: list[int],
    ordered: bool = False,
    friendly: Sequence[bool] | None = None,
) -> Iterator[tuple[int, int, int]]:
    for i in range(nv):
        above = _higher_neighbours(i, ie, je)
        for pos, j in enumerate(above):
            for k in above[pos + 1 :]:
                if j == k:
                    continue
                if friendly is not None and not (friendly[j] or friendly[k]):
                    continue
                top = max(j, k)
                for a, b in zip(ie, je):
                    # with iedge increasing, no later edge can join j and k
                    if ordered and a > top:
                        break
                    if (a == j and b == k) or (a == k and b == j):
                        yield i, j, k


def find_triangles(nv, iedge, jedge, ntmax) -> Triangles:
    """All triangles of the graph on vertices ``0 .. nv - 1``.

    Raises TriangleOverflowError if more than ``ntmax`` triangles exist.
    """
    ie, je = _edges(iedge, jedge)
    return _collect(_iter_triangles(int(nv), ie, je), int(ntmax))


def _iter_sorted(ie: list[int], je: list[int]) -> Iterator[tuple[int, int, int]]:
    ne = len(ie)
    last = -1
    while last + 1 < ne:
        first = last + 1
        i = ie[first]
        m = first + 1
        while m < ne and ie[m] == i:
            m += 1
        last = m - 1
        if last <= first:
            continue
        for mj in range(first, last):
            j = je[mj]
            for mk in range(first + 1, last + 1):
                k = je[mk]
                m = next((p for p, a in enumerate(ie) if a >= j), ne)
                while m < ne and ie[m] == j:
                    if je[m] == k:
                        yield i, j, k
                    m += 1


def find_triangles_sorted(iedge, jedge, ntmax) -> Triangles:
    """All triangles, for an edge list in a canonical order.

    Requires ``iedge[m] < jedge[m]``, ``iedge`` increasing, and ``jedge``
    increasing among edges with the same ``iedge``. Raises
    TriangleOverflowError if more than ``ntmax`` triangles exist.
    """
    ie, je = _edges(iedge, jedge)
    return _collect(_iter_sorted(ie, je), int(ntmax))


def triangle_graph(nv, iedge, jedge) -> Triangles:
    """All triangles of the graph on vertices ``0 .. nv - 1``, without a limit."""
    ie, je = _edges(iedge, jedge)
    return _collect(_iter_triangles(int(nv), ie, je), None)


def triangle_graph_ordered(nv, iedge, jedge) -> Triangles:
    """All triangles, for an edge list with ``iedge`` in increasing order."""
    ie, je = _edges(iedge, jedge)
    return _collect(_iter_triangles(int(nv), ie, je, ordered=True), None)


def triangle_graph_friendly(nv, iedge, jedge, friendly) -> Triangles:
    """All triangles, skipping pairs of vertices that are both unfriendly.

    ``friendly`` flags each vertex; an edge between ``j`` and ``k`` is only
    looked for when at least one of them is friendly. ``iedge`` must be in
    increasing order.
    """
    nv = int(nv)
    flags = [bool(f) for f in friendly]
    if len(flags) != nv:
        raise ValueError("friendly must have one entry per vertex")
    ie, je = _edges(iedge, jedge)
    return _collect(_iter_triangles(nv, ie, je, ordered=True, friendly=flags), None)