"""Enumeration of the "vees" of a graph: triples (i, j, k) with i ~ j and i ~ k."""

from __future__ import annotations

from .triangles import _edges


def graph_vees(nv, iedge, jedge) -> list[tuple[int, int, int]]:
    """All triples ``(i, j, k)`` where vertex ``i`` is joined to both ``j`` and ``k``.

    Vertices are numbered ``0 .. nv - 1``; edges must not be listed in both
    directions. For each apex ``i`` the neighbours are taken in the order
    their edges appear, and each pair of them is reported once.
    """
    ie, je = _edges(iedge, jedge)
    out: list[tuple[int, int, int]] = []
    for i in range(int(nv)):
        neighbours = []
        for a, b in zip(ie, je):
            if a == i:
                neighbours.append(b)
            elif b == i:
                neighbours.append(a)
        for pos, j in enumerate(neighbours):
            for k in neighbours[pos + 1 :]:
                out.append((i, j, k))
    return out