import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pointgeom.triangles import (
    TriangleOverflowError,
    Triangles,
    find_triangles,
    find_triangles_sorted,
    triangle_graph,
    triangle_graph_friendly,
    triangle_graph_ordered,
)


def test_single_triangle():
    result = triangle_graph(3, [0, 1, 0], [1, 2, 2])
    assert list(result) == [(0, 1, 2)]


def test_square_with_diagonal():
    result = triangle_graph(4, [0, 1, 2, 3, 0], [1, 2, 3, 0, 2])
    assert list(result) == [(0, 1, 2), (0, 2, 3)]


def test_complete_graph_on_four_vertices():
    pairs = list(itertools.combinations(range(4), 2))
    ie = [a for a, _ in pairs]
    je = [b for _, b in pairs]
    result = triangle_graph(4, ie, je)
    assert sorted(result) == sorted(itertools.combinations(range(4), 3))
    assert len(result) == 4


def test_path_has_no_triangles():
    assert len(triangle_graph(4, [0, 1, 2], [1, 2, 3])) == 0


def test_repeated_edge_gives_repeated_triangle():
    result = triangle_graph(3, [0, 1, 0, 2], [1, 2, 2, 1])
    assert list(result) == [(0, 1, 2), (0, 1, 2)]


def test_find_triangles_within_limit():
    result = find_triangles(3, [0, 1, 0], [1, 2, 2], 5)
    assert list(result) == [(0, 1, 2)]


def test_find_triangles_overflow():
    with pytest.raises(TriangleOverflowError):
        find_triangles(4, [0, 1, 2, 3, 0], [1, 2, 3, 0, 2], 1)


def test_find_triangles_zero_limit_overflows():
    with pytest.raises(TriangleOverflowError) as info:
        find_triangles(3, [0, 1, 0], [1, 2, 2], 0)
    assert info.value.limit == 0


def test_mismatched_edges_rejected():
    with pytest.raises(ValueError):
        triangle_graph(3, [0, 1], [1])


def test_find_triangles_sorted():
    result = find_triangles_sorted([0, 0, 1], [1, 2, 2], 10)
    assert list(result) == [(0, 1, 2)]


def test_find_triangles_sorted_square():
    result = find_triangles_sorted([0, 0, 0, 1, 2], [1, 2, 3, 2, 3], 10)
    assert list(result) == [(0, 1, 2), (0, 2, 3)]


def test_find_triangles_sorted_overflow():
    with pytest.raises(TriangleOverflowError):
        find_triangles_sorted([0, 0, 0, 1, 2], [1, 2, 3, 2, 3], 1)


def test_ordered_matches_plain_for_sorted_edges():
    ie = [0, 0, 0, 1, 2]
    je = [1, 2, 3, 2, 3]
    assert list(triangle_graph_ordered(4, ie, je)) == list(triangle_graph(4, ie, je))


def test_friendly_excludes_unfriendly_pairs():
    ie = [0, 0, 1]
    je = [1, 2, 2]
    assert len(triangle_graph_friendly(3, ie, je, [True, False, False])) == 0
    assert list(triangle_graph_friendly(3, ie, je, [False, True, False])) == [(0, 1, 2)]


def test_friendly_wrong_length_rejected():
    with pytest.raises(ValueError):
        triangle_graph_friendly(3, [0], [1], [True])


def test_triangles_container():
    t = Triangles()
    t.add(0, 1, 2)
    assert len(t) == 1
    assert list(t) == [(0, 1, 2)]


edge_sets = st.sets(
    st.tuples(st.integers(0, 6), st.integers(0, 6)).filter(lambda e: e[0] < e[1]),
    max_size=15,
)


@settings(max_examples=60)
@given(edge_sets)
def test_triangles_are_triangles(edges):
    ie = [a for a, _ in edges]
    je = [b for _, b in edges]
    result = triangle_graph(7, ie, je)
    for i, j, k in result:
        assert i < j < k
        assert {(i, j), (i, k), (j, k)} <= edges
    assert len(set(result)) == len(result)


@settings(max_examples=60)
@given(edge_sets)
def test_variants_agree_on_sorted_edges(edges):
    ordered = sorted(edges)
    ie = [a for a, _ in ordered]
    je = [b for _, b in ordered]
    plain = list(triangle_graph(7, ie, je))
    assert list(triangle_graph_ordered(7, ie, je)) == plain
    assert list(triangle_graph_friendly(7, ie, je, [True] * 7)) == plain
    assert list(find_triangles(7, ie, je, 1000)) == plain
    assert sorted(find_triangles_sorted(ie, je, 1000)) == sorted(plain)