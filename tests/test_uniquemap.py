import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pointgeom.uniquemap import any_duplicated, unique_map

coords = st.integers(min_value=0, max_value=4).map(float)
points = st.lists(st.tuples(coords, coords, st.integers(min_value=0, max_value=1)), max_size=30)


def test_unique_map_pair():
    assert unique_map([0.0, 0.0, 1.0], [0.0, 0.0, 1.0]) == [None, 0, None]


def test_unique_map_triple_points_to_first():
    assert unique_map([2.0, 2.0, 2.0], [5.0, 5.0, 5.0]) == [None, 0, 0]


def test_marks_distinguish_points():
    x, y = [1.0, 1.0], [1.0, 1.0]
    assert unique_map(x, y, [1, 2]) == [None, None]
    assert any_duplicated(x, y, [1, 2]) is False
    assert any_duplicated(x, y, [3, 3]) is True


def test_any_duplicated_false_for_distinct():
    assert any_duplicated([0.0, 1.0, 2.0], [0.0, 0.0, 0.0]) is False


def test_empty_pattern():
    assert unique_map([], []) == []
    assert any_duplicated([], []) is False


def test_marks_length_mismatch():
    with pytest.raises(ValueError):
        unique_map([0.0, 1.0], [0.0, 1.0], [1])


@settings(max_examples=80)
@given(points)
def test_mapping_invariants(pts):
    pts = sorted(pts, key=lambda p: p[0])
    x = [p[0] for p in pts]
    y = [p[1] for p in pts]
    m = [p[2] for p in pts]
    mapping = unique_map(x, y, m)
    for j, i in enumerate(mapping):
        if i is not None:
            assert i < j
            assert mapping[i] is None
            assert (x[i], y[i], m[i]) == (x[j], y[j], m[j])
    seen = set()
    for j, p in enumerate(pts):
        if mapping[j] is None:
            assert p not in seen
            seen.add(p)
    assert any_duplicated(x, y, m) == any(i is not None for i in mapping)