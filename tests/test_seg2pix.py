import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pointgeom.seg2pix import (
    segment_count_image,
    segment_indicator_image,
    segment_length_image,
)


def test_horizontal_segment_indicator():
    out = segment_indicator_image([0.5], [1.5], [3.5], [1.5], 5, 3)
    expected = [[1 if i == 1 and j <= 3 else 0 for j in range(5)] for i in range(3)]
    assert out == expected


def test_vertical_segment_indicator():
    out = segment_indicator_image([2.5], [0.2], [2.7], [3.8], 4, 5)
    expected = [[1 if j == 2 and i <= 3 else 0 for j in range(4)] for i in range(5)]
    assert out == expected


def test_overlapping_segments_add_weights():
    weights = [2.0, 3.0]
    out = segment_count_image(
        [0.5, 0.2], [1.5, 1.2], [2.5, 2.8], [1.5, 1.7], weights, 4, 3
    )
    for j in range(3):
        assert out[1][j] == pytest.approx(weights[0] + weights[1])
    assert out[1][3] == 0.0
    assert all(v == 0.0 for i in (0, 2) for v in out[i])


def test_outside_segment_clamped_to_corner():
    out = segment_indicator_image([-5.0], [-5.0], [-4.5], [-5.2], 3, 3)
    assert out[0][0] == 1
    assert sum(sum(row) for row in out) == 1


def test_general_segment_length_with_scaled_pixels():
    w = 1.5
    xa, ya, xb, yb = 0.5, 0.5, 2.5, 1.7
    out = segment_length_image([xa], [ya], [xb], [yb], [w], 2.0, 1.0, 4, 3)
    total = sum(sum(row) for row in out)
    assert total == pytest.approx(w * math.hypot(2.0 * (xb - xa), yb - ya))


def test_tiny_segment_goes_in_one_cell():
    out = segment_length_image([1.2], [1.2], [1.2004], [1.2], [2.0], 1.0, 1.0, 3, 3)
    assert out[1][1] == pytest.approx(2.0 * 0.0004)
    assert sum(sum(row) for row in out) == pytest.approx(out[1][1])


_coord = st.floats(0.0, 3.99)


@settings(max_examples=80, deadline=None)
@given(_coord, _coord, _coord, _coord, st.floats(0.1, 5.0))
def test_length_image_sums_to_weighted_length(xa, ya, xb, yb, w):
    out = segment_length_image([xa], [ya], [xb], [yb], [w], 1.0, 1.0, 4, 4)
    total = sum(sum(row) for row in out)
    assert total == pytest.approx(w * math.hypot(xb - xa, yb - ya), rel=1e-9, abs=1e-9)


@settings(max_examples=80, deadline=None)
@given(_coord, _coord, _coord, _coord)
def test_indicator_marks_endpoint_pixels(xa, ya, xb, yb):
    out = segment_indicator_image([xa], [ya], [xb], [yb], 4, 4)
    assert out[math.floor(ya)][math.floor(xa)] == 1
    assert set(v for row in out for v in row) <= {0, 1}


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        segment_count_image([0.0, 1.0], [0.0], [1.0], [1.0], [1.0], 2, 2)
    with pytest.raises(ValueError):
        segment_indicator_image([0.0], [0.0], [1.0], [1.0], 0, 2)