import pytest
from hypothesis import given
from hypothesis import strategies as st

from pointgeom.rasterfilter import raster3_filter

IDENTITY = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]

images = st.integers(1, 5).flatmap(
    lambda nx: st.lists(
        st.lists(st.integers(-50, 50), min_size=nx, max_size=nx),
        min_size=1,
        max_size=5,
    )
)


@given(images)
def test_identity_filter(image):
    assert raster3_filter(image, IDENTITY) == [[float(v) for v in row] for row in image]


@given(images)
def test_zero_filter(image):
    out = raster3_filter(image, [[0] * 3] * 3)
    assert all(v == 0 for row in out for v in row)


@given(images)
def test_shift_filter(image):
    shift = [[0, 0, 0], [0, 0, 1], [0, 0, 0]]
    out = raster3_filter(image, shift)
    for row_in, row_out in zip(image, out):
        assert row_out[:-1] == [float(v) for v in row_in[1:]]
        assert row_out[-1] == 0


def test_box_filter_spreads_single_pixel():
    image = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert raster3_filter(image, [[1] * 3] * 3) == [[1.0] * 3] * 3


def test_empty_image():
    assert raster3_filter([], IDENTITY) == []


def test_bad_weights_rejected():
    with pytest.raises(ValueError):
        raster3_filter([[1, 2]], [[1, 2], [3, 4]])


def test_ragged_image_rejected():
    with pytest.raises(ValueError):
        raster3_filter([[1, 2], [3]], IDENTITY)