import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pointgeom.poly2im import polygon_area_image, polygon_indicator_image


def _shoelace(xs, ys):
    return 0.5 * sum(
        xa * yb - xb * ya for xa, ya, xb, yb in zip(xs, ys, xs[1:], ys[1:])
    )


def test_unit_square_area_image():
    out = polygon_area_image(2, 2, [0, 1, 1, 0, 0], [0, 0, 1, 1, 0])
    assert out == [[pytest.approx(1.0), pytest.approx(0.0)], [0.0, 0.0]]


def test_triangle_area_sums_to_polygon_area():
    xs = [0.2, 3.7, 1.4, 0.2]
    ys = [0.3, 0.9, 2.8, 0.3]
    out = polygon_area_image(4, 4, xs, ys)
    total = sum(sum(row) for row in out)
    assert total == pytest.approx(_shoelace(xs, ys))
    assert all(-1e-9 <= v <= 1 + 1e-9 for row in out for v in row)


def test_clockwise_polygon_gives_negated_areas():
    xs = [0.2, 3.7, 1.4, 0.2]
    ys = [0.3, 0.9, 2.8, 0.3]
    forward = polygon_area_image(4, 4, xs, ys)
    backward = polygon_area_image(4, 4, xs[::-1], ys[::-1])
    for frow, brow in zip(forward, backward):
        assert brow == pytest.approx([-v for v in frow])


@settings(max_examples=60, deadline=None)
@given(
    st.tuples(st.floats(0, 4), st.floats(0, 4)).filter(lambda p: p[0] != p[1]),
    st.tuples(st.floats(0, 3), st.floats(0, 3)).filter(lambda p: p[0] != p[1]),
)
def test_rectangle_area_matches(xr, yr):
    a, b = sorted(xr)
    c, d = sorted(yr)
    xs = [a, b, b, a, a]
    ys = [c, c, d, d, c]
    out = polygon_area_image(4, 3, xs, ys)
    assert len(out) == 3 and all(len(row) == 4 for row in out)
    assert sum(sum(row) for row in out) == pytest.approx((b - a) * (d - c), abs=1e-9)


def test_indicator_rectangle_interior_points():
    xs = [0.5, 2.5, 2.5, 0.5, 0.5]
    ys = [0.5, 0.5, 2.5, 2.5, 0.5]
    out = polygon_indicator_image(xs, ys, 4, 4)
    expected = [
        [1 if 1 <= i <= 2 and 1 <= j <= 2 else 0 for j in range(4)] for i in range(4)
    ]
    assert out == expected


def test_indicator_integer_square_boundary_convention():
    xs = [0, 3, 3, 0, 0]
    ys = [0, 0, 3, 3, 0]
    out = polygon_indicator_image(xs, ys, 5, 5)
    expected = [
        [1 if 1 <= i <= 3 and j <= 3 else 0 for j in range(5)] for i in range(5)
    ]
    assert out == expected


def test_indicator_clockwise_is_negated():
    xs = [0.5, 2.5, 2.5, 0.5, 0.5]
    ys = [0.5, 0.5, 2.5, 2.5, 0.5]
    forward = polygon_indicator_image(xs, ys, 4, 4)
    backward = polygon_indicator_image(xs[::-1], ys[::-1], 4, 4)
    assert backward == [[-v for v in row] for row in forward]


def test_mismatched_coordinates_rejected():
    with pytest.raises(ValueError):
        polygon_indicator_image([0, 1, 0], [0, 1], 3, 3)
    with pytest.raises(ValueError):
        polygon_area_image(3, 3, [0, 1, 0], [0, 1])