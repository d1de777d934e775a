import pytest
from hypothesis import given
from hypothesis import strategies as st

from pointgeom.raster import Raster


def make(nrow=5, ncol=7, mrow=0, mcol=0):
    return Raster.from_bounds(None, -1.0, 2.0, 3.0, 6.0, nrow, ncol, mrow, mcol)


def test_corners_map_to_bounds():
    r = make()
    assert r.xpos(r.cmin) == pytest.approx(r.xmin)
    assert r.xpos(r.cmax) == pytest.approx(r.xmax)
    assert r.ypos(r.rmin) == pytest.approx(r.ymin)
    assert r.ypos(r.rmax) == pytest.approx(r.ymax)


def test_margins_define_valid_region():
    r = make(nrow=6, ncol=7, mrow=1, mcol=2)
    assert r.inside(r.rmin, r.cmin)
    assert r.inside(r.rmax, r.cmax)
    assert not r.inside(r.rmin - 1, r.cmin)
    assert not r.inside(r.rmax + 1, r.cmax)
    assert not r.inside(r.rmin, r.cmax + 1)
    assert r.xpos(r.cmin) == pytest.approx(r.xmin)
    assert r.xpos(r.cmax) == pytest.approx(r.xmax)


@given(st.integers(0, 4), st.integers(0, 6))
def test_index_round_trip(row, col):
    r = make()
    assert r.row_index(r.ypos(row) + r.ystep / 2) == row
    assert r.col_index(r.xpos(col) + r.xstep / 2) == col


def test_distance_to_own_position_is_zero():
    r = make()
    assert r.distance_squared_to(r.xpos(3), r.ypos(2), 2, 3) == pytest.approx(0.0)
    assert r.distance_squared_to(r.xpos(3), r.ypos(2), 2, 4) == pytest.approx(
        r.xstep**2
    )


def test_entries_are_row_major():
    r = make()
    r[1, 2] = 7
    assert r.data[1 * r.ncol + 2] == 7
    assert r.rows()[1][2] == 7
    assert r[1, 2] == 7


def test_clear_sets_every_entry():
    r = Raster.from_bounds([1] * 35, 0, 0, 1, 1, 5, 7, 0, 0)
    r.clear(3)
    assert r.data == [3] * r.length


def test_wrong_data_length_rejected():
    with pytest.raises(ValueError):
        Raster.from_bounds([0] * 10, 0, 0, 1, 1, 5, 7, 0, 0)


def test_too_few_columns_rejected():
    with pytest.raises(ValueError):
        Raster.from_bounds(None, 0, 0, 1, 1, 5, 3, 0, 1)