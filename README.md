# pointgeom

Pure-Python building blocks for the analysis of spatial point patterns and
planar geometry. It has no third-party dependencies: inputs are any
sequences of numbers, and results are plain lists, tuples and small
dataclasses.

## What is in it

- `pointgeom.neighbours`: nearest and k-nearest neighbour distances and
  indices for points sorted by increasing `y` (`nearest_neighbours`,
  `k_nearest_neighbours`), the largest squared nearest-neighbour distance
  (`max_nn_distance_squared`, optionally ignoring coincident points), and a
  3-D cross-pattern k-nearest search for patterns sorted by `z`
  (`cross_k_nearest_3d`, with optional identifiers that exclude matching
  points). Results come back as a `Neighbours` object with `distances` and
  `which`; a neighbour not found within the `huge` limit has index `None`.
- `pointgeom.uniquemap`: duplicated points in a pattern sorted by `x`
  (`unique_map`, giving for each point the earlier point it duplicates or
  `None`, and `any_duplicated`), optionally requiring equal marks.
- `pointgeom.tabulate`: counts and weight sums of sorted values against
  sorted unique values (`tabulate_sorted`, `tabulate_weights`) and a
  weighted histogram over bin indices (`weighted_histogram`).
- `pointgeom.raster`: the `Raster` grid, which maps between row/column
  entries and plane coordinates (`from_bounds`, `xpos`, `ypos`,
  `row_index`, `col_index`, `inside`, `distance_squared_to`, `clear`).
- `pointgeom.scan`: the scan transform (`scan_transform`), counting the
  points within a given radius of each raster position.
- `pointgeom.rasterfilter`: a 3×3 linear filter over an image given as a
  list of rows (`raster3_filter`).
- `pointgeom.closepairs`: generators of close pairs within one pattern or
  between two patterns (`iter_close_pairs`, `iter_cross_pairs`, yielding
  `(i, j, d2)` with the squared distance), and close pairs under periodic
  (toroidal) distance (`periodic_close_pairs`, returning `ClosePairs`).
- `pointgeom.poly2im`: a closed polygon to a pixel image, as a lattice-point
  indicator (`polygon_indicator_image`) or as the exact area of overlap with
  each unit pixel (`polygon_area_image`, which raises `PolygonRasterError`
  if an edge cannot be placed).
- `pointgeom.seg2pix`: line segments to pixel images: indicator, weighted
  count and weighted length (`segment_indicator_image`,
  `segment_count_image`, `segment_length_image`).
- `pointgeom.xyseg`: intersections of line segments held in `Segments`
  (start point plus direction vector, or `Segments.from_endpoints`):
  full matrices (`cross_intersection_matrices`,
  `self_intersection_matrices`, `polygon_self_intersection_matrices`,
  returning `IntersectionMatrices`), boolean matrices (`cross_intersects`,
  `self_intersects`), quick tests (`any_cross_intersection`,
  `polygon_has_self_intersection`), lists of crossings (`cross_intersections`,
  `self_intersections`, returning `Intersections`) and crossings with
  vertical lines (`vertical_slice`).
- `pointgeom.triangles`: triangles of a graph given its edge list
  (`find_triangles` and `find_triangles_sorted` with a storage limit that
  raises `TriangleOverflowError`; `triangle_graph`,
  `triangle_graph_ordered` and `triangle_graph_friendly` without one).
- `pointgeom.diameters`: triangles together with their longest edge length
  (`triangle_diameters`, `triangle_diameters_bounded`).
- `pointgeom.vees`: "vee" triples `(i, j, k)` with `i ~ j` and `i ~ k`
  (`graph_vees`).
- `pointgeom.loccum`: local cumulative sums and products of data values
  over a grid of distances (`local_cumulative_sum`,
  `local_cumulative_product`).
- `pointgeom.quasirandom`: the van der Corput sequence (`van_der_corput`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from pointgeom.neighbours import nearest_neighbours
from pointgeom.quasirandom import van_der_corput

# Points must be sorted by increasing y.
xs = [0.0, 1.0, 0.0]
ys = [0.0, 0.0, 2.0]
result = nearest_neighbours(xs, ys, huge=100.0)
print(result.distances)  # [1.0, 1.0, 2.0]
print(result.which)      # [1, 0, 0]

print(van_der_corput(2, 4))   # [0.5, 0.25, 0.75, 0.125]
```

Several routines assume the input is sorted by one coordinate, as noted in
their docstrings. Indices in the results are zero-based.

## What it does not do

The package is a library only: it has no command-line tool, no plotting and
no file input or output. It works on plain Python lists and makes no use of
array libraries, so it is meant for moderate pattern sizes rather than very
large ones.