# spatcore

Numerical building blocks for the analysis of spatial point patterns in the
plane and in three dimensions. The routines take plain sequences or numpy
arrays and return numpy arrays, lists or small frozen dataclasses.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `spatcore.areadiff` | `area_diff`, `area_diffs`, `area_diff_box`: area of the disc `b(0, r)` not covered by discs `b(x_i, r)`, estimated by point counting on a grid |
| `spatcore.discarea` | `disc_area_poly`, `disc_contrib`: area of intersection between discs and a polygon given by its edges |
| `spatcore.masks` | `discs_to_grid`, `boundary_mask`, `far_distance_grid`: pixel masks and distance to the furthest data point |
| `spatcore.pairdist` | pairwise and cross distance matrices in 2D and 3D, plain or periodic, optionally squared; `match_xyz` |
| `spatcore.closepairs` | `ClosePair`, `PairOverflowError`, `pair_count`, `cross_count`, `duplicated_xy`, `close_pairs`, `cross_pairs`, `close_pairs_alt`, `close_pairs_fixed`, `cross_pairs_fixed` |
| `spatcore.close3d` | `ClosePair3D`, `close_pairs_3d`, `cross_pairs_3d`, `close_pairs_3d_alt` |
| `spatcore.graphpaths` | `shortest_path_distances`, returning a `PathResult` with a `PathStatus`; `UNREACHABLE` |
| `spatcore.auction` | `auction_assignment`: forward/reverse auction with eps-scaling, returning an `AuctionResult` |
| `spatcore.dinfty` | `bottleneck_assignment`: permutation minimising the largest cost |
| `spatcore.dwpure` | `transport_plan`: primal-dual optimal transport between integer masses |
| `spatcore.components` | `label_image_components`, `label_graph_components`, `ConvergenceError` |
| `spatcore.distmap` | `RasterGrid`, `DistanceMap`, `binary_distance_map`, `exact_distance_transform`, `pseudo_exact_distance_transform`, `distance_to_boundary` |

## Conventions

- All indices in results are zero-based.
- The close-pair routines in `spatcore.closepairs` and `spatcore.close3d`
  (apart from `duplicated_xy`) assume each point pattern is sorted by
  increasing x coordinate; they use that order to stop scanning early.
- Pixel grids are arrays of shape `(ny, nx)`: rows run along y, columns
  along x.
- Invalid input (mismatched vector lengths, non-square matrices, negative
  masses and the like) raises `ValueError`.

## Notes on individual routines

- `close_pairs` returns each unordered pair once (`i < j`);
  `close_pairs_alt` returns every ordered pair, each point paired with
  itself included; `close_pairs_fixed` returns ordered pairs with `i != j`
  and raises `PairOverflowError` (carrying `limit` and the pairs collected
  so far) once more than `limit` pairs are found. `cross_pairs_fixed`
  behaves the same way for two patterns.
- When a `threshold` is passed, each `ClosePair` / `ClosePair3D` records in
  `within` whether its distance is at most the threshold.
- `pair_count` counts ordered pairs at distance at most `rmax`;
  `cross_count` counts pairs at distance strictly less than `rmax`.
- `match_xyz` gives, for each point of the first set, the index of the
  first identical point of the second, or 0 where there is none; the first
  entry is always 0.
- `shortest_path_distances` treats negative edge lengths as missing edges
  and marks unreachable pairs with `UNREACHABLE` (-1). For integer lengths
  the tolerance is ignored.
- `auction_assignment` needs a square desire matrix with at least two rows
  and positive `eps` values.
- `label_graph_components` raises `ConvergenceError` if the labels do not
  settle within `nv` sweeps.
- `exact_distance_transform` raises `ValueError` for a point outside the
  raster; with no points it returns sentinel distances and indices of -1.

## Examples

Pairwise distances:

```python
from spatcore.pairdist import pair_distances

d = pair_distances([0.0, 3.0], [0.0, 4.0])
# d[0, 1] == 5.0
```

Close pairs within a radius:

```python
from spatcore.closepairs import close_pairs

pairs = close_pairs([0.0, 0.5, 2.0], [0.0, 0.0, 0.0], rmax=1.0)
[(p.i, p.j, p.d) for p in pairs]
# [(0, 1, 0.5)]
```

Connected components of a graph:

```python
from spatcore.components import label_graph_components

label_graph_components(4, [0, 2], [1, 3])
# [0, 0, 2, 2]
```

Bottleneck assignment:

```python
from spatcore.dinfty import bottleneck_assignment

bottleneck_assignment([[1, 5], [5, 1]])
# [0, 1]
```

## What this package does not do

It is a library only: there is no command-line tool, no file reading or
writing and no plotting. Callers supply coordinates, masks and matrices
directly and take the results as arrays or dataclasses.