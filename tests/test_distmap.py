import math

import numpy as np
import pytest

from spatcore.distmap import (
    RasterGrid,
    binary_distance_map,
    distance_to_boundary,
    exact_distance_transform,
    pseudo_exact_distance_transform,
)


def _grid():
    return RasterGrid(0.0, 0.0, 4.0, 3.0, nrow=4, ncol=5)


def test_grid_positions_span_rectangle():
    g = _grid()
    assert g.x_position(g.cmin) == pytest.approx(g.xmin)
    assert g.x_position(g.cmax) == pytest.approx(g.xmax)
    assert g.y_position(g.rmin) == pytest.approx(g.ymin)
    assert g.y_position(g.rmax) == pytest.approx(g.ymax)


def test_grid_index_round_trip():
    g = _grid()
    for col in range(g.cmin, g.cmax + 1):
        assert g.col_index(g.x_position(col)) == col
    for row in range(g.rmin, g.rmax + 1):
        assert g.row_index(g.y_position(row)) == row


def test_grid_rejects_single_column():
    with pytest.raises(ValueError):
        RasterGrid(0.0, 0.0, 1.0, 1.0, nrow=3, ncol=1)


def test_distance_to_boundary_invariants():
    g = RasterGrid(0.0, 0.0, 4.0, 4.0, nrow=5, ncol=5)
    b = distance_to_boundary(g)
    assert b.shape == (5, 5)
    assert (b[0, :] == 0).all() and (b[:, -1] == 0).all()
    assert np.allclose(b, b[::-1, :]) and np.allclose(b, b.T)
    assert b[2, 2] == pytest.approx(2.0)


def test_binary_map_all_foreground_is_zero():
    out = binary_distance_map(np.ones((3, 4)), 0.0, 0.0, 3.0, 2.0)
    assert (out.distance == 0).all()


def test_binary_map_single_pixel_steps():
    mask = np.zeros((5, 5), dtype=int)
    mask[2, 2] = 1
    out = binary_distance_map(mask, 0.0, 0.0, 4.0, 8.0)
    xstep, ystep = 1.0, 2.0
    assert out.distance[2, 2] == 0.0
    assert out.distance[2, 3] == pytest.approx(xstep)
    assert out.distance[3, 2] == pytest.approx(ystep)
    assert out.distance[3, 3] == pytest.approx(math.hypot(xstep, ystep))
    assert np.allclose(out.distance, out.distance[::-1, ::-1])


def test_binary_map_boundary_matches_grid():
    mask = np.zeros((3, 3), dtype=int)
    mask[0, 0] = 1
    out = binary_distance_map(mask, 0.0, 0.0, 2.0, 2.0)
    g = RasterGrid(0.0, 0.0, 2.0, 2.0, nrow=3, ncol=3)
    assert np.allclose(out.boundary, distance_to_boundary(g))


def test_exact_single_point_is_euclidean():
    g = _grid()
    px, py = 1.3, 2.2
    out = exact_distance_transform([px], [py], g)
    assert (out.index == 0).all()
    for r in range(g.nrow):
        for c in range(g.ncol):
            expected = math.hypot(px - g.x_position(c + g.cmin), py - g.y_position(r + g.rmin))
            assert out.distance[r, c] == pytest.approx(expected)


def test_exact_distance_consistent_with_index():
    g = _grid()
    xs = [0.2, 3.7, 2.0]
    ys = [0.1, 2.9, 1.5]
    out = exact_distance_transform(xs, ys, g)
    assert set(out.index.ravel().tolist()) <= {0, 1, 2}
    for r in range(g.nrow):
        for c in range(g.ncol):
            i = out.index[r, c]
            d = math.hypot(xs[i] - g.x_position(c + g.cmin), ys[i] - g.y_position(r + g.rmin))
            assert out.distance[r, c] == pytest.approx(d)
            assert out.distance[r, c] >= 0


def test_exact_no_points_all_undefined():
    g = _grid()
    out = exact_distance_transform([], [], g)
    assert (out.index == -1).all()
    assert np.allclose(out.distance, 2.0 * (4.0 ** 2 + 3.0 ** 2))


def test_exact_point_outside_rejected():
    with pytest.raises(ValueError):
        exact_distance_transform([40.0], [1.0], _grid())


def test_exact_mismatched_coordinates_rejected():
    with pytest.raises(ValueError):
        exact_distance_transform([1.0, 2.0], [1.0], _grid())


def test_pseudo_foreground_points_to_itself():
    g = _grid()
    mask = np.zeros((4, 5), dtype=int)
    mask[1, 3] = 1
    mask[3, 0] = 1
    out = pseudo_exact_distance_transform(mask, g)
    assert out.distance[1, 3] == 0.0 and out.distance[3, 0] == 0.0
    assert (out.rows[1, 3], out.cols[1, 3]) == (1, 3)
    for r in range(4):
        for c in range(5):
            assert mask[out.rows[r, c], out.cols[r, c]] == 1


def test_pseudo_single_pixel_is_euclidean():
    g = _grid()
    mask = np.zeros((4, 5), dtype=int)
    mask[2, 1] = 1
    out = pseudo_exact_distance_transform(mask, g)
    x0 = g.x_position(1 + g.cmin)
    y0 = g.y_position(2 + g.rmin)
    for r in range(4):
        for c in range(5):
            expected = math.hypot(g.x_position(c + g.cmin) - x0, g.y_position(r + g.rmin) - y0)
            assert out.distance[r, c] == pytest.approx(expected)


def test_pseudo_empty_mask_undefined():
    out = pseudo_exact_distance_transform(np.zeros((4, 5)), _grid())
    assert (out.rows == -1).all() and (out.cols == -1).all()


def test_pseudo_wrong_shape_rejected():
    with pytest.raises(ValueError):
        pseudo_exact_distance_transform(np.zeros((3, 3)), _grid())