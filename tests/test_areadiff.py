import math

import pytest

from spatcore.areadiff import area_diff, area_diff_box, area_diffs


def test_empty_pattern_approximates_disc_area():
    assert area_diff(1.0, [], [], 201) == pytest.approx(math.pi, rel=0.02)


def test_point_at_centre_covers_whole_disc():
    assert area_diff(1.0, [0.0], [0.0], 51) == 0.0


def test_far_point_leaves_disc_uncovered():
    assert area_diff(1.0, [10.0], [10.0], 51) == area_diff(1.0, [], [], 51)


def test_partial_cover_lies_between_bounds():
    value = area_diff(1.0, [1.0], [0.0], 101)
    assert 0.0 < value < area_diff(1.0, [], [], 101)


def test_area_diffs_special_radii():
    assert area_diffs([0.0, 2.0], [], [], 51) == [0.0, math.pi * 4.0]


def test_area_diffs_zero_radius_with_points():
    assert area_diffs([0.0], [0.3], [0.1], 21) == [0.0]


def test_area_diffs_point_at_centre_nearly_zero():
    (value,) = area_diffs([1.0], [0.0], [0.0], 101)
    assert 0.0 <= value < 0.05 * math.pi


def test_area_diffs_agrees_with_single_radius_version():
    x, y = [0.4, -0.3], [0.2, 0.5]
    multi = area_diffs([1.0, 1.5], x, y, 101)
    assert multi[0] == pytest.approx(area_diff(1.0, x, y, 101), abs=0.05)
    assert multi[1] == pytest.approx(area_diff(1.5, x, y, 101), abs=0.1)


def test_area_diffs_far_point_approximates_disc():
    (value,) = area_diffs([1.0], [20.0], [0.0], 201)
    assert value == pytest.approx(math.pi, rel=0.03)


def test_box_disjoint_from_disc_gives_zero():
    assert area_diff_box([1.0], [5.0], [5.0], 51, 2.0, 2.0, 3.0, 3.0) == [0.0]


def test_box_empty_pattern_ignores_box():
    assert area_diff_box([0.0, 1.0], [], [], 51, 2.0, 2.0, 3.0, 3.0) == [0.0, math.pi]


def test_box_large_with_far_point_approximates_disc():
    (value,) = area_diff_box([1.0], [20.0], [20.0], 201, -5.0, -5.0, 5.0, 5.0)
    assert value == pytest.approx(math.pi, rel=0.03)


def test_box_half_plane_gives_half_disc():
    (half,) = area_diff_box([1.0], [20.0], [20.0], 201, 0.0, -5.0, 5.0, 5.0)
    (full,) = area_diff_box([1.0], [20.0], [20.0], 201, -5.0, -5.0, 5.0, 5.0)
    assert half == pytest.approx(full / 2, rel=0.05)


def test_box_point_at_centre_reduces_area():
    (value,) = area_diff_box([1.0], [0.0], [0.0], 101, -5.0, -5.0, 5.0, 5.0)
    assert value < 0.05 * math.pi


@pytest.mark.parametrize("ngrid", [0, 1])
def test_too_small_grid_rejected(ngrid):
    with pytest.raises(ValueError):
        area_diff(1.0, [], [], ngrid)


def test_mismatched_coordinates_rejected():
    with pytest.raises(ValueError):
        area_diffs([1.0], [0.0, 1.0], [0.0], 11)