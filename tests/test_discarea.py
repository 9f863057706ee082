import math

import pytest

from spatcore.discarea import disc_area_poly, disc_contrib

# anticlockwise unit square as a list of edges
SQ_X0 = [0.0, 1.0, 1.0, 0.0]
SQ_Y0 = [0.0, 0.0, 1.0, 1.0]
SQ_X1 = [1.0, 1.0, 0.0, 0.0]
SQ_Y1 = [0.0, 1.0, 1.0, 0.0]


def test_segment_above_disc_covers_whole_disc():
    assert disc_contrib(-2.0, 2.0, 2.0, 2.0, 1e-8) == pytest.approx(math.pi)


def test_segment_below_disc_gives_zero():
    assert disc_contrib(-2.0, -2.0, 2.0, -2.0, 1e-8) == 0.0


def test_segment_through_centre_gives_half_disc():
    assert disc_contrib(-1.0, 0.0, 1.0, 0.0, 1e-8) == pytest.approx(math.pi / 2)


def test_segment_outside_x_range_gives_zero():
    assert disc_contrib(2.0, 5.0, 3.0, 5.0, 1e-8) == 0.0


def test_contrib_is_monotone_in_height():
    low = disc_contrib(-1.0, -0.5, 1.0, -0.5, 1e-8)
    mid = disc_contrib(-1.0, 0.0, 1.0, 0.0, 1e-8)
    high = disc_contrib(-1.0, 0.5, 1.0, 0.5, 1e-8)
    assert 0.0 < low < mid < high < math.pi


def test_contrib_symmetry_of_tilted_segment():
    up = disc_contrib(-1.0, -0.3, 1.0, 0.3, 1e-8)
    assert up == pytest.approx(math.pi / 2)


def test_small_disc_inside_square():
    out = disc_area_poly([0.5], [0.5], [[0.1]], SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)
    assert out.shape == (1, 1)
    assert out[0, 0] == pytest.approx(math.pi * 0.01, rel=1e-9)


def test_large_disc_covers_square():
    out = disc_area_poly([0.5], [0.5], [[10.0]], SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)
    assert out[0, 0] == pytest.approx(1.0, rel=1e-9)


def test_disc_at_corner_gives_quarter_disc():
    out = disc_area_poly([0.0], [0.0], [[0.5]], SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)
    assert out[0, 0] == pytest.approx(math.pi * 0.25 / 4, rel=1e-9)


def test_tiny_radius_gives_zero():
    out = disc_area_poly([0.5], [0.5], [[1e-10]], SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)
    assert out[0, 0] == 0.0


def test_reversed_orientation_negates_area():
    forward = disc_area_poly([0.5], [0.5], [[0.3]], SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)
    backward = disc_area_poly([0.5], [0.5], [[0.3]], SQ_X1, SQ_Y1, SQ_X0, SQ_Y0, 1e-8)
    assert backward[0, 0] == pytest.approx(-forward[0, 0])


def test_matrix_of_radii_layout():
    radii = [[0.1, 10.0], [0.5, 0.0]]
    out = disc_area_poly([0.5, 0.0], [0.5, 0.0], radii, SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)
    assert out.shape == (2, 2)
    assert out[0, 1] == pytest.approx(1.0)
    assert out[1, 0] == pytest.approx(math.pi * 0.25 / 4)
    assert out[1, 1] == 0.0


def test_flat_radii_means_one_per_centre():
    out = disc_area_poly([0.5, 0.5], [0.5, 0.5], [0.1, 10.0], SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)
    assert out.shape == (2, 1)
    assert out[1, 0] == pytest.approx(1.0)


def test_radius_rows_must_match_centres():
    with pytest.raises(ValueError):
        disc_area_poly([0.5, 0.2], [0.5, 0.2], [[0.1]], SQ_X0, SQ_Y0, SQ_X1, SQ_Y1, 1e-8)


def test_segment_vectors_must_match():
    with pytest.raises(ValueError):
        disc_area_poly([0.5], [0.5], [[0.1]], SQ_X0, SQ_Y0, SQ_X1[:2], SQ_Y1, 1e-8)