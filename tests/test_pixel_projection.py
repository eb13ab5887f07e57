from __future__ import annotations

import math

import numpy as np
import pytest

from curveplot import DEFAULT_PROJECTION, PixelProjection, grid_ticks, to_pixel


def test_origin_maps_to_window_center() -> None:
    assert to_pixel(0.0, 0.0) == (400.0, 300.0)


@pytest.mark.parametrize(
    ("point", "pixel"),
    [
        ((1.0, 1.0), (420.0, 280.0)),
        ((-10.0, -10.0), (200.0, 500.0)),
        ((20.0, 15.0), (800.0, 0.0)),
        ((0.5, -0.25), (410.0, 305.0)),
    ],
)
def test_known_points_use_scale_twenty_and_flip_y(point, pixel) -> None:
    assert DEFAULT_PROJECTION.to_pixel(*point) == pixel


def test_arrays_map_elementwise() -> None:
    px, py = to_pixel(np.array([-1.0, 0.0, 1.0]), np.array([2.0, 0.0, -2.0]))
    np.testing.assert_array_equal(px, np.array([380.0, 400.0, 420.0]))
    np.testing.assert_array_equal(py, np.array([260.0, 300.0, 340.0]))


def test_non_finite_points_map_to_non_finite_pixels() -> None:
    px, py = to_pixel(1.0, float("nan"))
    assert px == 420.0
    assert math.isnan(py)
    _, py_inf = to_pixel(0.0, float("inf"))
    assert py_inf == -math.inf


def test_to_math_inverts_to_pixel() -> None:
    projection = PixelProjection(scale=10, origin_x=50, origin_y=60)
    assert projection.to_pixel(2.0, 3.0) == (70.0, 30.0)
    assert projection.to_math(70.0, 30.0) == (2.0, 3.0)


def test_zero_scale_is_rejected() -> None:
    with pytest.raises(ValueError, match="scale"):
        PixelProjection(scale=0)


def test_default_grid_matches_classic_window() -> None:
    grid = grid_ticks()
    assert len(grid.vertical) == 21
    assert len(grid.horizontal) == 16
    assert grid.x_axis_y == 300.0
    assert grid.y_axis_x == 400.0

    assert [t.position for t in grid.vertical[:3]] == [0.0, 40.0, 80.0]
    assert grid.vertical[0].label == "-20"
    assert grid.vertical[9].label == "-2"
    assert grid.vertical[10].position == 400.0
    assert grid.vertical[10].label is None
    assert grid.vertical[11].label == "2"
    assert grid.vertical[-1].label == "20"

    assert grid.horizontal[0].label == "15"
    assert grid.horizontal[7].position == 280.0
    assert grid.horizontal[7].label == "1"
    assert grid.horizontal[8].label == "-1"
    assert grid.horizontal[-1].label == "-15"
    assert all(t.label is not None for t in grid.horizontal)


def test_grid_labels_truncate_toward_zero() -> None:
    grid = grid_ticks(width=100, height=100, spacing=30, projection=PixelProjection(20, 50, 50))
    assert [t.value for t in grid.vertical] == [-2, -1, 0, 2]
    assert [t.value for t in grid.horizontal] == [2, 1, 0, -2]


def test_grid_rejects_non_positive_spacing() -> None:
    with pytest.raises(ValueError, match="spacing"):
        grid_ticks(spacing=0)
