"""Tests for grid sizing, cell mapping and frame assembly."""

import itertools

import numpy as np
import pytest

from asciifly.core.params import PALETTE
from asciifly.core.raster import (
    GridDimensions,
    cell_coordinates,
    density_grid,
    grid_dimensions,
    palette_index,
    render_frame,
)


def test_grid_dimensions_typical_window():
    assert grid_dimensions(800, 600, 16) == GridDimensions(cols=71, rows=25)
    assert grid_dimensions(1920, 1080, 14) == GridDimensions(cols=85, rows=39)


def test_grid_dimensions_invariant():
    widths = [0, 1, 320, 799, 1024, 1600, 3840, 10_000]
    heights = [0, 1, 480, 900, 1440, 2160, 10_000]
    fonts = [-4, 0, 1, 8, 12, 13.5, 16, 24, 72]
    for w, h, fs in itertools.product(widths, heights, fonts):
        grid = grid_dimensions(w, h, fs)
        assert grid.cols % 2 == 1 and grid.rows % 2 == 1
        assert 40 <= grid.cols <= 85
        assert 25 <= grid.rows <= 42


def test_grid_rows_stay_inside_upper_bound():
    assert grid_dimensions(4000, 4000, 10).rows == 41


@pytest.mark.parametrize("cols,rows", [(0, 25), (41, 0), (-3, -3)])
def test_grid_rejects_empty(cols, rows):
    with pytest.raises(ValueError):
        GridDimensions(cols, rows)


def test_cell_coordinates_center(small_grid):
    c, r, wx, wy = cell_coordinates(small_grid)
    assert wx.shape == (25, 41)
    assert (wx[12, 20], wy[12, 20]) == (0.0, 0.0)
    assert wx[0, 0] == pytest.approx(-20 * 0.55)
    assert wy[24, 40] == 12.0
    assert (c[12, 20], r[12, 20]) == (20, 12)


def test_cell_coordinates_bob_shifts_up(small_grid):
    _, _, _, wy = cell_coordinates(small_grid, bob=1.2)
    assert wy[12, 20] == pytest.approx(-1.2)


def test_palette_index_bounds():
    d = np.array([0.0, 1e-9, 0.142, 0.5, 0.857, 0.999999, 1.0])
    idx = palette_index(d)
    assert idx.min() >= 0
    assert idx.max() <= len(PALETTE) - 1
    assert idx[0] == 0
    assert idx[-1] == len(PALETTE) - 1
    assert idx[-2] == len(PALETTE) - 1
    assert list(palette_index(np.linspace(0, 1, 1001))) == sorted(palette_index(np.linspace(0, 1, 1001)))


def test_render_frame_layout(small_grid):
    text = render_frame(0, small_grid)
    lines = text.split("\n")
    assert len(lines) == 25
    assert all(len(line) == 41 for line in lines)
    assert not text.endswith("\n")
    assert set(text) <= set(PALETTE) | {"\n"}


def test_render_frame_center_is_body(small_grid):
    lines = render_frame(0, small_grid).split("\n")
    # 0.85 body, breathing 0.88 and the cell's texture offset
    assert lines[12][20] == "•"


def test_render_frame_idempotent(small_grid):
    for t in (0, 16.7, 1234.5, 98765):
        assert render_frame(t, small_grid) == render_frame(t, small_grid)


def test_render_frame_animates(small_grid):
    assert render_frame(0, small_grid) != render_frame(2500, small_grid)


def test_figure_visible_and_bounded():
    grid = GridDimensions(cols=85, rows=41)
    d = density_grid(4200, grid)
    assert d.shape == (41, 85)
    assert d.min() >= 0.0
    assert d.max() <= 1.0
    # corners are empty apart from texture
    assert d[0, 0] <= 0.05
    assert d[20, 42] > 0.5
