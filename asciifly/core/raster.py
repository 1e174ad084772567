from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .animator import frame_state, shade
from .params import DEFAULT_PARAMS, AestheticParams


@dataclass(frozen=True)
class GridDimensions:
    cols: int
    rows: int

    def __post_init__(self):
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.cols}x{self.rows}")


def _clamp_odd(value: float, lo: int, hi: int) -> int:
    n = min(hi, max(lo, int(math.floor(value))))
    if n % 2 == 0:
        n = n + 1 if n < hi else n - 1
    return n


def grid_dimensions(
    viewport_w: float,
    viewport_h: float,
    font_px: float,
    params: AestheticParams = DEFAULT_PARAMS,
) -> GridDimensions:
    """Character grid that fits the viewport for a monospace font of ``font_px``.

    Both sides are forced odd so the figure has an exact centre cell.
    Degenerate metrics fall back to the lower bounds.
    """
    fx, fy = params.viewport_fraction
    cell_w = font_px * params.font_cell_width
    cell_h = font_px
    cols_raw = fx * viewport_w / cell_w if cell_w > 0 else 0.0
    rows_raw = fy * viewport_h / cell_h if cell_h > 0 else 0.0
    return GridDimensions(
        cols=_clamp_odd(cols_raw, *params.cols_range),
        rows=_clamp_odd(rows_raw, *params.rows_range),
    )


def cell_coordinates(grid: GridDimensions, bob: float = 0.0, params: AestheticParams = DEFAULT_PARAMS):
    """Integer cell indices and butterfly-local coordinates for every cell.

    Returns ``(c, r, wx, wy)`` arrays of shape ``(rows, cols)``.
    """
    r, c = np.mgrid[0 : grid.rows, 0 : grid.cols]
    wx = (c - (grid.cols - 1) / 2) * params.cell_aspect
    wy = r - (grid.rows - 1) / 2 - bob
    return c, r, wx, wy


def density_grid(time_ms: float, grid: GridDimensions, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    state = frame_state(time_ms, params)
    c, r, wx, wy = cell_coordinates(grid, state.bob, params)
    return shade(wx, wy, c, r, state.t, params)


def palette_index(density, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    n = len(params.palette)
    return np.minimum(n - 1, np.floor(np.asarray(density) * n)).astype(int)


def render_frame(time_ms: float, grid: GridDimensions, params: AestheticParams = DEFAULT_PARAMS) -> str:
    idx = palette_index(density_grid(time_ms, grid, params), params)
    ramp = params.palette
    return "\n".join("".join(ramp[i] for i in row) for row in idx)
