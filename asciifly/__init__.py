"""Animated ASCII butterfly rendered from a procedural density field."""

from asciifly.core.loop import FrameLoop
from asciifly.core.params import DEFAULT_PARAMS, PALETTE, AestheticParams, WingSpec
from asciifly.core.raster import GridDimensions, grid_dimensions, render_frame

__all__ = [
    "AestheticParams",
    "DEFAULT_PARAMS",
    "FrameLoop",
    "GridDimensions",
    "PALETTE",
    "WingSpec",
    "grid_dimensions",
    "render_frame",
]

__version__ = "0.1.0"
