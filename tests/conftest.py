"""Shared test fixtures."""

from __future__ import annotations

import pytest

from asciifly.core.params import DEFAULT_PARAMS
from asciifly.core.raster import GridDimensions


@pytest.fixture
def params():
    return DEFAULT_PARAMS


@pytest.fixture
def small_grid() -> GridDimensions:
    return GridDimensions(cols=41, rows=25)
