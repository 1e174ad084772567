from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WingSpec:
    """One scalloped ellipse in butterfly-local space (Y grows downward)."""

    cx: float
    cy: float
    rx: float
    ry: float
    tilt: float
    scallops: int = 0
    scallop_depth: float = 0.0

    def __post_init__(self):
        if self.rx <= 0 or self.ry <= 0:
            raise ValueError(f"wing semi-axes must be positive, got rx={self.rx} ry={self.ry}")
        if not isinstance(self.scallops, int) or self.scallops < 0:
            raise ValueError(f"scallop count must be a non-negative int, got {self.scallops!r}")

    @property
    def side(self) -> int:
        return 1 if self.cx >= 0 else -1


# right upper, right lower, left upper, left lower
WINGS: Tuple[WingSpec, ...] = (
    WingSpec(7.0, -3.0, 10.0, 6.5, -0.3, 5, 0.07),
    WingSpec(5.5, 3.5, 7.5, 5.0, 0.4, 4, 0.06),
    WingSpec(-7.0, -3.0, 10.0, 6.5, 0.3, 5, 0.07),
    WingSpec(-5.5, 3.5, 7.5, 5.0, -0.4, 4, 0.06),
)

PALETTE = " .·:o•●"

# glyph width / height at line-height 1
CELL_ASPECT = 0.55


@dataclass(frozen=True)
class AestheticParams:
    wings: Tuple[WingSpec, ...] = WINGS
    palette: str = PALETTE
    cell_aspect: float = CELL_ASPECT

    wing_falloff: float = 0.6

    body_ry: float = 6.0
    body_falloff: float = 0.4
    body_peak: float = 0.85

    antenna_samples: int = 21
    antenna_base: Tuple[float, float] = (0.5, -6.0)
    antenna_curve: float = 2.5
    antenna_rise: float = 4.5
    antenna_thickness: float = 0.35
    antenna_club: float = 0.35
    antenna_peak: float = 0.5

    bob_amplitude: float = 1.2
    bob_speed: float = 0.5

    # (right, left)
    flap_freq: Tuple[float, float] = (0.65, 0.7)
    flap_phase: Tuple[float, float] = (0.0, 0.5)
    flap_amplitude: float = 0.55
    ripple_amplitude: float = 0.15
    ripple_freq: float = 0.25
    ripple_speed: float = 0.4
    rotation_reach: float = 12.0
    edge_on_cos: float = 0.05

    breath_base: float = 0.88
    breath_amplitude: float = 0.12
    breath_speed: float = 0.35
    breath_spread: float = 0.08

    noise_scale: float = 0.1
    noise_weights: Tuple[int, int, int] = (7, 13, 5)
    noise_modulus: int = 17

    cols_range: Tuple[int, int] = (40, 85)
    rows_range: Tuple[int, int] = (25, 42)
    viewport_fraction: Tuple[float, float] = (0.85, 0.5)
    font_cell_width: float = 0.6

    def __post_init__(self):
        if len(self.wings) != 4:
            raise ValueError(f"expected exactly four wings, got {len(self.wings)}")
        if len(self.palette) < 2:
            raise ValueError("palette needs at least an empty and a solid glyph")


DEFAULT_PARAMS = AestheticParams()
