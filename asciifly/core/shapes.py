from __future__ import annotations

import numpy as np

from .params import DEFAULT_PARAMS, AestheticParams, WingSpec


def ellipse_distance(px, py, wing: WingSpec) -> np.ndarray:
    """Normalised distance of (px, py) inside a tilted, scalloped ellipse.

    Values below 1 are inside. The scallop term rescales the implicit radius
    by ``1 + depth * sin(n * theta)`` where theta is the angle in the
    ellipse's own normalised frame.
    """
    c, s = np.cos(wing.tilt), np.sin(wing.tilt)
    dx = np.asarray(px, dtype=np.float64) - wing.cx
    dy = np.asarray(py, dtype=np.float64) - wing.cy
    tx = c * dx + s * dy
    ty = -s * dx + c * dy
    d = (tx / wing.rx) ** 2 + (ty / wing.ry) ** 2
    if wing.scallops > 0:
        theta = np.arctan2(ty / wing.ry, tx / wing.rx)
        scallop = 1.0 + wing.scallop_depth * np.sin(wing.scallops * theta)
        d = d / (scallop * scallop)
    return d


def wing_density(wx, wy, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    out = np.zeros(np.broadcast(np.asarray(wx), np.asarray(wy)).shape)
    for wing in params.wings:
        d = ellipse_distance(wx, wy, wing)
        inside = d < 1.0
        v = np.where(inside, np.power(np.where(inside, 1.0 - d, 0.0), params.wing_falloff), 0.0)
        # overlapping wings: the denser one wins
        out = np.maximum(out, v)
    return out


def body_density(wx, wy, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    wx = np.asarray(wx, dtype=np.float64)
    wy = np.asarray(wy, dtype=np.float64)
    d = wx * wx + (wy * wy) / (params.body_ry * params.body_ry)
    inside = d < 1.0
    return np.where(inside, np.power(np.where(inside, 1.0 - d, 0.0), params.body_falloff) * params.body_peak, 0.0)


def antenna_samples(params: AestheticParams = DEFAULT_PARAMS):
    """Sample points of the right antenna: (ax, ay, thickness) arrays."""
    t = np.linspace(0.0, 1.0, params.antenna_samples)
    bx, by = params.antenna_base
    ax = bx + params.antenna_curve * t * t
    ay = by - params.antenna_rise * t
    th = params.antenna_thickness + params.antenna_club * t * t
    return ax, ay, th


def antenna_density(wx, wy, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    wx = np.asarray(wx, dtype=np.float64)[..., np.newaxis]
    wy = np.asarray(wy, dtype=np.float64)[..., np.newaxis]
    ax, ay, th = antenna_samples(params)
    out = np.zeros(np.broadcast(wx, wy).shape[:-1])
    for sign in (1.0, -1.0):
        dist = np.hypot(wx - sign * ax, wy - ay)
        v = np.where(dist < th, (th - dist) / th * params.antenna_peak, 0.0)
        out = np.maximum(out, v.max(axis=-1))
    return out
