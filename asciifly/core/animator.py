from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .params import DEFAULT_PARAMS, AestheticParams
from .shapes import antenna_density, body_density, wing_density


@dataclass(frozen=True)
class FrameState:
    t: float
    bob: float


def frame_state(time_ms: float, params: AestheticParams = DEFAULT_PARAMS) -> FrameState:
    t = time_ms * 0.001
    return FrameState(t=t, bob=params.bob_amplitude * math.sin(t * params.bob_speed))


def wing_rotation(wx, wy, t: float, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    """Apparent rotation angle of the wing surface under each point.

    Left and right wings flap at slightly different rates, a slow ripple runs
    down the wing height, and the angle grows from zero at the body to its
    full value at ``rotation_reach``.
    """
    wx = np.asarray(wx, dtype=np.float64)
    wy = np.asarray(wy, dtype=np.float64)
    right = wx >= 0
    freq = np.where(right, params.flap_freq[0], params.flap_freq[1])
    phase = np.where(right, params.flap_phase[0], params.flap_phase[1])
    ripple = params.ripple_amplitude * np.sin(wy * params.ripple_freq + t * params.ripple_speed)
    reach = np.minimum(np.abs(wx) / params.rotation_reach, 1.0)
    return (params.flap_amplitude + ripple) * np.sin(t * freq + phase) * reach


def foreshortened_wing_density(wx, wy, rot, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    wx = np.asarray(wx, dtype=np.float64)
    cos_r = np.cos(np.asarray(rot, dtype=np.float64))
    facing = np.abs(cos_r) > params.edge_on_cos
    # inverse projection back to the unrotated wing; edge-on cells are skipped
    orig_wx = np.divide(wx, cos_r, out=np.zeros(np.broadcast(wx, cos_r).shape), where=facing)
    wd = wing_density(orig_wx, wy, params) * np.abs(cos_r)
    return np.where(facing, wd, 0.0)


def figure_density(wx, wy, t: float, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    """Combined body, antenna and animated wing density before shading."""
    density = np.maximum(body_density(wx, wy, params), antenna_density(wx, wy, params))
    rot = wing_rotation(wx, wy, t, params)
    return np.maximum(density, foreshortened_wing_density(wx, wy, rot, params))


def breathing(dist, t: float, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    return params.breath_base + params.breath_amplitude * np.sin(t * params.breath_speed + np.asarray(dist) * params.breath_spread)


def texture_noise(c, r, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    kc, kr, k0 = params.noise_weights
    m = params.noise_modulus
    h = ((np.asarray(c) * kc + np.asarray(r) * kr + k0) % m) / m
    return (h - 0.5) * params.noise_scale


def shade(wx, wy, c, r, t: float, params: AestheticParams = DEFAULT_PARAMS) -> np.ndarray:
    # order matters: combine, breathe, add noise, clamp
    density = figure_density(wx, wy, t, params)
    density = density * breathing(np.abs(wx), t, params)
    return np.clip(density + texture_noise(c, r, params), 0.0, 1.0)
