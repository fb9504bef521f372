from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_rgb import np_hsl_to_unit_rgb
from ..types.color_types import HSLTriple, Scalar, check_channel_shape

if TYPE_CHECKING:
    from ..colors.color_value import ColorValue


def to_hsl(color: ColorValue) -> HSLTriple:
    """Return ``(h, s, l)`` of ``color``; hue is a fraction of a turn."""
    return unit_rgb_to_hsl(color.red, color.green, color.blue)


def from_hsl(h: float, s: float, l: float, alpha: Scalar = 1.0) -> ColorValue:
    """Inverse of :func:`to_hsl`; channels are clamped to [0, 1]."""
    from ..colors.color_value import ColorValue  # local import to avoid cycles
    return ColorValue.from_hsl(h, s, l, alpha)


def np_rgba_to_hsla(colors: np.ndarray) -> np.ndarray:
    """Vectorized: ``(..., 3|4)`` RGB(A) array to HSL(A); alpha copied through."""
    colors = np.asarray(colors, dtype=float)
    check_channel_shape(colors)
    hsl = np_unit_rgb_to_hsl(colors[..., 0], colors[..., 1], colors[..., 2])
    if colors.shape[-1] == 4:
        return np.concatenate([hsl, colors[..., 3:]], axis=-1)
    return hsl


def np_hsla_to_rgba(colors: np.ndarray) -> np.ndarray:
    """Vectorized: ``(..., 3|4)`` HSL(A) array to clamped RGB(A); alpha copied through."""
    colors = np.asarray(colors, dtype=float)
    check_channel_shape(colors)
    rgb = np.clip(np_hsl_to_unit_rgb(colors[..., 0], colors[..., 1], colors[..., 2]), 0.0, 1.0)
    if colors.shape[-1] == 4:
        return np.concatenate([rgb, np.clip(colors[..., 3:], 0.0, 1.0)], axis=-1)
    return rgb
