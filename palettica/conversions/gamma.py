"""sRGB transfer function and its inverse (IEC 61966-2-1)."""

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTriple

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# ITU-R BT.709
LUMINANCE_WEIGHTS: RGBTriple = (0.2126, 0.7152, 0.0722)


def srgb_to_linear(c: float) -> float:
    """
    Decode one gamma-encoded sRGB channel to linear light.

    Args:
        c: sRGB channel in [0, 1]

    Returns:
        Linear channel value. Never applied to alpha.
    """
    if c <= SRGB_DECODE_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """
    Encode one linear channel back to sRGB.

    The result is not clamped; callers clamp after the transform.
    """
    if c <= SRGB_ENCODE_THRESHOLD:
        return c * 12.92
    return 1.055 * c ** (1.0 / SRGB_GAMMA) - 0.055


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: decode sRGB channels of any shape to linear light."""
    c = np.asarray(c, dtype=float)
    # abs() keeps the discarded branch of np.where free of complex powers
    high = ((np.abs(c) + 0.055) / 1.055) ** SRGB_GAMMA
    return np.where(c <= SRGB_DECODE_THRESHOLD, c / 12.92, high)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: encode linear channels of any shape to sRGB (unclamped)."""
    c = np.asarray(c, dtype=float)
    high = 1.055 * np.abs(c) ** (1.0 / SRGB_GAMMA) - 0.055
    return np.where(c <= SRGB_ENCODE_THRESHOLD, c * 12.92, high)


def weighted_luminance(r: float, g: float, b: float) -> float:
    """BT.709 weighted sum of three channels, linear or encoded alike."""
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b
