import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTriple


def unit_rgb_to_hsl(r: float, g: float, b: float) -> HSLTriple:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,1), saturation [0,1], lightness [0,1]).
        Hue is a fraction of a full turn, not degrees.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # Achromatic: hue is undefined, report 0 before dividing by delta
    if delta == 0:
        return 0.0, 0.0, lightness

    # Zero only for out-of-range channels (lightness exactly 0 or 1)
    denominator = 1 - abs(2 * lightness - 1)
    saturation = delta / denominator if denominator != 0 else 0.0

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return (hue / 6) % 1.0, saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,1), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    mask = delta > 0
    denominator = 1 - np.abs(2 * lightness - 1)
    mask_s = mask & (denominator != 0)
    saturation = np.zeros(out_shape)
    saturation[mask_s] = delta[mask_s] / denominator[mask_s]

    hue = np.zeros(out_shape)
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4

    return np.stack([(hue / 6) % 1.0, saturation, lightness], axis=-1)
