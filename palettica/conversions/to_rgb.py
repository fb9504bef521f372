import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTriple


def hsl_to_unit_rgb(h: float, s: float, l: float) -> RGBTriple:
    """
    Convert HSL to RGB with the chroma / hue-sector algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        h: Hue as a fraction of a turn. Values outside [0, 1) wrap,
           so rotated hues such as 1.08 or -0.2 are accepted.
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h6 = (h % 1.0) * 6
    if math.isnan(h6):
        return h6, h6, h6

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs(h6 % 2 - 1))
    m = l - chroma / 2

    hue_section = int(h6) % 6

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue as a fraction of a turn (wrapped)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 1.0
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    h6 = h * 6
    chroma = (1 - np.abs(2 * l - 1)) * s
    x = chroma * (1 - np.abs(h6 % 2 - 1))
    m = l - chroma / 2
    zero = np.zeros(out_shape)

    hue_section = np.floor(np.nan_to_num(h6)).astype(int) % 6

    r = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2,
         hue_section == 3, hue_section == 4],
        [chroma, x, zero, zero, x],
        default=chroma,
    )
    g = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2,
         hue_section == 3, hue_section == 4],
        [x, chroma, chroma, x, zero],
        default=zero,
    )
    b = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2,
         hue_section == 3, hue_section == 4],
        [zero, zero, x, chroma, chroma],
        default=x,
    )

    rgb = np.stack([r + m, g + m, b + m], axis=-1)
    rgb[np.isnan(h6)] = np.nan
    return rgb
