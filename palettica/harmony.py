"""
Color harmonies by hue rotation in HSL space.

Every derived color keeps the base saturation, lightness and alpha; only the
hue moves, by fixed fractions of a turn. Offsets are listed in presentation
order and results are returned in that same order.
"""

from __future__ import annotations
import warnings
from enum import Enum
from typing import Dict, List, Tuple, Union

import numpy as np
from boundednumbers.functions import cyclic_wrap_float

from .colors.color_value import ColorValue
from .conversions.to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .conversions.to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb
from .types.color_types import check_channel_shape


class HarmonyKind(str, Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split_complementary"
    TETRADIC = "tetradic"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def offsets(self) -> Tuple[float, ...]:
        return HUE_OFFSETS[self]


_LABELS = {
    HarmonyKind.COMPLEMENTARY: "Complementary",
    HarmonyKind.ANALOGOUS: "Analogous",
    HarmonyKind.TRIADIC: "Triadic",
    HarmonyKind.SPLIT_COMPLEMENTARY: "Split-Comp",
    HarmonyKind.TETRADIC: "Tetradic",
}

# Fractions of a turn (30° == 1/12)
HUE_OFFSETS: Dict[HarmonyKind, Tuple[float, ...]] = {
    HarmonyKind.COMPLEMENTARY: (0.5,),
    HarmonyKind.ANALOGOUS: (-1 / 12, 1 / 12),
    HarmonyKind.TRIADIC: (1 / 3, 2 / 3),
    HarmonyKind.SPLIT_COMPLEMENTARY: (0.5 - 1 / 12, 0.5 + 1 / 12),
    HarmonyKind.TETRADIC: (0.25, 0.5, 0.75),
}

HarmonyKindLike = Union[HarmonyKind, str]


def _as_kind(kind: HarmonyKindLike) -> HarmonyKind:
    try:
        return HarmonyKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown harmony kind: {kind!r}; expected one of {[k.value for k in HarmonyKind]}"
        ) from None


def rotate_hue(color: ColorValue, offset: float) -> ColorValue:
    """
    Rotate the hue of ``color`` by ``offset`` turns.

    Saturation and lightness are held fixed and alpha is copied verbatim.
    Gray input stays gray: its hue is 0 by convention and rotating it
    changes nothing visible.
    """
    h, s, l = unit_rgb_to_hsl(color.red, color.green, color.blue)
    return _at_hue(h, s, l, offset, color.alpha)


def _at_hue(h: float, s: float, l: float, offset: float, alpha: float) -> ColorValue:
    new_hue = cyclic_wrap_float(h + offset, 0.0, 1.0)
    r, g, b = hsl_to_unit_rgb(new_hue, s, l)
    return ColorValue.clamped(r, g, b, alpha)


def harmonies(base: ColorValue, kind: HarmonyKindLike) -> List[ColorValue]:
    """
    Derive the colors of one harmony from ``base``.

    Args:
        base: Base color
        kind: HarmonyKind member or its string value

    Returns:
        List of derived colors, one per offset in ``HUE_OFFSETS[kind]``, in order.
        The base color itself is not included.

    Raises:
        ValueError: if ``kind`` is not a known harmony.
    """
    offsets = HUE_OFFSETS[_as_kind(kind)]
    h, s, l = unit_rgb_to_hsl(base.red, base.green, base.blue)
    return [_at_hue(h, s, l, offset, base.alpha) for offset in offsets]


def all_harmonies(base: ColorValue) -> Dict[HarmonyKind, List[ColorValue]]:
    """Every harmony of ``base`` keyed by kind, in enum order."""
    return {kind: harmonies(base, kind) for kind in HarmonyKind}


def complementary_color(base: ColorValue) -> ColorValue:
    """180° opposite on the color wheel."""
    return harmonies(base, HarmonyKind.COMPLEMENTARY)[0]


def analogous_colors(base: ColorValue) -> List[ColorValue]:
    """±30° from base."""
    return harmonies(base, HarmonyKind.ANALOGOUS)


def triadic_colors(base: ColorValue) -> List[ColorValue]:
    return harmonies(base, HarmonyKind.TRIADIC)


def split_complementary_colors(base: ColorValue) -> List[ColorValue]:
    return harmonies(base, HarmonyKind.SPLIT_COMPLEMENTARY)


def tetradic_colors(base: ColorValue) -> List[ColorValue]:
    return harmonies(base, HarmonyKind.TETRADIC)


def harmonious_colors(base: ColorValue) -> List[ColorValue]:
    """
    Deprecated: Use analogous_colors instead.
    """
    warnings.warn(
        "harmonious_colors is deprecated. Use palettica.harmony.analogous_colors instead.",
        DeprecationWarning,
        stacklevel=2
    )
    return analogous_colors(base)


def np_harmonies(colors: np.ndarray, kind: HarmonyKindLike) -> np.ndarray:
    """
    Vectorized: harmonies for a batch of colors.

    Args:
        colors: array of shape (..., 3) or (..., 4)
        kind: HarmonyKind member or its string value

    Returns:
        array of shape (..., n, C) where n is the number of offsets for ``kind``
        and C the input channel count. Alpha is copied through.
    """
    offsets = np.asarray(HUE_OFFSETS[_as_kind(kind)], dtype=float)
    colors = np.asarray(colors, dtype=float)
    check_channel_shape(colors)

    hsl = np_unit_rgb_to_hsl(colors[..., 0], colors[..., 1], colors[..., 2])
    h = hsl[..., 0, None] + offsets
    s = np.broadcast_to(hsl[..., 1, None], h.shape)
    l = np.broadcast_to(hsl[..., 2, None], h.shape)

    rgb = np.clip(np_hsl_to_unit_rgb(h % 1.0, s, l), 0.0, 1.0)
    if colors.shape[-1] == 4:
        alpha = np.broadcast_to(np.clip(colors[..., 3, None, None], 0.0, 1.0), rgb.shape[:-1] + (1,))
        return np.concatenate([rgb, alpha], axis=-1)
    return rgb
