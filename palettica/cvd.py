"""
Color vision deficiency (CVD) simulation.

Colors are decoded to linear RGB, passed through a fixed 3×3 matrix for the
selected deficiency (Brettel, Viénot and Mollon style approximations), encoded
back to sRGB and clamped. Achromatopsia collapses the color to its BT.709
luminance instead of using a matrix. Alpha is never touched.

``CVDMode.OFF`` is an exact identity: the input is returned without a gamma
round trip, so repeated no-op simulation never drifts.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Union

import numpy as np

from .colors.color_value import ColorValue
from .conversions.gamma import (
    LUMINANCE_WEIGHTS,
    weighted_luminance,
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)
from .conversions.numbers import clamp01
from .types.color_types import RGBTriple, check_channel_shape

Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]


class CVDMode(str, Enum):
    OFF = "off"
    PROTANOPIA = "protanopia"        # red-blind, L cones
    DEUTERANOPIA = "deuteranopia"    # green-blind, M cones
    TRITANOPIA = "tritanopia"        # blue-blind, S cones
    ACHROMATOPSIA = "achromatopsia"  # monochromacy

    @property
    def label(self) -> str:
        return _LABELS[self][0]

    @property
    def short_label(self) -> str:
        return _LABELS[self][1]

    @property
    def description(self) -> str:
        return _LABELS[self][2]


_LABELS: Dict[CVDMode, Tuple[str, str, str]] = {
    CVDMode.OFF: (
        "Off",
        "Normal Vision",
        "No simulation active",
    ),
    CVDMode.PROTANOPIA: (
        "Protanopia (Red-blind)",
        "Protanopia",
        "Difficulty distinguishing red from green; red appears darker",
    ),
    CVDMode.DEUTERANOPIA: (
        "Deuteranopia (Green-blind)",
        "Deuteranopia",
        "Difficulty distinguishing green from red; most common form",
    ),
    CVDMode.TRITANOPIA: (
        "Tritanopia (Blue-blind)",
        "Tritanopia",
        "Difficulty distinguishing blue from yellow; rare form",
    ),
    CVDMode.ACHROMATOPSIA: (
        "Achromatopsia (No Color)",
        "Achromatopsia",
        "Complete color blindness; sees only in grayscale (monochromacy)",
    ),
}

# Rows produce simulated (R, G, B) from linear (R, G, B)
CVD_MATRICES: Dict[CVDMode, Matrix3] = {
    CVDMode.PROTANOPIA: (
        (0.56667, 0.43333, 0.0),
        (0.55833, 0.44167, 0.0),
        (0.0, 0.24167, 0.75833),
    ),
    CVDMode.DEUTERANOPIA: (
        (0.625, 0.375, 0.0),
        (0.70, 0.30, 0.0),
        (0.0, 0.30, 0.70),
    ),
    CVDMode.TRITANOPIA: (
        (0.95, 0.05, 0.0),
        (0.0, 0.43333, 0.56667),
        (0.0, 0.475, 0.525),
    ),
}

CVDModeLike = Union[CVDMode, str]


def _as_mode(mode: CVDModeLike) -> CVDMode:
    try:
        return CVDMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown CVD mode: {mode!r}; expected one of {[m.value for m in CVDMode]}"
        ) from None


def _transform_linear(r_lin: float, g_lin: float, b_lin: float, mode: CVDMode) -> RGBTriple:
    if mode is CVDMode.ACHROMATOPSIA:
        y = weighted_luminance(r_lin, g_lin, b_lin)
        return y, y, y

    row_r, row_g, row_b = CVD_MATRICES[mode]
    return (
        row_r[0] * r_lin + row_r[1] * g_lin + row_r[2] * b_lin,
        row_g[0] * r_lin + row_g[1] * g_lin + row_g[2] * b_lin,
        row_b[0] * r_lin + row_b[1] * g_lin + row_b[2] * b_lin,
    )


def simulate_cvd_rgb(r: float, g: float, b: float, mode: CVDModeLike) -> RGBTriple:
    """
    Simulate ``mode`` on bare sRGB channels.

    Args:
        r, g, b: sRGB channels in [0, 1]
        mode: CVDMode member or its string value

    Returns:
        Simulated (r, g, b) clamped to [0, 1]; the inputs unchanged for OFF.

    Raises:
        ValueError: if ``mode`` is not a known CVD mode.
    """
    mode = _as_mode(mode)
    if mode is CVDMode.OFF:
        return r, g, b

    r_sim, g_sim, b_sim = _transform_linear(
        srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b), mode
    )
    return (
        clamp01(linear_to_srgb(r_sim)),
        clamp01(linear_to_srgb(g_sim)),
        clamp01(linear_to_srgb(b_sim)),
    )


def simulate_cvd(color: ColorValue, mode: CVDModeLike) -> ColorValue:
    """
    Return how ``color`` appears under ``mode``; alpha is passed through.

    For ``CVDMode.OFF`` the very same object is returned.
    """
    mode = _as_mode(mode)
    if mode is CVDMode.OFF:
        return color

    r, g, b = simulate_cvd_rgb(color.red, color.green, color.blue, mode)
    return ColorValue(r, g, b, clamp01(color.alpha))


def simulate_cvd_many(colors: Iterable[ColorValue], mode: CVDModeLike) -> List[ColorValue]:
    """Apply :func:`simulate_cvd` to every color, preserving order."""
    mode = _as_mode(mode)
    if mode is CVDMode.OFF:
        return list(colors)
    return [simulate_cvd(color, mode) for color in colors]


def cvd_matrix(mode: CVDModeLike) -> np.ndarray:
    """
    The linear-RGB transform of ``mode`` as a 3×3 array.

    OFF is the identity and achromatopsia repeats the luminance weights on
    every row, so all modes share one representation.
    """
    mode = _as_mode(mode)
    if mode is CVDMode.OFF:
        return np.eye(3)
    if mode is CVDMode.ACHROMATOPSIA:
        return np.tile(np.asarray(LUMINANCE_WEIGHTS, dtype=float), (3, 1))
    return np.asarray(CVD_MATRICES[mode], dtype=float)


def np_simulate_cvd(colors: np.ndarray, mode: CVDModeLike) -> np.ndarray:
    """
    Vectorized: simulate ``mode`` for an array of colors.

    Args:
        colors: array of shape (..., 3) or (..., 4) in sRGB
        mode: CVDMode member or its string value

    Returns:
        array of the same shape, RGB clamped to [0, 1], alpha column only clamped.
        For OFF the input array itself is returned.
    """
    mode = _as_mode(mode)
    if mode is CVDMode.OFF:
        return colors

    arr = np.asarray(colors, dtype=float)
    check_channel_shape(arr)

    linear = np_srgb_to_linear(arr[..., :3])
    simulated = linear @ cvd_matrix(mode).T
    rgb = np.clip(np_linear_to_srgb(simulated), 0.0, 1.0)

    if arr.shape[-1] == 4:
        return np.concatenate([rgb, np.clip(arr[..., 3:], 0.0, 1.0)], axis=-1)
    return rgb
