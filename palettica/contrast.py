"""Legible text color selection and WCAG contrast helpers."""

from .colors.color_value import ColorValue, BLACK, WHITE
from .conversions.gamma import weighted_luminance
from .conversions.numbers import clamp01

TEXT_LUMINANCE_THRESHOLD = 0.5

# WCAG 2.x linearization threshold (older than the IEC 0.04045)
WCAG_DECODE_THRESHOLD = 0.03928


def perceived_luminance(color: ColorValue) -> float:
    """BT.709 weighted sum of the gamma-encoded (not linearized) channels."""
    return weighted_luminance(color.red, color.green, color.blue)


def ideal_text_color(background: ColorValue) -> ColorValue:
    """
    Pick black or white text for ``background``.

    Black when the perceived luminance exceeds 0.5, white otherwise. This is
    a cheap approximation on sRGB channels, not a WCAG contrast comparison,
    and alpha is ignored: composite translucent colors first.
    """
    if perceived_luminance(background) > TEXT_LUMINANCE_THRESHOLD:
        return BLACK
    return WHITE


def _wcag_channel(c: float) -> float:
    return c / 12.92 if c <= WCAG_DECODE_THRESHOLD else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorValue) -> float:
    """WCAG relative luminance: 0 for black, 1 for white."""
    return weighted_luminance(
        _wcag_channel(color.red),
        _wcag_channel(color.green),
        _wcag_channel(color.blue),
    )


def contrast_ratio(first: ColorValue, second: ColorValue) -> float:
    """WCAG contrast ratio between two colors, from 1.0 to 21.0."""
    l1 = clamp01(relative_luminance(first))
    l2 = clamp01(relative_luminance(second))
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
