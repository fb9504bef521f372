"""Palettica: the color science engine behind palette apps."""

from .colors.color_value import ColorValue, BLACK, WHITE, CLEAR
from .colors.adapters import RGBAComponents, to_color_value, apply_to

from .conversions import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
    np_rgba_to_hsla,
    np_hsla_to_rgba,
    to_hsl,
    from_hsl,
    hue_to_degrees,
    degrees_to_hue,
    parse_hex,
    format_hex,
    FormatType,
)

from .harmony import (
    HarmonyKind,
    HUE_OFFSETS,
    harmonies,
    all_harmonies,
    rotate_hue,
    complementary_color,
    analogous_colors,
    triadic_colors,
    split_complementary_colors,
    tetradic_colors,
    harmonious_colors,
    np_harmonies,
)

from .cvd import (
    CVDMode,
    CVD_MATRICES,
    LUMINANCE_WEIGHTS,
    simulate_cvd,
    simulate_cvd_rgb,
    simulate_cvd_many,
    cvd_matrix,
    np_simulate_cvd,
)

from .contrast import (
    ideal_text_color,
    perceived_luminance,
    relative_luminance,
    contrast_ratio,
)

__version__ = "1.0.0"

__all__ = [
    # Color value
    "ColorValue", "BLACK", "WHITE", "CLEAR",
    "RGBAComponents", "to_color_value", "apply_to",

    # Conversions
    "srgb_to_linear", "linear_to_srgb",
    "np_srgb_to_linear", "np_linear_to_srgb",
    "unit_rgb_to_hsl", "hsl_to_unit_rgb",
    "np_unit_rgb_to_hsl", "np_hsl_to_unit_rgb",
    "np_rgba_to_hsla", "np_hsla_to_rgba",
    "to_hsl", "from_hsl",
    "hue_to_degrees", "degrees_to_hue",
    "parse_hex", "format_hex",
    "FormatType",

    # Harmonies
    "HarmonyKind", "HUE_OFFSETS",
    "harmonies", "all_harmonies", "rotate_hue",
    "complementary_color", "analogous_colors", "triadic_colors",
    "split_complementary_colors", "tetradic_colors",
    "harmonious_colors", "np_harmonies",

    # Color vision deficiency
    "CVDMode", "CVD_MATRICES", "LUMINANCE_WEIGHTS",
    "simulate_cvd", "simulate_cvd_rgb", "simulate_cvd_many",
    "cvd_matrix", "np_simulate_cvd",

    # Contrast
    "ideal_text_color", "perceived_luminance",
    "relative_luminance", "contrast_ratio",

    # Version
    "__version__",
]
