"""
Palettica Color Space Conversions
=================================

Gamma and cylindrical transforms every higher-level operation builds on,
with both scalar and vectorized (numpy) implementations.

Features
--------
- sRGB ↔ linear RGB (IEC 61966-2-1 transfer function)
- RGB ↔ HSL, hue as a fraction of a turn in [0, 1)
- Scalar functions for single colors, ``np_`` functions for batches
- Hex and CSS color codes

Conversion Functions
-------------------

Gamma:
    srgb_to_linear(c) / np_srgb_to_linear(c)
        Decode one sRGB channel (never alpha)
    linear_to_srgb(c) / np_linear_to_srgb(c)
        Encode one linear channel; not clamped

RGB ↔ HSL:
    unit_rgb_to_hsl(r, g, b) / np_unit_rgb_to_hsl(r, g, b)
        Achromatic input (max == min) yields h = 0, s = 0
    hsl_to_unit_rgb(h, s, l) / np_hsl_to_unit_rgb(h, s, l)
        Hue wraps modulo 1, so rotated hues like 1.08 or -0.2 are valid

High-Level API
-------------
    to_hsl(color), from_hsl(h, s, l, alpha=1.0)
        ColorValue boundary
    np_rgba_to_hsla(colors), np_hsla_to_rgba(colors)
        ``(..., 3|4)`` arrays, alpha copied through
    hue_to_degrees(h), degrees_to_hue(deg)
        The only place degrees appear

Notes
-----
These are pure, total functions over finite floats. NaN input propagates
to NaN output; validating host input is the caller's job.

Examples
--------
>>> from palettica.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(1.0 / 3.0, 1.0, 0.5)
(0.0, 1.0, 0.0)
"""

# Gamma
from .gamma import (
    LUMINANCE_WEIGHTS,
    weighted_luminance,
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)

# RGB → HSL
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# HSL → RGB
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb

# Codes
from .codes import (
    parse_hex,
    format_hex,
    format_rgb,
    format_rgba,
    format_hsl,
    sanitize_hex_input,
)

from .numbers import clamp01, round_half_up, hue_to_degrees, degrees_to_hue

# High-level API
from .wrapper import to_hsl, from_hsl, np_rgba_to_hsla, np_hsla_to_rgba

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # Gamma
    'LUMINANCE_WEIGHTS',
    'weighted_luminance',
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # RGB ↔ HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # Codes
    'parse_hex',
    'format_hex',
    'format_rgb',
    'format_rgba',
    'format_hsl',
    'sanitize_hex_input',

    # Numbers
    'clamp01',
    'round_half_up',
    'hue_to_degrees',
    'degrees_to_hue',

    # High-level API
    'to_hsl',
    'from_hsl',
    'np_rgba_to_hsla',
    'np_hsla_to_rgba',

    # Types
    'FormatType',
]
