"""
Palettica Color Values
======================

The single value type every engine operation consumes and produces.

Features
--------
- Immutable RGBA color (frozen after initialization)
- Channels are plain floats, nominally in [0, 1]
- Hex / CSS color codes, HSL and numpy bridges
- Adapters for host model types exposing ``red/green/blue/alpha``

Usage
-----
>>> from palettica.colors import ColorValue
>>> color = ColorValue.from_hex("#FF8000")
>>> color.rgb_string
'rgb(255, 128, 0)'
>>> color.with_alpha(0.5).hex_with_alpha_string
'#FF800080'
"""

from .color_value import ColorValue, BLACK, WHITE, CLEAR
from .adapters import RGBAComponents, ColorLike, to_color_value, apply_to


__all__ = [
    'ColorValue',
    'BLACK',
    'WHITE',
    'CLEAR',
    'RGBAComponents',
    'ColorLike',
    'to_color_value',
    'apply_to',
]
