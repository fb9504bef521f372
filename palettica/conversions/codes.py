"""Text color codes: hex, CSS rgb()/rgba() and hsl() strings."""

import re
from typing import Optional, Tuple

from .numbers import clamp01, round_half_up
from .to_hsl import unit_rgb_to_hsl
from ..types.format_type import FormatType, max_non_hue

_HEX_DIGITS = "0123456789ABCDEF"
_HEX_PATTERN = re.compile(r"^[0-9A-F]+$")


def to_byte(c: float) -> int:
    """Clamp a channel to [0, 1] and scale it to 0..255, rounding halves up."""
    return round_half_up(clamp01(c) * max_non_hue[FormatType.INT])


def sanitize_hex_input(text: str) -> str:
    """Uppercase ``text``, keep only hex digits and truncate to eight of them."""
    filtered = "".join(ch for ch in text.upper() if ch in _HEX_DIGITS)
    return filtered[:8]


def parse_hex(text: str) -> Tuple[float, float, float, float]:
    """
    Parse ``RRGGBB`` or ``RRGGBBAA`` (optional leading ``#``) into unit channels.

    Raises:
        ValueError: if the text is not six or eight hex digits.
    """
    cleaned = text.strip().replace("#", "").upper()
    if len(cleaned) not in (6, 8) or not _HEX_PATTERN.match(cleaned):
        raise ValueError(f"Invalid hex color: {text!r}")

    value = int(cleaned, 16)
    if len(cleaned) == 6:
        r = (value >> 16) & 0xFF
        g = (value >> 8) & 0xFF
        b = value & 0xFF
        a = 255
    else:
        r = (value >> 24) & 0xFF
        g = (value >> 16) & 0xFF
        b = (value >> 8) & 0xFF
        a = value & 0xFF

    maxval = max_non_hue[FormatType.INT]
    return r / maxval, g / maxval, b / maxval, a / maxval


def format_hex(r: float, g: float, b: float, a: Optional[float] = None) -> str:
    """``#RRGGBB``, or ``#RRGGBBAA`` when ``a`` is given."""
    code = f"#{to_byte(r):02X}{to_byte(g):02X}{to_byte(b):02X}"
    if a is not None:
        code += f"{to_byte(a):02X}"
    return code


def format_rgb(r: float, g: float, b: float) -> str:
    return f"rgb({to_byte(r)}, {to_byte(g)}, {to_byte(b)})"


def format_rgba(r: float, g: float, b: float, a: float) -> str:
    # alpha stays a unit float, as CSS expects
    return f"rgba({to_byte(r)}, {to_byte(g)}, {to_byte(b)}, {clamp01(a)})"


def format_hsl(r: float, g: float, b: float) -> str:
    """``hsl(H, S%, L%)`` with whole degrees and percentages."""
    h, s, l = unit_rgb_to_hsl(clamp01(r), clamp01(g), clamp01(b))
    return f"hsl({round_half_up(h * 360)}, {round_half_up(s * 100)}%, {round_half_up(l * 100)}%)"
