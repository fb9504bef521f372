from __future__ import annotations
import math
from typing import Any, Dict, Iterator, Tuple, Union

import numpy as np
from numpy import ndarray

from ..conversions.numbers import clamp01, round_half_up
from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_rgb import hsl_to_unit_rgb
from ..conversions.codes import (
    parse_hex,
    format_hex,
    format_rgb,
    format_rgba,
    format_hsl,
)
from ..types.color_types import HSLTriple, RGBTriple, RGBAQuad, Scalar
from ..types.format_type import FormatType, max_non_hue, format_classes


class ColorValue:
    """
    An sRGB color with straight alpha, every channel a float nominally in [0, 1].

    Instances are frozen after ``__init__``. The constructor keeps the channels
    exactly as given; use :meth:`clamped` when the input may be out of range.
    """

    __slots__ = ('red', 'green', 'blue', 'alpha', '_is_frozen')

    red: float
    green: float
    blue: float
    alpha: float

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> None:
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)
        self.alpha = float(alpha)

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def clamped(cls, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> ColorValue:
        """Build a color with every channel clamped to [0, 1]."""
        return cls(clamp01(red), clamp01(green), clamp01(blue), clamp01(alpha))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: Scalar = 1.0) -> ColorValue:
        """Build a color from a hue fraction, saturation and lightness."""
        r, g, b = hsl_to_unit_rgb(h, s, l)
        return cls.clamped(r, g, b, alpha)

    @classmethod
    def from_hex(cls, text: str) -> ColorValue:
        """
        Parse ``#RRGGBB`` or ``#RRGGBBAA``. The ``#`` is optional.

        Raises:
            ValueError: for anything other than six or eight hex digits.
        """
        return cls(*parse_hex(text))

    @classmethod
    def from_array(cls, arr: Union[ndarray, Tuple[Scalar, ...]]) -> ColorValue:
        """Build a color from a 3- or 4-element array (alpha defaults to 1)."""
        values = np.asarray(arr, dtype=float)
        if values.shape not in ((3,), (4,)):
            raise ValueError(f"ColorValue expects 3 or 4 channels, got shape {values.shape}")
        return cls(*values.tolist())

    @classmethod
    def from_format(cls, value: Tuple[Scalar, ...], fmt: FormatType = FormatType.INT) -> ColorValue:
        """Build a color from channels expressed in ``fmt`` (e.g. 0-255 integers)."""
        if len(value) not in (3, 4):
            raise ValueError(f"ColorValue expects 3 or 4 channels, got {len(value)}")
        maxval = max_non_hue[FormatType(fmt)]
        return cls.clamped(*(v / maxval for v in value))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBAQuad:
        return self.red, self.green, self.blue, self.alpha

    @property
    def rgb(self) -> RGBTriple:
        return self.red, self.green, self.blue

    @property
    def is_finite(self) -> bool:
        """True when no channel is NaN or infinite."""
        return all(math.isfinite(c) for c in self.value)

    @property
    def in_gamut(self) -> bool:
        """True when every channel lies in [0, 1]."""
        return all(0.0 <= c <= 1.0 for c in self.value)

    @property
    def hex_string(self) -> str:
        return format_hex(*self.rgb)

    @property
    def hex_with_alpha_string(self) -> str:
        return format_hex(*self.value)

    @property
    def rgb_string(self) -> str:
        return format_rgb(*self.rgb)

    @property
    def rgba_string(self) -> str:
        return format_rgba(*self.value)

    @property
    def hsl_string(self) -> str:
        return format_hsl(*self.rgb)

    # ------------------ DERIVED VALUES ------------------
    def clamp(self) -> ColorValue:
        """Return this color with every channel forced into [0, 1]."""
        if self.in_gamut:
            return self
        return ColorValue.clamped(*self.value)

    def with_alpha(self, alpha: Scalar) -> ColorValue:
        """Return a copy with a different (clamped) alpha."""
        return ColorValue(self.red, self.green, self.blue, clamp01(alpha))

    def validate(self) -> ColorValue:
        """
        Check the host-side precondition that every channel is finite.

        Raises:
            ValueError: if a channel is NaN or infinite.
        """
        if not self.is_finite:
            raise ValueError(f"{self!r} has non-finite channels")
        return self

    def to_hsl(self) -> HSLTriple:
        """Return ``(h, s, l)``; hue is a fraction of a turn, alpha is dropped."""
        return unit_rgb_to_hsl(self.red, self.green, self.blue)

    def to_array(self) -> ndarray:
        return np.array(self.value, dtype=float)

    def to_format(self, fmt: FormatType = FormatType.INT) -> Tuple[Scalar, ...]:
        """Express the four channels in ``fmt``: 0-255 ints, unit floats or percentages."""
        fmt = FormatType(fmt)
        maxval = max_non_hue[fmt]
        if format_classes[fmt] is int:
            return tuple(round_half_up(c * maxval) for c in self.value)
        return tuple(c * maxval for c in self.value)

    def as_dict(self) -> Dict[str, Any]:
        """Export dictionary with every color code the host displays."""
        return {
            "hex": self.hex_string,
            "hexWithAlpha": self.hex_with_alpha_string,
            "rgb": self.rgb_string,
            "rgba": self.rgba_string,
            "hsl": self.hsl_string,
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "alpha": self.alpha,
        }

    # ------------------ PROTOCOL ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return (
            f"ColorValue(red={self.red!r}, green={self.green!r}, "
            f"blue={self.blue!r}, alpha={self.alpha!r})"
        )


BLACK = ColorValue(0.0, 0.0, 0.0, 1.0)
WHITE = ColorValue(1.0, 1.0, 1.0, 1.0)
CLEAR = ColorValue(0.0, 0.0, 0.0, 0.0)
