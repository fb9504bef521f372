import math

from boundednumbers.functions import clamp


def clamp01(value: float) -> float:
    """Clamp ``value`` to the inclusive range ``[0, 1]``."""
    return float(clamp(value, 0.0, 1.0))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (``127.5 -> 128``)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def hue_to_degrees(h: float) -> float:
    """Turn a hue fraction into UI-facing degrees."""
    return h * 360.0


def degrees_to_hue(degrees: float) -> float:
    """Turn UI-facing degrees into a hue fraction in ``[0, 1)``."""
    return (degrees / 360.0) % 1.0
