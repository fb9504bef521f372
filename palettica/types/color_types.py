from __future__ import annotations
from typing import Tuple

from numpy import ndarray

Scalar = int | float
RGBTriple = Tuple[float, float, float]
RGBAQuad = Tuple[float, float, float, float]
HSLTriple = Tuple[float, float, float]


def check_channel_shape(arr: ndarray, allowed: Tuple[int, ...] = (3, 4)) -> None:
    """Raise ValueError unless the last dimension holds one of ``allowed`` channels."""
    if arr.ndim == 0 or arr.shape[-1] not in allowed:
        raise ValueError(
            f"expected last dimension in {allowed}, got shape {arr.shape}"
        )
