"""
Adapters between host color models and :class:`ColorValue`.

Host applications keep their own model types (a stored color, a community
color, a widget snapshot). Any of them that exposes ``red``, ``green``,
``blue`` and ``alpha`` attributes can be handed to the engine through
:func:`to_color_value`, and results go back through :func:`apply_to`.
"""

from __future__ import annotations
from typing import Any, Callable, Protocol, Sequence, TypeVar, Union, runtime_checkable

from numpy import ndarray

from .color_value import ColorValue

T = TypeVar('T')


@runtime_checkable
class RGBAComponents(Protocol):
    red: float
    green: float
    blue: float
    alpha: float


ColorLike = Union[ColorValue, RGBAComponents, Sequence[float], ndarray]


def to_color_value(obj: ColorLike) -> ColorValue:
    """
    Build a ColorValue from a host model, a 3/4-tuple, or a small array.

    Raises:
        TypeError: if ``obj`` has no recognizable channels.
        ValueError: if a sequence has the wrong number of channels.
    """
    if isinstance(obj, ColorValue):
        return obj
    if isinstance(obj, RGBAComponents):
        return ColorValue(obj.red, obj.green, obj.blue, obj.alpha)
    if isinstance(obj, (tuple, list, ndarray)):
        return ColorValue.from_array(obj)
    raise TypeError(f"Cannot read color channels from {type(obj).__name__}")


def apply_to(color: ColorValue, factory: Callable[..., T], **extra: Any) -> T:
    """Hand ``color`` back to a host model constructor as keyword channels."""
    return factory(
        red=color.red,
        green=color.green,
        blue=color.blue,
        alpha=color.alpha,
        **extra,
    )
