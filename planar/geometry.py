"""Various geometry abstractions and functions"""

import math
import sys
from typing import Any, Mapping

import attrs
from expression import Result
import numpy as np

from planar import ConfigurationValueError, unsafe_extract_result
from planar.configuration import DEFAULT_DECIMAL_PLACES, get_decimal_places, validate_decimal_places
from planar.numeric_types import NumberLike, is_real_number

__all__ = ["Point", "create", "distance", "rounded_distance", "rounded_distance_from_config"]

# Floats at or beyond this magnitude are all integers, so there's no fractional part to round.
_FIRST_FLOAT_WITHOUT_FRACTION = 2.0 ** 52


def _to_float(value: NumberLike) -> float:
    try:
        return float(value)
    except OverflowError:
        # Only integers beyond the float range get here; these saturate to infinity.
        return math.inf if value > 0 else -math.inf


def _difference(a: NumberLike, b: NumberLike) -> float:
    # Integer pairs are subtracted exactly, so unsigned numpy integers can't wrap around 
    # and integers beyond the float range still give a finite difference when they're close.
    if isinstance(a, (int, np.integer)) and isinstance(b, (int, np.integer)):
        return _to_float(int(a) - int(b))
    return _to_float(a) - _to_float(b)


def _is_real_number(_, attribute: attrs.Attribute, value: Any) -> None:
    if not is_real_number(value):
        raise TypeError(f"Value for {attribute.name} isn't a real number, but {type(value).__name__}")


@attrs.define(kw_only=True, frozen=True)
class Point:
    """General abstraction of a point in the 2D Euclidean plane"""
    x = attrs.field(validator=_is_real_number) # type: NumberLike
    y = attrs.field(validator=_is_real_number) # type: NumberLike

    @property
    def to_tuple(self) -> tuple[NumberLike, NumberLike]:
        return attrs.astuple(self)


def create(x: NumberLike, y: NumberLike) -> Point:
    """Create a point with exactly the given coordinates."""
    return Point(x=x, y=y)


def distance(p1: Point, p2: Point) -> float:
    """
    Compute the Euclidean distance between two points.

    Non-finite coordinates aren't an error; NaN and infinity propagate 
    through the arithmetic as usual for floating-point values, and an integer 
    too large for a float counts as infinity of the same sign.
    """
    dx = _difference(p2.x, p1.x)
    dy = _difference(p2.y, p1.y)
    return math.sqrt(dx * dx + dy * dy)


def rounded_distance(p1: Point, p2: Point, *, places: int = DEFAULT_DECIMAL_PLACES) -> float:
    """
    Compute the Euclidean distance between two points, rounded to the given number of decimal places.

    Halves are rounded away from zero, rather than to even as the builtin round does.

    Parameters
    ----------
    p1, p2 : Point
        The points between which to measure
    places : int
        Number of digits to keep after the decimal point

    Returns
    -------
    float
        The rounded distance; a non-finite distance is returned as-is.

    Raises
    ------
    ConfigurationValueError
        If the number of decimal places isn't a nonnegative integer
    """
    places = unsafe_extract_result(validate_decimal_places(places))
    d = distance(p1, p2)
    if not math.isfinite(d) or places > sys.float_info.max_10_exp:
        return d
    scale = 10.0 ** places
    scaled = d * scale
    if scaled >= _FIRST_FLOAT_WITHOUT_FRACTION:
        return d
    # Carry only when the remainder, which is exact below 2**52, reaches one half.
    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    return rounded / scale


def rounded_distance_from_config(
    p1: Point, 
    p2: Point, 
    conf_data: Mapping[str, object],
) -> Result[float, ConfigurationValueError]:
    """Compute the distance between two points, rounded to the number of decimal places in the given configuration."""
    return get_decimal_places(conf_data).map(lambda places: rounded_distance(p1, p2, places=places))
