"""
Canvas Design Editor - Style Scaling Utilities

Pure functions that rescale the handful of style properties whose visual
size should follow a proportional group resize. No model dependencies:
they take and return ComponentProperties / plain values.
"""

import math
import re
from typing import Any

from constants import (
    AVERAGE_SCALED_PIXEL_STRING_KEYS,
    AVERAGE_SCALED_NUMERIC_KEYS,
    VERTICAL_SCALED_NUMERIC_KEYS,
)

_PIXEL_PATTERN = re.compile(r'^(\d+)px$')


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives

    Python's round() is banker's rounding; CSS pixel snapping is not.
    """
    return int(math.floor(value + 0.5))


def scale_pixel_string(value: Any, factor: float) -> Any:
    """Scale an '<integer>px' string, e.g. '20px' * 1.5 -> '30px'

    Anything that does not match the pattern ('2em', '1.5rem', 12, None)
    is returned unchanged.
    """
    if not isinstance(value, str):
        return value
    match = _PIXEL_PATTERN.match(value)
    if not match:
        return value
    return f"{round_half_up(int(match.group(1)) * factor)}px"


def scale_number(value: Any, factor: float) -> Any:
    """Scale a numeric style value and round to an integer

    Booleans and non-numbers are returned unchanged.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    return round_half_up(value * factor)


def scale_style_properties(properties, scale_x: float, scale_y: float):
    """Rescale scale-sensitive keys of a ComponentProperties in place

    fontSize, borderRadius and borderWidth follow the average of the two
    axis factors; strokeWidth follows the vertical factor alone. Every
    other key passes through.

    Args:
        properties: ComponentProperties to update
        scale_x: Horizontal scale factor
        scale_y: Vertical scale factor

    Returns:
        List of keys that were changed
    """
    average = (scale_x + scale_y) / 2.0
    changed = []

    for key in AVERAGE_SCALED_PIXEL_STRING_KEYS:
        if key in properties:
            old = properties.get(key)
            new = scale_pixel_string(old, average)
            if new != old:
                properties.set(key, new)
                changed.append(key)

    for key, factor in ([(k, average) for k in AVERAGE_SCALED_NUMERIC_KEYS] +
                        [(k, scale_y) for k in VERTICAL_SCALED_NUMERIC_KEYS]):
        if key in properties:
            old = properties.get(key)
            new = scale_number(old, factor)
            if new != old:
                properties.set(key, new)
                changed.append(key)

    return changed
