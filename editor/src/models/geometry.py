"""Geometry primitives for canvas-space bounding boxes.

Axis-aligned boxes only: canvas components never rotate, so every box is
described by its top-left corner plus a width and height.
"""
import math
from dataclasses import dataclass
from typing import Iterable, Tuple


class InvalidGeometryError(ValueError):
    """Raised when a box would end up with a negative or non-finite size"""


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box: top-left corner plus size (canvas units)."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if not all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height)):
            raise InvalidGeometryError(f"Non-finite box: {self!r}")
        if self.width < 0 or self.height < 0:
            raise InvalidGeometryError(f"Negative box size: {self.width} x {self.height}")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def from_edges(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> 'Rect':
        """Build a box from its edges (min <= max expected)"""
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    def translated(self, dx: float, dy: float) -> 'Rect':
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


def union_rects(rects: Iterable[Rect]) -> Rect:
    """Smallest box containing every box in rects

    Args:
        rects: Boxes to combine (at least one)

    Returns:
        Union box (min of lefts/tops, max of rights/bottoms)

    Raises:
        ValueError: If rects is empty
    """
    rects = list(rects)
    if not rects:
        raise ValueError("Need at least one box")

    min_x = min(r.x for r in rects)
    min_y = min(r.y for r in rects)
    max_x = max(r.right for r in rects)
    max_y = max(r.bottom for r in rects)
    return Rect.from_edges(min_x, min_y, max_x, max_y)


def normalize_corners(x1: float, y1: float, x2: float, y2: float) -> Tuple[float, float, float, float]:
    """Order two drag corners as (min_x, min_y, max_x, max_y)

    Drag direction does not matter: (x1, y1) is where the pointer went
    down, (x2, y2) where it currently is.
    """
    return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


def rects_overlap(rect: Rect, min_x: float, min_y: float, max_x: float, max_y: float) -> bool:
    """Strict overlap test between a box and a normalized query rectangle

    Coincident edges do not count as overlap.
    """
    return (rect.x < max_x and rect.right > min_x and
            rect.y < max_y and rect.bottom > min_y)


def scale_from_anchor(anchor: float, value: float, factor: float) -> float:
    """Scale the offset of value from anchor by factor (one axis)"""
    return anchor + (value - anchor) * factor


def clamp_size(value: float, minimum: float) -> float:
    """Clamp a requested size to a floor (handles zero/negative input)"""
    return max(minimum, float(value))
