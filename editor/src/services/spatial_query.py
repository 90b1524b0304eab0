"""
Canvas Design Editor - Spatial Query Service

Marquee (rubber-band) hit testing. Given the instances on the canvas and a
drag rectangle, returns the ids of the instances the rectangle touches.
Read-only: never mutates the instances it is given.
"""

import logging
from typing import Iterable, List

import numpy as np

from constants import MARQUEE_DRAG_THRESHOLD
from models.geometry import normalize_corners

logger = logging.getLogger(__name__)


def is_click(x1: float, y1: float, x2: float, y2: float,
             threshold: float = MARQUEE_DRAG_THRESHOLD) -> bool:
    """True when a marquee is too small on both axes to count as a drag"""
    return abs(x2 - x1) < threshold and abs(y2 - y1) < threshold


def marquee_candidates(instances: Iterable) -> List:
    """Instances a marquee may pick: visible and free-standing

    Grouped instances are represented on the canvas by their group's frame
    and are selected through the group instead.
    """
    return [inst for inst in instances if inst.visible and inst.group_id is None]


def query_rect(instances: Iterable, x1: float, y1: float, x2: float, y2: float,
               threshold: float = MARQUEE_DRAG_THRESHOLD) -> List[str]:
    """Ids of instances whose box strictly overlaps the drag rectangle

    Args:
        instances: ComponentInstance objects (anything with id, x, y,
            width, height, visible, group_id)
        x1, y1: Drag start corner
        x2, y2: Drag current/end corner (any direction)
        threshold: Minimum drag extent; below it on both axes nothing is hit

    Returns:
        Matching ids in canvas order. Edge contact is not overlap.
    """
    if is_click(x1, y1, x2, y2, threshold):
        return []

    candidates = marquee_candidates(instances)
    if not candidates:
        return []

    min_x, min_y, max_x, max_y = normalize_corners(x1, y1, x2, y2)

    boxes = np.array([(inst.x, inst.y, inst.width, inst.height) for inst in candidates],
                     dtype=float)
    left = boxes[:, 0]
    top = boxes[:, 1]
    right = left + boxes[:, 2]
    bottom = top + boxes[:, 3]

    hits = (left < max_x) & (right > min_x) & (top < max_y) & (bottom > min_y)

    ids = [candidates[i].id for i in np.flatnonzero(hits)]
    logger.debug(f"Marquee ({min_x:.1f}, {min_y:.1f})-({max_x:.1f}, {max_y:.1f}) hit {len(ids)} of {len(candidates)}")
    return ids
