"""ComponentGroup - named aggregate of instances sharing one transformable box"""

from typing import Any, Dict, List

from models.geometry import Rect


class ComponentGroup:
    """Group of component instances

    The group owns its membership list; members only hold a weak
    back-reference (their group_id). The box (x, y, width, height) is the
    tight union of the members right after creation and afterwards acts as
    the reference frame for proportional resizing.
    """

    def __init__(self, group_id: str, name: str, component_ids: List[str], bounds: Rect,
                 visible: bool = True, locked: bool = False):
        self._id = group_id
        self.name = name
        self.component_ids: List[str] = list(component_ids)
        self.x = bounds.x
        self.y = bounds.y
        self.width = bounds.width
        self.height = bounds.height
        self.visible = bool(visible)
        self.locked = bool(locked)

    @property
    def id(self) -> str:
        return self._id

    @property
    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @bounds.setter
    def bounds(self, rect: Rect):
        self.x, self.y, self.width, self.height = rect.as_tuple()

    @property
    def is_empty(self) -> bool:
        return not self.component_ids

    def remove_member(self, instance_id: str) -> bool:
        """Remove a member id; returns False if it was not a member"""
        if instance_id not in self.component_ids:
            return False
        self.component_ids.remove(instance_id)
        return True

    # ========================================
    # Transform helpers (members are handled by the model)
    # ========================================

    def translate(self, dx: float, dy: float):
        self.x += dx
        self.y += dy

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self._id,
            'name': self.name,
            'componentIds': list(self.component_ids),
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'visible': self.visible,
            'locked': self.locked,
        }

    def copy(self) -> 'ComponentGroup':
        return ComponentGroup(self._id, self.name, self.component_ids, self.bounds,
                              self.visible, self.locked)

    def __repr__(self) -> str:
        return (f"ComponentGroup({self._id}, {self.name!r}, members={len(self.component_ids)}, "
                f"box=({self.x:.1f}, {self.y:.1f}, {self.width:.1f}, {self.height:.1f}))")
