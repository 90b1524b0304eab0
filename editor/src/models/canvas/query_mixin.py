"""
Query Mixin for Canvas Model

Provides read-only query methods for the rendering layer, the property
panel and tests.

All query methods follow these conventions:
- Prefix with get_ for retrieving data
- Raise ValueError if an id is not found (use has_instance/has_group to check)
- Return copies of mutable data (no direct access to internal state)
"""

from typing import Any, Dict, List

from models.geometry import Rect, union_rects
from ._internal.instance import ComponentInstance
from ._internal.group import ComponentGroup


class CanvasQueryMixin:
    """Mixin providing query API for Canvas model

    This mixin assumes the class has:
    - self._instances: Dict[str, ComponentInstance]
    - self._groups: Dict[str, ComponentGroup]
    - selection state and get_selection() from the selection mixin
    """

    def _require_instance(self, instance_id: str) -> ComponentInstance:
        instance = self._get_instance(instance_id)
        if instance is None:
            raise ValueError(f"Instance '{instance_id}' not found")
        return instance

    def _require_group(self, group_id: str) -> ComponentGroup:
        group = self._get_group(group_id)
        if group is None:
            raise ValueError(f"Group '{group_id}' not found")
        return group

    # ========================================
    # Instance Queries
    # ========================================

    def has_instance(self, instance_id: str) -> bool:
        return instance_id in self._instances

    def get_instance(self, instance_id: str) -> ComponentInstance:
        """Get a copy of an instance

        Raises:
            ValueError: If id not found
        """
        return self._require_instance(instance_id).copy()

    def get_instances(self) -> List[ComponentInstance]:
        """Copies of all instances in canvas (insertion) order"""
        return [inst.copy() for inst in self._instances.values()]

    def get_instance_ids(self) -> List[str]:
        return list(self._instances.keys())

    def get_instance_count(self) -> int:
        return len(self._instances)

    def get_instance_bounds(self, instance_id: str) -> Rect:
        return self._require_instance(instance_id).bounds

    def get_effective_properties(self, instance_id: str) -> Dict[str, Any]:
        """Base properties merged with the current state's overrides

        Raises:
            ValueError: If id not found
        """
        return self._require_instance(instance_id).effective_properties.to_dict()

    def get_union_bounds(self, instance_ids: List[str]) -> Rect:
        """Tight bounding box of several instances

        Raises:
            ValueError: If the list is empty or an id is not found
        """
        return union_rects(self._require_instance(i).bounds for i in instance_ids)

    # ========================================
    # Group Queries
    # ========================================

    def has_group(self, group_id: str) -> bool:
        return group_id in self._groups

    def get_group(self, group_id: str) -> ComponentGroup:
        """Get a copy of a group

        Raises:
            ValueError: If id not found
        """
        return self._require_group(group_id).copy()

    def get_groups(self) -> List[ComponentGroup]:
        return [group.copy() for group in self._groups.values()]

    def get_group_ids(self) -> List[str]:
        return list(self._groups.keys())

    def get_group_members(self, group_id: str) -> List[str]:
        """Member ids of a group, in membership order"""
        return list(self._require_group(group_id).component_ids)

    def get_group_bounds(self, group_id: str) -> Rect:
        """The group's transform frame (not necessarily a tight union)"""
        return self._require_group(group_id).bounds

    def get_group_for_instance(self, instance_id: str):
        """Id of the group owning an instance, or None if free-standing"""
        group = self._owning_group(self._require_instance(instance_id))
        return group.id if group else None

    # ========================================
    # Snapshot
    # ========================================

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data snapshot of the whole canvas

        Used by the headless runner and for debugging; not a file format.
        """
        selection = self.get_selection()
        return {
            'components': [inst.to_dict() for inst in self._instances.values()],
            'groups': [group.to_dict() for group in self._groups.values()],
            'selection': {
                'selectedComponentIds': list(selection.component_ids),
                'selectedComponentId': selection.component_id,
                'selectedGroupId': selection.group_id,
            },
        }
