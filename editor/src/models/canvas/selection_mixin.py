"""
Selection Mixin for Canvas Model

Selection is always in exactly one of three modes:

- NONE: no components, no group
- COMPONENTS: a non-empty list of free-standing instance ids; when it has
  exactly one member that id is mirrored as selected_component_id
- GROUP: one group id, no component ids

Grouped instances are never selected on their own: selecting one selects
its group, and multi-selection operations drop them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import services.spatial_query as spatial_query
from .errors import MutationStatus


class SelectionMode(Enum):
    NONE = 'none'
    COMPONENTS = 'components'
    GROUP = 'group'


@dataclass(frozen=True)
class Selection:
    """Immutable snapshot of the selection state"""
    component_ids: Tuple[str, ...] = ()
    group_id: Optional[str] = None

    @property
    def mode(self) -> SelectionMode:
        if self.group_id is not None:
            return SelectionMode.GROUP
        if self.component_ids:
            return SelectionMode.COMPONENTS
        return SelectionMode.NONE

    @property
    def component_id(self) -> Optional[str]:
        """Single selected component (only when exactly one is selected)"""
        return self.component_ids[0] if len(self.component_ids) == 1 else None

    @property
    def is_empty(self) -> bool:
        return self.mode is SelectionMode.NONE


class CanvasSelectionMixin:
    """Mixin providing selection operations for Canvas

    This mixin assumes the parent class has:
        - self._selected_component_ids: List[str]
        - self._selected_group_id: Optional[str]
        - self._instances / self._groups collections
    """

    # ========================================
    # State transitions (all keep the modes exclusive)
    # ========================================

    def _clear_selection_state(self):
        self._selected_component_ids = []
        self._selected_group_id = None

    def _set_component_selection(self, ids: List[str]):
        self._selected_component_ids = list(ids)
        self._selected_group_id = None

    def _set_group_selection(self, group_id: str):
        self._selected_component_ids = []
        self._selected_group_id = group_id

    def _selectable_ids(self, ids) -> List[str]:
        """Known, free-standing ids in order, without duplicates"""
        result = []
        for instance_id in ids:
            instance = self._get_instance(instance_id)
            if instance is None or instance_id in result:
                continue
            if self._owning_group(instance) is not None:
                continue
            result.append(instance_id)
        return result

    # ========================================
    # Selection operations
    # ========================================

    def select_instance(self, instance_id: Optional[str]) -> MutationStatus:
        """Select a single instance (None clears)

        A grouped instance resolves to selecting its group.

        Returns:
            OK, or NOT_FOUND (selection unchanged)
        """
        if instance_id is None:
            return self.clear_selection()

        instance = self._get_instance(instance_id)
        if instance is None:
            return MutationStatus.NOT_FOUND

        group = self._owning_group(instance)
        if group is not None:
            self._set_group_selection(group.id)
        else:
            self._set_component_selection([instance_id])

        self._notify('select')
        return MutationStatus.OK

    def select_multiple(self, instance_ids: List[str]) -> MutationStatus:
        """Replace the selection with several instances

        Grouped and unknown ids are dropped; an empty result clears.
        """
        self._set_component_selection(self._selectable_ids(instance_ids))
        self._notify('select')
        return MutationStatus.OK

    def add_to_selection(self, instance_id: str) -> MutationStatus:
        """Add one free-standing instance to the component selection

        Idempotent. Leaves group mode for component mode.

        Returns:
            OK, or NOT_FOUND for an unknown id (selection unchanged)
        """
        if self._get_instance(instance_id) is None:
            return MutationStatus.NOT_FOUND

        ids = self._selectable_ids(self._selected_component_ids + [instance_id])
        if instance_id not in ids:
            # Grouped: silently dropped, selection left as it was
            return MutationStatus.OK

        self._set_component_selection(ids)
        self._notify('select')
        return MutationStatus.OK

    def remove_from_selection(self, instance_id: str) -> MutationStatus:
        """Remove one instance from the component selection (idempotent)"""
        if self._selected_group_id is not None:
            return MutationStatus.OK

        self._selected_component_ids = [i for i in self._selected_component_ids if i != instance_id]
        self._notify('select')
        return MutationStatus.OK

    def select_group(self, group_id: Optional[str]) -> MutationStatus:
        """Select a group (None clears)

        Returns:
            OK, or NOT_FOUND (selection unchanged)
        """
        if group_id is None:
            return self.clear_selection()

        if self._get_group(group_id) is None:
            return MutationStatus.NOT_FOUND

        self._set_group_selection(group_id)
        self._notify('select')
        return MutationStatus.OK

    def clear_selection(self) -> MutationStatus:
        self._clear_selection_state()
        self._notify('select')
        return MutationStatus.OK

    def select_in_rect(self, x1: float, y1: float, x2: float, y2: float,
                       extend: bool = False) -> List[str]:
        """Marquee selection

        Args:
            x1, y1: Drag start corner (canvas units)
            x2, y2: Drag end corner
            extend: Union with the current component selection instead of replacing it

        Returns:
            Ids hit by the rectangle. A click-sized rectangle hits nothing
            and leaves the selection untouched.
        """
        if spatial_query.is_click(x1, y1, x2, y2):
            return []

        hits = spatial_query.query_rect(self._instances.values(), x1, y1, x2, y2)
        if extend:
            self._set_component_selection(self._selectable_ids(self._selected_component_ids + hits))
        else:
            self._set_component_selection(hits)

        self._logger.debug(f"Marquee selected {len(hits)} instances (extend={extend})")
        self._notify('select')
        return hits

    # ========================================
    # Selection queries
    # ========================================

    def get_selection(self) -> Selection:
        return Selection(tuple(self._selected_component_ids), self._selected_group_id)

    @property
    def selected_component_ids(self) -> List[str]:
        return list(self._selected_component_ids)

    @property
    def selected_component_id(self) -> Optional[str]:
        """Mirror of the selection when exactly one component is selected"""
        if len(self._selected_component_ids) == 1:
            return self._selected_component_ids[0]
        return None

    @property
    def selected_group_id(self) -> Optional[str]:
        return self._selected_group_id

    def is_selected(self, instance_id: str) -> bool:
        return instance_id in self._selected_component_ids
