"""
Canvas Design Editor - Canvas Data Model

THE MODEL in the MVC architecture. Owns all canvas data and operations.

This class handles:
- Component instances (flat collection keyed by generated id)
- Component groups (flat collection, membership lists owned by groups)
- Selection state (none / components / group, mutually exclusive)
- Group transforms (move, proportional resize with style scaling)
- Marquee selection (via services.spatial_query)
- Clipboard (copy/paste/duplicate of single components)
- Change notification for the rendering layer

The Canvas model is INDEPENDENT of UI:
- No Qt imports (services.qt_bridge adapts notifications to Qt signals)
- No rendering logic
- No pointer handling (callers pass canvas-space deltas and rectangles)
- No undo stack

Every mutation is synchronous and atomic: when a method returns, the
canvas is in a consistent state and listeners have been told once.

Usage:
    canvas = Canvas()

    a = canvas.create_instance(spec_a)
    b = canvas.create_instance(spec_b)

    group_id = canvas.create_group([a, b], "Header")
    canvas.move_group(group_id, 10, 0)
    canvas.resize_group(group_id, 300, 150)

    canvas.select_in_rect(0, 0, 200, 200)
"""

import logging
import uuid as uuid_module
from typing import Callable, Dict, List, Optional

from constants import COMPONENT_ID_PREFIX, GROUP_ID_PREFIX
from ._internal.instance import ComponentInstance
from ._internal.group import ComponentGroup
from .instance_mixin import CanvasInstanceMixin
from .group_mixin import CanvasGroupMixin
from .selection_mixin import CanvasSelectionMixin
from .transform_mixin import CanvasTransformMixin
from .query_mixin import CanvasQueryMixin

Listener = Callable[[str], None]


class Canvas(CanvasInstanceMixin, CanvasGroupMixin, CanvasSelectionMixin,
             CanvasTransformMixin, CanvasQueryMixin):
    """Design canvas data model with full operation API

    Manages all canvas data and operations. This is THE MODEL in MVC.
    All data manipulation goes through this class; the entities handed
    out by the query API are copies.
    """

    def __init__(self):
        """Create an empty canvas"""
        self._logger = logging.getLogger('Canvas')

        # Arena collections: insertion ordered, keyed by generated id
        self._instances: Dict[str, ComponentInstance] = {}
        self._groups: Dict[str, ComponentGroup] = {}

        # Every id ever handed out this session (never reused)
        self._issued_ids = set()

        # Selection state (see selection mixin for the invariants)
        self._selected_component_ids: List[str] = []
        self._selected_group_id: Optional[str] = None

        # Single-component clipboard (creation payload)
        self._clipboard: Optional[dict] = None

        self._listeners: List[Listener] = []

        self._logger.debug("Created new Canvas")

    def clear(self):
        """Remove all components and groups, reset selection and clipboard

        Issued ids stay reserved.
        """
        self._instances.clear()
        self._groups.clear()
        self._selected_component_ids = []
        self._selected_group_id = None
        self._clipboard = None
        self._logger.debug("Cleared Canvas")
        self._notify('clear')

    # ========================================
    # Change notification
    # ========================================

    def subscribe(self, listener: Listener):
        """Register a callable invoked with the event name after each mutation"""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: str):
        # A failing listener must not break a pointer-drag mutation stream
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                self._logger.exception(f"Canvas listener failed on '{event}'")

    # ========================================
    # Internal lookups
    # ========================================

    def _new_id(self, prefix: str) -> str:
        """Generate an id unique among everything issued this session"""
        while True:
            new_id = f"{prefix}_{uuid_module.uuid4()}"
            if new_id not in self._issued_ids:
                self._issued_ids.add(new_id)
                return new_id

    def _new_instance_id(self) -> str:
        return self._new_id(COMPONENT_ID_PREFIX)

    def _new_group_id(self) -> str:
        return self._new_id(GROUP_ID_PREFIX)

    def _get_instance(self, instance_id: Optional[str]) -> Optional[ComponentInstance]:
        if instance_id is None:
            return None
        return self._instances.get(instance_id)

    def _get_group(self, group_id: Optional[str]) -> Optional[ComponentGroup]:
        if group_id is None:
            return None
        return self._groups.get(group_id)

    def _owning_group(self, instance: ComponentInstance) -> Optional[ComponentGroup]:
        """Resolve an instance's weak group reference"""
        return self._get_group(instance.group_id)

    def _members_of(self, group: ComponentGroup) -> List[ComponentInstance]:
        """Live member instances of a group (ids no longer present are skipped)"""
        return [self._instances[i] for i in group.component_ids if i in self._instances]
