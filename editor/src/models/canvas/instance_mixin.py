"""
Canvas Instance Management Mixin

This mixin provides all component instance CRUD operations for the Canvas model.

Methods:
    Instance CRUD:
        - create_instance
        - add_instances
        - update_instance
        - delete_instance
        - delete_selection

    Property editing:
        - set_instance_property
        - set_current_state

    Clipboard:
        - duplicate_instance
        - copy_instance
        - paste_instance

    Keyboard movement:
        - nudge_instance
"""

from typing import Any, Dict, List, Optional

from constants import (
    PASTE_OFFSET_X, PASTE_OFFSET_Y,
    NUDGE_STEP_NORMAL, NUDGE_STEP_LARGE, NUDGE_DIRECTIONS,
)
from utils.logger import loggerRaise
from ._internal.instance import ComponentInstance, parse_states, validate_geometry
from ._internal.properties import ComponentProperties
from .errors import InvalidSpecError, MutationStatus

# Fields update_instance may merge; everything else is identity or membership
UPDATABLE_FIELDS = ('x', 'y', 'width', 'height', 'properties', 'states',
                    'currentState', 'visible', 'locked')
GEOMETRY_FIELDS = ('x', 'y', 'width', 'height')


class CanvasInstanceMixin:
    """Mixin providing component instance operations for Canvas

    This mixin assumes the parent class has:
        - self._instances: Dict[str, ComponentInstance]
        - self._logger: logging.Logger instance
        - self._notify(event), self._new_instance_id()
        - selection state (self._selected_component_ids, self._selected_group_id)
    """

    # ========================================
    # Instance CRUD Operations
    # ========================================

    def _build_instance(self, spec: Dict[str, Any]) -> ComponentInstance:
        try:
            return ComponentInstance.from_spec(self._new_instance_id(), spec)
        except InvalidSpecError as e:
            loggerRaise(e, f"Cannot create component: {e}")

    def create_instance(self, spec: Dict[str, Any]) -> str:
        """Create a new free-standing component instance

        Args:
            spec: Creation payload (type, x, y, width, height, properties,
                states, currentState, visible, locked). Any 'id' or
                'groupId' key is ignored.

        Returns:
            Id of the new instance

        Raises:
            InvalidSpecError: If the payload is structurally invalid (nothing is created)
        """
        instance = self._build_instance(spec)
        self._instances[instance.id] = instance

        self._logger.debug(f"Created instance: {instance}")
        self._notify('create_instance')
        return instance.id

    def add_instances(self, specs: List[Dict[str, Any]]) -> List[str]:
        """Create several free-standing instances in one step

        All specs are validated before anything is added.

        Args:
            specs: Creation payloads

        Returns:
            Ids of the new instances, in spec order

        Raises:
            InvalidSpecError: If any spec is invalid (nothing is created)
        """
        instances = [self._build_instance(spec) for spec in specs]
        for instance in instances:
            self._instances[instance.id] = instance

        if instances:
            self._logger.debug(f"Added {len(instances)} instances")
            self._notify('add_instances')
        return [inst.id for inst in instances]

    def update_instance(self, instance_id: str, fields: Dict[str, Any]) -> MutationStatus:
        """Shallow-merge fields into an instance

        Permitted fields: x, y, width, height, properties, states,
        currentState, visible, locked. 'properties' replaces the whole base
        property map. Other keys are ignored.

        Args:
            instance_id: Instance id
            fields: Partial field values

        Returns:
            OK, NOT_FOUND (unknown id, ignored), LOCKED (geometry change on a
            locked instance that is not unlocked by the same call) or
            INVALID_GEOMETRY (non-positive/non-finite values). Nothing is
            applied unless OK.

        Raises:
            InvalidSpecError: If properties/states/currentState are malformed
        """
        instance = self._get_instance(instance_id)
        if instance is None:
            self._logger.debug(f"update_instance: {instance_id} not found")
            return MutationStatus.NOT_FOUND

        ignored = [key for key in fields if key not in UPDATABLE_FIELDS]
        if ignored:
            self._logger.warning(f"update_instance: ignoring non-updatable fields {ignored}")

        touches_geometry = any(key in fields for key in GEOMETRY_FIELDS)
        stays_locked = fields.get('locked', instance.locked)
        if touches_geometry and instance.locked and stays_locked:
            self._logger.debug(f"update_instance: {instance_id} is locked")
            return MutationStatus.LOCKED

        x = fields.get('x', instance.x)
        y = fields.get('y', instance.y)
        width = fields.get('width', instance.width)
        height = fields.get('height', instance.height)
        problem = validate_geometry(x, y, width, height)
        if problem:
            self._logger.warning(f"update_instance: {instance_id} {problem}")
            return MutationStatus.INVALID_GEOMETRY

        # Validate everything before touching the instance
        properties = None
        if 'properties' in fields:
            try:
                properties = ComponentProperties(fields['properties'])
            except ValueError as e:
                raise InvalidSpecError(str(e)) from e

        states = instance.states
        if 'states' in fields:
            states = parse_states(fields['states'])

        current_state = fields.get('currentState', instance.current_state)
        if not any(s.id == current_state for s in states):
            if 'currentState' in fields:
                raise InvalidSpecError(f"currentState '{current_state}' is not one of the component's states")
            current_state = next(s.id for s in states if s.is_default)

        instance.x, instance.y = float(x), float(y)
        instance.width, instance.height = float(width), float(height)
        if properties is not None:
            instance.properties = properties
        instance.states = states
        instance.current_state = current_state
        if 'visible' in fields:
            instance.visible = bool(fields['visible'])
        if 'locked' in fields:
            instance.locked = bool(fields['locked'])

        self._logger.debug(f"Updated instance {instance_id}: {sorted(k for k in fields if k in UPDATABLE_FIELDS)}")
        self._notify('update_instance')
        return MutationStatus.OK

    def delete_instance(self, instance_id: str) -> MutationStatus:
        """Remove an instance

        If it was selected, selection becomes empty. If it belonged to a
        group it is removed from the member list; the group box is left as
        is and an emptied group is kept.

        Args:
            instance_id: Instance id

        Returns:
            OK or NOT_FOUND
        """
        instance = self._instances.pop(instance_id, None)
        if instance is None:
            self._logger.debug(f"delete_instance: {instance_id} not found")
            return MutationStatus.NOT_FOUND

        group = self._owning_group(instance)
        if group is not None:
            group.remove_member(instance_id)
            if group.is_empty:
                self._logger.info(f"Group {group.id} has no members left")

        if instance_id in self._selected_component_ids:
            self._clear_selection_state()

        self._logger.debug(f"Deleted instance: {instance_id}")
        self._notify('delete_instance')
        return MutationStatus.OK

    def delete_selection(self) -> MutationStatus:
        """Delete whatever is selected

        A selected group is deleted with detach semantics (its members stay
        on the canvas); selected components are removed.

        Returns:
            OK, or NOT_FOUND when nothing is selected
        """
        if self._selected_group_id is not None:
            return self.delete_group(self._selected_group_id)

        if not self._selected_component_ids:
            return MutationStatus.NOT_FOUND

        doomed = list(self._selected_component_ids)
        for instance_id in doomed:
            instance = self._instances.pop(instance_id, None)
            group = self._owning_group(instance) if instance else None
            if group is not None:
                group.remove_member(instance_id)
        self._clear_selection_state()

        self._logger.debug(f"Deleted {len(doomed)} selected instances")
        self._notify('delete_selection')
        return MutationStatus.OK

    # ========================================
    # Property Editing
    # ========================================

    def set_instance_property(self, instance_id: str, key: str, value: Any) -> MutationStatus:
        """Set one base property (property panel edit)

        Allowed on locked instances; state overrides are not touched.

        Returns:
            OK or NOT_FOUND

        Raises:
            InvalidSpecError: If the key is empty or the value is not a scalar
        """
        instance = self._get_instance(instance_id)
        if instance is None:
            return MutationStatus.NOT_FOUND

        try:
            instance.properties.set(key, value)
        except ValueError as e:
            raise InvalidSpecError(str(e)) from e

        self._logger.debug(f"Set property {key}={value!r} on {instance_id}")
        self._notify('set_instance_property')
        return MutationStatus.OK

    def set_current_state(self, instance_id: str, state_id: str) -> MutationStatus:
        """Switch the active visual state of an instance

        Returns:
            OK or NOT_FOUND (unknown instance)

        Raises:
            InvalidSpecError: If state_id is not one of the instance's states
        """
        instance = self._get_instance(instance_id)
        if instance is None:
            return MutationStatus.NOT_FOUND

        if instance.get_state(state_id) is None:
            raise InvalidSpecError(f"Instance {instance_id} has no state '{state_id}'")

        instance.current_state = state_id
        self._notify('set_current_state')
        return MutationStatus.OK

    # ========================================
    # Clipboard
    # ========================================

    @staticmethod
    def _offset_copy(spec: Dict[str, Any]) -> Dict[str, Any]:
        """Creation payload for a pasted/duplicated copy"""
        copied = dict(spec)
        copied['x'] = spec['x'] + PASTE_OFFSET_X
        copied['y'] = spec['y'] + PASTE_OFFSET_Y
        copied['visible'] = True
        copied['locked'] = False
        return copied

    def duplicate_instance(self, instance_id: str) -> Optional[str]:
        """Duplicate an instance next to the original

        The copy is offset, visible, unlocked and free-standing.

        Returns:
            New instance id, or None if instance_id is unknown
        """
        instance = self._get_instance(instance_id)
        if instance is None:
            return None
        return self.create_instance(self._offset_copy(instance.to_spec()))

    def copy_instance(self, instance_id: str) -> MutationStatus:
        """Put a snapshot of an instance on the clipboard

        Returns:
            OK or NOT_FOUND
        """
        instance = self._get_instance(instance_id)
        if instance is None:
            return MutationStatus.NOT_FOUND
        self._clipboard = instance.to_spec()
        self._logger.debug(f"Copied {instance_id} to clipboard")
        return MutationStatus.OK

    def has_clipboard(self) -> bool:
        return self._clipboard is not None

    def paste_instance(self) -> Optional[str]:
        """Create a new instance from the clipboard snapshot

        Returns:
            New instance id, or None if the clipboard is empty
        """
        if self._clipboard is None:
            return None
        return self.create_instance(self._offset_copy(self._clipboard))

    # ========================================
    # Keyboard Movement
    # ========================================

    def nudge_instance(self, instance_id: str, direction: str, large: bool = False) -> MutationStatus:
        """Move an instance one arrow-key step

        Args:
            instance_id: Instance id
            direction: 'up', 'down', 'left' or 'right'
            large: Use the coarse step (Shift held)

        Returns:
            OK, NOT_FOUND, or LOCKED (locked or grouped instance)

        Raises:
            ValueError: If direction is not recognized
        """
        if direction not in NUDGE_DIRECTIONS:
            raise ValueError(f"Unknown nudge direction: {direction!r}")

        step = NUDGE_STEP_LARGE if large else NUDGE_STEP_NORMAL
        sign_x, sign_y = NUDGE_DIRECTIONS[direction]
        instance = self._get_instance(instance_id)
        if instance is None:
            return MutationStatus.NOT_FOUND

        return self.move_instance(instance_id, instance.x + sign_x * step, instance.y + sign_y * step)
