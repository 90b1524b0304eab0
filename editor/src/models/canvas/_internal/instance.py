"""ComponentInstance - a placed design element with geometry, states and properties"""

import math
from enum import Enum
from typing import Any, Dict, List, Optional

from constants import DEFAULT_STATE_ID, DEFAULT_STATE_NAME
from models.geometry import Rect
from ..errors import InvalidSpecError
from .properties import ComponentProperties


class ComponentType(Enum):
    """Kinds of component the canvas can hold"""
    TEXT = 'text'
    BUTTON = 'button'
    INPUT = 'input'
    IMAGE = 'image'
    RECTANGLE = 'rectangle'
    CIRCLE = 'circle'
    TRIANGLE = 'triangle'
    LINE = 'line'
    FRAME = 'frame'

    @classmethod
    def parse(cls, value: Any) -> 'ComponentType':
        """Parse a type name (or pass through a ComponentType)

        Raises:
            InvalidSpecError: If value is not a known component type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidSpecError(f"Unknown component type: {value!r}") from None


def _finite(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


class ComponentState:
    """Named visual state carrying a partial property-override map

    Properties:
        id: State identifier (unique within its component)
        name: Display name
        properties: Override map applied on top of the base properties
        is_default: True for the component's default state
    """

    def __init__(self, state_id: str, name: str = '', properties: Optional[Dict] = None,
                 is_default: bool = False):
        if not isinstance(state_id, str) or not state_id:
            raise InvalidSpecError(f"State id must be a non-empty string, got {state_id!r}")
        self.id = state_id
        self.name = name or state_id
        try:
            self.properties = ComponentProperties(properties)
        except ValueError as e:
            raise InvalidSpecError(f"State '{state_id}': {e}") from e
        self.is_default = bool(is_default)

    @classmethod
    def default(cls) -> 'ComponentState':
        return cls(DEFAULT_STATE_ID, DEFAULT_STATE_NAME, {}, is_default=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'properties': self.properties.to_dict(),
            'isDefault': self.is_default,
        }

    @staticmethod
    def from_dict(data: Any) -> 'ComponentState':
        """Create from a payload dict (or copy a ComponentState)

        Raises:
            InvalidSpecError: If the payload is malformed
        """
        if isinstance(data, ComponentState):
            return data.copy()
        if not isinstance(data, dict):
            raise InvalidSpecError(f"State must be a mapping, got {type(data).__name__}")
        is_default = data.get('isDefault', False)
        if not isinstance(is_default, bool):
            raise InvalidSpecError(f"State 'isDefault' must be a boolean, got {is_default!r}")
        return ComponentState(
            data.get('id'),
            data.get('name', ''),
            data.get('properties'),
            is_default,
        )

    def copy(self) -> 'ComponentState':
        return ComponentState.from_dict(self.to_dict())

    def __repr__(self) -> str:
        return f"ComponentState(id={self.id!r}, default={self.is_default})"


def parse_states(states: Any) -> List[ComponentState]:
    """Parse and validate a state sequence

    Raises:
        InvalidSpecError: If empty, ids repeat, or not exactly one state is default
    """
    if not states or not isinstance(states, (list, tuple)):
        raise InvalidSpecError("A component needs at least one state")

    parsed = [ComponentState.from_dict(s) for s in states]

    ids = [s.id for s in parsed]
    if len(set(ids)) != len(ids):
        raise InvalidSpecError(f"Duplicate state ids: {ids}")

    defaults = [s for s in parsed if s.is_default]
    if len(defaults) != 1:
        raise InvalidSpecError(f"Exactly one default state required, found {len(defaults)}")

    return parsed


def validate_geometry(x: Any, y: Any, width: Any, height: Any) -> Optional[str]:
    """Describe what is wrong with a geometry tuple, or None if valid"""
    if not (_finite(x) and _finite(y)):
        return f"position must be finite numbers, got ({x!r}, {y!r})"
    if not (_finite(width) and _finite(height)):
        return f"size must be finite numbers, got ({width!r}, {height!r})"
    if width <= 0 or height <= 0:
        return f"size must be positive, got {width} x {height}"
    return None


class ComponentInstance:
    """A placed design element

    Properties:
        id: Store-assigned identifier (immutable)
        type: ComponentType
        x, y: Top-left corner (canvas units)
        width, height: Size (positive)
        properties: Base ComponentProperties
        states: Ordered ComponentState list (exactly one default)
        current_state: Id of the active state
        visible, locked: Display/edit flags
        group_id: Owning group id, or None when free-standing
    """

    def __init__(self, instance_id: str, component_type: ComponentType,
                 x: float, y: float, width: float, height: float,
                 properties: ComponentProperties, states: List[ComponentState],
                 current_state: str, visible: bool = True, locked: bool = False,
                 group_id: Optional[str] = None):
        self._id = instance_id
        self.type = component_type
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.properties = properties
        self.states = states
        self.current_state = current_state
        self.visible = bool(visible)
        self.locked = bool(locked)
        self.group_id = group_id

    @property
    def id(self) -> str:
        return self._id

    # ========================================
    # Geometry
    # ========================================

    @property
    def bounds(self) -> Rect:
        """Bounding box as a Rect"""
        return Rect(self.x, self.y, self.width, self.height)

    # ========================================
    # States
    # ========================================

    def get_state(self, state_id: str) -> Optional[ComponentState]:
        for state in self.states:
            if state.id == state_id:
                return state
        return None

    @property
    def default_state(self) -> ComponentState:
        return next(s for s in self.states if s.is_default)

    @property
    def effective_properties(self) -> ComponentProperties:
        """Base properties merged with the active state's overrides"""
        state = self.get_state(self.current_state)
        if state is None:
            return self.properties.copy()
        return self.properties.merged(state.properties)

    # ========================================
    # Construction / serialization
    # ========================================

    @classmethod
    def from_spec(cls, instance_id: str, spec: Dict[str, Any]) -> 'ComponentInstance':
        """Build an instance from a creation payload (no 'id' key needed)

        Args:
            instance_id: Freshly generated identifier
            spec: Payload with type, x, y, width, height, properties,
                states, currentState, visible, locked

        Returns:
            New ComponentInstance (free-standing, groupId in spec is ignored)

        Raises:
            InvalidSpecError: If the payload violates structural constraints
        """
        if not isinstance(spec, dict):
            raise InvalidSpecError(f"Component spec must be a mapping, got {type(spec).__name__}")

        component_type = ComponentType.parse(spec.get('type'))

        problem = validate_geometry(spec.get('x'), spec.get('y'),
                                    spec.get('width'), spec.get('height'))
        if problem:
            raise InvalidSpecError(f"Invalid geometry: {problem}")

        try:
            properties = ComponentProperties(spec.get('properties'))
        except ValueError as e:
            raise InvalidSpecError(str(e)) from e

        states = parse_states(spec.get('states'))

        current_state = spec.get('currentState')
        if current_state is None:
            current_state = next(s.id for s in states if s.is_default)
        elif not any(s.id == current_state for s in states):
            raise InvalidSpecError(f"currentState '{current_state}' is not one of the component's states")

        return cls(
            instance_id, component_type,
            spec['x'], spec['y'], spec['width'], spec['height'],
            properties, states, current_state,
            visible=spec.get('visible', True),
            locked=spec.get('locked', False),
        )

    def to_spec(self) -> Dict[str, Any]:
        """Creation payload for this instance (no id, no group)"""
        return {
            'type': self.type.value,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'properties': self.properties.to_dict(),
            'states': [s.to_dict() for s in self.states],
            'currentState': self.current_state,
            'visible': self.visible,
            'locked': self.locked,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.to_spec()
        data['id'] = self._id
        if self.group_id is not None:
            data['groupId'] = self.group_id
        return data

    def copy(self) -> 'ComponentInstance':
        """Deep copy (same id)"""
        return ComponentInstance(
            self._id, self.type, self.x, self.y, self.width, self.height,
            self.properties.copy(), [s.copy() for s in self.states],
            self.current_state, self.visible, self.locked, self.group_id,
        )

    def __repr__(self) -> str:
        return (f"ComponentInstance({self._id}, {self.type.value}, "
                f"pos=({self.x:.1f}, {self.y:.1f}), size=({self.width:.1f}, {self.height:.1f}))")
