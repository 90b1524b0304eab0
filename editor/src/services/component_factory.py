"""
Component Factory - default creation payloads for tool placement

When the user picks a tool from the component library and clicks the
canvas, the new component is centered on the click point with the tool's
default size and properties. These helpers only build payloads; the Canvas
model validates and inserts them.
"""

from typing import Any, Dict, Optional

from constants import (
    DEFAULT_COMPONENT_SIZES,
    DEFAULT_COMPONENT_SIZE_FALLBACK,
    DEFAULT_COMPONENT_PROPERTIES,
    DEFAULT_STATE_ID,
    DEFAULT_STATE_NAME,
)
from models.canvas import ComponentType


def default_size(component_type) -> tuple:
    """Default (width, height) for a component type"""
    key = ComponentType.parse(component_type).value
    return DEFAULT_COMPONENT_SIZES.get(key, DEFAULT_COMPONENT_SIZE_FALLBACK)


def default_properties(component_type) -> Dict[str, Any]:
    """Copy of the default base properties for a component type"""
    key = ComponentType.parse(component_type).value
    return dict(DEFAULT_COMPONENT_PROPERTIES.get(key, {}))


def default_states() -> list:
    """Single default state with no overrides"""
    return [{
        'id': DEFAULT_STATE_ID,
        'name': DEFAULT_STATE_NAME,
        'properties': {},
        'isDefault': True,
    }]


def make_instance_spec(component_type, x: float, y: float,
                       properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build a creation payload for a component placed at a click point

    Args:
        component_type: ComponentType or its name ('rectangle', 'text', ...)
        x: Click X in canvas units (becomes the component's center)
        y: Click Y in canvas units
        properties: Optional overrides merged over the type defaults

    Returns:
        Payload accepted by Canvas.create_instance. The top-left corner is
        clamped so the component never starts at negative coordinates.

    Raises:
        InvalidSpecError: If component_type is unknown
    """
    component_type = ComponentType.parse(component_type)
    width, height = default_size(component_type)

    props = default_properties(component_type)
    if properties:
        props.update(properties)

    return {
        'type': component_type.value,
        'x': max(0, x - width / 2),
        'y': max(0, y - height / 2),
        'width': width,
        'height': height,
        'properties': props,
        'states': default_states(),
        'currentState': DEFAULT_STATE_ID,
        'visible': True,
        'locked': False,
    }
