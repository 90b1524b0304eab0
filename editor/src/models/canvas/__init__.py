"""Canvas model mixins package"""

from .query_mixin import CanvasQueryMixin
from .transform_mixin import CanvasTransformMixin
from .selection_mixin import CanvasSelectionMixin, Selection, SelectionMode
from .group_mixin import CanvasGroupMixin
from .instance_mixin import CanvasInstanceMixin
from .errors import MutationStatus, InvalidSpecError, InvalidGeometryError
from .core import Canvas
from ._internal.instance import ComponentInstance, ComponentState, ComponentType
from ._internal.group import ComponentGroup
from ._internal.properties import ComponentProperties

__all__ = [
    'Canvas',
    'ComponentInstance',
    'ComponentState',
    'ComponentType',
    'ComponentGroup',
    'ComponentProperties',
    'MutationStatus',
    'InvalidSpecError',
    'InvalidGeometryError',
    'Selection',
    'SelectionMode',
    'CanvasQueryMixin',
    'CanvasTransformMixin',
    'CanvasSelectionMixin',
    'CanvasGroupMixin',
    'CanvasInstanceMixin',
]
