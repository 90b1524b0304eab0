"""Result statuses and errors raised by the canvas model"""

from enum import Enum

from models.geometry import InvalidGeometryError


class MutationStatus(Enum):
    """Outcome of a store mutation

    Everything except OK means nothing was changed. Callers in a pointer
    drag stream are expected to ignore non-OK results and keep going.
    """
    OK = 'ok'
    NOT_FOUND = 'not_found'                 # id no longer present (stale UI reference)
    LOCKED = 'locked'                       # geometry change on a locked or grouped target
    HIDDEN = 'hidden'                       # transform of an invisible group
    INVALID_GEOMETRY = 'invalid_geometry'   # non-positive or non-finite size/position

    def __bool__(self) -> bool:
        return self is MutationStatus.OK


class InvalidSpecError(ValueError):
    """Raised when a component spec is structurally invalid

    Examples: no states, no (or several) default states, currentState not
    among the states, unknown component type, non-positive size.
    """


__all__ = ['MutationStatus', 'InvalidSpecError', 'InvalidGeometryError']
