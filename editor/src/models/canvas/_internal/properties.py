"""ComponentProperties - typed well-known style fields plus an open residual bag"""

import math
from typing import Any, Dict, Iterator, Optional, Tuple, Union

Scalar = Union[str, int, float, bool]

_NUMBER = 'number'
_STRING = 'string'
_BOOLEAN = 'boolean'

# Well-known keys and their value kind. Anything else, or a well-known key
# holding another kind of scalar, lands in the extras bag.
KNOWN_PROPERTY_KINDS: Dict[str, str] = {
    # Shared style
    'opacity': _NUMBER,
    'overflow': _STRING,
    'borderRadius': _NUMBER,
    'backgroundColor': _STRING,
    'borderWidth': _NUMBER,
    'borderColor': _STRING,
    'borderStyle': _STRING,
    'boxShadow': _STRING,
    # Text
    'text': _STRING,
    'fontSize': _STRING,
    'color': _STRING,
    'fontWeight': _STRING,
    'textAlign': _STRING,
    # Button
    'variant': _STRING,
    'textColor': _STRING,
    'disabled': _BOOLEAN,
    # Input
    'placeholder': _STRING,
    'inputType': _STRING,
    'hasError': _BOOLEAN,
    # Image
    'src': _STRING,
    'alt': _STRING,
    # Line
    'strokeColor': _STRING,
    'strokeWidth': _NUMBER,
}


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid numeric style value
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def _matches_kind(value: Any, kind: str) -> bool:
    if kind == _NUMBER:
        return _is_number(value)
    if kind == _BOOLEAN:
        return isinstance(value, bool)
    return isinstance(value, str)


def is_scalar(value: Any) -> bool:
    """True for the value types a property map may hold"""
    return isinstance(value, (str, bool)) or _is_number(value)


class ComponentProperties:
    """Style/content properties of a component or a state override map

    Well-known keys (fontSize, borderWidth, ...) holding the expected kind
    of value are kept in the typed section. Unrecognized keys, and
    well-known keys holding some other scalar (fontSize: 16,
    borderRadius: "8px"), are kept in a residual bag and round-trip
    untouched.

    Keys use the camelCase names the renderers and templates use.
    """

    def __init__(self, data: Optional[Dict[str, Scalar]] = None):
        """Create from a plain mapping

        Args:
            data: Key/value pairs, or None for empty

        Raises:
            ValueError: If a key is not a non-empty string or a value is not a scalar
        """
        self._known: Dict[str, Scalar] = {}
        self._extra: Dict[str, Scalar] = {}
        if data:
            for key, value in data.items():
                self.set(key, value)

    # ========================================
    # Mapping-style access
    # ========================================

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._known:
            return self._known[key]
        return self._extra.get(key, default)

    def set(self, key: str, value: Scalar):
        """Set a property value

        Raises:
            ValueError: If key is not a non-empty string or value is not a scalar
        """
        if not isinstance(key, str) or not key:
            raise ValueError(f"Property key must be a non-empty string, got {key!r}")
        if not is_scalar(value):
            raise ValueError(f"Property '{key}' must be a string, number or boolean, got {value!r}")

        # A key lives in exactly one of the two sections
        self.remove(key)
        kind = KNOWN_PROPERTY_KINDS.get(key)
        if kind is not None and _matches_kind(value, kind):
            self._known[key] = value
        else:
            self._extra[key] = value

    def remove(self, key: str):
        self._known.pop(key, None)
        self._extra.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._known or key in self._extra

    def __getitem__(self, key: str) -> Scalar:
        if key not in self:
            raise KeyError(key)
        return self.get(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __len__(self) -> int:
        return len(self._known) + len(self._extra)

    def __eq__(self, other) -> bool:
        if isinstance(other, ComponentProperties):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def items(self) -> Iterator[Tuple[str, Scalar]]:
        return iter(self.to_dict().items())

    @property
    def known(self) -> Dict[str, Scalar]:
        """Copy of the well-known fields"""
        return dict(self._known)

    @property
    def extra(self) -> Dict[str, Scalar]:
        """Copy of the unrecognized (pass-through) fields"""
        return dict(self._extra)

    # ========================================
    # Combination / serialization
    # ========================================

    def merged(self, overrides: 'ComponentProperties') -> 'ComponentProperties':
        """New properties with overrides applied on top (override wins)"""
        result = self.copy()
        for key, value in overrides.items():
            result.set(key, value)
        return result

    def to_dict(self) -> Dict[str, Scalar]:
        data = dict(self._known)
        data.update(self._extra)
        return data

    @staticmethod
    def from_dict(data: Optional[Dict[str, Scalar]]) -> 'ComponentProperties':
        return ComponentProperties(data)

    def copy(self) -> 'ComponentProperties':
        return ComponentProperties(self.to_dict())

    def __repr__(self) -> str:
        return f"ComponentProperties({self.to_dict()!r})"
