"""
Route Payload
Arbitrary data attached to a node or action and exposed with its generated routes
"""
from typing import Any, Callable, Dict, Mapping, Optional, Union

LocalizedValue = Union[str, Mapping[str, Any], Callable[[Optional[Dict[str, str]], str], Any]]


def resolve_localized(value: Any, parameters: Optional[Dict[str, str]], locale: str) -> Any:
    """
    Resolve a configured value for locale

    A mapping is read per locale (None when the locale is absent), a callable
    is called with (parameters, locale), anything else is returned as-is.
    """
    if isinstance(value, Mapping):
        return value.get(locale)
    if callable(value):
        return value(parameters, locale)
    return value


class RoutePayload:
    """
    Payload of a node or action

    An action's payload falls back to its node's payload for keys it does not set.

    Usage:
        node.payload.set('icon', 'camera')
        node.payload.set('description', {'de': 'Alle Fotos', 'en': 'All photos'})
        action.payload.get('icon', locale='de')  # 'camera'
    """

    def __init__(self, fallback: Optional['RoutePayload'] = None):
        self._data: Dict[str, LocalizedValue] = {}
        self._fallback = fallback

    def set(self, key: str, value: LocalizedValue) -> 'RoutePayload':
        self._data[key] = value
        return self

    def has(self, key: str) -> bool:
        if key in self._data:
            return True
        return self._fallback is not None and self._fallback.has(key)

    def get(self, key: str, parameters: Optional[Dict[str, str]] = None, locale: Optional[str] = None) -> Any:
        if key in self._data:
            return resolve_localized(self._data[key], parameters, locale)
        if self._fallback is not None:
            return self._fallback.get(key, parameters, locale)
        return None

    def keys(self):
        keys = list(self._fallback.keys()) if self._fallback is not None else []
        return keys + [key for key in self._data if key not in keys]

    def to_dict(self, parameters: Optional[Dict[str, str]] = None, locale: Optional[str] = None) -> Dict[str, Any]:
        return {key: self.get(key, parameters, locale) for key in self.keys()}
