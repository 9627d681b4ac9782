"""
Segments and parameter regexes
Value types owned by both route-nodes and route-actions
"""
import re
from typing import Dict, Iterable, List, Mapping, Optional, Union


def parameter_name(segment: Optional[str]) -> Optional[str]:
    """
    Return the enclosed name if segment is a parameter segment ('{photo}' -> 'photo')

    Malformed brace syntax is treated as a literal segment.
    """
    if not segment or len(segment) < 3:
        return None
    if segment[0] != '{' or segment[-1] != '}':
        return None
    name = segment[1:-1]
    if '{' in name or '}' in name or '/' in name:
        return None
    return name


def is_parameter_segment(segment: Optional[str]) -> bool:
    return parameter_name(segment) is not None


def path_parameters(path: str) -> List[str]:
    """All parameter names of a path, in left-to-right order"""
    parameters = []
    for segment in path.split('/'):
        name = parameter_name(segment)
        if name is not None:
            parameters.append(name)
    return parameters


class Segments:
    """
    Per-locale path segments

    A string applies to all given locales, a mapping only to the locales it contains.

    Usage:
        segments = Segments()
        segments.set('photos', ['de', 'en'])
        segments.set({'de': 'fotos'}, ['de', 'en'])
        segments.get('de')  # 'fotos'
        segments.get('en')  # 'photos'
    """

    def __init__(self):
        self._segments: Dict[str, str] = {}

    def set(self, segment: Union[str, Mapping[str, str]], locales: Iterable[str]) -> List[str]:
        """
        Set segment for locales

        Returns:
            The segment values that were set
        """
        values = []
        for locale in locales:
            if isinstance(segment, Mapping):
                if locale not in segment:
                    continue
                value = segment[locale]
            else:
                value = segment
            self._segments[locale] = value.strip('/')
            values.append(self._segments[locale])
        return values

    def get(self, locale: str) -> Optional[str]:
        return self._segments.get(locale)

    def has(self, locale: str) -> bool:
        return locale in self._segments

    def __bool__(self) -> bool:
        return bool(self._segments)

    def __repr__(self) -> str:
        return f"<Segments {self._segments!r}>"


class ParameterRegex:
    """
    Parameter constraints (wheres)

    Usage:
        regex = ParameterRegex()
        regex.where('photo', '[0-9]+')
        regex.where({'photo': '[0-9]+', 'slug': '[a-z-]+'})
    """

    def __init__(self):
        self._wheres: Dict[str, str] = {}

    def where(self, parameter: Union[str, Dict[str, str]], pattern: Optional[str] = None) -> 'ParameterRegex':
        if isinstance(parameter, dict):
            self._wheres.update(parameter)
        elif pattern is not None:
            self._wheres[parameter] = pattern
        return self

    def where_number(self, parameter: str) -> 'ParameterRegex':
        """Constrain parameter to be numeric"""
        return self.where(parameter, r'[0-9]+')

    def where_alpha(self, parameter: str) -> 'ParameterRegex':
        """Constrain parameter to be alphabetic"""
        return self.where(parameter, r'[a-zA-Z]+')

    def where_uuid(self, parameter: str) -> 'ParameterRegex':
        """Constrain parameter to be a UUID"""
        pattern = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'
        return self.where(parameter, pattern)

    def where_in(self, parameter: str, values: List[str]) -> 'ParameterRegex':
        """Constrain parameter to be one of given values"""
        escaped_values = [re.escape(v) for v in values]
        return self.where(parameter, f"({'|'.join(escaped_values)})")

    def all(self) -> Dict[str, str]:
        return dict(self._wheres)
