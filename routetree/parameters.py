"""
Parameter Registry helpers
Filling required path parameters from several sources, and the protocol
for models whose route keys differ per locale
"""
from typing import Dict, List, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TranslatableRouteKey(Protocol):
    """
    A model bound to a node parameter whose values are locale-specific

    Example:
        class Article:
            @staticmethod
            def translate_route_key(value, to_locale, from_locale):
                return SLUGS[to_locale][SLUGS[from_locale].index(value)]
    """

    def translate_route_key(self, value: str, to_locale: str, from_locale: str) -> str:
        ...


def fill_parameters(source: Optional[Mapping[str, object]], required: List[str], target: Dict[str, str]) -> List[str]:
    """
    Copy every required parameter present in source into target

    Returns:
        The parameters still missing, in required order
    """
    missing = []
    for parameter in required:
        if source is not None and source.get(parameter) is not None:
            target[parameter] = str(source[parameter])
        else:
            missing.append(parameter)
    return missing
