"""
Registered Route
Record of one generated (action, locale) route
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from routetree.route_action import RouteAction
    from routetree.route_node import RouteNode
    from routetree.routing import Route


@dataclass(frozen=True)
class RegisteredRoute:
    name: str
    locale: str
    methods: Tuple[str, ...]
    uri: str
    action: 'RouteAction'
    node: 'RouteNode'
    route: 'Route'

    def get_title(self, parameters=None) -> str:
        return self.action.get_title(parameters, self.locale)

    def get_nav_title(self, parameters=None) -> str:
        return self.action.get_nav_title(parameters, self.locale)
