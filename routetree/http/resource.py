"""
Route Resource
JSON:API-style representation of a registered route
"""
from typing import Any, Dict, Mapping, Optional

from routetree.registered_route import RegisteredRoute


class RouteResource:
    """
    Transforms a registered route (plus optional route parameters) into a dict

    Usage:
        RouteResource(tree.get_registered_route('de.photos.show'), {'photo': '12'}).to_dict()
        # {'type': 'routes', 'id': 'de.photos.show:12', 'attributes': {...}}
    """

    def __init__(self, registered_route: RegisteredRoute, parameters: Optional[Mapping[str, Any]] = None):
        self.registered_route = registered_route
        self.parameters = {key: str(value) for key, value in (parameters or {}).items()}

    def generate_route_id(self) -> str:
        """Route name, followed by ':' and the comma-joined path parameter values (in path order) if any"""
        route = self.registered_route
        values = [
            self.parameters[name]
            for name in route.action.get_path_parameters(route.locale)
            if name in self.parameters
        ]
        if values:
            return route.name + ':' + ','.join(values)
        return route.name

    def to_dict(self) -> Dict[str, Any]:
        route = self.registered_route
        action = route.action
        parameters = self.parameters or None

        return {
            'type': 'routes',
            'id': self.generate_route_id(),
            'attributes': {
                'node': route.node.get_id(),
                'action': action.get_name(),
                'uri': route.uri,
                'locale': route.locale,
                'methods': list(route.methods),
                'title': action.get_title(parameters, route.locale),
                'navTitle': action.get_nav_title(parameters, route.locale),
                'payload': action.payload.to_dict(parameters, route.locale),
            },
        }
