"""
Route Collection
Manages a collection of routes with lookup capabilities
"""
from typing import Any, Dict, List, Optional

from routetree.logging import getLogger
from routetree.routing.route import Route

logger = getLogger(__name__)


class RouteCollection:
    """
    Collection of routes with name-based and method-based lookup
    """

    def __init__(self):
        self._routes: List[Route] = []
        self._routes_by_name: Dict[str, Route] = {}
        self._routes_by_method: Dict[str, List[Route]] = {
            'GET': [],
            'HEAD': [],
            'POST': [],
            'PUT': [],
            'PATCH': [],
            'DELETE': [],
            'OPTIONS': [],
        }

    def add(self, route: Route) -> Route:
        """
        Add a route to the collection

        Route names are assigned after creation (fluent name()), so the
        name index is rebuilt lazily by get_by_name().
        """
        self._routes.append(route)
        self._routes_by_name = {}
        for method in route.get_methods():
            self._routes_by_method.setdefault(method, []).append(route)
        return route

    def _names(self) -> Dict[str, Route]:
        routes_by_name: Dict[str, Route] = {}
        for route in self._routes:
            name = route.get_name()
            if not name:
                continue
            if name in routes_by_name:
                logger.warning(
                    "Duplicate route name: %s (existing URI: %s, new URI: %s)",
                    name, routes_by_name[name].get_uri(), route.get_uri()
                )
            routes_by_name[name] = route
        return routes_by_name

    def get_by_name(self, name: str) -> Optional[Route]:
        route = self._routes_by_name.get(name)
        if route is None or route.get_name() != name:
            self._routes_by_name = self._names()
            route = self._routes_by_name.get(name)
        return route

    def get_by_method(self, method: str) -> List[Route]:
        return self._routes_by_method.get(method.upper(), [])

    def match(self, uri: str, method: str) -> Optional[Route]:
        """
        Find the most specific route that matches the URI and method

        Routes with more literal segments win ('photos/featured' over
        'photos/{photo}'), ties go to the route registered first.

        Args:
            uri: Request path
            method: HTTP method
        """
        best: Optional[Route] = None
        for route in self.get_by_method(method):
            if not route.matches(uri, method):
                continue
            if best is None or route.get_literal_segment_count() > best.get_literal_segment_count():
                best = route
        return best

    def get_routes(self) -> List[Route]:
        return self._routes

    def has_named_route(self, name: str) -> bool:
        return self.get_by_name(name) is not None

    def count(self) -> int:
        return len(self._routes)

    def clear(self):
        self._routes.clear()
        self._routes_by_name = {}
        for method in self._routes_by_method:
            self._routes_by_method[method] = []

    def __iter__(self):
        return iter(self._routes)

    def __len__(self):
        return len(self._routes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Summary of the collection, organized by name and method
        """
        routes_list = []
        for route in self._routes:
            route_dict = {
                'name': route.get_name(),
                'uri': route.get_uri(),
                'methods': route.get_methods(),
                'action': route.get_action_name(),
                'middleware': route.get_middleware(),
                'parameters': route.get_parameter_names(),
            }
            if route.get_wheres():
                route_dict['constraints'] = route.get_wheres()
            routes_list.append(route_dict)

        return {
            'total': len(self._routes),
            'routes': routes_list,
            'by_method': {
                method: len(routes)
                for method, routes in self._routes_by_method.items()
                if routes
            },
            'named_routes': len(self._names()),
        }

    def __repr__(self):
        return f"<RouteCollection ({len(self._routes)} routes)>"
