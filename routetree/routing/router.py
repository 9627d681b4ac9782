"""
Router
In-memory route registration, request matching and URL generation
"""
from typing import Any, Callable, Dict, List, Optional, Union

from sanic import response

from routetree.action_kinds import ViewAction
from routetree.routing.route import Route
from routetree.routing.route_collection import RouteCollection
from routetree.routing.url import UrlGenerator


class Router:
    """
    Usage:
        router = Router()
        router.get('users/{user}', 'UserController@show').name('users.show')
        router.url('users.show', {'user': 1})  # http://localhost/users/1
    """

    def __init__(self, url_generator: Optional[UrlGenerator] = None):
        self.routes = RouteCollection()
        self.url_generator = url_generator or UrlGenerator(self)

    # =========================================================================
    # Route Registration Methods
    # =========================================================================

    def get(self, uri: str, action: Union[Callable, str, Any] = None) -> Route:
        return self.add_route(['GET'], uri, action)

    def post(self, uri: str, action: Union[Callable, str, Any] = None) -> Route:
        return self.add_route(['POST'], uri, action)

    def put(self, uri: str, action: Union[Callable, str, Any] = None) -> Route:
        return self.add_route(['PUT'], uri, action)

    def patch(self, uri: str, action: Union[Callable, str, Any] = None) -> Route:
        return self.add_route(['PATCH'], uri, action)

    def delete(self, uri: str, action: Union[Callable, str, Any] = None) -> Route:
        return self.add_route(['DELETE'], uri, action)

    def any(self, uri: str, action: Union[Callable, str, Any] = None) -> Route:
        """Register a route for all HTTP methods"""
        methods = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']
        return self.add_route(methods, uri, action)

    def match(self, methods: List[str], uri: str, action: Union[Callable, str, Any] = None) -> Route:
        """
        Register a route for specific HTTP methods

        Args:
            methods: List of HTTP methods
            uri: Route URI
            action: Handler function or 'Controller@method' string
        """
        return self.add_route(methods, uri, action)

    def add_route(self, methods: List[str], uri: str, action: Union[Callable, str, Any]) -> Route:
        return self.routes.add(Route(methods, uri, action))

    # =========================================================================
    # Special Route Types
    # =========================================================================

    def redirect(self, uri: str, destination: str, status: int = 302) -> Route:
        """Create a route redirecting to destination"""

        async def redirect_handler(request, **kwargs):
            return response.redirect(destination, status=status)

        return self.get(uri, redirect_handler)

    def permanent_redirect(self, uri: str, destination: str) -> Route:
        return self.redirect(uri, destination, 301)

    def view(self, uri: str, view_name: str, data: Optional[Dict] = None) -> Route:
        """Create a route rendering a view; rendering is left to the server binding"""
        return self.get(uri, ViewAction(view_name, dict(data or {})))

    # =========================================================================
    # Route Resolution
    # =========================================================================

    def get_routes(self) -> List[Route]:
        return self.routes.get_routes()

    def get_collection(self) -> RouteCollection:
        return self.routes

    def get_route_by_name(self, name: str) -> Optional[Route]:
        return self.routes.get_by_name(name)

    def has(self, name: str) -> bool:
        return self.routes.has_named_route(name)

    def matched_route(self, request) -> Optional[Route]:
        """
        The route matching a request

        Args:
            request: Object with 'method' and 'path' attributes (e.g. a Sanic request)
        """
        return self.routes.match(request.path, request.method)

    def url(self, name: str, parameters: Optional[Dict] = None, absolute: bool = True) -> str:
        """Generate the URL of a named route"""
        return self.url_generator.route(name, parameters, absolute)
