"""
Sanic Binding
Mounts the generated routes of a route tree onto a Sanic app
"""
import inspect
from typing import Any, Callable, Dict, Optional

from sanic import Sanic, response

from routetree.action_kinds import ViewAction
from routetree.logging import getLogger
from routetree.routing.route import Route
from routetree.routing.route_middleware_registry import RouteMiddlewareRegistry
from routetree.support import ClassLoader

logger = getLogger(__name__)

ViewRenderer = Callable[[Any, str, Dict[str, Any]], Any]


async def render_view_as_json(request, view: str, data: Dict[str, Any]):
    """Default view renderer: no templating, the view name and data as JSON"""
    return response.json({'view': view, 'data': data})


class SanicRouteBinder:
    """
    Registers every generated route with Sanic; each handler runs with its
    route bound as the current route of the request.

    Usage:
        app = Sanic('MyApp')
        SanicRouteBinder(tree).register(app)

        # inside any handler or route middleware
        tree.get_current_action().get_title()
    """

    def __init__(
        self,
        tree,
        middleware_registry: Optional[RouteMiddlewareRegistry] = None,
        view_renderer: Optional[ViewRenderer] = None
    ):
        self.tree = tree
        self.middleware_registry = middleware_registry or RouteMiddlewareRegistry.from_config()
        self.view_renderer = view_renderer or render_view_as_json

    def register(self, app: Sanic) -> int:
        """
        Generate the tree's routes (if needed) and add them to app

        Returns:
            Number of registered routes
        """
        self.tree.generate_all_routes()

        route_count = 0
        for registered in self.tree.get_registered_routes():
            route = registered.route
            handler = self._make_action_handler(route)
            handler = self.middleware_registry.wrap_handler(handler, route.get_middleware())
            handler = self._make_activating_handler(handler, registered.name)

            compiled_uri = route.get_compiled_uri()
            app.add_route(
                handler,
                '/' + compiled_uri if compiled_uri else '/',
                methods=route.get_methods(),
                name=registered.name
            )
            route_count += 1

        logger.info("Registered %d tree routes with Sanic app [%s]", route_count, app.name)
        return route_count

    def _make_activating_handler(self, handler: Callable, route_name: str) -> Callable:
        tree = self.tree

        async def route_handler(request, **kwargs):
            with tree.activate_route(route_name, kwargs):
                return await handler(request, **kwargs)

        route_handler.__name__ = route_name.replace('.', '_')
        return route_handler

    def _make_action_handler(self, route: Route) -> Callable:
        action = route.get_action()

        if isinstance(action, ViewAction):
            renderer = self.view_renderer

            async def view_handler(request, **kwargs):
                return await _resolve(renderer(request, action.view, dict(action.data)))

            return view_handler

        if isinstance(action, str):
            # Controllers are instantiated per request
            async def controller_handler(request, **kwargs):
                method = ClassLoader.load_controller_action(action)
                return await _resolve(method(request, **kwargs))

            return controller_handler

        async def callable_handler(request, **kwargs):
            return await _resolve(action(request, **kwargs))

        return callable_handler


async def _resolve(result):
    if inspect.isawaitable(result):
        return await result
    return result
