"""
Route Middleware Registry
Resolves compiled middleware ('name' or 'name:p1,p2') to registered middleware instances
"""
from functools import wraps
from typing import Callable, Dict, List, Optional, Tuple

from routetree.logging import getLogger
from routetree.routing.middleware import RouteMiddleware
from routetree.support import ClassLoader, Config

logger = getLogger(__name__)


def parse_middleware(compiled: str) -> Tuple[str, List[str]]:
    """
    Split a compiled middleware entry into name and parameters

    Example:
        parse_middleware('throttle:60,1')  # ('throttle', ['60', '1'])
    """
    name, _, parameters = compiled.partition(':')
    return name, parameters.split(',') if parameters else []


class RouteMiddlewareRegistry:
    def __init__(self):
        self._middleware: Dict[str, RouteMiddleware] = {}

    @classmethod
    def from_config(cls) -> 'RouteMiddlewareRegistry':
        """Build a registry from 'routetree.route_middleware' ({name: class path})"""
        registry = cls()
        for name, class_path in Config.get('routetree.route_middleware', {}).items():
            registry.register(name, ClassLoader.load(class_path)())
        return registry

    def register(self, name: str, middleware_instance: RouteMiddleware):
        self._middleware[name] = middleware_instance

    def get(self, name: str) -> Optional[RouteMiddleware]:
        return self._middleware.get(name)

    def has(self, name: str) -> bool:
        return name in self._middleware

    def wrap_handler(self, handler: Callable, middleware: List[str]) -> Callable:
        if not middleware:
            return handler

        # Apply in reverse order so execution order matches list order
        wrapped = handler
        for compiled in reversed(middleware):
            name, parameters = parse_middleware(compiled)
            instance = self.get(name)
            if instance:
                wrapped = self._create_wrapper(wrapped, instance, name, parameters)
            else:
                logger.warning("Route middleware '%s' not found in registry", name)

        return wrapped

    def _create_wrapper(
        self,
        handler: Callable,
        middleware: RouteMiddleware,
        name: str,
        parameters: List[str]
    ) -> Callable:
        @wraps(handler)
        async def wrapper(request, *args, **kwargs):
            result = await middleware.before_request(request, *parameters)
            if result is not None:
                # Middleware returned a response early
                return result

            response = await handler(request, *args, **kwargs)
            return await middleware.after_response(request, response, *parameters)

        wrapper._middleware_name = name
        return wrapper

    def get_registered(self) -> List[str]:
        return list(self._middleware.keys())
