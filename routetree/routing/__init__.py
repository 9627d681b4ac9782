"""
Routing Package
In-memory router used by the route tree, plus the Sanic binding
"""
from routetree.routing.route import Route
from routetree.routing.route_collection import RouteCollection
from routetree.routing.router import Router
from routetree.routing.url import UrlGenerator
from routetree.routing.middleware import RouteMiddleware
from routetree.routing.route_middleware_registry import RouteMiddlewareRegistry, parse_middleware

__all__ = [
    'Route',
    'RouteCollection',
    'Router',
    'UrlGenerator',
    'RouteMiddleware',
    'RouteMiddlewareRegistry',
    'parse_middleware',
]
