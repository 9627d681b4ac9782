"""
RouteTree
Hierarchical, multi-language route definitions for Sanic applications
"""
from routetree.route_tree import RouteTree
from routetree.route_node import RouteNode
from routetree.route_action import RouteAction
from routetree.registered_route import RegisteredRoute
from routetree.resource import ResourceRegistrar
from routetree.url_builder import RouteUrlBuilder
from routetree.localization import LocaleProvider, Translator
from routetree.helpers import route_node, route_node_url, trans_by_route

__version__ = '1.0.0'

__all__ = [
    'RouteTree',
    'RouteNode',
    'RouteAction',
    'RegisteredRoute',
    'ResourceRegistrar',
    'RouteUrlBuilder',
    'LocaleProvider',
    'Translator',
    'route_node',
    'route_node_url',
    'trans_by_route',
]
