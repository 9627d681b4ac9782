"""
HTTP Package
JSON-able representations of generated routes
"""
from routetree.http.resource import RouteResource

__all__ = [
    'RouteResource',
]
