"""
URL Generator
Generates URLs from named routes and paths (Laravel-style)
"""
from typing import TYPE_CHECKING, Dict, Optional
from urllib.parse import quote, urlencode
import re

from routetree.exceptions import RouteNotFoundException
from routetree.support import Config

if TYPE_CHECKING:
    from routetree.routing.router import Router


class UrlGenerator:
    """
    Usage:
        generator = UrlGenerator(router)
        url = generator.route('de.users.show', {'user': 1})  # http://localhost/de/users/1
    """

    def __init__(self, router: Optional['Router'] = None):
        self.router = router
        self._forced_scheme: Optional[str] = None
        self._forced_root: Optional[str] = None

    def to(self, path: str, parameters: Optional[Dict] = None, absolute: bool = True) -> str:
        """
        Generate a URL for the given path

        Args:
            path: URI path
            parameters: Query parameters
            absolute: Prefix the root URL
        """
        path = '/' + path.lstrip('/')
        if parameters:
            path = f"{path}?{urlencode(parameters)}"
        if absolute:
            return self._get_root_url() + path
        return path

    def route(self, name: str, parameters: Optional[Dict] = None, absolute: bool = True) -> str:
        """
        Generate a URL for a named route

        Parameters not used by the route's URI are appended as query string.

        Raises:
            RouteNotFoundException: If route name doesn't exist
        """
        route = self.router.get_route_by_name(name)
        if route is None:
            raise RouteNotFoundException(f"Route [{name}] not defined.")

        parameters = dict(parameters or {})
        used = set()

        def replace_param(match):
            param_name = match.group(1)
            if param_name not in parameters:
                return match.group(0)
            used.add(param_name)
            return quote(str(parameters[param_name]), safe='')

        uri = re.sub(r'\{(\w+)\??}', replace_param, route.get_uri())
        query = {key: value for key, value in parameters.items() if key not in used}

        return self.to(uri, query, absolute)

    def _get_root_url(self) -> str:
        root = self._forced_root or Config.get('routetree.root_url', '')
        root = root.rstrip('/')
        if self._forced_scheme and '://' in root:
            root = self._forced_scheme + root[root.index('://'):]
        return root

    def force_scheme(self, scheme: str):
        """Force URL scheme for generated URLs"""
        self._forced_scheme = scheme

    def force_root_url(self, root: str):
        """Force root URL for generated URLs (e.g. 'https://example.com')"""
        self._forced_root = root.rstrip('/')
