"""
Route Tree
Registry of all route nodes and of the routes generated from them
"""
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from routetree.context import (
    RequestContext,
    get_request_context,
    reset_request_context,
    set_request_context,
)
from routetree.exceptions import (
    NodeAlreadyExistsException,
    NodeNotFoundException,
    RouteNameAlreadyRegisteredException,
)
from routetree.localization import LocaleProvider, Translator
from routetree.logging import getLogger
from routetree.registered_route import RegisteredRoute
from routetree.route_action import RouteAction
from routetree.route_node import RouteNode
from routetree.routing import Route, Router
from routetree.support import Config

logger = getLogger(__name__)


class RouteTree:
    """
    The route tree: builds nodes, generates one named route per
    (node, action, locale) and resolves the route of the current request.

    The tree is passed explicitly to whoever needs it; there is no global instance.

    Usage:
        tree = RouteTree(locales=LocaleProvider(['de', 'en']))

        tree.node('photos', lambda node: node.resource('photo', 'PhotoController'))
        tree.node('about', segment={'de': 'ueber-uns', 'en': 'about'}).view('pages.about')

        tree.generate_all_routes()

        with tree.activate_route('de.photos.show', {'photo': '12'}):
            tree.get_current_action().get_title()  # 'Fotos: 12'
    """

    def __init__(
        self,
        router: Optional[Router] = None,
        translator: Optional[Translator] = None,
        locales: Union[LocaleProvider, List[str], None] = None,
        absolute_urls: Optional[bool] = None,
        locale_prefix: Optional[bool] = None,
        lang_prefix: Optional[str] = None
    ):
        """
        Args:
            router: Router the generated routes are registered with
            translator: Translator for titles, resource segments and parameter values
            locales: Locale provider or list of locale codes (default: configured locales)
            absolute_urls: Generate absolute URLs by default
            locale_prefix: Use the locale code as path segment of the root node
            lang_prefix: Translation key prefix of node titles (e.g. 'pages')
        """
        self.router = router if router is not None else Router()
        self.translator = translator if translator is not None else Translator()

        if not isinstance(locales, LocaleProvider):
            locales = LocaleProvider(locales)
        self.locales = locales

        self.absolute_urls = (
            absolute_urls if absolute_urls is not None
            else Config.get('routetree.absolute_urls', True)
        )
        self.locale_prefix = (
            locale_prefix if locale_prefix is not None
            else Config.get('routetree.locale_prefix', True)
        )
        self.lang_prefix = (
            lang_prefix if lang_prefix is not None
            else Config.get('routetree.lang_prefix', 'pages')
        )

        self._nodes: Dict[str, RouteNode] = {}
        self._registered_routes: Dict[str, RegisteredRoute] = {}
        self._generated = False

        self.root = RouteNode('', tree=self)
        self._nodes[''] = self.root

    # =========================================================================
    # Tree building
    # =========================================================================

    def get_locales(self) -> List[str]:
        return self.locales.get_locales()

    def get_root_node(self) -> RouteNode:
        return self.root

    def register_node(self, node: RouteNode):
        """
        Index a node by its id (called by RouteNode.child)

        Raises:
            NodeAlreadyExistsException: If the id is taken
        """
        node_id = node.get_id()
        if node_id in self._nodes:
            raise NodeAlreadyExistsException(f"Node with ID [{node_id}] already exists.")
        self._nodes[node_id] = node

    def node(
        self,
        node_id: str,
        callback: Optional[Callable[[RouteNode], Any]] = None,
        segment: Union[str, Mapping[str, str], None] = None
    ) -> RouteNode:
        """
        Create the node with a dot-separated id below its (existing) parent

        Args:
            node_id: Full id, e.g. 'user.comment' (parent 'user' must exist)
            callback: Called with the new node to configure it
            segment: Path segment(s) of the new node

        Raises:
            NodeNotFoundException: If the parent node does not exist
            NodeAlreadyExistsException: If the node exists
        """
        parent_id, _, name = node_id.rpartition('.')
        return self.get_node(parent_id).child(name, callback, segment)

    def get_node(self, node_id: Optional[str] = None) -> RouteNode:
        """
        Get a node by id ('' or None for the root node)

        Raises:
            NodeNotFoundException: If no node has this id
        """
        node_id = node_id or ''
        if node_id not in self._nodes:
            raise NodeNotFoundException(f"Node with ID [{node_id}] could not be found.")
        return self._nodes[node_id]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get_nodes(self) -> Dict[str, RouteNode]:
        return dict(self._nodes)

    # =========================================================================
    # Generation & registry
    # =========================================================================

    def generate_all_routes(self) -> 'RouteTree':
        """
        Generate the routes of all nodes (once)

        Raises:
            RouteNameAlreadyRegisteredException: If two actions share a route name
            NodeNotFoundException: If a redirect target does not exist
        """
        if self._generated:
            return self

        self.root.generate_routes()
        self._generated = True

        logger.info(
            "Generated %d routes for %d nodes in locales %s",
            len(self._registered_routes), len(self._nodes), ','.join(self.get_locales())
        )
        return self

    def is_generated(self) -> bool:
        return self._generated

    def register_route(self, route: Route, action: RouteAction, locale: str) -> RegisteredRoute:
        """
        Record a generated route

        Raises:
            RouteNameAlreadyRegisteredException: If the route name is taken
        """
        name = route.get_name()
        if name in self._registered_routes:
            logger.error("Route name [%s] is already registered (uri: %s)", name, route.get_uri())
            raise RouteNameAlreadyRegisteredException(f"Route with name [{name}] is already registered.")

        registered = RegisteredRoute(
            name=name,
            locale=locale,
            methods=tuple(route.get_methods()),
            uri=route.get_uri(),
            action=action,
            node=action.get_route_node(),
            route=route,
        )
        self._registered_routes[name] = registered

        logger.debug("Registered route [%s] %s %s", name, '|'.join(registered.methods), registered.uri)
        return registered

    def get_registered_route(self, name: str) -> Optional[RegisteredRoute]:
        return self._registered_routes.get(name)

    def get_registered_routes(self) -> List[RegisteredRoute]:
        return list(self._registered_routes.values())

    # =========================================================================
    # Current request
    # =========================================================================

    def get_current_route(self) -> Optional[RegisteredRoute]:
        """The registered route matched by the current request (None outside of a request)"""
        context = get_request_context()
        if context is None or context.route_name is None:
            return None
        return self._registered_routes.get(context.route_name)

    def get_current_action(self) -> Optional[RouteAction]:
        route = self.get_current_route()
        return route.action if route is not None else None

    def get_current_node(self) -> Optional[RouteNode]:
        route = self.get_current_route()
        return route.node if route is not None else None

    def get_current_parameters(self) -> Dict[str, str]:
        context = get_request_context()
        return dict(context.parameters) if context is not None else {}

    def get_current_locale(self) -> str:
        return self.locales.current_locale()

    @contextmanager
    def activate_route(
        self,
        route_name: Optional[str],
        parameters: Optional[Mapping[str, Any]] = None
    ) -> Iterator[Optional[RegisteredRoute]]:
        """
        Bind route_name (and its parameters) as the current route for the with-block

        The locale of the route becomes the current locale.
        """
        registered = self._registered_routes.get(route_name) if route_name else None
        context = RequestContext(
            route_name=registered.name if registered is not None else None,
            parameters={key: str(value) for key, value in (parameters or {}).items()},
        )

        context_token = set_request_context(context)
        locale_token = self.locales.set_locale(registered.locale) if registered is not None else None
        try:
            yield registered
        finally:
            if locale_token is not None:
                self.locales.reset_locale(locale_token)
            reset_request_context(context_token)

    @contextmanager
    def activate(self, request) -> Iterator[Optional[RegisteredRoute]]:
        """
        Resolve a request through the router and bind its route for the with-block

        Args:
            request: Object with 'method' and 'path' attributes
        """
        route = self.router.matched_route(request)
        if route is None:
            with self.activate_route(None) as registered:
                yield registered
            return

        with self.activate_route(route.get_name(), route.extract_parameters(request.path)) as registered:
            yield registered

    def __repr__(self) -> str:
        return f"<RouteTree ({len(self._nodes)} nodes, {len(self._registered_routes)} routes)>"
