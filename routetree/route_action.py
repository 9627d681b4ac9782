"""
Route Action
One HTTP-verb-bound endpoint attached to a route node
"""
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from routetree.action_configs import ActionConfig, get_action_config
from routetree.action_kinds import (
    ActionKind,
    ControllerAction,
    HandlerAction,
    RedirectAction,
    ViewAction,
    resolve_action_kind,
)
from routetree.context import get_request_context
from routetree.exceptions import NodeNotFoundException, UrlParametersMissingException
from routetree.logging import getLogger
from routetree.parameters import fill_parameters
from routetree.payload import LocalizedValue, RoutePayload
from routetree.segments import ParameterRegex, Segments, path_parameters

if TYPE_CHECKING:
    from routetree.route_node import RouteNode

logger = getLogger(__name__)


class RouteAction:
    """
    An action of a route node

    Lifecycle: configured (kind and metadata set) -> generated (one route per
    locale registered with the tree). Whether it is active is decided per request.

    Usage:
        action = node.get('PageController@about')
        action.middleware('throttle', ['60', '1']).skip_middleware('auth')
        action.get_url({'page': 3}, locale='en')
    """

    def __init__(self, verb: str, action: Any, route_node: 'RouteNode', name: Optional[str] = None):
        self.verb = verb.upper()
        self.route_node = route_node
        self.kind: ActionKind = resolve_action_kind(action)
        self.regex = ParameterRegex()
        self.payload = RoutePayload(fallback=route_node.payload)

        self._name = name
        self._path_suffix = Segments()
        self._paths: Mapping[str, str] = MappingProxyType({})
        self._middleware: Dict[str, List[str]] = {}
        self._skip_middleware: List[str] = []

    # =========================================================================
    # Configuration
    # =========================================================================

    def name(self, name: str) -> 'RouteAction':
        """Set the name of this action (default: the lower-cased verb)"""
        self._name = name
        return self

    def get_name(self) -> str:
        if self._name is not None:
            return self._name
        return self.verb.lower()

    def get_config(self) -> Optional[ActionConfig]:
        return get_action_config(self.get_name())

    def get_route_node(self) -> 'RouteNode':
        return self.route_node

    def middleware(self, name: str, parameters: Optional[List[str]] = None) -> 'RouteAction':
        """Add a middleware to this action only"""
        self._middleware[name] = list(parameters or [])
        return self

    def skip_middleware(self, name: str) -> 'RouteAction':
        """Skip a middleware inherited from the node"""
        if name not in self._skip_middleware:
            self._skip_middleware.append(name)
        return self

    def where(self, parameter: Union[str, Dict[str, str]], pattern: Optional[str] = None) -> 'RouteAction':
        self.regex.where(parameter, pattern)
        return self

    def path_suffix(self, suffix: Union[str, Mapping[str, str]]) -> 'RouteAction':
        """Path appended to the node's path, a string or a {locale: suffix} mapping"""
        self._path_suffix.set(suffix, self.route_node.tree.get_locales())
        return self

    def get_path_suffix(self, locale: str) -> Optional[str]:
        return self._path_suffix.get(locale)

    def title(self, title: LocalizedValue) -> 'RouteAction':
        self.route_node.title(title, action=self.get_name())
        return self

    def nav_title(self, title: LocalizedValue) -> 'RouteAction':
        self.route_node.nav_title(title, action=self.get_name())
        return self

    # =========================================================================
    # Titles
    # =========================================================================

    def _explicit(self, key: str, parameters, locale) -> Optional[str]:
        title = self.route_node.get_data(key, parameters, locale, self.get_name())
        if title is None:
            return None
        return self.route_node.process_title(parameters, locale, title)

    def get_title(self, parameters: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        """
        Title of this action

        Resolution: title set for this action -> the action's default title -> the node's title
        """
        locale = self.route_node.tree.locales.establish_locale(locale)

        title = self._explicit('title', parameters, locale)
        if title is not None:
            return title

        config = self.get_config()
        if config is not None and config.default_title is not None:
            return config.default_title(self.route_node, parameters, locale)

        return self.route_node.get_title(parameters, locale)

    def get_nav_title(self, parameters: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        """
        Navigation title of this action

        Resolution: navTitle set for this action -> default navTitle -> title set
        for this action -> default title -> the node's navTitle
        """
        locale = self.route_node.tree.locales.establish_locale(locale)
        config = self.get_config()

        title = self._explicit('navTitle', parameters, locale)
        if title is not None:
            return title

        if config is not None and config.default_nav_title is not None:
            return config.default_nav_title(self.route_node, parameters, locale)

        title = self._explicit('title', parameters, locale)
        if title is not None:
            return title

        if config is not None and config.default_title is not None:
            return config.default_title(self.route_node, parameters, locale)

        return self.route_node.get_nav_title(parameters, locale)

    # =========================================================================
    # Route generation
    # =========================================================================

    def generate_uri(self, locale: str) -> str:
        """The node's path for locale plus this action's path-suffix"""
        uri = self.route_node.get_path(locale)
        suffix = self.get_path_suffix(locale)
        if suffix:
            uri = f"{uri}/{suffix}" if uri else suffix
        return uri

    def generate_route_name(self, locale: str) -> str:
        """'{locale}.{nodeId}.{actionName}', without node id for the root node"""
        node_id = self.route_node.get_id()
        if node_id:
            return f"{locale}.{node_id}.{self.get_name()}"
        return f"{locale}.{self.get_name()}"

    def compile_middleware(self) -> List[str]:
        """
        Node middleware minus skipped ones, overlaid with this action's middleware,
        as 'name' or 'name:param1,param2'
        """
        middleware: Dict[str, List[str]] = {}
        for name, parameters in self.route_node.get_middleware().items():
            if name not in self._skip_middleware:
                middleware[name] = parameters
        middleware.update(self._middleware)

        compiled = []
        for name, parameters in middleware.items():
            if parameters:
                compiled.append(f"{name}:{','.join(parameters)}")
            else:
                compiled.append(name)
        return compiled

    def compile_parameter_regex(self) -> Dict[str, str]:
        wheres = self.route_node.get_wheres()
        wheres.update(self.regex.all())
        return wheres

    def generate_routes(self):
        """
        Generate and register one route per configured locale

        Raises:
            NodeNotFoundException: If a redirect target does not exist
            RouteNameAlreadyRegisteredException: If a route name is taken
        """
        tree = self.route_node.tree
        middleware = self.compile_middleware()
        wheres = self.compile_parameter_regex()

        paths: Dict[str, str] = {}
        for locale in tree.get_locales():
            uri = self.generate_uri(locale)
            route_name = self.generate_route_name(locale)

            route = self._create_route(locale, uri)
            route.name(route_name).middleware(middleware).where(wheres)

            tree.register_route(route, self, locale)
            paths[locale] = uri

        self._paths = MappingProxyType(paths)

    def _create_route(self, locale: str, uri: str):
        router = self.route_node.tree.router
        kind = self.kind

        if isinstance(kind, ViewAction):
            return router.view(uri, kind.view, kind.data)

        if isinstance(kind, RedirectAction):
            try:
                target = self.route_node.tree.get_node(kind.target)
            except NodeNotFoundException:
                logger.error(
                    "Redirect target of route [%s] not found: %s",
                    self.generate_route_name(locale), kind.target
                )
                raise
            return router.redirect(uri, '/' + target.get_path(locale), kind.status)

        if isinstance(kind, ControllerAction):
            return router.match([self.verb], uri, kind.qualified(self.route_node.get_namespace()))

        if isinstance(kind, HandlerAction):
            return router.match([self.verb], uri, kind.handler)

        raise TypeError(f"Unknown action kind: {kind!r}")

    def is_generated(self) -> bool:
        return bool(self._paths)

    def get_paths(self) -> Mapping[str, str]:
        """The uri per locale this action was generated with"""
        return self._paths

    def get_path(self, locale: str) -> str:
        if locale in self._paths:
            return self._paths[locale]
        return self.generate_uri(locale)

    # =========================================================================
    # Parameters & URLs
    # =========================================================================

    def get_path_parameters(self, locale: Optional[str] = None) -> List[str]:
        """All parameters needed for the path of this action, in path order"""
        locale = self.route_node.tree.locales.establish_locale(locale)
        return path_parameters(self.get_path(locale))

    def auto_fill_path_parameters(
        self,
        parameters: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
        translate_values: bool = False
    ) -> Dict[str, str]:
        """
        Determine all path parameters for an URL to this action

        Stated parameters are used first; missing ones are taken from the current
        request, as far as the nodes binding them are currently active.

        Raises:
            UrlParametersMissingException: If parameters remain undetermined
        """
        locale = self.route_node.tree.locales.establish_locale(locale)
        filled: Dict[str, str] = {}

        required = self.get_path_parameters(locale)
        if not required:
            return filled

        missing = fill_parameters(parameters, required, filled)
        if missing:
            current = self.route_node.get_parameters_of_node_and_parents(True, locale, translate_values)
            missing = fill_parameters(current, missing, filled)

        if missing:
            raise UrlParametersMissingException(missing=missing)

        # Keep path order
        return {name: filled[name] for name in required}

    def get_url(
        self,
        parameters: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
        absolute: Optional[bool] = None
    ) -> str:
        """
        URL to this action

        Args:
            parameters: Route parameters (default: taken from the current request)
            locale: Locale of the URL (default: current locale)
            absolute: Absolute instead of relative URL (default: configured)

        Raises:
            UrlParametersMissingException: If parameters remain undetermined
        """
        tree = self.route_node.tree
        locale = tree.locales.establish_locale(locale)
        if absolute is None:
            absolute = tree.absolute_urls

        return tree.router.url(
            self.generate_route_name(locale),
            self.auto_fill_path_parameters(parameters, locale, True),
            absolute
        )

    # =========================================================================
    # Breadcrumbs & request state
    # =========================================================================

    def get_root_line_actions(self) -> List['RouteAction']:
        """
        All actions leading to this one, root first and this action last

        E.g. the edit action of resource node 'shop.photos' (path 'shop/photos/{photo}/edit'),
        where node 'shop' has a 'get' action:
            shop.get, shop.photos.index, shop.photos.show, shop.photos.edit
        """
        actions = [self]
        self._accumulate_root_line_actions(actions)
        return list(reversed(actions))

    def _accumulate_root_line_actions(self, actions: List['RouteAction']):
        last = self._accumulate_parent_actions(actions)

        node = self.route_node
        if node.has_parent_node():
            parent_action = node.get_parent_node().get_lowest_root_line_action()
            if parent_action is not None:
                actions.append(parent_action)
                parent_action._accumulate_root_line_actions(actions)

        return last

    def _accumulate_parent_actions(self, actions: List['RouteAction']):
        """Same-node parent actions, e.g. edit -> show -> index"""
        action = self
        seen = {self.get_name()}
        while True:
            config = action.get_config()
            if config is None or config.parent_action is None:
                return action
            if config.parent_action in seen or not self.route_node.has_action(config.parent_action):
                return action
            seen.add(config.parent_action)
            action = self.route_node.get_action(config.parent_action)
            actions.append(action)

    def is_active(self, parameters: Optional[Mapping[str, Any]] = None) -> bool:
        """
        True if this action is the one matched by the current request and, if
        parameters are stated, all of them equal the current route parameters
        """
        if self.route_node.tree.get_current_action() is not self:
            return False
        if parameters is None:
            return True

        context = get_request_context()
        current = context.parameters if context is not None else {}
        return all(
            name in current and str(current[name]) == str(value)
            for name, value in parameters.items()
        )

    def __repr__(self) -> str:
        return f"<RouteAction {self.verb} {self.route_node.get_id() or '(root)'}.{self.get_name()}>"
