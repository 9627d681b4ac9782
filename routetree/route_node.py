"""
Route Node
One segment position in the route hierarchy
"""
import re
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Union

from routetree.action_kinds import RedirectAction, ViewAction
from routetree.context import get_request_context
from routetree.defaults import DEFAULT_REDIRECT_STATUS
from routetree.exceptions import (
    ActionNotFoundException,
    NodeAlreadyExistsException,
    NodeNotFoundException,
)
from routetree.parameters import TranslatableRouteKey
from routetree.payload import LocalizedValue, RoutePayload, resolve_localized
from routetree.route_action import RouteAction
from routetree.segments import ParameterRegex, Segments, parameter_name
from routetree.support import Config, Str

if TYPE_CHECKING:
    from routetree.resource import ResourceRegistrar
    from routetree.route_tree import RouteTree

PARAMETER_TOKEN = re.compile(r'\{(\w+)\}')


class RouteNode:
    """
    A node of the route tree

    Usage:
        tree.node('photos', lambda node: node.resource('photo', 'PhotoController'))

        about = tree.node('about').segment({'de': 'ueber-uns', 'en': 'about-us'})
        about.get('PageController@about').middleware('cache', ['60'])
    """

    def __init__(self, name: str, parent: Optional['RouteNode'] = None, tree: Optional['RouteTree'] = None):
        if parent is None and tree is None:
            raise ValueError("A route node needs either a parent node or a tree")

        self.name = name
        self.parent = parent
        self.tree: 'RouteTree' = tree if tree is not None else parent.tree
        self.children: Dict[str, 'RouteNode'] = {}
        self.actions: List[RouteAction] = []
        self.segments = Segments()
        self.regex = ParameterRegex()
        self.payload = RoutePayload()

        self._parameter: Optional[str] = None
        self._parameter_model: Optional[TranslatableRouteKey] = None
        self._middleware: Dict[str, List[str]] = {}
        self._skip_middleware: List[str] = []
        self._namespace: Optional[str] = None
        self._titles: Dict[Optional[str], LocalizedValue] = {}
        self._nav_titles: Dict[Optional[str], LocalizedValue] = {}

        if parent is None or parent.is_root():
            self._id = name
        else:
            self._id = f"{parent.get_id()}.{name}"

    # =========================================================================
    # Identity & hierarchy
    # =========================================================================

    def get_id(self) -> str:
        return self._id

    def is_root(self) -> bool:
        return self.parent is None

    def has_parent_node(self) -> bool:
        return self.parent is not None

    def get_parent_node(self) -> Optional['RouteNode']:
        return self.parent

    def get_root_line_nodes(self) -> List['RouteNode']:
        """All nodes from the root down to this node (inclusive)"""
        nodes = []
        node = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        return list(reversed(nodes))

    def child(
        self,
        name: str,
        callback: Optional[Callable[['RouteNode'], Any]] = None,
        segment: Union[str, Mapping[str, str], None] = None
    ) -> 'RouteNode':
        """
        Add a child node

        Args:
            name: Key of the child, relative to this node
            callback: Called with the new node to configure it
            segment: Path segment(s) (default: the name)

        Raises:
            NodeAlreadyExistsException: If a child with this name exists
        """
        if not name or '.' in name:
            raise ValueError(f"Invalid node name [{name}]: must be non-empty and contain no dots")
        if name in self.children:
            raise NodeAlreadyExistsException(f"Node with ID [{self._child_id(name)}] already exists.")

        node = RouteNode(name, parent=self)
        self.children[name] = node
        self.tree.register_node(node)

        if segment is not None:
            node.segment(segment)
        if callback is not None:
            callback(node)

        return node

    def _child_id(self, name: str) -> str:
        return f"{self._id}.{name}" if self._id else name

    def has_child(self, name: str) -> bool:
        return name in self.children

    def get_child(self, name: str) -> 'RouteNode':
        if name not in self.children:
            raise NodeNotFoundException(f"Node with ID [{self._child_id(name)}] could not be found.")
        return self.children[name]

    def get_child_by_path(self, path: str) -> 'RouteNode':
        """
        Get a descendant by its dot-separated id relative to this node ('comment.reply')

        Raises:
            NodeNotFoundException: If any part of the path does not exist
        """
        node = self
        for name in path.split('.'):
            node = node.get_child(name)
        return node

    def get_children(self) -> List['RouteNode']:
        return list(self.children.values())

    # =========================================================================
    # Segments & paths
    # =========================================================================

    def segment(self, segment: Union[str, Mapping[str, str]]) -> 'RouteNode':
        """
        Set the path-segment(s) of this node

        A string is used for all locales, a mapping only for the locales it contains.
        A parameter segment ('{photo}') also registers the parameter, if none is set yet.
        """
        for value in self.segments.set(segment, self.tree.get_locales()):
            name = parameter_name(value)
            if name is not None and self._parameter is None:
                self._parameter = name
        return self

    def get_segment(self, locale: str) -> str:
        if self.segments.has(locale):
            return self.segments.get(locale)
        if self.is_root():
            return locale if self.tree.locale_prefix else ''
        return self.name

    def get_path(self, locale: Optional[str] = None) -> str:
        """The path of this node for locale: all non-empty root line segments joined by '/'"""
        locale = self.tree.locales.establish_locale(locale)
        segments = [node.get_segment(locale) for node in self.get_root_line_nodes()]
        return '/'.join(segment for segment in segments if segment)

    # =========================================================================
    # Parameters
    # =========================================================================

    def parameter(self, name: str, model: Optional[TranslatableRouteKey] = None) -> 'RouteNode':
        """Bind a route parameter (and optionally a model translating its values) to this node"""
        self._parameter = name
        if model is not None:
            self._parameter_model = model
        return self

    def has_parameter(self) -> bool:
        return self._parameter is not None

    def get_parameter(self) -> Optional[str]:
        return self._parameter

    def where(self, parameter: Union[str, Dict[str, str]], pattern: Optional[str] = None) -> 'RouteNode':
        self.regex.where(parameter, pattern)
        return self

    def get_wheres(self) -> Dict[str, str]:
        """Parameter regexes of all parent nodes, overridden by this node's"""
        wheres = self.parent.get_wheres() if self.parent is not None else {}
        wheres.update(self.regex.all())
        return wheres

    def get_parameter_node(self, name: str) -> Optional['RouteNode']:
        """The nearest node of the root line binding parameter name"""
        for node in reversed(self.get_root_line_nodes()):
            if node.get_parameter() == name:
                return node
        return None

    def get_current_value(self) -> Optional[str]:
        """The value the current request binds to this node's parameter (None if inactive)"""
        if self._parameter is None:
            return None
        context = get_request_context()
        if context is None or not self.is_active():
            return None
        return context.parameters.get(self._parameter)

    def get_active_value(self, parameters: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        """
        Value of this node's parameter: stated in parameters, else bound by the
        current request, else the raw '{parameter}' token
        """
        if self._parameter is None:
            return ''
        if parameters and parameters.get(self._parameter) is not None:
            return str(parameters[self._parameter])

        value = self.get_current_value()
        if value is None:
            return '{' + self._parameter + '}'

        current_locale = self.tree.get_current_locale()
        if locale is not None and locale != current_locale:
            value = self.translate_parameter_value(value, locale, current_locale)
        return value

    def translate_parameter_value(self, value: str, to_locale: str, from_locale: str) -> str:
        """
        Translate a parameter value between locales

        Uses the bound model if it implements translate_route_key(), else the
        translation key '<lang-file>.parameters.<parameter>.<value>' of to_locale.
        Untranslatable values are returned unchanged.
        """
        if to_locale == from_locale:
            return value
        if isinstance(self._parameter_model, TranslatableRouteKey):
            return self._parameter_model.translate_route_key(value, to_locale, from_locale)

        key = f"{self.get_content_lang_file()}.parameters.{self._parameter}.{value}"
        translated = self.translate(key, {}, to_locale)
        return value if translated == key else translated

    def get_parameters_of_node_and_parents(
        self,
        only_active: bool = False,
        locale: Optional[str] = None,
        translate: bool = False
    ) -> Dict[str, str]:
        """
        Current request values of the parameters bound to this node and its parents

        Args:
            only_active: Only include nodes that are part of the currently active route chain
            locale: Target locale of the values
            translate: Translate values from the current locale into locale
        """
        parameters: Dict[str, str] = {}
        context = get_request_context()
        if context is None:
            return parameters

        current_locale = self.tree.get_current_locale()
        for node in self.get_root_line_nodes():
            name = node.get_parameter()
            if name is None or name not in context.parameters:
                continue
            if only_active and not node.is_active():
                continue

            value = str(context.parameters[name])
            if translate and locale is not None and locale != current_locale:
                value = node.translate_parameter_value(value, locale, current_locale)
            parameters[name] = value

        return parameters

    # =========================================================================
    # Middleware & namespace
    # =========================================================================

    def middleware(self, name: str, parameters: Optional[List[str]] = None) -> 'RouteNode':
        """Add a middleware, inherited by all child nodes and actions"""
        self._middleware[name] = list(parameters or [])
        return self

    def skip_middleware(self, name: str) -> 'RouteNode':
        """Do not inherit middleware name from parent nodes"""
        if name not in self._skip_middleware:
            self._skip_middleware.append(name)
        return self

    def get_middleware(self) -> Dict[str, List[str]]:
        """Middleware inherited from parent nodes, overridden by this node's own"""
        middleware: Dict[str, List[str]] = {}
        if self.parent is not None:
            for name, parameters in self.parent.get_middleware().items():
                if name not in self._skip_middleware:
                    middleware[name] = parameters
        middleware.update(self._middleware)
        return middleware

    def namespace(self, namespace: str) -> 'RouteNode':
        """Module path prefixed to bare controller classes of this node and its children"""
        self._namespace = namespace
        return self

    def get_namespace(self) -> Optional[str]:
        if self._namespace is not None:
            return self._namespace
        return self.parent.get_namespace() if self.parent is not None else None

    # =========================================================================
    # Actions
    # =========================================================================

    def add_action(self, verb: str, action: Any, name: Optional[str] = None) -> RouteAction:
        route_action = RouteAction(verb, action, self, name)
        self.actions.append(route_action)
        return route_action

    def get(self, action: Any, name: Optional[str] = None) -> RouteAction:
        return self.add_action('GET', action, name)

    def post(self, action: Any, name: Optional[str] = None) -> RouteAction:
        return self.add_action('POST', action, name)

    def put(self, action: Any, name: Optional[str] = None) -> RouteAction:
        return self.add_action('PUT', action, name)

    def patch(self, action: Any, name: Optional[str] = None) -> RouteAction:
        return self.add_action('PATCH', action, name)

    def delete(self, action: Any, name: Optional[str] = None) -> RouteAction:
        return self.add_action('DELETE', action, name)

    def view(self, view: str, data: Optional[Dict[str, Any]] = None, name: Optional[str] = None) -> RouteAction:
        return self.add_action('GET', ViewAction(view, dict(data or {})), name)

    def redirect(self, target: str, status: Optional[int] = None, name: Optional[str] = None) -> RouteAction:
        """Redirect to the node with id target (status defaults to routetree.redirect_status)"""
        if status is None:
            status = Config.get('routetree.redirect_status', DEFAULT_REDIRECT_STATUS)
        return self.add_action('GET', RedirectAction(target, status), name)

    def resource(self, parameter: str, controller: str) -> 'ResourceRegistrar':
        """
        Add the resource actions index, create, store, show, edit, update and destroy

        Usage:
            node.resource('photo', 'PhotoController').only(['index', 'show'])
        """
        from routetree.resource import ResourceRegistrar
        return ResourceRegistrar(self, parameter, controller).register()

    def has_action(self, name: str) -> bool:
        return any(action.get_name() == name for action in self.actions)

    def get_action(self, name: str) -> RouteAction:
        for action in self.actions:
            if action.get_name() == name:
                return action
        raise ActionNotFoundException(f"Node with ID [{self._id}] has no action [{name}].")

    def get_actions(self) -> List[RouteAction]:
        return list(self.actions)

    def remove_action(self, name: str) -> 'RouteNode':
        self.actions = [action for action in self.actions if action.get_name() != name]
        return self

    def get_lowest_root_line_action(self) -> Optional[RouteAction]:
        """
        The most specific action of this node to appear in breadcrumbs of child nodes:
        'show' while the node's parameter is bound by the current request, else
        'index', else 'get', else the first action
        """
        if self.has_action('show') and self.get_current_value() is not None:
            return self.get_action('show')
        for name in ('index', 'get'):
            if self.has_action(name):
                return self.get_action(name)
        return self.actions[0] if self.actions else None

    # =========================================================================
    # Titles & translation
    # =========================================================================

    def title(self, title: LocalizedValue, action: Optional[str] = None) -> 'RouteNode':
        """
        Set the title of this node (or of one of its actions)

        title may be a string, a {locale: string} mapping or a callable (parameters, locale) -> string
        """
        self._titles[action] = title
        return self

    def nav_title(self, title: LocalizedValue, action: Optional[str] = None) -> 'RouteNode':
        self._nav_titles[action] = title
        return self

    def get_data(
        self,
        key: str,
        parameters: Optional[Dict[str, Any]] = None,
        locale: Optional[str] = None,
        action: Optional[str] = None
    ) -> Optional[str]:
        """Explicitly configured 'title' / 'navTitle' for locale (None if not set)"""
        store = self._nav_titles if key == 'navTitle' else self._titles
        if action not in store:
            return None
        return resolve_localized(store[action], parameters, locale)

    def process_title(self, parameters: Optional[Dict[str, Any]], locale: str, title: str) -> str:
        """Replace '{parameter}' tokens with stated or active values; unresolved tokens stay"""

        def replace(match):
            name = match.group(1)
            if parameters and parameters.get(name) is not None:
                return str(parameters[name])
            node = self.get_parameter_node(name)
            if node is not None and node.get_current_value() is not None:
                return node.get_active_value(None, locale)
            return match.group(0)

        return PARAMETER_TOKEN.sub(replace, title)

    def get_content_lang_file(self) -> str:
        prefix = self.tree.lang_prefix
        return f"{prefix}.{self._id}" if self._id else prefix

    def translate(self, key: str, params: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        return self.tree.translator.translate(key, params or {}, locale)

    def _translate_title(self, key: str, parameters: Optional[Dict[str, Any]], locale: str) -> Optional[str]:
        key = f"{self.get_content_lang_file()}.{key}"
        params = {
            node.get_parameter(): node.get_active_value(parameters, locale)
            for node in self.get_root_line_nodes()
            if node.has_parameter()
        }
        translated = self.translate(key, params, locale)
        return None if translated == key else translated

    def get_title(self, parameters: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        """Explicit title, else translation '<lang-file>.title', else the prettified node name"""
        locale = self.tree.locales.establish_locale(locale)

        title = self.get_data('title', parameters, locale)
        if title is not None:
            return self.process_title(parameters, locale, title)

        title = self._translate_title('title', parameters, locale)
        if title is not None:
            return self.process_title(parameters, locale, title)

        return Str.title(self.name)

    def get_nav_title(self, parameters: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        """Explicit navTitle, else translation '<lang-file>.navTitle', else the title"""
        locale = self.tree.locales.establish_locale(locale)

        title = self.get_data('navTitle', parameters, locale)
        if title is not None:
            return self.process_title(parameters, locale, title)

        title = self._translate_title('navTitle', parameters, locale)
        if title is not None:
            return self.process_title(parameters, locale, title)

        return self.get_title(parameters, locale)

    # =========================================================================
    # Request state
    # =========================================================================

    def is_active(self) -> bool:
        """True if the current request's node is this node or one of its descendants"""
        current = self.tree.get_current_node()
        if current is None:
            return False
        if current is self or self.is_root():
            return True
        return current.get_id().startswith(self._id + '.')

    # =========================================================================
    # Generation
    # =========================================================================

    def generate_routes(self):
        """Generate the routes of all actions of this node and its descendants"""
        for action in self.actions:
            action.generate_routes()
        for child in self.children.values():
            child.generate_routes()

    def __repr__(self) -> str:
        return f"<RouteNode {self._id or '(root)'}>"
