"""
Route URL Builder
Fluent construction of URLs to node actions
"""
from typing import TYPE_CHECKING, Any, Mapping, Optional

from routetree.exceptions import ActionNotFoundException, NodeNotFoundException

if TYPE_CHECKING:
    from routetree.route_action import RouteAction
    from routetree.route_node import RouteNode
    from routetree.route_tree import RouteTree


class RouteUrlBuilder:
    """
    Usage:
        str(RouteUrlBuilder(tree, 'photos'))                                   # index of 'photos'
        RouteUrlBuilder(tree).action('edit').parameters({'photo': 3}).generate()
        RouteUrlBuilder(tree, 'about').locale('en').absolute(False).generate()  # '/en/about'
    """

    def __init__(
        self,
        tree: 'RouteTree',
        node_id: Optional[str] = None,
        action: Optional[str] = None,
        parameters: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
        absolute: Optional[bool] = None
    ):
        """
        Args:
            tree: The route tree
            node_id: Target node (default: the current node)
            action: Target action (default: 'index', else 'get', else the node's only action)
            parameters: Route parameters (default: taken from the current request)
            locale: Locale of the URL (default: current locale)
            absolute: Absolute instead of relative URL (default: configured)
        """
        self.tree = tree
        self._node_id = node_id
        self._action = action
        self._parameters = parameters
        self._locale = locale
        self._absolute = absolute

    def node(self, node_id: str) -> 'RouteUrlBuilder':
        self._node_id = node_id
        return self

    def action(self, action: str) -> 'RouteUrlBuilder':
        self._action = action
        return self

    def parameters(self, parameters: Mapping[str, Any]) -> 'RouteUrlBuilder':
        self._parameters = parameters
        return self

    def locale(self, locale: str) -> 'RouteUrlBuilder':
        self._locale = locale
        return self

    def absolute(self, absolute: bool = True) -> 'RouteUrlBuilder':
        self._absolute = absolute
        return self

    def _resolve_node(self) -> 'RouteNode':
        if self._node_id is not None:
            return self.tree.get_node(self._node_id)
        node = self.tree.get_current_node()
        if node is None:
            raise NodeNotFoundException("No node id stated and no route is currently active.")
        return node

    def _resolve_action(self, node: 'RouteNode') -> 'RouteAction':
        if self._action is not None:
            return node.get_action(self._action)
        for name in ('index', 'get'):
            if node.has_action(name):
                return node.get_action(name)
        actions = node.get_actions()
        if len(actions) == 1:
            return actions[0]
        raise ActionNotFoundException(
            f"Node with ID [{node.get_id()}] has no default action; state one explicitly."
        )

    def generate(self) -> str:
        """
        Raises:
            NodeNotFoundException: If the node does not exist
            ActionNotFoundException: If the action does not exist or cannot be defaulted
            UrlParametersMissingException: If path parameters remain undetermined
        """
        node = self._resolve_node()
        return self._resolve_action(node).get_url(self._parameters, self._locale, self._absolute)

    def __str__(self) -> str:
        return self.generate()
