"""
Helper Functions
Shortcuts around an explicitly passed route tree
"""
from typing import Any, Dict, Optional

from routetree.exceptions import NodeNotFoundException
from routetree.route_node import RouteNode
from routetree.route_tree import RouteTree
from routetree.url_builder import RouteUrlBuilder


def route_node(tree: RouteTree, node_id: Optional[str] = None) -> RouteNode:
    """
    Get a specific node, or the current node if node_id is None

    Raises:
        NodeNotFoundException: If the node does not exist or no route is active
    """
    if node_id is not None:
        return tree.get_node(node_id)

    node = tree.get_current_node()
    if node is None:
        raise NodeNotFoundException("No route is currently active.")
    return node


def route_node_url(
    tree: RouteTree,
    node_id: Optional[str] = None,
    action: Optional[str] = None,
    parameters: Optional[Dict[str, Any]] = None,
    locale: Optional[str] = None,
    absolute: Optional[bool] = None
) -> RouteUrlBuilder:
    """
    URL builder for an action of a node

    Example:
        str(route_node_url(tree, 'photos', 'show', {'photo': 3}, 'en'))
    """
    return RouteUrlBuilder(tree, node_id, action, parameters, locale, absolute)


def trans_by_route(
    tree: RouteTree,
    key: str,
    use_parent_node: bool = False,
    node_id: Optional[str] = None,
    parameters: Optional[Dict[str, Any]] = None,
    locale: Optional[str] = None
) -> str:
    """
    Translate key relative to the translation file of a node

    Example:
        # current node 'photos' -> 'pages.photos.intro'
        trans_by_route(tree, 'intro')
    """
    node = route_node(tree, node_id or None)
    if use_parent_node and node.has_parent_node():
        node = node.get_parent_node()

    key = f"{node.get_content_lang_file()}.{key}"
    return node.translate(key, parameters, tree.locales.establish_locale(locale))
