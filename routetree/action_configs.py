"""
Action Configs
Static metadata per action name: HTTP verb, resource path-suffix,
same-node parent action (for breadcrumbs) and default title functions.

All functions are pure and receive the owning node explicitly.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:
    from routetree.route_node import RouteNode

TitleFunction = Callable[['RouteNode', Optional[Dict[str, str]], str], str]
SuffixFunction = Callable[['RouteNode', str], str]


@dataclass(frozen=True)
class ActionConfig:
    verb: str
    suffix: Optional[SuffixFunction] = None
    parent_action: Optional[str] = None
    default_title: Optional[TitleFunction] = None
    default_nav_title: Optional[TitleFunction] = None


# -----------------------------------------------------------------------------
# Resource path-suffixes
# -----------------------------------------------------------------------------

def _create_suffix(node: 'RouteNode', locale: str) -> str:
    return node.translate('routetree.createSegment', {}, locale)


def _item_suffix(node: 'RouteNode', locale: str) -> str:
    return '{' + node.get_parameter() + '}'


def _edit_suffix(node: 'RouteNode', locale: str) -> str:
    return _item_suffix(node, locale) + '/' + node.translate('routetree.editSegment', {}, locale)


# -----------------------------------------------------------------------------
# Default titles
# -----------------------------------------------------------------------------

def _index_title(node, parameters, locale):
    return node.get_title(parameters, locale)


def _index_nav_title(node, parameters, locale):
    return node.get_nav_title(parameters, locale)


def _create_title(node, parameters, locale):
    return node.translate('routetree.createTitle', {'resource': node.get_title(parameters, locale)}, locale)


def _create_nav_title(node, parameters, locale):
    return node.translate('routetree.createNavTitle', {}, locale)


def _show_title(node, parameters, locale):
    return node.get_title(parameters, locale) + ': ' + node.get_active_value(parameters, locale)


def _show_nav_title(node, parameters, locale):
    return node.get_active_value(parameters, locale)


def _edit_title(node, parameters, locale):
    return node.translate('routetree.editTitle', {
        'resource': node.get_title(parameters, locale),
        'item': node.get_active_value(parameters, locale),
    }, locale)


def _edit_nav_title(node, parameters, locale):
    return node.translate('routetree.editNavTitle', {}, locale)


ACTION_CONFIGS: Dict[str, ActionConfig] = {
    'index': ActionConfig(
        verb='GET',
        default_title=_index_title,
        default_nav_title=_index_nav_title,
    ),
    'create': ActionConfig(
        verb='GET',
        suffix=_create_suffix,
        parent_action='index',
        default_title=_create_title,
        default_nav_title=_create_nav_title,
    ),
    'store': ActionConfig(verb='POST'),
    'show': ActionConfig(
        verb='GET',
        suffix=_item_suffix,
        parent_action='index',
        default_title=_show_title,
        default_nav_title=_show_nav_title,
    ),
    'edit': ActionConfig(
        verb='GET',
        suffix=_edit_suffix,
        parent_action='show',
        default_title=_edit_title,
        default_nav_title=_edit_nav_title,
    ),
    'update': ActionConfig(verb='PUT', suffix=_item_suffix, parent_action='index'),
    'destroy': ActionConfig(verb='DELETE', suffix=_item_suffix, parent_action='index'),
    'get': ActionConfig(verb='GET'),
    'post': ActionConfig(verb='POST'),
    'put': ActionConfig(verb='PUT'),
    'patch': ActionConfig(verb='PATCH'),
    'delete': ActionConfig(verb='DELETE'),
}

# Order in which resource actions are created
RESOURCE_ACTIONS = ['index', 'create', 'store', 'show', 'edit', 'update', 'destroy']


def get_action_config(name: str) -> Optional[ActionConfig]:
    return ACTION_CONFIGS.get(name)
