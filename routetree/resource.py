"""
Resource Registrar
Adds the seven resource actions to a route node
"""
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from routetree.action_configs import RESOURCE_ACTIONS, get_action_config
from routetree.action_kinds import ControllerAction
from routetree.logging import getLogger

if TYPE_CHECKING:
    from routetree.route_action import RouteAction
    from routetree.route_node import RouteNode

logger = getLogger(__name__)


class ResourceRegistrar:
    """
    Registers index, create, store, show, edit, update and destroy on a node

    Paths (node 'photos', parameter 'photo', locale 'en'):
        GET    photos                 index
        GET    photos/create          create
        POST   photos                 store
        GET    photos/{photo}         show
        GET    photos/{photo}/edit    edit
        PUT    photos/{photo}         update
        DELETE photos/{photo}         destroy
    """

    def __init__(self, node: 'RouteNode', parameter: str, controller: str):
        self.node = node
        self.parameter = parameter
        self.controller = controller
        self.actions: Dict[str, 'RouteAction'] = {}

    def register(self) -> 'ResourceRegistrar':
        if not self.node.has_parameter():
            self.node.parameter(self.parameter)

        locales = self.node.tree.get_locales()
        for name in RESOURCE_ACTIONS:
            config = get_action_config(name)
            action = self.node.add_action(
                config.verb,
                ControllerAction(f"{self.controller}@{name}"),
                name
            )
            if config.suffix is not None:
                action.path_suffix({locale: config.suffix(self.node, locale) for locale in locales})
            self.actions[name] = action

        logger.debug("Registered resource [%s] on node [%s]", self.controller, self.node.get_id())
        return self

    def only(self, names: List[str]) -> 'ResourceRegistrar':
        """Keep only the listed resource actions"""
        return self.except_([name for name in self.actions if name not in names])

    def except_(self, names: List[str]) -> 'ResourceRegistrar':
        """Remove the listed resource actions"""
        for name in names:
            if name in self.actions:
                self.node.remove_action(name)
                del self.actions[name]
        return self

    def get_action(self, name: str) -> Optional['RouteAction']:
        return self.actions.get(name)

    def middleware(self, name: str, parameters: Optional[List[str]] = None) -> 'ResourceRegistrar':
        """Add a middleware to all resource actions"""
        for action in self.actions.values():
            action.middleware(name, parameters)
        return self

    def where(self, parameter: Union[str, Dict[str, str]], pattern: Optional[str] = None) -> 'ResourceRegistrar':
        for action in self.actions.values():
            action.where(parameter, pattern)
        return self
