"""
Action Kinds
What a route-action does when its route is hit: call a controller method,
render a view, redirect to another node, or call an inline handler
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

from routetree.defaults import DEFAULT_REDIRECT_STATUS
from routetree.exceptions import InvalidActionException
from routetree.support.config import Config


@dataclass(frozen=True)
class ControllerAction:
    """'PhotoController@show' or 'app.controllers.PhotoController@show'"""
    uses: str

    def qualified(self, namespace: Optional[str] = None) -> str:
        """Prefix a bare controller class with namespace; dotted paths are absolute"""
        class_path = self.uses.split('@', 1)[0]
        if namespace and '.' not in class_path:
            return f"{namespace}.{self.uses}"
        return self.uses


@dataclass(frozen=True)
class ViewAction:
    view: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RedirectAction:
    """Redirect to the node with id target"""
    target: str
    status: int = DEFAULT_REDIRECT_STATUS


@dataclass(frozen=True)
class HandlerAction:
    handler: Callable


ActionKind = Union[ControllerAction, ViewAction, RedirectAction, HandlerAction]

ACTION_KIND_TYPES = (ControllerAction, ViewAction, RedirectAction, HandlerAction)


def resolve_action_kind(action: Any) -> ActionKind:
    """
    Resolve an action definition into exactly one action kind

    Accepted definitions:
        'PhotoController@index'                        -> ControllerAction
        {'view': 'pages.about', 'data': {...}}         -> ViewAction
        {'redirect': 'photos', 'status': 301}          -> RedirectAction
        async def handler(request): ...                -> HandlerAction

    Raises:
        InvalidActionException: If the definition matches no action kind
    """
    if isinstance(action, ACTION_KIND_TYPES):
        return action

    if isinstance(action, str):
        if action.find('@') > 0 and not action.endswith('@'):
            return ControllerAction(action)
        raise InvalidActionException(
            f"Controller action [{action}] must have the form 'Controller@method'"
        )

    if isinstance(action, dict):
        keys = set(action)
        if 'view' in action and keys <= {'view', 'data'}:
            return ViewAction(action['view'], dict(action.get('data') or {}))
        if 'redirect' in action and keys <= {'redirect', 'status'}:
            status = action.get('status', Config.get('routetree.redirect_status', DEFAULT_REDIRECT_STATUS))
            return RedirectAction(action['redirect'], int(status))
        raise InvalidActionException(f"Unsupported action definition: {action!r}")

    if callable(action):
        return HandlerAction(action)

    raise InvalidActionException(f"Unsupported action definition: {action!r}")
