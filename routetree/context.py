"""
Request Context
Request-scoped record of the matched route, stored in a ContextVar so
concurrent requests never share active-route state
"""
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class RequestContext:
    """The route matched by the in-flight request"""
    route_name: Optional[str]
    parameters: Dict[str, str] = field(default_factory=dict)


_current_context: ContextVar[Optional[RequestContext]] = ContextVar('routetree_request_context', default=None)


def get_request_context() -> Optional[RequestContext]:
    """Get the current request context (None outside of a request, e.g. at build time)"""
    return _current_context.get()


def set_request_context(context: Optional[RequestContext]) -> Token:
    return _current_context.set(context)


def reset_request_context(token: Token):
    _current_context.reset(token)
