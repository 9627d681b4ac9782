"""
Custom Exception Classes
RouteTree-specific exceptions with HTTP status codes
"""
from typing import List, Optional


class RouteTreeException(Exception):
    """Base exception for all route-tree exceptions"""
    status_code = 500
    message = "A route-tree error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class NodeNotFoundException(RouteTreeException):
    """
    Raised when a route-node id cannot be resolved

    Example:
        raise NodeNotFoundException("Node with ID [user.comment] could not be found.")
    """
    status_code = 404
    message = "Route node not found"


class NodeAlreadyExistsException(RouteTreeException):
    """
    Raised when a node id is declared twice within one tree
    """
    message = "Route node already exists"


class ActionNotFoundException(RouteTreeException):
    """
    Raised when a node has no action with the requested name

    Example:
        raise ActionNotFoundException("Node [photos] has no action [edit].")
    """
    status_code = 404
    message = "Route action not found"


class InvalidActionException(RouteTreeException):
    """
    Raised at configuration time for action definitions that match no action kind

    Example:
        raise InvalidActionException("Unsupported action definition: 42")
    """
    message = "Invalid route action"


class RouteNameAlreadyRegisteredException(RouteTreeException):
    """
    Raised during route generation when two actions compile to the same route name.
    Indicates a tree configuration bug and is meant to stop application startup.
    """
    message = "Route name already registered"


class UrlParametersMissingException(RouteTreeException):
    """
    Raised when an URL could not be generated because path parameters are undetermined

    Example:
        raise UrlParametersMissingException(missing=['user', 'comment'])
    """
    status_code = 400
    message = "URL could not be generated due to undetermined parameters"

    def __init__(
        self,
        message: Optional[str] = None,
        missing: Optional[List[str]] = None,
        status_code: Optional[int] = None
    ):
        self.missing = list(missing or [])
        if message is None and self.missing:
            message = (
                'URL could not be generated due to the following undetermined parameter(s): '
                + ','.join(self.missing)
            )
        super().__init__(message, status_code)


class RouteNotFoundException(RouteTreeException):
    """
    Raised by the router when no route carries the requested name
    """
    status_code = 404
    message = "Route not found"
