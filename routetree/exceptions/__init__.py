"""
Exceptions Package
"""
from routetree.exceptions.custom import (
    RouteTreeException,
    NodeNotFoundException,
    NodeAlreadyExistsException,
    ActionNotFoundException,
    InvalidActionException,
    RouteNameAlreadyRegisteredException,
    UrlParametersMissingException,
    RouteNotFoundException,
)

__all__ = [
    'RouteTreeException',
    'NodeNotFoundException',
    'NodeAlreadyExistsException',
    'ActionNotFoundException',
    'InvalidActionException',
    'RouteNameAlreadyRegisteredException',
    'UrlParametersMissingException',
    'RouteNotFoundException',
]
