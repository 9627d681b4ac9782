"""
Base Route Middleware Class
Abstract base class for middleware attached to route nodes and actions
"""
from abc import ABC, abstractmethod

from sanic import Request


class RouteMiddleware(ABC):
    """
    Base route middleware class

    Route middleware can:
    - Inspect the request before it reaches the action (the route is already active)
    - Short-circuit the request by returning a response
    - Inspect/modify the response

    Parameters compiled into the route ('throttle:60,1') are passed positionally.
    """

    @abstractmethod
    async def before_request(self, request: Request, *parameters: str):
        """
        Called before the request reaches the route handler

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """

    async def after_response(self, request: Request, response, *parameters: str):
        """
        Called after the route handler, before sending response

        Returns:
            response: Modified or original response
        """
        return response
