"""
Route Class
Represents a single route with fluent API (Laravel-style)
"""
from typing import Union, List, Dict, Optional, Callable, Any
import re

PARAMETER_PATTERN = r'\{(\w+)\??}'

# Constraints Sanic can express with a built-in parameter type
SANIC_TYPES = {
    r'[0-9]+': 'int',
    r'\d+': 'int',
    r'[a-zA-Z]+': 'alpha',
    r'[a-zA-Z0-9\-]+': 'slug',
    r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}': 'uuid',
    r'.*': 'path',
}


class Route:
    """
    Route class with fluent API for defining routes

    Usage:
        route = Route(['GET'], 'users/{id}', handler)
        route.name('de.users.show').where('id', '[0-9]+').middleware(['auth'])
    """

    def __init__(self, methods: List[str], uri: str, action: Any):
        """
        Initialize a Route instance

        Args:
            methods: HTTP methods (GET, POST, etc.)
            uri: Route URI pattern
            action: Handler function, 'Controller@method' string or view action
        """
        self.methods = [m.upper() for m in methods]
        self.uri = uri.strip('/')
        self.action = action
        self._name: Optional[str] = None
        self._middleware: List[str] = []
        self._wheres: Dict[str, str] = {}
        self._compiled_uri: Optional[str] = None
        self._pattern: Optional[re.Pattern] = None

        if isinstance(action, str) and '@' in action:
            self._controller, self._action_name = action.rsplit('@', 1)
        else:
            self._controller = None
            self._action_name = getattr(action, '__name__', type(action).__name__)

        self._parameter_names: List[str] = re.findall(PARAMETER_PATTERN, self.uri)

    def name(self, name: str) -> 'Route':
        """Set the route name"""
        self._name = name
        return self

    def middleware(self, middleware: Union[str, List[str]]) -> 'Route':
        """
        Add middleware to the route

        Args:
            middleware: Middleware name ('throttle:60,1') or list of names
        """
        if isinstance(middleware, str):
            middleware = [middleware]
        self._middleware.extend(middleware)
        return self

    def where(self, parameter: Union[str, Dict[str, str]], pattern: Optional[str] = None) -> 'Route':
        """
        Add parameter constraints

        Usage:
            route.where('id', '[0-9]+')
            route.where({'id': '[0-9]+', 'slug': '[a-z-]+'})
        """
        if isinstance(parameter, dict):
            self._wheres.update(parameter)
        elif pattern is not None:
            self._wheres[parameter] = pattern
        self._compiled_uri = None
        self._pattern = None
        return self

    def get_name(self) -> Optional[str]:
        return self._name

    def get_action_name(self) -> str:
        """Get the action name (for display)"""
        if self._controller:
            return f"{self._controller}@{self._action_name}"
        return self._action_name

    def get_uri(self) -> str:
        return self.uri

    def get_compiled_uri(self) -> str:
        """
        Get URI with constraints applied (for Sanic routing)

        Converts Laravel-style {id} to Sanic-style <id>, <id:int> or <id:regex>
        """
        if self._compiled_uri is not None:
            return self._compiled_uri

        def convert_param(match):
            param_name = match.group(1)
            constraint = self._wheres.get(param_name)
            if constraint is None:
                return f"<{param_name}>"
            return f"<{param_name}:{SANIC_TYPES.get(constraint, constraint)}>"

        self._compiled_uri = re.sub(PARAMETER_PATTERN, convert_param, self.uri)
        return self._compiled_uri

    def get_middleware(self) -> List[str]:
        return self._middleware

    def get_methods(self) -> List[str]:
        return self.methods

    def get_action(self) -> Any:
        return self.action

    def get_parameter_names(self) -> List[str]:
        return self._parameter_names

    def get_wheres(self) -> Dict[str, str]:
        return self._wheres

    def has_parameters(self) -> bool:
        return len(self._parameter_names) > 0

    def get_literal_segment_count(self) -> int:
        """Number of path segments without a {parameter}"""
        if not self.uri:
            return 0
        return sum(1 for segment in self.uri.split('/') if not re.search(PARAMETER_PATTERN, segment))

    def _get_pattern(self) -> re.Pattern:
        if self._pattern is None:
            regex = ''
            position = 0
            for match in re.finditer(PARAMETER_PATTERN, self.uri):
                regex += re.escape(self.uri[position:match.start()])
                constraint = self._wheres.get(match.group(1), r'[^/]+')
                regex += f"(?P<{match.group(1)}>{constraint})"
                position = match.end()
            regex += re.escape(self.uri[position:])
            self._pattern = re.compile('^' + regex + '$')
        return self._pattern

    def matches(self, uri: str, method: str) -> bool:
        """
        Check if route matches given URI and method, honoring parameter constraints

        Args:
            uri: Request path
            method: HTTP method
        """
        if method.upper() not in self.methods:
            return False
        return self._get_pattern().match(uri.strip('/')) is not None

    def extract_parameters(self, uri: str) -> Dict[str, str]:
        """Parameter values of a matching request path ({} if it does not match)"""
        match = self._get_pattern().match(uri.strip('/'))
        return match.groupdict() if match else {}

    def __repr__(self) -> str:
        methods_str = '|'.join(self.methods)
        name_str = f" (name: {self._name})" if self._name else ""
        return f"<Route [{methods_str}] {self.get_uri()}{name_str}>"
