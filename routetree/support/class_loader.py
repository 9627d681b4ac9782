"""
Class Loader
Resolves controller references ('app.controllers.PhotoController@index') to callables
"""
from typing import Callable, Type, Union


class ClassLoader:
    """
    Utility for dynamically loading classes and functions from string paths

    Example:
        cls = ClassLoader.load('app.controllers.PhotoController')
        handler = ClassLoader.load_controller_action('app.controllers.PhotoController@show')
    """

    @staticmethod
    def load(class_path: str) -> Union[Callable, Type]:
        """
        Load a class or function from a dotted path string

        Raises:
            ImportError: If module cannot be imported
            AttributeError: If class doesn't exist in module
        """
        module_path, class_name = class_path.rsplit('.', 1)

        module = __import__(module_path, fromlist=[class_name])

        return getattr(module, class_name)

    @staticmethod
    def load_controller_action(uses: str) -> Callable:
        """
        Resolve 'module.Controller@method' to a bound method of a fresh controller instance

        Raises:
            ValueError: If uses is not in 'Controller@method' form
        """
        if '@' not in uses:
            raise ValueError(f"Controller action [{uses}] must have the form 'Controller@method'")

        class_path, method = uses.split('@', 1)
        controller = ClassLoader.load(class_path)()
        return getattr(controller, method)
