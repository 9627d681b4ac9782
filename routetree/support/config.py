"""
Config Manager - dot notation configuration access
Reads the host application's config/<file>.py modules with package defaults as fallback
"""

import importlib
import threading
from typing import Any, Dict, Optional

from routetree import defaults


# Package defaults, addressed exactly like a config file ('routetree.locales')
PACKAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    'routetree': {
        'locales': defaults.DEFAULT_LOCALES,
        'default_locale': defaults.DEFAULT_LOCALE,
        'locale_prefix': defaults.DEFAULT_LOCALE_PREFIX,
        'absolute_urls': defaults.DEFAULT_ABSOLUTE_URLS,
        'root_url': defaults.DEFAULT_ROOT_URL,
        'lang_prefix': defaults.DEFAULT_LANG_PREFIX,
        'redirect_status': defaults.DEFAULT_REDIRECT_STATUS,
        'log_channels': defaults.DEFAULT_LOG_CHANNELS,
        'route_middleware': defaults.DEFAULT_ROUTE_MIDDLEWARE,
    },
}

_MISSING = object()


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        locales = Config.get('routetree.locales')

        # With default
        absolute = Config.get('routetree.absolute_urls', True)

        # Set runtime value
        Config.set('routetree.root_url', 'https://example.com')

    The host application may ship a config/routetree.py module whose
    module-level names (case-insensitive) override the package defaults:
        config/
        └── routetree.py      LOCALES = ['de', 'en', 'fr']
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'routetree.locales')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        # Check runtime overrides first
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]
        path = parts[1:]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        # Application config file wins over package defaults
        value = cls._lookup(cls._loaded.get(file_name), path)
        if value is _MISSING:
            value = cls._lookup(PACKAGE_DEFAULTS.get(file_name), path)

        return default if value is _MISSING else value

    @classmethod
    def _lookup(cls, value: Any, path) -> Any:
        """Navigate nested attributes / dict keys (case-insensitive)"""
        if value is None:
            return _MISSING

        for part in path:
            if isinstance(value, dict):
                for dict_key in value.keys():
                    if str(dict_key).lower() == part:
                        value = value[dict_key]
                        break
                else:
                    return _MISSING
            elif hasattr(value, '__dict__'):
                for attr_name in dir(value):
                    if attr_name.lower() == part:
                        value = getattr(value, attr_name)
                        break
                else:
                    return _MISSING
            else:
                return _MISSING

        return value

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config file from the application's config/ package

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('routetree.absolute_urls', False)
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
