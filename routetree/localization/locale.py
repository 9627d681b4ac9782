"""
Locale Provider
Configured locales plus the request-scoped current locale
"""
from contextvars import ContextVar, Token
from typing import List, Optional

from routetree.support import Config
from routetree import defaults

# Context-aware locale storage (request-scoped, safe for async)
_current_locale: ContextVar[Optional[str]] = ContextVar('routetree_current_locale', default=None)


class LocaleProvider:
    """
    Provides the ordered list of configured locales and the current locale

    Usage:
        locales = LocaleProvider(['de', 'en'])
        locales.get_locales()           # ['de', 'en']
        locales.establish_locale(None)  # current locale, e.g. 'de'
        locales.establish_locale('en')  # 'en'
    """

    def __init__(self, locales: Optional[List[str]] = None, default_locale: Optional[str] = None):
        if locales is None:
            locales = Config.get('routetree.locales', defaults.DEFAULT_LOCALES)
        self._locales: List[str] = list(dict.fromkeys(locales))

        if default_locale is None:
            default_locale = Config.get('routetree.default_locale', defaults.DEFAULT_LOCALE)
        if default_locale not in self._locales:
            default_locale = self._locales[0]
        self.default_locale = default_locale

    def get_locales(self) -> List[str]:
        return list(self._locales)

    def has_locale(self, locale: str) -> bool:
        return locale in self._locales

    def current_locale(self) -> str:
        """The locale of the current request context, else the default locale"""
        locale = _current_locale.get()
        if locale is None or locale not in self._locales:
            return self.default_locale
        return locale

    def set_locale(self, locale: str) -> Token:
        """Set the locale for the current context; returns a token for reset_locale()"""
        return _current_locale.set(locale)

    def reset_locale(self, token: Token):
        _current_locale.reset(token)

    def establish_locale(self, locale: Optional[str] = None) -> str:
        """Return locale if explicitly stated, else the current locale"""
        if locale is None:
            return self.current_locale()
        return locale
