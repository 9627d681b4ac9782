"""
Translator
Key lookup with ':placeholder' substitution over in-memory message catalogs
"""
from typing import Any, Dict, Optional

from routetree.localization.lang import MESSAGES


class Translator:
    """
    Minimal Laravel-style translator

    Messages are nested dicts per locale and addressed with dot notation.
    Missing keys translate to the key itself.

    Usage:
        translator = Translator({'de': {'pages': {'photos': {'title': 'Fotos'}}}})
        translator.translate('pages.photos.title', locale='de')  # 'Fotos'
        translator.translate('routetree.createTitle', {'resource': 'Fotos'}, 'de')  # 'Fotos erstellen'
    """

    def __init__(self, messages: Optional[Dict[str, Dict]] = None, fallback_locale: Optional[str] = None):
        self._messages: Dict[str, Dict] = {}
        self.fallback_locale = fallback_locale
        self.add_messages(MESSAGES)
        if messages:
            self.add_messages(messages)

    def add_messages(self, messages: Dict[str, Dict]) -> 'Translator':
        """Deep-merge a {locale: {...}} catalog into the loaded messages"""
        for locale, lines in messages.items():
            self._messages[locale] = self._merge(self._messages.get(locale, {}), lines)
        return self

    def _merge(self, target: Dict, source: Dict) -> Dict:
        merged = dict(target)
        for key, value in source.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key: str, locale: str) -> Optional[str]:
        """Get the raw line for key in locale (no fallback, no substitution)"""
        value: Any = self._messages.get(locale)
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return None
            value = value[part]
        return value if isinstance(value, str) else None

    def has(self, key: str, locale: str) -> bool:
        return self.get(key, locale) is not None

    def translate(self, key: str, params: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        """
        Translate key into locale, substituting ':name' placeholders

        Returns:
            The translated line, or the key itself when no line exists
        """
        line = self.get(key, locale) if locale else None
        if line is None and self.fallback_locale:
            line = self.get(key, self.fallback_locale)
        if line is None:
            return key

        return self.make_replacements(line, params or {})

    @staticmethod
    def make_replacements(line: str, params: Dict[str, Any]) -> str:
        # Longest names first so ':item' never clobbers ':items'
        for name in sorted(params, key=len, reverse=True):
            value = str(params[name])
            line = line.replace(f':{name.upper()}', value.upper())
            line = line.replace(f':{name.capitalize()}', value[:1].upper() + value[1:])
            line = line.replace(f':{name}', value)
        return line
