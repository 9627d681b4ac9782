"""
Localization Package
Default translator and locale provider consumed by the route tree
"""
from routetree.localization.translator import Translator
from routetree.localization.locale import LocaleProvider

__all__ = [
    'Translator',
    'LocaleProvider',
]
