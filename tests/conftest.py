"""
Shared fixtures: a German/English route tree with page translations
"""
import pytest

from routetree import LocaleProvider, RouteTree, Translator
from routetree.support import Config

TRANSLATIONS = {
    'de': {
        'pages': {
            'title': 'Startseite',
            'photos': {
                'title': 'Fotos',
                'intro': 'Unsere Fotos',
                'parameters': {'photo': {'sommer': 'summer'}},
            },
        },
    },
    'en': {
        'pages': {
            'title': 'Home',
            'photos': {
                'title': 'Photos',
                'intro': 'Our photos',
                'parameters': {'photo': {'sommer': 'summer'}},
            },
        },
    },
}


async def handler(request, **kwargs):
    return kwargs


@pytest.fixture(autouse=True)
def reset_config():
    yield
    Config.clear_runtime_overrides()


@pytest.fixture
def translator():
    return Translator(TRANSLATIONS)


@pytest.fixture
def tree(translator):
    return RouteTree(translator=translator, locales=LocaleProvider(['de', 'en'], 'de'))


@pytest.fixture
def photo_tree(tree):
    tree.node('photos', lambda node: node.resource('photo', 'PhotoController'))
    return tree.generate_all_routes()


@pytest.fixture
def company_tree(tree):
    """company (get) > {branch} (get) > staff (resource 'member')"""
    tree.node('company').get(handler)
    tree.node('company.branch', segment='{branch}').get(handler)
    tree.node('company.branch.staff', lambda node: node.resource('member', 'StaffController'))
    return tree.generate_all_routes()
