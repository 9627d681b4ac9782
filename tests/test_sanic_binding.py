import asyncio
import sys
import types

import pytest

from routetree.context import get_request_context
from routetree.routing import RouteMiddleware, RouteMiddlewareRegistry
from routetree.routing.sanic_binding import SanicRouteBinder
from routetree.support import Config


class FakeApp:
    name = 'TestApp'

    def __init__(self):
        self.routes = {}

    def add_route(self, handler, uri, methods=None, name=None):
        self.routes[name] = (handler, uri, methods)


class RecordingMiddleware(RouteMiddleware):
    def __init__(self):
        self.calls = []

    async def before_request(self, request, *parameters):
        self.calls.append((get_request_context().route_name, parameters))


class BlockingMiddleware(RouteMiddleware):
    async def before_request(self, request, *parameters):
        return 'blocked'


class PhotoController:
    async def show(self, request, photo):
        return {'photo': photo, 'route': get_request_context().route_name}

    def index(self, request):
        return 'index'


@pytest.fixture
def controllers(monkeypatch):
    module = types.ModuleType('photo_controllers')
    module.PhotoController = PhotoController
    monkeypatch.setitem(sys.modules, 'photo_controllers', module)
    return module


def run(handler, **kwargs):
    return asyncio.run(handler(object(), **kwargs))


def test_registers_all_routes(photo_tree):
    app = FakeApp()
    assert SanicRouteBinder(photo_tree, RouteMiddlewareRegistry()).register(app) == 14

    _, uri, methods = app.routes['de.photos.edit']
    assert uri == '/de/photos/<photo>/bearbeiten'
    assert methods == ['GET']


def test_registration_generates_routes(tree):
    tree.node('photos').get(lambda request, **kwargs: 'ok')
    app = FakeApp()
    SanicRouteBinder(tree, RouteMiddlewareRegistry()).register(app)
    assert tree.is_generated()
    assert set(app.routes) == {'de.photos.get', 'en.photos.get'}


def test_root_route_uri(translator):
    from routetree import LocaleProvider, RouteTree

    tree = RouteTree(translator=translator, locales=LocaleProvider(['de']), locale_prefix=False)
    tree.root.get(lambda request, **kwargs: 'home')
    app = FakeApp()
    SanicRouteBinder(tree, RouteMiddlewareRegistry()).register(app)
    assert app.routes['de.get'][1] == '/'


def test_controller_handler_runs_with_active_route(tree, controllers):
    tree.node('photos').namespace('photo_controllers').resource('photo', 'PhotoController').only(['index', 'show'])
    app = FakeApp()
    SanicRouteBinder(tree, RouteMiddlewareRegistry()).register(app)

    handler = app.routes['en.photos.show'][0]
    assert run(handler, photo=12) == {'photo': 12, 'route': 'en.photos.show'}
    assert run(app.routes['de.photos.index'][0]) == 'index'
    assert get_request_context() is None


def test_view_handler_uses_renderer(tree):
    tree.node('about').view('pages.about', {'team': 3})

    def renderer(request, view, data):
        return {'view': view, 'data': data, 'title': tree.get_current_action().get_title()}

    app = FakeApp()
    SanicRouteBinder(tree, RouteMiddlewareRegistry(), renderer).register(app)
    assert run(app.routes['en.about.get'][0]) == {'view': 'pages.about', 'data': {'team': 3}, 'title': 'About'}


def test_default_view_renderer_returns_json(tree):
    tree.node('about').view('pages.about')
    app = FakeApp()
    SanicRouteBinder(tree, RouteMiddlewareRegistry()).register(app)

    response = run(app.routes['de.about.get'][0])
    assert response.status == 200
    assert response.content_type == 'application/json'


def test_route_middleware_receives_parameters(tree):
    middleware = RecordingMiddleware()
    registry = RouteMiddlewareRegistry()
    registry.register('throttle', middleware)

    tree.node('photos').middleware('throttle', ['60', '1']).get(lambda request, **kwargs: 'ok')
    app = FakeApp()
    SanicRouteBinder(tree, registry).register(app)

    assert run(app.routes['de.photos.get'][0]) == 'ok'
    assert middleware.calls == [('de.photos.get', ('60', '1'))]


def test_route_middleware_can_short_circuit(tree):
    registry = RouteMiddlewareRegistry()
    registry.register('auth', BlockingMiddleware())

    tree.node('admin').middleware('auth').get(lambda request, **kwargs: 'secret')
    tree.node('public').get(lambda request, **kwargs: 'public')
    app = FakeApp()
    SanicRouteBinder(tree, registry).register(app)

    assert run(app.routes['de.admin.get'][0]) == 'blocked'
    assert run(app.routes['de.public.get'][0]) == 'public'


def test_unknown_middleware_is_skipped(tree):
    tree.node('admin').middleware('missing').get(lambda request, **kwargs: 'ok')
    app = FakeApp()
    SanicRouteBinder(tree, RouteMiddlewareRegistry()).register(app)

    assert run(app.routes['de.admin.get'][0]) == 'ok'


def test_middleware_registry_from_config(monkeypatch):
    module = types.ModuleType('route_middleware')
    module.RecordingMiddleware = RecordingMiddleware
    monkeypatch.setitem(sys.modules, 'route_middleware', module)
    Config.set('routetree.route_middleware', {'record': 'route_middleware.RecordingMiddleware'})

    registry = RouteMiddlewareRegistry.from_config()
    assert registry.get_registered() == ['record']
    assert isinstance(registry.get('record'), RecordingMiddleware)
