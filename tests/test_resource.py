import pytest

from routetree.action_configs import RESOURCE_ACTIONS


@pytest.mark.parametrize('name,uri,methods', [
    ('de.photos.index', 'de/photos', ('GET',)),
    ('de.photos.create', 'de/photos/erstellen', ('GET',)),
    ('de.photos.store', 'de/photos', ('POST',)),
    ('de.photos.show', 'de/photos/{photo}', ('GET',)),
    ('de.photos.edit', 'de/photos/{photo}/bearbeiten', ('GET',)),
    ('de.photos.update', 'de/photos/{photo}', ('PUT',)),
    ('de.photos.destroy', 'de/photos/{photo}', ('DELETE',)),
    ('en.photos.create', 'en/photos/create', ('GET',)),
    ('en.photos.edit', 'en/photos/{photo}/edit', ('GET',)),
])
def test_resource_routes(photo_tree, name, uri, methods):
    route = photo_tree.get_registered_route(name)
    assert route.uri == uri
    assert route.methods == methods


def test_resource_generates_one_route_per_action_and_locale(photo_tree):
    assert len(photo_tree.get_registered_routes()) == len(RESOURCE_ACTIONS) * 2


def test_resource_controller_actions(photo_tree):
    route = photo_tree.get_registered_route('de.photos.update').route
    assert route.get_action() == 'PhotoController@update'


def test_resource_sets_node_parameter(photo_tree):
    assert photo_tree.get_node('photos').get_parameter() == 'photo'


@pytest.mark.parametrize('action,locale,title,nav_title', [
    ('index', 'de', 'Fotos', 'Fotos'),
    ('create', 'de', 'Fotos erstellen', 'Erstellen'),
    ('create', 'en', 'Create Photos', 'Create'),
    ('show', 'de', 'Fotos: {photo}', '{photo}'),
    ('edit', 'de', 'Fotos bearbeiten: {photo}', 'Bearbeiten'),
    ('edit', 'en', 'Edit Photos: {photo}', 'Edit'),
    ('store', 'de', 'Fotos', 'Fotos'),
    ('update', 'de', 'Fotos', 'Fotos'),
    ('destroy', 'en', 'Photos', 'Photos'),
])
def test_resource_titles(photo_tree, action, locale, title, nav_title):
    route_action = photo_tree.get_node('photos').get_action(action)
    assert route_action.get_title(None, locale) == title
    assert route_action.get_nav_title(None, locale) == nav_title


def test_resource_titles_with_parameters(photo_tree):
    edit = photo_tree.get_node('photos').get_action('edit')
    assert edit.get_title({'photo': 'urlaub'}, 'de') == 'Fotos bearbeiten: urlaub'


def test_resource_titles_of_current_route(photo_tree):
    with photo_tree.activate_route('de.photos.show', {'photo': '12'}):
        action = photo_tree.get_current_action()
        assert action.get_title() == 'Fotos: 12'
        assert action.get_nav_title() == '12'


def test_only(tree):
    tree.node('photos').resource('photo', 'PhotoController').only(['index', 'show'])
    tree.generate_all_routes()

    assert [action.get_name() for action in tree.get_node('photos').get_actions()] == ['index', 'show']
    assert tree.get_registered_route('de.photos.edit') is None


def test_except(tree):
    registrar = tree.node('photos').resource('photo', 'PhotoController').except_(['create', 'edit'])
    assert registrar.get_action('create') is None
    assert [action.get_name() for action in tree.get_node('photos').get_actions()] == \
        ['index', 'store', 'show', 'update', 'destroy']


def test_resource_middleware_and_wheres(tree):
    tree.node('photos').resource('photo', 'PhotoController').middleware('auth').where('photo', '[0-9]+')
    tree.generate_all_routes()

    route = tree.get_registered_route('en.photos.show').route
    assert route.get_middleware() == ['auth']
    assert route.get_wheres() == {'photo': '[0-9]+'}


def test_resource_keeps_existing_parameter(tree):
    node = tree.node('photos').parameter('picture')
    node.resource('photo', 'PhotoController')
    tree.generate_all_routes()

    assert tree.get_registered_route('de.photos.show').uri == 'de/photos/{picture}'
