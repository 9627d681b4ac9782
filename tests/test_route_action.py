import pytest

from routetree.action_kinds import ControllerAction, HandlerAction, ViewAction
from routetree.exceptions import (
    InvalidActionException,
    NodeNotFoundException,
    RouteNameAlreadyRegisteredException,
    UrlParametersMissingException,
)
from tests.conftest import handler


def test_action_name_defaults_to_verb(tree):
    node = tree.node('user')
    assert node.get(handler).get_name() == 'get'
    assert node.post(handler, name='save').get_name() == 'save'
    assert node.put(handler).name('replace').get_name() == 'replace'


def test_action_kind_is_resolved_at_configuration(tree):
    node = tree.node('user')
    assert isinstance(node.get('UserController@index').kind, ControllerAction)
    assert isinstance(node.post(handler).kind, HandlerAction)
    assert isinstance(node.view('pages.user', name='page').kind, ViewAction)

    with pytest.raises(InvalidActionException):
        node.patch(42)


def test_route_names(tree):
    tree.root.get(handler)
    tree.node('user').child('comment').get(handler)
    tree.generate_all_routes()

    names = [route.name for route in tree.get_registered_routes()]
    assert names == ['de.get', 'en.get', 'de.user.comment.get', 'en.user.comment.get']


def test_uri_composes_node_path_and_suffix(tree):
    tree.node('user').get(handler).path_suffix({'de': 'liste', 'en': 'list'})
    tree.generate_all_routes()

    assert tree.get_registered_route('de.user.get').uri == 'de/user/liste'
    assert tree.get_registered_route('en.user.get').uri == 'en/user/list'
    assert tree.get_node('user').get_action('get').get_paths() == {'de': 'de/user/liste', 'en': 'en/user/list'}


def test_compile_middleware(tree):
    tree.root.middleware('web')
    admin = tree.node('admin').middleware('auth').middleware('throttle', ['60', '1'])
    action = admin.get(handler).skip_middleware('web').middleware('log')

    assert action.compile_middleware() == ['auth', 'throttle:60,1', 'log']


def test_action_middleware_overrides_node_middleware(tree):
    node = tree.node('admin').middleware('throttle', ['60', '1'])
    action = node.get(handler).middleware('throttle', ['5', '1'])
    assert action.compile_middleware() == ['throttle:5,1']


def test_compile_parameter_regex(tree):
    node = tree.node('photo', segment='{photo}').where({'photo': '[0-9]+', 'size': '[a-z]+'})
    action = node.get(handler).where('photo', r'\d+')
    assert action.compile_parameter_regex() == {'photo': r'\d+', 'size': '[a-z]+'}


def test_generated_route_carries_middleware_and_wheres(tree):
    node = tree.node('photo', segment='{photo}').middleware('auth').where('photo', '[0-9]+')
    node.get(handler)
    tree.generate_all_routes()

    route = tree.get_registered_route('en.photo.get').route
    assert route.get_middleware() == ['auth']
    assert route.get_wheres() == {'photo': '[0-9]+'}
    assert route.get_methods() == ['GET']


def test_controller_namespace(tree):
    tree.node('admin').namespace('app.controllers.admin')
    tree.node('admin.users').get('UserController@index')
    tree.node('admin.roles').get('app.controllers.RoleController@index')
    tree.generate_all_routes()

    assert tree.get_registered_route('de.admin.users.get').route.get_action() == \
        'app.controllers.admin.UserController@index'
    assert tree.get_registered_route('de.admin.roles.get').route.get_action() == \
        'app.controllers.RoleController@index'


def test_view_route(tree):
    tree.node('about', segment={'de': 'ueber-uns', 'en': 'about'}).view('pages.about', {'team': 3})
    tree.generate_all_routes()

    route = tree.get_registered_route('de.about.get')
    assert route.uri == 'de/ueber-uns'
    assert route.route.get_action() == ViewAction('pages.about', {'team': 3})


def test_redirect_to_unknown_node(tree):
    tree.node('old').redirect('missing')
    with pytest.raises(NodeNotFoundException):
        tree.generate_all_routes()


def test_duplicate_route_name(tree):
    node = tree.node('user')
    node.get(handler)
    node.get(handler)
    with pytest.raises(RouteNameAlreadyRegisteredException):
        tree.generate_all_routes()


def test_generation_runs_once(tree):
    tree.node('user').get(handler)
    tree.generate_all_routes()
    tree.generate_all_routes()
    assert len(tree.get_registered_routes()) == 2
    assert len(tree.router.get_routes()) == 2


def test_path_parameters(company_tree):
    edit = company_tree.get_node('company.branch.staff').get_action('edit')
    assert edit.get_path_parameters('de') == ['branch', 'member']


def test_auto_fill_prefers_stated_parameters(company_tree):
    edit = company_tree.get_node('company.branch.staff').get_action('edit')

    with company_tree.activate_route('de.company.branch.staff.show', {'branch': 'north', 'member': '5'}):
        assert edit.auto_fill_path_parameters({'member': '7'}) == {'branch': 'north', 'member': '7'}


def test_auto_fill_reports_missing_parameters_in_path_order(company_tree):
    edit = company_tree.get_node('company.branch.staff').get_action('edit')

    with pytest.raises(UrlParametersMissingException) as excinfo:
        edit.auto_fill_path_parameters({}, 'de')
    assert excinfo.value.missing == ['branch', 'member']
    assert str(excinfo.value) == (
        'URL could not be generated due to the following undetermined parameter(s): branch,member'
    )

    with pytest.raises(UrlParametersMissingException) as excinfo:
        edit.auto_fill_path_parameters({'member': '5'}, 'de')
    assert excinfo.value.missing == ['branch']


def test_auto_fill_only_uses_active_nodes(company_tree):
    staff_edit = company_tree.get_node('company.branch.staff').get_action('edit')

    # Only the branch node is active; its value is used, the member stays undetermined
    with company_tree.activate_route('de.company.branch.get', {'branch': 'north'}):
        with pytest.raises(UrlParametersMissingException) as excinfo:
            staff_edit.auto_fill_path_parameters()
        assert excinfo.value.missing == ['member']


def test_get_url(company_tree):
    edit = company_tree.get_node('company.branch.staff').get_action('edit')

    with company_tree.activate_route('de.company.branch.get', {'branch': 'north'}):
        assert edit.get_url({'member': 5}) == 'http://localhost/de/company/north/staff/5/bearbeiten'
        assert edit.get_url({'member': 5}, 'en', False) == '/en/company/north/staff/5/edit'


def test_get_url_without_parameters(tree):
    tree.node('user').get(handler)
    tree.generate_all_routes()
    assert tree.get_node('user').get_action('get').get_url(locale='en') == 'http://localhost/en/user'


def test_root_line_actions(company_tree):
    edit = company_tree.get_node('company.branch.staff').get_action('edit')

    with company_tree.activate_route('de.company.branch.staff.edit', {'branch': 'north', 'member': '5'}):
        root_line = [
            (action.get_route_node().get_id(), action.get_name())
            for action in edit.get_root_line_actions()
        ]

    assert root_line == [
        ('company', 'get'),
        ('company.branch', 'get'),
        ('company.branch.staff', 'index'),
        ('company.branch.staff', 'show'),
        ('company.branch.staff', 'edit'),
    ]


def test_root_line_uses_show_of_active_parent_resource(tree):
    tree.node('photos', lambda node: node.resource('photo', 'PhotoController'))
    tree.node('photos.comments', segment='kommentare').get(handler)
    tree.generate_all_routes()

    comments = tree.get_node('photos.comments').get_action('get')
    with tree.activate_route('de.photos.comments.get', {'photo': '3'}):
        names = [action.get_name() for action in comments.get_root_line_actions()]
    assert names == ['index', 'show', 'get']

    names = [action.get_name() for action in comments.get_root_line_actions()]
    assert names == ['index', 'get']


def test_is_active(company_tree):
    show = company_tree.get_node('company.branch.staff').get_action('show')
    edit = company_tree.get_node('company.branch.staff').get_action('edit')

    assert not show.is_active()

    with company_tree.activate_route('de.company.branch.staff.show', {'branch': 'north', 'member': '5'}):
        assert show.is_active()
        assert show.is_active({'member': '5'})
        assert show.is_active({'member': 5, 'branch': 'north'})
        assert not show.is_active({'member': '6'})
        assert not show.is_active({'unknown': '1'})
        assert not edit.is_active()


def test_explicit_action_titles(tree):
    node = tree.node('user', segment='{user}')
    action = node.get(handler).title({'de': 'Benutzer {user}', 'en': 'User {user}'})

    assert action.get_title({'user': 'ada'}, 'en') == 'User ada'
    # No navTitle and no defaults: falls back to the explicit title
    assert action.get_nav_title({'user': 'ada'}, 'de') == 'Benutzer ada'

    action.nav_title('Profil')
    assert action.get_nav_title(None, 'de') == 'Profil'
    assert node.get_title(None, 'en') == 'User'


def test_default_nav_title_wins_over_explicit_title(photo_tree):
    show = photo_tree.get_node('photos').get_action('show').title('Foto')
    assert show.get_title({'photo': '3'}, 'de') == 'Foto'
    assert show.get_nav_title({'photo': '3'}, 'de') == '3'


def test_nav_title_falls_back_to_node_nav_title(tree):
    node = tree.node('photos').nav_title({'de': 'Bilder'})
    action = node.get(handler)
    assert action.get_title(None, 'de') == 'Fotos'
    assert action.get_nav_title(None, 'de') == 'Bilder'
    assert action.get_nav_title(None, 'en') == 'Photos'


def test_payload_falls_back_to_node(tree):
    node = tree.node('photos')
    node.payload.set('icon', 'camera').set('description', {'de': 'Alle Fotos', 'en': 'All photos'})
    action = node.get(handler)
    action.payload.set('icon', 'image')

    assert action.payload.get('icon') == 'image'
    assert action.payload.to_dict(locale='en') == {'icon': 'image', 'description': 'All photos'}
