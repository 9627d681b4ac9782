import io
import json
import logging

from routetree import defaults
from routetree.exceptions import NodeNotFoundException, RouteTreeException, UrlParametersMissingException
from routetree.logging import LoggerConfig, getLogger
from routetree.support import ClassLoader, Config, Str


def test_package_defaults():
    assert Config.get('routetree.locales') == defaults.DEFAULT_LOCALES
    assert Config.get('routetree.default_locale') == 'de'
    assert Config.get('routetree.root_url') == 'http://localhost'
    assert Config.get('routetree.missing', 'fallback') == 'fallback'
    assert Config.has('routetree.lang_prefix')


def test_runtime_overrides_are_case_insensitive():
    Config.set('RouteTree.Absolute_URLs', False)
    assert Config.get('routetree.absolute_urls') is False

    Config.clear_runtime_overrides()
    assert Config.get('routetree.absolute_urls') is True


def test_str_helpers():
    assert Str.title('photo_albums') == 'Photo Albums'
    assert Str.title('photo-albums') == 'Photo Albums'


def test_class_loader():
    assert ClassLoader.load('collections.OrderedDict').__name__ == 'OrderedDict'


def test_exceptions_carry_status_codes():
    assert NodeNotFoundException('gone').status_code == 404
    assert isinstance(NodeNotFoundException(), RouteTreeException)
    assert UrlParametersMissingException(missing=['a', 'b']).message.endswith(': a,b')


def test_get_logger_channels():
    assert getLogger('routetree').name == 'routetree'
    assert getLogger('routetree.route_tree').name == 'routetree.route_tree'
    assert getLogger('random') is logging.getLogger()


def test_json_logger():
    stream = io.StringIO()
    logger = LoggerConfig.setup_logger('routetree.test_json', format_type='json', stream=stream)
    logger.info('Registered route', extra={'route_name': 'de.photos.index'})

    record = json.loads(stream.getvalue())
    assert record['message'] == 'Registered route'
    assert record['level'] == 'INFO'
    assert record['route_name'] == 'de.photos.index'


def test_text_logger():
    stream = io.StringIO()
    logger = LoggerConfig.setup_logger('routetree.test_text', format_type='text', stream=stream)
    logger.warning('Duplicate route name')
    assert '[WARNING] routetree.test_text: Duplicate route name' in stream.getvalue()
