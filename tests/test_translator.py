from routetree.localization import LocaleProvider, Translator


def test_translates_nested_keys(translator):
    assert translator.translate('pages.photos.title', locale='de') == 'Fotos'
    assert translator.translate('pages.photos.title', locale='en') == 'Photos'


def test_missing_key_translates_to_key(translator):
    assert translator.translate('pages.photos.navTitle', locale='de') == 'pages.photos.navTitle'
    assert not translator.has('pages.photos.navTitle', 'de')


def test_placeholders_are_replaced(translator):
    line = translator.translate('routetree.editTitle', {'resource': 'Fotos', 'item': '12'}, 'de')
    assert line == 'Fotos bearbeiten: 12'


def test_placeholder_case_variants():
    translator = Translator({'en': {'greeting': ':NAME / :Name / :name'}})
    assert translator.translate('greeting', {'name': 'ada'}, 'en') == 'ADA / Ada / ada'


def test_longer_placeholders_win():
    translator = Translator({'en': {'line': ':item of :items'}})
    assert translator.translate('line', {'item': 'one', 'items': 'many'}, 'en') == 'one of many'


def test_built_in_lines_survive_custom_messages():
    translator = Translator({'de': {'routetree': {'createSegment': 'neu'}}})
    assert translator.translate('routetree.createSegment', locale='de') == 'neu'
    assert translator.translate('routetree.editSegment', locale='de') == 'bearbeiten'


def test_fallback_locale():
    translator = Translator({'en': {'only': 'english'}}, fallback_locale='en')
    assert translator.translate('only', locale='de') == 'english'


def test_locale_provider_defaults_to_first_locale():
    locales = LocaleProvider(['en', 'de'], 'fr')
    assert locales.default_locale == 'en'
    assert locales.current_locale() == 'en'


def test_locale_provider_set_and_reset():
    locales = LocaleProvider(['de', 'en'], 'de')
    token = locales.set_locale('en')
    try:
        assert locales.current_locale() == 'en'
        assert locales.establish_locale() == 'en'
        assert locales.establish_locale('de') == 'de'
    finally:
        locales.reset_locale(token)
    assert locales.current_locale() == 'de'
