from class2options.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.COMPONENT_DECORATOR == 'Component'
    assert settings.decorator_names() == ('Prop', 'Watch', 'Hook')
    assert settings.RESERVED_FIELD_SIGIL == '$'
    assert settings.FACTORY_METHOD == 'extend'
    assert settings.BASE_OPTIONS_ACCESSOR == 'options'
    assert settings.FAIL_FAST is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('CLASS2OPTIONS_FACTORY_METHOD', 'component')
    monkeypatch.setenv('CLASS2OPTIONS_FAIL_FAST', 'true')

    settings = Settings(_env_file=None)

    assert settings.FACTORY_METHOD == 'component'
    assert settings.FAIL_FAST is True
