# nosec B101


import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_settings_expose_the_documented_configuration():
    assert set(Settings.model_fields) == {
        'APP_NAME',
        'DISPLAY_ERROR_DETAILS',
        'RATES_URL',
        'HTTP_TIMEOUT',
        'CACHE_TTL',
        'CACHE_BACKEND',
        'REDIS_URL',
        'REDIS_CACHE_KEY',
        'LOG_PATH',
        'LOG_LEVEL',
    }


def test_default_values(monkeypatch):
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.RATES_URL == 'https://www.cbr-xml-daily.ru/daily_json.js'
    assert settings.HTTP_TIMEOUT == 3.14
    assert settings.CACHE_TTL == 60
    assert settings.CACHE_BACKEND == 'memory'
    assert settings.DISPLAY_ERROR_DETAILS is False


def test_environment_overrides_are_case_insensitive(monkeypatch):
    monkeypatch.setenv('cache_ttl', '15')
    monkeypatch.setenv('CACHE_BACKEND', 'redis')

    settings = Settings(_env_file=None)

    assert settings.CACHE_TTL == 15
    assert settings.CACHE_BACKEND == 'redis'


def test_unknown_environment_keys_are_ignored(monkeypatch):
    monkeypatch.setenv('DEBUG', 'true')

    assert not hasattr(Settings(_env_file=None), 'DEBUG')


@pytest.mark.parametrize('field', ['CACHE_TTL', 'HTTP_TIMEOUT'])
def test_non_positive_durations_are_rejected(field):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: 0})
