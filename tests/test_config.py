import pytest

from normref.core.config import Settings, get_settings, reset_settings
from normref.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ACT_NUMBER_WINDOW", "120")
    monkeypatch.setenv("ALLOW_UNAUTH_INGEST", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.act_number_window == 120
    assert settings.allow_unauth_ingest is True
    assert settings.log_level == "DEBUG"
    assert get_settings() is settings


def test_settings_validation(monkeypatch):
    monkeypatch.setenv("ACT_NUMBER_WINDOW", "-1")
    with pytest.raises(ConfigError):
        get_settings()

    with pytest.raises(ValueError):
        Settings(max_input_chars=0)


def test_allowed_origins_parsing():
    settings = Settings(allowed_origins="https://a.example, https://b.example,")
    assert settings.origins == ["https://a.example", "https://b.example"]
    assert Settings().origins == []
