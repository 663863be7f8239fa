"""Tests for configuration."""

from session_auth.config import Settings, get_settings


def test_settings_defaults():
    """Defaults match the documented behavior."""
    settings = Settings(_env_file=None)

    assert settings.session_cookie_name == "chocolatechip"
    assert settings.session_max_age_seconds == 3600
    assert settings.session_cookie_httponly is True
    assert settings.session_cookie_secure is False
    assert settings.bcrypt_rounds == 6
    assert settings.min_password_length == 4


def test_settings_from_environment(monkeypatch):
    """Environment variables override defaults."""
    monkeypatch.setenv("SESSION_COOKIE_NAME", "sid")
    monkeypatch.setenv("SESSION_COOKIE_SECURE", "true")

    settings = Settings(_env_file=None)

    assert settings.session_cookie_name == "sid"
    assert settings.session_cookie_secure is True
    assert settings.database_path == ":memory:"


def test_get_settings_is_cached():
    """Settings are loaded once per process."""
    assert get_settings() is get_settings()
