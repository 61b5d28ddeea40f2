from __future__ import annotations

import pytest

from equipes_api.core import config as core_config


@pytest.fixture(autouse=True)
def _fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "DATABASE_URL", "CORS_ORIGIN", "PORT", "SAVE_MODE", "PLACEHOLDER_CREDENTIAL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = core_config.get_settings()

    assert settings.app_env == "dev"
    assert settings.database_url == ""
    assert settings.cors_origin == "https://tes-1-w5nn.onrender.com"
    assert settings.port == 3000
    assert settings.save_mode == "open"
    assert settings.placeholder_credential == "no_password_needed"
    assert settings.log_level == "INFO"


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert core_config.get_settings().port == 3000


def test_cors_origin_trailing_slash_is_stripped(monkeypatch):
    monkeypatch.setenv("CORS_ORIGIN", "https://front.example.com/")
    assert core_config.get_settings().cors_origin == "https://front.example.com"


def test_unknown_save_mode_is_rejected(monkeypatch):
    monkeypatch.setenv("SAVE_MODE", "whatever")
    with pytest.raises(RuntimeError):
        core_config.get_settings()
