import importlib
import sys

import pytest


def reload_config_module():
    config_module = sys.modules.get("app.config")
    if config_module:
        config_module.get_settings.cache_clear()
        sys.modules.pop("app.config", None)
    return importlib.import_module("app.config")


def test_missing_secret_key_fails_closed(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "")

    config_module = reload_config_module()
    config_module.get_settings.cache_clear()

    with pytest.raises(Exception, match="secret_key|SECRET_KEY"):
        config_module.get_settings()


def test_weak_secret_key_fails_closed(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "changeme-in-production")

    config_module = reload_config_module()
    config_module.get_settings.cache_clear()

    with pytest.raises(Exception, match="secret_key|SECRET_KEY"):
        config_module.get_settings()


def test_low_entropy_secret_key_fails_closed(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "ab" * 32)

    config_module = reload_config_module()
    config_module.get_settings.cache_clear()

    with pytest.raises(Exception, match="entropy"):
        config_module.get_settings()


def test_strong_secret_key_passes(monkeypatch):
    monkeypatch.setenv(
        "SECRET_KEY",
        "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef",
    )

    config_module = reload_config_module()
    config_module.get_settings.cache_clear()
    settings = config_module.get_settings()

    assert settings.secret_key


def test_storage_backend_from_environment(monkeypatch):
    monkeypatch.setenv(
        "SECRET_KEY",
        "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef",
    )
    monkeypatch.setenv("STORAGE_BACKEND", " Memory ")
    monkeypatch.setenv("WS_REQUIRE_AUTH", "true")

    config_module = reload_config_module()
    config_module.get_settings.cache_clear()
    settings = config_module.get_settings()

    assert settings.storage_backend == "memory"
    assert settings.ws_require_auth is True


def test_unknown_storage_backend_is_rejected(monkeypatch):
    monkeypatch.setenv(
        "SECRET_KEY",
        "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef",
    )
    monkeypatch.setenv("STORAGE_BACKEND", "redis")

    config_module = reload_config_module()
    config_module.get_settings.cache_clear()

    with pytest.raises(Exception, match="storage_backend"):
        config_module.get_settings()
