import logging

import pytest

from algorithms.errors import ConfigurationError
from config import Settings, configure_logging, load_settings


def test_defaults(monkeypatch):
    for name in ("SMV_LOG_LEVEL", "SMV_DEFAULT_ALGORITHM", "SMV_PLAYBACK_INTERVAL_MS",
                 "SMV_CORS_ORIGINS", "SMV_MAX_TEXT_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SMV_LOG_LEVEL", "debug")
    monkeypatch.setenv("SMV_DEFAULT_ALGORITHM", "Z-Algorithm")
    monkeypatch.setenv("SMV_PLAYBACK_INTERVAL_MS", "10")
    monkeypatch.setenv("SMV_CORS_ORIGINS", "http://a.test, http://b.test")
    s = load_settings()
    assert s.log_level == "DEBUG"
    assert s.default_algorithm == "z-algorithm"
    assert s.playback_interval_ms == 50
    assert s.cors_origins == ("http://a.test", "http://b.test")


def test_unknown_default_algorithm(monkeypatch):
    monkeypatch.setenv("SMV_DEFAULT_ALGORITHM", "boyer-moore")
    with pytest.raises(ConfigurationError):
        load_settings()


def test_configure_logging_sets_level():
    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING


@pytest.mark.parametrize("name", ["SMV_PLAYBACK_INTERVAL_MS", "SMV_MAX_TEXT_LENGTH"])
def test_malformed_integer(monkeypatch, name):
    monkeypatch.delenv("SMV_DEFAULT_ALGORITHM", raising=False)
    monkeypatch.setenv(name, "fast")
    with pytest.raises(ConfigurationError) as exc:
        load_settings()
    assert name in str(exc.value)
    assert exc.value.context == {"variable": name, "value": "fast"}
