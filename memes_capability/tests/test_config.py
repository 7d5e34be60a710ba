"""Tests for environment configuration."""

import pytest

from memes_capability.config import Config, _env_bool, load_config_from_env
from memes_capability.version import MIN_BACKEND_VERSION

_VARS = ("MEMES_API_BASE_URL", "MEMES_API_TIMEOUT", "MEMES_API_ENABLE_SHORTCUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config_from_env()
    assert config.request.base_url is None
    assert config.request.timeout is None
    assert config.enable_shortcut is True
    assert config.min_backend_version == MIN_BACKEND_VERSION


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("MEMES_API_BASE_URL", "http://memes:2233/")
    monkeypatch.setenv("MEMES_API_TIMEOUT", "5.5")
    monkeypatch.setenv("MEMES_API_ENABLE_SHORTCUT", "false")

    config = load_config_from_env()

    assert config.request.effective_base_url == "http://memes:2233"
    assert config.request.timeout == 5.5
    assert config.enable_shortcut is False


def test_bad_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("MEMES_API_TIMEOUT", "soon")
    assert load_config_from_env().request.timeout is None


@pytest.mark.parametrize(
    "value,expected",
    [("1", True), ("YES", True), (" true ", True), ("0", False), ("no", False), ("maybe", True)],
)
def test_env_bool(monkeypatch, value, expected):
    monkeypatch.setenv("MEMES_API_ENABLE_SHORTCUT", value)
    assert _env_bool("MEMES_API_ENABLE_SHORTCUT", True) is expected


def test_configs_do_not_share_request():
    assert Config().request is not Config().request
