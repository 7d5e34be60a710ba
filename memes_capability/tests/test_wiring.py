"""Tests for capability registration and the command-line entry point."""

import pytest
import structlog

import memes_capability
from memes_capability.__main__ import main, parse_args
from memes_capability.capability import register_capability
from memes_capability.host import PluginHost
from memes_capability.orchestration import apply
from tests.fixtures.backend import make_infos


def test_register_capability_descriptor():
    registration = register_capability()

    assert registration["capability_id"] == "memes_api"
    assert registration["service_name"] == "memes_api"
    assert registration["inject"] == {"required": ["http"], "optional": ["notifier"]}
    assert registration["min_backend_version"] == "0.2.2"
    assert registration["apply"] is apply


def test_descriptor_inject_is_a_copy():
    register_capability()["inject"]["required"].append("redis")
    assert register_capability()["inject"]["required"] == ["http"]


def test_package_exports():
    assert memes_capability.__version__ == memes_capability.CAPABILITY_VERSION
    assert memes_capability.__capability__ == "memes_api"
    for name in memes_capability.__all__:
        assert hasattr(memes_capability, name)


def test_parse_args():
    args = parse_args(["--base-url", "http://memes:2233", "--timeout", "3", "--no-shortcut"])
    assert args.base_url == "http://memes:2233"
    assert args.timeout == 3.0
    assert args.no_shortcut is True
    assert args.debug is False


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def _patch_host(monkeypatch, backend):
    import memes_capability.__main__ as cli

    def host_factory(**kwargs):
        return PluginHost(transport=backend.transport, **kwargs)

    monkeypatch.setattr(cli, "PluginHost", host_factory)
    monkeypatch.delenv("MEMES_API_BASE_URL", raising=False)


def test_main_exit_code_active(monkeypatch, meme_backend):
    meme_backend.infos = make_infos(2)
    _patch_host(monkeypatch, meme_backend)
    assert main([]) == 0


def test_main_exit_code_failed(monkeypatch, meme_backend):
    meme_backend.statuses["/meme/infos"] = 404
    _patch_host(monkeypatch, meme_backend)
    assert main(["--no-shortcut"]) == 1
