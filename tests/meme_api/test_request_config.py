from meme_api import DEFAULT_TIMEOUT, RequestConfig


def test_extend_overrides_explicit_values():
    host = RequestConfig(base_url="http://host:1", timeout=5.0, headers={"A": "1", "B": "1"})
    merged = host.extend(RequestConfig(base_url="http://memes:2233", headers={"B": "2"}))

    assert merged.base_url == "http://memes:2233"
    assert merged.timeout == 5.0
    assert merged.headers == {"A": "1", "B": "2"}


def test_extend_none_copies():
    host = RequestConfig(base_url="http://host:1", headers={"A": "1"})
    merged = host.extend(None)

    assert merged == host
    assert merged is not host
    merged.headers["B"] = "2"
    assert "B" not in host.headers


def test_extend_does_not_mutate_inputs():
    host = RequestConfig(headers={"A": "1"})
    override = RequestConfig(headers={"B": "2"})
    host.extend(override)

    assert host.headers == {"A": "1"}
    assert override.headers == {"B": "2"}


def test_effective_defaults():
    config = RequestConfig(base_url="http://memes:2233/")
    assert config.effective_base_url == "http://memes:2233"
    assert config.effective_timeout == DEFAULT_TIMEOUT
