def test_root_imports():
    from meme_api import MemeAPI, MemeInfo, MemeError, RequestConfig  # noqa: F401


def test_all_exports():
    """Verify all documented exports are available."""
    from meme_api import (
        # Types
        ErrorCategory,
        MemeError,
        MemeInfo,
        MemeParams,
        MemeShortcut,
        # Config
        RequestConfig,
        DEFAULT_BASE_URL,
        DEFAULT_TIMEOUT,
        # Client
        MemeAPI,
    )

    assert ErrorCategory.BACKEND.value == "backend"
    assert issubclass(MemeError, Exception)
    assert MemeParams().max_texts == 0
    assert MemeShortcut(pattern="x").texts == []
    assert MemeInfo(key="x").keywords == []
    assert RequestConfig().base_url is None
    assert DEFAULT_BASE_URL.startswith("http")
    assert DEFAULT_TIMEOUT > 0
    assert MemeAPI is not None
